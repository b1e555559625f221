# src/pizzeria/domain/ports.py
import logging
from abc import ABC, abstractmethod

from pizzeria.domain.models import CreateResult, PizzaNotFound, PizzaOrder, PizzaStyle

logger = logging.getLogger(__name__)


class PizzaStore(ABC):
    """
    Abstrakte Schnittstelle für Pizzerien.
    Der Bestellablauf ist für alle Stores gleich, welche Pizza konkret
    gebacken wird entscheidet jede Implementierung über create_pizza().
    """

    @property
    @abstractmethod
    def style(self) -> PizzaStyle:
        """Regionaler Stil dieses Stores."""
        ...

    @abstractmethod
    def menu(self) -> tuple[str, ...]:
        """Alle Pizza-Typen, die dieser Store kennt."""
        ...

    @abstractmethod
    def create_pizza(self, pizza_type: str) -> CreateResult:
        """
        Erzeugt eine neue Pizza für den angegebenen Typ.

        Der Vergleich ist exakt und case-sensitive. Unbekannte Typen liefern
        PizzaNotFound zurück, es wird nie eine Exception geworfen.
        """
        ...

    def order_pizza(self, pizza_type: str) -> PizzaOrder:
        """
        Bestellt eine Pizza: erzeugen, vorbereiten, backen, schneiden, verpacken.

        Raises:
            PizzaNotFoundError: Wenn der Store den Typ nicht kennt.
        """
        pizza = self.create_pizza(pizza_type)
        if isinstance(pizza, PizzaNotFound):
            raise PizzaNotFoundError(pizza_type=pizza_type, style=self.style)

        steps = (pizza.prepare(), pizza.bake(), pizza.cut(), pizza.box())
        for step in steps:
            logger.info("[%s] %s", self.style, step)
        return PizzaOrder(pizza=pizza, steps=steps)


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class PizzaNotFoundError(Exception):
    def __init__(self, pizza_type: str, style: str):
        super().__init__(f"Pizza type '{pizza_type}' is not on the menu of store '{style}'")
        self.pizza_type = pizza_type
        self.style = style


class StoreNotFoundError(Exception):
    def __init__(self, style: str):
        super().__init__(f"No store available for style '{style}'")
        self.style = style
