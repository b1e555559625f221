# src/pizzeria/adapters/stores.py
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pizzeria.domain.models import (
    ChicagoStyleCheesePizza,
    ChicagoStylePepperoniPizza,
    ChicagoStyleVeggiePizza,
    CreateResult,
    NYStyleCheesePizza,
    NYStyleClamPizza,
    NYStylePepperoniPizza,
    Pizza,
    PizzaNotFound,
    PizzaStyle,
    PizzaType,
)
from pizzeria.domain.ports import PizzaStore


class MenuPizzaStore(PizzaStore):
    """
    Store whose factory method is a lookup in a fixed menu.

    The menu maps each PizzaType to the pizza class baked for it. Keys are
    StrEnum members, so a plain string only matches its exact value.
    """

    def __init__(self, style: PizzaStyle, menu: Mapping[PizzaType, type[Pizza]]) -> None:
        self._style = style
        self._menu: Mapping[PizzaType, type[Pizza]] = MappingProxyType(dict(menu))

    @property
    def style(self) -> PizzaStyle:
        return self._style

    def menu(self) -> tuple[str, ...]:
        return tuple(pizza_type.value for pizza_type in self._menu)

    def create_pizza(self, pizza_type: str) -> CreateResult:
        pizza_cls = self._menu.get(pizza_type)
        if pizza_cls is None:
            return PizzaNotFound(pizza_type=pizza_type, style=self._style)
        return pizza_cls()


_NY_MENU: Mapping[PizzaType, type[Pizza]] = MappingProxyType(
    {
        PizzaType.CHEESE: NYStyleCheesePizza,
        PizzaType.PEPPERONI: NYStylePepperoniPizza,
        PizzaType.CLAM: NYStyleClamPizza,
    }
)

_CHICAGO_MENU: Mapping[PizzaType, type[Pizza]] = MappingProxyType(
    {
        PizzaType.CHEESE: ChicagoStyleCheesePizza,
        PizzaType.PEPPERONI: ChicagoStylePepperoniPizza,
        PizzaType.VEGGIE: ChicagoStyleVeggiePizza,
    }
)


class NYStylePizzaStore(MenuPizzaStore):
    def __init__(self) -> None:
        super().__init__(style=PizzaStyle.NY, menu=_NY_MENU)


class ChicagoStylePizzaStore(MenuPizzaStore):
    def __init__(self) -> None:
        super().__init__(style=PizzaStyle.CHICAGO, menu=_CHICAGO_MENU)
