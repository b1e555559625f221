from __future__ import annotations

import logging

from pizzeria.core.metrics import PIZZA_NOT_FOUND, PIZZAS_CREATED
from pizzeria.domain.models import CreateResult, PizzaNotFound, PizzaOrder, PizzaStyle, StoreMenu
from pizzeria.domain.ports import PizzaNotFoundError, PizzaStore, StoreNotFoundError

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service für Pizza-Erzeugung und Bestellungen über alle aktiven Stores.
    Welche Stores aktiv sind, steuert die Konfiguration (ENABLED_STORES).
    """

    def __init__(self, store_registry: dict[PizzaStyle, PizzaStore]) -> None:
        self._store_registry = store_registry

    def get_store(self, style: str) -> PizzaStore:
        """
        Raises:
            StoreNotFoundError: Wenn der Stil unbekannt oder nicht aktiviert ist.
        """
        try:
            style_enum = PizzaStyle(style)
        except ValueError:
            raise StoreNotFoundError(style)

        store = self._store_registry.get(style_enum)
        if store is None:
            raise StoreNotFoundError(style)
        return store

    def create(self, style: str, pizza_type: str) -> CreateResult:
        store = self.get_store(style)
        result = store.create_pizza(pizza_type)
        if isinstance(result, PizzaNotFound):
            logger.info("Store '%s' has no pizza of type '%s'", store.style, pizza_type)
            PIZZA_NOT_FOUND.labels(style=store.style.value).inc()
        else:
            PIZZAS_CREATED.labels(style=store.style.value, pizza_type=result.pizza_type.value).inc()
        return result

    def order(self, style: str, pizza_type: str) -> PizzaOrder:
        """
        Raises:
            StoreNotFoundError: Wenn der Stil unbekannt oder nicht aktiviert ist.
            PizzaNotFoundError: Wenn der Store den Typ nicht anbietet (propagiert).
        """
        store = self.get_store(style)
        try:
            order = store.order_pizza(pizza_type)
        except PizzaNotFoundError:
            PIZZA_NOT_FOUND.labels(style=store.style.value).inc()
            raise
        PIZZAS_CREATED.labels(style=store.style.value, pizza_type=order.pizza.pizza_type.value).inc()
        return order

    def menus(self) -> list[StoreMenu]:
        return [
            StoreMenu(style=style, pizza_types=list(store.menu()))
            for style, store in self._store_registry.items()
        ]
