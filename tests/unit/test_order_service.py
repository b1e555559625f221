from unittest.mock import MagicMock

import pytest

from pizzeria.adapters.stores import ChicagoStylePizzaStore, NYStylePizzaStore
from pizzeria.domain.models import (
    ChicagoStyleCheesePizza,
    NYStyleCheesePizza,
    PizzaNotFound,
    PizzaStyle,
)
from pizzeria.domain.ports import PizzaNotFoundError, PizzaStore, StoreNotFoundError
from pizzeria.services.order_service import OrderService


@pytest.fixture
def store_registry() -> dict[PizzaStyle, PizzaStore]:
    return {
        PizzaStyle.NY: NYStylePizzaStore(),
        PizzaStyle.CHICAGO: ChicagoStylePizzaStore(),
    }


@pytest.fixture
def order_service(store_registry: dict[PizzaStyle, PizzaStore]) -> OrderService:
    return OrderService(store_registry=store_registry)


def test_create_delegates_to_selected_store(order_service: OrderService) -> None:
    assert type(order_service.create("ny", "cheese")) is NYStyleCheesePizza
    assert type(order_service.create("chicago", "cheese")) is ChicagoStyleCheesePizza


def test_create_returns_not_found_without_raising(order_service: OrderService) -> None:
    result = order_service.create("ny", "veggie")
    assert isinstance(result, PizzaNotFound)


def test_unknown_style_raises_store_not_found(order_service: OrderService) -> None:
    with pytest.raises(StoreNotFoundError) as exc_info:
        order_service.create("detroit", "cheese")
    assert exc_info.value.style == "detroit"


def test_disabled_store_raises_store_not_found() -> None:
    service = OrderService(store_registry={PizzaStyle.NY: NYStylePizzaStore()})
    with pytest.raises(StoreNotFoundError):
        service.get_store("chicago")


def test_style_lookup_is_case_sensitive(order_service: OrderService) -> None:
    with pytest.raises(StoreNotFoundError):
        order_service.get_store("NY")


def test_create_uses_store_from_registry() -> None:
    store = MagicMock(spec=PizzaStore)
    store.style = PizzaStyle.NY
    store.create_pizza.return_value = NYStyleCheesePizza()
    service = OrderService(store_registry={PizzaStyle.NY: store})

    service.create("ny", "cheese")

    store.create_pizza.assert_called_once_with("cheese")


def test_order_returns_completed_order(order_service: OrderService) -> None:
    order = order_service.order("chicago", "cheese")
    assert type(order.pizza) is ChicagoStyleCheesePizza
    assert order.steps[-1] == "Place pizza in official PizzaStore box"


def test_order_propagates_pizza_not_found(order_service: OrderService) -> None:
    with pytest.raises(PizzaNotFoundError):
        order_service.order("ny", "veggie")


def test_menus_follow_registry_order(order_service: OrderService) -> None:
    menus = order_service.menus()
    assert [m.style for m in menus] == [PizzaStyle.NY, PizzaStyle.CHICAGO]
    assert menus[0].pizza_types == ["cheese", "pepperoni", "clam"]
    assert menus[1].pizza_types == ["cheese", "pepperoni", "veggie"]
