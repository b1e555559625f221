# src/pizzeria/api/dependencies.py
import logging

from fastapi import Depends

from pizzeria.adapters.stores import ChicagoStylePizzaStore, NYStylePizzaStore
from pizzeria.core.config import Settings, get_settings
from pizzeria.domain.models import PizzaStyle
from pizzeria.domain.ports import PizzaStore
from pizzeria.services.order_service import OrderService

logger = logging.getLogger(__name__)

# Stores sind zustandslos und werden einmalig beim Import erzeugt
_STORES: dict[PizzaStyle, PizzaStore] = {
    PizzaStyle.NY: NYStylePizzaStore(),
    PizzaStyle.CHICAGO: ChicagoStylePizzaStore(),
}


def get_store_registry(
    settings: Settings = Depends(get_settings),
) -> dict[PizzaStyle, PizzaStore]:
    """Liefert die Registry aller aktivierten Stores in konfigurierter Reihenfolge."""
    registry: dict[PizzaStyle, PizzaStore] = {}
    for store_name in settings.enabled_stores:
        try:
            style = PizzaStyle(store_name)
        except ValueError:
            logger.warning("Invalid store '%s' in ENABLED_STORES", store_name)
            continue
        registry[style] = _STORES[style]
    return registry


def get_order_service(
    store_registry: dict[PizzaStyle, PizzaStore] = Depends(get_store_registry),
) -> OrderService:
    return OrderService(store_registry=store_registry)
