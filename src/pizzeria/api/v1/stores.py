from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from pizzeria.api.dependencies import get_order_service
from pizzeria.core.rate_limit import limiter, store_rate_limit
from pizzeria.domain.models import Pizza, PizzaNotFound, PizzaOrder, PizzaRequest, StoreMenu
from pizzeria.domain.ports import PizzaNotFoundError, StoreNotFoundError
from pizzeria.services.order_service import OrderService

router = APIRouter(prefix="/stores", tags=["Stores"])

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.get("/", response_model=list[StoreMenu])
async def list_stores(service: OrderServiceDep) -> list[StoreMenu]:
    """
    Listet alle aktiven Stores mit ihren Pizza-Typen.
    """
    return service.menus()


@router.post("/{style}/pizzas", response_model=Pizza, status_code=status.HTTP_201_CREATED)
@limiter.limit(store_rate_limit)
async def create_pizza(
    request: Request,
    service: OrderServiceDep,
    style: str,
    payload: PizzaRequest,
) -> Pizza:
    """
    Erzeugt eine Pizza über die Factory-Methode des gewählten Stores.
    """
    try:
        result = service.create(style, payload.pizza_type)
    except StoreNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if isinstance(result, PizzaNotFound):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pizza type '{result.pizza_type}' is not on the menu of store '{result.style}'",
        )
    return result


@router.post("/{style}/orders", response_model=PizzaOrder, status_code=status.HTTP_201_CREATED)
@limiter.limit(store_rate_limit)
async def order_pizza(
    request: Request,
    service: OrderServiceDep,
    style: str,
    payload: PizzaRequest,
) -> PizzaOrder:
    """
    Bestellt eine Pizza: erzeugen, vorbereiten, backen, schneiden, verpacken.
    """
    try:
        return service.order(style, payload.pizza_type)
    except StoreNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PizzaNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
