# src/pizzeria/api/v1/router.py
from fastapi import APIRouter

from pizzeria.api.v1 import stores

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(stores.router)
