from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import ANIMAL_SALES, PRODUCT_SALES
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/sales", tags=["sales"])

register_crud_routes(router, ANIMAL_SALES, "/animals")
register_crud_routes(router, PRODUCT_SALES, "/products")
