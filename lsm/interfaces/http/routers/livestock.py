from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import LIVESTOCK
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/livestock", tags=["livestock"])

register_crud_routes(router, LIVESTOCK)
