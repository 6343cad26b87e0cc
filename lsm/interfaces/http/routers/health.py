from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import HEALTH
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/health", tags=["health"])

register_crud_routes(router, HEALTH)
