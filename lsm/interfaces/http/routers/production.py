from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import PRODUCTION
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/production", tags=["production"])

register_crud_routes(router, PRODUCTION)
