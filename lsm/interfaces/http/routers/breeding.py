from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import BREEDING
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/breeding", tags=["breeding"])

register_crud_routes(router, BREEDING)
