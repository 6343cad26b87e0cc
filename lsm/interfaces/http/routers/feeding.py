from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import FEEDING
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/feeding", tags=["feeding"])

register_crud_routes(router, FEEDING)
