from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import VETERINARY
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/veterinary", tags=["veterinary"])

register_crud_routes(router, VETERINARY)
