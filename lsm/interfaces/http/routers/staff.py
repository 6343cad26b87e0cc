from __future__ import annotations

from fastapi import APIRouter

from lsm.interfaces.http.resources import ATTENDANCE, EMPLOYEES, TASKS
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/staff", tags=["staff"])

register_crud_routes(router, EMPLOYEES, "/employees")
register_crud_routes(router, TASKS, "/tasks")
register_crud_routes(router, ATTENDANCE, "/attendance")
