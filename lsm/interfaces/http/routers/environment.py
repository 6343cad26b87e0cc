from __future__ import annotations

from fastapi import APIRouter, Depends

from lsm.application.use_cases.environment import get_forecast, list_cities
from lsm.infrastructure.auth.context import AuthContext
from lsm.interfaces.http.deps import get_auth_context, get_uow
from lsm.interfaces.http.resources import ENVIRONMENT
from lsm.interfaces.http.routers.crud import register_crud_routes

router = APIRouter(prefix="/environment", tags=["environment"])


@router.get("/cities/list", response_model=list[str])
async def get_cities(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    return await list_cities.execute(uow, context.user_id)


@router.get("/forecast/{city}")
async def get_city_forecast(city: str, _: AuthContext = Depends(get_auth_context)):
    return await get_forecast.execute(city)


register_crud_routes(router, ENVIRONMENT)
