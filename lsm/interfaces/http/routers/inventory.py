from __future__ import annotations

from fastapi import APIRouter, Depends

from lsm.application.use_cases.reports import low_stock
from lsm.infrastructure.auth.context import AuthContext
from lsm.interfaces.http.deps import get_auth_context, get_uow
from lsm.interfaces.http.resources import INVENTORY
from lsm.interfaces.http.routers.crud import register_crud_routes
from lsm.interfaces.http.schemas.inventory import InventoryItemResponse

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/low-stock", response_model=list[InventoryItemResponse])
async def list_low_stock(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await low_stock.execute(uow, context.user_id)
    return [InventoryItemResponse.model_validate(item) for item in items]


register_crud_routes(router, INVENTORY)
