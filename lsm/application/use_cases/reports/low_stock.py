from __future__ import annotations

from typing import Any
from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.infrastructure.db.orm.inventory_item import InventoryItemORM


async def execute(uow: UnitOfWork, owner_id: UUID) -> list[dict[str, Any]]:
    """Items at or below their own minimum stock level."""
    rows = await uow.records(InventoryItemORM, owner_id).list(
        InventoryItemORM.current_stock <= InventoryItemORM.minimum_stock,
        order_by=(InventoryItemORM.item_name.asc(), InventoryItemORM.id.asc()),
    )
    return [row.to_dict() for row in rows]
