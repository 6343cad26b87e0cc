# No postponed annotations here: endpoint signatures are built from the
# resource's schema classes at registration time.
from datetime import date
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic.alias_generators import to_camel

from lsm.application.resources import Resource
from lsm.application.use_cases.records import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from lsm.infrastructure.auth.context import AuthContext
from lsm.interfaces.http.deps import get_auth_context, get_uow
from lsm.interfaces.http.schemas.base import MessageResponse


def query_filters(request: Request, resource: Resource) -> dict[str, Any]:
    """Pick the resource's exact-match filters out of camelCase query params."""
    params = request.query_params
    return {
        field: params[to_camel(field)]
        for field in resource.filter_fields
        if params.get(to_camel(field))
    }


def register_crud_routes(router: APIRouter, resource: Resource, path: str = "") -> None:
    """Attach list/get/create/update/delete endpoints for `resource` under `path`."""
    create_schema = resource.create_schema
    update_schema = resource.update_schema
    response_schema = resource.response_schema
    search_param = to_camel(resource.search_field) if resource.search_field else None

    async def list_items(
        request: Request,
        start_date: date | None = Query(default=None, alias="startDate"),
        end_date: date | None = Query(default=None, alias="endDate"),
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
    ):
        records = await list_records.execute(
            uow,
            context.user_id,
            resource,
            start_date=start_date,
            end_date=end_date,
            filters=query_filters(request, resource),
            search=request.query_params.get(search_param) if search_param else None,
        )
        return [response_schema.model_validate(record) for record in records]

    async def get_item(
        record_id: UUID,
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
    ):
        record = await get_record.execute(uow, context.user_id, resource, record_id)
        return response_schema.model_validate(record)

    async def create_item(
        payload: create_schema,  # type: ignore[valid-type]
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
    ):
        record = await create_record.execute(uow, context.user_id, resource, payload)
        await uow.commit()
        return response_schema.model_validate(record)

    async def update_item(
        record_id: UUID,
        payload: update_schema,  # type: ignore[valid-type]
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
    ):
        record = await update_record.execute(uow, context.user_id, resource, record_id, payload)
        await uow.commit()
        return response_schema.model_validate(record)

    async def delete_item(
        record_id: UUID,
        context: AuthContext = Depends(get_auth_context),
        uow=Depends(get_uow),
    ):
        message = await delete_record.execute(uow, context.user_id, resource, record_id)
        await uow.commit()
        return MessageResponse(message=message)

    item_path = f"{path}/{{record_id}}"
    router.add_api_route(
        path,
        list_items,
        methods=["GET"],
        response_model=list[response_schema],
        name=f"list_{resource.name}",
    )
    router.add_api_route(
        item_path,
        get_item,
        methods=["GET"],
        response_model=response_schema,
        name=f"get_{resource.name}",
    )
    router.add_api_route(
        path,
        create_item,
        methods=["POST"],
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource.name}",
    )
    router.add_api_route(
        item_path,
        update_item,
        methods=["PUT"],
        response_model=response_schema,
        name=f"update_{resource.name}",
    )
    router.add_api_route(
        item_path,
        delete_item,
        methods=["DELETE"],
        response_model=MessageResponse,
        name=f"delete_{resource.name}",
    )
