from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, create_model
from pydantic.alias_generators import to_camel

from lsm.utils.datetime_tz import ensure_utc

# Timestamps are always exchanged as aware UTC values
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
    )


class RecordIn(CamelModel):
    """Base of every create payload."""

    def to_columns(self, *, exclude_unset: bool = False) -> dict[str, Any]:
        return self.model_dump(exclude_unset=exclude_unset)


class RecordOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    created_at: UtcDatetime
    updated_at: UtcDatetime


class AnimalRef(CamelModel):
    id: UUID
    name: str
    species: str
    breed: str


class EmployeeRef(CamelModel):
    id: UUID
    name: str
    position: str


class MessageResponse(BaseModel):
    message: str


def partial_model(model: type[RecordIn], name: str) -> type[RecordIn]:
    """Derive an update schema: same fields and constraints, all optional.

    Only fields present in the request are applied; an explicit null for a
    field that does not accept null on creation is rejected by the update
    use case.
    """
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation: Any = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (annotation | None, None)
    return create_model(name, __base__=model, **fields)
