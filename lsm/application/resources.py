from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, get_args


def _accepts_none(annotation: Any) -> bool:
    return annotation is Any or annotation is None or type(None) in get_args(annotation)


@dataclass(frozen=True, slots=True)
class Reference:
    """A stored id expanded on read to a projection of the referenced record."""

    field: str
    model: type[Any]
    projection: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Resource:
    """Declarative description of one owner-scoped record type."""

    name: str
    label: str
    model: type[Any]
    create_schema: type[Any]
    update_schema: type[Any]
    response_schema: type[Any]
    references: tuple[Reference, ...] = ()
    # (column, "asc" | "desc")
    order_by: tuple[str, str] = ("created_at", "desc")
    date_field: str | None = None
    filter_fields: tuple[str, ...] = ()
    search_field: str | None = None
    # Records whose status_field holds a terminal status keep that status
    status_field: str | None = None
    terminal_statuses: frozenset[str] = frozenset()
    non_nullable_fields: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        non_nullable = frozenset(
            name
            for name, info in self.create_schema.model_fields.items()
            if not _accepts_none(info.annotation)
        )
        object.__setattr__(self, "non_nullable_fields", non_nullable)

    def ordering(self) -> list[Any]:
        column_name, direction = self.order_by
        column = getattr(self.model, column_name)
        primary = column.desc() if direction == "desc" else column.asc()
        return [primary, self.model.id.asc()]

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"
