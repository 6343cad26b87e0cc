from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from pydantic import Field, field_validator

from lsm.domain.value_objects.scheduling import Priority
from lsm.domain.value_objects.staff import (
    AttendanceStatus,
    EmploymentStatus,
    TaskStatus,
    TaskType,
)
from lsm.interfaces.http.schemas.base import (
    AnimalRef,
    EmployeeRef,
    RecordIn,
    RecordOut,
    UtcDatetime,
    partial_model,
)


class EmployeeCreate(RecordIn):
    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    hire_date: DtDate
    salary: float | None = Field(default=None, ge=0)
    status: EmploymentStatus = EmploymentStatus.ACTIVE
    skills: list[str] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("email")
    @classmethod
    def _lower_email(cls, value: str | None) -> str | None:
        return value.lower() if value is not None else value

    @field_validator("skills")
    @classmethod
    def _clean_skills(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        return [skill.strip() for skill in value if skill.strip()]


EmployeeUpdate = partial_model(EmployeeCreate, "EmployeeUpdate")


class EmployeeResponse(RecordOut, EmployeeCreate):
    pass


class TaskCreate(RecordIn):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    assigned_to: UUID | None = None
    animal_id: UUID | None = None
    task_type: TaskType
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: UtcDatetime
    completed_date: UtcDatetime | None = None
    # minutes
    estimated_duration: int | None = Field(default=None, ge=0)
    actual_duration: int | None = Field(default=None, ge=0)
    notes: str | None = None


TaskUpdate = partial_model(TaskCreate, "TaskUpdate")


class TaskResponse(RecordOut, TaskCreate):
    assigned_to: EmployeeRef | None = None
    animal_id: AnimalRef | None = None


class AttendanceCreate(RecordIn):
    employee_id: UUID
    date: DtDate
    check_in: UtcDatetime | None = None
    check_out: UtcDatetime | None = None
    hours_worked: float | None = Field(default=None, ge=0, le=24)
    status: AttendanceStatus
    notes: str | None = None


AttendanceUpdate = partial_model(AttendanceCreate, "AttendanceUpdate")


class AttendanceResponse(RecordOut, AttendanceCreate):
    employee_id: EmployeeRef | None = None
