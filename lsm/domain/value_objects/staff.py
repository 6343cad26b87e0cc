from __future__ import annotations

from enum import Enum


class EmploymentStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"


class TaskType(str, Enum):
    FEEDING = "Feeding"
    MILKING = "Milking"
    CLEANING = "Cleaning"
    HEALTH_CHECK = "Health Check"
    BREEDING = "Breeding"
    VACCINATION = "Vaccination"
    OTHER = "Other"


class TaskStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    def is_terminal(self) -> bool:
        return self in {TaskStatus.COMPLETED, TaskStatus.CANCELLED}


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    HALF_DAY = "Half Day"
    ON_LEAVE = "On Leave"
