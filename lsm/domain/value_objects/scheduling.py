from __future__ import annotations

from enum import Enum


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class ReminderType(str, Enum):
    VACCINATION = "Vaccination"
    BREEDING_CHECK = "Breeding Check"
    FEEDING = "Feeding"
    HEALTH_CHECK = "Health Check"
    MILKING = "Milking"
    CLEANING = "Cleaning"
    OTHER = "Other"


class ReminderStatus(str, Enum):
    """Stored reminder states.

    "Overdue" is derived (pending and past due) and never persisted.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    def is_terminal(self) -> bool:
        return self in {ReminderStatus.COMPLETED, ReminderStatus.CANCELLED}


class RecurringInterval(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"
