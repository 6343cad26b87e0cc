from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class HealthStatus(str, Enum):
    HEALTHY = "Healthy"
    SICK = "Sick"
    UNDER_TREATMENT = "Under Treatment"
    RECOVERED = "Recovered"


class BreedingOutcome(str, Enum):
    SUCCESSFUL = "Successful"
    UNSUCCESSFUL = "Unsuccessful"
    PENDING = "Pending"
    UNKNOWN = "Unknown"


class VisitType(str, Enum):
    ROUTINE_CHECKUP = "Routine Checkup"
    EMERGENCY = "Emergency"
    VACCINATION = "Vaccination"
    TREATMENT = "Treatment"
    SURGERY = "Surgery"
    OTHER = "Other"
