"""Enumerations shared by the clinic entity records."""

from __future__ import annotations

from enum import Enum
from typing import Set


class _StrEnum(str, Enum):
    """Enum subclass that compares/serialises as its value."""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)

    @classmethod
    def values(cls) -> Set[str]:
        return {member.value for member in cls}

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls.values()


class HospitalStatus(_StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DoctorStatus(_StrEnum):
    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    INACTIVE = "inactive"


class PatientStatus(_StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Gender(_StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class AppointmentStatus(_StrEnum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StaffStatus(_StrEnum):
    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    INACTIVE = "inactive"


class TransactionStatus(_StrEnum):
    COMPLETED = "completed"
    PENDING = "pending"
    REFUNDED = "refunded"


class ReportStatus(_StrEnum):
    READY = "ready"
    PENDING = "pending"


class LoginRole(_StrEnum):
    DOCTOR = "doctor"
    STAFF = "staff"
    ADMIN = "admin"


class PresenceStatus(_StrEnum):
    ONLINE = "online"
    OFFLINE = "offline"


class MutationResult(_StrEnum):
    """Outcome of an update/delete call; callers are free to ignore it."""

    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not-found"


# Appointment statuses that still need attention on the dashboard.
INCOMING_APPOINTMENT_STATUSES = frozenset(
    {AppointmentStatus.SCHEDULED, AppointmentStatus.IN_PROGRESS}
)


__all__ = [
    "HospitalStatus",
    "DoctorStatus",
    "PatientStatus",
    "Gender",
    "AppointmentStatus",
    "StaffStatus",
    "TransactionStatus",
    "ReportStatus",
    "LoginRole",
    "PresenceStatus",
    "MutationResult",
    "INCOMING_APPOINTMENT_STATUSES",
]
