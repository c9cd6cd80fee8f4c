"""Immutable record types held by :class:`services.clinic_store.ClinicDataStore`.

Every record is a frozen dataclass.  The store never edits a record in place;
updates build a replacement with :func:`dataclasses.replace`, which means a
record handed to a panel can be kept around safely without it changing
underneath the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Optional

from models.enums import (
    AppointmentStatus,
    DoctorStatus,
    Gender,
    HospitalStatus,
    LoginRole,
    PatientStatus,
    PresenceStatus,
    ReportStatus,
    StaffStatus,
    TransactionStatus,
)


class _Record:
    __slots__ = ()

    def to_row(self) -> Dict[str, object]:
        """Return a plain dict with enum members flattened to their values."""

        row: Dict[str, object] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            row[f.name] = value.value if isinstance(value, Enum) else value
        return row


@dataclass(frozen=True, slots=True)
class Hospital(_Record):
    id: str = ""
    name: str = ""
    address: str = ""
    phone: str = ""
    doctors: int = 0
    patients: int = 0
    status: HospitalStatus = HospitalStatus.ACTIVE
    created_at: str = ""


@dataclass(frozen=True, slots=True)
class Doctor(_Record):
    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    specialization: str = ""
    hospital_id: str = ""
    hospital_name: str = ""  # cached from Hospital.name at write time
    patients: int = 0
    status: DoctorStatus = DoctorStatus.ACTIVE
    joined_at: str = ""


@dataclass(frozen=True, slots=True)
class Patient(_Record):
    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    age: int = 0
    gender: Gender = Gender.OTHER
    doctor_id: str = ""
    doctor_name: str = ""
    hospital_id: str = ""
    last_visit: str = ""
    total_visits: int = 0
    status: PatientStatus = PatientStatus.ACTIVE


@dataclass(frozen=True, slots=True)
class Appointment(_Record):
    id: str = ""
    patient_id: str = ""
    patient_name: str = ""
    patient_phone: str = ""
    doctor_id: str = ""
    time: str = ""
    date: str = ""
    type: str = ""
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None


@dataclass(frozen=True, slots=True)
class StaffMember(_Record):
    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""
    doctor_id: str = ""
    status: StaffStatus = StaffStatus.ACTIVE
    joined_at: str = ""


@dataclass(frozen=True, slots=True)
class Transaction(_Record):
    id: str = ""
    patient_id: str = ""
    patient_name: str = ""
    doctor_id: str = ""
    type: str = ""
    amount: float = 0.0
    status: TransactionStatus = TransactionStatus.PENDING
    date: str = ""


@dataclass(frozen=True, slots=True)
class Report(_Record):
    id: str = ""
    title: str = ""
    patient_id: str = ""
    patient_name: str = ""
    doctor_id: str = ""
    type: str = ""
    status: ReportStatus = ReportStatus.PENDING
    date: str = ""
    file_url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LoginActivity(_Record):
    id: str = ""
    user_id: str = ""
    user_name: str = ""
    role: LoginRole = LoginRole.STAFF
    hospital_name: str = ""
    login_time: str = ""
    status: PresenceStatus = PresenceStatus.OFFLINE


# Entity kind -> record type.  Kind names double as the store's collection keys.
RECORD_TYPES: Dict[str, type] = {
    "hospital": Hospital,
    "doctor": Doctor,
    "patient": Patient,
    "appointment": Appointment,
    "staff": StaffMember,
    "transaction": Transaction,
    "report": Report,
    "login_activity": LoginActivity,
}


__all__ = [
    "Hospital",
    "Doctor",
    "Patient",
    "Appointment",
    "StaffMember",
    "Transaction",
    "Report",
    "LoginActivity",
    "RECORD_TYPES",
]
