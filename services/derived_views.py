"""Read-only projections computed from a store snapshot.

Every function takes any object exposing the collection attributes (a
``ClinicSnapshot`` or the ``ClinicDataStore`` itself) and recomputes from it on
each call.  Nothing here is cached, so a view can never disagree with the
collections it was computed from.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, NamedTuple, Optional

from models.enums import (
    INCOMING_APPOINTMENT_STATUSES,
    AppointmentStatus,
    DoctorStatus,
    HospitalStatus,
    PatientStatus,
    PresenceStatus,
    ReportStatus,
    TransactionStatus,
)
from models.records import (
    Appointment,
    Doctor,
    Hospital,
    Patient,
    Report,
    StaffMember,
)


class HospitalLoad(NamedTuple):
    hospital: Hospital
    doctor_count: int
    patient_count: int


# ----- Appointments ---------------------------------------------------
def incoming_appointments(snapshot: Any) -> List[Appointment]:
    """Appointments still scheduled or in progress."""

    return [a for a in snapshot.appointments if a.status in INCOMING_APPOINTMENT_STATUSES]


def completed_appointments(snapshot: Any) -> List[Appointment]:
    return [a for a in snapshot.appointments if a.status == AppointmentStatus.COMPLETED]


def cancelled_appointments(snapshot: Any) -> List[Appointment]:
    return [a for a in snapshot.appointments if a.status == AppointmentStatus.CANCELLED]


def appointments_by_status(snapshot: Any) -> Dict[AppointmentStatus, List[Appointment]]:
    """Partition every appointment by status; every status has a key."""

    buckets: Dict[AppointmentStatus, List[Appointment]] = {s: [] for s in AppointmentStatus}
    for appointment in snapshot.appointments:
        buckets[appointment.status].append(appointment)
    return buckets


def appointments_on(snapshot: Any, day: Optional[str] = None) -> List[Appointment]:
    """Appointments whose ``date`` equals ``day`` (ISO ``YYYY-MM-DD``, default today)."""

    day = day or date.today().isoformat()
    return [a for a in snapshot.appointments if a.date == day]


def appointments_for_doctor(snapshot: Any, doctor_id: str) -> List[Appointment]:
    return [a for a in snapshot.appointments if a.doctor_id == doctor_id]


# ----- Hospitals / doctors / patients ---------------------------------
def doctors_at_hospital(snapshot: Any, hospital_id: str) -> List[Doctor]:
    return [d for d in snapshot.doctors if d.hospital_id == hospital_id]


def patients_at_hospital(snapshot: Any, hospital_id: str) -> List[Patient]:
    return [p for p in snapshot.patients if p.hospital_id == hospital_id]


def patients_of_doctor(snapshot: Any, doctor_id: str) -> List[Patient]:
    return [p for p in snapshot.patients if p.doctor_id == doctor_id]


def patient_count_for_doctor(snapshot: Any, doctor_id: str) -> int:
    return len(patients_of_doctor(snapshot, doctor_id))


def staff_for_doctor(snapshot: Any, doctor_id: str) -> List[StaffMember]:
    return [s for s in snapshot.staff if s.doctor_id == doctor_id]


def hospital_load(snapshot: Any) -> List[HospitalLoad]:
    """Per-hospital doctor and patient counts, in hospital order."""

    return [
        HospitalLoad(
            hospital,
            len(doctors_at_hospital(snapshot, hospital.id)),
            len(patients_at_hospital(snapshot, hospital.id)),
        )
        for hospital in snapshot.hospitals
    ]


# ----- Dashboard counters ---------------------------------------------
def active_hospital_count(snapshot: Any) -> int:
    return sum(1 for h in snapshot.hospitals if h.status == HospitalStatus.ACTIVE)


def active_doctor_count(snapshot: Any) -> int:
    return sum(1 for d in snapshot.doctors if d.status == DoctorStatus.ACTIVE)


def active_patient_count(snapshot: Any) -> int:
    return sum(1 for p in snapshot.patients if p.status == PatientStatus.ACTIVE)


def online_user_count(snapshot: Any) -> int:
    return sum(1 for entry in snapshot.login_activity if entry.status == PresenceStatus.ONLINE)


# ----- Search ---------------------------------------------------------
def _matches(query: str, *values: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in (value or "").lower() for value in values)


def search_hospitals(snapshot: Any, query: str) -> List[Hospital]:
    return [h for h in snapshot.hospitals if _matches(query, h.name, h.address)]


def search_doctors(snapshot: Any, query: str) -> List[Doctor]:
    return [
        d
        for d in snapshot.doctors
        if _matches(query, d.name, d.specialization, d.hospital_name)
    ]


def search_patients(snapshot: Any, query: str) -> List[Patient]:
    return [p for p in snapshot.patients if _matches(query, p.name, p.email, p.phone)]


# ----- Finance / reports ----------------------------------------------
def _transaction_total(snapshot: Any, status: TransactionStatus, doctor_id: Optional[str]) -> float:
    return sum(
        (
            t.amount
            for t in snapshot.transactions
            if t.status == status and (doctor_id is None or t.doctor_id == doctor_id)
        ),
        0.0,
    )


def revenue_total(snapshot: Any, doctor_id: Optional[str] = None) -> float:
    """Sum of completed transactions, optionally for one doctor."""

    return _transaction_total(snapshot, TransactionStatus.COMPLETED, doctor_id)


def pending_total(snapshot: Any, doctor_id: Optional[str] = None) -> float:
    return _transaction_total(snapshot, TransactionStatus.PENDING, doctor_id)


def ready_reports(snapshot: Any) -> List[Report]:
    return [r for r in snapshot.reports if r.status == ReportStatus.READY]


def pending_reports(snapshot: Any) -> List[Report]:
    return [r for r in snapshot.reports if r.status == ReportStatus.PENDING]


__all__ = [
    "HospitalLoad",
    "incoming_appointments",
    "completed_appointments",
    "cancelled_appointments",
    "appointments_by_status",
    "appointments_on",
    "appointments_for_doctor",
    "doctors_at_hospital",
    "patients_at_hospital",
    "patients_of_doctor",
    "patient_count_for_doctor",
    "staff_for_doctor",
    "hospital_load",
    "active_hospital_count",
    "active_doctor_count",
    "active_patient_count",
    "online_user_count",
    "search_hospitals",
    "search_doctors",
    "search_patients",
    "revenue_total",
    "pending_total",
    "ready_reports",
    "pending_reports",
]
