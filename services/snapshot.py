"""Point-in-time view of every collection held by the clinic data store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Tuple

from models.records import (
    Appointment,
    Doctor,
    Hospital,
    LoginActivity,
    Patient,
    Report,
    StaffMember,
    Transaction,
)
from services.exceptions import UnknownEntityKindError

if TYPE_CHECKING:  # pragma: no cover
    from services.clinic_store import ClinicDataStore


# Entity kind -> snapshot/store attribute holding that collection.
COLLECTION_ATTRS: Dict[str, str] = {
    "hospital": "hospitals",
    "doctor": "doctors",
    "patient": "patients",
    "appointment": "appointments",
    "staff": "staff",
    "transaction": "transactions",
    "report": "reports",
    "login_activity": "login_activity",
}

MUTATION_OPERATIONS = frozenset(
    {
        "add",
        "update",
        "delete",
        "add_hospital",
        "update_hospital",
        "delete_hospital",
        "add_doctor",
        "update_doctor",
        "delete_doctor",
        "add_patient",
        "update_patient",
        "delete_patient",
        "add_appointment",
        "update_appointment",
        "delete_appointment",
        "add_staff_member",
        "update_staff_member",
        "delete_staff_member",
        "add_transaction",
        "update_transaction",
        "delete_transaction",
        "add_report",
        "update_report",
        "delete_report",
        "record_login",
    }
)


@dataclass(frozen=True)
class ClinicSnapshot:
    """Collections as of one store version, plus the store's mutation operations.

    Mutation names (``add_doctor``, ``update_patient`` ...) resolve to the
    owning store, so a consumer can read and write through the same handle.
    The collections themselves never change; a later mutation produces a new
    snapshot.
    """

    version: int
    hospitals: Tuple[Hospital, ...]
    doctors: Tuple[Doctor, ...]
    patients: Tuple[Patient, ...]
    appointments: Tuple[Appointment, ...]
    staff: Tuple[StaffMember, ...]
    transactions: Tuple[Transaction, ...]
    reports: Tuple[Report, ...]
    login_activity: Tuple[LoginActivity, ...]
    store: "ClinicDataStore" = field(repr=False, compare=False)

    def __getattr__(self, name: str) -> Any:
        if name in MUTATION_OPERATIONS:
            return getattr(self.store, name)
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def collection(self, kind: str) -> Tuple[Any, ...]:
        try:
            return getattr(self, COLLECTION_ATTRS[kind])
        except KeyError:
            raise UnknownEntityKindError(kind) from None


__all__ = ["ClinicSnapshot", "COLLECTION_ATTRS", "MUTATION_OPERATIONS"]
