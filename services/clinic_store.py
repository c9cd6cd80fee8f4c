"""In-process entity store backing the clinic dashboard.

``ClinicDataStore`` owns every hospital, doctor, patient, appointment, staff,
transaction, report and login-activity record for the application session.
Panels never keep their own copies: they subscribe, receive a
:class:`~services.snapshot.ClinicSnapshot`, and receive a new one after every
mutation.

Each collection is a tuple that is replaced, never edited, so ``before is
after`` is a complete "did anything change" test.  Every successful mutation
emits ``snapshotChanged`` exactly once, synchronously, before the mutation
call returns.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    get_type_hints,
)

from PySide6.QtCore import QObject, Signal

from models.enums import MutationResult
from models.records import (
    RECORD_TYPES,
    Appointment,
    Doctor,
    Hospital,
    LoginActivity,
    Patient,
    Report,
    StaffMember,
    Transaction,
)
from services import denormalization
from services.exceptions import (
    DataStoreError,
    InvalidFieldError,
    ReadOnlyCollectionError,
    ReferenceInUseError,
    StoreClosedError,
    UnknownEntityKindError,
)
from services.snapshot import COLLECTION_ATTRS, ClinicSnapshot
from utils.id_generator import new_id


logger = logging.getLogger(__name__)

Consumer = Callable[[ClinicSnapshot], None]

# Collections that only grow; update/delete are refused.
APPEND_ONLY_KINDS = frozenset({"login_activity"})


def _enum_fields(record_type: type) -> Dict[str, type]:
    hints = get_type_hints(record_type)
    return {
        name: tp
        for name, tp in hints.items()
        if isinstance(tp, type) and issubclass(tp, Enum)
    }


_FIELD_NAMES: Dict[str, frozenset] = {
    kind: frozenset(f.name for f in fields(cls)) for kind, cls in RECORD_TYPES.items()
}
_ENUM_FIELDS: Dict[str, Dict[str, type]] = {
    kind: _enum_fields(cls) for kind, cls in RECORD_TYPES.items()
}


class Subscription:
    """Token returned by :meth:`ClinicDataStore.subscribe`."""

    def __init__(self, store: "ClinicDataStore", consumer: Consumer, slot: Consumer) -> None:
        self._store = store
        self.consumer = consumer
        self._slot = slot
        self.active = True

    def cancel(self) -> None:
        self._store.unsubscribe(self)

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"<Subscription {self.consumer!r} {state}>"


class ClinicDataStore(QObject):
    """Authoritative in-memory store for all clinic records."""

    # Emitted once per successful mutation with the new ClinicSnapshot.
    snapshotChanged = Signal(object)
    # Emitted just before snapshotChanged with the entity kind that changed.
    collectionChanged = Signal(str)

    def __init__(
        self,
        collections: Optional[Mapping[str, Iterable[object]]] = None,
        *,
        strict_references: bool = False,
        id_factory: Callable[[], str] = new_id,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.strict_references = strict_references
        self._id_factory = id_factory
        self._version = 0
        self._closed = False
        self._subscriptions: List[Subscription] = []
        self._collections: Dict[str, Tuple[Any, ...]] = {kind: () for kind in RECORD_TYPES}
        for kind, records in (collections or {}).items():
            self._collections[self._check_kind(kind)] = self._load(kind, records)
        logger.debug(
            "[store] initialised with %s",
            {kind: len(items) for kind, items in self._collections.items()},
        )

    @classmethod
    def from_seed(cls, **kwargs: Any) -> "ClinicDataStore":
        """Build a store pre-populated with :mod:`data.sample_data`."""

        from data.sample_data import initial_collections

        return cls(initial_collections(), **kwargs)

    # ----- Read accessors ----------------------------------------------
    @property
    def version(self) -> int:
        return self._version

    @property
    def hospitals(self) -> Tuple[Hospital, ...]:
        return self._collections["hospital"]

    @property
    def doctors(self) -> Tuple[Doctor, ...]:
        return self._collections["doctor"]

    @property
    def patients(self) -> Tuple[Patient, ...]:
        return self._collections["patient"]

    @property
    def appointments(self) -> Tuple[Appointment, ...]:
        return self._collections["appointment"]

    @property
    def staff(self) -> Tuple[StaffMember, ...]:
        return self._collections["staff"]

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return self._collections["transaction"]

    @property
    def reports(self) -> Tuple[Report, ...]:
        return self._collections["report"]

    @property
    def login_activity(self) -> Tuple[LoginActivity, ...]:
        return self._collections["login_activity"]

    def collection(self, kind: str) -> Tuple[Any, ...]:
        return self._collections[self._check_kind(kind)]

    def get(self, kind: str, record_id: str) -> Optional[Any]:
        for record in self.collection(kind):
            if record.id == record_id:
                return record
        return None

    def get_hospital(self, hospital_id: str) -> Optional[Hospital]:
        return self.get("hospital", hospital_id)

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return self.get("doctor", doctor_id)

    def get_patient(self, patient_id: str) -> Optional[Patient]:
        return self.get("patient", patient_id)

    def snapshot(self) -> ClinicSnapshot:
        return ClinicSnapshot(
            version=self._version,
            store=self,
            **{attr: self._collections[kind] for kind, attr in COLLECTION_ATTRS.items()},
        )

    # ----- Subscription ------------------------------------------------
    def subscribe(self, consumer: Consumer) -> Subscription:
        """Deliver the current snapshot to ``consumer`` now and after every mutation.

        A consumer that mutates the store during delivery triggers a nested
        emission; consumers later in the outer fan-out then skip the older
        snapshot, so the last one each consumer sees is always the newest.
        """

        self._ensure_open()

        def _slot(snapshot: ClinicSnapshot) -> None:
            if snapshot.version < self._version:
                return
            try:
                consumer(snapshot)
            except Exception as e:
                logger.warning("[store] subscriber %r failed: %s", consumer, e)

        self.snapshotChanged.connect(_slot)
        token = Subscription(self, consumer, _slot)
        self._subscriptions.append(token)
        logger.debug("[store] subscribed %r (%d active)", consumer, len(self._subscriptions))
        _slot(self.snapshot())
        return token

    def unsubscribe(self, token: Subscription) -> None:
        if not token.active:
            return
        token.active = False
        if token in self._subscriptions:
            self._subscriptions.remove(token)
        try:
            self.snapshotChanged.disconnect(token._slot)
        except (RuntimeError, TypeError) as e:
            logger.debug("[store] disconnect of %r skipped: %s", token.consumer, e)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def close(self) -> None:
        """Disconnect every subscriber; later mutations raise ``StoreClosedError``."""

        for token in list(self._subscriptions):
            self.unsubscribe(token)
        self._closed = True
        logger.debug("[store] closed at version %d", self._version)

    # ----- Generic mutation API ----------------------------------------
    def add(self, kind: str, values: Mapping[str, object]) -> Any:
        self._ensure_open()
        kind = self._check_kind(kind)
        checked = self._check_shape(kind, values)
        if "id" in checked:
            raise InvalidFieldError(kind, "id", "identifiers are assigned by the store")
        written = set(_FIELD_NAMES[kind])
        checked = denormalization.apply_rules(
            kind, checked, written, self.get, strict=self.strict_references
        )

        current = self._collections[kind]
        record_id = self._id_factory()
        live_ids = {r.id for r in current}
        while record_id in live_ids:
            record_id = self._id_factory()

        record = RECORD_TYPES[kind](id=record_id, **checked)
        self._commit(kind, current + (record,))
        logger.debug("[store] added %s %s", kind, record_id)
        return record

    def update(self, kind: str, record_id: str, patch: Mapping[str, object]) -> MutationResult:
        self._ensure_open()
        kind = self._check_kind(kind)
        self._ensure_writable(kind)
        checked = self._check_shape(kind, patch)
        if "id" in checked:
            if checked.pop("id") != record_id:
                raise InvalidFieldError(kind, "id", "identifiers cannot be changed")

        current = self._collections[kind]
        index = self._index_of(current, record_id)
        if index is None:
            logger.debug("[store] update %s %s: not found, ignoring", kind, record_id)
            return MutationResult.NOT_FOUND

        checked = denormalization.apply_rules(
            kind,
            checked,
            checked.keys(),
            self.get,
            current=current[index],
            strict=self.strict_references,
        )
        updated = replace(current[index], **checked)
        self._commit(kind, current[:index] + (updated,) + current[index + 1 :])
        logger.debug("[store] updated %s %s fields=%s", kind, record_id, sorted(checked))
        return MutationResult.UPDATED

    def delete(self, kind: str, record_id: str) -> MutationResult:
        self._ensure_open()
        kind = self._check_kind(kind)
        self._ensure_writable(kind)

        current = self._collections[kind]
        index = self._index_of(current, record_id)
        if index is None:
            logger.debug("[store] delete %s %s: not found, ignoring", kind, record_id)
            return MutationResult.NOT_FOUND

        if self.strict_references:
            found = denormalization.referrers(kind, record_id, self._collections)
            if found:
                logger.warning("[store] refusing to delete %s %s: %s", kind, record_id, found)
                raise ReferenceInUseError(kind, record_id, found)

        self._commit(kind, current[:index] + current[index + 1 :])
        logger.debug("[store] deleted %s %s", kind, record_id)
        return MutationResult.DELETED

    # ----- Per-entity mutation API -------------------------------------
    # Hospitals ---------------------------------------------------------
    def add_hospital(self, values: Mapping[str, object]) -> Hospital:
        return self.add("hospital", values)

    def update_hospital(self, hospital_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("hospital", hospital_id, patch)

    def delete_hospital(self, hospital_id: str) -> MutationResult:
        return self.delete("hospital", hospital_id)

    # Doctors -----------------------------------------------------------
    def add_doctor(self, values: Mapping[str, object]) -> Doctor:
        return self.add("doctor", values)

    def update_doctor(self, doctor_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("doctor", doctor_id, patch)

    def delete_doctor(self, doctor_id: str) -> MutationResult:
        return self.delete("doctor", doctor_id)

    # Patients ----------------------------------------------------------
    def add_patient(self, values: Mapping[str, object]) -> Patient:
        return self.add("patient", values)

    def update_patient(self, patient_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("patient", patient_id, patch)

    def delete_patient(self, patient_id: str) -> MutationResult:
        return self.delete("patient", patient_id)

    # Appointments ------------------------------------------------------
    def add_appointment(self, values: Mapping[str, object]) -> Appointment:
        return self.add("appointment", values)

    def update_appointment(self, appointment_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("appointment", appointment_id, patch)

    def delete_appointment(self, appointment_id: str) -> MutationResult:
        return self.delete("appointment", appointment_id)

    # Staff -------------------------------------------------------------
    def add_staff_member(self, values: Mapping[str, object]) -> StaffMember:
        return self.add("staff", values)

    def update_staff_member(self, member_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("staff", member_id, patch)

    def delete_staff_member(self, member_id: str) -> MutationResult:
        return self.delete("staff", member_id)

    # Transactions ------------------------------------------------------
    def add_transaction(self, values: Mapping[str, object]) -> Transaction:
        return self.add("transaction", values)

    def update_transaction(self, transaction_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("transaction", transaction_id, patch)

    def delete_transaction(self, transaction_id: str) -> MutationResult:
        return self.delete("transaction", transaction_id)

    # Reports -----------------------------------------------------------
    def add_report(self, values: Mapping[str, object]) -> Report:
        return self.add("report", values)

    def update_report(self, report_id: str, patch: Mapping[str, object]) -> MutationResult:
        return self.update("report", report_id, patch)

    def delete_report(self, report_id: str) -> MutationResult:
        return self.delete("report", report_id)

    # Login activity (append-only) --------------------------------------
    def record_login(self, values: Mapping[str, object]) -> LoginActivity:
        return self.add("login_activity", values)

    # ----- Internal utilities ------------------------------------------
    def _commit(self, kind: str, records: Tuple[Any, ...]) -> None:
        self._collections[kind] = records
        self._version += 1
        snapshot = self.snapshot()
        try:
            self.collectionChanged.emit(kind)
        except RuntimeError as e:
            logger.warning("[store] failed to emit collectionChanged: %s", e)
        try:
            self.snapshotChanged.emit(snapshot)
        except RuntimeError as e:
            logger.warning("[store] failed to emit snapshotChanged: %s", e)

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError()

    @staticmethod
    def _ensure_writable(kind: str) -> None:
        if kind in APPEND_ONLY_KINDS:
            raise ReadOnlyCollectionError(f"{kind} records are append-only")

    @staticmethod
    def _check_kind(kind: str) -> str:
        if kind not in RECORD_TYPES:
            raise UnknownEntityKindError(kind)
        return kind

    @staticmethod
    def _index_of(records: Tuple[Any, ...], record_id: str) -> Optional[int]:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        return None

    @staticmethod
    def _check_shape(kind: str, values: Mapping[str, object]) -> Dict[str, object]:
        """Reject unknown fields and coerce enum-typed fields to their enum."""

        allowed = _FIELD_NAMES[kind]
        enums = _ENUM_FIELDS[kind]
        checked: Dict[str, object] = {}
        for name, value in values.items():
            if name not in allowed:
                raise InvalidFieldError(kind, name, "unknown field")
            enum_type = enums.get(name)
            if enum_type is not None and not isinstance(value, enum_type):
                raw = value.strip().lower() if isinstance(value, str) else value
                try:
                    value = enum_type(raw)
                except ValueError:
                    allowed_values = ", ".join(sorted(enum_type.values()))  # type: ignore[attr-defined]
                    raise InvalidFieldError(
                        kind, name, f"{value!r} is not one of: {allowed_values}"
                    ) from None
            checked[name] = value
        return checked

    def _load(self, kind: str, records: Iterable[object]) -> Tuple[Any, ...]:
        record_type = RECORD_TYPES[kind]
        loaded = tuple(records)
        seen: set[str] = set()
        for record in loaded:
            if not isinstance(record, record_type):
                raise DataStoreError(
                    f"{kind} collection expects {record_type.__name__}, got {type(record).__name__}"
                )
            if record.id in seen:  # type: ignore[attr-defined]
                raise DataStoreError(f"duplicate {kind} id {record.id!r}")  # type: ignore[attr-defined]
            seen.add(record.id)  # type: ignore[attr-defined]
        return loaded


__all__ = ["ClinicDataStore", "Subscription", "APPEND_ONLY_KINDS"]
