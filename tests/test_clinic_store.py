"""Exercise the :mod:`services.clinic_store` mutation API."""

from __future__ import annotations

import dataclasses

import pytest

from models.enums import DoctorStatus, HospitalStatus, MutationResult, PatientStatus
from models.records import Doctor, Hospital, Patient
from services.clinic_store import ClinicDataStore
from services.exceptions import (
    DataStoreError,
    InvalidFieldError,
    ReadOnlyCollectionError,
    StoreClosedError,
    UnknownEntityKindError,
)


def _doctor_fields(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "A",
        "email": "a@clinic.com",
        "phone": "555-0100",
        "specialization": "Cardiologist",
        "hospital_id": "h1",
        "status": "active",
    }
    payload.update(overrides)
    return payload


def test_seed_collections_are_loaded(store: ClinicDataStore) -> None:
    assert [h.id for h in store.hospitals] == ["h1", "h2", "h3", "h4"]
    assert len(store.doctors) == 5
    assert len(store.patients) == 7
    assert len(store.appointments) == 7
    assert len(store.staff) == 4
    assert len(store.transactions) == 5
    assert len(store.reports) == 5
    assert len(store.login_activity) == 5


def test_new_ids_are_pairwise_distinct(empty_store: ClinicDataStore) -> None:
    ids = [empty_store.add_patient({"name": f"P{i}"}).id for i in range(250)]
    assert len(set(ids)) == 250


def test_add_redraws_an_id_that_is_already_live() -> None:
    drawn = iter(["h1", "h1", "fresh"])
    store = ClinicDataStore(
        {"hospital": [Hospital(id="h1", name="General")]},
        id_factory=lambda: next(drawn),
    )
    created = store.add_hospital({"name": "Second"})
    assert created.id == "fresh"
    assert [h.id for h in store.hospitals] == ["h1", "fresh"]


def test_add_round_trip(empty_store: ClinicDataStore) -> None:
    fields = {
        "name": "Amanda White",
        "email": "amanda@email.com",
        "phone": "+1 234-567-8907",
        "age": 25,
        "gender": "female",
        "hospital_id": "h2",
        "status": "active",
    }
    created = empty_store.add_patient(fields)

    matches = [p for p in empty_store.patients if p.id == created.id]
    assert matches == [created]
    assert isinstance(created, Patient)
    row = created.to_row()
    for key, value in fields.items():
        assert row[key] == value
    assert created.status is PatientStatus.ACTIVE


def test_add_appends_at_the_end(store: ClinicDataStore) -> None:
    created = store.add_hospital({"name": "Lakeside Clinic", "address": "1 Shore Dr"})
    assert store.hospitals[-1] == created
    assert [h.id for h in store.hospitals[:-1]] == ["h1", "h2", "h3", "h4"]


def test_add_accepts_empty_values(empty_store: ClinicDataStore) -> None:
    created = empty_store.add_staff_member({"name": "", "email": "not-an-email"})
    assert created.name == ""
    assert created.email == "not-an-email"


def test_update_merges_partial_fields(store: ClinicDataStore) -> None:
    created = store.add_doctor(_doctor_fields())
    result = store.update_doctor(created.id, {"name": "B"})

    stored = store.get_doctor(created.id)
    assert result is MutationResult.UPDATED
    assert stored is not None
    assert stored.name == "B"
    assert dataclasses.replace(stored, name="A") == created


def test_update_preserves_position(store: ClinicDataStore) -> None:
    store.update_hospital("h2", {"status": HospitalStatus.INACTIVE})
    assert [h.id for h in store.hospitals] == ["h1", "h2", "h3", "h4"]
    assert store.hospitals[1].status is HospitalStatus.INACTIVE


def test_update_missing_id_is_a_silent_noop(store: ClinicDataStore) -> None:
    before = store.doctors
    version = store.version
    assert store.update_doctor("nope", {"name": "Ghost"}) is MutationResult.NOT_FOUND
    assert store.doctors is before
    assert store.version == version


def test_update_cannot_change_identity(store: ClinicDataStore) -> None:
    assert store.update_hospital("h1", {"id": "h1", "phone": "555"}) is MutationResult.UPDATED
    with pytest.raises(InvalidFieldError):
        store.update_hospital("h1", {"id": "h9"})


def test_delete_is_idempotent(store: ClinicDataStore) -> None:
    assert store.delete_patient("p3") is MutationResult.DELETED
    after_first = store.patients
    assert store.delete_patient("p3") is MutationResult.NOT_FOUND
    assert store.patients is after_first
    assert [p.id for p in after_first] == ["p1", "p2", "p4", "p5", "p6", "p7"]


def test_delete_never_existing_id_does_not_raise(empty_store: ClinicDataStore) -> None:
    assert empty_store.delete_report("missing") is MutationResult.NOT_FOUND
    assert empty_store.reports == ()


def test_delete_does_not_cascade(store: ClinicDataStore) -> None:
    store.delete_hospital("h1")
    orphans = [d for d in store.doctors if d.hospital_id == "h1"]
    assert {d.id for d in orphans} == {"d1", "d2"}
    assert orphans[0].hospital_name == "City General Hospital"


def test_every_mutation_replaces_the_collection(store: ClinicDataStore) -> None:
    hospitals = store.hospitals
    doctors = store.doctors
    store.update_doctor("d1", {"phone": "555-0199"})
    assert store.doctors is not doctors
    assert store.hospitals is hospitals


def test_returned_records_are_read_only(store: ClinicDataStore) -> None:
    doctor = store.get_doctor("d1")
    assert doctor is not None
    with pytest.raises(dataclasses.FrozenInstanceError):
        doctor.name = "Changed"  # type: ignore[misc]
    assert store.get_doctor("d1").name == "Dr. John Smith"


def test_status_strings_are_coerced_to_enums(empty_store: ClinicDataStore) -> None:
    doctor = empty_store.add_doctor({"name": "X", "status": "On-Leave"})
    assert doctor.status is DoctorStatus.ON_LEAVE


def test_shape_errors(empty_store: ClinicDataStore) -> None:
    with pytest.raises(InvalidFieldError):
        empty_store.add_hospital({"name": "X", "beds": 4})
    with pytest.raises(InvalidFieldError):
        empty_store.add_hospital({"id": "h1", "name": "X"})
    with pytest.raises(InvalidFieldError) as exc:
        empty_store.add_doctor({"status": "retired"})
    assert exc.value.field == "status"
    assert empty_store.version == 0


def test_unknown_kind(empty_store: ClinicDataStore) -> None:
    with pytest.raises(UnknownEntityKindError):
        empty_store.add("ward", {"name": "East"})
    with pytest.raises(KeyError):
        empty_store.collection("ward")


def test_generic_api_by_kind(store: ClinicDataStore) -> None:
    member = store.add("staff", {"name": "Nina Park", "role": "Receptionist"})
    assert store.get("staff", member.id) == member
    assert store.collection("staff")[-1] == member

    assert store.update("report", "r3", {"status": "ready"}) is MutationResult.UPDATED
    assert store.get("report", "r3").status.value == "ready"
    assert store.delete("staff", member.id) is MutationResult.DELETED
    assert store.get("staff", member.id) is None


def test_login_activity_is_append_only(store: ClinicDataStore) -> None:
    entry = store.record_login(
        {"user_id": "d4", "user_name": "Dr. Michael Chen", "role": "doctor", "status": "online"}
    )
    assert store.login_activity[-1] == entry
    with pytest.raises(ReadOnlyCollectionError):
        store.update("login_activity", entry.id, {"status": "offline"})
    with pytest.raises(ReadOnlyCollectionError):
        store.delete("login_activity", entry.id)


def test_transactions_support_delete(store: ClinicDataStore) -> None:
    assert store.delete_transaction("t5") is MutationResult.DELETED
    assert [t.id for t in store.transactions] == ["t1", "t2", "t3", "t4"]


def test_constructor_rejects_bad_seed() -> None:
    with pytest.raises(DataStoreError):
        ClinicDataStore({"hospital": [Hospital(id="h1"), Hospital(id="h1")]})
    with pytest.raises(DataStoreError):
        ClinicDataStore({"hospital": [Doctor(id="d1")]})


def test_closed_store_refuses_mutations() -> None:
    store = ClinicDataStore.from_seed()
    store.close()
    with pytest.raises(StoreClosedError):
        store.add_hospital({"name": "Late"})
    assert len(store.hospitals) == 4
