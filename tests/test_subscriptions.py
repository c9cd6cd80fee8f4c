"""Snapshot delivery through :meth:`ClinicDataStore.subscribe`."""

from __future__ import annotations

import logging

import pytest

from services.clinic_store import ClinicDataStore
from services.exceptions import StoreClosedError
from services.snapshot import ClinicSnapshot


def test_subscribe_delivers_current_snapshot_immediately(store: ClinicDataStore) -> None:
    seen: list[ClinicSnapshot] = []
    store.subscribe(seen.append)
    assert len(seen) == 1
    assert seen[0].hospitals is store.hospitals
    assert seen[0].version == store.version


def test_fan_out_to_every_consumer(store: ClinicDataStore) -> None:
    before = len(store.patients)
    first: list[int] = []
    second: list[int] = []
    live_lengths: list[int] = []

    def _first(snapshot: ClinicSnapshot) -> None:
        first.append(len(snapshot.patients))
        live_lengths.append(len(store.patients))

    store.subscribe(_first)
    store.subscribe(lambda snapshot: second.append(len(snapshot.patients)))

    store.add_patient({"name": "Nina Park", "age": 41})

    assert first == [before, before + 1]
    assert second == [before, before + 1]
    assert live_lengths[-1] == before + 1


def test_one_notification_per_mutation(store: ClinicDataStore) -> None:
    versions: list[int] = []
    kinds: list[str] = []
    store.subscribe(lambda snapshot: versions.append(snapshot.version))
    store.collectionChanged.connect(lambda kind: kinds.append(kind))

    store.add_doctor({"name": "Dr. New", "hospital_id": "h2"})
    store.update_doctor("d1", {"hospital_id": "h3"})
    store.delete_staff_member("s4")

    assert len(versions) == 4
    assert versions == sorted(set(versions))
    assert kinds == ["doctor", "doctor", "staff"]


def test_noop_mutations_do_not_notify(store: ClinicDataStore) -> None:
    calls: list[ClinicSnapshot] = []
    store.subscribe(calls.append)
    store.update_patient("missing", {"name": "x"})
    store.delete_patient("missing")
    assert len(calls) == 1


def test_cancelled_subscription_stops_delivery(store: ClinicDataStore) -> None:
    calls: list[int] = []
    token = store.subscribe(lambda snapshot: calls.append(snapshot.version))
    assert store.subscriber_count == 1

    token.cancel()
    token.cancel()
    store.add_hospital({"name": "Quiet"})

    assert calls == [0]
    assert token.active is False
    assert store.subscriber_count == 0


def test_snapshot_exposes_mutation_operations(store: ClinicDataStore) -> None:
    handles: list[ClinicSnapshot] = []
    store.subscribe(handles.append)

    created = handles[0].add_hospital({"name": "Through Snapshot"})

    assert handles[-1].hospitals[-1] == created
    assert handles[0].hospitals is not handles[-1].hospitals
    with pytest.raises(AttributeError):
        handles[0].drop_everything  # noqa: B018


def test_snapshot_collection_lookup(store: ClinicDataStore) -> None:
    snapshot = store.snapshot()
    assert snapshot.collection("staff") is store.staff
    assert snapshot.collection("login_activity") is store.login_activity


def test_failing_subscriber_is_logged_and_others_still_run(
    store: ClinicDataStore, caplog: pytest.LogCaptureFixture
) -> None:
    delivered: list[int] = []

    def _boom(snapshot: ClinicSnapshot) -> None:
        if snapshot.version:
            raise RuntimeError("boom")

    store.subscribe(_boom)
    store.subscribe(lambda snapshot: delivered.append(snapshot.version))

    with caplog.at_level(logging.WARNING):
        store.add_report({"title": "MRI", "patient_id": "p2"})

    assert delivered == [0, 1]
    assert len(store.reports) == 6
    assert "failed: boom" in caplog.text


def test_close_disconnects_everyone() -> None:
    store = ClinicDataStore.from_seed()
    calls: list[int] = []
    store.subscribe(lambda snapshot: calls.append(snapshot.version))
    store.subscribe(lambda snapshot: calls.append(snapshot.version))
    store.close()
    assert store.subscriber_count == 0
    store.snapshotChanged.emit(store.snapshot())
    assert calls == [0, 0]


def test_mutation_during_delivery_leaves_everyone_on_the_newest_snapshot(
    empty_store: ClinicDataStore,
) -> None:
    followed_up: list[str] = []
    first: list[int] = []
    second: list[int] = []

    def _follow_up(snapshot: ClinicSnapshot) -> None:
        first.append(len(snapshot.patients))
        if len(snapshot.patients) == 1 and not followed_up:
            followed_up.append(snapshot.add_patient({"name": "Follow Up"}).id)

    empty_store.subscribe(_follow_up)
    empty_store.subscribe(lambda snapshot: second.append(len(snapshot.patients)))

    empty_store.add_patient({"name": "P"})

    assert len(empty_store.patients) == 2
    assert first[-1] == 2
    assert second[-1] == 2
    assert second == sorted(second)
    assert len(followed_up) == 1


def test_subscribe_after_close_is_refused() -> None:
    store = ClinicDataStore.from_seed()
    store.close()
    calls: list[ClinicSnapshot] = []
    with pytest.raises(StoreClosedError):
        store.subscribe(calls.append)
    assert calls == []
    assert store.subscriber_count == 0
