from __future__ import annotations

import pytest

try:
    from PySide6.QtWidgets import QApplication  # noqa: F401
except ImportError as exc:  # pragma: no cover - environment-specific
    pytest.skip(f"PySide6 unavailable: {exc}", allow_module_level=True)

import main  # noqa: E402
from utils.app_settings import StoreSettings  # noqa: E402


def test_parse_args_overrides_settings() -> None:
    settings = main.parse_args(["--strict", "--empty"], StoreSettings())
    assert settings.strict_references is True
    assert settings.seed_sample_data is False
    assert settings.dev_mode is False


def test_build_store_honours_settings() -> None:
    seeded = main.build_store(StoreSettings())
    empty = main.build_store(StoreSettings(strict_references=True, seed_sample_data=False))
    try:
        assert len(seeded.hospitals) == 4
        assert empty.hospitals == ()
        assert empty.strict_references is True
    finally:
        seeded.close()
        empty.close()


def test_dashboard_tracks_store(qapp) -> None:
    store = main.build_store(StoreSettings())
    window = main.MainWindow(store)
    panel = window.dashboard
    try:
        assert panel.cards["incoming"].value_label.text() == "5"
        assert panel.cards["online"].value_label.text() == "2"

        store.add_appointment({"patient_id": "p2", "time": "03:00 PM"})
        assert panel.cards["incoming"].value_label.text() == "6"

        store.update_hospital("h4", {"status": "active"})
        assert panel.cards["hospitals"].value_label.text() == "4"
    finally:
        panel.detach()
        assert store.subscriber_count == 0
        store.close()
        window.deleteLater()
