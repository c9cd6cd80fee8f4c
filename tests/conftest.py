from __future__ import annotations

import os

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402

from services.clinic_store import ClinicDataStore  # noqa: E402


@pytest.fixture
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def store() -> ClinicDataStore:
    seeded = ClinicDataStore.from_seed()
    yield seeded
    seeded.close()


@pytest.fixture
def empty_store() -> ClinicDataStore:
    blank = ClinicDataStore()
    yield blank
    blank.close()
