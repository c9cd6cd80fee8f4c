"""Clinic dashboard: headline counters plus one live table per collection.

Qt Widgets only (PySide6).  The panel reads nothing on its own; everything it
shows arrives through the store subscription handed to it by ``main.py``.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QTableView,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from panels.collection_table_model import CollectionTableModel
from services import derived_views as views
from services.clinic_store import ClinicDataStore, Subscription
from services.snapshot import ClinicSnapshot


# (tab title, entity kind)
_TABS = [
    ("Hospitals", "hospital"),
    ("Doctors", "doctor"),
    ("Patients", "patient"),
    ("Staff", "staff"),
    ("Transactions", "transaction"),
    ("Reports", "report"),
    ("Login Activity", "login_activity"),
]


class _PillCard(QFrame):
    def __init__(self, label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("PillCard")
        self.value_label = QLabel("—")
        self.value_label.setObjectName("PillValue")
        self.text_label = QLabel(label)
        self.text_label.setObjectName("PillText")

        lay = QVBoxLayout(self)
        lay.setContentsMargins(12, 8, 12, 10)
        lay.setSpacing(2)
        lay.addWidget(self.value_label)
        lay.addWidget(self.text_label)

    def set_value(self, value: object) -> None:
        self.value_label.setText(str(value))


class ClinicDashboardPanel(QWidget):
    """Admin overview bound to a single :class:`ClinicDataStore`."""

    def __init__(self, store: ClinicDataStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("ClinicDashboardPanel")
        self._store = store

        self.cards: Dict[str, _PillCard] = {
            "hospitals": _PillCard("Active Hospitals"),
            "doctors": _PillCard("Active Doctors"),
            "online": _PillCard("Online Users"),
            "incoming": _PillCard("Incoming Appointments"),
            "completed": _PillCard("Completed Appointments"),
        }
        cards_row = QHBoxLayout()
        for card in self.cards.values():
            cards_row.addWidget(card)

        self.tabs = QTabWidget()
        self.models: List[CollectionTableModel] = []
        self._add_tab("Incoming", CollectionTableModel(store, "appointment", views.incoming_appointments, self))
        self._add_tab("Completed", CollectionTableModel(store, "appointment", views.completed_appointments, self))
        for title, kind in _TABS:
            self._add_tab(title, CollectionTableModel(store, kind, parent=self))

        lay = QVBoxLayout(self)
        lay.addLayout(cards_row)
        lay.addWidget(self.tabs)

        self._subscription: Subscription = store.subscribe(self.refresh)
        subscription = self._subscription
        self.destroyed.connect(lambda *_: subscription.cancel())

    def _add_tab(self, title: str, model: CollectionTableModel) -> None:
        view = QTableView()
        view.setModel(model)
        view.setSortingEnabled(False)
        self.models.append(model)
        self.tabs.addTab(view, title)

    def refresh(self, snapshot: ClinicSnapshot) -> None:
        self.cards["hospitals"].set_value(views.active_hospital_count(snapshot))
        self.cards["doctors"].set_value(views.active_doctor_count(snapshot))
        self.cards["online"].set_value(views.online_user_count(snapshot))
        self.cards["incoming"].set_value(len(views.incoming_appointments(snapshot)))
        self.cards["completed"].set_value(len(views.completed_appointments(snapshot)))

    def detach(self) -> None:
        self._subscription.cancel()
        for model in self.models:
            model.detach()


__all__ = ["ClinicDashboardPanel"]
