"""Qt table model that mirrors one collection of the clinic data store.

The model subscribes to the store and resets itself whenever the underlying
collection tuple is replaced.  Mutations to other collections leave the model
alone: the store hands out a new tuple only for the collection that changed,
so an identity check is enough to tell.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from PySide6 import QtCore

from models.records import RECORD_TYPES
from services.clinic_store import ClinicDataStore, Subscription
from services.snapshot import ClinicSnapshot


logger = logging.getLogger(__name__)

RowSource = Callable[[ClinicSnapshot], Sequence[Any]]

_MUTED_STATUSES = {"inactive", "cancelled", "offline", "refunded"}


class CollectionTableModel(QtCore.QAbstractTableModel):
    """Live table over one entity kind, optionally narrowed by a derived view."""

    def __init__(
        self,
        store: ClinicDataStore,
        kind: str,
        rows: Optional[RowSource] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._kind = kind
        self._rows = rows or (lambda snapshot: snapshot.collection(kind))
        self._fields = [f.name for f in fields(RECORD_TYPES[kind])]
        self._items: List[Any] = []
        self._source: Optional[Sequence[Any]] = None
        self.reset_count = 0
        self._subscription: Optional[Subscription] = store.subscribe(self._on_snapshot)
        subscription = self._subscription
        self.destroyed.connect(lambda *_: subscription.cancel())

    # ----- Qt model API ------------------------------------------------
    def rowCount(self, parent: QtCore.QModelIndex | None = None) -> int:  # type: ignore[override]
        return len(self._items)

    def columnCount(self, parent: QtCore.QModelIndex | None = None) -> int:  # type: ignore[override]
        return len(self._fields)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid():
            return None
        item = self._items[index.row()]
        if role == QtCore.Qt.ForegroundRole:
            status = getattr(item, "status", None)
            if isinstance(status, Enum) and status.value in _MUTED_STATUSES:
                return QtCore.Qt.gray
            return None
        if role not in (QtCore.Qt.DisplayRole, QtCore.Qt.EditRole):
            return None
        value = getattr(item, self._fields[index.column()])
        if isinstance(value, Enum):
            return value.value
        return value

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation, role: int = QtCore.Qt.DisplayRole):  # type: ignore[override]
        if role != QtCore.Qt.DisplayRole or orientation != QtCore.Qt.Horizontal:
            return None
        return self._fields[section].replace("_", " ").title()

    # ----- Store binding -----------------------------------------------
    @property
    def kind(self) -> str:
        return self._kind

    def record_at(self, row: int) -> Any:
        return self._items[row]

    def detach(self) -> None:
        """Stop following the store; the current rows stay in place."""

        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _on_snapshot(self, snapshot: ClinicSnapshot) -> None:
        source = snapshot.collection(self._kind)
        if source is self._source:
            return
        self.beginResetModel()
        self._source = source
        self._items = list(self._rows(snapshot))
        self.endResetModel()
        self.reset_count += 1
        logger.debug("[panels] %s model reset: %d rows", self._kind, len(self._items))


__all__ = ["CollectionTableModel"]
