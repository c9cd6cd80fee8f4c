"""Custom exceptions for the clinic entity store."""

from __future__ import annotations

from typing import List, Sequence


class DataStoreError(RuntimeError):
    """Base exception for entity store operations."""


class UnknownEntityKindError(DataStoreError, KeyError):
    """Raised when a mutation names a kind the store does not hold."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown entity kind: {kind!r}")
        self.kind = kind

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidFieldError(DataStoreError, ValueError):
    """Raised when a payload does not match the record's shape."""

    def __init__(self, kind: str, field: str, message: str) -> None:
        super().__init__(f"{kind}.{field}: {message}")
        self.kind = kind
        self.field = field


class ReadOnlyCollectionError(DataStoreError):
    """Raised when update/delete targets an append-only collection."""


class OrphanReferenceError(DataStoreError):
    """Raised in strict-reference mode when a foreign key does not resolve."""

    def __init__(self, kind: str, field: str, value: str) -> None:
        super().__init__(f"{kind}.{field} references missing record {value!r}")
        self.kind = kind
        self.field = field
        self.value = value


class ReferenceInUseError(DataStoreError):
    """Raised in strict-reference mode when deleting a still-referenced record."""

    def __init__(self, kind: str, record_id: str, referrers: Sequence[str]) -> None:
        super().__init__(
            f"{kind} {record_id!r} is still referenced by: {', '.join(referrers)}"
        )
        self.kind = kind
        self.record_id = record_id
        self.referrers: List[str] = list(referrers)


class StoreClosedError(DataStoreError):
    """Raised when mutating a store after :meth:`ClinicDataStore.close`."""

    def __init__(self) -> None:
        super().__init__("Clinic data store has been closed")


class FormValidationError(ValueError):
    """Raised by the form validators; ``errors`` lists every failed field."""

    def __init__(self, kind: str, errors: Sequence[str]) -> None:
        super().__init__(f"Invalid {kind} form: {'; '.join(errors)}")
        self.kind = kind
        self.errors: List[str] = list(errors)


__all__ = [
    "DataStoreError",
    "UnknownEntityKindError",
    "InvalidFieldError",
    "ReadOnlyCollectionError",
    "OrphanReferenceError",
    "ReferenceInUseError",
    "StoreClosedError",
    "FormValidationError",
]
