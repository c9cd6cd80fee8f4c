"""Identifier generation for newly created clinic records."""

from __future__ import annotations

import uuid


def new_id() -> str:
    """Return a fresh opaque identifier (32 hex characters)."""

    return uuid.uuid4().hex


__all__ = ["new_id"]
