"""Write-time denormalization rules for the clinic data store.

A rule copies display fields from a referenced record onto the referencing
record whenever the foreign key, or one of the cached fields, is written.  The
copy is a snapshot: renaming a hospital later leaves existing doctors untouched
until the doctor's ``hospital_id`` or ``hospital_name`` is written again.  A
cached field can never be set to a value that disagrees with the record its
key points at.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from services.exceptions import OrphanReferenceError


logger = logging.getLogger(__name__)

Lookup = Callable[[str, str], Optional[object]]


@dataclass(frozen=True, slots=True)
class DenormalizationRule:
    kind: str
    foreign_key: str
    source_kind: str
    # target field on ``kind`` -> field read from the ``source_kind`` record
    copies: Tuple[Tuple[str, str], ...]
    # True: an unresolved key blanks the cached fields.
    # False: caller-supplied values are kept (walk-in records).
    clear_when_missing: bool = False


RULES: Tuple[DenormalizationRule, ...] = (
    DenormalizationRule("doctor", "hospital_id", "hospital", (("hospital_name", "name"),), clear_when_missing=True),
    DenormalizationRule("patient", "doctor_id", "doctor", (("doctor_name", "name"),), clear_when_missing=True),
    DenormalizationRule("appointment", "patient_id", "patient", (("patient_name", "name"), ("patient_phone", "phone"))),
    DenormalizationRule("transaction", "patient_id", "patient", (("patient_name", "name"),)),
    DenormalizationRule("report", "patient_id", "patient", (("patient_name", "name"),)),
)


# Every foreign key in the data model: (kind, field, referenced kind).
REFERENCES: Tuple[Tuple[str, str, str], ...] = (
    ("doctor", "hospital_id", "hospital"),
    ("patient", "doctor_id", "doctor"),
    ("patient", "hospital_id", "hospital"),
    ("appointment", "patient_id", "patient"),
    ("appointment", "doctor_id", "doctor"),
    ("staff", "doctor_id", "doctor"),
    ("transaction", "patient_id", "patient"),
    ("transaction", "doctor_id", "doctor"),
    ("report", "patient_id", "patient"),
    ("report", "doctor_id", "doctor"),
)


def rules_for(kind: str) -> List[DenormalizationRule]:
    return [rule for rule in RULES if rule.kind == kind]


def check_references(
    kind: str,
    values: Mapping[str, object],
    written: Iterable[str],
    lookup: Lookup,
) -> None:
    """Raise ``OrphanReferenceError`` for a written, non-empty key that resolves to nothing."""

    written = set(written)
    for ref_kind, foreign_key, source_kind in REFERENCES:
        if ref_kind != kind or foreign_key not in written:
            continue
        key = str(values.get(foreign_key) or "")
        if key and lookup(source_kind, key) is None:
            logger.warning(
                "[store] rejecting %s.%s=%s: no such %s",
                kind,
                foreign_key,
                key,
                source_kind,
            )
            raise OrphanReferenceError(kind, foreign_key, key)


def apply_rules(
    kind: str,
    values: Mapping[str, object],
    written: Iterable[str],
    lookup: Lookup,
    *,
    current: Optional[object] = None,
    strict: bool = False,
) -> Dict[str, object]:
    """Return ``values`` with cached fields filled in for every affected rule.

    A rule fires when ``written`` names its foreign key or one of its cached
    fields.  The key comes from ``values`` when written, otherwise from
    ``current`` (the record being updated).  ``lookup(kind, id)`` must read the
    collections as they stood when the mutation started.
    """

    result = dict(values)
    written = set(written)
    if strict:
        check_references(kind, result, written, lookup)
    for rule in rules_for(kind):
        targets = {target for target, _ in rule.copies}
        if rule.foreign_key not in written and not (targets & written):
            continue
        if rule.foreign_key in result:
            key = str(result.get(rule.foreign_key) or "")
        else:
            key = str(getattr(current, rule.foreign_key, "") or "")
        source = lookup(rule.source_kind, key) if key else None
        if source is None:
            if rule.clear_when_missing:
                for target in targets:
                    result[target] = ""
            continue
        for target, source_field in rule.copies:
            result[target] = getattr(source, source_field)
    return result


def referrers(
    kind: str,
    record_id: str,
    collections: Mapping[str, Sequence[object]],
) -> List[str]:
    """List ``"<kind>:<id>"`` for every record whose foreign key points at ``record_id``."""

    found: List[str] = []
    for ref_kind, foreign_key, source_kind in REFERENCES:
        if source_kind != kind:
            continue
        for record in collections.get(ref_kind, ()):
            if getattr(record, foreign_key, None) == record_id:
                found.append(f"{ref_kind}:{record.id}")  # type: ignore[attr-defined]
    return found


__all__ = [
    "DenormalizationRule",
    "RULES",
    "REFERENCES",
    "rules_for",
    "check_references",
    "apply_rules",
    "referrers",
]
