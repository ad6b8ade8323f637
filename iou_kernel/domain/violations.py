"""
Transaction policy violations.

The violation set is keyed by transaction id.  Each entry has a ``type``:
only ``VIOLATION`` entries block a request; ``NOTICE`` and ``WARNING``
are informational and are ignored when deciding whether a request has
violations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

Translate = Callable[..., str]


class ViolationType(str, Enum):
    VIOLATION = "violation"
    NOTICE = "notice"
    WARNING = "warning"


@dataclass(frozen=True)
class TransactionViolation:
    """One policy finding; ``data`` feeds the message template."""

    name: str
    type: ViolationType = ViolationType.VIOLATION
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


ViolationSet = Mapping[str, tuple[TransactionViolation, ...]]


def get_transaction_violations(
    transaction_id: str | None,
    violations: ViolationSet | None,
) -> tuple[TransactionViolation, ...]:
    """All findings for a transaction, in server order."""
    if not transaction_id or not violations:
        return ()
    return tuple(violations.get(transaction_id, ()))


def get_blocking_violations(
    transaction_id: str | None,
    violations: ViolationSet | None,
) -> tuple[TransactionViolation, ...]:
    return tuple(
        v
        for v in get_transaction_violations(transaction_id, violations)
        if v.type == ViolationType.VIOLATION
    )


def has_violation(transaction_id: str | None, violations: ViolationSet | None) -> bool:
    return bool(get_blocking_violations(transaction_id, violations))


def get_violation_translation(violation: TransactionViolation, translate: Translate) -> str:
    """Translated message for a violation, e.g. ``violations.missingCategory``."""
    return translate(f"violations.{violation.name}", dict(violation.data))
