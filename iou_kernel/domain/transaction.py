"""
Transaction domain types (``iou_kernel.domain.transaction``).

Responsibility
--------------
Immutable snapshot of a money-request transaction as synchronized from the
server, plus the pure predicates the preview layer asks of it: is a
receipt attached, is it still being scanned, did smart-scan leave required
fields empty, is the route of a distance request still being computed.

Architecture position
---------------------
**Kernel domain layer** -- pure value objects.  ZERO I/O.  Transactions
are owned and mutated by the synchronization layer; this module only reads
them.

Invariants enforced
-------------------
* User edits win: ``modified_*`` fields take precedence over scanned or
  imported values in :func:`get_transaction_details`.
* An absent transaction (``None``) and an empty one
  (``Transaction.empty()``) both mean "not materialized yet".
* Every predicate accepts ``None`` and answers ``False``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType

from iou_kernel.domain.report_action import PendingAction

PARTIAL_TRANSACTION_MERCHANT = "(none)"
DEFAULT_MERCHANT = "Request"

WAYPOINTS_FIELD = "waypoints"


class ReceiptState(str, Enum):
    """Smart-scan lifecycle of an attached receipt."""

    OPEN = "OPEN"
    SCANREADY = "SCANREADY"
    SCANNING = "SCANNING"
    SCANCOMPLETE = "SCANCOMPLETE"
    SCANFAILED = "SCANFAILED"


SCANNING_RECEIPT_STATES: frozenset[ReceiptState] = frozenset({
    ReceiptState.SCANREADY,
    ReceiptState.SCANNING,
})


class TransactionStatus(str, Enum):
    """Posting status reported by the card feed."""

    POSTED = "Posted"
    PENDING = "Pending"


@dataclass(frozen=True)
class Receipt:
    """Receipt image attached to a transaction."""

    state: ReceiptState | None = None
    source: str | None = None
    thumbnail: str | None = None
    filename: str | None = None


@dataclass(frozen=True)
class Transaction:
    """A money-request transaction; every field may still be unloaded."""

    transaction_id: str = ""
    amount: int | None = None
    currency: str | None = None
    comment: str | None = None
    merchant: str | None = None
    created: date | None = None
    modified_amount: int | None = None
    modified_currency: str | None = None
    modified_merchant: str | None = None
    modified_created: date | None = None
    receipt: Receipt | None = None
    pending_fields: Mapping[str, PendingAction] = field(
        default_factory=lambda: MappingProxyType({})
    )
    is_distance_request: bool = False
    managed_card: bool = False
    status: TransactionStatus = TransactionStatus.POSTED
    hold: bool = False

    @classmethod
    def empty(cls) -> Transaction:
        """Placeholder for a request that has been announced but not created."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == _EMPTY


_EMPTY = Transaction()


@dataclass(frozen=True)
class TransactionDetails:
    """Effective display fields of a transaction, edits applied."""

    amount: int
    currency: str | None
    comment: str
    merchant: str
    created: date | None


def is_missing(transaction: Transaction | None) -> bool:
    """True when the transaction is absent or not materialized."""
    return transaction is None or transaction.is_empty


def get_amount(transaction: Transaction) -> int:
    if transaction.modified_amount:
        return transaction.modified_amount
    return transaction.amount or 0


def get_currency(transaction: Transaction) -> str | None:
    return transaction.modified_currency or transaction.currency


def get_merchant(transaction: Transaction) -> str:
    return transaction.modified_merchant or transaction.merchant or ""


def get_created(transaction: Transaction) -> date | None:
    return transaction.modified_created or transaction.created


def get_transaction_details(transaction: Transaction | None) -> TransactionDetails | None:
    """Resolve the fields a preview shows; ``None`` for an absent transaction."""
    if transaction is None:
        return None
    return TransactionDetails(
        amount=get_amount(transaction),
        currency=get_currency(transaction),
        comment=transaction.comment or "",
        merchant=get_merchant(transaction),
        created=get_created(transaction),
    )


def has_receipt(transaction: Transaction | None) -> bool:
    return bool(transaction and transaction.receipt and transaction.receipt.state)


def is_receipt_being_scanned(transaction: Transaction | None) -> bool:
    if not has_receipt(transaction):
        return False
    return transaction.receipt.state in SCANNING_RECEIPT_STATES


def is_distance_request(transaction: Transaction | None) -> bool:
    return bool(transaction and transaction.is_distance_request)


def is_fetching_waypoints_from_server(transaction: Transaction | None) -> bool:
    """The route of a distance request is still being computed server-side."""
    return bool(transaction and transaction.pending_fields.get(WAYPOINTS_FIELD))


def is_card_transaction(transaction: Transaction | None) -> bool:
    return bool(transaction and transaction.managed_card)


def is_pending(transaction: Transaction | None) -> bool:
    """Card transaction the bank has authorized but not posted."""
    if not is_card_transaction(transaction):
        return False
    return transaction.status == TransactionStatus.PENDING


def is_on_hold(transaction: Transaction | None) -> bool:
    return bool(transaction and transaction.hold)


def is_merchant_missing(
    transaction: Transaction,
    partial_merchant: str = PARTIAL_TRANSACTION_MERCHANT,
) -> bool:
    if transaction.modified_merchant:
        return transaction.modified_merchant == partial_merchant
    return not transaction.merchant or transaction.merchant == partial_merchant


def is_amount_missing(transaction: Transaction) -> bool:
    return not transaction.amount and not transaction.modified_amount


def is_created_missing(transaction: Transaction) -> bool:
    return transaction.created is None and transaction.modified_created is None


def are_required_fields_empty(
    transaction: Transaction,
    is_from_expense_report: bool = False,
    partial_merchant: str = PARTIAL_TRANSACTION_MERCHANT,
) -> bool:
    """Amount and date are always required; the merchant only on expense reports."""
    merchant_missing = is_from_expense_report and is_merchant_missing(
        transaction, partial_merchant
    )
    return (
        merchant_missing
        or is_amount_missing(transaction)
        or is_created_missing(transaction)
    )


def has_missing_smartscan_fields(
    transaction: Transaction | None,
    is_from_expense_report: bool = False,
    partial_merchant: str = PARTIAL_TRANSACTION_MERCHANT,
) -> bool:
    """Smart-scan finished on a receipt but left a required field empty.

    Distance requests and receipts still being scanned never count: their
    fields are filled in by the route calculation or the scan itself.
    """
    if transaction is None or not has_receipt(transaction):
        return False
    if is_distance_request(transaction) or is_receipt_being_scanned(transaction):
        return False
    return are_required_fields_empty(transaction, is_from_expense_report, partial_merchant)
