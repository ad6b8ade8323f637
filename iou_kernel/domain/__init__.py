"""
Pure domain layer.

Value objects and predicates for money-request previews with NO
dependencies on:
- Persistence
- Network
- Time/clock
- I/O

All domain objects are immutable and deterministic.
"""

from iou_kernel.domain.currency import (
    CurrencyInfo,
    CurrencyRegistry,
    convert_to_display_string,
)
from iou_kernel.domain.personal_details import (
    UNKNOWN_ACCOUNT_ID,
    Avatar,
    AvatarType,
    PersonalDetail,
    Session,
    get_avatars_for_account_ids,
)
from iou_kernel.domain.preview_model import (
    DisplayTextKind,
    PreviewFlags,
    PreviewViewModel,
    ReceiptImage,
)
from iou_kernel.domain.report import (
    PolicyType,
    Report,
    ReportState,
    ReportStatus,
    ReportType,
)
from iou_kernel.domain.report_action import (
    ActionName,
    IOUMessage,
    IOUType,
    PendingAction,
    ReportAction,
)
from iou_kernel.domain.text import truncate
from iou_kernel.domain.transaction import (
    DEFAULT_MERCHANT,
    PARTIAL_TRANSACTION_MERCHANT,
    Receipt,
    ReceiptState,
    Transaction,
    TransactionDetails,
    TransactionStatus,
)
from iou_kernel.domain.violations import (
    TransactionViolation,
    ViolationSet,
    ViolationType,
)

__all__ = [
    "ActionName",
    "Avatar",
    "AvatarType",
    "CurrencyInfo",
    "CurrencyRegistry",
    "DEFAULT_MERCHANT",
    "DisplayTextKind",
    "IOUMessage",
    "IOUType",
    "PARTIAL_TRANSACTION_MERCHANT",
    "PendingAction",
    "PersonalDetail",
    "PolicyType",
    "PreviewFlags",
    "PreviewViewModel",
    "Receipt",
    "ReceiptImage",
    "ReceiptState",
    "Report",
    "ReportAction",
    "ReportState",
    "ReportStatus",
    "ReportType",
    "Session",
    "Transaction",
    "TransactionDetails",
    "TransactionStatus",
    "TransactionViolation",
    "UNKNOWN_ACCOUNT_ID",
    "ViolationSet",
    "ViolationType",
    "convert_to_display_string",
    "get_avatars_for_account_ids",
    "truncate",
]
