"""
Report action domain types (``iou_kernel.domain.report_action``).

A report action is the chat-message record that wraps a money request.
For IOU actions it carries ``original_message``: a frozen snapshot of the
request as it was created (amount, currency, split participants).  The
snapshot outlives the live transaction, so it is the only trustworthy
source once the action is being deleted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PendingAction(str, Enum):
    """Optimistic write not yet acknowledged by the server."""

    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


class ActionName(str, Enum):
    IOU = "IOU"
    ADD_COMMENT = "ADDCOMMENT"
    REPORT_PREVIEW = "REPORTPREVIEW"


class IOUType(str, Enum):
    CREATE = "create"
    SPLIT = "split"
    PAY = "pay"
    TRACK = "track"


@dataclass(frozen=True)
class IOUMessage:
    """Snapshot of a money request taken when the action was written."""

    iou_type: IOUType = IOUType.CREATE
    amount: int | None = None
    currency: str | None = None
    participant_account_ids: tuple[int, ...] | None = None
    iou_transaction_id: str | None = None


@dataclass(frozen=True)
class ReportAction:
    report_action_id: str
    action_name: ActionName = ActionName.IOU
    pending_action: PendingAction | None = None
    is_message_deleted: bool = False
    original_message: IOUMessage | None = None


def is_iou_action(action: ReportAction | None) -> bool:
    return action is not None and action.action_name == ActionName.IOU


def is_pending_delete(action: ReportAction | None) -> bool:
    return action is not None and action.pending_action == PendingAction.DELETE


def is_message_deleted(action: ReportAction | None) -> bool:
    return action is not None and action.is_message_deleted


def get_iou_original_message(action: ReportAction | None) -> IOUMessage:
    """The IOU snapshot of ``action``; an all-defaults snapshot otherwise."""
    if is_iou_action(action) and action.original_message is not None:
        return action.original_message
    return IOUMessage()


def get_split_participant_ids(action: ReportAction | None) -> tuple[int, ...]:
    """Participants recorded on a split action, in recorded order."""
    return tuple(get_iou_original_message(action).participant_account_ids or ())
