"""
Report domain types (``iou_kernel.domain.report``).

Responsibility
--------------
The report a money request posts against (a peer IOU report or a
workspace expense report), and the settlement/approval predicates the
preview reads from its ``state`` and ``status`` numbers.

Invariants enforced
-------------------
* Settled means reimbursed: ``status == REIMBURSED`` regardless of state.
* Approved means both ``state`` and ``status`` are ``APPROVED``; a
  reimbursed report is therefore never "approved" for display purposes.
* Missing manager/owner ids read as ``UNKNOWN_ACCOUNT_ID`` (-1), the value
  upstream producers use for "no account".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from iou_kernel.domain.personal_details import UNKNOWN_ACCOUNT_ID, Avatar, AvatarType

DEFAULT_WORKSPACE_AVATAR = "workspace-default-avatar"


class ReportType(str, Enum):
    IOU = "iou"
    EXPENSE = "expense"
    CHAT = "chat"


class ReportState(int, Enum):
    OPEN = 0
    SUBMITTED = 1
    APPROVED = 2
    BILLING = 3


class ReportStatus(int, Enum):
    OPEN = 0
    SUBMITTED = 1
    CLOSED = 2
    APPROVED = 3
    REIMBURSED = 4


class PolicyType(str, Enum):
    PERSONAL = "personal"
    TEAM = "team"
    CORPORATE = "corporate"


PAID_POLICY_TYPES: frozenset[PolicyType] = frozenset({PolicyType.TEAM, PolicyType.CORPORATE})


@dataclass(frozen=True)
class Report:
    report_id: str
    manager_id: int | None = None
    owner_account_id: int | None = None
    report_type: ReportType = ReportType.IOU
    state: ReportState = ReportState.OPEN
    status: ReportStatus = ReportStatus.OPEN
    policy_type: PolicyType | None = None
    is_cancelled_iou: bool = False
    is_waiting_on_bank_account: bool = False
    is_policy_expense_chat: bool = False
    policy_id: str | None = None
    policy_name: str = ""
    policy_avatar: str | None = None


def get_manager_id(report: Report | None) -> int:
    if report is None or report.manager_id is None:
        return UNKNOWN_ACCOUNT_ID
    return report.manager_id


def get_owner_account_id(report: Report | None) -> int:
    if report is None or report.owner_account_id is None:
        return UNKNOWN_ACCOUNT_ID
    return report.owner_account_id


def is_settled(report: Report | None) -> bool:
    return report is not None and report.status == ReportStatus.REIMBURSED


def is_report_approved(report: Report | None) -> bool:
    return (
        report is not None
        and report.state == ReportState.APPROVED
        and report.status == ReportStatus.APPROVED
    )


def is_expense_report(report: Report | None) -> bool:
    return report is not None and report.report_type == ReportType.EXPENSE


def is_paid_group_policy_expense_report(report: Report | None) -> bool:
    """Expense report on a team or corporate workspace."""
    return is_expense_report(report) and report.policy_type in PAID_POLICY_TYPES


def is_cancelled(report: Report | None) -> bool:
    return report is not None and report.is_cancelled_iou


def is_waiting_on_bank_account(report: Report | None) -> bool:
    return report is not None and report.is_waiting_on_bank_account


def is_policy_expense_chat(report: Report | None) -> bool:
    return report is not None and report.is_policy_expense_chat


def get_workspace_icon(report: Report | None) -> Avatar:
    """Synthetic avatar standing in for the workspace on a policy split."""
    if report is None:
        return Avatar(id="", source=DEFAULT_WORKSPACE_AVATAR, avatar_type=AvatarType.WORKSPACE)
    return Avatar(
        id=report.policy_id or "",
        source=report.policy_avatar or DEFAULT_WORKSPACE_AVATAR,
        name=report.policy_name,
        avatar_type=AvatarType.WORKSPACE,
    )
