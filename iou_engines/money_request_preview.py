"""
iou_engines.money_request_preview -- Preview derivation engine.

Responsibility:
    Derive the ``PreviewViewModel`` for a money request shown in a chat
    thread from the (possibly partial) transaction, its report, the
    wrapping report action, the viewer session, the personal-details
    directory and the violation set.

Architecture position:
    Engines -- pure calculation layer, zero I/O.  Reads kernel domain
    objects; the currency formatter, translator and config are passed in
    (bundled defaults are used when omitted).

Invariants enforced:
    - First match wins: header text, the cash status suffix and amount
      text are each an ordered rule table evaluated top-down.
    - Deleted actions show the amount frozen in the action's original
      message, never the live transaction amount.
    - Merchant and description are never both shown.
    - Avatars sort by id ascending; the workspace icon of a policy split
      is appended after sorting.
    - Determinism: identical inputs give identical view models; inputs
      are never mutated and nothing is cached.

Failure modes:
    - None.  Absent inputs resolve to defaults (amount 0, currency from
      config, empty text, account id -1).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from iou_config.localization import Localizer
from iou_config.schema import PreviewConfig
from iou_engines.tracer import traced_engine
from iou_kernel.domain import report as report_utils
from iou_kernel.domain import report_action as action_utils
from iou_kernel.domain import transaction as transaction_utils
from iou_kernel.domain import violations as violation_utils
from iou_kernel.domain.currency import convert_to_display_string
from iou_kernel.domain.personal_details import (
    Avatar,
    PersonalDetailsList,
    Session,
    get_avatars_for_account_ids,
)
from iou_kernel.domain.preview_model import (
    DisplayTextKind,
    PreviewFlags,
    PreviewViewModel,
    ReceiptImage,
)
from iou_kernel.domain.report import Report
from iou_kernel.domain.report_action import ReportAction
from iou_kernel.domain.text import truncate
from iou_kernel.domain.transaction import Transaction
from iou_kernel.domain.violations import TransactionViolation, ViolationSet
from iou_kernel.logging_config import get_logger

logger = get_logger("engines.money_request_preview")

Translate = Callable[..., str]
FormatCurrency = Callable[[int, str], str]

SEPARATOR = " • "


@dataclass(frozen=True)
class _PreviewFacts:
    """Everything the rule tables ask, resolved once per derivation."""

    transaction: Transaction | None
    report: Report | None
    flags: PreviewFlags
    config: PreviewConfig
    translate: Translate
    format_currency: FormatCurrency

    amount: int
    currency: str
    merchant: str
    description: str

    violations: tuple[TransactionViolation, ...]
    has_violations: bool
    has_field_errors: bool
    is_scanning: bool
    is_distance_request: bool
    is_fetching_waypoints: bool
    is_card_transaction: bool
    is_settled: bool


Rule = tuple[Callable[[_PreviewFacts], bool], Callable[[_PreviewFacts], str]]


def _first_match(rules: tuple[Rule, ...], facts: _PreviewFacts, default: str = "") -> str:
    for predicate, produce in rules:
        if predicate(facts):
            return produce(facts)
    return default


# ---------------------------------------------------------------------------
# Header text
# ---------------------------------------------------------------------------


def _violation_message(f: _PreviewFacts) -> str:
    first = f.violations[0]
    message = violation_utils.get_violation_translation(first, f.translate)
    blocking = [v for v in f.violations if v.type == violation_utils.ViolationType.VIOLATION]
    if len(blocking) > 1 or len(message) > f.config.violation_message_max_length:
        return f.translate("violations.reviewRequired")
    return message


# At most one of these is appended to "Cash".
_CASH_SUFFIX_RULES: tuple[Rule, ...] = (
    (
        lambda f: f.has_violations and f.transaction is not None and not f.is_settled,
        _violation_message,
    ),
    (
        lambda f: (
            report_utils.is_paid_group_policy_expense_report(f.report)
            and report_utils.is_report_approved(f.report)
            and not f.is_settled
        ),
        lambda f: f.translate("iou.approved"),
    ),
    (
        lambda f: report_utils.is_waiting_on_bank_account(f.report),
        lambda f: f.translate("iou.pending"),
    ),
    (
        lambda f: report_utils.is_cancelled(f.report),
        lambda f: f.translate("iou.canceled"),
    ),
    (
        lambda f: transaction_utils.is_on_hold(f.transaction),
        lambda f: f.translate("iou.hold"),
    ),
)


def _card_header(f: _PreviewFacts) -> str:
    message = f.translate("iou.card")
    if transaction_utils.is_pending(f.transaction):
        message += SEPARATOR + f.translate("iou.pending")
    return message


def _cash_header(f: _PreviewFacts) -> str:
    message = f.translate("iou.cash")
    suffix = _first_match(_CASH_SUFFIX_RULES, f)
    if suffix:
        message += SEPARATOR + suffix
    return message


_HEADER_RULES: tuple[Rule, ...] = (
    (lambda f: f.is_distance_request, lambda f: f.translate("common.distance")),
    (lambda f: f.is_scanning, lambda f: f.translate("common.receipt")),
    (lambda f: f.flags.is_bill_split, lambda f: f.translate("iou.split")),
    (lambda f: f.is_card_transaction, _card_header),
    (lambda f: True, _cash_header),
)


def _settled_message(f: _PreviewFacts) -> str:
    if f.is_card_transaction:
        return f.translate("common.done")
    return f.translate("iou.settledExpensify")


def _header_text(f: _PreviewFacts) -> str:
    header = _first_match(_HEADER_RULES, f)
    # Settlement marker goes after any status suffix.
    if f.is_settled and not report_utils.is_cancelled(f.report):
        header += SEPARATOR + _settled_message(f)
    return header


# ---------------------------------------------------------------------------
# Amount text
# ---------------------------------------------------------------------------

_AMOUNT_RULES: tuple[Rule, ...] = (
    (lambda f: f.is_scanning, lambda f: f.translate("iou.receiptScanning")),
    (
        lambda f: f.is_fetching_waypoints and not f.amount,
        lambda f: f.translate("iou.routePending"),
    ),
    (
        lambda f: not f.is_settled and f.has_field_errors,
        lambda f: f.translate("iou.receiptMissingDetails"),
    ),
    (lambda f: True, lambda f: f.format_currency(f.amount, f.currency)),
)


def _deleted_amount_text(action: ReportAction, f: _PreviewFacts) -> str:
    snapshot = action_utils.get_iou_original_message(action)
    return f.format_currency(
        snapshot.amount or 0,
        snapshot.currency or f.config.default_currency,
    )


# ---------------------------------------------------------------------------
# Participants and split
# ---------------------------------------------------------------------------


def _participant_account_ids(
    action: ReportAction | None,
    report: Report | None,
    is_bill_split: bool,
) -> tuple[int, ...]:
    if action_utils.is_iou_action(action) and is_bill_split:
        return action_utils.get_split_participant_ids(action)
    return (report_utils.get_manager_id(report), report_utils.get_owner_account_id(report))


def _sorted_participant_avatars(
    participant_ids: tuple[int, ...],
    personal_details: PersonalDetailsList | None,
    report: Report | None,
    is_bill_split: bool,
) -> tuple[Avatar, ...]:
    avatars = sorted(
        get_avatars_for_account_ids(participant_ids, personal_details),
        key=lambda avatar: avatar.id,
    )
    if report_utils.is_policy_expense_chat(report) and is_bill_split:
        avatars.append(report_utils.get_workspace_icon(report))
    return tuple(avatars)


def calculate_amount_each(total: int, participant_count: int, is_policy_expense_chat: bool) -> int:
    """Per-participant share of a split, in minor units.

    The payer is excluded from the divisor in a peer split and included in
    a workspace split.  A peer split with a single participant divides by
    one.  Shares are rounded half-up to whole minor units.
    """
    divisor = 1 if is_policy_expense_chat else max(participant_count - 1, 1)
    share = Decimal(total) / Decimal(divisor)
    return int(share.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Engine entrypoint
# ---------------------------------------------------------------------------


def _resolve_facts(
    transaction: Transaction | None,
    report: Report | None,
    violations: ViolationSet | None,
    flags: PreviewFlags,
    config: PreviewConfig,
    translate: Translate,
    format_currency: FormatCurrency,
) -> _PreviewFacts:
    details = transaction_utils.get_transaction_details(transaction)
    transaction_id = transaction.transaction_id if transaction is not None else None
    is_scanning = transaction_utils.is_receipt_being_scanned(transaction)

    return _PreviewFacts(
        transaction=transaction,
        report=report,
        flags=flags,
        config=config,
        translate=translate,
        format_currency=format_currency,
        amount=details.amount if details else 0,
        currency=(details.currency if details else None) or config.default_currency,
        merchant=truncate(details.merchant if details else "", config.max_preview_length),
        description=truncate(details.comment if details else "", config.max_preview_length),
        violations=violation_utils.get_transaction_violations(transaction_id, violations),
        has_violations=violation_utils.has_violation(transaction_id, violations),
        has_field_errors=transaction_utils.has_missing_smartscan_fields(
            transaction,
            is_from_expense_report=report_utils.is_expense_report(report),
            partial_merchant=config.partial_transaction_merchant,
        ),
        is_scanning=is_scanning,
        is_distance_request=transaction_utils.is_distance_request(transaction),
        is_fetching_waypoints=transaction_utils.is_fetching_waypoints_from_server(transaction),
        is_card_transaction=transaction_utils.is_card_transaction(transaction),
        is_settled=report_utils.is_settled(report),
    )


def _merchant_or_description(f: _PreviewFacts) -> tuple[str, DisplayTextKind]:
    should_show_merchant = (
        bool(f.merchant)
        and f.merchant != f.config.partial_transaction_merchant
        and f.merchant != f.config.default_merchant
        and not (f.is_fetching_waypoints and not f.amount)
    )
    if should_show_merchant:
        return f.merchant, DisplayTextKind.MERCHANT

    if f.description and not f.is_scanning:
        return f.description, DisplayTextKind.DESCRIPTION
    return "", DisplayTextKind.NONE


def _receipt_images(transaction: Transaction | None) -> tuple[ReceiptImage, ...]:
    if not transaction_utils.has_receipt(transaction):
        return ()
    receipt = transaction.receipt
    return (
        ReceiptImage(
            image=receipt.source,
            thumbnail=receipt.thumbnail,
            filename=receipt.filename,
        ),
    )


@traced_engine(
    "money_request_preview",
    "1.0",
    fingerprint_fields=("transaction", "report", "action", "violations", "flags"),
)
def derive_preview(
    transaction: Transaction | None,
    report: Report | None,
    action: ReportAction,
    session: Session | None,
    personal_details: PersonalDetailsList | None,
    violations: ViolationSet | None = None,
    flags: PreviewFlags | None = None,
    *,
    config: PreviewConfig | None = None,
    translate: Translate | None = None,
    format_currency: FormatCurrency | None = None,
) -> PreviewViewModel:
    """Derive the preview of one money request.

    Args:
        transaction: The live transaction; ``None`` or empty while the
            request is still being created.
        report: The IOU/expense report the request posts against.
        action: The report action wrapping the request.
        session: The viewer; decides manager-only hints.
        personal_details: Directory used to resolve participant avatars.
        violations: Policy violations keyed by transaction id.
        flags: UI hints from the hosting view.
        config: Display constants; ``PreviewConfig()`` when omitted.
        translate: ``(key, params) -> str``; bundled catalog for
            ``config.locale`` when omitted.
        format_currency: ``(minor_units, code) -> str``.

    Returns:
        The fully decided ``PreviewViewModel``.
    """
    flags = flags or PreviewFlags()
    config = config or PreviewConfig()
    translate = translate or Localizer.for_locale(config.locale)
    format_currency = format_currency or convert_to_display_string

    facts = _resolve_facts(
        transaction, report, violations, flags, config, translate, format_currency
    )
    is_bill_split = flags.is_bill_split
    is_deleted = action_utils.is_pending_delete(action)
    is_loading = (
        transaction_utils.is_missing(transaction)
        and not action_utils.is_message_deleted(action)
        and not is_deleted
    )

    participant_ids = _participant_account_ids(action, report, is_bill_split)
    avatars = _sorted_participant_avatars(participant_ids, personal_details, report, is_bill_split)

    manager_id = report_utils.get_manager_id(report)
    is_current_user_manager = (
        session is not None and session.account_id is not None and manager_id == session.account_id
    )

    show_map_as_image = facts.is_distance_request and facts.is_fetching_waypoints
    receipt_images = () if show_map_as_image else _receipt_images(transaction)

    header_text = ""
    amount_text = ""
    text, kind = "", DisplayTextKind.NONE
    split_each_amount: int | None = None
    split_each_text: str | None = None

    if not is_loading:
        header_text = _header_text(facts)
        if is_deleted:
            amount_text = _deleted_amount_text(action, facts)
        else:
            amount_text = _first_match(_AMOUNT_RULES, facts)
        text, kind = _merchant_or_description(facts)

        if is_bill_split and participant_ids and facts.amount > 0:
            split_each_amount = calculate_amount_each(
                facts.amount,
                len(participant_ids),
                report_utils.is_policy_expense_chat(report),
            )
            split_each_text = translate(
                "iou.amountEach",
                {"amount": format_currency(split_each_amount, facts.currency)},
            )

    view_model = PreviewViewModel(
        is_loading=is_loading,
        header_text=header_text,
        amount_text=amount_text,
        is_deleted=is_deleted,
        show_attention_indicator=not facts.is_settled
        and (facts.has_violations or facts.has_field_errors),
        merchant_or_description=text,
        merchant_or_description_kind=kind,
        description_is_markdown=kind == DisplayTextKind.DESCRIPTION,
        is_settled=facts.is_settled,
        show_settled_checkmark=facts.is_settled and not is_bill_split,
        participant_avatars=avatars,
        show_avatars=is_bill_split,
        split_each_amount=split_each_amount,
        split_each_text=split_each_text,
        receipt_images=receipt_images,
        show_map_as_image=show_map_as_image,
        is_highlighted=facts.is_scanning or flags.is_whisper,
        is_receipt_hovered=flags.is_hovered or facts.is_scanning,
        is_avatar_hovered=flags.is_hovered,
        is_current_user_manager=is_current_user_manager,
        show_pending_conversion_message=(
            not is_current_user_manager and flags.should_show_pending_conversion_message
        ),
        is_press_enabled=flags.has_press_handler
        and not (is_bill_split and transaction_utils.is_missing(transaction)),
        accessibility_label=translate("iou.split" if is_bill_split else "iou.cash"),
        accessibility_hint=format_currency(facts.amount, facts.currency),
        errors=flags.wallet_terms_errors,
    )

    logger.debug(
        "preview_derived",
        extra={
            "report_action_id": action.report_action_id if action is not None else None,
            "is_loading": is_loading,
            "is_deleted": is_deleted,
            "merchant_or_description_kind": kind,
        },
    )
    return view_model
