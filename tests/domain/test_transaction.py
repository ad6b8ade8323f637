"""
Tests for transaction predicates (iou_kernel/domain/transaction.py).

Covers:
- Missing/empty transactions
- Effective display fields with edits applied
- Receipt, distance and card predicates
- SmartScan required-field checks
"""

from datetime import date

import pytest

from iou_kernel.domain import transaction as tx
from iou_kernel.domain.report_action import PendingAction
from iou_kernel.domain.transaction import Receipt, ReceiptState, Transaction, TransactionStatus
from tests.factories import make_scanned_receipt, make_scanning_receipt, make_transaction


class TestMissingTransaction:

    def test_none_is_missing(self):
        assert tx.is_missing(None)

    def test_empty_is_missing(self):
        assert tx.is_missing(Transaction.empty())
        assert Transaction.empty().is_empty

    def test_populated_is_not_missing(self):
        assert not tx.is_missing(make_transaction())

    def test_details_of_absent_transaction(self):
        assert tx.get_transaction_details(None) is None


class TestTransactionDetails:

    def test_original_values(self):
        details = tx.get_transaction_details(make_transaction(comment="lunch", merchant="Deli"))

        assert details.amount == 2500
        assert details.currency == "USD"
        assert details.comment == "lunch"
        assert details.merchant == "Deli"
        assert details.created == date(2026, 3, 1)

    def test_modified_values_win(self):
        details = tx.get_transaction_details(
            make_transaction(
                modified_amount=900,
                modified_currency="EUR",
                modified_merchant="Cafe",
                modified_created=date(2026, 3, 5),
            )
        )

        assert (details.amount, details.currency, details.merchant) == (900, "EUR", "Cafe")
        assert details.created == date(2026, 3, 5)

    def test_absent_amount_reads_as_zero(self):
        assert tx.get_amount(make_transaction(amount=None)) == 0


class TestReceiptPredicates:

    def test_no_receipt(self):
        txn = make_transaction()

        assert not tx.has_receipt(txn)
        assert not tx.is_receipt_being_scanned(txn)

    @pytest.mark.parametrize("state", [ReceiptState.SCANREADY, ReceiptState.SCANNING])
    def test_scanning_states(self, state):
        txn = make_transaction(receipt=Receipt(state=state, source="r.jpg"))

        assert tx.is_receipt_being_scanned(txn)

    @pytest.mark.parametrize("state", [ReceiptState.SCANCOMPLETE, ReceiptState.SCANFAILED])
    def test_finished_states(self, state):
        txn = make_transaction(receipt=Receipt(state=state, source="r.jpg"))

        assert tx.has_receipt(txn)
        assert not tx.is_receipt_being_scanned(txn)


class TestRequestKindPredicates:

    def test_distance_request(self):
        assert tx.is_distance_request(make_transaction(is_distance_request=True))
        assert not tx.is_distance_request(None)

    def test_fetching_waypoints(self):
        txn = make_transaction(pending_fields={"waypoints": PendingAction.UPDATE})

        assert tx.is_fetching_waypoints_from_server(txn)
        assert not tx.is_fetching_waypoints_from_server(make_transaction())

    def test_card_transaction(self):
        assert tx.is_card_transaction(make_transaction(managed_card=True))
        assert not tx.is_card_transaction(make_transaction())

    def test_pending_and_hold(self):
        txn = make_transaction(managed_card=True, status=TransactionStatus.PENDING, hold=True)

        assert tx.is_pending(txn)
        assert tx.is_on_hold(txn)
        assert not tx.is_pending(make_transaction(status=TransactionStatus.PENDING))
        assert not tx.is_pending(None)
        assert not tx.is_on_hold(None)


class TestSmartscanFields:

    def test_amount_always_required(self):
        assert tx.are_required_fields_empty(make_transaction(amount=0))

    def test_created_always_required(self):
        assert tx.are_required_fields_empty(make_transaction(created=None))

    def test_merchant_required_on_expense_reports_only(self):
        txn = make_transaction(merchant="(none)")

        assert tx.are_required_fields_empty(txn, is_from_expense_report=True)
        assert not tx.are_required_fields_empty(txn)

    def test_modified_merchant_satisfies_requirement(self):
        txn = make_transaction(merchant="(none)", modified_merchant="Deli")

        assert not tx.are_required_fields_empty(txn, is_from_expense_report=True)

    def test_missing_fields_need_a_receipt(self):
        assert not tx.has_missing_smartscan_fields(make_transaction(amount=0))
        assert tx.has_missing_smartscan_fields(
            make_transaction(amount=0, receipt=make_scanned_receipt())
        )

    def test_not_flagged_while_scanning(self):
        txn = make_transaction(amount=0, receipt=make_scanning_receipt())

        assert not tx.has_missing_smartscan_fields(txn)

    def test_not_flagged_for_distance_requests(self):
        txn = make_transaction(amount=0, is_distance_request=True, receipt=make_scanned_receipt())

        assert not tx.has_missing_smartscan_fields(txn)

    def test_absent_transaction_not_flagged(self):
        assert not tx.has_missing_smartscan_fields(None)
