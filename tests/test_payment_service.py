"""
Unit tests for the payment ledger.
"""
import logging
import re
import threading

import pytest
from pydantic import ValidationError

from bank_api.app.schemas.payment import PaymentRequest
from bank_api.app.services.payment_service import PaymentLedger, PaymentRejectedError, format_amount

RECEIPT_ID = re.compile(r"^RECEIPT:[0-9a-f-]{36}$")


class TestPaymentLedger:
    """Test suite for PaymentLedger."""

    def test_no_transactions_at_startup(self, ledger: PaymentLedger) -> None:
        assert ledger.list_all() == []
        assert len(ledger) == 0

    def test_pay_accepted(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        """A card containing the token is charged and recorded."""
        receipt = ledger.pay(good_payment)

        assert receipt.amount == 43.7
        assert receipt.pay_receipt_id.startswith("RECEIPT:")
        assert len(receipt.pay_receipt_id) == 44
        assert RECEIPT_ID.match(receipt.pay_receipt_id)
        assert ledger.list_all() == [receipt]

    def test_pay_rejected(self, ledger: PaymentLedger, bad_payment: PaymentRequest) -> None:
        with pytest.raises(PaymentRejectedError) as excinfo:
            ledger.pay(bad_payment)

        assert excinfo.value.amount == 43.7
        assert str(excinfo.value) == 'Payment rejected as "43.7" cannot be paid'
        assert len(ledger) == 0

    @pytest.mark.parametrize("card", ["896983", "896983000", "000896983", "12896983450"])
    def test_token_anywhere_in_card_is_accepted(self, ledger: PaymentLedger, card: str) -> None:
        ledger.pay(PaymentRequest(credit_card=card, amount=10))
        assert len(ledger) == 1

    @pytest.mark.parametrize("card", ["89698", "8969 83", "YES", "383969", "1234567890"])
    def test_card_without_token_is_rejected(self, ledger: PaymentLedger, card: str) -> None:
        with pytest.raises(PaymentRejectedError):
            ledger.pay(PaymentRequest(credit_card=card, amount=10))
        assert len(ledger) == 0

    def test_decisions_are_logged(self, ledger: PaymentLedger, good_payment, bad_payment, caplog) -> None:
        caplog.set_level(logging.INFO, logger="bank_api.app.services.payment_service")

        receipt = ledger.pay(good_payment)
        with pytest.raises(PaymentRejectedError):
            ledger.pay(bad_payment)

        assert f"Payment accepted({receipt.pay_receipt_id}): 43.7" in caplog.text
        assert "Payment rejected: 43.7" in caplog.text

    def test_receipt_ids_are_unique(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        ids = {ledger.pay(good_payment).pay_receipt_id for _ in range(20)}
        assert len(ids) == 20

    def test_order_is_preserved(self, ledger: PaymentLedger) -> None:
        first = ledger.pay(PaymentRequest(credit_card="1230896983", amount=1.5))
        second = ledger.pay(PaymentRequest(credit_card="8969830000", amount=2.5))

        assert ledger.list_all() == [first, second]

    def test_reads_are_idempotent(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        ledger.pay(good_payment)
        assert ledger.list_all() == ledger.list_all()

    def test_list_all_returns_a_copy(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        ledger.pay(good_payment)
        ledger.list_all().clear()
        assert len(ledger) == 1

    def test_rejections_interleaved_with_acceptances(self, ledger: PaymentLedger, good_payment, bad_payment) -> None:
        accepted = ledger.pay(good_payment)
        with pytest.raises(PaymentRejectedError):
            ledger.pay(bad_payment)

        assert ledger.list_all() == [accepted]

    def test_receipts_are_immutable(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        receipt = ledger.pay(good_payment)
        with pytest.raises(ValidationError):
            receipt.amount = 1000.0

    def test_custom_acceptance_token(self) -> None:
        ledger = PaymentLedger("4242")
        ledger.pay(PaymentRequest(credit_card="4242424242424242", amount=5))
        with pytest.raises(PaymentRejectedError):
            ledger.pay(PaymentRequest(credit_card="1230896983", amount=5))
        assert len(ledger) == 1

    @pytest.mark.parametrize(
        "credit_card, amount",
        [
            ("", 43.7),
            (None, 43.7),
            (896983, 43.7),
            ("1230896983", 0),
            ("1230896983", -5.0),
            ("1230896983", "43.7"),
            ("1230896983", True),
            ("1230896983", float("nan")),
            ("1230896983", float("inf")),
        ],
    )
    def test_invalid_request_is_rejected_not_crashed(self, ledger: PaymentLedger, credit_card, amount) -> None:
        """Requests built without validation are refused like any other."""
        request = PaymentRequest.model_construct(credit_card=credit_card, amount=amount)
        with pytest.raises(PaymentRejectedError):
            ledger.pay(request)
        assert len(ledger) == 0

    def test_concurrent_payments_are_all_recorded(self, ledger: PaymentLedger, good_payment: PaymentRequest) -> None:
        def pay_many() -> None:
            for _ in range(50):
                ledger.pay(good_payment)

        threads = [threading.Thread(target=pay_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(ledger) == 400
        assert len({r.pay_receipt_id for r in ledger.list_all()}) == 400


class TestFormatAmount:
    @pytest.mark.parametrize(
        "amount, expected",
        [(43.7, "43.7"), (100.0, "100"), (100, "100"), (0.1, "0.1"), (-2.0, "-2"), (None, "None")],
    )
    def test_format_amount(self, amount, expected: str) -> None:
        assert format_amount(amount) == expected


class TestPaymentRequestSchema:
    """Boundary validation of incoming payment requests."""

    def test_parses_wire_names(self) -> None:
        request = PaymentRequest.model_validate({"creditCard": "1230896983", "amount": 43.7})
        assert request.credit_card == "1230896983"
        assert request.amount == 43.7

    @pytest.mark.parametrize(
        "body",
        [
            {"creditCard": "", "amount": 43.7},
            {"creditCard": "1230896983", "amount": 0},
            {"creditCard": "1230896983", "amount": -1},
            {"creditCard": "1230896983", "amount": "43.7"},
            {"creditCard": 1230896983, "amount": 43.7},
            {"amount": 43.7},
            {"creditCard": "1230896983"},
        ],
    )
    def test_rejects_invalid_bodies(self, body: dict) -> None:
        with pytest.raises(ValidationError):
            PaymentRequest.model_validate(body)
