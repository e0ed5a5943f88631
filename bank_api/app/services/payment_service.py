"""
Business logic for payments.

``PaymentLedger`` decides whether a payment is accepted and keeps an
append‑only, in‑memory record of the receipts it has issued.  A
payment is accepted when the card identifier contains the configured
acceptance token anywhere in it.  Nothing is persisted: the record
starts empty with the process and disappears with it.
"""

import logging
import math
import threading
import uuid
from typing import Any, List, Optional

from ..core.config import settings
from ..schemas.payment import PaymentReceipt, PaymentRequest

logger = logging.getLogger(__name__)

RECEIPT_PREFIX = "RECEIPT:"


def format_amount(amount: Any) -> str:
    """Render an amount the way it appears in JSON (``100.0`` -> ``100``)."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class PaymentRejectedError(Exception):
    """Raised when a payment does not satisfy the acceptance rule."""

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f'Payment rejected as "{format_amount(amount)}" cannot be paid')


class PaymentLedger:
    """Gatekeeper and append‑only store for accepted payments."""

    def __init__(self, acceptance_token: Optional[str] = None) -> None:
        self.acceptance_token = acceptance_token or settings.acceptance_token
        self._transactions: List[PaymentReceipt] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._transactions)

    def list_all(self) -> List[PaymentReceipt]:
        """Return every receipt issued so far, oldest first."""
        with self._lock:
            return list(self._transactions)

    def pay(self, request: PaymentRequest) -> PaymentReceipt:
        """Accept and record a payment, or raise ``PaymentRejectedError``.

        Requests that slipped past schema validation (empty or non
        string card, non positive amount) are rejected like any other
        unpayable request.
        """
        if not self._is_payable(request):
            amount = getattr(request, "amount", None)
            logger.info("Payment rejected: %s", format_amount(amount))
            raise PaymentRejectedError(amount)

        receipt = PaymentReceipt(
            pay_receipt_id=RECEIPT_PREFIX + str(uuid.uuid4()),
            amount=request.amount,
        )
        with self._lock:
            self._transactions.append(receipt)
        logger.info("Payment accepted(%s): %s", receipt.pay_receipt_id, format_amount(receipt.amount))
        return receipt

    def _is_payable(self, request: PaymentRequest) -> bool:
        card = getattr(request, "credit_card", None)
        amount = getattr(request, "amount", None)
        if not isinstance(card, str) or not card:
            return False
        if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not amount > 0:
            return False
        if not math.isfinite(amount):
            return False
        return self.acceptance_token in card
