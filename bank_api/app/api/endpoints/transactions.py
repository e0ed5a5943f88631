"""
Credit card transaction endpoints.

``GET`` lists every accepted payment in the order it was accepted and
``POST`` submits a new one.  Bodies are validated against
``PaymentRequest`` before the ledger is called, so the only error the
ledger can report here is a business rejection, answered with 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from bank_api.app.api.deps import get_ledger
from bank_api.app.schemas.payment import PaymentReceipt, PaymentRequest
from bank_api.app.services.payment_service import PaymentLedger, PaymentRejectedError

router = APIRouter()


@router.get("", response_model=List[PaymentReceipt])
def get_all_transactions(ledger: PaymentLedger = Depends(get_ledger)) -> List[PaymentReceipt]:
    """Return all accepted payments, most recent last."""
    return ledger.list_all()


@router.post("", response_model=PaymentReceipt, status_code=status.HTTP_201_CREATED)
def pay_by_credit_card(
    payment: PaymentRequest,
    ledger: PaymentLedger = Depends(get_ledger),
) -> PaymentReceipt:
    """Pay ``amount`` with the given credit card.

    Returns the receipt of the accepted payment.  A card that does not
    satisfy the bank's acceptance rule yields ``400 Bad Request`` with a
    ``business error`` message.
    """
    try:
        return ledger.pay(payment)
    except PaymentRejectedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"business error: {e}")
