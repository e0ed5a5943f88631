"""Reusable FastAPI dependencies."""

from fastapi import Request

from bank_api.app.services.payment_service import PaymentLedger


def get_ledger(request: Request) -> PaymentLedger:
    """Return the ledger owned by the running application."""
    return request.app.state.ledger
