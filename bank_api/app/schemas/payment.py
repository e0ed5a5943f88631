"""
Pydantic models for payment data.

Field names are snake_case in Python and camelCase on the wire
(``creditCard``, ``payReceiptId``), matching the JSON contract that
existing clients of the bank already speak.
"""

from pydantic import BaseModel, Field


class PaymentRequest(BaseModel):
    """Schema for a credit card payment request."""

    credit_card: str = Field(..., alias="creditCard", min_length=1, strict=True, examples=["1230896983"])
    amount: float = Field(..., gt=0, strict=True, allow_inf_nan=False, examples=[43.7])

    model_config = {
        "populate_by_name": True,
    }


class PaymentReceipt(BaseModel):
    """Schema for the receipt of an accepted payment."""

    pay_receipt_id: str = Field(
        ...,
        alias="payReceiptId",
        min_length=1,
        examples=["RECEIPT:0b6f1a44-4c1e-4f7a-9d55-3f1ad3c7e2b1"],
    )
    amount: float = Field(..., gt=0, examples=[43.7])

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }
