"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union

from payment_gateway.domain.models import PaymentRecord, PaymentRequest
from payment_gateway.utils.date_utils import parse_expiry_date


class PaymentRequestBody(BaseModel):
    """Request body for POST /v1/payments"""

    # Presence and content rules for card number and currency belong to the
    # domain validator so callers get a specific rejection reason.
    card_number: Optional[str] = Field(None, description="Primary account number, digits only")
    expiry_date: str = Field(..., description="Card expiry as MM/YYYY")
    currency: Optional[str] = Field(None, description="ISO 4217 currency code")
    amount: int = Field(..., description="Amount in minor units")
    cvv: Union[int, str] = Field(..., description="Card verification value")

    @field_validator("expiry_date")
    @classmethod
    def check_expiry_format(cls, value: str) -> str:
        parse_expiry_date(value)
        return value

    def to_domain(self) -> PaymentRequest:
        expiry_month, expiry_year = parse_expiry_date(self.expiry_date)
        return PaymentRequest(
            card_number=self.card_number,
            expiry_month=expiry_month,
            expiry_year=expiry_year,
            currency=self.currency,
            amount=self.amount,
            cvv=self.cvv,
        )


class PaymentResponse(BaseModel):
    """Response for POST /v1/payments and GET /v1/payments/{payment_id}"""

    id: str
    status: str
    card_number_last_four: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int

    @classmethod
    def from_record(cls, record: PaymentRecord) -> "PaymentResponse":
        return cls(
            id=str(record.id),
            status=record.status.value,
            card_number_last_four=record.card_number_last_four,
            expiry_month=record.expiry_month,
            expiry_year=record.expiry_year,
            currency=record.currency,
            amount=record.amount,
        )


class RejectionDetail(BaseModel):
    """Error detail for a rejected payment"""

    code: str
    message: str
