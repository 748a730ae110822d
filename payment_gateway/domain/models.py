"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass
from enum import Enum


class PaymentStatus(str, Enum):
    """Terminal outcome of an authorization attempt"""

    AUTHORIZED = "Authorized"
    DECLINED = "Declined"

    @classmethod
    def from_authorization(cls, authorized: bool) -> "PaymentStatus":
        return cls.AUTHORIZED if authorized else cls.DECLINED


@dataclass
class PaymentRequest:
    """Card payment as submitted by the merchant"""

    card_number: str | None
    expiry_month: int
    expiry_year: int
    currency: str | None
    amount: int  # minor units
    cvv: int | str


@dataclass(frozen=True)
class BankAuthorizationRequest:
    """Request body sent to the acquiring bank"""

    card_number: str
    expiry_date: str  # MM/YYYY
    currency: str
    amount: int
    cvv: str


@dataclass(frozen=True)
class BankAuthorizationResult:
    """Acquiring bank decision"""

    authorized: bool
    authorization_code: str | None = None


@dataclass(frozen=True)
class PaymentRecord:
    """Stored outcome of a processed payment"""

    id: uuid.UUID
    status: PaymentStatus
    card_number_last_four: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int
