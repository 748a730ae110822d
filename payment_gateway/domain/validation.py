"""Payment request validation - ordered business rules applied before any bank call"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional
from payment_gateway.domain.models import PaymentRequest

ALLOWED_CURRENCIES = frozenset({"USD", "EUR", "GBP"})

CARD_NUMBER_MIN_LENGTH = 14
CARD_NUMBER_MAX_LENGTH = 19


class RejectionReason(str, Enum):
    """Why a payment was refused. The value is the stable code returned to callers."""

    CARD_NUMBER_REQUIRED = "card_number_required"
    CARD_NUMBER_LENGTH = "card_number_length"
    CARD_NUMBER_NOT_NUMERIC = "card_number_not_numeric"
    EXPIRY_MONTH_INVALID = "expiry_month_invalid"
    EXPIRY_YEAR_PAST = "expiry_year_past"
    CARD_EXPIRED = "card_expired"
    CURRENCY_REQUIRED = "currency_required"
    CURRENCY_LENGTH = "currency_length"
    CURRENCY_NOT_ALLOWED = "currency_not_allowed"
    AMOUNT_NOT_POSITIVE = "amount_not_positive"
    CVV_LENGTH = "cvv_length"
    CVV_NOT_NUMERIC = "cvv_not_numeric"
    BANK_UNAVAILABLE = "bank_unavailable"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    RejectionReason.CARD_NUMBER_REQUIRED: "Card number is required",
    RejectionReason.CARD_NUMBER_LENGTH: "Card number must be between 14 and 19 characters long",
    RejectionReason.CARD_NUMBER_NOT_NUMERIC: "Card number must only contain numeric characters",
    RejectionReason.EXPIRY_MONTH_INVALID: "Expiry month must be between 1 and 12",
    RejectionReason.EXPIRY_YEAR_PAST: "Expiry year must be in the future",
    RejectionReason.CARD_EXPIRED: "Card has expired - expiry date must be in the future",
    RejectionReason.CURRENCY_REQUIRED: "Currency is required",
    RejectionReason.CURRENCY_LENGTH: "Currency must be 3 characters",
    RejectionReason.CURRENCY_NOT_ALLOWED: "Currency must be one of: " + ", ".join(sorted(ALLOWED_CURRENCIES)),
    RejectionReason.AMOUNT_NOT_POSITIVE: "Amount must be greater than zero",
    RejectionReason.CVV_LENGTH: "CVV must be 3-4 characters long",
    RejectionReason.CVV_NOT_NUMERIC: "CVV must only contain numeric characters",
    RejectionReason.BANK_UNAVAILABLE: "Failed to process payment with bank",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validation: valid, or the first rule that failed"""

    reason: Optional[RejectionReason] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None


VALID = ValidationResult()


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return value.isascii() and value.isdigit()


def validate_payment_request(request: PaymentRequest, today: date) -> ValidationResult:
    """
    Check a payment request against the gateway's acceptance rules.

    Rules run in a fixed order and the first failure is returned, so the
    caller always sees a single, deterministic reason:
    card number, expiry month, expiry date, currency, amount, CVV.

    Args:
        request: Payment as submitted by the merchant
        today: Current date, injected so expiry checks are deterministic

    Returns:
        VALID, or a ValidationResult carrying the RejectionReason
    """
    card_number = request.card_number
    if not card_number:
        return ValidationResult(RejectionReason.CARD_NUMBER_REQUIRED)
    if not CARD_NUMBER_MIN_LENGTH <= len(card_number) <= CARD_NUMBER_MAX_LENGTH:
        return ValidationResult(RejectionReason.CARD_NUMBER_LENGTH)
    if not _is_ascii_digits(card_number):
        return ValidationResult(RejectionReason.CARD_NUMBER_NOT_NUMERIC)

    if not 1 <= request.expiry_month <= 12:
        return ValidationResult(RejectionReason.EXPIRY_MONTH_INVALID)
    if request.expiry_year < today.year:
        return ValidationResult(RejectionReason.EXPIRY_YEAR_PAST)
    if request.expiry_year == today.year and request.expiry_month < today.month:
        return ValidationResult(RejectionReason.CARD_EXPIRED)

    currency = request.currency
    if not currency:
        return ValidationResult(RejectionReason.CURRENCY_REQUIRED)
    if len(currency) != 3:
        return ValidationResult(RejectionReason.CURRENCY_LENGTH)
    if currency.upper() not in ALLOWED_CURRENCIES:
        return ValidationResult(RejectionReason.CURRENCY_NOT_ALLOWED)

    if request.amount <= 0:
        return ValidationResult(RejectionReason.AMOUNT_NOT_POSITIVE)

    cvv = str(request.cvv)
    if not 3 <= len(cvv) <= 4:
        return ValidationResult(RejectionReason.CVV_LENGTH)
    if not _is_ascii_digits(cvv):
        return ValidationResult(RejectionReason.CVV_NOT_NUMERIC)

    return VALID
