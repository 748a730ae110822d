"""Domain-specific exceptions"""

import uuid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_gateway.domain.validation import RejectionReason


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class BankUnavailableError(DomainException):
    """Acquiring bank could not be reached or returned an unusable response"""

    pass


class PaymentRejected(DomainException):
    """Payment request was refused before an outcome could be recorded"""

    def __init__(self, reason: "RejectionReason"):
        super().__init__(reason.message)
        self.reason = reason


class PaymentNotFoundError(DomainException):
    """No payment is stored under the requested identifier"""

    def __init__(self, payment_id: uuid.UUID):
        super().__init__(f"Payment {payment_id} not found")
        self.payment_id = payment_id
