"""Payment processing pipeline - validate, authorize with the bank, record the outcome"""

import logging
import uuid
from datetime import date
from typing import Callable, Protocol
from payment_gateway.domain.models import (
    BankAuthorizationResult,
    PaymentRecord,
    PaymentRequest,
    PaymentStatus,
)
from payment_gateway.domain.exceptions import BankUnavailableError, PaymentRejected
from payment_gateway.domain.validation import RejectionReason, validate_payment_request

Clock = Callable[[], date]


class Authorizer(Protocol):
    async def authorize(self, request: PaymentRequest) -> BankAuthorizationResult: ...


class PaymentStore(Protocol):
    def add(self, record: PaymentRecord) -> None: ...

    def get(self, payment_id: uuid.UUID) -> PaymentRecord: ...


def last_four_digits(card_number: str) -> str:
    """Last four characters of the card number, kept as text so leading zeros survive"""
    return card_number[-4:]


class PaymentProcessor:
    """Orchestrates a single authorize-and-record operation"""

    def __init__(self, bank_client: Authorizer, repository: PaymentStore, clock: Clock = date.today):
        self.bank_client = bank_client
        self.repository = repository
        self.clock = clock

    async def process_payment(self, request: PaymentRequest) -> PaymentRecord:
        """
        Process a card payment.

        Flow:
        1. Validate the request (first failing rule wins)
        2. Ask the bank for an authorization, once
        3. Build an immutable record with a fresh id
        4. Store it
        5. Return it

        A declined authorization is returned as a record with status Declined.

        Raises:
            PaymentRejected: If validation fails or the bank is unavailable
        """
        result = validate_payment_request(request, self.clock())
        if not result.is_valid:
            raise PaymentRejected(result.reason)

        try:
            authorization = await self.bank_client.authorize(request)
        except BankUnavailableError as e:
            raise PaymentRejected(RejectionReason.BANK_UNAVAILABLE) from e

        record = PaymentRecord(
            id=uuid.uuid4(),
            status=PaymentStatus.from_authorization(authorization.authorized),
            card_number_last_four=last_four_digits(request.card_number),
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            currency=request.currency.upper(),
            amount=request.amount,
        )
        self.repository.add(record)

        logging.debug(
            f"Bank authorization for payment {record.id}: {record.status.value}",
            extra={"authorization_code": authorization.authorization_code},
        )
        return record

    def get_payment(self, payment_id: uuid.UUID) -> PaymentRecord:
        """
        Look up a previously processed payment.

        Raises:
            PaymentNotFoundError: If the id is unknown
        """
        return self.repository.get(payment_id)
