"""Acquiring bank HTTP client for card authorizations"""

import logging
import httpx
from dataclasses import asdict
from payment_gateway.domain.models import PaymentRequest, BankAuthorizationRequest, BankAuthorizationResult
from payment_gateway.domain.exceptions import BankUnavailableError
from payment_gateway.infrastructure.observability.metrics import bank_latency_histogram
from payment_gateway.utils.date_utils import format_expiry_date


def to_bank_request(request: PaymentRequest) -> BankAuthorizationRequest:
    """Map a validated payment request onto the bank's wire format"""
    return BankAuthorizationRequest(
        card_number=request.card_number,
        expiry_date=format_expiry_date(request.expiry_month, request.expiry_year),
        currency=request.currency.upper(),
        amount=request.amount,
        cvv=str(request.cvv),
    )


class BankClient:
    """Client for the acquiring bank authorization API"""

    def __init__(
        self,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def authorize(self, request: PaymentRequest) -> BankAuthorizationResult:
        """
        Ask the bank to authorize a payment. Makes exactly one attempt.

        A declined authorization is a normal result, not an error.

        Raises:
            BankUnavailableError: On timeout, transport errors, non-2xx status,
                or a response body without a boolean "authorized" field
        """
        bank_request = to_bank_request(request)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with bank_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/payments",
                        json=asdict(bank_request),
                    )
                response.raise_for_status()
                data = response.json()

                authorized = data["authorized"]
                if not isinstance(authorized, bool):
                    raise TypeError(f"'authorized' must be a boolean, got {authorized!r}")

                authorization_code = data.get("authorization_code")
                return BankAuthorizationResult(
                    authorized=authorized,
                    authorization_code=str(authorization_code) if authorization_code is not None else None,
                )

            except httpx.TimeoutException as e:
                logging.error(f"Bank API timeout after {self.timeout}s")
                raise BankUnavailableError(f"Bank API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                logging.error(f"Bank API error: {e.response.status_code}")
                raise BankUnavailableError(f"Bank API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                logging.error(f"Bank API unreachable: {e!r}")
                raise BankUnavailableError(f"Bank API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                logging.error(f"Invalid authorization response from bank: {e!r}")
                raise BankUnavailableError(f"Invalid authorization response from bank: {e}") from e
