"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Depends, Request
from payment_gateway.config import settings
from payment_gateway.domain.processing import Clock, PaymentProcessor
from payment_gateway.infrastructure.clients.bank import BankClient
from payment_gateway.infrastructure.storage.repositories import InMemoryPaymentRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bank_client() -> BankClient:
    """Provide acquiring bank client configured from settings"""
    return BankClient(
        base_url=settings.bank_simulator_url,
        timeout=settings.http_timeout_seconds,
    )


def get_payment_repository(request: Request) -> InMemoryPaymentRepository:
    """Provide the application's shared payment store"""
    return request.app.state.payment_repository


def get_clock() -> Clock:
    """Provide the source of the current date used for expiry checks"""
    return date.today


def get_payment_processor(
    bank_client: BankClient = Depends(get_bank_client),
    repository: InMemoryPaymentRepository = Depends(get_payment_repository),
    clock: Clock = Depends(get_clock),
) -> PaymentProcessor:
    """Provide a payment processor wired to the bank and store"""
    return PaymentProcessor(bank_client=bank_client, repository=repository, clock=clock)
