"""Data access layer for payment records"""

import threading
import uuid
from typing import Dict
from payment_gateway.domain.models import PaymentRecord
from payment_gateway.domain.exceptions import PaymentNotFoundError


class InMemoryPaymentRepository:
    """Process-lifetime payment store. Records are never evicted."""

    def __init__(self):
        self._payments: Dict[uuid.UUID, PaymentRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: PaymentRecord) -> None:
        """Store a record under its id, replacing any record with the same id"""
        with self._lock:
            self._payments[record.id] = record

    def get(self, payment_id: uuid.UUID) -> PaymentRecord:
        """
        Fetch a stored payment.

        Raises:
            PaymentNotFoundError: If no payment has this id
        """
        with self._lock:
            record = self._payments.get(payment_id)
        if record is None:
            raise PaymentNotFoundError(payment_id)
        return record

    def __contains__(self, payment_id: object) -> bool:
        with self._lock:
            return payment_id in self._payments

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)
