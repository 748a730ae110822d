"""Unit tests for the in-memory payment store"""

import uuid
import pytest
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError, replace
from payment_gateway.domain.exceptions import PaymentNotFoundError
from payment_gateway.domain.models import PaymentRecord, PaymentStatus
from payment_gateway.infrastructure.storage.repositories import InMemoryPaymentRepository


def make_record(**overrides) -> PaymentRecord:
    fields = dict(
        id=uuid.uuid4(),
        status=PaymentStatus.AUTHORIZED,
        card_number_last_four="4321",
        expiry_month=4,
        expiry_year=2030,
        currency="USD",
        amount=1050,
    )
    fields.update(overrides)
    return PaymentRecord(**fields)


def test_add_then_get(repository: InMemoryPaymentRepository):
    record = make_record()
    repository.add(record)

    assert repository.get(record.id) is record
    assert record.id in repository


def test_get_is_idempotent(repository: InMemoryPaymentRepository):
    record = make_record()
    repository.add(record)

    first = repository.get(record.id)
    second = repository.get(record.id)

    assert first is second is record


def test_get_unknown_id_raises(repository: InMemoryPaymentRepository):
    missing = uuid.uuid4()

    with pytest.raises(PaymentNotFoundError) as exc_info:
        repository.get(missing)

    assert exc_info.value.payment_id == missing


def test_same_id_overwrites(repository: InMemoryPaymentRepository):
    record = make_record()
    replacement = replace(record, status=PaymentStatus.DECLINED)

    repository.add(record)
    repository.add(replacement)

    assert repository.get(record.id) is replacement
    assert len(repository) == 1


def test_records_are_immutable():
    record = make_record()

    with pytest.raises(FrozenInstanceError):
        record.status = PaymentStatus.DECLINED


def test_store_holds_many_distinct_records(repository: InMemoryPaymentRepository):
    for _ in range(10_000):
        repository.add(make_record())

    assert len(repository) == 10_000


def test_concurrent_inserts_are_not_lost(repository: InMemoryPaymentRepository):
    records = [make_record(amount=i + 1) for i in range(2_000)]

    def add_and_read(record: PaymentRecord) -> PaymentRecord:
        repository.add(record)
        return repository.get(record.id)

    with ThreadPoolExecutor(max_workers=16) as pool:
        read_back = list(pool.map(add_and_read, records))

    assert read_back == records
    assert len(repository) == len(records)
    assert all(repository.get(r.id) is r for r in records)
