"""POST /v1/payments and GET /v1/payments/{payment_id} - card payment endpoints"""

import time
import uuid
from fastapi import APIRouter, Depends, HTTPException, Request

from payment_gateway.api.v1.schemas import PaymentRequestBody, PaymentResponse, RejectionDetail
from payment_gateway.api.dependencies import get_payment_processor, get_request_id
from payment_gateway.domain.processing import PaymentProcessor
from payment_gateway.domain.exceptions import PaymentRejected, PaymentNotFoundError
from payment_gateway.infrastructure.observability.metrics import record_payment, record_rejection
from payment_gateway.infrastructure.observability.logging import log_payment, log_rejection

router = APIRouter()


@router.post(
    "/payments",
    response_model=PaymentResponse,
    responses={400: {"description": "Payment rejected"}},
)
async def create_payment(
    request_body: PaymentRequestBody,
    request: Request,
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    """
    Authorize a card payment with the acquiring bank and record the outcome.

    Returns 200 for both Authorized and Declined outcomes. Rejections
    (invalid input, bank unavailable) return 400.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    payment_request = request_body.to_domain()

    try:
        record = await processor.process_payment(payment_request)
    except PaymentRejected as e:
        record_rejection(e.reason.value)
        log_rejection(request_id, e.reason.value, payment_request)
        detail = RejectionDetail(code=e.reason.value, message=e.reason.message)
        raise HTTPException(status_code=400, detail=detail.model_dump())

    duration_ms = (time.time() - start_time) * 1000
    record_payment(record.status.value)
    log_payment(request_id, str(record.id), record.status.value, duration_ms)

    return PaymentResponse.from_record(record)


@router.get("/payments/{payment_id}", response_model=PaymentResponse)
def get_payment(
    payment_id: str,
    processor: PaymentProcessor = Depends(get_payment_processor),
):
    """Retrieve a previously processed payment"""
    try:
        payment_uuid = uuid.UUID(payment_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid payment ID format")

    try:
        record = processor.get_payment(payment_uuid)
    except PaymentNotFoundError:
        raise HTTPException(status_code=404, detail="Payment not found")

    return PaymentResponse.from_record(record)
