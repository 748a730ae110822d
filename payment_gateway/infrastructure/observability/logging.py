"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from payment_gateway.domain.models import PaymentRequest


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = "payment-gateway", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = "payment-gateway") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def mask_request(request: PaymentRequest) -> Dict[str, Any]:
    """Request shape safe to log: no full card number, no CVV"""
    card_number = request.card_number or ""
    return {
        "card_number_last_four": card_number[-4:],
        "card_number_length": len(card_number),
        "expiry_month": request.expiry_month,
        "expiry_year": request.expiry_year,
        "currency": request.currency,
        "amount": request.amount,
    }


def log_payment(
    request_id: str,
    payment_id: str,
    status: str,
    duration_ms: float,
) -> None:
    """Log structured payment outcome for analysis"""
    logging.info(
        "Payment processed",
        extra={
            "request_id": request_id,
            "payment_id": payment_id,
            "step": "payment_complete",
            "payment_status": status,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, reason: str, request: PaymentRequest) -> None:
    """Log a rejected payment with enough context to diagnose it"""
    logging.warning(
        "Payment rejected",
        extra={
            "request_id": request_id,
            "step": "payment_rejected",
            "rejection_reason": reason,
            "payment_request": mask_request(request),
        },
    )
