"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "credit-ledger"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_matrix_built(
    request_id: str,
    account_filter: str,
    account_count: int,
    month_count: int,
    duration_ms: float,
) -> None:
    """Log structured payment matrix build for analysis"""
    logging.info(
        "Payment matrix built",
        extra={
            "request_id": request_id,
            "step": "matrix_built",
            "account_filter": account_filter,
            "account_count": account_count,
            "month_count": month_count,
            "duration_ms": duration_ms,
        },
    )


def log_overlay_toggled(request_id: str, account_name: str, month_key: str, is_paid: bool) -> None:
    """Log a user toggle of a paid-month mark"""
    logging.info(
        "Paid month toggled",
        extra={
            "request_id": request_id,
            "step": "overlay_toggled",
            "account_name": account_name,
            "month_key": month_key,
            "state": "paid" if is_paid else "unpaid",
        },
    )
