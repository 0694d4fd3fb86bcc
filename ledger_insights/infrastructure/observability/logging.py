"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from ledger_insights.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_analysis(
    request_id: str,
    transaction_count: int,
    health_status: str,
    subscription_count: int,
    duration_ms: float,
) -> None:
    """Log structured analysis outcome"""
    logging.info(
        "Analysis completed",
        extra={
            "request_id": request_id,
            "step": "analysis_complete",
            "transaction_count": transaction_count,
            "health_status": health_status,
            "subscription_count": subscription_count,
            "duration_ms": duration_ms,
        },
    )
