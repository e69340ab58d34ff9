"""Structured JSON logging for the calculator service"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, TextIO

from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter adding timestamp, level and service name"""

    def __init__(self, *args: Any, service_name: str = "apy-calculator", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(
    level: str = "INFO",
    json: bool = True,
    service_name: str = "apy-calculator",
    stream: Optional[TextIO] = None,
) -> None:
    """Configure root logging, JSON on stdout unless ``json`` is False"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    if json:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            service_name=service_name,
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(principal: float, apy: float, method: str, year_earn: float) -> None:
    """Log structured calculation outcome"""
    logging.getLogger("apycalc.calculation").info(
        "Calculation completed",
        extra={
            "step": "calculation_complete",
            "principal": principal,
            "apy": apy,
            "method": method,
            "year_earn": year_earn,
        },
    )


def log_rejected_input(kinds: Iterable[str]) -> None:
    logging.getLogger("apycalc.validation").warning(
        "Input rejected",
        extra={"step": "validation", "error_kinds": list(kinds)},
    )
