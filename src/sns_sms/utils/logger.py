"""
JSON log lines for the SMS sender.

Each record becomes one JSON object. Structured values go in
``extra={"fields": {...}}`` and come out under the "fields" key.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields = getattr(record, "fields", None)
        if fields:
            payload["fields"] = fields

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str = "sns_sms") -> logging.Logger:
    """
    Return the logger ``name`` with a JSON stream handler attached.

    The handler is attached on the first call only. Level comes from
    LOG_LEVEL (default INFO).
    """
    logger = logging.getLogger(name)
    if getattr(logger, "_sns_sms_json", False):
        return logger

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    stream = logging.StreamHandler()
    stream.setFormatter(JsonFormatter())
    logger.addHandler(stream)
    logger.propagate = False

    logger._sns_sms_json = True  # type: ignore[attr-defined]
    return logger


def mask_phone(phone_number: str) -> str:
    """Keep only the last four digits of a phone number for log output."""
    if not phone_number:
        return ""
    return "***" + phone_number[-4:]
