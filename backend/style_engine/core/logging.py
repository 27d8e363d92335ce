"""JSON structured logging configuration."""
import json
import logging
import os
import sys
from datetime import datetime, timezone

# Record attributes passed via ``extra=`` that are copied into the JSON entry.
CONTEXT_FIELDS = ("operation", "project_id", "character_id", "style_definition_id", "error_type")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Always carries timestamp, level, service (the logger name) and message;
    adds any CONTEXT_FIELDS present on the record and the traceback when an
    exception is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_entry[field] = value
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["error_type"] = record.exc_info[0].__name__
            log_entry["error_detail"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging(service_name: str = "style_engine") -> logging.Logger:
    """Attach the JSON handler to ``service_name`` and return that logger.

    The default configures the package logger, so every
    ``logging.getLogger(__name__)`` under style_engine emits JSON. The level
    comes from LOG_LEVEL (default INFO); repeated calls add no handlers.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

    return logger
