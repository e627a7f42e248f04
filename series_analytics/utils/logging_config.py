"""Logging configuration for series analytics."""

import logging
import sys
import json
from pathlib import Path
from typing import Optional
from datetime import datetime


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineNo": record.lineno,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # Structured fields passed as extra={"props": {...}}
        if hasattr(record, "props"):
            log_obj.update(record.props)

        return json.dumps(log_obj, default=str)


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
) -> None:
    """
    Setup logging configuration.

    Args:
        log_level: Logging level (INFO, DEBUG, etc.)
        log_dir: Directory for JSON-lines log files; console only when None
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    root_logger.handlers = []

    # Console Handler (Human readable)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(f"{log_dir}/app.jsonl")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

        # Separate Error Log
        error_handler = logging.FileHandler(f"{log_dir}/errors.jsonl")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(error_handler)

    logging.info(f"Logging configured with level {log_level}")
