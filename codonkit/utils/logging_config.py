"""
Logging configuration for codonkit.

Plain console output by default, with optional JSON file logging for batch
runs over FASTA datasets.
"""

import logging
import json
import os
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone

LOG_LEVEL_ENV = 'CODONKIT_LOG_LEVEL'


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Add extra fields
        if hasattr(record, 'record_id'):
            log_data['record_id'] = record.record_id
        if hasattr(record, 'operation'):
            log_data['operation'] = record.operation
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class PlainFormatter(logging.Formatter):
    """Format log records as plain text for console output"""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )


def console_level_from_env(default: int = logging.WARNING) -> int:
    """Resolve console level from CODONKIT_LOG_LEVEL (name or number)"""
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def setup_logging(
    log_file: Optional[Path] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    json_format: bool = False
) -> logging.Logger:
    """
    Setup logging configuration for codonkit.

    Args:
        log_file: Path to log file (optional)
        console_level: Logging level for console (stderr)
        file_level: Logging level for file
        json_format: Use JSON format for file logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger('codonkit')
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console goes to stderr so stdout stays clean for results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(PlainFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(file_level)

        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(PlainFormatter())

        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(f'codonkit.{name}')


class LogContext:
    """Context manager for adding context to log records"""

    def __init__(self, logger: logging.Logger, **context):
        self.logger = logger
        self.context = context
        self.old_factory = None

    def __enter__(self):
        self.old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = self.old_factory(*args, **kwargs)
            for key, value in self.context.items():
                setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        logging.setLogRecordFactory(self.old_factory)
