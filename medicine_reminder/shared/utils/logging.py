# 📄 File: medicine_reminder/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the app's logging so every sign-in attempt, server call and local save
# leaves a structured trace that is easy to search when something goes wrong.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), contextual operation
# identifiers via contextvars, and a StructuredLogger wrapper that accepts extra fields.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Operation context tracking

# 🔄 Connected Modules / Calls From:
# Used by: medicine_reminder.main (setup), API client, auth controller,
# auth server/local repositories, medicine repository

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from medicine_reminder.shared.config.settings import Settings

# Context variables for operation tracking
operation_id_var: ContextVar[str] = ContextVar('operation_id', default='')
operation_name_var: ContextVar[str] = ContextVar('operation_name', default='')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'medicine-reminder'


class ContextFilter(logging.Filter):
    """
    Adds operation context and service information to every record.
    """

    def __init__(self, service_name: str = SERVICE_NAME):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.operation_id = operation_id_var.get('')
        record.operation = operation_name_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()

        if hasattr(record, 'extra_fields') and record.extra_fields:
            for key, value in record.extra_fields.items():
                if not hasattr(record, key):
                    setattr(record, key, value)

        return True


class StructuredJSONFormatter(JsonFormatter):
    """
    JSON formatter producing one object per record with a stable key set.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = getattr(record, 'timestamp', datetime.now(timezone.utc).isoformat())
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)

        if getattr(record, 'operation_id', ''):
            log_record['operation_id'] = record.operation_id
        if getattr(record, 'operation', ''):
            log_record['operation'] = record.operation

        # extra_fields were already flattened by ContextFilter
        log_record.pop('extra_fields', None)


class StructuredLogger:
    """
    Logger wrapper with structured logging capabilities.

    Accepts an ``extra`` dict (or keyword arguments) on every call and
    forwards them as structured fields.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        """Log critical message with extra fields."""
        self._log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)

    def log_external_api_call(
        self,
        api_name: str,
        method: str,
        url: str,
        status_code: Optional[int],
        duration_ms: float,
        extra: Optional[Dict] = None
    ):
        """Log one outbound HTTP call."""
        extra_fields = {
            'event_type': 'external_api_call',
            'api_name': api_name,
            'method': method,
            'url': url,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
            **(extra or {})
        }
        level = logging.INFO if status_code is not None and status_code < 400 else logging.WARNING

        self._log(
            level,
            f"{api_name} {method} {url} - {status_code} - {duration_ms:.2f}ms",
            extra_fields
        )

    def log_state_transition(self, component: str, description: str, extra: Optional[Dict] = None):
        """Log a published state snapshot."""
        self.debug(
            f"{component}: {description}",
            extra={'event_type': 'state_transition', 'component': component, **(extra or {})}
        )


def setup_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Setup application logging configuration.

    Explicit arguments win over values from ``settings``; without either the
    defaults are INFO level and JSON output.

    Args:
        settings: Application settings to read LOG_LEVEL/LOG_FORMAT/LOG_FILE from;
            DEBUG=True forces DEBUG level
        log_level: Override log level
        log_format: 'json' or 'text'
        log_file: Optional file to log to in addition to the console
        enable_console: Attach a stdout handler
        force: Reconfigure even if logging was already set up

    Returns:
        The 'startup' logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger('startup')

    if settings is not None:
        log_level = log_level or ('DEBUG' if settings.DEBUG else settings.LOG_LEVEL)
        log_format = log_format or settings.LOG_FORMAT
        log_file = log_file or settings.LOG_FILE

    log_level = log_level or 'INFO'
    log_format = log_format or 'json'

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = StructuredJSONFormatter('%(message)s')
    else:
        formatter = logging.Formatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    context_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger('startup')


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(operation: str, operation_id: Optional[str] = None):
    """
    Context manager tagging every log record inside it with an operation.

    Args:
        operation: Name of the user action (e.g. 'login')
        operation_id: Identifier; generated when omitted
    """
    if operation_id is None:
        operation_id = str(uuid4())

    id_token = operation_id_var.set(operation_id)
    name_token = operation_name_var.set(operation)

    try:
        yield {'operation': operation, 'operation_id': operation_id}
    finally:
        operation_id_var.reset(id_token)
        operation_name_var.reset(name_token)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    """Log application shutdown event."""
    logger = get_logger('shutdown')
    logger.info(
        f"Service {service_name} shutting down",
        extra={
            'event_type': 'service_shutdown',
            'service_name': service_name,
            **(extra or {})
        }
    )
