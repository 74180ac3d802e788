# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a smart logging system that records what the plant AI helpers do
# in a structured way, so we can see which agent failed, how long it took and how many tokens it cost.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting (python-json-logger), contextual
# request information, external API call tracking and AI operation metrics.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main, API client, inference client, agents, coordinator, chat services

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

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

SERVICE_NAME = 'plantitas-ai'

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter that adds contextual information to log records.

    Adds request ID, correlation ID and service name to every message
    so plain-text logs stay traceable in development.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.correlation_id = correlation_id_var.get('')
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()

        if hasattr(record, 'extra_fields') and record.extra_fields:
            for key, value in record.extra_fields.items():
                setattr(record, key, value)

        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('json_ensure_ascii', False)
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()
        self.service_name = SERVICE_NAME

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = self.service_name
        log_record['hostname'] = self.hostname

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()
        if correlation_id_var.get():
            log_record['correlation_id'] = correlation_id_var.get()

        # extra_fields is nested under "extra" rather than flattened
        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    """
    Logger for tracking performance metrics and timing information.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
        success: bool,
        extra: Dict = None
    ):
        """Log external API call performance."""
        extra_fields = {
            'event_type': 'external_api_call',
            'api_name': api_name,
            'endpoint': endpoint,
            'method': method,
            'status_code': status_code,
            'duration_ms': duration_ms,
            'success': success,
            **(extra or {})
        }

        level = logging.INFO if success else logging.WARNING
        self.logger.log(
            level,
            f"API {api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': extra_fields}
        )

    def log_ai_operation(
        self,
        operation: str,
        model: str,
        success: bool,
        duration_ms: float,
        tokens_used: Optional[int] = None,
        estimated_cost: Optional[float] = None,
        error: Optional[str] = None,
        extra: Dict = None
    ):
        """Log one inference call with its token usage."""
        extra_fields = {
            'event_type': 'ai_operation',
            'operation': operation,
            'model': model,
            'success': success,
            'duration_ms': duration_ms,
            **(extra or {})
        }

        if tokens_used is not None:
            extra_fields['tokens_used'] = tokens_used
        if estimated_cost is not None:
            extra_fields['estimated_cost_usd'] = estimated_cost
        if error:
            extra_fields['error'] = error

        level = logging.INFO if success else logging.WARNING
        self.logger.log(
            level,
            f"AI {operation} on {model} - {'ok' if success else 'failed'} - {duration_ms:.2f}ms",
            extra={'extra_fields': extra_fields}
        )


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Provides methods for logging different types of events with
    consistent structure and contextual information.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
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


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    log_file: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Falls back to the values in Settings for anything not passed explicitly.
    Calling it twice is a no-op.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


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
def log_context(request_id: str = None, correlation_id: str = None):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        correlation_id: Correlation identifier for distributed tracing
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    correlation_token = correlation_id_var.set(correlation_id or '')

    try:
        yield {
            'request_id': request_id,
            'correlation_id': correlation_id
        }
    finally:
        request_id_var.reset(request_token)
        correlation_id_var.reset(correlation_token)


def log_startup_event(service_name: str, version: str, extra: Dict = None):
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


def log_shutdown_event(service_name: str, extra: Dict = None):
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
