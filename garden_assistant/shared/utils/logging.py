# 📄 File: garden_assistant/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Writes down what the assistant does (which photo was analyzed, which AI call was slow,
# which reminder fired) in a tidy, searchable way, tagged with the request it belongs to.

# 🧪 Purpose (Technical Summary):
# Root logger setup (JSON via python-json-logger or contextual text), a StructuredLogger
# wrapper that carries `extra` fields, timing helpers for HTTP requests and Gemini calls,
# business events, and a request-id context variable bound by the request middleware.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging / contextvars (standard library)

# 🔄 Connected Modules / Calls From:
# Used by: every module via get_logger(), request logging middleware (log_context),
# Gemini client (performance logging), app lifespan (setup, startup/shutdown events)

import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from garden_assistant.shared.config.settings import Settings, get_settings

request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'garden-assistant-api'
HOSTNAME = socket.gethostname()

_PASSTHROUGH_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

_logging_configured = False
_loggers: Dict[str, "StructuredLogger"] = {}


def _context_fields() -> Dict[str, Any]:
    fields = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': SERVICE_NAME,
        'hostname': HOSTNAME,
    }
    request_id = request_id_var.get()
    if request_id:
        fields['request_id'] = request_id
    return fields


class ContextualFormatter(logging.Formatter):
    """Text formatter; `extra` fields are appended as key=value pairs."""

    def format(self, record):
        context = _context_fields()
        for key, value in context.items():
            setattr(record, key, value)
        line = super().format(record)

        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            line += ' | ' + ' '.join(f"{k}={v}" for k, v in extra_fields.items())
        if 'request_id' in context:
            line += f" [request_id={context['request_id']}]"
        return line


class JSONFormatter(JsonFormatter):
    """One JSON object per record; `extra` fields are nested under "extra"."""

    def __init__(self):
        super().__init__(json_ensure_ascii=False)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.update(_context_fields())
        log_record.update({
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        })

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    """Timing records for inbound HTTP requests and outbound API calls."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _emit(self, ok: bool, message: str, fields: Dict[str, Any]):
        self.logger.log(logging.INFO if ok else logging.WARNING, message, extra={'extra_fields': fields})

    def log_request(self, method: str, path: str, status_code: int, duration_ms: float, extra: Dict = None):
        self._emit(
            status_code < 500,
            f"HTTP {method} {path} - {status_code} - {duration_ms:.2f}ms",
            {
                'event_type': 'http_request',
                'method': method,
                'path': path,
                'status_code': status_code,
                'duration_ms': duration_ms,
                **(extra or {}),
            },
        )

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: Optional[int],
        duration_ms: float,
        success: bool,
        extra: Dict = None,
    ):
        self._emit(
            success,
            f"API {api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            {
                'event_type': 'external_api_call',
                'api_name': api_name,
                'endpoint': endpoint,
                'method': method,
                'status_code': status_code,
                'duration_ms': duration_ms,
                'success': success,
                **(extra or {}),
            },
        )


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    `extra=` dicts and unknown keyword arguments are collected into one
    `extra_fields` mapping that both formatters know how to render.
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

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        passthrough = {k: v for k, v in kwargs.items() if k in _PASSTHROUGH_KWARGS}
        extra_fields = dict(extra or {})
        extra_fields.update({k: v for k, v in kwargs.items() if k not in _PASSTHROUGH_KWARGS})

        if extra_fields:
            passthrough['extra'] = {'extra_fields': extra_fields}
        self.logger.log(level, message, **passthrough)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None
    ):
        """Domain-level event (plant identified, reminder saved, alert raised)."""
        fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            'description': description,
            **(extra or {}),
        }
        if entity_id:
            fields['entity_id'] = entity_id
        if entity_type:
            fields['entity_type'] = entity_type

        self.info(description, extra=fields)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the root logger from settings (LOG_LEVEL, LOG_FORMAT, LOG_FILE).

    Only the first call has an effect.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    if settings.LOG_FORMAT == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for noisy in ('aiohttp', 'asyncio'):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Cached StructuredLogger for `name` (usually __name__)."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


@contextmanager
def log_context(request_id: str = None) -> Iterator[str]:
    """Bind a request id (generated when omitted) to every record logged inside the block."""
    request_id = request_id or str(uuid4())
    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    get_logger('startup').info(
        f"Service {service_name} starting up",
        extra={'event_type': 'service_startup', 'service_name': service_name, 'version': version, **(extra or {})},
    )


def log_shutdown_event(service_name: str, extra: Dict = None):
    get_logger('shutdown').info(
        f"Service {service_name} shutting down",
        extra={'event_type': 'service_shutdown', 'service_name': service_name, **(extra or {})},
    )
