"""
Structured logging with patient data protection.

Provides the correlation filter, the JSON formatter and helpers used by
every module that logs.
"""
import logging
import json
from datetime import datetime, timezone

from .correlation import get_request_id, get_trace_id, get_user_id


# Fields that must never reach a log sink
SENSITIVE_FIELDS = {
    'password',
    'token',
    'access',
    'refresh',
    'secret',
    'api_key',
    'name',
    'patient_name',
    'phone',
    'phone_number',
    'complaint',
    'examination_date',
    'email',
    'address',
}

# Attributes every LogRecord carries; not copied into the JSON payload
_RECORD_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message',
}


class CorrelationFilter(logging.Filter):
    """
    Logging filter that injects correlation context into log records.
    """

    def filter(self, record):
        record.request_id = get_request_id() or '-'
        record.trace_id = get_trace_id() or '-'
        record.user_id = get_user_id() or '-'
        return True


class SanitizedJSONFormatter(logging.Formatter):
    """
    JSON formatter that redacts sensitive fields.
    """

    def format(self, record):
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'request_id': getattr(record, 'request_id', '-'),
            'trace_id': getattr(record, 'trace_id', '-'),
            'user_id': getattr(record, 'user_id', '-'),
        }

        # Fields passed through extra={}
        for key, value in record.__dict__.items():
            if key in log_data or key.startswith('_') or key in _RECORD_ATTRS:
                continue
            if key.lower() in SENSITIVE_FIELDS:
                log_data[key] = '[REDACTED]'
            else:
                log_data[key] = self._sanitize_value(value)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)

    def _sanitize_value(self, value):
        if isinstance(value, dict):
            return sanitize_dict(value)
        if isinstance(value, (list, tuple)):
            return [self._sanitize_value(v) for v in value]
        return value


def get_sanitized_logger(name):
    """
    Get a logger with the correlation filter applied.

    Usage:
        logger = get_sanitized_logger(__name__)
        logger.info('Order created', extra={'order_id': order.id})
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationFilter) for f in logger.filters):
        logger.addFilter(CorrelationFilter())

    return logger


def sanitize_dict(data):
    """
    Return a copy of ``data`` with sensitive keys redacted, recursively.
    """
    if not isinstance(data, dict):
        return data

    sanitized = {}
    for key, value in data.items():
        if str(key).lower() in SENSITIVE_FIELDS:
            sanitized[key] = '[REDACTED]'
        elif isinstance(value, dict):
            sanitized[key] = sanitize_dict(value)
        elif isinstance(value, (list, tuple)):
            sanitized[key] = [
                sanitize_dict(v) if isinstance(v, dict) else v
                for v in value
            ]
        else:
            sanitized[key] = value

    return sanitized
