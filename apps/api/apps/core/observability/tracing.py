"""
Tracing support via the OpenTelemetry API.

Spans are no-ops until an OpenTelemetry SDK is configured for the process.
"""
import logging
import time
from contextlib import contextmanager
from typing import Optional, Dict, Any

from opentelemetry import trace

logger = logging.getLogger(__name__)

tracer = trace.get_tracer(__name__)


@contextmanager
def trace_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """
    Context manager for creating internal trace spans.

    Args:
        name: Span name
        attributes: Span attributes

    Usage:
        with trace_span('create_order', attributes={'item_count': 3}):
            ...
    """
    start_time = time.time()

    with tracer.start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)

        try:
            yield span
        except Exception as e:
            span.set_attribute('error', True)
            span.set_attribute('error.type', e.__class__.__name__)
            logger.debug(
                f'Span failed: {name}',
                extra={
                    'event': 'span_error',
                    'span_name': name,
                    'duration_ms': round((time.time() - start_time) * 1000, 2),
                    'error_type': e.__class__.__name__,
                }
            )
            raise
