"""
Error taxonomy shared by the clinic services and its HTTP translation.

Services raise:
- django.core.exceptions.ValidationError for malformed or missing input
- NotFoundError when an update/delete references a missing record
- StoreError when the database fails underneath an operation

api_exception_handler maps them to DRF responses.
"""
from contextlib import contextmanager

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.core.observability import metrics, get_sanitized_logger

logger = get_sanitized_logger(__name__)


class ClinicError(Exception):
    """Base exception for clinic service errors."""
    pass


class NotFoundError(ClinicError):
    """Raised when a record referenced by id does not exist."""

    def __init__(self, entity_type, entity_id):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f'{entity_type} with id {entity_id} not found')


class StoreError(ClinicError):
    """Raised when the underlying database fails. Never retried."""

    def __init__(self, operation, message):
        self.operation = operation
        super().__init__(f'{operation} failed: {message}')


@contextmanager
def store_errors(operation):
    """
    Translate database failures raised inside the block into StoreError.

    Usage:
        with store_errors('create_order'):
            with transaction.atomic():
                ...
    """
    try:
        yield
    except DatabaseError as e:
        metrics.exceptions_total.labels(
            exception_type=e.__class__.__name__,
            location=operation
        ).inc()
        logger.error(
            f'Store failure during {operation}',
            extra={
                'event': 'store_error',
                'operation': operation,
                'error_type': e.__class__.__name__,
                'error': str(e),
            }
        )
        raise StoreError(operation, str(e)) from e


def validation_detail(exc):
    """Return a JSON-friendly payload for a Django ValidationError."""
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return exc.messages


def api_exception_handler(exc, context):
    """
    DRF exception handler aware of the service error taxonomy.

    - Django ValidationError -> 400 with field messages
    - NotFoundError -> 404
    - StoreError -> 503
    """
    if isinstance(exc, DjangoValidationError):
        exc = DRFValidationError(detail=validation_detail(exc))
    elif isinstance(exc, NotFoundError):
        exc = NotFound(detail=str(exc))
    elif isinstance(exc, StoreError):
        return Response(
            {
                'error': 'The record store is unavailable',
                'error_type': 'store_error',
                'operation': exc.operation,
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return exception_handler(exc, context)
