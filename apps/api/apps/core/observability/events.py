"""
Domain events logging helpers.

Provides structured event logging for clinic and POS operations.
"""
from typing import Dict, Optional

from .logging import get_sanitized_logger, sanitize_dict

logger = get_sanitized_logger(__name__)


def log_domain_event(
    event_name: str,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    entity_ids: Optional[Dict[str, str]] = None,
    result: str = 'success',
    **extra_fields
):
    """
    Log a domain event with structured data.

    Args:
        event_name: Name of the event (e.g., 'pos_order.created')
        entity_type: Type of entity (e.g., 'Order', 'Patient')
        entity_id: ID of primary entity
        entity_ids: Dictionary of related entity IDs
        result: Result of operation (success, failure, etc.)
        **extra_fields: Additional fields to log (will be sanitized)

    Example:
        log_domain_event(
            'pos_order.created',
            entity_type='Order',
            entity_id=str(order.id),
            payment_method='cash',
            item_count=3,
        )
    """
    event_data = {
        'event': event_name,
        'result': result,
    }

    if entity_type:
        event_data['entity_type'] = entity_type

    if entity_id:
        event_data['entity_id'] = entity_id

    if entity_ids:
        event_data.update(entity_ids)

    event_data.update(sanitize_dict(extra_fields))

    if result in ['failure', 'error']:
        logger.error(f'Domain event: {event_name}', extra=event_data)
    elif result in ['warning', 'blocked', 'not_found']:
        logger.warning(f'Domain event: {event_name}', extra=event_data)
    else:
        logger.info(f'Domain event: {event_name}', extra=event_data)


def log_consistency_checkpoint(
    checkpoint_name: str,
    entity_ids: Dict[str, str],
    checks_passed: Dict[str, bool],
    **extra_fields
):
    """
    Log a consistency checkpoint event.

    Used to record that an invariant held (or did not) at a critical point,
    e.g. after an order and its items were written.

    Example:
        log_consistency_checkpoint(
            'pos_order_totals',
            entity_ids={'order_id': str(order.id)},
            checks_passed={'total_matches_items': True},
            item_count=2,
        )
    """
    all_passed = all(checks_passed.values())

    event_data = {
        'event': 'consistency_checkpoint',
        'checkpoint': checkpoint_name,
        'status': 'passed' if all_passed else 'failed',
        'checks': checks_passed,
    }
    event_data.update(entity_ids)
    event_data.update(sanitize_dict(extra_fields))

    if all_passed:
        logger.info(f'Checkpoint passed: {checkpoint_name}', extra=event_data)
    else:
        logger.error(f'Checkpoint FAILED: {checkpoint_name}', extra=event_data)


def log_patient_registered(patient):
    """Log a new patient registration (identifiers only)."""
    log_domain_event(
        'patient.registered',
        entity_type='Patient',
        entity_id=str(patient.pk),
    )


def log_sales_transaction_saved(transaction, action, **extra):
    """Log creation or update of a single-item sales transaction."""
    log_domain_event(
        f'sales_transaction.{action}',
        entity_type='SalesTransaction',
        entity_id=str(transaction.pk),
        quantity=transaction.quantity,
        total=str(transaction.total),
        **extra
    )


def log_order_created(order, item_count, duration_ms=None):
    """Log a completed POS checkout."""
    extra = {
        'payment_method': order.payment_method,
        'item_count': item_count,
        'total': str(order.total),
    }
    if duration_ms is not None:
        extra['duration_ms'] = duration_ms

    log_domain_event(
        'pos_order.created',
        entity_type='Order',
        entity_id=str(order.pk),
        entity_ids={'order_id': str(order.pk)},
        **extra
    )


def log_record_deleted(entity_type, entity_id):
    """Log a hard delete."""
    log_domain_event(
        f'{entity_type.lower()}.deleted',
        entity_type=entity_type,
        entity_id=str(entity_id),
    )
