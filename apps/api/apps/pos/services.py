"""
POS service layer - checkout and order lookup.

Order creation is all-or-nothing: the order row and every item row are
written in one transaction, with subtotals and total recomputed by
apps.pos.calculator regardless of what the caller sent.
"""
import time
from typing import Any, Dict, Iterable, List, Mapping, Optional

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction

from apps.core.exceptions import NotFoundError, StoreError, store_errors
from apps.core.observability import metrics
from apps.core.observability.events import (
    log_consistency_checkpoint,
    log_order_created,
    log_record_deleted,
)
from apps.core.observability.tracing import trace_span

from .calculator import ZERO, calculate_order_totals
from .filters import OrderFilter
from .models import Order, OrderItem, PaymentMethodChoices


def validate_payment_method(payment_method) -> str:
    """Return the stripped payment method or raise ValidationError."""
    method = payment_method.strip() if isinstance(payment_method, str) else ''
    if not method:
        raise ValidationError({'payment_method': 'Payment method is required'})
    if method not in PaymentMethodChoices.values:
        raise ValidationError({
            'payment_method': (
                f'Unsupported payment method {method!r}. '
                f'Expected one of: {", ".join(PaymentMethodChoices.values)}'
            )
        })
    return method


def create_order(
    *,
    payment_method: str,
    items: Iterable[Mapping[str, Any]],
    using: str = DEFAULT_DB_ALIAS,
) -> Order:
    """
    Create a POS order with its items atomically.

    Args:
        payment_method: One of PaymentMethodChoices
        items: Non-empty list of {name, unit_price, quantity}. Any subtotal
            or total keys are ignored.

    Returns:
        The persisted Order with items prefetched

    Raises:
        ValidationError: Empty cart, invalid item or payment method
        StoreError: The database failed; no order or item rows remain

    Example:
        >>> order = create_order(payment_method='cash', items=[
        ...     {'name': 'Consultation', 'unit_price': Decimal('5000'), 'quantity': 2},
        ...     {'name': 'X-ray', 'unit_price': Decimal('50000'), 'quantity': 1},
        ... ])
        >>> order.total
        Decimal('60000.00')
    """
    start_time = time.time()

    method = validate_payment_method(payment_method)

    try:
        totals = calculate_order_totals(items)
    except ValidationError:
        metrics.pos_orders_total.labels(payment_method=method, result='validation_error').inc()
        raise

    with trace_span('create_order', attributes={
        'payment_method': method,
        'item_count': len(totals.lines),
    }):
        try:
            with store_errors('create_order'):
                with transaction.atomic(using=using):
                    order = Order(total=totals.total, payment_method=method)
                    order.save(using=using)

                    for line in totals.lines:
                        OrderItem(
                            order=order,
                            name=line.name,
                            unit_price=line.unit_price,
                            quantity=line.quantity,
                        ).save(using=using)
        except StoreError:
            metrics.pos_orders_total.labels(payment_method=method, result='store_error').inc()
            raise
        except ValidationError:
            metrics.pos_orders_total.labels(payment_method=method, result='validation_error').inc()
            raise

    order = get_order(order.pk, using=using)
    persisted_items = list(order.items.all())
    items_total = sum((item.subtotal for item in persisted_items), ZERO)

    log_consistency_checkpoint(
        'pos_order_totals',
        entity_ids={'order_id': str(order.pk)},
        checks_passed={
            'total_matches_items': items_total == order.total,
            'item_count_matches': len(persisted_items) == len(totals.lines),
        },
    )

    duration = time.time() - start_time
    metrics.pos_orders_total.labels(payment_method=method, result='success').inc()
    metrics.pos_order_items_total.inc(len(persisted_items))
    metrics.pos_order_create_duration_seconds.observe(duration)
    log_order_created(order, item_count=len(persisted_items), duration_ms=int(duration * 1000))

    return order


def get_order(order_id, *, using: str = DEFAULT_DB_ALIAS) -> Optional[Order]:
    """Return the order with its items, or None for a missing id."""
    with store_errors('get_order'):
        return (
            Order.objects.using(using)
            .prefetch_related('items')
            .filter(pk=order_id)
            .first()
        )


def list_orders(
    params: Optional[Mapping[str, Any]] = None,
    *,
    using: str = DEFAULT_DB_ALIAS,
) -> List[Order]:
    """
    List orders with their items, newest first.

    Supported params: ``date_from``/``date_to`` (inclusive calendar days of
    ordered_at) and ``payment_method`` (exact).
    """
    filterset = OrderFilter(
        data=params or {},
        queryset=(
            Order.objects.using(using)
            .prefetch_related('items')
            .order_by('-ordered_at', '-id')
        ),
    )
    if not filterset.is_valid():
        raise ValidationError(filterset.errors.as_data())

    with store_errors('list_orders'):
        return list(filterset.qs)


def delete_order(order_id, *, using: str = DEFAULT_DB_ALIAS) -> Dict[str, bool]:
    """
    Delete an order; its items go with it.

    Raises:
        NotFoundError: No order with this id
    """
    with store_errors('delete_order'):
        with transaction.atomic(using=using):
            _total, deleted = Order.objects.using(using).filter(pk=order_id).delete()

    if not deleted.get(Order._meta.label):
        raise NotFoundError('Order', order_id)

    log_record_deleted('Order', order_id)
    return {'success': True}
