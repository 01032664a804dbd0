"""
Sales service layer - single-item sales transactions.

Totals are never taken from the caller: SalesTransaction.save() recomputes
total = price * quantity through the order total calculator on every write.
"""
from typing import Any, Dict, List, Mapping, Optional

from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction

from apps.core.exceptions import NotFoundError, store_errors
from apps.core.observability import metrics
from apps.core.observability.events import log_sales_transaction_saved, log_record_deleted

from .filters import SalesTransactionFilter
from .models import SalesTransaction

UPDATABLE_FIELDS = ('item_name', 'price', 'quantity')


def create_sales_transaction(
    *,
    item_name: str,
    price,
    quantity: int,
    using: str = DEFAULT_DB_ALIAS,
) -> SalesTransaction:
    """
    Record a sale of a single item or service.

    Args:
        item_name: What was sold (non-empty)
        price: Unit price, Decimal > 0 with at most two decimal places
        quantity: Positive integer

    Returns:
        The persisted SalesTransaction with total = price * quantity

    Raises:
        ValidationError: Invalid name, price or quantity
        StoreError: The database rejected the write

    Example:
        >>> tx = create_sales_transaction(item_name='Bandage', price=Decimal('25.00'), quantity=2)
        >>> tx.total
        Decimal('50.00')
    """
    sales_transaction = SalesTransaction(
        item_name=item_name,
        price=price,
        quantity=quantity,
    )

    with store_errors('create_sales_transaction'):
        sales_transaction.save(using=using)

    metrics.sales_transactions_total.labels(action='created').inc()
    log_sales_transaction_saved(sales_transaction, 'created')
    return sales_transaction


def list_sales_transactions(
    params: Optional[Mapping[str, Any]] = None,
    *,
    using: str = DEFAULT_DB_ALIAS,
) -> List[SalesTransaction]:
    """
    List transactions, newest first.

    Supported params: ``date_from``/``date_to`` (inclusive calendar days of
    created_at, in the active time zone) and ``search`` (item name,
    case-insensitive).
    """
    filterset = SalesTransactionFilter(
        data=params or {},
        queryset=SalesTransaction.objects.using(using).order_by('-created_at', '-id'),
    )
    if not filterset.is_valid():
        raise ValidationError(filterset.errors.as_data())

    with store_errors('list_sales_transactions'):
        return list(filterset.qs)


def get_sales_transaction(transaction_id, *, using: str = DEFAULT_DB_ALIAS) -> Optional[SalesTransaction]:
    """Return the transaction or None."""
    with store_errors('get_sales_transaction'):
        return SalesTransaction.objects.using(using).filter(pk=transaction_id).first()


def update_sales_transaction(
    transaction_id,
    fields: Mapping[str, Any],
    *,
    using: str = DEFAULT_DB_ALIAS,
) -> SalesTransaction:
    """
    Apply a partial update and recompute the total.

    The total is derived from the new price/quantity where given and the
    stored values otherwise, so updating only the price of {25, 2, 50} to 30
    yields a total of 60.

    Raises:
        ValidationError: Unknown field name, or invalid resulting values
        NotFoundError: No transaction with this id
        StoreError: The database rejected the write
    """
    unknown = sorted(set(fields) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValidationError({field: 'Unknown field' for field in unknown})

    with store_errors('update_sales_transaction'):
        with transaction.atomic(using=using):
            try:
                sales_transaction = (
                    SalesTransaction.objects.using(using)
                    .select_for_update()
                    .get(pk=transaction_id)
                )
            except SalesTransaction.DoesNotExist:
                raise NotFoundError('SalesTransaction', transaction_id)

            previous_total = sales_transaction.total
            for field, value in fields.items():
                setattr(sales_transaction, field, value)
            sales_transaction.save(using=using)

    metrics.sales_transactions_total.labels(action='updated').inc()
    log_sales_transaction_saved(
        sales_transaction,
        'updated',
        previous_total=str(previous_total),
        updated_fields=sorted(fields),
    )
    return sales_transaction


def delete_sales_transaction(transaction_id, *, using: str = DEFAULT_DB_ALIAS) -> Dict[str, bool]:
    """
    Hard-delete a transaction.

    Raises:
        NotFoundError: No transaction with this id
    """
    with store_errors('delete_sales_transaction'):
        deleted, _details = SalesTransaction.objects.using(using).filter(pk=transaction_id).delete()

    if not deleted:
        raise NotFoundError('SalesTransaction', transaction_id)

    metrics.sales_transactions_total.labels(action='deleted').inc()
    log_record_deleted('SalesTransaction', transaction_id)
    return {'success': True}
