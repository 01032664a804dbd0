"""
Order total calculator.

The only place where line subtotals and order totals are computed. The
server is the source of truth for money: anything a client sends as a
subtotal or total is ignored and recomputed here.

All arithmetic is on Decimal; a subtotal is unit_price * quantity exactly
and a total is the exact sum of its subtotals.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Mapping, Tuple

from django.core.exceptions import ValidationError

CENT = Decimal('0.01')
ZERO = Decimal('0.00')


@dataclass(frozen=True)
class PricedLine:
    """A validated cart line with its computed subtotal."""
    name: str
    unit_price: Decimal
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class OrderTotals:
    lines: Tuple[PricedLine, ...]
    total: Decimal


def to_money(value, field='unit_price') -> Decimal:
    """
    Coerce ``value`` to a Decimal amount with at most two decimal places.

    Floats go through their shortest repr so 0.1 becomes Decimal('0.1'),
    not the binary expansion.
    """
    if isinstance(value, bool):
        raise ValidationError({field: 'Amount must be a decimal number'})
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError({field: f'Invalid amount: {value!r}'})

    if not amount.is_finite():
        raise ValidationError({field: f'Invalid amount: {value!r}'})
    try:
        rounded = amount.quantize(CENT)
    except InvalidOperation:
        raise ValidationError({field: f'Amount {amount} is out of range'})
    if amount != rounded:
        raise ValidationError({field: f'Amount {amount} has more than 2 decimal places'})
    return amount


def calculate_line_subtotal(unit_price, quantity, price_field='unit_price') -> Decimal:
    """
    Return unit_price * quantity after validating both operands.

    ``price_field`` is the key price errors are reported under.

    Raises:
        ValidationError: price not > 0, or quantity not a positive integer
    """
    price = to_money(unit_price, field=price_field)
    if price <= 0:
        raise ValidationError({price_field: 'Price must be greater than 0'})

    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError({'quantity': 'Quantity must be a whole number'})
    if quantity <= 0:
        raise ValidationError({'quantity': 'Quantity must be greater than 0'})

    return price * quantity


def price_line(name, unit_price, quantity) -> PricedLine:
    """Validate a single cart line and compute its subtotal."""
    clean_name = (name or '').strip() if isinstance(name, str) else ''
    if not clean_name:
        raise ValidationError({'name': 'Item name is required'})

    subtotal = calculate_line_subtotal(unit_price, quantity)
    return PricedLine(
        name=clean_name,
        unit_price=to_money(unit_price),
        quantity=quantity,
        subtotal=subtotal,
    )


def calculate_order_totals(items: Iterable[Mapping]) -> OrderTotals:
    """
    Price every cart line and sum the subtotals.

    Args:
        items: ordered mappings with ``name``, ``unit_price`` and ``quantity``

    Returns:
        OrderTotals with one PricedLine per input entry, in input order

    Raises:
        ValidationError: empty cart, or any invalid line. Messages for all
            invalid lines are collected under ``items``.

    Example:
        >>> totals = calculate_order_totals([
        ...     {'name': 'Consultation', 'unit_price': Decimal('5000'), 'quantity': 2},
        ...     {'name': 'X-ray', 'unit_price': Decimal('50000'), 'quantity': 1},
        ... ])
        >>> [line.subtotal for line in totals.lines], totals.total
        ([Decimal('10000'), Decimal('50000')], Decimal('60000'))
    """
    items = list(items or [])
    if not items:
        raise ValidationError({'items': 'An order needs at least one item'})

    lines: List[PricedLine] = []
    errors: List[str] = []

    for index, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            errors.append(f'Item {index}: Expected an object with name, unit_price and quantity')
            continue
        try:
            lines.append(price_line(
                item.get('name'),
                item.get('unit_price'),
                item.get('quantity'),
            ))
        except ValidationError as e:
            for field, messages in e.message_dict.items():
                errors.extend(f'Item {index} {field}: {message}' for message in messages)

    if errors:
        raise ValidationError({'items': errors})

    total = sum((line.subtotal for line in lines), ZERO)
    return OrderTotals(lines=tuple(lines), total=total)
