"""
Tests for the order total calculator.

Subtotals are unit_price * quantity and totals the exact sum of subtotals,
computed on Decimal only.
"""
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from apps.pos.calculator import (
    calculate_line_subtotal,
    calculate_order_totals,
    to_money,
)


class TestCalculateLineSubtotal:
    """Single-line multiplication helper."""

    def test_multiplies_price_by_quantity(self):
        assert calculate_line_subtotal(Decimal('25.00'), 2) == Decimal('50.00')

    def test_accepts_string_prices(self):
        assert calculate_line_subtotal('19.99', 3) == Decimal('59.97')

    def test_float_price_uses_shortest_repr(self):
        """0.1 must not turn into the binary expansion of 0.1."""
        assert calculate_line_subtotal(0.1, 3) == Decimal('0.3')

    @pytest.mark.parametrize('price', [Decimal('0'), Decimal('-1.00')])
    def test_rejects_non_positive_price(self, price):
        with pytest.raises(ValidationError) as exc_info:
            calculate_line_subtotal(price, 1)
        assert 'unit_price' in exc_info.value.message_dict

    @pytest.mark.parametrize('quantity', [0, -3, 1.5, '2', True, None])
    def test_rejects_invalid_quantity(self, quantity):
        with pytest.raises(ValidationError) as exc_info:
            calculate_line_subtotal(Decimal('10.00'), quantity)
        assert 'quantity' in exc_info.value.message_dict

    def test_rejects_more_than_two_decimal_places(self):
        with pytest.raises(ValidationError):
            calculate_line_subtotal(Decimal('1.005'), 1)

    def test_rejects_unparsable_price(self):
        with pytest.raises(ValidationError):
            calculate_line_subtotal('abc', 1)

    def test_price_errors_use_given_field_name(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_line_subtotal(Decimal('-5'), 1, price_field='price')
        assert 'price' in exc_info.value.message_dict
        assert 'unit_price' not in exc_info.value.message_dict


class TestCalculateOrderTotals:
    """Whole-cart pricing."""

    def test_consultation_and_xray_example(self):
        # GIVEN: Two consultations and one X-ray
        items = [
            {'name': 'Consultation', 'unit_price': Decimal('5000'), 'quantity': 2},
            {'name': 'X-ray', 'unit_price': Decimal('50000'), 'quantity': 1},
        ]

        # WHEN: Pricing the cart
        totals = calculate_order_totals(items)

        # THEN: Subtotals follow input order and the total is their sum
        assert [line.subtotal for line in totals.lines] == [Decimal('10000'), Decimal('50000')]
        assert totals.total == Decimal('60000')

    def test_total_equals_sum_of_subtotals(self):
        items = [
            {'name': 'Gauze', 'unit_price': Decimal('1.10'), 'quantity': 3},
            {'name': 'Syringe', 'unit_price': Decimal('0.35'), 'quantity': 7},
            {'name': 'Saline', 'unit_price': Decimal('12.99'), 'quantity': 1},
        ]

        totals = calculate_order_totals(items)

        assert totals.total == sum(line.subtotal for line in totals.lines)
        assert totals.total == Decimal('18.74')
        for line in totals.lines:
            assert line.subtotal == line.unit_price * line.quantity

    def test_is_deterministic(self):
        items = [
            {'name': 'Consultation', 'unit_price': Decimal('5000'), 'quantity': 2},
            {'name': 'X-ray', 'unit_price': Decimal('50000'), 'quantity': 1},
        ]

        assert calculate_order_totals(items) == calculate_order_totals(items)

    def test_ignores_client_supplied_subtotals(self):
        items = [
            {'name': 'Consultation', 'unit_price': Decimal('100'), 'quantity': 2, 'subtotal': Decimal('1')},
        ]

        totals = calculate_order_totals(items)

        assert totals.lines[0].subtotal == Decimal('200')

    def test_strips_item_names(self):
        totals = calculate_order_totals([
            {'name': '  Consultation  ', 'unit_price': Decimal('1'), 'quantity': 1},
        ])

        assert totals.lines[0].name == 'Consultation'

    @pytest.mark.parametrize('items', [[], None])
    def test_empty_cart_rejected(self, items):
        with pytest.raises(ValidationError) as exc_info:
            calculate_order_totals(items)
        assert exc_info.value.message_dict['items'] == ['An order needs at least one item']

    @pytest.mark.parametrize('bad_item', [
        {'name': '', 'unit_price': Decimal('10'), 'quantity': 1},
        {'name': '   ', 'unit_price': Decimal('10'), 'quantity': 1},
        {'name': 'Gauze', 'unit_price': Decimal('0'), 'quantity': 1},
        {'name': 'Gauze', 'unit_price': Decimal('10'), 'quantity': 0},
        {'name': 'Gauze', 'unit_price': Decimal('10.001'), 'quantity': 1},
        {'name': 'Gauze', 'unit_price': Decimal('10'), 'quantity': 2.5},
    ])
    def test_invalid_line_rejected(self, bad_item):
        with pytest.raises(ValidationError):
            calculate_order_totals([bad_item])

    def test_reports_every_invalid_line(self):
        items = [
            {'name': '', 'unit_price': Decimal('10'), 'quantity': 1},
            {'name': 'Gauze', 'unit_price': Decimal('10'), 'quantity': 1},
            {'name': 'Tape', 'unit_price': Decimal('-1'), 'quantity': 1},
        ]

        with pytest.raises(ValidationError) as exc_info:
            calculate_order_totals(items)

        messages = exc_info.value.message_dict['items']
        assert len(messages) == 2
        assert messages[0].startswith('Item 1 name')
        assert messages[1].startswith('Item 3 unit_price')

    def test_out_of_range_price_reported_per_line(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_order_totals([{'name': 'X', 'unit_price': '1e30', 'quantity': 1}])

        assert exc_info.value.message_dict['items'] == ['Item 1 unit_price: Amount 1E+30 is out of range']

    @pytest.mark.parametrize('bad_item', [None, 'Gauze', ('Gauze', Decimal('10'), 1)])
    def test_non_mapping_line_rejected(self, bad_item):
        items = [{'name': 'Gauze', 'unit_price': Decimal('10'), 'quantity': 1}, bad_item]

        with pytest.raises(ValidationError) as exc_info:
            calculate_order_totals(items)

        messages = exc_info.value.message_dict['items']
        assert len(messages) == 1
        assert messages[0].startswith('Item 2:')


class TestToMoney:

    def test_keeps_decimal_as_is(self):
        assert to_money(Decimal('12.50')) == Decimal('12.50')

    @pytest.mark.parametrize('value', ['NaN', 'Infinity', True, '1e30', Decimal('1e30')])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(ValidationError):
            to_money(value)
