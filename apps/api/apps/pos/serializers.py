"""POS serializers."""
from decimal import Decimal

from rest_framework import serializers

from .models import Order, OrderItem, PaymentMethodChoices


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for a persisted line item."""

    class Meta:
        model = OrderItem
        fields = ['id', 'name', 'unit_price', 'quantity', 'subtotal']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order with its full item list."""
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'total', 'payment_method', 'ordered_at', 'items']
        read_only_fields = fields


class OrderItemInputSerializer(serializers.Serializer):
    """
    Cart line as sent by the client.

    Only name, unit_price and quantity are read; subtotal is always computed
    server-side.
    """
    name = serializers.CharField(max_length=255)
    unit_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    quantity = serializers.IntegerField(
        min_value=1,
        help_text='Quantity must be a positive integer (no decimals)'
    )


class OrderCreateSerializer(serializers.Serializer):
    """
    Checkout request.

    Example:
        {
            "payment_method": "cash",
            "items": [
                {"name": "Consultation", "unit_price": "5000.00", "quantity": 2},
                {"name": "X-ray", "unit_price": "50000.00", "quantity": 1}
            ]
        }
    """
    payment_method = serializers.ChoiceField(choices=PaymentMethodChoices.choices)
    items = OrderItemInputSerializer(many=True, allow_empty=False)
