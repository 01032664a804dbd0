"""Sales serializers."""
from decimal import Decimal

from rest_framework import serializers

from .models import SalesTransaction


class SalesTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for SalesTransaction.

    total is read-only: it is always recomputed as price * quantity.
    """
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        help_text='Unit price (> 0, two decimal places at most)'
    )
    quantity = serializers.IntegerField(
        min_value=1,
        help_text='Quantity must be a positive integer (no decimals)'
    )

    class Meta:
        model = SalesTransaction
        fields = [
            'id', 'item_name', 'price', 'quantity', 'total',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'total', 'created_at', 'updated_at']


class SalesTransactionSummarySerializer(serializers.ModelSerializer):
    """Lightweight serializer for dashboard activity lists."""

    class Meta:
        model = SalesTransaction
        fields = ['id', 'item_name', 'total', 'created_at']
        read_only_fields = fields
