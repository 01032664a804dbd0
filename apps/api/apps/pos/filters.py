"""
Query filters for POS order listings.
"""
from django_filters import rest_framework as filters

from .models import Order, PaymentMethodChoices


class OrderFilter(filters.FilterSet):
    """Filter orders by calendar day of ordered_at and by payment method."""

    date_from = filters.DateFilter(field_name='ordered_at', lookup_expr='date__gte')
    date_to = filters.DateFilter(field_name='ordered_at', lookup_expr='date__lte')
    payment_method = filters.ChoiceFilter(choices=PaymentMethodChoices.choices)

    class Meta:
        model = Order
        fields = ['date_from', 'date_to', 'payment_method']
