"""
Query filters for sales transaction listings.
"""
from django_filters import rest_framework as filters

from .models import SalesTransaction


class SalesTransactionFilter(filters.FilterSet):
    """
    Filter transactions by the calendar day they were recorded on and by
    item name.
    """

    date_from = filters.DateFilter(field_name='created_at', lookup_expr='date__gte')
    date_to = filters.DateFilter(field_name='created_at', lookup_expr='date__lte')
    search = filters.CharFilter(field_name='item_name', lookup_expr='icontains')

    class Meta:
        model = SalesTransaction
        fields = ['date_from', 'date_to', 'search']
