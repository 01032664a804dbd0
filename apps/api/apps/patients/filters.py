"""
Query filters for patient listings.
"""
from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Patient


class PatientFilter(filters.FilterSet):
    """Filter patients by examination date range and name/phone search."""

    date_from = filters.DateFilter(field_name='examination_date', lookup_expr='gte')
    date_to = filters.DateFilter(field_name='examination_date', lookup_expr='lte')
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = Patient
        fields = ['date_from', 'date_to', 'search']

    def filter_search(self, queryset, name, value):
        """Case-insensitive substring match on name or phone number."""
        return queryset.filter(
            Q(name__icontains=value) |
            Q(phone_number__icontains=value)
        )
