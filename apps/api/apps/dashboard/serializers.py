"""Dashboard serializers."""
from rest_framework import serializers

from apps.patients.serializers import PatientSummarySerializer
from apps.sales.serializers import SalesTransactionSummarySerializer


class DashboardStatsSerializer(serializers.Serializer):
    total_patients_today = serializers.IntegerField()
    total_patients_this_month = serializers.IntegerField()
    total_sales_today = serializers.DecimalField(max_digits=None, decimal_places=2)
    total_sales_this_month = serializers.DecimalField(max_digits=None, decimal_places=2)
    recent_patients = PatientSummarySerializer(many=True)
    recent_sales = SalesTransactionSummarySerializer(many=True)
