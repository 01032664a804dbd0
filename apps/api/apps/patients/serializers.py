"""
Patient serializers.
"""
from rest_framework import serializers

from .models import Patient


class PatientSerializer(serializers.ModelSerializer):
    """
    Patient serializer with all fields.
    """

    class Meta:
        model = Patient
        fields = [
            'id',
            'name',
            'phone_number',
            'complaint',
            'examination_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class PatientSummarySerializer(serializers.ModelSerializer):
    """
    Lightweight serializer for dashboard activity lists.
    """

    class Meta:
        model = Patient
        fields = ['id', 'name', 'examination_date']
        read_only_fields = fields
