"""
Patient views.
"""
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .serializers import PatientSerializer


class PatientViewSet(viewsets.GenericViewSet):
    """
    ViewSet for Patient CRUD operations.

    Supports:
    - List (query: date_from, date_to, search)
    - Create
    - Retrieve
    - Partial Update
    - Delete (hard delete)

    All persistence goes through apps.patients.services.
    """
    serializer_class = PatientSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def list(self, request):
        patients = services.list_patients(request.query_params)
        serializer = self.get_serializer(patients, many=True)
        return Response(serializer.data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        patient = services.create_patient(**serializer.validated_data)
        return Response(self.get_serializer(patient).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        patient = services.get_patient(pk)
        if patient is None:
            raise NotFound(f'Patient with id {pk} not found')
        return Response(self.get_serializer(patient).data)

    def partial_update(self, request, pk=None):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        patient = services.update_patient(pk, serializer.validated_data)
        return Response(self.get_serializer(patient).data)

    def destroy(self, request, pk=None):
        result = services.delete_patient(pk)
        return Response(result, status=status.HTTP_200_OK)
