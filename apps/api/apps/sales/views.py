"""
Sales views.
"""
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .serializers import SalesTransactionSerializer


class SalesTransactionViewSet(viewsets.GenericViewSet):
    """
    ViewSet for single-item sales transactions.

    list: query params date_from, date_to (calendar days of created_at) and search
    create: total is computed server-side
    partial_update: total is recomputed from the resulting price and quantity
    destroy: hard delete, returns {"success": true}
    """
    serializer_class = SalesTransactionSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def list(self, request):
        transactions = services.list_sales_transactions(request.query_params)
        serializer = self.get_serializer(transactions, many=True)
        return Response(serializer.data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        sales_transaction = services.create_sales_transaction(**serializer.validated_data)
        return Response(
            self.get_serializer(sales_transaction).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        sales_transaction = services.get_sales_transaction(pk)
        if sales_transaction is None:
            raise NotFound(f'SalesTransaction with id {pk} not found')
        return Response(self.get_serializer(sales_transaction).data)

    def partial_update(self, request, pk=None):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        sales_transaction = services.update_sales_transaction(pk, serializer.validated_data)
        return Response(self.get_serializer(sales_transaction).data)

    def destroy(self, request, pk=None):
        return Response(services.delete_sales_transaction(pk), status=status.HTTP_200_OK)
