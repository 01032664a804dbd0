"""POS order views."""
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.core.observability import get_sanitized_logger

from . import services
from .serializers import OrderCreateSerializer, OrderSerializer

logger = get_sanitized_logger(__name__)


class OrderViewSet(viewsets.GenericViewSet):
    """
    POST /api/v1/pos/orders/
        Checkout: creates the order and its items atomically. Subtotals and
        total in the response are computed server-side.

    GET /api/v1/pos/orders/
        Query params: date_from, date_to, payment_method

    GET /api/v1/pos/orders/{id}/
    DELETE /api/v1/pos/orders/{id}/
    """
    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_serializer_class(self):
        if self.action == 'create':
            return OrderCreateSerializer
        return OrderSerializer

    def list(self, request):
        orders = services.list_orders(request.query_params)
        return Response(OrderSerializer(orders, many=True).data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.create_order(
            payment_method=serializer.validated_data['payment_method'],
            items=serializer.validated_data['items'],
        )

        logger.info(
            'POS checkout completed',
            extra={
                'order_id': str(order.pk),
                'payment_method': order.payment_method,
            }
        )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        order = services.get_order(pk)
        if order is None:
            raise NotFound(f'Order with id {pk} not found')
        return Response(OrderSerializer(order).data)

    def destroy(self, request, pk=None):
        return Response(services.delete_order(pk), status=status.HTTP_200_OK)
