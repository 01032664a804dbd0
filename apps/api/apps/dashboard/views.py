"""Dashboard views."""
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import DashboardStatsSerializer
from .services import get_dashboard_stats


class DashboardStatsView(APIView):
    """
    GET /api/v1/dashboard/stats/

    Today and this-month patient counts and sales totals, plus the five most
    recent patients and sales.
    """
    permission_classes = [IsAuthenticated]
    serializer_class = DashboardStatsSerializer

    def get(self, request):
        stats = get_dashboard_stats()
        return Response(DashboardStatsSerializer(stats).data)
