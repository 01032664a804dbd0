"""
Dashboard aggregation - today/this-month figures and recent activity.

"Today" runs from local midnight to ``now``; "this month" from midnight on
the first of the local month to ``now``. Local means Django's active time
zone (TIME_ZONE).
"""
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS
from django.db.models import Sum
from django.utils import timezone

from apps.core.exceptions import store_errors
from apps.core.observability import metrics
from apps.core.observability.tracing import trace_span
from apps.patients.models import Patient
from apps.pos.calculator import ZERO
from apps.sales.models import SalesTransaction

DEFAULT_RECENT_LIMIT = 5


def get_period_starts(now: datetime) -> Tuple[datetime, datetime]:
    """Return (start of local day, start of local month) for ``now``."""
    if timezone.is_naive(now):
        now = timezone.make_aware(now)
    local_now = timezone.localtime(now)
    today_start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    month_start = today_start.replace(day=1)
    return today_start, month_start


def _sum_totals(queryset):
    return queryset.aggregate(amount=Sum('total'))['amount'] or ZERO


@metrics.track_duration(metrics.dashboard_stats_duration_seconds)
def get_dashboard_stats(
    now: Optional[datetime] = None,
    *,
    using: str = DEFAULT_DB_ALIAS,
    limit: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Compute dashboard figures.

    Args:
        now: Evaluation instant (default: timezone.now())
        limit: Size of the recent lists (default: DASHBOARD_RECENT_LIMIT, 5)

    Returns:
        {
            'total_patients_today': int,
            'total_patients_this_month': int,
            'total_sales_today': Decimal,
            'total_sales_this_month': Decimal,
            'recent_patients': [{'id', 'name', 'examination_date'}, ...],
            'recent_sales': [{'id', 'item_name', 'total', 'created_at'}, ...],
        }

        Patient counts and sales sums go by created_at. Recent lists are
        newest-first by created_at.
    """
    now = now or timezone.now()
    if timezone.is_naive(now):
        now = timezone.make_aware(now)
    if limit is None:
        limit = getattr(settings, 'DASHBOARD_RECENT_LIMIT', DEFAULT_RECENT_LIMIT)

    today_start, month_start = get_period_starts(now)

    patients = Patient.objects.using(using)
    sales = SalesTransaction.objects.using(using)

    with trace_span('get_dashboard_stats', attributes={'recent_limit': limit}):
        with store_errors('get_dashboard_stats'):
            return {
                'total_patients_today': patients.filter(
                    created_at__gte=today_start, created_at__lte=now
                ).count(),
                'total_patients_this_month': patients.filter(
                    created_at__gte=month_start, created_at__lte=now
                ).count(),
                'total_sales_today': _sum_totals(sales.filter(
                    created_at__gte=today_start, created_at__lte=now
                )),
                'total_sales_this_month': _sum_totals(sales.filter(
                    created_at__gte=month_start, created_at__lte=now
                )),
                'recent_patients': list(
                    patients.order_by('-created_at', '-id')
                    .values('id', 'name', 'examination_date')[:limit]
                ),
                'recent_sales': list(
                    sales.order_by('-created_at', '-id')
                    .values('id', 'item_name', 'total', 'created_at')[:limit]
                ),
            }
