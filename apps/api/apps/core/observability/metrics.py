"""
Prometheus metrics for the clinic API.
"""
import time
from functools import wraps

from prometheus_client import Counter, Histogram


class MetricsRegistry:
    """
    Central metrics registry.

    Provides typed access to all application metrics. Instantiate once per
    process: prometheus_client rejects duplicate metric names.
    """

    def __init__(self, registry=None):
        self._registry = registry
        self._setup_metrics()

    def _create_counter(self, name, description, labels=None):
        if self._registry is not None:
            return Counter(name, description, labels or [], registry=self._registry)
        return Counter(name, description, labels or [])

    def _create_histogram(self, name, description, labels=None, buckets=None):
        kwargs = {}
        if buckets:
            kwargs['buckets'] = buckets
        if self._registry is not None:
            kwargs['registry'] = self._registry
        return Histogram(name, description, labels or [], **kwargs)

    def _setup_metrics(self):
        # ===================================================================
        # Errors
        # ===================================================================
        self.exceptions_total = self._create_counter(
            'exceptions_total',
            'Total exceptions',
            ['exception_type', 'location']
        )

        # ===================================================================
        # Records
        # ===================================================================
        self.patients_total = self._create_counter(
            'patients_total',
            'Patient record operations',
            ['action']  # created, updated, deleted
        )

        self.sales_transactions_total = self._create_counter(
            'sales_transactions_total',
            'Sales transaction operations',
            ['action']
        )

        # ===================================================================
        # POS
        # ===================================================================
        self.pos_orders_total = self._create_counter(
            'pos_orders_total',
            'POS orders processed',
            ['payment_method', 'result']  # result: success|validation_error|store_error
        )

        self.pos_order_items_total = self._create_counter(
            'pos_order_items_total',
            'Line items written with POS orders'
        )

        self.pos_order_create_duration_seconds = self._create_histogram(
            'pos_order_create_duration_seconds',
            'Duration of POS order creation',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5]
        )

        # ===================================================================
        # Dashboard
        # ===================================================================
        self.dashboard_stats_duration_seconds = self._create_histogram(
            'dashboard_stats_duration_seconds',
            'Duration of dashboard aggregation',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
        )

    def track_duration(self, histogram_metric):
        """
        Decorator to track function duration.

        Usage:
            @metrics.track_duration(metrics.dashboard_stats_duration_seconds)
            def get_dashboard_stats():
                ...
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                try:
                    return func(*args, **kwargs)
                finally:
                    histogram_metric.observe(time.time() - start_time)
            return wrapper
        return decorator


# Global metrics instance
metrics = MetricsRegistry()
