"""URL configuration for sales app."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import SalesTransactionViewSet

app_name = 'sales'

router = SimpleRouter()
router.register(r'transactions', SalesTransactionViewSet, basename='sales-transaction')

urlpatterns = [
    path('', include(router.urls)),
]
