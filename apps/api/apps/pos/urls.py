"""URL configuration for POS app."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import OrderViewSet

app_name = 'pos'

router = SimpleRouter()
router.register(r'orders', OrderViewSet, basename='order')

urlpatterns = [
    path('', include(router.urls)),
]
