"""URL configuration for patients app."""
from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import PatientViewSet

app_name = 'patients'

router = SimpleRouter()
router.register(r'', PatientViewSet, basename='patient')

urlpatterns = [
    path('', include(router.urls)),
]
