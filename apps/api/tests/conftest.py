"""
Global test fixtures for pytest.

Provides reusable fixtures for API testing:
- Authenticated and anonymous API clients
- Factories for patients, sales transactions and POS orders
"""
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.patients import services as patient_services
from apps.pos import services as pos_services
from apps.sales import services as sales_services

User = get_user_model()


# ============================================================================
# API Clients
# ============================================================================

@pytest.fixture
def api_client():
    """Unauthenticated DRF API client."""
    return APIClient()


@pytest.fixture
def staff_user(db):
    """Front-desk staff account."""
    return User.objects.create_user(
        username='frontdesk',
        password='testpass123',
        is_active=True
    )


@pytest.fixture
def auth_client(staff_user):
    """Authenticated API client."""
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


# ============================================================================
# Model factories
# ============================================================================

@pytest.fixture
def patient_factory(db):
    """Create patients through the service layer with sensible defaults."""
    def create(**overrides):
        data = {
            'name': 'Budi Santoso',
            'phone_number': '081234567890',
            'complaint': 'Persistent cough',
            'examination_date': date(2024, 1, 15),
        }
        data.update(overrides)
        return patient_services.create_patient(**data)
    return create


@pytest.fixture
def sales_transaction_factory(db):
    """Create sales transactions through the service layer."""
    def create(**overrides):
        data = {
            'item_name': 'Bandage',
            'price': Decimal('25.00'),
            'quantity': 2,
        }
        data.update(overrides)
        return sales_services.create_sales_transaction(**data)
    return create


@pytest.fixture
def order_factory(db):
    """Create POS orders through the service layer."""
    def create(payment_method='cash', items=None):
        if items is None:
            items = [
                {'name': 'Consultation', 'unit_price': Decimal('5000'), 'quantity': 2},
                {'name': 'X-ray', 'unit_price': Decimal('50000'), 'quantity': 1},
            ]
        return pos_services.create_order(payment_method=payment_method, items=items)
    return create
