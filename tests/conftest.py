"""
Shared fixtures for all tests.

factory-boy factories live here so both unit/ and integration/ can import them.
"""
import pytest
from datetime import date
from unittest.mock import Mock
from django.test import Client

import factory
from patients.billing import BaseBillingClient, BillingAccount
from patients.events import BaseEventPublisher
from patients.models import Patient
from patients.repository import PatientRepository
from patients.services import PatientService


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

class PatientFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Patient

    name = 'John Doe'
    email = factory.Sequence(lambda n: f'patient{n}@example.com')
    address = '123 Main St'
    date_of_birth = date(1990, 1, 15)
    registered_date = date(2024, 1, 1)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def api_client():
    """Django test client for integration tests."""
    return Client()


@pytest.fixture
def jane_payload():
    """Valid payload for POST /patients."""
    return {
        'name': 'Jane Smith',
        'email': 'jane@x.com',
        'address': '456 Oak Ave',
        'dateOfBirth': '1985-03-20',
        'registeredDate': '2024-02-08',
    }


@pytest.fixture
def jane_data():
    """Same as jane_payload, in validated (service-level) form."""
    return {
        'name': 'Jane Smith',
        'email': 'jane@x.com',
        'address': '456 Oak Ave',
        'date_of_birth': date(1985, 3, 20),
        'registered_date': date(2024, 2, 8),
    }


@pytest.fixture
def billing_client():
    client = Mock(spec=BaseBillingClient)
    client.create_billing_account.return_value = BillingAccount(account_id='ACC-1', status='ACTIVE')
    return client


@pytest.fixture
def event_publisher():
    return Mock(spec=BaseEventPublisher)


@pytest.fixture
def patient_service(billing_client, event_publisher):
    return PatientService(
        repository=PatientRepository(),
        billing_client=billing_client,
        event_publisher=event_publisher,
    )
