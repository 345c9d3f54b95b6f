"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.services import TicketPurchaseService
from tickets.stores.memory_store import InMemoryPaymentGateway, InMemorySeatReservationGateway


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payments() -> InMemoryPaymentGateway:
    return InMemoryPaymentGateway()


@pytest.fixture
def reservations() -> InMemorySeatReservationGateway:
    return InMemorySeatReservationGateway()


@pytest.fixture
def service(payments, reservations) -> TicketPurchaseService:
    return TicketPurchaseService(payments=payments, reservations=reservations)

