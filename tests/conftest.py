"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from rent_ledger.models import Payment, Property, PropertyInput
from rent_ledger.service import PortfolioService
from rent_ledger.store import InMemoryPropertyStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed payment date."""
    return date(2024, 3, 15)


@pytest.fixture
def sample_input() -> PropertyInput:
    """Valid input for a new property."""
    return PropertyInput(
        apartment_name="Sunset Towers",
        house_number="A4",
        tenant_name="Jane Wanjiru",
        phone_number="+254700000001",
        rent_amount=Decimal("1000"),
        debt=Decimal("500"),
        is_paid=False,
    )


@pytest.fixture
def sample_property() -> Property:
    """Property with some debt and one earlier payment."""
    return Property(
        id="prop-001",
        apartment_name="Sunset Towers",
        house_number="A4",
        tenant_name="Jane Wanjiru",
        phone_number="+254700000001",
        rent_amount=Decimal("1000"),
        debt=Decimal("500"),
        is_paid=False,
        payment_history=(Payment(date(2024, 2, 1), Decimal("500")),),
    )


@pytest.fixture
def store() -> InMemoryPropertyStore:
    """Create a fresh store for each test."""
    return InMemoryPropertyStore()


@pytest.fixture
def service(store: InMemoryPropertyStore, today: date) -> PortfolioService:
    """Service over an empty in-memory store with a fixed clock."""
    return PortfolioService(store, today=lambda: today)


@pytest.fixture
def make_property():
    """Factory for properties with only the fields a test cares about."""
    return _make_property


def _make_property(
    property_id: str = "prop-x",
    rent: str = "1000",
    debt: str = "0",
    is_paid: bool = False,
    apartment_name: str = "Block",
    house_number: str = "1",
    tenant_name: str = "Tenant",
) -> Property:
    return Property(
        id=property_id,
        apartment_name=apartment_name,
        house_number=house_number,
        tenant_name=tenant_name,
        phone_number="0700000000",
        rent_amount=Decimal(rent),
        debt=Decimal(debt),
        is_paid=is_paid,
    )
