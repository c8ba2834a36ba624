"""Pytest configuration and fixtures."""
from datetime import datetime
from decimal import Decimal

import pytest

from app.domain.entities import Balance, Movement


@pytest.fixture
def make_movement():
    """Build a movement dated in January 2025 (or on an explicit datetime)."""
    def _make(id, day, amount, description="Movement"):
        date = day if isinstance(day, datetime) else datetime(2025, 1, day)
        return Movement(id=id, date=date, description=description, amount=Decimal(str(amount)))
    return _make


@pytest.fixture
def make_balance():
    def _make(day, amount):
        date = day if isinstance(day, datetime) else datetime(2025, 1, day)
        return Balance(date=date, amount=Decimal(str(amount)))
    return _make


@pytest.fixture
def january_balances(make_balance):
    """Opening and closing balance of January 2025."""
    return [make_balance(1, 1000), make_balance(31, 2200)]


@pytest.fixture
def january_movements(make_movement):
    return [
        make_movement(1, 15, 2000, "Invoice"),
        make_movement(2, 20, -800, "Rent"),
    ]
