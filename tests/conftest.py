"""Pytest configuration and fixtures."""

import re
from datetime import date

import pytest

from backoffice_data.generators.pool import DataPools

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CUSTOMER_PHONE_PATTERN = re.compile(r"^\+234\s\d{3}\s\d{3}\s\d{4}$")
OFFICER_PHONE_PATTERN = re.compile(r"^\+\d{3}\s\d{9}$")


@pytest.fixture
def today() -> date:
    """Fixed reference date for reproducible relative dates."""
    return date(2026, 3, 15)


@pytest.fixture
def pools() -> DataPools:
    """Built-in literal pools."""
    return DataPools.default()


@pytest.fixture
def officer_id() -> str:
    """Sample credit officer ID."""
    return "test-123"


@pytest.fixture
def customer_id() -> str:
    """Sample customer ID."""
    return "cust-test-001"


@pytest.fixture
def branch_id() -> str:
    """Sample branch ID."""
    return "branch-test-001"
