"""Shared fixtures.

Canonical request: $500K property, 20% down, 5% rate, 25yr monthly,
regular employment with a traditional down payment.
"""

from dataclasses import replace
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from mortgage_calc.api.app import app
from mortgage_calc.models.mortgage import MortgageRequest, PaymentSchedule


@pytest.fixture
def canonical_request() -> MortgageRequest:
    return MortgageRequest(
        property_price=Decimal("500000"),
        down_payment=Decimal("100000"),
        annual_interest_rate=Decimal("5"),
        amortization_period=25,
        payment_schedule=PaymentSchedule.MONTHLY,
    )


@pytest.fixture
def make_request(canonical_request):
    """Canonical request with field overrides."""
    def _make(**overrides) -> MortgageRequest:
        return replace(canonical_request, **overrides)
    return _make


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def calculate_payload() -> dict:
    return {
        "propertyPrice": 500000,
        "downPayment": 100000,
        "annualInterestRate": 5,
        "amortizationPeriod": 25,
        "paymentSchedule": "monthly",
        "isFirstTimeBuyer": False,
        "isNewConstruction": False,
        "downPaymentSource": "traditional",
        "employmentType": "regular",
    }
