"""Canonical test fixtures used across all tests.

Fixture loan: £200K at 5.0%, 12-month fixed period.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from mortgage_breakdown.api.app import app
from mortgage_breakdown.engine.amortization import (
    generate_schedule,
    terms_with_computed_payment,
    terms_with_supplied_payment,
)
from mortgage_breakdown.models.loan import LoanTerms


@pytest.fixture
def computed_terms() -> LoanTerms:
    """Payment calculated to clear the loan within the 12 months."""
    return terms_with_computed_payment(Decimal("200000"), Decimal("5.0"), 12)


@pytest.fixture
def tranche_terms() -> LoanTerms:
    """12-month fixed tranche paying the 30-year payment (£1,073.64)."""
    return terms_with_supplied_payment(
        Decimal("200000"), Decimal("5.0"), 12, Decimal("1073.64")
    )


@pytest.fixture
def two_month_schedule():
    return generate_schedule(
        terms_with_supplied_payment(Decimal("1000"), Decimal("6"), 2, Decimal("100"))
    )


@pytest.fixture
def loan_form() -> dict[str, str]:
    return {"principal": "200000", "rate": "5.0", "months": "12", "monthly": "1073.64"}


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
