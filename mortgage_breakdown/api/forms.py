"""Loan form parsing shared by the HTML, PDF and CSV endpoints."""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from mortgage_breakdown.config import settings
from mortgage_breakdown.engine.amortization import (
    terms_with_computed_payment,
    terms_with_supplied_payment,
)
from mortgage_breakdown.models.loan import LoanTerms

logger = logging.getLogger(__name__)

FORM_FIELDS = ("principal", "rate", "months", "monthly")


class FormError(ValueError):
    """A submitted field is missing or unusable."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def _get(fields: Mapping[str, str], name: str, required: bool = True) -> str | None:
    value = fields.get(name)
    value = value.strip() if isinstance(value, str) else ""  # file uploads count as missing
    if not value:
        if required:
            raise FormError(name, f"missing field: {name}")
        return None
    return value


def _decimal(name: str, raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise FormError(name, f"invalid {name}")
    if not value.is_finite():
        raise FormError(name, f"invalid {name}")
    return value


def _months(raw: str) -> int:
    # ASCII digits and an optional sign only
    if not (raw.isascii() and raw.lstrip("+-").isdigit()):
        raise FormError("months", "invalid months")
    try:
        months = int(raw)
    except ValueError:
        raise FormError("months", "invalid months")
    if months <= 0 or months > settings.max_months:
        raise FormError(
            "months", f"invalid months: must be between 1 and {settings.max_months}"
        )
    return months


def parse_loan_form(fields: Mapping[str, str]) -> LoanTerms:
    """Validate submitted form fields and build LoanTerms.

    `principal`, `rate` and `months` are required. When `monthly` is given it
    is used as the payment; when blank the payment is calculated.

    Raises:
        FormError: naming the first field that failed.
    """
    principal_str = _get(fields, "principal")
    rate_str = _get(fields, "rate")
    months_str = _get(fields, "months")
    monthly_str = _get(fields, "monthly", required=False)

    principal = _decimal("principal", principal_str)
    if principal <= 0 or principal > settings.max_principal:
        raise FormError(
            "principal",
            f"invalid principal: must be greater than zero and at most {settings.max_principal}",
        )

    rate = _decimal("rate", rate_str)
    if rate < 0 or rate > settings.max_rate:
        raise FormError("rate", f"invalid rate: must be between 0 and {settings.max_rate}")

    months = _months(months_str)

    if monthly_str is None:
        return terms_with_computed_payment(principal, rate, months)

    monthly = _decimal("monthly", monthly_str)
    if monthly <= 0 or monthly > settings.max_principal:
        raise FormError(
            "monthly",
            f"invalid monthly: must be greater than zero and at most {settings.max_principal}",
        )
    return terms_with_supplied_payment(principal, rate, months, monthly)


def form_values(fields: Mapping[str, str]) -> dict[str, str]:
    """Raw submitted values for the known fields, for re-filling the form."""
    values = {}
    for name in FORM_FIELDS:
        value = fields.get(name)
        values[name] = value.strip() if isinstance(value, str) else ""
    return values


def parse_submitted_form(fields: Mapping[str, str]) -> LoanTerms:
    """parse_loan_form, logging the rejected field before re-raising."""
    try:
        return parse_loan_form(fields)
    except FormError as e:
        logger.info("Rejected loan form: field=%s (%s)", e.field, e)
        raise
