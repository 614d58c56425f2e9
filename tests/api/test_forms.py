import logging
from decimal import Decimal

import pytest

from mortgage_breakdown.api.forms import (
    FormError,
    form_values,
    parse_loan_form,
    parse_submitted_form,
)
from mortgage_breakdown.models.loan import PaymentSource


class TestParseLoanForm:
    def test_supplied_payment(self, loan_form):
        terms = parse_loan_form(loan_form)
        assert terms.principal == Decimal("200000")
        assert terms.annual_rate == Decimal("5.0")
        assert terms.fixed_months == 12
        assert terms.monthly_payment == Decimal("1073.64")
        assert terms.payment_source == PaymentSource.SUPPLIED

    def test_blank_monthly_computes_payment(self, loan_form):
        loan_form["monthly"] = "  "
        terms = parse_loan_form(loan_form)
        assert terms.payment_source == PaymentSource.COMPUTED
        assert terms.monthly_payment.quantize(Decimal("0.01")) == Decimal("17121.50")

    def test_whitespace_trimmed(self):
        terms = parse_loan_form(
            {"principal": " 1000 ", "rate": "\t0\n", "months": " 4", "monthly": "250 "}
        )
        assert terms.principal == Decimal("1000")
        assert terms.fixed_months == 4

    def test_zero_rate_allowed(self, loan_form):
        loan_form["rate"] = "0"
        assert parse_loan_form(loan_form).annual_rate == 0

    @pytest.mark.parametrize("field", ["principal", "rate", "months"])
    def test_missing_required(self, loan_form, field):
        del loan_form[field]
        with pytest.raises(FormError) as exc:
            parse_loan_form(loan_form)
        assert exc.value.field == field
        assert str(exc.value) == f"missing field: {field}"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("principal", "lots"),
            ("principal", "NaN"),
            ("principal", "-5"),
            ("rate", "Infinity"),
            ("rate", "-0.5"),
            ("months", "12.5"),
            ("months", "0"),
            ("months", "-3"),
            ("months", "100000"),
            ("monthly", "abc"),
            ("monthly", "0"),
            ("principal", "1e26"),
            ("principal", "1000000000000.01"),
            ("rate", "1e999990"),
            ("rate", "100.5"),
            ("monthly", "1e13"),
            ("months", "1_2"),
            ("months", "\u0661\u0662"),
        ],
    )
    def test_invalid_values(self, loan_form, field, value):
        loan_form[field] = value
        with pytest.raises(FormError) as exc:
            parse_loan_form(loan_form)
        assert exc.value.field == field
        assert str(exc.value).startswith(f"invalid {field}")

    def test_limits_are_inclusive(self):
        terms = parse_loan_form(
            {"principal": "1000000000000", "rate": "100", "months": "1200", "monthly": "1000000000000"}
        )
        assert terms.principal == Decimal("1e12")
        assert terms.annual_rate == Decimal("100")

    def test_form_error_is_value_error(self):
        assert issubclass(FormError, ValueError)


def test_form_values_keeps_known_fields_only():
    values = form_values({"principal": " 5 ", "rate": "1", "extra": "x"})
    assert values == {"principal": "5", "rate": "1", "months": "", "monthly": ""}


def test_rejection_is_logged(loan_form, caplog):
    loan_form["rate"] = "five"
    with caplog.at_level(logging.INFO, logger="mortgage_breakdown.api.forms"):
        with pytest.raises(FormError):
            parse_submitted_form(loan_form)
    assert "field=rate" in caplog.text
