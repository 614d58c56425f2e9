"""Fixed-rate amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from mortgage_breakdown.models.loan import LoanTerms, PaymentSource

ZERO = Decimal("0")


@dataclass(frozen=True)
class MonthlyEntry:
    month: int
    interest: Decimal
    principal: Decimal
    balance: Decimal


@dataclass(frozen=True)
class YearSummary:
    year: int
    interest: Decimal
    principal: Decimal
    paid: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class Schedule:
    terms: LoanTerms
    entries: tuple[MonthlyEntry, ...]

    @property
    def total_interest(self) -> Decimal:
        return sum((e.interest for e in self.entries), ZERO)

    @property
    def total_principal(self) -> Decimal:
        return sum((e.principal for e in self.entries), ZERO)

    @property
    def total_paid(self) -> Decimal:
        return self.total_interest + self.total_principal

    @property
    def remaining_balance(self) -> Decimal:
        return self.entries[-1].balance


def monthly_payment(principal: Decimal, annual_rate: Decimal, months: int) -> Decimal:
    """Fixed monthly payment that fully amortizes `principal` over `months`.

    `annual_rate` is a percentage (5.0 for 5%). The result is not rounded.
    """
    if months <= 0:
        raise ValueError(f"months must be positive, got {months}")

    r = annual_rate / 100 / 12
    if r == 0:
        return principal / months

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** months
    return principal * (r * factor) / (factor - 1)


def terms_with_computed_payment(
    principal: Decimal, annual_rate: Decimal, months: int
) -> LoanTerms:
    """Loan terms whose payment amortizes the loan exactly over the fixed period."""
    return LoanTerms(
        principal=principal,
        annual_rate=annual_rate,
        fixed_months=months,
        monthly_payment=monthly_payment(principal, annual_rate, months),
        payment_source=PaymentSource.COMPUTED,
    )


def terms_with_supplied_payment(
    principal: Decimal, annual_rate: Decimal, months: int, payment: Decimal
) -> LoanTerms:
    """Loan terms using the borrower's own payment figure as-is.

    The payment is not checked against the other terms: a payment taken from a
    longer mortgage leaves a balance at the end of the fixed period.
    """
    return LoanTerms(
        principal=principal,
        annual_rate=annual_rate,
        fixed_months=months,
        monthly_payment=payment,
        payment_source=PaymentSource.SUPPLIED,
    )


def generate_schedule(terms: LoanTerms) -> Schedule:
    """Month-by-month ledger over the fixed-rate period.

    Always exactly `terms.fixed_months` entries. An overpaying final month is
    clamped so the balance lands on zero; an underpaying payment just leaves a
    balance outstanding at the end.
    """
    if terms.fixed_months <= 0:
        raise ValueError(f"fixed_months must be positive, got {terms.fixed_months}")

    r = terms.monthly_rate
    balance = terms.principal
    entries: list[MonthlyEntry] = []

    for month in range(1, terms.fixed_months + 1):
        interest = balance * r
        principal_paid = terms.monthly_payment - interest
        balance -= principal_paid

        if balance < 0:
            principal_paid += balance
            balance = ZERO

        entries.append(MonthlyEntry(
            month=month,
            interest=interest,
            principal=principal_paid,
            balance=balance,
        ))

    return Schedule(terms=terms, entries=tuple(entries))


def yearly_summary(schedule: Schedule) -> list[YearSummary]:
    """Roll the schedule up into 12-month buckets.

    A trailing partial year gets its own row.
    """
    yearly: list[YearSummary] = []
    year_interest = ZERO
    year_principal = ZERO

    for e in schedule.entries:
        year_interest += e.interest
        year_principal += e.principal

        if e.month % 12 == 0 or e.month == len(schedule.entries):
            yearly.append(YearSummary(
                year=(e.month - 1) // 12 + 1,
                interest=year_interest,
                principal=year_principal,
                paid=year_interest + year_principal,
                ending_balance=e.balance,
            ))
            year_interest = ZERO
            year_principal = ZERO

    return yearly
