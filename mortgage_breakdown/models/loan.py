from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentSource(Enum):
    COMPUTED = "computed"  # Annuity formula over the fixed period
    SUPPLIED = "supplied"  # Entered by the borrower, not checked


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    annual_rate: Decimal  # Percent, e.g. 5.0 for 5%
    fixed_months: int
    monthly_payment: Decimal
    payment_source: PaymentSource

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate / 100 / 12
