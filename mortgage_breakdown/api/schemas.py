"""Pydantic schemas for the JSON API."""

from decimal import Decimal

from pydantic import BaseModel, Field

from mortgage_breakdown.config import settings


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    principal: Decimal = Field(..., gt=0, le=settings.max_principal, description="Loan amount")
    rate: Decimal = Field(..., ge=0, le=settings.max_rate, description="Annual rate in percent, e.g. 5.0")
    months: int = Field(..., gt=0, le=settings.max_months, description="Fixed rate period in months")
    monthly: Decimal | None = Field(
        None,
        gt=0,
        le=settings.max_principal,
        description="Monthly payment; calculated from the other terms when omitted",
    )


# ---- Response schemas ----

class LoanTermsResponse(BaseModel):
    principal: Decimal
    rate: Decimal
    months: int
    monthly_payment: Decimal
    payment_source: str


class MonthlyEntryResponse(BaseModel):
    month: int
    interest: Decimal
    principal: Decimal
    balance: Decimal


class YearSummaryResponse(BaseModel):
    year: int
    interest: Decimal
    principal: Decimal
    paid: Decimal
    ending_balance: Decimal


class ScheduleResponse(BaseModel):
    terms: LoanTermsResponse
    total_paid: Decimal
    total_interest: Decimal
    total_principal: Decimal
    remaining_balance: Decimal
    yearly: list[YearSummaryResponse] = []
    entries: list[MonthlyEntryResponse] = []
