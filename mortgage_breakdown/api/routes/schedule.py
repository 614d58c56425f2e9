"""JSON schedule endpoint for programmatic clients."""

from fastapi import APIRouter

from mortgage_breakdown.api.schemas import (
    ScheduleRequest,
    ScheduleResponse,
    LoanTermsResponse,
    MonthlyEntryResponse,
    YearSummaryResponse,
)
from mortgage_breakdown.engine.amortization import (
    Schedule,
    generate_schedule,
    terms_with_computed_payment,
    terms_with_supplied_payment,
    yearly_summary,
)
from mortgage_breakdown.render.formatting import to_cents

router = APIRouter(prefix="/api/v1", tags=["schedule"])


def _schedule_to_response(schedule: Schedule) -> ScheduleResponse:
    """Convert engine Schedule to API response, rounding money to cents."""
    t = schedule.terms
    return ScheduleResponse(
        terms=LoanTermsResponse(
            principal=t.principal,
            rate=t.annual_rate,
            months=t.fixed_months,
            monthly_payment=to_cents(t.monthly_payment),
            payment_source=t.payment_source.value,
        ),
        total_paid=to_cents(schedule.total_paid),
        total_interest=to_cents(schedule.total_interest),
        total_principal=to_cents(schedule.total_principal),
        remaining_balance=to_cents(schedule.remaining_balance),
        yearly=[
            YearSummaryResponse(
                year=y.year,
                interest=to_cents(y.interest),
                principal=to_cents(y.principal),
                paid=to_cents(y.paid),
                ending_balance=to_cents(y.ending_balance),
            )
            for y in yearly_summary(schedule)
        ],
        entries=[
            MonthlyEntryResponse(
                month=e.month,
                interest=to_cents(e.interest),
                principal=to_cents(e.principal),
                balance=to_cents(e.balance),
            )
            for e in schedule.entries
        ],
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def compute_schedule(req: ScheduleRequest):
    """Loan terms → full fixed-period schedule.

    Omitting `monthly` calculates the payment; supplying it uses it as given.
    """
    if req.monthly is None:
        terms = terms_with_computed_payment(req.principal, req.rate, req.months)
    else:
        terms = terms_with_supplied_payment(req.principal, req.rate, req.months, req.monthly)
    return _schedule_to_response(generate_schedule(terms))
