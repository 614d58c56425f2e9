"""FastAPI dependency injection."""

import logging

from fastapi import Depends, HTTPException, Request
from starlette.datastructures import FormData

from mortgage_breakdown.api.forms import FormError, parse_submitted_form
from mortgage_breakdown.engine.amortization import Schedule, generate_schedule
from mortgage_breakdown.models.loan import LoanTerms

logger = logging.getLogger(__name__)


async def get_form(request: Request) -> FormData:
    return await request.form()


def get_loan_terms(form: FormData = Depends(get_form)) -> LoanTerms:
    try:
        return parse_submitted_form(form)
    except FormError as e:
        raise HTTPException(status_code=400, detail=str(e))


def get_schedule(terms: LoanTerms = Depends(get_loan_terms)) -> Schedule:
    schedule = generate_schedule(terms)
    logger.debug(
        "Computed %d-month schedule, %s payment",
        terms.fixed_months,
        terms.payment_source.value,
    )
    return schedule
