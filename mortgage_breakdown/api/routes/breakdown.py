"""Browser form and HTML schedule page."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.datastructures import FormData

from mortgage_breakdown.api.deps import get_form
from mortgage_breakdown.api.forms import FormError, form_values, parse_submitted_form
from mortgage_breakdown.engine.amortization import generate_schedule
from mortgage_breakdown.render.html import render_page

router = APIRouter(tags=["breakdown"])


@router.get("/", response_class=HTMLResponse)
async def show_form():
    return HTMLResponse(render_page())


@router.post("/", response_class=HTMLResponse)
async def submit_form(form: FormData = Depends(get_form)):
    """Validate the submitted loan, then render its schedule.

    Invalid input re-renders the form with the message and a 400.
    """
    values = form_values(form)
    try:
        terms = parse_submitted_form(form)
    except FormError as e:
        return HTMLResponse(render_page(form=values, error=str(e)), status_code=400)

    schedule = generate_schedule(terms)
    return HTMLResponse(render_page(schedule, form=values))
