"""HTML page: input form, and the schedule once one has been computed.

The template is compiled once at import; requests only render it.
"""

from collections.abc import Mapping
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mortgage_breakdown.config import settings
from mortgage_breakdown.engine.amortization import Schedule, yearly_summary
from mortgage_breakdown.render.formatting import format_currency

TEMPLATE_DIR = Path(__file__).parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["currency"] = format_currency

PAGE = env.get_template("index.html")


def render_page(
    schedule: Schedule | None = None,
    form: Mapping[str, str] | None = None,
    error: str | None = None,
) -> str:
    """Render the form, optionally with results or a validation error.

    `form` holds the raw submitted values so the inputs keep what the user typed.
    """
    return PAGE.render(
        title=settings.app_title,
        form=dict(form or {}),
        error=error,
        schedule=schedule,
        terms=schedule.terms if schedule else None,
        yearly=yearly_summary(schedule) if schedule else [],
    )
