"""PDF download: summary block followed by the monthly table.

Pages are drawn as matplotlib figures with text only, then written through
PdfPages into an in-memory buffer.
"""

import io
import logging

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from mortgage_breakdown.config import settings
from mortgage_breakdown.engine.amortization import MonthlyEntry, Schedule
from mortgage_breakdown.render.formatting import format_currency

logger = logging.getLogger(__name__)

A4_INCHES = (8.27, 11.69)
LEFT = 0.08
LINE = 0.022  # Vertical step between table rows, in figure fraction
TABLE_COLUMNS = [("Month", 0.08), ("Interest", 0.22), ("Principal", 0.44), ("Balance", 0.66)]


class RenderError(Exception):
    """The document could not be produced."""


def summary_lines(schedule: Schedule) -> list[str]:
    terms = schedule.terms
    return [
        f"Principal: {format_currency(terms.principal)}",
        f"Fixed rate period: {terms.fixed_months} months",
        f"Monthly payment: {format_currency(terms.monthly_payment)}",
        f"Total paid: {format_currency(schedule.total_paid)}",
        f"Total interest: {format_currency(schedule.total_interest)}",
        f"Total principal: {format_currency(schedule.total_principal)}",
        f"Remaining balance: {format_currency(schedule.remaining_balance)}",
    ]


def _draw_table(fig: Figure, rows: list[MonthlyEntry], top: float) -> None:
    for label, x in TABLE_COLUMNS:
        fig.text(x, top, label, fontsize=11, weight="bold", va="top")

    y = top - LINE * 1.3
    for e in rows:
        cells = [
            str(e.month),
            format_currency(e.interest),
            format_currency(e.principal),
            format_currency(e.balance),
        ]
        for (_, x), cell in zip(TABLE_COLUMNS, cells):
            fig.text(x, y, cell, fontsize=10, va="top")
        y -= LINE


def _pages(entries: tuple[MonthlyEntry, ...], per_page: int) -> list[list[MonthlyEntry]]:
    return [list(entries[i:i + per_page]) for i in range(0, len(entries), per_page)]


def render_pdf(schedule: Schedule) -> bytes:
    """Build the whole document in memory and return its bytes."""
    # The summary takes room on the first page, so it carries fewer rows.
    first_page_rows = max(settings.pdf_rows_per_page - 12, 1)
    first, rest = schedule.entries[:first_page_rows], schedule.entries[first_page_rows:]

    buf = io.BytesIO()
    try:
        with PdfPages(buf, metadata={"Title": settings.app_title}) as pp:
            fig = Figure(figsize=A4_INCHES)
            fig.text(LEFT, 0.95, settings.app_title, fontsize=16, weight="bold", va="top")
            y = 0.90
            for line in summary_lines(schedule):
                fig.text(LEFT, y, line, fontsize=11, va="top")
                y -= 0.025
            _draw_table(fig, list(first), top=y - 0.02)
            pp.savefig(fig)

            if rest:
                for rows in _pages(rest, settings.pdf_rows_per_page):
                    fig = Figure(figsize=A4_INCHES)
                    _draw_table(fig, rows, top=0.95)
                    pp.savefig(fig)
    except Exception as e:
        raise RenderError(f"PDF generation failed: {e}") from e

    pdf_bytes = buf.getvalue()
    logger.debug("Rendered PDF: %d months, %d bytes", len(schedule.entries), len(pdf_bytes))
    return pdf_bytes
