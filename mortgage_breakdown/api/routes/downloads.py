"""PDF and CSV downloads of a submitted loan's schedule."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from mortgage_breakdown.api.deps import get_schedule
from mortgage_breakdown.config import settings
from mortgage_breakdown.engine.amortization import Schedule
from mortgage_breakdown.render.csv_export import render_csv
from mortgage_breakdown.render.pdf import RenderError, render_pdf

logger = logging.getLogger(__name__)

router = APIRouter(tags=["downloads"])


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f"attachment; filename={filename}"}


@router.post("/download-pdf")
def download_pdf(schedule: Schedule = Depends(get_schedule)):
    try:
        pdf_bytes = render_pdf(schedule)
    except RenderError:
        logger.exception("PDF generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate PDF")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers=_attachment(settings.pdf_filename),
    )


@router.post("/download-csv")
def download_csv(schedule: Schedule = Depends(get_schedule)):
    return Response(
        content=render_csv(schedule),
        media_type="text/csv",
        headers=_attachment(settings.csv_filename),
    )
