"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from mortgage_breakdown.api.routes import breakdown, downloads, schedule
from mortgage_breakdown.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title=settings.app_title,
    description="Fixed-rate mortgage amortization as HTML, PDF or CSV",
    version="0.1.0",
    debug=settings.debug,
)

app.include_router(breakdown.router)
app.include_router(downloads.router)
app.include_router(schedule.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
