"""FastAPI application serving the coverage report directory.

Request paths map onto files under the report directory. Missing
files answer 404 and the server keeps running; ``/`` resolves to
``index.html``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from covserve import __version__
from covserve.domain.models import ServerStatus
from covserve.reports import ensure_report_dir

logger = logging.getLogger(__name__)


def create_app(directory: Path | str = "htmlcov") -> FastAPI:
    """Create the report server application for ``directory``."""
    report_dir = ensure_report_dir(directory)

    app = FastAPI(
        title="covserve",
        description="Static server for HTML coverage reports",
        version=__version__,
    )
    app.state.directory = report_dir

    @app.get("/health")
    async def health_check() -> ServerStatus:
        return ServerStatus(
            status="ok",
            directory=str(report_dir),
            index_present=(report_dir / "index.html").is_file(),
        )

    # Registered last so /health is matched first
    app.mount("/", StaticFiles(directory=report_dir, html=True), name="reports")

    logger.debug("Serving reports from %s", report_dir.resolve())
    return app
