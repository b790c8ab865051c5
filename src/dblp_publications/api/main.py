"""FastAPI application."""

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from dblp_publications import __version__
from dblp_publications.config import get_settings
from dblp_publications.models.publication import Publication
from dblp_publications.services.pipeline import (
    build_publications_page,
    load_publications,
)

app = FastAPI(
    title="dblp-publications",
    description="Publication list rendered from a DBLP person feed",
    version=__version__,
    debug=get_settings().debug,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/", response_class=HTMLResponse)
async def publications_page() -> str:
    """Publications page; every request is a fresh page load."""
    return await build_publications_page()


@app.get("/publications")
async def publications() -> list[Publication]:
    """Cleaned publication records as JSON."""
    return await load_publications()
