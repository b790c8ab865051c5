"""
Page-load pipeline: fetch → extract → render, run once per trigger.

The client is optional so callers (CLI, API, tests) can supply their own;
when omitted a DblpClient is created for the run and closed afterwards.
"""

import logging
import xml.etree.ElementTree as ET

from dblp_publications.config import get_settings
from dblp_publications.data_sources.dblp import DblpClient
from dblp_publications.models.publication import Publication
from dblp_publications.services.extractor import extract_publications
from dblp_publications.services.renderer import (
    new_container,
    render_page,
    render_publications,
)

logger = logging.getLogger(__name__)


async def load_publications(client: DblpClient | None = None) -> list[Publication]:
    """Fetch the feed and return its cleaned publications ([] on failure)."""
    if client is None:
        async with DblpClient() as owned:
            document = await owned.fetch_document()
    else:
        document = await client.fetch_document()

    return extract_publications(document)


async def on_page_ready(
    container: ET.Element, client: DblpClient | None = None
) -> list[Publication]:
    """Populate ``container`` with the publication list."""
    logger.info("Page loaded")
    publications = await load_publications(client)
    render_publications(container, publications)
    return publications


async def build_publications_page(
    client: DblpClient | None = None, heading: str | None = None
) -> str:
    """Run the pipeline against a fresh container and return the full page."""
    container = new_container()
    await on_page_ready(container, client)
    return render_page(container, heading or get_settings().page_title)
