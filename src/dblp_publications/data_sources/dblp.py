"""
DBLP person-feed client.

Three methods:
  1. fetch_feed     — Retrieve the raw XML text (None on failure)
  2. parse_feed     — Parse XML text into an element tree root
  3. fetch_document — Both of the above; None on any failure
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from dblp_publications.config import get_settings
from dblp_publications.data_sources.base_client import (
    BaseClient,
    DataSourceError,
    RequestContext,
)

logger = logging.getLogger("dblp_publications.data_sources.dblp")


class DblpClient(BaseClient):
    """Client for a single DBLP person XML feed."""

    def __init__(self, feed_url: str | None = None) -> None:
        super().__init__()
        self.feed_url = feed_url if feed_url is not None else get_settings().feed_url

    @property
    def _source_name(self) -> str:
        return "dblp"

    async def fetch_feed(self) -> str | None:
        """Return the feed's XML text, or None if the request failed."""
        logger.info("Fetching DBLP data from %s", self.feed_url)
        try:
            xml_text = await self._rest_get_xml(
                self.feed_url,
                context=RequestContext(source=self._source_name, method="fetch_feed"),
            )
        except DataSourceError as e:
            logger.error("Error fetching DBLP data: %s", e)
            return None

        logger.info("DBLP data fetched successfully")
        return xml_text

    def parse_feed(self, xml_text: str) -> ET.Element:
        """Parse feed XML into its root element."""
        try:
            return ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise DataSourceError(self._source_name, f"Failed to parse XML: {e}")

    async def fetch_document(self) -> ET.Element | None:
        """Fetch and parse the feed; None stands for "no document"."""
        xml_text = await self.fetch_feed()
        if xml_text is None:
            return None

        try:
            return self.parse_feed(xml_text)
        except DataSourceError as e:
            logger.error("Error parsing DBLP data: %s", e)
            return None
