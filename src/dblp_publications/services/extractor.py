"""
Extract cleaned publications from a parsed DBLP person feed.

Each <r> element becomes at most one Publication. Entries without a venue,
and entries in blacklisted venues (CoRR, ECCC), are dropped.
"""

import logging
import re
import xml.etree.ElementTree as ET

from dblp_publications.constants import (
    DEFAULT_AUTHORS,
    DEFAULT_TITLE,
    DEFAULT_URL,
    DEFAULT_YEAR,
    ENTRY_TAG,
    EXCLUDED_VENUE_SUBSTRINGS,
    UNPUBLISHED_VENUE,
)
from dblp_publications.models.publication import Publication, PublicationType

logger = logging.getLogger(__name__)

VENUE_TAGS: frozenset[str] = frozenset({"journal", "booktitle"})

# DBLP disambiguates homonyms with a numeric suffix, e.g. "Jane Doe 0001".
_TRAILING_DIGITS_RE = re.compile(r"[\d\s]+$")


def clean_author_name(name: str) -> str:
    """Strip a trailing numeric disambiguator and surrounding whitespace."""
    return _TRAILING_DIGITS_RE.sub("", name).strip()


def is_excluded_venue(venue: str) -> bool:
    """Return True if the entry should not be shown for this venue."""
    if venue == UNPUBLISHED_VENUE:
        return True
    lowered = venue.lower()
    return any(blocked in lowered for blocked in EXCLUDED_VENUE_SUBSTRINGS)


def _text(elem: ET.Element) -> str:
    """Full text content of an element, nested markup included."""
    return "".join(elem.itertext())


def _first_text(entry: ET.Element, tag: str, default: str) -> str:
    found = entry.find(f".//{tag}")
    return _text(found) if found is not None else default


def _venue(entry: ET.Element) -> str:
    for elem in entry.iter():
        if elem is not entry and elem.tag in VENUE_TAGS:
            return _text(elem)
    return UNPUBLISHED_VENUE


def extract_publication(entry: ET.Element) -> Publication | None:
    """Map a single <r> element to a Publication, or None if it is filtered out."""
    venue = _venue(entry)
    if is_excluded_venue(venue):
        return None

    authors = ", ".join(
        clean_author_name(_text(author)) for author in entry.findall(".//author")
    )
    is_journal = entry.find(".//journal") is not None

    return Publication(
        title=_first_text(entry, "title", DEFAULT_TITLE),
        authors=authors or DEFAULT_AUTHORS,
        year=_first_text(entry, "year", DEFAULT_YEAR),
        url=_first_text(entry, "ee", DEFAULT_URL),
        venue=venue,
        type=PublicationType.JOURNAL if is_journal else PublicationType.CONFERENCE,
    )


def extract_publications(root: ET.Element | None) -> list[Publication]:
    """Extract publications in document order; a missing document yields []."""
    if root is None:
        logger.error("XML document is missing; no publications extracted")
        return []

    publications = []
    for entry in root.iter(ENTRY_TAG):
        publication = extract_publication(entry)
        if publication is not None:
            publications.append(publication)

    logger.info("Extracted %d publications.", len(publications))
    return publications
