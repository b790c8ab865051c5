"""Publication data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from dblp_publications.constants import (
    DEFAULT_AUTHORS,
    DEFAULT_TITLE,
    DEFAULT_URL,
    DEFAULT_YEAR,
    UNPUBLISHED_VENUE,
)


class PublicationType(str, Enum):
    JOURNAL = "journal"  # entry carries a <journal> venue
    CONFERENCE = "conference"  # anything else, usually <booktitle>


class Publication(BaseModel):
    """A cleaned publication ready for display."""

    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    authors: str = DEFAULT_AUTHORS
    year: str = DEFAULT_YEAR
    url: str = DEFAULT_URL
    venue: str = UNPUBLISHED_VENUE
    type: PublicationType
