"""Unit tests for publication models."""

import pytest
from pydantic import ValidationError

from dblp_publications.models.publication import Publication, PublicationType


def test_defaults():
    pub = Publication(type=PublicationType.CONFERENCE)

    assert pub.title == "No Title"
    assert pub.authors == "No Authors"
    assert pub.year == "No Year"
    assert pub.url == "#"
    assert pub.venue == "Unpublished"


def test_type_is_required():
    with pytest.raises(ValidationError):
        Publication(title="Foo")


def test_type_accepts_plain_string():
    pub = Publication(type="journal")
    assert pub.type is PublicationType.JOURNAL


def test_unknown_type_rejected():
    with pytest.raises(ValidationError):
        Publication(type="book")


def test_publication_is_immutable():
    pub = Publication(title="Foo", type=PublicationType.JOURNAL)

    with pytest.raises(ValidationError):
        pub.title = "Bar"


def test_publication_type_values_are_css_classes():
    assert [t.value for t in PublicationType] == ["journal", "conference"]
