"""Pytest configuration and fixtures."""

import xml.etree.ElementTree as ET

import pytest

from dblp_publications.models.publication import Publication, PublicationType

SAMPLE_FEED_XML = """\
<?xml version="1.0" encoding="US-ASCII"?>
<dblpperson name="Jane Doe 0001" pid="11/1649" n="5">
<person key="homepages/11/1649" mdate="2024-01-01">
<author pid="11/1649">Jane Doe 0001</author>
</person>
<r><article key="journals/jacm/Doe20" mdate="2021-01-01">
<author pid="11/1649">Jane Doe 0001</author>
<author pid="22/2">Richard Roe</author>
<title>A Journal Result.</title>
<pages>1-20</pages>
<year>2020</year>
<volume>67</volume>
<journal>J. ACM</journal>
<ee>https://doi.org/10.1145/1</ee>
</article></r>
<r><inproceedings key="conf/icalp/Doe19" mdate="2020-01-01">
<author pid="11/1649">Jane Doe 0001</author>
<author pid="33/3">John Q. Public 3</author>
<title>A Conference Result.</title>
<year>2019</year>
<booktitle>ICALP</booktitle>
<ee>https://doi.org/10.4230/2</ee>
</inproceedings></r>
<r><article key="journals/corr/abs-1901-00001" mdate="2019-01-01">
<author pid="11/1649">Jane Doe 0001</author>
<title>A Preprint.</title>
<year>2019</year>
<journal>CoRR</journal>
<ee>http://arxiv.org/abs/1901.00001</ee>
</article></r>
<r><article key="journals/eccc/Doe18" mdate="2018-01-01">
<author pid="11/1649">Jane Doe 0001</author>
<title>A Colloquium Report.</title>
<year>2018</year>
<journal>Electron. Colloquium Comput. Complex.</journal>
</article></r>
<r><phdthesis key="phd/Doe17" mdate="2017-01-01">
<author pid="11/1649">Jane Doe 0001</author>
<title>A Thesis.</title>
<year>2017</year>
<school>Some University</school>
</phdthesis></r>
</dblpperson>
"""


@pytest.fixture
def sample_feed_xml() -> str:
    """DBLP person feed with one journal, one conference and three dropped entries."""
    return SAMPLE_FEED_XML


@pytest.fixture
def sample_feed_root() -> ET.Element:
    """Parsed root of the sample feed."""
    return ET.fromstring(SAMPLE_FEED_XML)


@pytest.fixture
def sample_publications() -> list[Publication]:
    """Two already-cleaned publications."""
    return [
        Publication(
            title="A Journal Result.",
            authors="Jane Doe, Richard Roe",
            year="2020",
            url="https://doi.org/10.1145/1",
            venue="J. ACM",
            type=PublicationType.JOURNAL,
        ),
        Publication(
            title="A Conference Result.",
            authors="Jane Doe, John Q. Public",
            year="2019",
            url="https://doi.org/10.4230/2",
            venue="ICALP",
            type=PublicationType.CONFERENCE,
        ),
    ]
