"""
Render publications as HTML.

The container is an ElementTree element standing in for the host page's
``<ul id="publications-list">`` node; rendering mutates it in place.
"""

import logging
import xml.etree.ElementTree as ET

from dblp_publications.constants import (
    CONTAINER_ID,
    DEFAULT_PAGE_TITLE,
    EMPTY_PLACEHOLDER,
)
from dblp_publications.models.publication import Publication

logger = logging.getLogger(__name__)

PAGE_STYLE = """
body { font-family: sans-serif; max-width: 60em; margin: 2em auto; }
#publications-list li { margin-bottom: 1em; padding-left: 0.5em; }
#publications-list li.journal { border-left: 4px solid #1f6feb; }
#publications-list li.conference { border-left: 4px solid #2da44e; }
"""


def new_container() -> ET.Element:
    """Return an empty publications list container."""
    return ET.Element("ul", {"id": CONTAINER_ID})


def _clear(container: ET.Element) -> None:
    # Element.clear() would also drop the id attribute.
    for child in list(container):
        container.remove(child)
    container.text = None


def _list_item(container: ET.Element, publication: Publication) -> ET.Element:
    li = ET.SubElement(container, "li", {"class": publication.type.value})

    strong = ET.SubElement(li, "strong")
    link = ET.SubElement(strong, "a", {"href": publication.url, "target": "_blank"})
    link.text = publication.title
    ET.SubElement(li, "br")

    authors = ET.SubElement(li, "em")
    authors.text = f"Authors: {publication.authors}"
    ET.SubElement(li, "br")

    venue = ET.SubElement(li, "em")
    venue.text = f"Published in: {publication.venue}, {publication.year}"
    return li


def render_publications(
    container: ET.Element, publications: list[Publication]
) -> None:
    """Replace the container's content with one list item per publication."""
    _clear(container)

    if not publications:
        placeholder = ET.SubElement(container, "p")
        placeholder.text = EMPTY_PLACEHOLDER
        return

    for publication in publications:
        _list_item(container, publication)

    logger.info("Publications displayed successfully!")


def to_html(element: ET.Element) -> str:
    return ET.tostring(element, encoding="unicode", method="html")


def render_page(container: ET.Element, heading: str = DEFAULT_PAGE_TITLE) -> str:
    """Wrap an already rendered container in a complete HTML document."""
    html = ET.Element("html", {"lang": "en"})

    head = ET.SubElement(html, "head")
    ET.SubElement(head, "meta", {"charset": "utf-8"})
    title = ET.SubElement(head, "title")
    title.text = heading
    style = ET.SubElement(head, "style")
    style.text = PAGE_STYLE

    body = ET.SubElement(html, "body")
    h1 = ET.SubElement(body, "h1")
    h1.text = heading

    body.append(container)

    return "<!DOCTYPE html>\n" + to_html(html)
