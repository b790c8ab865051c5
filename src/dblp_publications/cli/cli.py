"""Command-line interface for dblp-publications."""

import asyncio
import json
import logging
from pathlib import Path

import click

from dblp_publications.config import get_settings
from dblp_publications.constants import EMPTY_PLACEHOLDER
from dblp_publications.data_sources.dblp import DblpClient
from dblp_publications.services.pipeline import (
    build_publications_page,
    load_publications,
)


@click.group()
@click.version_option(package_name="dblp-publications")
def main():
    """dblp-publications: Render a DBLP publication list as a webpage."""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--feed-url", help="DBLP person XML feed (defaults to settings)")
@click.option("-o", "--output", type=click.Path(), help="Output file path (HTML)")
def render(feed_url: str | None, output: str | None):
    """Fetch the feed and write the publications page."""

    async def _run() -> str:
        async with DblpClient(feed_url) as client:
            return await build_publications_page(client)

    page = asyncio.run(_run())

    if output:
        Path(output).write_text(page, encoding="utf-8")
        click.echo(f"Page saved to: {output}")
    else:
        click.echo(page)


@main.command(name="list")
@click.option("--feed-url", help="DBLP person XML feed (defaults to settings)")
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
def list_publications(feed_url: str | None, as_json: bool):
    """Print the cleaned publication list."""

    async def _run():
        async with DblpClient(feed_url) as client:
            return await load_publications(client)

    publications = asyncio.run(_run())

    if as_json:
        click.echo(
            json.dumps([p.model_dump(mode="json") for p in publications], indent=2)
        )
        return

    if not publications:
        click.echo(EMPTY_PLACEHOLDER)
        return

    for i, pub in enumerate(publications, 1):
        click.echo(f"  {i}. [{pub.type.value}] {pub.title} ({pub.venue}, {pub.year})")
        click.echo(f"     {pub.authors}")


if __name__ == "__main__":
    main()
