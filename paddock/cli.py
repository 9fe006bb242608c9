"""Paddock CLI — scrape a championship participant list to CSV.

Usage:
    paddock --url https://example.com/championship/537
    paddock --url ... --output drivers.csv
    paddock --url ... --with-reverse-name     # also write *-name-reversed.csv
"""

from __future__ import annotations

import logging

import click

from paddock.common.exceptions import PaddockError
from paddock.config import DEFAULT_OUTPUT, DEFAULT_TIMEOUT, ScrapeConfig
from paddock.pipeline import run


@click.command()
@click.version_option(package_name="paddock")
@click.option(
    "--url",
    default=None,
    help="URL of the championship participants page to scrape.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Output CSV file path.",
)
@click.option(
    "--with-reverse-name",
    is_flag=True,
    help="Also write a CSV with driver names as 'Lastname Firstname'.",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="HTTP timeout in seconds.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def cli(
    url: str | None,
    output: str,
    with_reverse_name: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """Scrape championship participants from a web page into a CSV file.

    \b
    Examples:
        paddock --url https://example.com/championship/537
        paddock --url https://example.com/championship/537 --with-reverse-name
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScrapeConfig(
            url=url or "",
            output=output,
            with_reverse_name=with_reverse_name,
            timeout=timeout,
        )
        result = run(config)
    except PaddockError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Participants: {result.participant_count}")
    click.echo(f"Output:       {result.output}")
    if result.reversed_output is not None:
        click.echo(f"Reversed:     {result.reversed_output}")


def main() -> None:
    """Entry point for the ``paddock`` console script."""
    cli()
