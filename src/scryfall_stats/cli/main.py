from typing import Optional

import click

from ..config.settings import settings
from ..core.logging import setup_logging
from ..report import render_text
from .common import (
    ProgressPrinter,
    apply_log_overrides,
    exit_with_message,
    write_json_outputs,
)
from .handlers import handle_search_stats


@click.command(name="scryfall-stats")
@click.argument("query", required=False)
@click.option(
    "--url",
    "page_url",
    help="A scryfall.com search results page URL to take the query from.",
)
@click.option(
    "--max-pages",
    default=settings.max_pages,
    show_default=True,
    type=click.IntRange(min=1, max=100),
    help="Stop after this many result pages (175 cards each).",
)
@click.option(
    "--top",
    default=settings.top_n,
    show_default=True,
    type=click.IntRange(min=1, max=50),
    help="Entries shown per ranked section.",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    default=False,
    help="Print the statistics as JSON instead of the text report.",
)
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False),
    help="Also write the JSON statistics to this file.",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Hide page-by-page progress (also honored when SS_LOG=quiet).",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging (also honored when SS_LOG=verbose).",
)
def cli(
    query: Optional[str],
    page_url: Optional[str],
    max_pages: int,
    top: int,
    output_json: bool,
    out_path: Optional[str],
    quiet: bool,
    verbose: bool,
):
    """Fetch every page of a Scryfall search and print frequency statistics."""
    quiet, verbose = apply_log_overrides(quiet=quiet, verbose=verbose)
    setup_logging("DEBUG" if verbose else None)

    progress = ProgressPrinter()
    if quiet or output_json:
        progress.enabled = False
    else:
        progress.update("Fetching card data...")

    result = handle_search_stats(
        query,
        page_url,
        max_pages=max_pages,
        top=top,
        progress_callback=progress,
    )
    progress.close()

    if not result["ok"]:
        exit_with_message(f"Error: {result['error']}", code=1)

    value = result["value"]
    write_json_outputs(
        payload=value["payload"], out_path=out_path, emit_stdout=output_json
    )
    if not output_json:
        click.echo(render_text(value["summary"], value["max_pages"]))


if __name__ == "__main__":
    cli()
