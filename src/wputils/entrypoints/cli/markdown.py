"""``wputils markdown``: render markdown to HTML."""

import logging
from pathlib import Path

import click

from wputils.utils.markdown import mini_markdown_parse

from .helpers import success, warn

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the HTML to this file instead of stdout.",
)
def markdown(source, output: Path | None) -> None:
    """Render markdown from SOURCE (default: stdin) as HTML."""
    text = source.read()
    if not text.strip():
        warn("No markdown to render.")
    logger.debug("Rendering %d characters of markdown", len(text))
    html = mini_markdown_parse(text)
    if output is None:
        click.echo(html)
        return
    output.write_text(html + "\n", encoding="utf-8")
    success(f"Wrote {output}")
