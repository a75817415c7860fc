"""``wputils case``: convert text between letter cases."""

import click

from wputils.utils.strings import (
    camel_case,
    kebab_case,
    pascal_case,
    sentence_case,
    snake_case,
    title_case,
)

CONVERTERS = {
    "title": title_case,
    "sentence": sentence_case,
    "pascal": pascal_case,
    "snake": snake_case,
    "kebab": kebab_case,
    "camel": camel_case,
}


@click.command()
@click.argument("style", type=click.Choice(list(CONVERTERS), case_sensitive=False))
@click.argument("text", nargs=-1, required=True)
def case(style: str, text: tuple[str, ...]) -> None:
    """Convert TEXT to the letter case STYLE."""
    click.echo(CONVERTERS[style.lower()](" ".join(text)))
