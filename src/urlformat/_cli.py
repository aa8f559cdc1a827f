"""urlformat command line.

Usage:
    urlformat tokenize "item-%i-end"
    urlformat match "item-7-end" --directive "item-%i-end" -t int32
    urlformat -v match "/users/42" --config handler.yaml
"""

from __future__ import annotations

import json
import logging
import sys
from decimal import Decimal

import click

from urlformat._config import ConfigParseError, HandlerConfig, load_handler_config
from urlformat._kinds import HexMode
from urlformat._matcher import MatchOptions, MatchPolicy, NoMatch
from urlformat._shape import FormatError, Narrowing
from urlformat._tokenizer import tokenize_directive
from urlformat._tokens import Literal

logger = logging.getLogger("urlformat.cli")


def _json_default(value: object) -> str:
    if isinstance(value, Decimal):
        return str(value)
    msg = f"cannot serialize {type(value).__name__}"
    raise TypeError(msg)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log match diagnostics to stderr")
def main(verbose: bool) -> None:
    """Match strings against printf-style directives."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command("tokenize")
@click.argument("directive")
def tokenize_command(directive: str) -> None:
    """Print the tokens of DIRECTIVE, one per line."""
    for token in tokenize_directive(directive):
        if isinstance(token, Literal):
            click.echo(f"literal     {token.text!r}")
        else:
            click.echo(f"placeholder {token.kind.value}")


@main.command("match")
@click.argument("text")
@click.option("-d", "--directive", default=None, help="Directive to match against")
@click.option("-t", "--type", "shape", multiple=True, help="Shape entry, once per placeholder")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML handler config (replaces --directive/--type and policy flags)",
)
@click.option("--lenient", is_flag=True, help="Drop values that fail to decode")
@click.option(
    "--hex-mode",
    type=click.Choice([m.value for m in HexMode]),
    default=HexMode.LEGACY.value,
    show_default=True,
)
@click.option("--checked", is_flag=True, help="Reject integers that do not fit 32-bit shapes")
def match_command(
    text: str,
    directive: str | None,
    shape: tuple[str, ...],
    config_path: str | None,
    lenient: bool,
    hex_mode: str,
    checked: bool,
) -> None:
    """Match TEXT and print the extracted values as a JSON array."""
    if config_path is not None:
        try:
            config = load_handler_config(config_path)
        except ConfigParseError as e:
            raise click.UsageError(str(e)) from e
    elif directive is not None:
        config = HandlerConfig(
            directive=directive,
            shape=shape,
            options=MatchOptions(
                policy=MatchPolicy.LENIENT if lenient else MatchPolicy.STRICT,
                hex_mode=HexMode(hex_mode),
                narrowing=Narrowing.CHECKED if checked else Narrowing.WRAP,
            ),
        )
    else:
        msg = "one of --directive or --config is required"
        raise click.UsageError(msg)

    try:
        handler = config.bind(lambda values: None)
    except FormatError as e:
        raise click.UsageError(str(e)) from e

    result = handler.match(text)
    if isinstance(result, NoMatch):
        click.echo(f"no match: {result.reason.value}: {result.detail}", err=True)
        sys.exit(1)

    logger.debug("matched %r with %d value(s)", text, len(result.values))
    click.echo(json.dumps(list(result.values), default=_json_default))
