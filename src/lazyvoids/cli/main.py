"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- lazyvoids when: Resolve a key against KEY=VALUE cases
- lazyvoids map: Build an immutable map from KEY=VALUE pairs
- lazyvoids roll: Roll a 1-in-N chance
- lazyvoids pick: Pick a random element
"""

from __future__ import annotations

from typing import Annotated

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lazyvoids import __version__
from lazyvoids.cli.config import get_config

app = typer.Typer(
    name="lazyvoids",
    help="lazyvoids - small static helpers from the command line",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lazyvoids {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """lazyvoids - small static helpers.

    Use 'lazyvoids COMMAND --help' for information on specific commands.
    """
    if verbose:
        level = 10  # DEBUG
    else:
        try:
            level = get_config().log_level_number
        except ValidationError as err:
            err_console.print(f"[yellow]![/yellow] Ignoring invalid configuration: {escape(str(err))}")
            level = 20  # INFO
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


@app.command("when")
def when_(
    key: Annotated[str, typer.Argument(help="Key to resolve.")],
    case: Annotated[
        list[str] | None,
        typer.Option("--case", "-c", help="Candidate mapping (key=value). Repeatable."),
    ] = None,
    default: Annotated[
        str | None,
        typer.Option("--default", "-d", help="Value to print when no case matches."),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with an error when no case matches."),
    ] = False,
) -> None:
    """Resolve KEY against candidate cases; the last matching case wins.

    Examples:
        lazyvoids when GET -c GET=read -c POST=write

        lazyvoids when PATCH -c GET=read --default other

        lazyvoids when PATCH -c GET=read --strict
    """
    from lazyvoids.cli.commands.resolve import resolve_key  # noqa: PLC0415

    resolve_key(key=key, cases=case or [], default=default, strict=strict)


@app.command("map")
def map_(
    pairs: Annotated[
        list[str] | None,
        typer.Argument(help="Entries as key=value."),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output raw JSON."),
    ] = False,
) -> None:
    """Build an immutable map from key=value entries.

    Duplicate keys are rejected.

    Examples:
        lazyvoids map a=1 b=2

        lazyvoids map a=1 b=2 --json
    """
    from lazyvoids.cli.commands.build_map import build_map  # noqa: PLC0415

    build_map(pairs=pairs or [], json_output=json_output)


@app.command()
def roll(
    chance: Annotated[int, typer.Argument(help="Roll a 1-in-CHANCE event.")],
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed (overrides LAZYVOIDS_RANDOM_SEED)."),
    ] = None,
) -> None:
    """Roll a 1-in-CHANCE event and print hit or miss.

    Examples:
        lazyvoids roll 6

        lazyvoids roll 100 --seed 42
    """
    from lazyvoids.cli.commands.dice import roll_chance  # noqa: PLC0415

    roll_chance(chance=chance, seed=seed)


@app.command()
def pick(
    elements: Annotated[list[str], typer.Argument(help="Elements to choose from.")],
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed (overrides LAZYVOIDS_RANDOM_SEED)."),
    ] = None,
) -> None:
    """Print one of ELEMENTS chosen at random.

    Examples:
        lazyvoids pick red green blue
    """
    from lazyvoids.cli.commands.dice import pick_element  # noqa: PLC0415

    pick_element(elements=elements, seed=seed)


if __name__ == "__main__":
    app()
