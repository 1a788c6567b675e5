"""Roll and pick command implementations."""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lazyvoids.cli.config import get_config
from lazyvoids.rng import PseudoRandom

console = Console()
err_console = Console(stderr=True)


def _generator(seed: int | None) -> PseudoRandom:
    if seed is None:
        try:
            seed = get_config().random_seed
        except ValidationError as err:
            err_console.print(f"[red]✗[/red] Invalid configuration: {escape(str(err))}")
            raise SystemExit(1) from None
    return PseudoRandom(seed)


def roll_chance(*, chance: int, seed: int | None) -> None:
    """Execute roll command.

    Args:
        chance: Roll a 1-in-chance event.
        seed: Explicit seed, falling back to the configured one.
    """
    try:
        hit = _generator(seed).roll(chance)
    except ValueError as err:
        err_console.print(f"[red]✗[/red] {escape(str(err))}")
        raise SystemExit(1) from None

    if hit:
        console.print("[green]✓[/green] hit")
    else:
        console.print("[yellow]-[/yellow] miss")


def pick_element(*, elements: list[str], seed: int | None) -> None:
    """Execute pick command.

    Args:
        elements: Candidates to choose from.
        seed: Explicit seed, falling back to the configured one.
    """
    try:
        choice = _generator(seed).random_element(elements)
    except IndexError as err:
        err_console.print(f"[red]✗[/red] {escape(str(err))}")
        raise SystemExit(1) from None

    console.print(choice, markup=False, highlight=False)
