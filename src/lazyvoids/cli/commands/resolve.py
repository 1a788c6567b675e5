"""When command implementation."""

from __future__ import annotations

from functools import reduce

from rich.console import Console
from rich.markup import escape

from lazyvoids.cli.commands import parse_pair
from lazyvoids.when import When, when

console = Console()
err_console = Console(stderr=True)


class NoMatchError(LookupError):
    """Raised when no case matched the key under --strict."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No case matched key {key!r}")


def resolve_key(
    *,
    key: str,
    cases: list[str],
    default: str | None,
    strict: bool,
) -> None:
    """Execute when command.

    Args:
        key: The key to resolve.
        cases: Candidate mappings (key=value format).
        default: Value printed when nothing matches.
        strict: Exit with status 1 when nothing matches and no default is set.
    """
    try:
        pairs = [parse_pair(c) for c in cases]
    except ValueError as err:
        err_console.print(f"[red]✗[/red] {escape(str(err))}")
        raise SystemExit(1) from None

    resolver: When[str, str] = reduce(
        lambda acc, pair: acc.match(*pair),
        pairs,
        when(key),
    )

    if default is not None:
        _print_value(resolver.or_else(default))
        return

    if strict:
        try:
            value = resolver.or_else_raise(lambda: NoMatchError(key))
        except NoMatchError as err:
            err_console.print(f"[red]✗[/red] {escape(str(err))}")
            raise SystemExit(1) from None
        _print_value(value)
        return

    if resolver.is_empty():
        console.print(f"[yellow]![/yellow] No case matched key [cyan]{escape(key)}[/cyan].")
        return

    resolver.if_present(_print_value)


def _print_value(value: str) -> None:
    console.print(value, markup=False, highlight=False)
