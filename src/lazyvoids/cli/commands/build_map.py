"""Map command implementation."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from lazyvoids.cli.commands import parse_pair
from lazyvoids.maps import MapBuildError, map_of_pairs

console = Console()
err_console = Console(stderr=True)


def build_map(*, pairs: list[str], json_output: bool) -> None:
    """Execute map command.

    Args:
        pairs: Entries in key=value format.
        json_output: Print JSON instead of a table.
    """
    try:
        built = map_of_pairs(parse_pair(p) for p in pairs)
    except MapBuildError as err:
        err_console.print(f"[red]✗[/red] Map build failed: {escape(str(err))}")
        raise SystemExit(1) from None
    except ValueError as err:
        err_console.print(f"[red]✗[/red] {escape(str(err))}")
        raise SystemExit(1) from None

    if json_output:
        console.print_json(data=built.to_dict())
        return

    if not built:
        console.print("[yellow]![/yellow] Map is empty.")
        return

    table = Table(title=f"Map ({len(built)} entries)")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in built.items():
        table.add_row(Text(key), Text(value))
    console.print(table)
