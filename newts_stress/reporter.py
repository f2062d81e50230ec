from __future__ import annotations

from datetime import timedelta
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from newts_stress.converters import to_epoch_seconds
from newts_stress.domain.models import Configuration
from newts_stress.errors import ParseError

# Lists longer than this are shown as first..last.
_MAX_LISTED_NAMES = 5


def _seconds(value: timedelta) -> str:
    return f"{int(value.total_seconds())}s"


def _names(names: List[str]) -> str:
    if len(names) <= _MAX_LISTED_NAMES:
        return ", ".join(names)
    return f"{names[0]} .. {names[-1]} ({len(names)})"


def configuration_rows(config: Configuration) -> List[Tuple[str, str]]:
    """
    Flatten a configuration into (setting, value) pairs, derived values included.
    """
    return [
        ("command", config.command.name),
        ("threads", str(config.threads)),
        ("cassandra", f"{config.cassandra_host}:{config.cassandra_port}/{config.cassandra_keyspace}"),
        ("cassandra ttl", f"{config.cassandra_ttl}s"),
        ("start", f"{config.start.isoformat()} ({to_epoch_seconds(config.start)})"),
        ("end", f"{config.end.isoformat()} ({to_epoch_seconds(config.end)})"),
        ("interval", _seconds(config.interval)),
        ("heartbeat", _seconds(config.heartbeat)),
        ("resolution", _seconds(config.resolution)),
        ("select length", _seconds(config.select_length)),
        ("batch size", str(config.batch_size)),
        ("resources", _names(config.resources)),
        ("metrics", _names(config.metrics)),
    ]


def print_configuration(config: Configuration, console: Optional[Console] = None) -> None:
    """
    Render the effective configuration as a rich table.
    """
    console = console or Console()

    table = Table(
        title=f"Newts Stress: {config.command.name}",
        box=box.ROUNDED,
    )
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for name, value in configuration_rows(config):
        table.add_row(name, escape(value))

    console.print(table)


def print_parse_error(error: ParseError, usage: str, console: Optional[Console] = None) -> None:
    """Print a parse failure followed by the full usage text, on stderr by default."""
    console = console or Console(stderr=True)
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}", highlight=False)
    console.print(usage, markup=False, highlight=False)
