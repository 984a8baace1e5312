from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from ua_mixer.domain.models import MixResult, Pool, name_key


def _share(count: int, total: int) -> str:
    return f"{(count / total) * 100:.1f}%" if total else "0.0%"


def print_pools(
    pools: Sequence[Pool], primary_name: str, console: Optional[Console] = None
) -> None:
    """
    Render the registry's pools as a rich table, primary pool highlighted.
    """
    console = console or Console()

    if not pools:
        console.print("[yellow]No pools registered.[/yellow]")
        return

    table = Table(title="Device Pools", box=box.ROUNDED)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Pool", style="cyan", no_wrap=True)
    table.add_column("User Agents", justify="right", style="magenta")
    table.add_column("Role", style="green")

    primary_key = name_key(primary_name)
    for pool in pools:
        if pool.key == primary_key:
            role = "[bold]primary[/bold]"
        elif pool.records:
            role = "secondary"
        else:
            role = "[dim]empty[/dim]"
        table.add_row(pool.id, pool.name, f"{len(pool.records):,}", role)

    console.print(table)


def print_mix_summary(result: MixResult, console: Optional[Console] = None) -> None:
    """
    Render how many records each pool contributed to a mix.

    Secondary pools are listed in round-robin order.
    """
    console = console or Console()
    total = result["total"]

    table = Table(
        title=f"Mixed {total:,} user agents",
        box=box.ROUNDED,
        caption=f"{result['rounds']} rounds in {result['duration_seconds']:.4f}s",
    )
    table.add_column("Pool", style="cyan", no_wrap=True)
    table.add_column("Records", justify="right", style="magenta")
    table.add_column("Share", justify="right", style="bold green")

    table.add_row(
        f"{result['primary']} [dim](primary)[/dim]",
        f"{result['primary_count']:,}",
        _share(result["primary_count"], total),
    )
    for name, count in result["secondary_counts"].items():
        table.add_row(name, f"{count:,}", _share(count, total))

    console.print(table)


__all__ = ["print_mix_summary", "print_pools"]
