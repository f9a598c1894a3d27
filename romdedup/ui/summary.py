"""
Run summary rendering.

Renders the outcome of a deduplication run as a Rich table.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from romdedup.dedupe.resolver import ResolutionResult


def build_summary_table(results: List[ResolutionResult], dry_run: bool = False) -> Table:
    """
    Build a table with one row per resolved duplicate set.

    Args:
        results: Results from DuplicateResolver.resolve_all()
        dry_run: Label the moved column as planned moves

    Returns:
        Rich Table
    """
    table = Table(
        title="Duplicate resolution summary",
        box=box.SIMPLE,
        show_edge=False,
    )
    table.add_column("Game", style="bold", overflow="fold")
    table.add_column("Kept", overflow="fold")
    table.add_column("Would move" if dry_run else "Moved", justify="right")
    table.add_column("Failed", justify="right")

    for result in results:
        kept = result.kept.name if result.kept is not None else "-"
        failed_style = "red" if result.failed else "dim"
        table.add_row(
            result.name,
            kept,
            str(len(result.moved)),
            Text(str(len(result.failed)), style=failed_style),
        )

    return table


def print_summary(
    results: List[ResolutionResult],
    dry_run: bool = False,
    console: Optional[Console] = None
) -> None:
    """Print the run summary, or a short note when nothing was resolved."""
    console = console or Console()

    if not results:
        console.print("No duplicate ROMs found.", highlight=False)
        return

    console.print(build_summary_table(results, dry_run=dry_run))

    moved = sum(len(r.moved) for r in results)
    failed = sum(len(r.failed) for r in results)
    verb = "would be moved" if dry_run else "moved"
    console.print(
        f"{len(results)} duplicate set(s), {moved} file(s) {verb}, {failed} failure(s)",
        highlight=False,
    )
