from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_lossless.cli.utils import load_gedcom

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        "-d",
        help="List every skipped line",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    result = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    for name, count in result.friendly.counts().items():
        table.add_row(name.capitalize(), str(count))

    table.add_row("Records", str(result.meta.record_count))
    table.add_row("Lines", str(result.meta.line_count))
    table.add_row("Trailer", "yes" if result.canonical.trailer else "no")
    table.add_row("Diagnostics", str(len(result.diagnostics)))

    console.print(table)

    if diagnostics and len(result.diagnostics):
        diag_table = Table(title="Diagnostics")
        diag_table.add_column("Line", justify="right")
        diag_table.add_column("Level")
        diag_table.add_column("Text")
        for d in result.diagnostics:
            diag_table.add_row(str(d.lineno or ""), d.level.value, d.raw or d.message)
        console.print(diag_table)
