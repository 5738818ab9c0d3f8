from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_lossless.cli.utils import load_gedcom, write_json

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export the canonical tree and friendly model as JSON (stdout by default).
    """
    result = load_gedcom(gedcom, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    write_json(result, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
