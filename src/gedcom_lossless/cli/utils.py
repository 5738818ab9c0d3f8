from __future__ import annotations

import logging
import time
from pathlib import Path

from rich.console import Console

from gedcom_lossless.exporter import export_result_json, serialize_result_to_json_string
from gedcom_lossless.logging import set_level
from gedcom_lossless.parser_core import ParseResult, parse_gedcom

console = Console(stderr=True)


def read_gedcom_text(path: Path) -> str:
    """
    Read a GEDCOM file as text.

    A UTF-8 BOM is stripped; undecodable bytes are replaced rather than
    aborting the load.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return path.read_text(encoding="utf-8-sig", errors="replace")


def load_gedcom(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Read and parse a GEDCOM file (the only place that touches the disk).
    """
    if verbose:
        set_level(logging.INFO)

    t0 = time.perf_counter()

    result = parse_gedcom(read_gedcom_text(path))

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {path} in {elapsed:.2f}s")

    return result


def write_json(
    result: ParseResult,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    indent = 2 if pretty else None

    if out:
        export_result_json(result, out, indent=indent)
    else:
        print(serialize_result_to_json_string(result, indent=indent))
