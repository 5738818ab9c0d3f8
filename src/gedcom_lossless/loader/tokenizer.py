# src/gedcom_lossless/loader/tokenizer.py

from __future__ import annotations

import re
from typing import Optional

from gedcom_lossless.diagnostics import DiagnosticLog
from gedcom_lossless.logging import get_logger

from .node import RecordNode

log = get_logger(__name__)

# <level> [<@xref@>] <tag> [<value>]
#
# - leading whitespace before the level is tolerated (indented exports)
# - the xref must start and end with '@'
# - the tag may not itself start with '@' ("0 @I1@" alone is malformed)
# - the value is everything after the single delimiter following the tag,
#   kept verbatim so CONC payloads keep their leading spaces
_LINE_RE = re.compile(
    r"^[ \t]*(?P<level>\d+)[ \t]+"
    r"(?:(?P<pointer>@[^@\s]+@)[ \t]+)?"
    r"(?P<tag>[^@\s]\S*)"
    r"(?:[ \t](?P<value>.*))?$"
)


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def tokenize_line(line: str, lineno: int = 0) -> RecordNode:
    """
    Parse a single GEDCOM line into a childless RecordNode.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "1 NOTE This is a note"

    Raises:
        GedcomSyntaxError: if the line does not match
            ``<level> [<@xref@>] <tag> [<value>]``.
    """
    raw = line.rstrip("\r\n")
    match = _LINE_RE.match(raw)
    if match is None:
        raise GedcomSyntaxError(f"Line {lineno}: invalid GEDCOM line -> {raw!r}")

    return RecordNode(
        level=int(match.group("level")),
        tag=match.group("tag"),
        value=match.group("value") or "",
        pointer=match.group("pointer"),
        lineno=lineno,
    )


def parse_line(
    line: str,
    lineno: int,
    diagnostics: Optional[DiagnosticLog] = None,
) -> Optional[RecordNode]:
    """
    Non-raising variant of ``tokenize_line`` used by the parse pipeline.

    A malformed line is recorded as a warning diagnostic (line number and raw
    text) and skipped by returning None.
    """
    try:
        return tokenize_line(line, lineno)
    except GedcomSyntaxError as exc:
        log.warning("Skipping malformed line %d: %r", lineno, line)
        if diagnostics is not None:
            diagnostics.add_warning(str(exc), lineno=lineno, raw=line)
        return None
