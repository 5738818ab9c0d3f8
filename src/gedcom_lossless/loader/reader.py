# src/gedcom_lossless/loader/reader.py

"""
Line Reader: split a decoded GEDCOM blob into numbered physical lines.

Line numbers count every physical line (blank ones included) so diagnostics
point at the right place in the original text; blank lines themselves are
never yielded.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Tuple

# LF, CRLF and bare CR all terminate a line.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

BOM = "\ufeff"


def split_lines(text: str) -> List[str]:
    """Return the physical lines of ``text`` without their terminators."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    # A terminator on the last line does not open another one.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def count_lines(text: str) -> int:
    """
    Number of physical lines, blank ones included.

    A terminator after the last line does not start an extra empty line, and a
    bare CR counts as a terminator like LF and CRLF.
    """
    return len(split_lines(text))


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` for every non-blank line.

    A UTF-8 BOM at the very start of the text is dropped.
    """
    for lineno, line in enumerate(split_lines(text), start=1):
        if lineno == 1 and line.startswith(BOM):
            line = line.lstrip(BOM)
        if not line.strip():
            continue
        yield lineno, line
