# src/gedcom_lossless/loader/continuation.py

"""
Continuation resolution for GEDCOM CONC / CONT tags.

Rules (GEDCOM 5.5.1):
    - CONC: Append text directly to the parent's value. No newline added.
    - CONT: Append a newline + the text.

Examples:
    Parent NOTE value: "Line one"
    Child CONC value:  " and more"
        -> "Line one and more"

    Child CONT value:  "Second line"
        -> "Line one and more\nSecond line"

Everything here is a pure query over the canonical tree: nodes are never
modified, so resolving the same node twice yields the same text.
"""

from __future__ import annotations

from typing import List

from .node import RecordNode

CONC = "CONC"
CONT = "CONT"
CONTINUATION_TAGS = frozenset({CONC, CONT})


def is_continuation(node: RecordNode) -> bool:
    return node.tag in CONTINUATION_TAGS


def resolve_value(node: RecordNode) -> str:
    """Return the node's logical value with its CONC/CONT children joined."""
    parts: List[str] = [node.value or ""]

    for child in node.children:
        if child.tag == CONC:
            parts.append(child.value or "")
        elif child.tag == CONT:
            parts.append("\n")
            parts.append(child.value or "")

    return "".join(parts)


def structural_children(node: RecordNode) -> List[RecordNode]:
    """Return the node's children minus any continuation lines."""
    return [c for c in node.children if not is_continuation(c)]
