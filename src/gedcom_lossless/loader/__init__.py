# src/gedcom_lossless/loader/__init__.py

"""
Public interface for the GEDCOM loader stack (text -> canonical model).

Intended usage from other parts of the project and tests:

    from gedcom_lossless.loader import (
        RecordNode,
        CanonicalModel,
        GedcomSyntaxError,
        iter_lines,
        tokenize_line,
        parse_line,
        build_forest,
        classify_records,
        resolve_value,
        structural_children,
    )
"""

from __future__ import annotations

from .classifier import CanonicalModel, classify_records
from .continuation import (
    CONTINUATION_TAGS,
    is_continuation,
    resolve_value,
    structural_children,
)
from .node import RecordNode
from .reader import count_lines, iter_lines, split_lines
from .tokenizer import GedcomSyntaxError, parse_line, tokenize_line
from .tree_builder import build_forest

__all__ = [
    "CONTINUATION_TAGS",
    "CanonicalModel",
    "GedcomSyntaxError",
    "RecordNode",
    "build_forest",
    "classify_records",
    "count_lines",
    "is_continuation",
    "iter_lines",
    "parse_line",
    "resolve_value",
    "split_lines",
    "structural_children",
    "tokenize_line",
]
