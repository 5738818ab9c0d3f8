"""
gedcom_lossless: lossless GEDCOM 5.5 parsing into a canonical record tree
and a typed, display-friendly entity model.

    from gedcom_lossless import parse_gedcom

    result = parse_gedcom(text)
    result.canonical.records["@I1@"]          # RecordNode subtree
    result.friendly.individuals["@I1@"]       # IndividualEntity
    result.diagnostics                        # skipped malformed lines
"""

from __future__ import annotations

from gedcom_lossless.diagnostics import Diagnostic, DiagnosticLevel, DiagnosticLog
from gedcom_lossless.friendly import FriendlyModel
from gedcom_lossless.loader import CanonicalModel, RecordNode, resolve_value
from gedcom_lossless.parser_core import GEDCOMParser, ParseMeta, ParseResult, parse_gedcom

__version__ = "0.1.0"

__all__ = [
    "CanonicalModel",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "FriendlyModel",
    "GEDCOMParser",
    "ParseMeta",
    "ParseResult",
    "RecordNode",
    "parse_gedcom",
    "resolve_value",
]
