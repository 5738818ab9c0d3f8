"""
parser_core.py
Central parsing engine: text -> canonical model -> friendly model.

The engine performs no I/O; callers hand it a decoded text blob.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from gedcom_lossless.config import GLConfig, get_config
from gedcom_lossless.diagnostics import DiagnosticLog
from gedcom_lossless.exporter import result_to_dict
from gedcom_lossless.friendly import BuildContext, FriendlyModel, build_friendly_model
from gedcom_lossless.loader import (
    CanonicalModel,
    RecordNode,
    build_forest,
    classify_records,
    count_lines,
    iter_lines,
    parse_line,
)
from gedcom_lossless.logging import get_logger


@dataclass(frozen=True)
class ParseMeta:
    source_format: str
    parsed_at: datetime
    line_count: int
    record_count: int


@dataclass
class ParseResult:
    canonical: CanonicalModel
    friendly: FriendlyModel
    meta: ParseMeta
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def to_dict(self) -> Dict[str, Any]:
        return result_to_dict(self)


class GEDCOMParser:
    """
    High-level parser:
      - splits the text into numbered lines
      - parses each line (malformed lines become diagnostics)
      - rebuilds the level hierarchy
      - classifies header / trailer / keyed records
      - builds the friendly entity model

    A parser instance holds no per-parse state, so one instance may be reused.
    """

    def __init__(self, config: Optional[GLConfig] = None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

    # ---------------------------------------------------------
    # Stage 1-3: text -> root forest
    # ---------------------------------------------------------
    def parse_nodes(self, text: str, diagnostics: DiagnosticLog) -> List[RecordNode]:
        nodes: List[RecordNode] = []
        for lineno, line in iter_lines(text):
            node = parse_line(line, lineno, diagnostics)
            if node is not None:
                nodes.append(node)
        return build_forest(nodes)

    # ---------------------------------------------------------
    # Full sequence
    # ---------------------------------------------------------
    def parse(self, text: str) -> ParseResult:
        """
        Parse a complete GEDCOM text.

        Never raises on malformed content: invalid lines are skipped and
        reported through ``ParseResult.diagnostics``.
        """
        text = text or ""
        diagnostics = DiagnosticLog()

        roots = self.parse_nodes(text, diagnostics)
        canonical = classify_records(roots)
        friendly = build_friendly_model(canonical, BuildContext.from_config(self.cfg))

        meta = ParseMeta(
            source_format=self.cfg.source_format,
            parsed_at=datetime.now(timezone.utc),
            line_count=count_lines(text),
            record_count=len(canonical.records),
        )

        self.log.info(
            "Parsed %d lines into %d records (%s); %d diagnostics",
            meta.line_count,
            meta.record_count,
            ", ".join(f"{k}={v}" for k, v in friendly.counts().items()),
            len(diagnostics),
        )

        return ParseResult(
            canonical=canonical,
            friendly=friendly,
            meta=meta,
            diagnostics=diagnostics,
        )


def parse_gedcom(text: str, config: Optional[GLConfig] = None) -> ParseResult:
    """Parse ``text`` with a fresh GEDCOMParser."""
    return GEDCOMParser(config=config).parse(text)
