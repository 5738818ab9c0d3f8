# src/gedcom_lossless/loader/classifier.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from gedcom_lossless.logging import get_logger

from .node import RecordNode

log = get_logger(__name__)

HEADER_TAG = "HEAD"
TRAILER_TAG = "TRLR"


@dataclass
class CanonicalModel:
    """
    Lossless representation of a parsed GEDCOM document.

    Attributes:
        header: The HEAD record, if present.
        records: Every other level-0 record that carries a cross-reference,
            keyed by that cross-reference. On duplicates the last record wins.
        trailer: True if a TRLR record was seen.
    """

    header: Optional[RecordNode] = None
    records: Dict[str, RecordNode] = field(default_factory=dict)
    trailer: bool = False

    # ------------------------------------------------------------------ #
    # Query API
    # ------------------------------------------------------------------ #

    def source_node(self, pointer: Optional[str]) -> Optional[RecordNode]:
        """Return the record subtree a friendly entity was built from."""
        if not pointer:
            return None
        return self.records.get(pointer)

    def iter_nodes(self) -> Iterator[RecordNode]:
        """Iterate over every node (header first, then records) depth-first."""
        if self.header is not None:
            yield from self.header.iter_subtree()
        for record in self.records.values():
            yield from record.iter_subtree()

    def find_records_by_tag(self, tag: str) -> List[RecordNode]:
        """Return all keyed records with the given tag (case-insensitive)."""
        if not tag:
            return []
        t = tag.upper()
        return [r for r in self.records.values() if r.tag.upper() == t]

    def all_tags(self) -> List[str]:
        """Return the distinct tags found among keyed records."""
        return sorted({rec.tag for rec in self.records.values() if rec.tag})

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<CanonicalModel records={len(self.records)} trailer={self.trailer}>"


def classify_records(roots: Iterable[RecordNode]) -> CanonicalModel:
    """
    Split a root forest into header, trailer flag and the keyed record map.

    Roots that are neither HEAD nor TRLR and carry no cross-reference are
    dropped.
    """
    model = CanonicalModel()

    for node in roots:
        if node.tag == HEADER_TAG:
            if model.header is None:
                model.header = node
        elif node.tag == TRAILER_TAG:
            model.trailer = True
        elif node.pointer:
            if node.pointer in model.records:
                log.debug(
                    "Duplicate record %s at line %d replaces line %d",
                    node.pointer,
                    node.lineno,
                    model.records[node.pointer].lineno,
                )
            model.records[node.pointer] = node

    return model
