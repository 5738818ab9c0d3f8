# src/gedcom_lossless/loader/node.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class RecordNode:
    """
    One element of the canonical GEDCOM record tree.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: The GEDCOM tag exactly as written (HEAD, INDI, BIRT, _APID, ...).
        value: The raw line value after the tag (may be empty).
        pointer: Optional cross-reference identifier, e.g. "@I1@".
        lineno: 1-based line number in the original text.
        children: Nested nodes in source order. Each child has a strictly
            greater level than this node.
    """

    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["RecordNode"] = field(default_factory=list)

    # ---------- Helper Methods ----------

    def add_child(self, child: "RecordNode") -> None:
        self.children.append(child)

    def find_children(self, tag: str) -> List["RecordNode"]:
        """Return all direct children of this node with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["RecordNode"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def iter_subtree(self) -> Iterator["RecordNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<RecordNode {self.level}{ptr} {self.tag}: {self.value!r}>"
