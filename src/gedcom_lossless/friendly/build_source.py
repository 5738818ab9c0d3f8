from __future__ import annotations

from gedcom_lossless.friendly.build_media import build_media_link
from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import SourceEntity
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    set_resolved,
    set_value,
    walk_children,
)
from gedcom_lossless.loader.node import RecordNode

SOURCE_HANDLERS: HandlerTable = {
    "TITL": set_resolved("title"),
    "AUTH": set_resolved("author"),
    "PUBL": set_resolved("publisher"),
    "REPO": set_value("repository"),
    "NOTE": append_built("notes", build_note_link),
    "OBJE": append_built("media", build_media_link),
}


def build_source(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> SourceEntity:
    """
    Build a SourceEntity from a top-level SOUR record.

    Handles:
      - TITL / AUTH / PUBL with CONC/CONT continuation
      - REPO pointer (kept as a string)
      - inline or referenced NOTE / OBJE
      - custom tags (_APID, etc.) losslessly
    """
    source = SourceEntity(pointer=node.pointer or "", lineno=node.lineno)
    walk_children(source, node, SOURCE_HANDLERS, ctx)
    return source
