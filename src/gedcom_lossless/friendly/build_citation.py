from __future__ import annotations

from gedcom_lossless.friendly.build_media import build_media_link
from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import SourceCitation, SourceData
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    append_value,
    set_resolved,
    set_value,
    walk_children,
)
from gedcom_lossless.loader.continuation import resolve_value, structural_children
from gedcom_lossless.loader.node import RecordNode


def _append_text(data: SourceData, child: RecordNode, ctx: BuildContext) -> None:
    data.text.append(resolve_value(child))


SOURCE_DATA_HANDLERS: HandlerTable = {
    "DATE": set_value("date"),
    "TEXT": _append_text,
    "WWW": append_value("urls"),
    "_LINK": append_value("urls"),
}


def build_source_data(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> SourceData:
    """Build the DATA block of a citation (date, text excerpts, URLs)."""
    data = SourceData()
    for child in structural_children(node):
        handler = SOURCE_DATA_HANDLERS.get(child.tag)
        if handler is not None:
            handler(data, child, ctx)
    return data


def _set_data(citation: SourceCitation, child: RecordNode, ctx: BuildContext) -> None:
    citation.data = build_source_data(child, ctx)


CITATION_HANDLERS: HandlerTable = {
    "PAGE": set_resolved("page"),
    "QUAY": set_value("quality"),
    "DATA": _set_data,
    "OBJE": append_built("media", build_media_link),
    "NOTE": append_built("notes", build_note_link),
}


def build_source_citation(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> SourceCitation:
    """
    Build a SourceCitation from a SOUR node nested under another structure.

    The cited source is the node's own value (``2 SOUR @S1@``); it is kept as
    a string and never resolved here.
    """
    citation = SourceCitation(source=node.value)
    walk_children(citation, node, CITATION_HANDLERS, ctx)
    return citation
