from __future__ import annotations

from typing import FrozenSet, List

from gedcom_lossless.friendly.build_citation import build_source_citation
from gedcom_lossless.friendly.build_media import build_media_link
from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import EventRecord
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    set_resolved,
    set_value,
    walk_children,
)
from gedcom_lossless.loader.continuation import resolve_value
from gedcom_lossless.loader.node import RecordNode

# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5 / 5.5.1)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS: FrozenSet[str] = frozenset({
    "BIRT", "DEAT", "BURI", "CHR", "BAPM", "MARR", "RESI", "CENS",
    "OCCU", "EDUC", "RELI", "NATU", "EMIG", "IMMI", "PROB", "WILL",
    "CHRA", "BARM", "BASM", "BLES", "ADOP", "CONF", "FCOM", "GRAD",
    "ORDN", "RETI", "CREM", "EVEN",
})

FAMILY_EVENT_TAGS: FrozenSet[str] = frozenset({
    "MARR", "DIV", "ENGA", "MARB", "MARC", "MARL", "MARS",
    "ANUL", "DIVF", "CENS", "EVEN",
})


EVENT_HANDLERS: HandlerTable = {
    "DATE": set_value("date"),
    "PLAC": set_resolved("place"),
    "ADDR": set_resolved("address"),
    "TYPE": set_value("subtype"),
    "CAUS": set_resolved("cause"),
    "AGE": set_value("age"),
    "SOUR": append_built("sources", build_source_citation),
    "OBJE": append_built("media", build_media_link),
    "NOTE": append_built("notes", build_note_link),
}


def build_event(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> EventRecord:
    """
    Build an EventRecord from an event node (BIRT, DEAT, MARR, ...).

    The event type is the tag itself; the node's own value (e.g. the
    occupation text of OCCU, or "Y" on a bare BIRT) becomes the description.
    """
    event = EventRecord(
        type=node.tag,
        description=resolve_value(node),
        lineno=node.lineno,
    )
    walk_children(event, node, EVENT_HANDLERS, ctx)
    return event


def first_event(events: List[EventRecord], event_type: str) -> EventRecord:
    """Return the first event of ``event_type`` or an empty placeholder."""
    for event in events:
        if event.type == event_type:
            return event
    return EventRecord()
