from __future__ import annotations

from gedcom_lossless.friendly.build_citation import build_source_citation
from gedcom_lossless.friendly.build_event import FAMILY_EVENT_TAGS, build_event, first_event
from gedcom_lossless.friendly.build_media import build_media_link
from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import FamilyEntity
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    append_value,
    set_value,
    walk_children,
)
from gedcom_lossless.loader.node import RecordNode

FAMILY_HANDLERS: HandlerTable = {
    "HUSB": set_value("husband"),
    "WIFE": set_value("wife"),
    "CHIL": append_value("children"),
    "SOUR": append_built("sources", build_source_citation),
    "OBJE": append_built("media", build_media_link),
    "NOTE": append_built("notes", build_note_link),
    **{tag: append_built("events", build_event) for tag in FAMILY_EVENT_TAGS},
}


def build_family(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> FamilyEntity:
    """
    Build a FamilyEntity from a FAM record.

    PURE FUNCTION:
      - no registry access
      - spouse/child links are kept as pointer strings, never resolved
    """
    family = FamilyEntity(pointer=node.pointer or "", lineno=node.lineno)
    walk_children(family, node, FAMILY_HANDLERS, ctx)

    family.marriage = first_event(family.events, "MARR")
    return family
