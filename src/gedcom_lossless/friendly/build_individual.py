from __future__ import annotations

from gedcom_lossless.friendly.build_citation import build_source_citation
from gedcom_lossless.friendly.build_event import (
    INDIVIDUAL_EVENT_TAGS,
    build_event,
    first_event,
)
from gedcom_lossless.friendly.build_media import build_media_link
from gedcom_lossless.friendly.build_name import UNKNOWN_NAME, build_name
from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import IndividualEntity
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

INDIVIDUAL_HANDLERS: HandlerTable = {
    "NAME": append_built("names", build_name),
    "SEX": set_value("sex"),
    "FAMC": append_value("famc"),
    "FAMS": append_value("fams"),
    "SOUR": append_built("sources", build_source_citation),
    "OBJE": append_built("media", build_media_link),
    "NOTE": append_built("notes", build_note_link),
    **{tag: append_built("events", build_event) for tag in INDIVIDUAL_EVENT_TAGS},
}


def build_individual(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> IndividualEntity:
    """
    Build an IndividualEntity from an INDI record.

    PURE FUNCTION:
      - family links (FAMC/FAMS) stay as pointer strings
      - extension tags (_APID, _MILT, ...) land in custom_tags
      - the first NAME supplies the display fields, the first BIRT/DEAT/BURI
        the vitals (empty placeholder events when absent)
    """
    individual = IndividualEntity(pointer=node.pointer or "", lineno=node.lineno)
    walk_children(individual, node, INDIVIDUAL_HANDLERS, ctx)

    if individual.names:
        primary = individual.names[0]
        individual.name = primary.full
        individual.given_name = primary.given
        individual.surname = primary.surname
        individual.suffix = primary.suffix
        individual.display_name = primary.full
    else:
        individual.display_name = UNKNOWN_NAME

    individual.birth = first_event(individual.events, "BIRT")
    individual.death = first_event(individual.events, "DEAT")
    individual.burial = first_event(individual.events, "BURI")

    return individual
