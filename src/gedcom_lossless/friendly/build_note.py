from __future__ import annotations

from gedcom_lossless.friendly.entities import InlineNote, NoteEntity, NoteLink, NoteReference
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    is_pointer_value,
    walk_children,
)
from gedcom_lossless.loader.continuation import resolve_value
from gedcom_lossless.loader.node import RecordNode

# NOTE records carry only text and extension tags
NOTE_HANDLERS: HandlerTable = {}


def build_note(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> NoteEntity:
    """
    Build a NoteEntity from a top-level NOTE record.

    The text is the record's own value with CONT lines joined by newlines and
    CONC lines appended in place.
    """
    note = NoteEntity(
        pointer=node.pointer or "",
        lineno=node.lineno,
        text=resolve_value(node),
    )
    walk_children(note, node, NOTE_HANDLERS, ctx)
    return note


def build_note_link(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> NoteLink:
    """
    Build a NOTE link found under another structure.

    ``1 NOTE @N1@`` becomes a NoteReference; anything else is an inline note.
    """
    if is_pointer_value(node.value):
        return NoteReference(ref=node.value)

    inline = InlineNote(text=resolve_value(node), lineno=node.lineno)
    walk_children(inline, node, NOTE_HANDLERS, ctx)
    return inline
