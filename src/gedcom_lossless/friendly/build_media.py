from __future__ import annotations

import re

from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import (
    MediaFile,
    MediaLink,
    MediaObjectEntity,
    MediaReference,
)
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    is_pointer_value,
    set_resolved,
    walk_children,
)
from gedcom_lossless.loader.continuation import resolve_value, structural_children
from gedcom_lossless.loader.node import RecordNode

DATA_URI_PREFIX = "data:"
_DATA_URI_MIME = re.compile(r"^data:([^;,]+)")

# GEDCOM 5.5 puts these next to FILE instead of under it
_LEGACY_FILE_TAGS = ("FORM", "TYPE", "MEDI")


def _ignore(target: object, child: RecordNode, ctx: BuildContext) -> None:
    return None


def _apply_form(media_file: MediaFile, form_node: RecordNode, ctx: BuildContext) -> None:
    media_file.form = form_node.value
    media_file.mime_type = form_node.value
    for fch in structural_children(form_node):
        if fch.tag in ("TYPE", "MEDI"):
            media_file.media_type = fch.value


def _set_media_type(media_file: MediaFile, node: RecordNode, ctx: BuildContext) -> None:
    media_file.media_type = node.value


FILE_HANDLERS: HandlerTable = {
    "FORM": _apply_form,
    "TYPE": _set_media_type,
    "MEDI": _set_media_type,
}


def build_media_file(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> MediaFile:
    """
    Build a MediaFile from a FILE node.

    When the FILE value is a ``data:`` URI the whole URI is kept as the
    embedded payload and its MIME type is detected; a FORM child, if any,
    takes precedence as the reported type.
    """
    path = resolve_value(node)
    media_file = MediaFile(path=path)

    if path.startswith(DATA_URI_PREFIX):
        media_file.data = path
        match = _DATA_URI_MIME.match(path)
        if match:
            media_file.mime_type = match.group(1)

    walk_children(media_file, node, FILE_HANDLERS, ctx)
    return media_file


MEDIA_HANDLERS: HandlerTable = {
    "TITL": set_resolved("title"),
    "FILE": append_built("files", build_media_file),
    "NOTE": append_built("notes", build_note_link),
    "FORM": _ignore,
    "TYPE": _ignore,
    "MEDI": _ignore,
}


def _apply_legacy_file_tags(
    media: MediaObjectEntity,
    node: RecordNode,
    ctx: BuildContext,
) -> None:
    """Fold GEDCOM 5.5 OBJE-level FORM/TYPE/MEDI into the files lacking them."""
    legacy = [c for c in structural_children(node) if c.tag in _LEGACY_FILE_TAGS]
    if not legacy:
        return

    if not media.files:
        media.files.append(MediaFile())

    for media_file in media.files:
        for child in legacy:
            if child.tag == "FORM" and not media_file.form:
                _apply_form(media_file, child, ctx)
            elif child.tag in ("TYPE", "MEDI") and not media_file.media_type:
                media_file.media_type = child.value


def build_media_object(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> MediaObjectEntity:
    """
    Build a MediaObjectEntity from an OBJE node.

    Used both for top-level ``0 @O1@ OBJE`` records and for inline OBJE
    structures embedded in another record (pointer is then None).
    """
    media = MediaObjectEntity(pointer=node.pointer, lineno=node.lineno)
    walk_children(media, node, MEDIA_HANDLERS, ctx)
    _apply_legacy_file_tags(media, node, ctx)
    return media


def build_media_link(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> MediaLink:
    """
    Build an OBJE link found under another structure.

    ``1 OBJE @O1@`` becomes a MediaReference; anything else is parsed in place
    as a full MediaObjectEntity.
    """
    if is_pointer_value(node.value):
        return MediaReference(ref=node.value)
    return build_media_object(node, ctx)
