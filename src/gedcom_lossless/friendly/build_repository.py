from __future__ import annotations

from gedcom_lossless.friendly.build_note import build_note_link
from gedcom_lossless.friendly.entities import RepositoryEntity
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    set_resolved,
    walk_children,
)
from gedcom_lossless.loader.node import RecordNode

REPOSITORY_HANDLERS: HandlerTable = {
    "NAME": set_resolved("name"),
    "ADDR": set_resolved("address"),
    "NOTE": append_built("notes", build_note_link),
}


def build_repository(
    node: RecordNode,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> RepositoryEntity:
    """Build a RepositoryEntity; fields stay empty unless present."""
    repository = RepositoryEntity(pointer=node.pointer or "", lineno=node.lineno)
    walk_children(repository, node, REPOSITORY_HANDLERS, ctx)
    return repository
