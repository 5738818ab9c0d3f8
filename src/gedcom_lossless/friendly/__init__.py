from __future__ import annotations

from .build_model import RECORD_BUILDERS, build_friendly_model
from .entities import (
    EventRecord,
    FamilyEntity,
    FriendlyModel,
    IndividualEntity,
    InlineNote,
    MediaFile,
    MediaLink,
    MediaObjectEntity,
    MediaReference,
    NameRecord,
    NoteEntity,
    NoteLink,
    NoteReference,
    RepositoryEntity,
    SourceCitation,
    SourceData,
    SourceEntity,
)
from .utils import DEFAULT_CONTEXT, BuildContext

__all__ = [
    "BuildContext",
    "DEFAULT_CONTEXT",
    "EventRecord",
    "FamilyEntity",
    "FriendlyModel",
    "IndividualEntity",
    "InlineNote",
    "MediaFile",
    "MediaLink",
    "MediaObjectEntity",
    "MediaReference",
    "NameRecord",
    "NoteEntity",
    "NoteLink",
    "NoteReference",
    "RECORD_BUILDERS",
    "RepositoryEntity",
    "SourceCitation",
    "SourceData",
    "SourceEntity",
    "build_friendly_model",
]
