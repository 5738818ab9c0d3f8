from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


# -----------------------------
# Links (reference vs inline)
# -----------------------------

@dataclass(slots=True)
class MediaReference:
    """An OBJE link whose value is a cross-reference (``1 OBJE @O1@``)."""
    ref: str


@dataclass(slots=True)
class NoteReference:
    """A NOTE link whose value is a cross-reference (``1 NOTE @N1@``)."""
    ref: str


@dataclass(slots=True)
class InlineNote:
    """A NOTE written in place, with its continuation lines joined."""
    text: str = ""
    lineno: Optional[int] = None
    custom_tags: Dict[str, str] = field(default_factory=dict)


# -----------------------------
# Media
# -----------------------------

@dataclass(slots=True)
class MediaFile:
    """
    FILE substructure of a multimedia object.

    ``mime_type`` is the FORM value when present, otherwise the type detected
    from a ``data:`` URI. ``data`` holds the full URI when the file is embedded.
    """
    path: str = ""
    form: str = ""
    media_type: str = ""
    mime_type: str = ""
    data: Optional[str] = None
    custom_tags: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class MediaObjectEntity:
    # None for an inline OBJE parsed in place
    pointer: Optional[str] = None
    lineno: Optional[int] = None

    title: str = ""
    files: List[MediaFile] = field(default_factory=list)
    notes: List["NoteLink"] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)

    @property
    def file(self) -> MediaFile:
        return self.files[0] if self.files else MediaFile()

    @property
    def mime_type(self) -> str:
        return self.file.mime_type

    @property
    def data(self) -> Optional[str]:
        return self.file.data


MediaLink = Union[MediaReference, MediaObjectEntity]
NoteLink = Union[NoteReference, InlineNote]


# -----------------------------
# Citations
# -----------------------------

@dataclass(slots=True)
class SourceData:
    """DATA block of a source citation."""
    date: str = ""
    text: List[str] = field(default_factory=list)
    urls: List[str] = field(default_factory=list)


@dataclass(slots=True)
class SourceCitation:
    # The SOUR line's own value: normally "@S1@", free text for inline sources
    source: str = ""
    page: str = ""
    quality: str = ""
    data: SourceData = field(default_factory=SourceData)
    media: List[MediaLink] = field(default_factory=list)
    notes: List[NoteLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)

    @property
    def is_reference(self) -> bool:
        return self.source.startswith("@")


# -----------------------------
# Names and events
# -----------------------------

@dataclass(slots=True)
class NameRecord:
    """
    GEDCOM NAME substructure.

    ``value`` is the raw (continuation-joined) NAME text, e.g. "John /Doe/".
    ``full`` is the display string built from prefix/given/surname/suffix.
    """
    value: str = ""
    full: str = ""
    given: str = ""
    surname: str = ""
    suffix: str = ""
    prefix: str = ""
    nickname: str = ""
    name_type: str = ""
    sources: List[SourceCitation] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class EventRecord:
    """
    Individual or family event (BIRT, DEAT, MARR, ...).

    An EventRecord with an empty ``type`` is the placeholder used for
    convenience fields such as ``birth`` when no such event exists.
    """
    type: str = ""
    date: str = ""
    place: str = ""
    address: str = ""
    description: str = ""
    subtype: str = ""
    cause: str = ""
    age: str = ""
    lineno: Optional[int] = None
    sources: List[SourceCitation] = field(default_factory=list)
    media: List[MediaLink] = field(default_factory=list)
    notes: List[NoteLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)

    @property
    def is_placeholder(self) -> bool:
        return not self.type


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class IndividualEntity:
    pointer: str
    lineno: Optional[int] = None

    names: List[NameRecord] = field(default_factory=list)
    sex: str = ""
    events: List[EventRecord] = field(default_factory=list)

    # Family pointers, unresolved
    famc: List[str] = field(default_factory=list)
    fams: List[str] = field(default_factory=list)

    sources: List[SourceCitation] = field(default_factory=list)
    media: List[MediaLink] = field(default_factory=list)
    notes: List[NoteLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)

    # Derived from the primary (first) name
    name: str = ""
    given_name: str = ""
    surname: str = ""
    suffix: str = ""
    display_name: str = "Unknown"

    # Derived vitals
    birth: EventRecord = field(default_factory=EventRecord)
    death: EventRecord = field(default_factory=EventRecord)
    burial: EventRecord = field(default_factory=EventRecord)


@dataclass(slots=True)
class FamilyEntity:
    pointer: str
    lineno: Optional[int] = None

    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)

    events: List[EventRecord] = field(default_factory=list)
    sources: List[SourceCitation] = field(default_factory=list)
    media: List[MediaLink] = field(default_factory=list)
    notes: List[NoteLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)

    marriage: EventRecord = field(default_factory=EventRecord)


@dataclass(slots=True)
class SourceEntity:
    pointer: str
    lineno: Optional[int] = None

    title: str = ""
    author: str = ""
    publisher: str = ""
    repository: Optional[str] = None

    notes: List[NoteLink] = field(default_factory=list)
    media: List[MediaLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class RepositoryEntity:
    pointer: str
    lineno: Optional[int] = None

    name: str = ""
    address: str = ""
    notes: List[NoteLink] = field(default_factory=list)
    custom_tags: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class NoteEntity:
    pointer: str
    lineno: Optional[int] = None
    text: str = ""
    custom_tags: Dict[str, str] = field(default_factory=dict)


# -----------------------------
# Friendly model
# -----------------------------

@dataclass(slots=True)
class FriendlyModel:
    """
    Typed entities indexed by GEDCOM cross-reference.

    Links between entities are plain pointer strings; the getters return None
    for pointers that do not resolve, which the format does not rule out.
    """
    individuals: Dict[str, IndividualEntity] = field(default_factory=dict)
    families: Dict[str, FamilyEntity] = field(default_factory=dict)
    sources: Dict[str, SourceEntity] = field(default_factory=dict)
    media: Dict[str, MediaObjectEntity] = field(default_factory=dict)
    repositories: Dict[str, RepositoryEntity] = field(default_factory=dict)
    notes: Dict[str, NoteEntity] = field(default_factory=dict)

    def register(self, collection: str, pointer: str, entity: Any) -> None:
        getattr(self, collection)[pointer] = entity

    def get_individual(self, pointer: str) -> Optional[IndividualEntity]:
        return self.individuals.get(pointer)

    def get_family(self, pointer: str) -> Optional[FamilyEntity]:
        return self.families.get(pointer)

    def get_source(self, pointer: str) -> Optional[SourceEntity]:
        return self.sources.get(pointer)

    def get_media(self, pointer: str) -> Optional[MediaObjectEntity]:
        return self.media.get(pointer)

    def get_repository(self, pointer: str) -> Optional[RepositoryEntity]:
        return self.repositories.get(pointer)

    def get_note(self, pointer: str) -> Optional[NoteEntity]:
        return self.notes.get(pointer)

    def counts(self) -> Dict[str, int]:
        return {
            "individuals": len(self.individuals),
            "families": len(self.families),
            "sources": len(self.sources),
            "media": len(self.media),
            "repositories": len(self.repositories),
            "notes": len(self.notes),
        }
