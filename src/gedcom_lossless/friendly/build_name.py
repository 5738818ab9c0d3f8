from __future__ import annotations

import re
from typing import Tuple

from gedcom_lossless.friendly.build_citation import build_source_citation
from gedcom_lossless.friendly.entities import NameRecord
from gedcom_lossless.friendly.utils import (
    DEFAULT_CONTEXT,
    BuildContext,
    HandlerTable,
    append_built,
    set_value,
    walk_children,
)
from gedcom_lossless.loader.continuation import resolve_value
from gedcom_lossless.loader.node import RecordNode

UNKNOWN_NAME = "Unknown"

_SURNAME_RE = re.compile(r"/([^/]*)/")

NAME_HANDLERS: HandlerTable = {
    "GIVN": set_value("given"),
    "SURN": set_value("surname"),
    "NSFX": set_value("suffix"),
    "NPFX": set_value("prefix"),
    "NICK": set_value("nickname"),
    "TYPE": set_value("name_type"),
    "SOUR": append_built("sources", build_source_citation),
}


def split_name_text(text: str) -> Tuple[str, str, str]:
    """
    Split ``"Given /Surname/ Suffix"`` into its three parts.

        "John /Smith/ Jr."  -> ("John", "Smith", "Jr.")
        "John Smith"        -> ("John Smith", "", "")
        "/Smith/"           -> ("", "Smith", "")
    """
    match = _SURNAME_RE.search(text)
    surname = match.group(1).strip() if match else ""

    parts = text.split("/")
    given = parts[0].strip()
    suffix = parts[2].strip() if len(parts) > 2 else ""
    return given, surname, suffix


def display_name(name: NameRecord) -> str:
    parts = [name.prefix, name.given, name.surname, name.suffix]
    return " ".join(p.strip() for p in parts if p and p.strip()) or UNKNOWN_NAME


def build_name(node: RecordNode, ctx: BuildContext = DEFAULT_CONTEXT) -> NameRecord:
    """
    Build a NameRecord from a NAME node.

    The slash-delimited NAME text is parsed first; GIVN/SURN/NSFX/NPFX
    subfields, when present, override the parsed parts.
    """
    text = resolve_value(node)
    given, surname, suffix = split_name_text(text)

    name = NameRecord(value=text, given=given, surname=surname, suffix=suffix)
    walk_children(name, node, NAME_HANDLERS, ctx)

    name.full = display_name(name)
    return name
