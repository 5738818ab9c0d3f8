from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from gedcom_lossless.config import GLConfig
from gedcom_lossless.loader.continuation import resolve_value, structural_children
from gedcom_lossless.loader.node import RecordNode

XREF_MARKER = "@"


@dataclass(frozen=True)
class BuildContext:
    """
    Settings shared by every transformer during one friendly-model build.

    The parser derives it from its own config, so a ``GLConfig`` handed to
    ``GEDCOMParser`` reaches each nested builder.
    """

    custom_tag_prefix: str = "_"

    @classmethod
    def from_config(cls, config: GLConfig) -> "BuildContext":
        return cls(custom_tag_prefix=config.custom_tag_prefix)

    def is_custom_tag(self, tag: str) -> bool:
        prefix = self.custom_tag_prefix
        return bool(prefix) and tag.startswith(prefix)


DEFAULT_CONTEXT = BuildContext()

# handler(target, child, ctx) mutates the entity being built
ChildHandler = Callable[[Any, RecordNode, BuildContext], None]
HandlerTable = Dict[str, ChildHandler]
Builder = Callable[[RecordNode, BuildContext], Any]


def is_pointer_value(value: Optional[str]) -> bool:
    return bool(value) and value.startswith(XREF_MARKER)


def walk_children(
    target: Any,
    node: RecordNode,
    handlers: HandlerTable,
    ctx: BuildContext = DEFAULT_CONTEXT,
) -> None:
    """
    Dispatch each structural child of ``node`` to its handler.

    Children without a handler are kept in ``target.custom_tags`` when their
    tag carries the context's extension prefix (later duplicates overwrite
    earlier ones) and are ignored otherwise.
    """
    for child in structural_children(node):
        handler = handlers.get(child.tag)
        if handler is not None:
            handler(target, child, ctx)
        elif ctx.is_custom_tag(child.tag):
            target.custom_tags[child.tag] = resolve_value(child)


def set_value(attr: str) -> ChildHandler:
    """Handler storing the child's raw value on ``attr``."""
    def _handler(target: Any, child: RecordNode, ctx: BuildContext) -> None:
        setattr(target, attr, child.value)
    return _handler


def set_resolved(attr: str) -> ChildHandler:
    """Handler storing the child's continuation-joined value on ``attr``."""
    def _handler(target: Any, child: RecordNode, ctx: BuildContext) -> None:
        setattr(target, attr, resolve_value(child))
    return _handler


def append_value(attr: str) -> ChildHandler:
    def _handler(target: Any, child: RecordNode, ctx: BuildContext) -> None:
        getattr(target, attr).append(child.value)
    return _handler


def append_built(attr: str, builder: Builder) -> ChildHandler:
    """Handler appending ``builder(child, ctx)`` to the list on ``attr``."""
    def _handler(target: Any, child: RecordNode, ctx: BuildContext) -> None:
        getattr(target, attr).append(builder(child, ctx))
    return _handler
