"""Removal selector types as Pydantic v2 value models.

Four selector shapes are supported:

    <tag>           TAG        (tag name, matched as a pattern)
    <tag>.<class>   TAG_CLASS  (exact tag, exact class attribute)
    .<class>        CLASS      (class token)
    #<id>           ID
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectorKind(str, Enum):
    """Removal strategy a selector maps to."""

    ID = "ID"
    CLASS = "CLASS"
    TAG = "TAG"
    TAG_CLASS = "TAG_CLASS"


class Selector(BaseModel):
    """A classified selector.

    For ``TAG_CLASS`` the ``name`` is the tag and ``extra`` is the class.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: SelectorKind
    name: str
    extra: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is SelectorKind.ID:
            return f"#{self.name}"
        if self.kind is SelectorKind.CLASS:
            return f".{self.name}"
        if self.kind is SelectorKind.TAG_CLASS:
            return f"{self.name}.{self.extra}"
        return self.name


class RemovalSet(BaseModel):
    """Selectors partitioned by kind, in registration order."""

    model_config = ConfigDict(extra="forbid")

    ids: list[Selector] = Field(default_factory=list)
    tags: list[Selector] = Field(default_factory=list)
    classes: list[Selector] = Field(default_factory=list)
    tag_classes: list[Selector] = Field(default_factory=list)

    def add(self, selector: Selector) -> None:
        bucket = {
            SelectorKind.ID: self.ids,
            SelectorKind.TAG: self.tags,
            SelectorKind.CLASS: self.classes,
            SelectorKind.TAG_CLASS: self.tag_classes,
        }[selector.kind]
        bucket.append(selector)

    def is_empty(self) -> bool:
        return not (self.ids or self.tags or self.classes or self.tag_classes)


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------


def sel_id(value: str) -> Selector:
    """Create an ID selector."""
    return Selector(kind=SelectorKind.ID, name=value)


def sel_class(value: str) -> Selector:
    """Create a CLASS selector."""
    return Selector(kind=SelectorKind.CLASS, name=value)


def sel_tag(value: str) -> Selector:
    """Create a TAG selector."""
    return Selector(kind=SelectorKind.TAG, name=value)


def sel_tag_class(tag: str, cls: str) -> Selector:
    """Create a TAG_CLASS selector."""
    return Selector(kind=SelectorKind.TAG_CLASS, name=tag, extra=cls)
