"""Selector classification for content removal.

A subset of CSS selector syntax is supported, checked in this order:

    .<class>        CLASS
    #<id>           ID
    <tag>.<class>   TAG_CLASS (split on the first dot)
    <tag>           TAG (no ``[`` or ``]``; the name is a tag-name pattern)

Anything else raises ``InvalidSelector``.  Matching uses regular
expressions, so this must not be relied on as a sanitization boundary.
"""

from __future__ import annotations

from typing import Iterable

from models.selectors import (
    RemovalSet,
    Selector,
    sel_class,
    sel_id,
    sel_tag,
    sel_tag_class,
)

MEDIA_TAGS = ("img", "audio", "video")


class InvalidSelector(ValueError):
    """Raised for a selector (or flatten pattern) that cannot be used."""

    def __init__(self, selector: str, reason: str = "unrecognized selector") -> None:
        self.selector = selector
        super().__init__(f"{reason} '{selector}'")


def classify(selector: str) -> Selector:
    """Classify a raw selector string into a typed ``Selector``.

    Raises:
        InvalidSelector: If the selector contains ``[`` or ``]`` and
            matches none of the other shapes.
    """
    if selector.startswith("."):
        result = sel_class(selector[1:])
    elif selector.startswith("#"):
        result = sel_id(selector[1:])
    elif selector.find(".") > 0:
        tag, cls = selector.split(".", 1)
        result = sel_tag_class(tag, cls)
    elif "[" not in selector and "]" not in selector:
        result = sel_tag(selector)
    else:
        raise InvalidSelector(selector)
    return result


def classify_all(selectors: Iterable[str]) -> list[Selector]:
    """Classify a batch; the first failure aborts the whole batch."""
    return [classify(s) for s in selectors]


def build_removal_set(
    selectors: Iterable[Selector], *, remove_media: bool = False
) -> RemovalSet:
    """Partition classified selectors by kind.

    When *remove_media* is set, ``img``, ``audio`` and ``video`` TAG
    selectors are appended after the registered ones.
    """
    removals = RemovalSet()
    for selector in selectors:
        removals.add(selector)
    if remove_media:
        for tag in MEDIA_TAGS:
            removals.add(sel_tag(tag))
    return removals
