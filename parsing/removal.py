"""Selector-driven element removal on a parsed document.

Matches are always collected into a list before anything is detached,
then detached in queue order.  A queued element is only detached while it
is still attached to the document; an element nested inside a subtree
removed earlier stays inside that subtree.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import Tag

    from models.selectors import RemovalSet, Selector

logger = logging.getLogger("formatter")


# ---------------------------------------------------------------------------
# Collectors
# ---------------------------------------------------------------------------


def tag_pattern(name: str) -> re.Pattern[str]:
    """Compile a TAG selector name into a full-name matcher.

    ``*`` matches every element.  A name that is not a valid regex is
    matched literally.
    """
    if name == "*":
        return re.compile(".+")
    try:
        return re.compile(name, re.IGNORECASE)
    except re.error:
        logger.debug("literal tag selector", extra={"selector": name})
        return re.compile(re.escape(name), re.IGNORECASE)


def collect_tags(doc: BeautifulSoup, selectors: list[Selector]) -> list[Tag]:
    """Elements whose name fully matches each tag pattern, per selector."""
    queue: list[Tag] = []
    for selector in selectors:
        pattern = tag_pattern(selector.name)
        # "*" means every element of the fragment, not the shell around it
        root = doc.body if selector.name == "*" and doc.body is not None else doc
        queue.extend(
            root.find_all(lambda el, p=pattern: p.fullmatch(el.name) is not None)
        )
    return queue


def collect_ids(doc: BeautifulSoup, selectors: list[Selector]) -> list[Tag]:
    """The element carrying each id; unknown ids are skipped."""
    queue: list[Tag] = []
    for selector in selectors:
        el = doc.find(id=selector.name) if selector.name else None
        if el is not None:
            queue.append(el)
    return queue


def has_class_token(class_attr: str, name: str) -> bool:
    """Check whether *name* is a space-delimited token of *class_attr*.

    The padded ``contains`` test is re-validated with a word-boundary
    match.  *name* is escaped, so regex metacharacters in class names are
    matched literally.
    """
    if not name or f" {name} " not in f" {class_attr} ":
        return False
    return re.search(rf"\b{re.escape(name)}\b", class_attr) is not None


def collect_classes(doc: BeautifulSoup, selectors: list[Selector]) -> list[Tag]:
    """Attached elements having each class as a token."""
    queue: list[Tag] = []
    for selector in selectors:
        for el in doc.find_all(class_=True):
            if not has_class_token(el.get("class", ""), selector.name):
                continue
            if is_attached(el, doc):
                queue.append(el)
    return queue


def collect_tag_classes(
    doc: BeautifulSoup, selectors: list[Selector]
) -> list[Tag]:
    """Elements with the exact tag name and the exact class attribute."""
    queue: list[Tag] = []
    for selector in selectors:
        queue.extend(
            doc.find_all(
                lambda el, s=selector: el.name == s.name and el.get("class") == s.extra
            )
        )
    return queue


# ---------------------------------------------------------------------------
# Detaching
# ---------------------------------------------------------------------------


def is_attached(el: Tag, doc: BeautifulSoup) -> bool:
    """True while *el* is still reachable from the document root."""
    return any(parent is doc for parent in el.parents)


def detach(elements: list[Tag], doc: BeautifulSoup) -> list[Tag]:
    """Extract queued elements from the tree.

    Returns the elements actually detached, with their subtrees intact.
    """
    removed: list[Tag] = []
    for el in elements:
        if el.parent is not None and is_attached(el, doc):
            removed.append(el.extract())
    return removed


def remove_matching(doc: BeautifulSoup, removals: RemovalSet) -> list[Tag]:
    """Remove every element matched by *removals* from *doc*.

    Kinds are processed (and returned) in order: tags, ids, classes,
    tag+class.  Each kind is queried after the previous kind's removals,
    so a second pass with the same selectors removes nothing.
    """
    if removals.is_empty():
        return []

    removed = detach(collect_tags(doc, removals.tags), doc)
    removed += detach(collect_ids(doc, removals.ids), doc)
    removed += detach(collect_classes(doc, removals.classes), doc)
    removed += detach(collect_tag_classes(doc, removals.tag_classes), doc)

    logger.debug("removed elements", extra={"removed_count": len(removed)})
    return removed
