"""HTML formatter: selective removal and flattening of an HTML fragment.

Ties together selector classification, lazy parsing, removal,
serialization and flattening into the ``HtmlFormatter`` class.

Typical use::

    f = HtmlFormatter(html)
    f.remove(["script", ".navbox", "#toc", "div.vcard"])
    f.flatten("span")
    removed = f.filter_content()
    text = f.get_text()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Union

from parsing.document import parse_document, serialize, strip_shell, wrap_html
from parsing.flatten import FLATTEN_ALL_PATTERN, flatten_tags, validate_pattern
from parsing.removal import remove_matching
from parsing.selectors import build_removal_set, classify_all

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import Tag

    from models.options import FormatOptions
    from models.selectors import RemovalSet, Selector

logger = logging.getLogger("formatter")


def _as_list(items: Union[str, Iterable[str]]) -> list[str]:
    if isinstance(items, str):
        return [items]
    return list(items)


class HtmlFormatter:
    """Removes and flattens elements of an HTML fragment.

    The fragment is parsed lazily, at most once, on the first call that
    needs the tree.  ``get_text()`` with an element re-roots the body at
    that element and destroys the rest; call it without an element first
    if you need both outputs.

    Args:
        html: Fragment to process.
        on_html_ready: Hook applied to the serialized body HTML before
            flattening.  Defaults to identity.
    """

    wrap_html = staticmethod(wrap_html)

    def __init__(
        self,
        html: str,
        *,
        on_html_ready: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.html = html
        self.on_html_ready: Callable[[str], str] = on_html_ready or (lambda s: s)
        self.remove_media = False
        self._doc: Optional[BeautifulSoup] = None
        self._items_to_remove: list[Selector] = []
        self._elements_to_flatten: list[str] = []

    @classmethod
    def from_options(
        cls,
        html: str,
        options: FormatOptions,
        *,
        on_html_ready: Optional[Callable[[str], str]] = None,
    ) -> HtmlFormatter:
        """Build a formatter configured from *options*."""
        formatter = cls(html, on_html_ready=on_html_ready)
        formatter.remove(options.remove)
        formatter.flatten(options.flatten)
        if options.flatten_all:
            formatter.flatten_all_tags()
        formatter.set_remove_media(options.remove_media)
        return formatter

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def set_remove_media(self, flag: bool = True) -> None:
        """Set whether images, videos and sounds should be removed."""
        self.remove_media = flag

    def remove(self, selectors: Union[str, Iterable[str]]) -> None:
        """Add one or more selectors of content to remove.

        Supported shapes: ``tag``, ``tag.class``, ``.class``, ``#id``.
        The batch is classified before anything is registered, so an
        ``InvalidSelector`` leaves the formatter unchanged.
        """
        self._items_to_remove.extend(classify_all(_as_list(selectors)))

    def flatten(self, elements: Union[str, Iterable[str]]) -> None:
        """Add one or more tag names (undelimited regexes) to flatten.

        Flattening removes a tag but keeps its content.  It works on text
        with regexes and may fail in surprising ways, so it must not be
        relied on for markup security.
        """
        patterns = [validate_pattern(p) for p in _as_list(elements)]
        self._elements_to_flatten.extend(patterns)

    def flatten_all_tags(self) -> None:
        """Flatten every tag."""
        self.flatten(FLATTEN_ALL_PATTERN)

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def get_doc(self) -> BeautifulSoup:
        """Return the parsed document, parsing it on first use."""
        if self._doc is None:
            self._doc = parse_document(self.html)
        return self._doc

    def removal_set(self) -> RemovalSet:
        """Registered selectors (plus media tags) partitioned by kind."""
        return build_removal_set(
            self._items_to_remove, remove_media=self.remove_media
        )

    def filter_content(self) -> list[Tag]:
        """Remove the content chosen for removal.

        Returns the detached elements: tags first, then ids, classes and
        tag+class matches.  The document is not parsed when there is
        nothing to remove.
        """
        removals = self.removal_set()
        if removals.is_empty():
            return []
        return remove_matching(self.get_doc(), removals)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def node_html(self, node: Tag) -> str:
        """Serialize a (removed) element the same way as ``get_text()``."""
        return serialize(node)

    def get_text(self, element: Union[Tag, str, None] = None) -> str:
        """Perform final transformations and return the resulting HTML.

        Args:
            element: Element, or id of an element, to return the HTML of.
                Passing one replaces the body's content with that element,
                so the whole tree cannot be recovered afterwards.

        If the document was never parsed, *element* is ignored and the
        original fragment is used as is; only shell stripping, the hook and
        flattening apply to it.  Call ``get_doc()`` first to re-root an
        untouched fragment.
        """
        if self._doc is not None:
            if isinstance(element, str):
                element = self._doc.find(id=element)
            if element is not None:
                self._reroot(element)
            html = serialize(self._doc)
        else:
            html = self.html

        html = strip_shell(html)
        html = self.on_html_ready(html)
        if self._elements_to_flatten:
            html = flatten_tags(html, self._elements_to_flatten)
        return html

    def _reroot(self, element: Tag) -> None:
        body = self._doc.body
        if body is None:
            return
        element.extract()
        body.clear()
        body.append(element)
        logger.debug("re-rooted body", extra={"element_id": element.get("id")})
