"""Parsing and serialization of wrapped HTML fragments.

A fragment is wrapped in a minimal document shell, escaped with
``parsing.encoding.escape_for_parser`` and parsed with ``BeautifulSoup``
(lxml backend).  Serialization undoes the parser's entity handling and
``strip_shell()`` removes the shell again.
"""

from __future__ import annotations

import logging
import os
import re
import warnings

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement
from bs4.formatter import HTMLFormatter

from parsing.encoding import escape_for_parser, restore_entities

logger = logging.getLogger("formatter")


class _OutputFormatter(HTMLFormatter):
    """Keeps attribute values double-quoted, escaping embedded quotes."""

    def attribute_value(self, value: str) -> str:
        return super().attribute_value(value).replace('"', "&quot;")


# Escape only &, < and >; no "/" on void elements; empty attributes as booleans.
OUTPUT_FORMATTER = _OutputFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
    empty_attributes_are_booleans=True,
)

# Comments, everything through <body ...>, everything from </body>.
_SHELL_RE = re.compile(r"<!--.*?-->|^.*?<body\b[^>]*>|</body>.*$", re.DOTALL)


def wrap_html(html: str) -> str:
    """Turn a chunk of HTML into a proper document."""
    return "<!doctype html><html><head></head><body>" + html + "</body></html>"


def parse_document(html: str) -> BeautifulSoup:
    """Wrap, escape and parse *html* into a mutable tree.

    Malformed markup never raises: lxml recovers, and any warnings
    BeautifulSoup emits about the input are suppressed.
    ``class`` is kept as the raw attribute string rather than a token list.
    """
    markup = escape_for_parser(wrap_html(html))
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        soup = BeautifulSoup(markup, "lxml", multi_valued_attributes=None)
    logger.debug(
        "parsed document",
        extra={"input_chars": len(html), "output_encoding": "utf-8"},
    )
    return soup


def serialize(node: PageElement) -> str:
    """Serialize a tree or subtree and reverse the parser's escaping."""
    html = node.decode(formatter=OUTPUT_FORMATTER)
    html = restore_entities(html)
    if os.linesep == "\r\n":
        # CRLF input leaves encoded carriage returns behind on Windows.
        html = html.replace("&#13;", "")
    return html


def strip_shell(html: str) -> str:
    """Remove comments and everything outside ``<body>``."""
    return _SHELL_RE.sub("", html)
