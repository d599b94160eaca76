"""Entity escaping around the HTML parser.

The forward pass runs before parsing: everything above ASCII becomes a
numeric character reference, and a space directly before markup becomes
``&#32;`` so the parser cannot drop it.  The ``&#32;`` rewrite is never
undone; it renders as a plain space.

The reverse pass runs on serialized output.  ``restore_entities`` is only
correct on text that went through ``escape_for_parser`` and the parser;
using it on arbitrary HTML is UNSAFE.
"""

from __future__ import annotations

import html
import re

# Markup-significant entities that must stay escaped after decoding.
_PROTECTED_ENTITY_RE = re.compile(r"&(quot|amp|lt|gt);")


def escape_for_parser(text: str) -> str:
    """Encode non-ASCII code points as character references."""
    text = text.encode("ascii", "xmlcharrefreplace").decode("ascii")
    return text.replace(" <", "&#32;<")


def restore_entities(text: str) -> str:
    """Decode character references, keeping ``&quot; &amp; &lt; &gt;`` intact.

    The four protected entities are escaped once more in a single pass
    (``&amp;`` -> ``&amp;amp;``), so the decode that follows brings them
    back to their single-escaped spelling while every other reference
    turns into its literal character.
    """
    text = _PROTECTED_ENTITY_RE.sub(r"&amp;\1;", text)
    return html.unescape(text)
