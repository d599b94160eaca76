"""Text-level tag flattening (remove tags, keep their content).

Works on serialized HTML with a regular expression, so it also strips
tag-shaped text that never was a real element.  Not a security measure.
"""

from __future__ import annotations

import re
from typing import Iterable

from parsing.selectors import InvalidSelector

# Any alphanumeric tag, optionally a "<?...>" or "<!...>" pseudo-tag.
FLATTEN_ALL_PATTERN = "[?!]?[a-z0-9]+"


def validate_pattern(pattern: str) -> str:
    """Return *pattern* if it compiles as a tag-name regex."""
    try:
        re.compile(pattern)
    except re.error as exc:
        raise InvalidSelector(pattern, "invalid flatten pattern") from exc
    return pattern


def flatten_tags(html: str, patterns: Iterable[str]) -> str:
    """Strip opening and closing tags whose name matches any of *patterns*."""
    patterns = list(patterns)
    if not patterns:
        return html
    elements = "|".join(patterns)
    return re.sub(rf"</?(?:{elements})\b[^>]*>", "", html, flags=re.IGNORECASE | re.DOTALL)
