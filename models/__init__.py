"""Public re-exports of all model types."""

from models.options import FormatOptions
from models.request import FormatRequest
from models.response import FormatResponse
from models.selectors import (
    RemovalSet,
    Selector,
    SelectorKind,
    sel_class,
    sel_id,
    sel_tag,
    sel_tag_class,
)

__all__ = [
    # Selectors
    "Selector",
    "SelectorKind",
    "RemovalSet",
    # Selector factories
    "sel_id",
    "sel_class",
    "sel_tag",
    "sel_tag_class",
    # Options
    "FormatOptions",
    # Request/Response
    "FormatRequest",
    "FormatResponse",
]
