"""HTML fragment parsing, element removal and flattening."""

from parsing.formatter import HtmlFormatter
from parsing.selectors import InvalidSelector, classify

__all__ = ["HtmlFormatter", "InvalidSelector", "classify"]
