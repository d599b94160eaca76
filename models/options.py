"""Formatter options with environment defaults.

Environment variables (comma-separated lists, truthy flags)::

    HTMLFORMATTER_REMOVE        e.g. "script,.navbox,#toc"
    HTMLFORMATTER_FLATTEN       e.g. "span,font"
    HTMLFORMATTER_FLATTEN_ALL   1/true/yes/on
    HTMLFORMATTER_REMOVE_MEDIA  1/true/yes/on
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

_TRUTHY = {"1", "true", "yes", "on"}


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


class FormatOptions(BaseModel):
    """What to remove and flatten in a formatting pass."""

    model_config = ConfigDict(extra="forbid")

    remove: list[str] = []
    flatten: list[str] = []
    flatten_all: bool = False
    remove_media: bool = False

    @classmethod
    def from_env(cls) -> FormatOptions:
        """Read defaults from ``HTMLFORMATTER_*`` environment variables."""
        return cls(
            remove=_env_list("HTMLFORMATTER_REMOVE"),
            flatten=_env_list("HTMLFORMATTER_FLATTEN"),
            flatten_all=_env_flag("HTMLFORMATTER_FLATTEN_ALL"),
            remove_media=_env_flag("HTMLFORMATTER_REMOVE_MEDIA"),
        )

    def merged(self, other: FormatOptions) -> FormatOptions:
        """Return options with *other* layered on top of these.

        Lists are concatenated, flags are OR-ed.
        """
        return FormatOptions(
            remove=[*self.remove, *other.remove],
            flatten=[*self.flatten, *other.flatten],
            flatten_all=self.flatten_all or other.flatten_all,
            remove_media=self.remove_media or other.remove_media,
        )
