"""Tests for selector classification and removal-set building."""

import pytest

from models.selectors import SelectorKind, sel_tag
from parsing.selectors import (
    InvalidSelector,
    build_removal_set,
    classify,
    classify_all,
)


@pytest.mark.parametrize(
    "raw, kind, name, extra",
    [
        (".infobox", SelectorKind.CLASS, "infobox", None),
        ("#toc", SelectorKind.ID, "toc", None),
        ("div.vcard", SelectorKind.TAG_CLASS, "div", "vcard"),
        ("table.a.b", SelectorKind.TAG_CLASS, "table", "a.b"),
        ("script", SelectorKind.TAG, "script", None),
        ("h1|h2", SelectorKind.TAG, "h1|h2", None),
        ("h\\d", SelectorKind.TAG, "h\\d", None),
        ("*", SelectorKind.TAG, "*", None),
        ("h(", SelectorKind.TAG, "h(", None),
        ("", SelectorKind.TAG, "", None),
        (".", SelectorKind.CLASS, "", None),
        ("#", SelectorKind.ID, "", None),
        ("div.", SelectorKind.TAG_CLASS, "div", ""),
    ],
)
def test_classify_shapes(raw, kind, name, extra):
    selector = classify(raw)
    assert selector.kind is kind
    assert selector.name == name
    assert selector.extra == extra


def test_leading_dot_wins_over_tag_class():
    assert classify(".a.b").kind is SelectorKind.CLASS


@pytest.mark.parametrize("raw", ["div[title]", "[x]", "a]"])
def test_classify_rejects_unusable_selectors(raw):
    with pytest.raises(InvalidSelector):
        classify(raw)


def test_invalid_selector_carries_selector_text():
    with pytest.raises(InvalidSelector, match=r"div\[title\]") as info:
        classify("div[title]")
    assert info.value.selector == "div[title]"
    assert isinstance(info.value, ValueError)


def test_classify_all_aborts_on_first_failure():
    with pytest.raises(InvalidSelector):
        classify_all(["script", "a[href]", ".ok"])


def test_selector_str_round_trips_raw_text():
    for raw in [".infobox", "#toc", "div.vcard", "script"]:
        assert str(classify(raw)) == raw


class TestBuildRemovalSet:
    """Partitioning of classified selectors."""

    def test_partitions_by_kind_in_order(self):
        removals = build_removal_set(
            classify_all(["#a", "script", ".b", "div.c", "style", "#d"])
        )
        assert [s.name for s in removals.ids] == ["a", "d"]
        assert [s.name for s in removals.tags] == ["script", "style"]
        assert [s.name for s in removals.classes] == ["b"]
        assert [(s.name, s.extra) for s in removals.tag_classes] == [("div", "c")]

    def test_media_tags_follow_registered_tags(self):
        removals = build_removal_set([sel_tag("script")], remove_media=True)
        assert [s.name for s in removals.tags] == ["script", "img", "audio", "video"]

    def test_empty(self):
        assert build_removal_set([]).is_empty()
        assert not build_removal_set([], remove_media=True).is_empty()
