"""Tests for deny-list pattern compilation and filtering."""

import pytest

from features.comparison.pattern_matcher import (
    compile_pattern,
    compile_patterns,
    filter_paths,
)


def test_wildcard_extension():
    matcher = compile_pattern("*.scss")
    assert matcher.matches("/proj/style.scss")
    assert not matcher.matches("/proj/style.css")


def test_literal_pattern_is_unanchored():
    matcher = compile_pattern("/docs/index.html")
    assert matcher.matches("/docs/index.html")
    assert matcher.matches("/docs/index.html.bak")
    assert matcher.matches("/site/docs/index.html")
    assert not matcher.matches("/docs/index2.html")


def test_non_wildcard_characters_are_literal():
    matcher = compile_pattern("a.b")
    assert matcher.matches("/a.b")
    assert not matcher.matches("/axb")


def test_wildcard_in_middle():
    matcher = compile_pattern("/img/*.png")
    assert matcher.matches("/img/logo.png")
    assert matcher.matches("/img/sub/logo.png")
    assert not matcher.matches("/css/logo.png")


def test_every_star_is_a_wildcard():
    matcher = compile_pattern("/*/cache/*")
    assert matcher.matches("/proj/cache/x")


@pytest.mark.parametrize("pattern", ["*", "", "**"])
def test_broad_patterns_match_everything(pattern):
    matcher = compile_pattern(pattern)
    assert matcher.matches("/anything/at/all.txt")
    assert matcher.matches("")


@pytest.mark.parametrize("pattern", ["[", "(", "\\", "a+?", "{1,2}", "$^"])
def test_regex_metacharacters_never_raise(pattern):
    matcher = compile_pattern(pattern)
    assert matcher.matches(f"/x{pattern}y")


def test_filter_paths_keeps_order_and_duplicates():
    matchers = compile_patterns(["*.log", "Thumbs.db"])
    paths = ["/b.log", "/a.txt", "/Thumbs.db", "/b.log"]
    assert filter_paths(paths, matchers) == ["/b.log", "/Thumbs.db", "/b.log"]


def test_filter_paths_without_matchers():
    assert filter_paths(["/a.txt"], []) == []
