# topmark:header:start
#
#   project      : Author Intrusion
#   file         : test_content.py
#   file_relpath : tests/model/test_content.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Tests for `Content`: construction, tokens, stages, text slicing and project link.

The frontmatter fixture has the lines ``["---", "title: Test", "---", "Hello world."]``.
"""

from __future__ import annotations

import gc
from typing import TYPE_CHECKING

import pytest

from intrusion.model.containers import Line
from intrusion.model.content import Content
from intrusion.model.location import Location
from intrusion.project import Project

if TYPE_CHECKING:
    from intrusion.model.token import Token


def test_new_content_is_empty() -> None:
    """A fresh content has no lines, tokens, stages or metadata."""
    content = Content()

    assert content.tokens == []
    assert content.lines == []
    assert len(content.processed) == 0
    assert content.metadata == {}
    assert content.project is None


def test_from_text_creates_one_line_per_physical_line() -> None:
    """Each physical line becomes a `Line` with a single-line location."""
    content = Content.from_text("first\r\nsecond\nthird", path="a.txt")

    assert [line.text for line in content.lines] == ["first", "second", "third"]
    for number, line in enumerate(content.lines):
        assert line.location.begin_line == number
        assert line.location.is_single_line
        assert line.location.path == "a.txt"
        assert line.location.end_column == len(line.text)
        assert line.tokens == []


def test_from_text_breaks_only_on_universal_newlines() -> None:
    """Form feeds and Unicode separators stay inside their physical line."""
    content = Content.from_text("Chapter 1\x0cpage two\nnext\u2028same\rlast\x85end")

    assert [line.text for line in content.lines] == [
        "Chapter 1\x0cpage two",
        "next\u2028same",
        "last\x85end",
    ]
    assert content.lines[2].location.begin_line == 2
    assert content.get_text(1, 2) == "next\u2028same\n"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("\n", [""]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("a\r\n\r\nb", ["a", "", "b"]),
    ],
)
def test_from_text_trailing_terminator(text: str, expected: list[str]) -> None:
    """A final terminator closes the last line without opening another."""
    assert [line.text for line in Content.from_text(text).lines] == expected


def test_index_of_text_finds_markers(frontmatter_content: Content) -> None:
    """Markers are found at or after the start index."""
    assert frontmatter_content.index_of_text("---", 0) == 0
    assert frontmatter_content.index_of_text("---", 1) == 2
    assert frontmatter_content.index_of_text("---", 3) == -1


def test_index_of_text_defaults_to_frontmatter_marker(frontmatter_content: Content) -> None:
    """Without arguments the standard marker is searched from the first line."""
    assert frontmatter_content.index_of_text() == 0


def test_index_of_text_honours_custom_marker() -> None:
    """A caller-supplied marker replaces the default one."""
    content = Content.from_text("+++\ntitle = 'x'\n+++\nbody\n---")

    assert content.index_of_text("+++", 1) == 2
    assert content.index_of_text("---", 0) == 4


@pytest.mark.parametrize(
    ("start", "expected"),
    [(-5, 0), (4, -1), (100, -1)],
)
def test_index_of_text_clamps_start(frontmatter_content: Content, start: int, expected: int) -> None:
    """Out-of-range starts clamp instead of raising."""
    assert frontmatter_content.index_of_text("---", start) == expected


def test_get_text_joins_lines_with_newlines(frontmatter_content: Content) -> None:
    """Each selected line is followed by a newline."""
    assert frontmatter_content.get_text(0, 2) == "---\ntitle: Test\n"
    assert frontmatter_content.get_text(2, 4) == "---\nHello world.\n"


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (3, 3, ""),
        (3, 1, ""),
        (-2, 1, "---\n"),
        (3, 99, "Hello world.\n"),
        (10, 20, ""),
    ],
)
def test_get_text_clamps_bounds(
    frontmatter_content: Content, start: int, end: int, expected: str
) -> None:
    """Out-of-range and empty ranges have defined results."""
    assert frontmatter_content.get_text(start, end) == expected


def test_add_token_assigns_content_wide_indexes() -> None:
    """Tokens are numbered across the document and appended to their line."""
    content = Content.from_text("one two\nthree", path="n.txt")

    first: Token = content.add_token(0, "one", 0)
    second: Token = content.add_token(0, "two", 4)
    third: Token = content.add_token(1, "three", 0, normalized="3")

    assert [t.index for t in content.tokens] == [0, 1, 2]
    assert content.lines[0].tokens == [first, second]
    assert content.lines[1].tokens == [third]
    assert second.location == Location("n.txt", 0, 4, 0, 7)
    assert third.normalized == "3"
    assert first.normalized == "one"


def test_add_token_rejects_unknown_line() -> None:
    """A token can only be placed on an existing line."""
    content = Content.from_text("only")

    with pytest.raises(IndexError):
        content.add_token(1, "x", 0)


def test_add_token_rejects_out_of_order_tokens() -> None:
    """Tokens must be added in document order."""
    content = Content.from_text("alpha beta\ngamma")
    content.add_token(1, "gamma", 0)

    with pytest.raises(ValueError, match="precedes"):
        content.add_token(0, "beta", 6)


def test_mark_processed_is_duplicate_free() -> None:
    """Recording a stage twice leaves a single entry."""
    content = Content()

    assert content.mark_processed("tokens") is True
    assert content.mark_processed("stems") is True
    assert content.mark_processed("tokens") is False

    assert content.processed.as_tuple() == ("tokens", "stems")
    assert content.is_processed("stems")
    assert not content.is_processed("pos")


def test_metadata_is_writable_by_stages() -> None:
    """Stages share state through the metadata mapping."""
    content = Content()
    content.metadata["title"] = "Test"
    content.metadata["counts"] = {"words": 2}

    assert content.metadata == {"title": "Test", "counts": {"words": 2}}


def test_project_back_reference_does_not_own_project() -> None:
    """The content points at its project without keeping it alive."""
    project = Project(name="novel")
    content = project.add_content(Content(path="ch1.md"))

    assert content.project is project
    assert project.contents == [content]

    del project
    gc.collect()

    assert content.project is None


def test_project_back_reference_can_be_cleared() -> None:
    """Assigning None drops the reference."""
    project = Project(name="novel")
    content = Content()
    content.project = project
    content.project = None

    assert content.project is None


def test_lines_are_lines() -> None:
    """`from_text` produces `Line` instances."""
    content = Content.from_text("a\nb")

    assert all(isinstance(line, Line) for line in content.lines)
