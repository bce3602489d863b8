# topmark:header:start
#
#   project      : Author Intrusion
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Pytest configuration for the Author Intrusion test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs. Content fixtures are tokenized with a small regex tokenizer standing
in for the external tokenizing stage.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from intrusion.analysis.registry import PluginRegistry
from intrusion.config import logging
from intrusion.config.logging import LOG_LEVEL_ENV_VAR
from intrusion.model.content import Content

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

WORD_PATTERN: re.Pattern[str] = re.compile(r"\w+|[^\w\s]")

FRONTMATTER_LINES: list[str] = ["---", "title: Test", "---", "Hello world."]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


def tokenize(content: Content, *, stage: str = "tokens") -> Content:
    """Split every line into word and punctuation tokens, in document order."""
    for index, line in enumerate(content.lines):
        for match in WORD_PATTERN.finditer(line.text):
            content.add_token(index, match.group(), match.start(), match.group().lower())
    content.mark_processed(stage)
    return content


@pytest.fixture(autouse=True)
def silence_intrusion_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear the log level variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@fixture()
def frontmatter_content() -> Content:
    """Return an untokenized content with a frontmatter block and one body line."""
    return Content.from_text("\n".join(FRONTMATTER_LINES), path="doc.md")


@fixture()
def tokenized_content() -> Content:
    """Return a tokenized two-paragraph document."""
    text = "The cat sat.\nThe cat ran away.\n\nA dog barked."
    return tokenize(Content.from_text(text, path="story.md"))


@fixture()
def tokenizer() -> Callable[..., Content]:
    """Return the test tokenizer so tests can tokenize their own contents."""
    return tokenize


@fixture()
def registry() -> PluginRegistry:
    """Return a plugin registry that ignores installed entry points."""
    return PluginRegistry(discover=False)
