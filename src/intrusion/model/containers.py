# topmark:header:start
#
#   project      : Author Intrusion
#   file         : containers.py
#   file_relpath : src/intrusion/model/containers.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Token containers: the units a rule inspects.

`TokenContainer` is the structural interface shared by every container. The
concrete containers are:

    * `Line`: one physical source line.
    * `Sentence`: a logical sentence, possibly spanning lines.
    * `Paragraph`: a logical paragraph made of one or more lines.
    * `intrusion.model.content.Content`: the whole document.

Sentences and paragraphs are built by an external segmentation stage; this
module only defines their shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from intrusion.model.location import Location

if TYPE_CHECKING:
    from intrusion.model.token import Token


@runtime_checkable
class TokenContainer(Protocol):
    """Structural interface for anything exposing an ordered token sequence."""

    @property
    def tokens(self) -> list[Token]:
        """Return the tokens of this container in document order."""
        ...


@dataclass
class Line:
    """A single physical line inside a content file.

    Attributes:
        location (Location): Location of the line; always a single-line span.
        text (str): Raw text of the line without its terminator.
        tokens (list[Token]): Tokens found on this line, in column order.
    """

    location: Location
    text: str
    tokens: list[Token] = field(default_factory=lambda: [])


def _span_of(tokens: list[Token]) -> Location:
    if not tokens:
        return Location()
    return tokens[0].location.span(tokens[-1].location)


@dataclass
class Sentence:
    """A single logical sentence within a paragraph."""

    tokens: list[Token] = field(default_factory=lambda: [])

    @property
    def location(self) -> Location:
        """Return the span from the first to the last token (unset if empty)."""
        return _span_of(self.tokens)


@dataclass
class Paragraph:
    """A single logical paragraph, built from one or more physical lines."""

    tokens: list[Token] = field(default_factory=lambda: [])
    sentences: list[Sentence] = field(default_factory=lambda: [])

    @property
    def location(self) -> Location:
        """Return the span from the first to the last token (unset if empty)."""
        return _span_of(self.tokens)
