# topmark:header:start
#
#   project      : Author Intrusion
#   file         : token.py
#   file_relpath : src/intrusion/model/token.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Lexical tokens.

A token is either a single word or punctuation mark, or a processed form of one
(for example a stemmed word). Tokens are created once by a tokenizer; only the
fields filled in by later processing stages (`stem` and `part_of_speech`) may
be assigned afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from intrusion.model.location import Location

LATE_BOUND_FIELDS: Final[frozenset[str]] = frozenset({"stem", "part_of_speech"})


@dataclass(eq=False)
class Token:
    """A lexical unit with its source location.

    Attributes:
        location (Location): Start and end of the token within the content.
        text (str): The original text within the content.
        normalized (str): Normalized text used for processing; defaults to ``text``.
        index (int): Token index within the entire content; ``-1`` if unassigned.
        stem (str | None): Stemmed version of the normalized text.
        part_of_speech (str | None): Treebank POS tag, ``None`` until tagged.
    """

    location: Location
    text: str
    normalized: str = ""
    index: int = -1
    stem: str | None = None
    part_of_speech: str | None = None
    _frozen: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.normalized:
            self.normalized = self.text
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False) and name not in LATE_BOUND_FIELDS:
            raise AttributeError(f"Token.{name} cannot be reassigned after creation")
        object.__setattr__(self, name, value)
