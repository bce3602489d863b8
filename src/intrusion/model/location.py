# topmark:header:start
#
#   project      : Author Intrusion
#   file         : location.py
#   file_relpath : src/intrusion/model/location.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Source locations for tokens, lines and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

UNSET: Final[int] = -1


@dataclass(frozen=True, slots=True)
class Location:
    """Identify a point or span within a file as line and column.

    Lines and columns are zero-based; ``-1`` marks a coordinate as unset.

    Attributes:
        path (str | None): File path the location refers to, if known.
        begin_line (int): First line of the span.
        begin_column (int): Column on ``begin_line`` where the span starts.
        end_line (int): Last line of the span.
        end_column (int): Column on ``end_line`` where the span ends (exclusive).
    """

    path: str | None = None
    begin_line: int = UNSET
    begin_column: int = UNSET
    end_line: int = UNSET
    end_column: int = UNSET

    def __post_init__(self) -> None:
        # Coerce numeric strings and floats the same way for every coordinate.
        for name in ("begin_line", "begin_column", "end_line", "end_column"):
            object.__setattr__(self, name, int(getattr(self, name)))

    @property
    def is_single_line(self) -> bool:
        """Return True if the span starts and ends on the same line."""
        return self.begin_line == self.end_line

    def span(self, other: Location) -> Location:
        """Return a location covering ``self`` through ``other``.

        The path of ``self`` is kept; ``other`` is expected to lie at or after
        ``self`` in the same file.
        """
        return Location(
            path=self.path,
            begin_line=self.begin_line,
            begin_column=self.begin_column,
            end_line=other.end_line,
            end_column=other.end_column,
        )

    def sort_key(self) -> tuple[str, int, int]:
        """Return a key that orders locations by path, line and column."""
        return (self.path or "", self.begin_line, self.begin_column)

    def __str__(self) -> str:
        path = self.path or "<unknown>"
        if self.begin_line == UNSET:
            return path
        # Human-facing positions are one-based.
        return f"{path}:{self.begin_line + 1}:{self.begin_column + 1}"
