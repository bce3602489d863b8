# topmark:header:start
#
#   project      : Author Intrusion
#   file         : content.py
#   file_relpath : src/intrusion/model/content.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""In-memory representation of one content file.

`Content` encapsulates the physical lines of a file, the flattened token
sequence, the record of processing stages that already ran, free-form metadata
and a non-owning reference to the owning project. It is itself a
[`TokenContainer`][intrusion.model.containers.TokenContainer] and offers:

    * scope resolution (`resolve_scope`, `get_scoped_tokens`),
    * frontmatter-aware text slicing (`index_of_text`, `get_text`),
    * token creation with content-wide indexes (`add_token`),
    * stage bookkeeping (`mark_processed`, `is_processed`).

Text slicing clamps out-of-range line indexes into ``[0, len(lines)]`` instead
of raising.
"""

from __future__ import annotations

import re
import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from intrusion.config.logging import get_logger, run_context
from intrusion.constants import FRONTMATTER_MARKER
from intrusion.errors import ScopeResolutionError
from intrusion.model.containers import Line
from intrusion.model.location import Location
from intrusion.model.scope import Scope, ScopeResolution
from intrusion.model.token import Token

if TYPE_CHECKING:
    from collections.abc import Iterator

    from intrusion.config.logging import IntrusionLogger
    from intrusion.config.types import OptionMap
    from intrusion.model.containers import TokenContainer
    from intrusion.project import Project

logger: IntrusionLogger = get_logger(__name__)

# Universal newlines only; form feeds, U+2028 and friends stay inside a line.
LINE_BREAK: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


class ProcessedStages:
    """Append-only, duplicate-free record of completed processing stages."""

    def __init__(self) -> None:
        self._stages: list[str] = []

    def add(self, stage: str) -> bool:
        """Record ``stage``; return False if it was already recorded."""
        if stage in self._stages:
            return False
        self._stages.append(stage)
        return True

    def __contains__(self, stage: object) -> bool:
        return stage in self._stages

    def __iter__(self) -> Iterator[str]:
        return iter(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def __repr__(self) -> str:
        return f"ProcessedStages({self._stages!r})"

    def as_tuple(self) -> tuple[str, ...]:
        """Return the recorded stages in completion order."""
        return tuple(self._stages)


@dataclass(eq=False)
class Content:
    """The contents of a single file inside a project.

    Attributes:
        path (str | None): Path of the file this content was read from.
        lines (list[Line]): Physical lines, zero-indexed and contiguous.
        tokens (list[Token]): All tokens of the document in document order.
        processed (ProcessedStages): Stages that already ran on this content.
        metadata (OptionMap): Free-form values written by processing stages.
    """

    path: str | None = None
    lines: list[Line] = field(default_factory=lambda: [])
    tokens: list[Token] = field(default_factory=lambda: [])
    processed: ProcessedStages = field(default_factory=ProcessedStages)
    metadata: OptionMap = field(default_factory=lambda: {})
    _project_ref: weakref.ReferenceType[Project] | None = field(
        default=None, init=False, repr=False
    )

    @classmethod
    def from_text(cls, text: str, path: str | None = None) -> Content:
        """Create a content whose lines are the physical lines of ``text``.

        Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are stripped. No tokens
        are created; tokenizing is left to a separate stage.

        Args:
            text (str): Full file text.
            path (str | None): Path recorded on the content and on every location.

        Returns:
            Content: A new content with one `Line` per physical line.
        """
        content = cls(path=path)
        pieces: list[str] = LINE_BREAK.split(text)
        if pieces[-1] == "":
            # A final terminator does not open another line.
            pieces.pop()
        for number, raw in enumerate(pieces):
            location = Location(path, number, 0, number, len(raw))
            content.lines.append(Line(location=location, text=raw))
        logger.debug("Loaded %d line(s)", len(content.lines), extra=run_context(path))
        return content

    # --- project back reference ---

    @property
    def project(self) -> Project | None:
        """Return the owning project, or None if unset or already released."""
        if self._project_ref is None:
            return None
        return self._project_ref()

    @project.setter
    def project(self, value: Project | None) -> None:
        self._project_ref = None if value is None else weakref.ref(value)

    # --- tokens and stages ---

    def add_token(
        self,
        line_index: int,
        text: str,
        begin_column: int,
        normalized: str | None = None,
    ) -> Token:
        """Create a token on a line and append it to the line and the document.

        The token receives the next content-wide index, so tokens must be added
        in document order.

        Args:
            line_index (int): Index of the line in `lines`.
            text (str): Raw token text.
            begin_column (int): Column of the first character on that line.
            normalized (str | None): Normalized form; defaults to ``text``.

        Returns:
            Token: The new token.

        Raises:
            IndexError: If ``line_index`` does not name an existing line.
            ValueError: If the token would start before the previous token.
        """
        if not 0 <= line_index < len(self.lines):
            raise IndexError(f"line index {line_index} out of range (0..{len(self.lines) - 1})")

        if self.tokens:
            previous: Location = self.tokens[-1].location
            if (line_index, begin_column) < (previous.begin_line, previous.begin_column):
                raise ValueError(
                    f"token at {line_index}:{begin_column} precedes the previous token "
                    f"at {previous.begin_line}:{previous.begin_column}"
                )

        location = Location(
            self.path, line_index, begin_column, line_index, begin_column + len(text)
        )
        token = Token(location, text, normalized or "", index=len(self.tokens))
        self.lines[line_index].tokens.append(token)
        self.tokens.append(token)
        return token

    def mark_processed(self, stage: str) -> bool:
        """Record that ``stage`` has run; return False if it was already recorded."""
        added: bool = self.processed.add(stage)
        if added:
            logger.trace("Stage '%s' completed", stage, extra=run_context(self.path))
        else:
            logger.debug("Stage '%s' already recorded", stage, extra=run_context(self.path))
        return added

    def is_processed(self, stage: str) -> bool:
        """Return True if ``stage`` has already run on this content."""
        return stage in self.processed

    # --- scope resolution ---

    def resolve_scope(self, scope: str | None = None) -> ScopeResolution:
        """Resolve ``scope`` into the containers an analysis should inspect.

        ``None`` (or an empty string) means ``"document"``.

        Args:
            scope (str | None): Scope string from an analysis configuration.

        Returns:
            ScopeResolution: The containers on success, or the error describing
            the unknown scope.
        """
        label: str = scope or Scope.DOCUMENT.value
        parsed: Scope | None = Scope.parse(scope)
        containers: list[TokenContainer]

        if parsed is Scope.DOCUMENT:
            containers = [self]
        elif parsed is Scope.LINES:
            containers = list(self.lines)
        else:
            logger.debug("Cannot resolve scope %r", scope, extra=run_context(self.path))
            return ScopeResolution(scope=label, error=ScopeResolutionError(label))

        logger.trace(
            "Scope '%s' -> %d container(s)", label, len(containers), extra=run_context(self.path)
        )
        return ScopeResolution(scope=label, containers=containers)

    def get_scoped_tokens(self, scope: str | None = None) -> list[TokenContainer]:
        """Return the containers for ``scope``, in document order.

        Raises:
            ScopeResolutionError: If ``scope`` is not a known scope.
        """
        resolution: ScopeResolution = self.resolve_scope(scope)
        if resolution.error is not None:
            raise resolution.error
        return list(resolution.containers)

    # --- text slicing ---

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.lines)))

    def index_of_text(self, marker: str = FRONTMATTER_MARKER, start: int = 0) -> int:
        """Return the index of the first line at or after ``start`` equal to ``marker``.

        Args:
            marker (str): Exact line text to look for.
            start (int): First line index to examine; negative values clamp to 0.

        Returns:
            int: The line index, or ``-1`` if no such line exists.
        """
        for i in range(self._clamp(start), len(self.lines)):
            if self.lines[i].text == marker:
                return i
        return -1

    def get_text(self, start: int, end: int) -> str:
        """Return lines ``[start, end)`` joined, each followed by a newline.

        Both bounds clamp into ``[0, len(lines)]``; an empty range yields ``""``.
        """
        selected: list[Line] = self.lines[self._clamp(start) : self._clamp(end)]
        return "".join(f"{line.text}\n" for line in selected)
