# topmark:header:start
#
#   project      : Author Intrusion
#   file         : output.py
#   file_relpath : src/intrusion/analysis/output.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Concrete [`AnalysisOutput`][intrusion.analysis.contracts.AnalysisOutput] sinks.

Sections:
    * BracketedOutput: shared start/end bookkeeping; rejects writes outside a block.
    * CollectingOutput: keeps diagnostics in memory, grouped per plugin run.
    * ConsoleOutput: prints diagnostics for humans through Click, colored per severity.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

import click

from intrusion.analysis.model import (
    Diagnostic,
    DiagnosticStats,
    Severity,
    compute_diagnostic_stats,
)
from intrusion.config.logging import get_logger
from intrusion.errors import OutputStateError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from intrusion.config.logging import IntrusionLogger
    from intrusion.model.location import Location


logger: IntrusionLogger = get_logger(__name__)


class BracketedOutput:
    """Base sink enforcing one ``write_start()``/``write_end()`` pair per run.

    Subclasses implement `_emit` (and optionally `_on_start`/`_on_end`).
    """

    def __init__(self) -> None:
        self._open: bool = False

    @property
    def is_open(self) -> bool:
        """Return True between ``write_start()`` and ``write_end()``."""
        return self._open

    def write_start(self) -> None:
        """Open an output block."""
        if self._open:
            raise OutputStateError("write_start() called while a block is already open")
        self._open = True
        self._on_start()

    def write_end(self) -> None:
        """Close the current output block."""
        if not self._open:
            raise OutputStateError("write_end() called without a matching write_start()")
        self._open = False
        self._on_end()

    def write_info(self, message: str) -> None:
        """Report an informational message."""
        self._write(Diagnostic(Severity.INFO, message))

    def write_warning(self, message: str, location: Location) -> None:
        """Report a warning at ``location``."""
        self._write(Diagnostic(Severity.WARNING, message, location))

    def write_error(self, message: str, location: Location) -> None:
        """Report an error at ``location``."""
        self._write(Diagnostic(Severity.ERROR, message, location))

    def _write(self, diagnostic: Diagnostic) -> None:
        if not self._open:
            raise OutputStateError(
                f"write_{diagnostic.severity.label}() called outside write_start()/write_end()"
            )
        logger.trace("Adding [%s]: %r", diagnostic.severity.label, diagnostic.message)
        self._emit(diagnostic)

    def _on_start(self) -> None:
        pass

    def _on_end(self) -> None:
        pass

    def _emit(self, diagnostic: Diagnostic) -> None:
        raise NotImplementedError


@dataclass
class OutputBlock:
    """Diagnostics written between one ``write_start()`` and its ``write_end()``."""

    items: list[Diagnostic] = field(default_factory=lambda: [])
    closed: bool = False


class CollectingOutput(BracketedOutput):
    """In-memory sink, mainly for tests and for callers that post-process results."""

    def __init__(self) -> None:
        super().__init__()
        self.blocks: list[OutputBlock] = []

    def _on_start(self) -> None:
        self.blocks.append(OutputBlock())

    def _on_end(self) -> None:
        self.blocks[-1].closed = True

    def _emit(self, diagnostic: Diagnostic) -> None:
        self.blocks[-1].items.append(diagnostic)

    @property
    def items(self) -> list[Diagnostic]:
        """Return all diagnostics in the order they were written."""
        return [d for block in self.blocks for d in block.items]

    def sorted(self) -> list[Diagnostic]:
        """Return all diagnostics ordered by severity, then location."""
        return sorted(self.items, key=lambda d: d.sort_key())

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts for all collected diagnostics."""
        return compute_diagnostic_stats(self.items)

    def has_error(self) -> bool:
        """Return True if any error was collected."""
        return any(d.severity == Severity.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        stats: DiagnosticStats = self.stats()
        return {
            Severity.ERROR.label: stats.n_error,
            Severity.WARNING.label: stats.n_warning,
            Severity.INFO.label: stats.n_info,
        }

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class ConsoleOutput(BracketedOutput):
    """Program-output sink that prints one line per diagnostic.

    Lines have the form ``path:line:column: severity: message``; info messages
    have no location prefix. Warnings and errors go to ``err``.

    Args:
        enable_color (bool): If True, color the severity label.
        out (TextIO | None): Stream for info messages; defaults to `sys.stdout`.
        err (TextIO | None): Stream for warnings and errors; defaults to `sys.stderr`.
        header (str | None): Optional line printed by ``write_start()``.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        header: str | None = None,
    ) -> None:
        super().__init__()
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.header = header

    def _on_start(self) -> None:
        if self.header:
            click.echo(self.header, file=self.out, color=self.enable_color)

    def format(self, diagnostic: Diagnostic) -> str:
        """Return the human-readable line for ``diagnostic``."""
        label: str = diagnostic.severity.label
        if self.enable_color:
            label = diagnostic.severity.color(label)
        if diagnostic.location is None:
            return f"{label}: {diagnostic.message}"
        return f"{diagnostic.location}: {label}: {diagnostic.message}"

    def _emit(self, diagnostic: Diagnostic) -> None:
        stream: TextIO = self.out if diagnostic.severity == Severity.INFO else self.err
        click.echo(self.format(diagnostic), file=stream, color=self.enable_color)
