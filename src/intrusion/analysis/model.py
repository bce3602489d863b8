# topmark:header:start
#
#   project      : Author Intrusion
#   file         : model.py
#   file_relpath : src/intrusion/analysis/model.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Analysis configuration and diagnostic primitives.

Sections:
    * Severity: ordered severity levels with associated terminal colors.
    * Analysis: one configured rule instance (plugin, options, scope).
    * Diagnostic: immutable finding reported by a plugin.
    * DiagnosticStats: aggregated per-severity counts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from intrusion.config.guards import as_option_map
from intrusion.errors import AnalysisConfigError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from intrusion.config.types import OptionMap
    from intrusion.model.location import Location


class Severity(IntEnum):
    """Severity of a reported finding.

    The integer values are an ordering contract: sorting diagnostics by
    severity puts errors first, then warnings, then informational messages.
    """

    ERROR = 0
    WARNING = 1
    INFO = 2

    @property
    def label(self) -> str:
        """Return the lower-case label used in human and machine output."""
        return self.name.lower()

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.ERROR: chalk.red_bright,
                Severity.WARNING: chalk.yellow,
                Severity.INFO: chalk.blue,
            }[self],
        )


@dataclass(frozen=True)
class Analysis:
    """One configured rule instance.

    Attributes:
        name (str): Human-readable name of this analysis.
        plugin (str): Identifier of the plugin implementing the rule.
        options (OptionMap): Plugin-specific options.
        scope (str | None): Granularity to inspect; validated when resolved.
    """

    name: str
    plugin: str
    # Options stay a plain mapping; hashing covers the identifying fields only.
    options: OptionMap = field(default_factory=lambda: {}, hash=False)
    scope: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, where: str = "analysis") -> Analysis:
        """Build an analysis from a configuration record.

        Args:
            data (Mapping[str, object]): Record with ``name``, ``plugin`` and the
                optional ``options`` and ``scope`` keys.
            where (str): Origin of the record, used in error messages.

        Returns:
            Analysis: The validated analysis.

        Raises:
            AnalysisConfigError: If a required key is missing or has the wrong type.
        """
        plugin = data.get("plugin")
        if not isinstance(plugin, str) or not plugin:
            raise AnalysisConfigError(f"{where}: 'plugin' must be a non-empty string")

        name = data.get("name", plugin)
        if not isinstance(name, str):
            raise AnalysisConfigError(f"{where}: 'name' must be a string")

        scope = data.get("scope")
        if scope is not None and not isinstance(scope, str):
            raise AnalysisConfigError(f"{where}: 'scope' must be a string")

        return cls(
            name=name,
            plugin=plugin,
            options=as_option_map(data.get("options"), where=f"{where}.options"),
            scope=scope,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this analysis."""
        data: dict[str, object] = {"name": self.name, "plugin": self.plugin}
        if self.options:
            data["options"] = dict(self.options)
        if self.scope is not None:
            data["scope"] = self.scope
        return data


@dataclass(frozen=True)
class Diagnostic:
    """A finding reported by a plugin.

    Attributes:
        severity (Severity): Severity of the finding.
        message (str): Human-readable message.
        location (Location | None): Where the finding applies; ``None`` for info.
    """

    severity: Severity
    message: str
    location: Location | None = None

    def sort_key(self) -> tuple[int, str, int, int]:
        """Return a key ordering by severity ordinal, then location."""
        if self.location is None:
            return (int(self.severity), "", -1, -1)
        return (int(self.severity), *self.location.sort_key())

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this diagnostic."""
        data: dict[str, object] = {
            "severity": self.severity.label,
            "message": self.message,
        }
        if self.location is not None:
            data["location"] = {
                "path": self.location.path,
                "begin_line": self.location.begin_line,
                "begin_column": self.location.begin_column,
                "end_line": self.location.end_line,
                "end_column": self.location.end_column,
            }
        return data


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_error: int
    n_warning: int
    n_info: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_error + self.n_warning + self.n_info


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics."""
    items: list[Diagnostic] = list(diagnostics)
    return DiagnosticStats(
        n_error=sum(1 for d in items if d.severity == Severity.ERROR),
        n_warning=sum(1 for d in items if d.severity == Severity.WARNING),
        n_info=sum(1 for d in items if d.severity == Severity.INFO),
    )
