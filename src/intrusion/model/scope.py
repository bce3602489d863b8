# topmark:header:start
#
#   project      : Author Intrusion
#   file         : scope.py
#   file_relpath : src/intrusion/model/scope.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Scope vocabulary and the explicit result of resolving a scope.

A scope is the configuration string an analysis uses to select the granularity
at which it inspects content. Resolution maps it to a sequence of
[`TokenContainer`][intrusion.model.containers.TokenContainer] values.

Adding a granularity (e.g. sentences) means adding a `Scope` member and a case
in `Content.resolve_scope`; the plugin contract does not change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from intrusion.errors import ScopeResolutionError
    from intrusion.model.containers import TokenContainer


class Scope(str, Enum):
    """Known scopes, keyed by their configuration string."""

    DOCUMENT = "document"
    LINES = "lines"

    @classmethod
    def parse(cls, value: str | None) -> Scope | None:
        """Return the member for ``value``; ``None`` or ``""`` mean DOCUMENT.

        Returns:
            Scope | None: The matching member, or ``None`` for an unknown string.
        """
        if not value:
            return cls.DOCUMENT
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_SCOPE: Final[Scope] = Scope.DOCUMENT


@dataclass(frozen=True)
class ScopeResolution:
    """Outcome of resolving a scope against one content.

    Exactly one of ``containers`` (on success) or ``error`` (on failure) is
    meaningful; check ``ok`` first.
    """

    scope: str
    containers: Sequence[TokenContainer] = field(default_factory=lambda: ())
    error: ScopeResolutionError | None = None

    @property
    def ok(self) -> bool:
        """Return True if the scope resolved to a container sequence."""
        return self.error is None
