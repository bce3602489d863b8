# topmark:header:start
#
#   project      : Author Intrusion
#   file         : errors.py
#   file_relpath : src/intrusion/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Exceptions raised by the Author Intrusion core.

Usage:
    Raise these exceptions at the seam that detects the problem and chain the
    underlying cause with ``raise ... from exc``. All of them derive from
    `IntrusionError` so an orchestrator can catch the whole family at once.
"""

from __future__ import annotations


class IntrusionError(Exception):
    """Base class for all Author Intrusion errors."""


class ScopeResolutionError(IntrusionError):
    """Error for a scope string outside the known scope vocabulary.

    Attributes:
        scope (str): The offending scope string.
    """

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Unknown scope '{scope}'. Must be document or lines.")


class AnalysisConfigError(IntrusionError):
    """Error for an invalid analysis record or option bag."""


class ProjectConfigError(IntrusionError):
    """Error for a missing, unreadable or malformed project configuration."""


class PluginNotFoundError(IntrusionError, LookupError):
    """Error when an analysis names a plugin that is not registered.

    Attributes:
        plugin (str): The plugin identifier that could not be resolved.
    """

    def __init__(self, plugin: str) -> None:
        self.plugin = plugin
        super().__init__(f"No analysis plugin registered as '{plugin}'.")


class PluginExecutionError(IntrusionError):
    """Error for a failure raised inside a plugin's ``process()``.

    The plugin's own exception is available as ``__cause__``.

    Attributes:
        analysis (str): Name of the analysis whose plugin failed.
    """

    def __init__(self, analysis: str, message: str) -> None:
        self.analysis = analysis
        super().__init__(f"Analysis '{analysis}' failed: {message}")


class OutputStateError(IntrusionError):
    """Error when an output sink is used outside its start/end bracket."""
