# topmark:header:start
#
#   project      : Author Intrusion
#   file         : contracts.py
#   file_relpath : src/intrusion/analysis/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Type contracts between analysis plugins, orchestrators and output sinks.

Lifecycle
---------
1) The orchestrator calls ``output.write_start()``.
2) It calls ``plugin.process(args)`` exactly once. The plugin resolves its
   working set with ``args.content.get_scoped_tokens(args.analysis.scope)``
   and reports findings only through ``args.output``.
3) It calls ``output.write_end()``.

A plugin signals success by returning normally. Exceptions raised by
``process()`` propagate to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from intrusion.analysis.model import Analysis
    from intrusion.model.content import Content
    from intrusion.model.location import Location


class AnalysisOutput(Protocol):
    """Sink for the diagnostics produced by one plugin run."""

    def write_start(self) -> None:
        """Open the output block of one ``process()`` invocation."""
        ...

    def write_end(self) -> None:
        """Close the output block opened by ``write_start()``."""
        ...

    def write_info(self, message: str) -> None:
        """Report an informational message not tied to a location."""
        ...

    def write_warning(self, message: str, location: Location) -> None:
        """Report a warning at ``location``."""
        ...

    def write_error(self, message: str, location: Location) -> None:
        """Report an error at ``location``."""
        ...


@dataclass
class AnalysisArguments:
    """Everything a plugin receives for one invocation.

    Attributes:
        content (Content): The fully tokenized content to inspect.
        analysis (Analysis): The configuration that selected the plugin.
        output (AnalysisOutput): Where findings are reported.
    """

    content: Content
    analysis: Analysis
    output: AnalysisOutput


@runtime_checkable
class AnalysisPlugin(Protocol):
    """Executable implementation of a rule."""

    def process(self, args: AnalysisArguments) -> None:
        """Inspect ``args.content`` and report findings to ``args.output``.

        Args:
            args (AnalysisArguments): Content, configuration and output sink.
        """
        ...
