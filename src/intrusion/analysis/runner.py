# topmark:header:start
#
#   project      : Author Intrusion
#   file         : runner.py
#   file_relpath : src/intrusion/analysis/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Run the analyses of a project against one content, sequentially.

Analyses run in `Project.analysis` order. Each plugin run is bracketed by
``output.write_start()`` and ``output.write_end()``, even when the plugin raises.

Failure policy:
    * An analysis whose scope does not resolve is reported through
      ``output.write_error`` and skipped.
    * A plugin exception is re-raised as `PluginExecutionError`, unless the
      caller asks for ``isolate=True``, in which case it is recorded in the
      report and the remaining analyses still run.
    * An unknown plugin identifier always raises `PluginNotFoundError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from intrusion.analysis.contracts import AnalysisArguments
from intrusion.config.logging import get_logger, run_context
from intrusion.errors import OutputStateError, PluginExecutionError
from intrusion.model.location import Location

if TYPE_CHECKING:
    from intrusion.analysis.contracts import AnalysisOutput, AnalysisPlugin
    from intrusion.analysis.model import Analysis
    from intrusion.analysis.registry import PluginRegistry
    from intrusion.config.logging import IntrusionLogger
    from intrusion.model.content import Content
    from intrusion.model.scope import ScopeResolution
    from intrusion.project import Project

logger: IntrusionLogger = get_logger(__name__)


class RunStatus(Enum):
    """Outcome of a single analysis run."""

    COMPLETED = "completed"
    SKIPPED_SCOPE = "skipped_scope"
    FAILED = "failed"


@dataclass(frozen=True)
class AnalysisResult:
    """Status of one analysis, with the failure when there was one."""

    analysis: str
    status: RunStatus
    error: Exception | None = None


@dataclass
class RunReport:
    """Per-analysis results of one `run_analyses` call, in execution order."""

    path: str | None
    results: list[AnalysisResult] = field(default_factory=lambda: [])

    @property
    def ok(self) -> bool:
        """Return True if every analysis completed."""
        return all(r.status == RunStatus.COMPLETED for r in self.results)

    def by_status(self, status: RunStatus) -> list[AnalysisResult]:
        """Return the results with the given status."""
        return [r for r in self.results if r.status == status]


def run_analysis(
    plugin: AnalysisPlugin,
    content: Content,
    analysis: Analysis,
    output: AnalysisOutput,
) -> None:
    """Invoke one plugin inside a start/end bracket.

    When the plugin fails, the bracket is still closed. A sink that rejects
    that close is logged, and the plugin's failure is what propagates.

    Raises:
        PluginExecutionError: If the plugin raises; the original exception is
            chained as ``__cause__``.
        OutputStateError: If the plugin completed but left the sink unable to
            close the bracket.
    """
    args = AnalysisArguments(content=content, analysis=analysis, output=output)
    context = run_context(content.path, analysis.name)
    logger.debug("Running plugin '%s'", analysis.plugin, extra=context)
    output.write_start()
    try:
        plugin.process(args)
    except Exception as exc:
        logger.error("Plugin '%s' failed: %s", analysis.plugin, exc, extra=context)
        try:
            output.write_end()
        except OutputStateError as close_exc:
            logger.error("Could not close output after failure: %s", close_exc, extra=context)
        raise PluginExecutionError(analysis.name, str(exc)) from exc
    output.write_end()
    logger.trace("Completed", extra=context)


def run_analyses(
    project: Project,
    content: Content,
    output: AnalysisOutput,
    registry: PluginRegistry,
    *,
    isolate: bool = False,
) -> RunReport:
    """Run every analysis of ``project`` against ``content``.

    Args:
        project (Project): Provides the ordered analyses.
        content (Content): The tokenized content, shared by all analyses.
        output (AnalysisOutput): Sink receiving every plugin's diagnostics.
        registry (PluginRegistry): Resolves plugin identifiers.
        isolate (bool): Record plugin failures and continue instead of raising.

    Returns:
        RunReport: One result per analysis, in execution order.

    Raises:
        PluginNotFoundError: If an analysis names an unknown plugin.
        PluginExecutionError: If a plugin fails and ``isolate`` is False.
    """
    report = RunReport(path=content.path)
    for analysis in project.analysis:
        resolution: ScopeResolution = content.resolve_scope(analysis.scope)
        if resolution.error is not None:
            logger.warning(
                "Skipped: %s", resolution.error, extra=run_context(content.path, analysis.name)
            )
            output.write_start()
            output.write_error(f"{analysis.name}: {resolution.error}", Location(content.path))
            output.write_end()
            report.results.append(
                AnalysisResult(analysis.name, RunStatus.SKIPPED_SCOPE, resolution.error)
            )
            continue

        plugin: AnalysisPlugin = registry.get(analysis.plugin)
        try:
            run_analysis(plugin, content, analysis, output)
        except PluginExecutionError as exc:
            if not isolate:
                raise
            report.results.append(AnalysisResult(analysis.name, RunStatus.FAILED, exc))
            continue
        report.results.append(AnalysisResult(analysis.name, RunStatus.COMPLETED))

    logger.info(
        "%d analyses, %d completed",
        len(report.results),
        len(report.by_status(RunStatus.COMPLETED)),
        extra=run_context(content.path),
    )
    return report
