# topmark:header:start
#
#   project      : Author Intrusion
#   file         : __init__.py
#   file_relpath : src/intrusion/analysis/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Analysis configuration, plugin contract, output sinks and runner."""

from __future__ import annotations

from intrusion.analysis.contracts import AnalysisArguments, AnalysisOutput, AnalysisPlugin
from intrusion.analysis.model import (
    Analysis,
    Diagnostic,
    DiagnosticStats,
    Severity,
    compute_diagnostic_stats,
)
from intrusion.analysis.output import BracketedOutput, CollectingOutput, ConsoleOutput
from intrusion.analysis.registry import PluginFactory, PluginRegistry
from intrusion.analysis.runner import (
    AnalysisResult,
    RunReport,
    RunStatus,
    run_analyses,
    run_analysis,
)

__all__ = [
    "Analysis",
    "AnalysisArguments",
    "AnalysisOutput",
    "AnalysisPlugin",
    "AnalysisResult",
    "BracketedOutput",
    "CollectingOutput",
    "ConsoleOutput",
    "Diagnostic",
    "DiagnosticStats",
    "PluginFactory",
    "PluginRegistry",
    "RunReport",
    "RunStatus",
    "Severity",
    "compute_diagnostic_stats",
    "run_analyses",
    "run_analysis",
]
