# topmark:header:start
#
#   project      : Author Intrusion
#   file         : __init__.py
#   file_relpath : src/intrusion/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Author Intrusion: document model and plugin contract for prose linting.

A text file is represented as a `Content` made of `Line` objects and a
flattened `Token` sequence. Each configured `Analysis` names a plugin and a
scope; the plugin asks the content for the containers at that scope and reports
findings through an `AnalysisOutput`.
"""

from __future__ import annotations

from intrusion.analysis import (
    Analysis,
    AnalysisArguments,
    AnalysisOutput,
    AnalysisPlugin,
    CollectingOutput,
    ConsoleOutput,
    Diagnostic,
    PluginRegistry,
    Severity,
    run_analyses,
)
from intrusion.config.loaders import load_project
from intrusion.constants import FRONTMATTER_MARKER, INTRUSION_VERSION
from intrusion.errors import (
    AnalysisConfigError,
    IntrusionError,
    OutputStateError,
    PluginExecutionError,
    PluginNotFoundError,
    ProjectConfigError,
    ScopeResolutionError,
)
from intrusion.model import (
    Content,
    Line,
    Location,
    Paragraph,
    Scope,
    Sentence,
    Token,
    TokenContainer,
    split_frontmatter,
)
from intrusion.project import Project

__version__: str = INTRUSION_VERSION

__all__ = [
    "FRONTMATTER_MARKER",
    "Analysis",
    "AnalysisArguments",
    "AnalysisConfigError",
    "AnalysisOutput",
    "AnalysisPlugin",
    "CollectingOutput",
    "ConsoleOutput",
    "Content",
    "Diagnostic",
    "IntrusionError",
    "Line",
    "Location",
    "OutputStateError",
    "Paragraph",
    "PluginExecutionError",
    "PluginNotFoundError",
    "PluginRegistry",
    "Project",
    "ProjectConfigError",
    "Scope",
    "ScopeResolutionError",
    "Sentence",
    "Severity",
    "Token",
    "TokenContainer",
    "__version__",
    "load_project",
    "run_analyses",
    "split_frontmatter",
]
