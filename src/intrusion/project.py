# topmark:header:start
#
#   project      : Author Intrusion
#   file         : project.py
#   file_relpath : src/intrusion/project.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""The settings for a collected series of content files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from intrusion.analysis.model import Analysis
from intrusion.config.guards import is_any_list, is_mapping
from intrusion.config.logging import get_logger
from intrusion.errors import AnalysisConfigError

if TYPE_CHECKING:
    from intrusion.config.logging import IntrusionLogger
    from intrusion.model.content import Content

logger: IntrusionLogger = get_logger(__name__)


@dataclass(eq=False)
class Project:
    """A named, ordered set of analyses and the contents they run against.

    Attributes:
        name (str): Project name.
        analysis (list[Analysis]): Analyses in execution order.
        contents (list[Content]): Contents owned by this project.
    """

    name: str
    analysis: list[Analysis] = field(default_factory=lambda: [])
    contents: list[Content] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Project:
        """Build a project from a configuration record.

        Args:
            data (Mapping[str, object]): Record with ``name`` and an optional
                ``analysis`` list of analysis records.

        Returns:
            Project: The project; without ``analysis`` its rule list is empty.

        Raises:
            AnalysisConfigError: If the record or one of its analyses is invalid.
        """
        name = data.get("name")
        if not isinstance(name, str):
            raise AnalysisConfigError("project: 'name' must be a string")

        records = data.get("analysis")
        if records is None:
            records = []
        if not is_any_list(records):
            raise AnalysisConfigError("project: 'analysis' must be a list of tables")

        analyses: list[Analysis] = []
        for i, record in enumerate(records):
            where = f"analysis[{i}]"
            if not is_mapping(record):
                raise AnalysisConfigError(f"{where}: expected a table, got {type(record).__name__}")
            analyses.append(Analysis.from_dict({str(k): v for k, v in record.items()}, where=where))

        logger.debug("Project '%s' with %d analyses", name, len(analyses))
        return cls(name=name, analysis=analyses)

    def add_content(self, content: Content) -> Content:
        """Take ownership of ``content`` and point its back reference here."""
        content.project = self
        self.contents.append(content)
        return content

    def to_dict(self) -> dict[str, object]:
        """Return the configuration record of this project."""
        return {"name": self.name, "analysis": [a.to_dict() for a in self.analysis]}
