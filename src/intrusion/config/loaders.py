# topmark:header:start
#
#   project      : Author Intrusion
#   file         : loaders.py
#   file_relpath : src/intrusion/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Load project configuration from TOML.

Two layouts are accepted:

- a standalone ``intrusion.toml`` with a top-level ``name`` and
  ``[[analysis]]`` tables, and
- a ``pyproject.toml`` carrying the same keys under ``[tool.intrusion]``.

When given a directory, `load_project` looks for ``intrusion.toml`` first and
falls back to ``pyproject.toml``. Parsing is done with `tomlkit` and returned
as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from intrusion.config.guards import is_toml_table
from intrusion.config.logging import get_logger
from intrusion.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from intrusion.errors import ProjectConfigError
from intrusion.project import Project

if TYPE_CHECKING:
    from pathlib import Path

    from intrusion.config.logging import IntrusionLogger
    from intrusion.config.types import TomlTable

logger: IntrusionLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ProjectConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ProjectConfigError(f"Error decoding TOML from {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (UTF-8).

    Returns:
        The parsed TOML content.

    Raises:
        ProjectConfigError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProjectConfigError(f"Error loading TOML from {path}: {e}") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return parse_toml_text(text, source=str(path))


def extract_project_table(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the table holding the project keys.

    Raises:
        ProjectConfigError: If a ``pyproject.toml`` lacks ``[tool.intrusion]``.
    """
    if not is_pyproject:
        return data
    tool = data.get("tool")
    section = tool.get(PYPROJECT_TOOL_SECTION) if is_toml_table(tool) else None
    if not is_toml_table(section):
        raise ProjectConfigError(f"No [tool.{PYPROJECT_TOOL_SECTION}] table in pyproject.toml")
    return section


def find_project_file(directory: Path) -> Path:
    """Return the configuration file to use inside ``directory``.

    Raises:
        ProjectConfigError: If neither ``intrusion.toml`` nor ``pyproject.toml`` exists.
    """
    for candidate in (DEFAULT_TOML_CONFIG_NAME, PYPROJECT_TOML_NAME):
        found: Path = directory / candidate
        if found.is_file():
            return found
    raise ProjectConfigError(
        f"No {DEFAULT_TOML_CONFIG_NAME} or {PYPROJECT_TOML_NAME} in {directory}"
    )


def load_project(path: Path) -> Project:
    """Load a `Project` from ``intrusion.toml`` or ``pyproject.toml``.

    ``path`` may name the file itself or the directory holding it (see
    `find_project_file`). When the table has no ``name``, the directory name
    is used.

    Raises:
        ProjectConfigError: If the file cannot be read, parsed, or lacks the
            expected table.
        AnalysisConfigError: If an analysis record is invalid.
    """
    if path.is_dir():
        path = find_project_file(path)
    data: TomlTable = load_toml_dict(path)
    table: TomlTable = extract_project_table(data, is_pyproject=path.name == PYPROJECT_TOML_NAME)
    record: TomlTable = dict(table)
    record.setdefault("name", path.resolve().parent.name)
    project: Project = Project.from_dict(record)
    logger.info("Loaded project '%s' from %s", project.name, path)
    return project
