# topmark:header:start
#
#   project      : Author Intrusion
#   file         : constants.py
#   file_relpath : src/intrusion/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Author Intrusion constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

INTRUSION_VERSION: str = get_version("author-intrusion")

# Line that opens and closes a metadata block at the top of a document.
FRONTMATTER_MARKER: Final[str] = "---"

DEFAULT_TOML_CONFIG_NAME: Final[str] = "intrusion.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "intrusion"

PLUGIN_ENTRYPOINT_GROUP: Final[str] = "intrusion.plugins"
