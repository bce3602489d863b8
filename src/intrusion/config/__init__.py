# topmark:header:start
#
#   project      : Author Intrusion
#   file         : __init__.py
#   file_relpath : src/intrusion/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Configuration support: logging, value-bag typing and TOML loading.

Project files are loaded with
[`intrusion.config.loaders.load_project`][intrusion.config.loaders.load_project];
that module is not re-exported here because it depends on the analysis model.
"""

from __future__ import annotations

from intrusion.config.types import OptionMap, OptionValue, TomlTable

__all__ = [
    "OptionMap",
    "OptionValue",
    "TomlTable",
]
