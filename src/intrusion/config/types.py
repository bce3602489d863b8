# topmark:header:start
#
#   project      : Author Intrusion
#   file         : types.py
#   file_relpath : src/intrusion/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Shared type aliases for configuration and free-form value bags.

`OptionValue` is the closed set of value kinds allowed in an analysis option
bag and in `Content.metadata`: strings, numbers, booleans and nested string-keyed
mappings of the same.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias, Union

TomlTable = dict[str, Any]

OptionValue: TypeAlias = Union[str, int, float, bool, Mapping[str, "OptionValue"]]
OptionMap: TypeAlias = dict[str, OptionValue]
