# topmark:header:start
#
#   project      : Author Intrusion
#   file         : guards.py
#   file_relpath : src/intrusion/config/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Type guards and normalization helpers for parsed configuration values.

This module provides `TypeGuard`-based predicates that help Pyright narrow
runtime values coming from TOML parsing, plus `as_option_map` which validates a
free-form option bag against the closed set of
[`OptionValue`][intrusion.config.types.OptionValue] kinds.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard

from intrusion.config.logging import get_logger
from intrusion.errors import AnalysisConfigError

if TYPE_CHECKING:
    from intrusion.config.logging import IntrusionLogger
    from intrusion.config.types import OptionMap, OptionValue, TomlTable


logger: IntrusionLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value; item types are not checked."""
    return isinstance(obj, list)


def is_mapping(obj: object) -> TypeGuard[Mapping[object, object]]:
    """Type guard for a Mapping value; item types are not checked."""
    return isinstance(obj, Mapping)


def is_option_value(obj: object) -> TypeGuard[OptionValue]:
    """Return True if ``obj`` is one of the allowed option value kinds.

    Allowed kinds are ``str``, ``int``, ``float``, ``bool`` and mappings with
    string keys whose values are themselves option values.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[OptionValue]: ``True`` if ``obj`` (recursively) conforms.
    """
    if isinstance(obj, (str, bool, int, float)):
        return True
    if is_mapping(obj):
        return all(isinstance(k, str) and is_option_value(v) for k, v in obj.items())
    return False


def as_option_map(value: object, *, where: str) -> OptionMap:
    """Validate and copy a free-form option bag.

    Args:
        value (object): Parsed value; ``None`` is treated as an empty bag.
        where (str): Human-readable origin, used in error messages.

    Returns:
        OptionMap: A new plain ``dict`` with nested mappings copied as ``dict``.

    Raises:
        AnalysisConfigError: If ``value`` is not a mapping or holds a value of an
            unsupported kind.
    """
    if value is None:
        return {}
    if not is_mapping(value):
        raise AnalysisConfigError(f"{where}: options must be a table, got {type(value).__name__}")

    result: OptionMap = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise AnalysisConfigError(f"{where}: option keys must be strings, got {key!r}")
        if not is_option_value(item):
            raise AnalysisConfigError(
                f"{where}: option '{key}' has unsupported value kind {type(item).__name__}"
            )
        result[key] = as_option_map(item, where=f"{where}.{key}") if is_mapping(item) else item
    logger.trace("%s: validated %d option(s)", where, len(result))
    return result
