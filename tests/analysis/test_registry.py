# topmark:header:start
#
#   project      : Author Intrusion
#   file         : test_registry.py
#   file_relpath : tests/analysis/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Tests for the analysis plugin registry, including entry point discovery."""

from __future__ import annotations

from typing import Any

import pytest

from intrusion.analysis import registry as registry_module
from intrusion.analysis.contracts import AnalysisArguments, AnalysisPlugin
from intrusion.analysis.registry import PluginRegistry
from intrusion.constants import PLUGIN_ENTRYPOINT_GROUP
from intrusion.errors import PluginNotFoundError


class NoopPlugin:
    """Plugin that reports nothing."""

    def process(self, args: AnalysisArguments) -> None:
        pass


class _FakeEntryPoint:
    def __init__(self, name: str, target: Any, *, fail: bool = False) -> None:
        self.name = name
        self._target = target
        self._fail = fail

    def load(self) -> Any:
        if self._fail:
            raise ImportError(f"cannot import {self.name}")
        return self._target


class _FakeEntryPoints:
    def __init__(self, items: list[_FakeEntryPoint]) -> None:
        self._items = items
        self.groups: list[str] = []

    def select(self, *, group: str) -> list[_FakeEntryPoint]:
        self.groups.append(group)
        return self._items


def test_register_and_get(registry: PluginRegistry) -> None:
    """A registered class is instantiated on lookup."""
    registry.register("noop", NoopPlugin)

    plugin = registry.get("noop")

    assert isinstance(plugin, NoopPlugin)
    assert isinstance(plugin, AnalysisPlugin)
    assert registry.names() == ("noop",)
    assert registry.is_registered("noop")


def test_get_unknown_plugin(registry: PluginRegistry) -> None:
    """Unknown identifiers raise a lookup error naming the plugin."""
    with pytest.raises(PluginNotFoundError) as excinfo:
        registry.get("missing")

    assert excinfo.value.plugin == "missing"
    assert isinstance(excinfo.value, LookupError)


def test_duplicate_and_empty_names_are_rejected(registry: PluginRegistry) -> None:
    """Names must be unique and non-empty."""
    registry.register("noop", NoopPlugin)

    with pytest.raises(ValueError, match="already registered"):
        registry.register("noop", NoopPlugin)
    with pytest.raises(ValueError):
        registry.register("", NoopPlugin)


def test_unregister(registry: PluginRegistry) -> None:
    """Unregistering removes explicit registrations only once."""
    registry.register("noop", NoopPlugin)

    assert registry.unregister("noop") is True
    assert registry.unregister("noop") is False
    assert not registry.is_registered("noop")


def test_factory_must_produce_a_plugin(registry: PluginRegistry) -> None:
    """A factory returning something without ``process`` is a type error."""
    registry.register("bogus", lambda: object())  # type: ignore[arg-type,return-value]

    with pytest.raises(TypeError):
        registry.get("bogus")


def test_as_mapping_is_read_only(registry: PluginRegistry) -> None:
    """The mapping view cannot be mutated."""
    registry.register("noop", NoopPlugin)
    mapping = registry.as_mapping()

    with pytest.raises(TypeError):
        mapping["other"] = NoopPlugin  # type: ignore[index]


def test_entry_point_discovery(monkeypatch: pytest.MonkeyPatch) -> None:
    """Entry points are loaded once; broken ones are skipped; explicit wins."""
    fake = _FakeEntryPoints(
        [
            _FakeEntryPoint("noop", NoopPlugin),
            _FakeEntryPoint("broken", None, fail=True),
            _FakeEntryPoint("not-callable", 42),
            _FakeEntryPoint("shadowed", NoopPlugin),
        ]
    )
    monkeypatch.setattr(registry_module, "entry_points", lambda: fake)

    class Override(NoopPlugin):
        pass

    registry = PluginRegistry()
    registry.register("shadowed", Override)

    assert registry.names() == ("noop", "shadowed")
    assert isinstance(registry.get("shadowed"), Override)
    assert isinstance(registry.get("noop"), NoopPlugin)
    assert fake.groups == [PLUGIN_ENTRYPOINT_GROUP]
