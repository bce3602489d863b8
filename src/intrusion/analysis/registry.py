# topmark:header:start
#
#   project      : Author Intrusion
#   file         : registry.py
#   file_relpath : src/intrusion/analysis/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Registry of analysis plugins.

Maps the plugin identifiers named by `Analysis.plugin` to plugin factories. A
factory is any zero-argument callable returning an
[`AnalysisPlugin`][intrusion.analysis.contracts.AnalysisPlugin]; a plugin class
qualifies.

Notes:
    * Plugins are registered explicitly with `PluginRegistry.register` or
      discovered via the ``intrusion.plugins`` entry point group.
    * Entry points are read lazily on first lookup. Entry points that fail to
      load are logged and skipped; they never abort discovery.
    * Explicit registrations win over entry points with the same name.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable

from intrusion.analysis.contracts import AnalysisPlugin
from intrusion.config.logging import get_logger
from intrusion.constants import PLUGIN_ENTRYPOINT_GROUP
from intrusion.errors import PluginNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from importlib.metadata import EntryPoints

    from intrusion.config.logging import IntrusionLogger

logger: IntrusionLogger = get_logger(__name__)

PluginFactory = Callable[[], AnalysisPlugin]


class PluginRegistry:
    """Name to plugin-factory mapping with optional entry point discovery.

    Args:
        discover (bool): If True, consult the ``intrusion.plugins`` entry point
            group on first lookup.
    """

    def __init__(self, *, discover: bool = True) -> None:
        self._lock = RLock()
        self._factories: dict[str, PluginFactory] = {}
        self._discovered: dict[str, PluginFactory] = {}
        self._loaded = not discover

    def _load_entry_points(self) -> None:
        """Populate discovered factories from entry points (once)."""
        if self._loaded:
            return
        self._loaded = True

        try:
            candidates: EntryPoints = entry_points().select(group=PLUGIN_ENTRYPOINT_GROUP)
        except Exception:
            logger.exception("Failed to read entry points")
            return

        for ep in candidates:
            if ep.name in self._discovered:
                logger.warning("Duplicate plugin entry point '%s' (keeping first)", ep.name)
                continue
            try:
                provided: object = ep.load()
            except Exception:
                logger.exception("Failed loading analysis plugin from entry point %s", ep.name)
                continue
            if not callable(provided):
                logger.warning("Entry point %s is not a plugin factory: %r", ep.name, provided)
                continue
            self._discovered[ep.name] = provided  # type: ignore[assignment]
        logger.debug("Discovered %d analysis plugin(s)", len(self._discovered))

    def _compose(self) -> dict[str, PluginFactory]:
        self._load_entry_points()
        composed: dict[str, PluginFactory] = dict(self._discovered)
        composed.update(self._factories)
        return composed

    def register(self, name: str, factory: PluginFactory) -> None:
        """Register a plugin factory under ``name``.

        Raises:
            ValueError: If ``name`` is empty or already explicitly registered.
        """
        if not name:
            raise ValueError("Plugin name must not be empty")
        with self._lock:
            if name in self._factories:
                raise ValueError(f"Plugin '{name}' is already registered")
            self._factories[name] = factory
            logger.debug("Registered analysis plugin '%s'", name)

    def unregister(self, name: str) -> bool:
        """Remove an explicitly registered plugin; return True if it existed."""
        with self._lock:
            return self._factories.pop(name, None) is not None

    def names(self) -> tuple[str, ...]:
        """Return all known plugin names (sorted)."""
        with self._lock:
            return tuple(sorted(self._compose()))

    def is_registered(self, name: str) -> bool:
        """Return True if a plugin is known under ``name``."""
        with self._lock:
            return name in self._compose()

    def as_mapping(self) -> Mapping[str, PluginFactory]:
        """Return a read-only snapshot of the name to factory mapping."""
        with self._lock:
            return MappingProxyType(self._compose())

    def get(self, name: str) -> AnalysisPlugin:
        """Instantiate the plugin registered under ``name``.

        Raises:
            PluginNotFoundError: If no plugin is known under ``name``.
            TypeError: If the factory does not produce an `AnalysisPlugin`.
        """
        with self._lock:
            factory: PluginFactory | None = self._compose().get(name)
        if factory is None:
            raise PluginNotFoundError(name)

        plugin: object = factory()
        if not isinstance(plugin, AnalysisPlugin):
            raise TypeError(f"Factory for plugin '{name}' returned {plugin!r}, not a plugin")
        logger.trace("Instantiated plugin '%s': %r", name, plugin)
        return plugin
