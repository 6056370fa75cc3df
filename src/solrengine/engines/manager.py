"""Engine manager — Registration and retrieval of search engine drivers.

The manager maps driver names to factories and builds each engine once,
on first use, from the application settings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from solrengine.client.client import SolrClient
from solrengine.config.settings import Settings
from solrengine.engines.base import Engine
from solrengine.engines.solr import SolrEngine

logger = logging.getLogger(__name__)

EngineFactory = Callable[[Settings], Engine]


class EngineNotFoundError(Exception):
    """Raised when a requested driver is not registered."""


def create_solr_engine(settings: Settings) -> SolrEngine:
    """Build a Solr engine on the configured default endpoint."""
    return SolrEngine(SolrClient(settings.solr.endpoint), settings.solr)


class EngineManager:
    """Registry of search engine drivers.

    The ``solr`` driver is registered out of the box. Further drivers are
    added with :meth:`extend`.

    Example:
        >>> manager = EngineManager(Settings())
        >>> manager.extend("memory", lambda settings: MemoryEngine())
        >>> engine = manager.engine("memory")
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._factories: dict[str, EngineFactory] = {"solr": create_solr_engine}
        self._engines: dict[str, Engine] = {}

    def extend(self, name: str, factory: EngineFactory) -> None:
        """Register a driver factory.

        Args:
            name: Driver name.
            factory: Callable building the engine from the settings.
        """
        if name in self._factories:
            logger.warning("Overwriting existing driver registration: %s", name)
        self._factories[name] = factory
        self._engines.pop(name, None)
        logger.info("Registered search driver: %s", name)

    def engine(self, name: str | None = None) -> Engine:
        """Get the engine for a driver, building it on first use.

        Args:
            name: Driver name. Defaults to ``settings.driver``.

        Raises:
            EngineNotFoundError: If no driver is registered under this name.
        """
        name = name or self.settings.driver
        if name not in self._engines:
            if name not in self._factories:
                raise EngineNotFoundError(
                    f"No search driver registered with name '{name}'. "
                    f"Available drivers: {list(self._factories.keys())}"
                )
            self._engines[name] = self._factories[name](self.settings)
            logger.info("Created search engine for driver: %s", name)
        return self._engines[name]

    def forget_engines(self) -> None:
        """Drop every built engine; the next lookup builds a fresh one."""
        self._engines.clear()

    @property
    def registered_drivers(self) -> list[str]:
        return list(self._factories.keys())


# Process-wide manager used by Searchable models
_manager: EngineManager | None = None


def set_manager(manager: EngineManager | None) -> None:
    """Set the process-wide engine manager."""
    global _manager
    _manager = manager


def get_manager() -> EngineManager:
    """Get the process-wide engine manager, creating it from the environment if unset."""
    global _manager
    if _manager is None:
        _manager = EngineManager()
    return _manager
