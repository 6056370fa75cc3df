"""Search engines — Drivers that index and search searchable models.

Built-in drivers:
  - solr: Apache Solr, through :class:`~solrengine.client.SolrClient`

Subclass ``Engine`` and register it with ``EngineManager.extend()`` to add
your own.
"""

from solrengine.engines.base import Engine
from solrengine.engines.manager import EngineManager, EngineNotFoundError, get_manager, set_manager
from solrengine.engines.solr import SolrEngine

__all__ = ["Engine", "EngineManager", "EngineNotFoundError", "SolrEngine", "get_manager", "set_manager"]
