"""solrengine — Apache Solr driver for searchable domain models."""

from solrengine.builder import Builder
from solrengine.client import Endpoint, SolrClient
from solrengine.config.settings import Settings
from solrengine.engines import Engine, EngineManager, SolrEngine
from solrengine.models import Page, Searchable

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "Endpoint",
    "Engine",
    "EngineManager",
    "Page",
    "Searchable",
    "Settings",
    "SolrClient",
    "SolrEngine",
    "__version__",
]
