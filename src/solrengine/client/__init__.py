"""Solr client — The index client the search engine drives.

Quick start::

    from solrengine.client import Endpoint, SolrClient

    client = SolrClient(Endpoint(host="localhost", core="posts"))
    result = client.select(client.create_select().set_query("*:*"))
"""

from solrengine.client.client import SolrClient
from solrengine.client.endpoint import Endpoint
from solrengine.client.exceptions import (
    CoreNotSelectedError,
    SolrConnectionError,
    SolrError,
    SolrResponseError,
)
from solrengine.client.queries import CoreAdminQuery, CreateAction, SelectQuery, UnloadAction, UpdateQuery
from solrengine.client.results import CoreAdminResult, SelectResult, UpdateResult

__all__ = [
    "CoreAdminQuery",
    "CoreAdminResult",
    "CoreNotSelectedError",
    "CreateAction",
    "Endpoint",
    "SelectQuery",
    "SelectResult",
    "SolrClient",
    "SolrConnectionError",
    "SolrError",
    "SolrResponseError",
    "UnloadAction",
    "UpdateQuery",
    "UpdateResult",
]
