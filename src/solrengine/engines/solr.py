"""Solr engine — Runs model searches and index writes against Apache Solr.

Usage::

    engine = SolrEngine(SolrClient(), settings.solr)
    engine.update(posts)
    results = engine.search(Post.search("title:solr").where("published", True))
    posts = engine.map(builder, results, Post)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from datetime import date
from typing import TYPE_CHECKING, Any

from solrengine.client.client import SolrClient
from solrengine.client.endpoint import Endpoint
from solrengine.client.queries import format_datetime
from solrengine.client.results import CoreAdminResult, SelectResult, UpdateResult
from solrengine.config.settings import SolrSettings
from solrengine.engines.base import Engine

if TYPE_CHECKING:
    from solrengine.builder import Builder
    from solrengine.models.searchable import Searchable

logger = logging.getLogger(__name__)


class SolrEngine(Engine):
    """Search engine backed by a :class:`SolrClient`.

    Each model type is stored in the core named by its ``searchable_as()``.
    Cores listed in ``settings.endpoints`` are reached through their own
    endpoint; all others through the client's default endpoint.

    Client errors are never caught here; they reach the caller unchanged.

    Any attribute the engine does not define is looked up on the client, so
    ``engine.ping()`` calls ``client.ping()``. :meth:`invoke` does the same
    by name.

    Args:
        client: The Solr client requests are sent through.
        settings: Solr driver settings.
    """

    def __init__(self, client: SolrClient, settings: SolrSettings) -> None:
        self._client = client
        self._settings = settings

    @property
    def client(self) -> SolrClient:
        return self._client

    @property
    def settings(self) -> SolrSettings:
        return self._settings

    # ── Index writes ─────────────────────────────────────────────────────

    def update(self, models: Sequence[Searchable]) -> UpdateResult | None:
        """Add the models' searchable arrays to their core and commit.

        Models whose searchable array is empty are skipped. Metadata from
        ``search_metadata()`` is merged into every document and wins over
        fields of the same name.
        """
        if not models:
            return None
        first = models[0]
        self._client.set_core(first)

        update = self._client.create_update()
        documents = []
        for model in models:
            searchable_data = model.to_searchable_array()
            if not searchable_data:
                continue
            documents.append(update.create_document({**searchable_data, **model.search_metadata()}))

        logger.debug("Indexing %d of %d models into core '%s'", len(documents), len(models), first.searchable_as())
        update.add_documents(documents)
        update.add_commit()

        return self._client.update(update, self.get_endpoint(first.searchable_as()))

    def delete(self, models: Sequence[Searchable]) -> None:
        """Delete the models from their core by key and commit."""
        if not models:
            return
        first = models[0]
        self._client.set_core(first)

        delete = self._client.create_update()
        delete.add_delete_by_ids([model.get_search_key() for model in models])
        delete.add_commit()

        self._client.update(delete, self.get_endpoint(first.searchable_as()))

    def flush(self, model: type[Searchable]) -> None:
        """Delete every document in the model's core and commit."""
        query = self._client.set_core(model).create_update()
        query.add_delete_query("*:*")
        query.add_commit()

        logger.info("Flushing core '%s'", model.searchable_as())
        self._client.update(query, self.get_endpoint(model.searchable_as()))

    # ── Search ───────────────────────────────────────────────────────────

    def search(self, builder: Builder) -> Any:
        return self.perform_search(
            builder,
            _compact({"filters": self.filters(builder), "limit": builder.limit}),
        )

    def paginate(self, builder: Builder, per_page: int, page: int) -> Any:
        return self.perform_search(
            builder,
            _compact(
                {
                    "filters": self.filters(builder),
                    "limit": int(per_page),
                    "offset": (page - 1) * per_page,
                }
            ),
        )

    def perform_search(self, builder: Builder, options: dict[str, Any] | None = None) -> Any:
        """Execute a search for the builder.

        If the builder has a callback, it is called with
        ``(client, query, options)`` and its return value is the result.
        Otherwise a select is sent with ``options["filters"]`` (or the raw
        query string) as ``q``, ``options["offset"]`` as ``start`` and
        ``options["limit"]`` (or the configured default) as ``rows``.
        """
        options = options or {}
        self._client.set_core(builder.model)

        if builder.callback is not None:
            return builder.callback(self._client, builder.query, options)

        query = self._client.create_select()
        query.set_query(options["filters"] if "filters" in options else builder.query)
        query.set_start(options.get("offset", 0)).set_rows(options.get("limit", self._settings.select.limit))
        for field, direction in builder.orders:
            query.add_sort(field, direction)

        return self._client.select(query, self.get_endpoint(builder.model.searchable_as()))

    def filters(self, builder: Builder) -> str:
        """Render the builder's constraints as a Solr query string.

        ``where`` constraints come first in insertion order, then
        ``where_in``, then ``where_not_in``; all joined with ``AND``.
        ``where(key, None)`` matches documents without a value for ``key``.
        """
        filters = [
            f"-{key}:*" if value is None else f"{key}:{_format_value(value)}" for key, value in builder.wheres.items()
        ]

        for key, values in builder.where_ins.items():
            if not values:
                # an empty IN list matches nothing
                filters.append("-*:*")
                continue
            filters.append(f"{key}:({' OR '.join(_format_value(v) for v in values)})")

        for key, values in builder.where_not_ins.items():
            if values:
                filters.append(f"-{key}:({' OR '.join(_format_value(v) for v in values)})")

        return " AND ".join(filters)

    # ── Result mapping ───────────────────────────────────────────────────

    def map_ids(self, results: SelectResult | Iterable[dict[str, Any]]) -> list[Any]:
        return self.map_ids_from(results, "id")

    def map(self, builder: Builder, results: SelectResult, model: type[Searchable]) -> list[Searchable]:
        """Fetch the models behind the results, in Solr's order.

        Fetched models whose key is not among the result ids are dropped.
        """
        if self.get_total_count(results) == 0:
            return []

        object_ids = self.map_ids(results)
        positions = _positions(object_ids)

        models = model.get_search_models_by_ids(builder, object_ids)
        return _in_result_order(models, positions)

    def lazy_map(self, builder: Builder, results: SelectResult, model: type[Searchable]) -> Iterator[Searchable]:
        """Like :meth:`map`, over ``query_search_models_by_ids()``.

        Nothing is fetched until the returned iterator is first advanced.
        """
        if self.get_total_count(results) == 0:
            return iter(())

        object_ids = self.map_ids(results)
        positions = _positions(object_ids)

        def _iterate() -> Iterator[Searchable]:
            models = model.query_search_models_by_ids(builder, object_ids)
            yield from _in_result_order(models, positions)

        return _iterate()

    def get_total_count(self, results: SelectResult) -> int:
        return results.num_found

    # ── Index administration ─────────────────────────────────────────────

    def create_index(self, name: str, options: dict[str, Any] | None = None) -> CoreAdminResult:
        """Create a core from the configured config set.

        ``options["config_set"]`` overrides the configured config set.
        """
        options = options or {}
        core_admin = self._client.create_core_admin()

        action = core_admin.create_create()
        action.set_core(name)
        action.set_config_set(options.get("config_set", self._settings.create.config_set))

        core_admin.set_action(action)
        return self._client.core_admin(core_admin, self.get_endpoint(name))

    def delete_index(self, name: str) -> CoreAdminResult:
        """Unload a core, deleting its files as configured."""
        core_admin = self._client.create_core_admin()

        unload = self._settings.unload
        action = core_admin.create_unload()
        action.set_core(name)
        action.set_delete_index(unload.delete_index)
        action.set_delete_data_dir(unload.delete_data_dir)
        action.set_delete_instance_dir(unload.delete_instance_dir)

        core_admin.set_action(action)
        return self._client.core_admin(core_admin, self.get_endpoint(name))

    # ── Helpers ──────────────────────────────────────────────────────────

    def get_endpoint(self, name: str) -> Endpoint | None:
        """Configured endpoint for an index, or None for the client default."""
        return self._settings.endpoints.get(name)

    def invoke(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """Call a client method by name and return its result."""
        return getattr(self._client, method)(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        client = self.__dict__.get("_client")
        if client is None:
            raise AttributeError(name)
        return getattr(client, name)


def _compact(options: dict[str, Any]) -> dict[str, Any]:
    """Drop empty options (no filters, no limit, zero offset)."""
    return {key: value for key, value in options.items() if value}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return f'"{format_datetime(value)}"'
    return str(value)


def _positions(object_ids: list[Any]) -> dict[str, int]:
    return {str(object_id): position for position, object_id in enumerate(object_ids)}


def _in_result_order(models: Iterable[Searchable], positions: dict[str, int]) -> list[Searchable]:
    matched = (model for model in models if str(model.get_search_key()) in positions)
    return sorted(matched, key=lambda model: positions[str(model.get_search_key())])
