"""Solr request builders — Update, select and core-admin queries.

Each query collects its settings through fluent setters and renders them
to the HTTP parameters (and, for updates, the JSON body) that
:class:`~solrengine.client.client.SolrClient` sends.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import UTC, date, datetime
from typing import Any

# ── Select ───────────────────────────────────────────────────────────────────


class SelectQuery:
    """A ``/select`` request.

    Args:
        query: The ``q`` parameter.
        start: Offset of the first returned document.
        rows: Maximum number of returned documents.
        fields: Stored fields to return (``fl``).
    """

    def __init__(
        self,
        query: str = "*:*",
        start: int = 0,
        rows: int = 10,
        fields: Iterable[str] = ("*", "score"),
    ) -> None:
        self.query = query
        self.start = start
        self.rows = rows
        self.fields = list(fields)
        self.sorts: list[tuple[str, str]] = []
        self.filter_queries: list[str] = []

    def set_query(self, query: str) -> SelectQuery:
        self.query = query
        return self

    def set_start(self, start: int) -> SelectQuery:
        self.start = start
        return self

    def set_rows(self, rows: int) -> SelectQuery:
        self.rows = rows
        return self

    def set_fields(self, fields: Iterable[str]) -> SelectQuery:
        self.fields = list(fields)
        return self

    def add_sort(self, field: str, direction: str = "asc") -> SelectQuery:
        direction = direction.lower()
        if direction not in ("asc", "desc"):
            raise ValueError(f"Sort direction must be 'asc' or 'desc', got '{direction}'")
        self.sorts.append((field, direction))
        return self

    def add_filter_query(self, filter_query: str) -> SelectQuery:
        self.filter_queries.append(filter_query)
        return self

    def get_params(self) -> dict[str, Any]:
        """Render the HTTP query parameters."""
        params: dict[str, Any] = {
            "q": self.query or "*:*",
            "start": self.start,
            "rows": self.rows,
            "wt": "json",
        }
        if self.fields:
            params["fl"] = ",".join(self.fields)
        if self.sorts:
            params["sort"] = ",".join(f"{field} {direction}" for field, direction in self.sorts)
        if self.filter_queries:
            params["fq"] = list(self.filter_queries)
        return params


# ── Update ───────────────────────────────────────────────────────────────────


class UpdateQuery:
    """An ``/update`` request made of ordered JSON commands.

    Solr's JSON update format allows the same command key several times in
    one object (``{"add": {...}, "add": {...}, "commit": {}}``), which a
    ``dict`` cannot hold, so the body is rendered command by command.
    """

    def __init__(self) -> None:
        self._commands: list[tuple[str, Any]] = []

    @staticmethod
    def create_document(fields: dict[str, Any]) -> dict[str, Any]:
        """Create a document to add; a shallow copy of ``fields``."""
        return dict(fields)

    def add_document(self, document: dict[str, Any]) -> UpdateQuery:
        self._commands.append(("add", {"doc": document}))
        return self

    def add_documents(self, documents: Iterable[dict[str, Any]]) -> UpdateQuery:
        for document in documents:
            self.add_document(document)
        return self

    def add_delete_by_id(self, doc_id: Any) -> UpdateQuery:
        return self.add_delete_by_ids([doc_id])

    def add_delete_by_ids(self, doc_ids: Iterable[Any]) -> UpdateQuery:
        ids = [str(doc_id) for doc_id in doc_ids]
        if ids:
            self._commands.append(("delete", ids))
        return self

    def add_delete_query(self, query: str) -> UpdateQuery:
        self._commands.append(("delete", {"query": query}))
        return self

    def add_commit(
        self,
        soft_commit: bool | None = None,
        wait_searcher: bool | None = None,
        expunge_deletes: bool | None = None,
    ) -> UpdateQuery:
        options = {
            "softCommit": soft_commit,
            "waitSearcher": wait_searcher,
            "expungeDeletes": expunge_deletes,
        }
        self._commands.append(("commit", {k: v for k, v in options.items() if v is not None}))
        return self

    @property
    def commands(self) -> list[tuple[str, Any]]:
        """Commands in the order they were added."""
        return list(self._commands)

    @property
    def documents(self) -> list[dict[str, Any]]:
        return [payload["doc"] for name, payload in self._commands if name == "add"]

    def build_body(self) -> str:
        """Render the JSON command object sent to ``/update``."""
        parts = [
            f"{json.dumps(name)}:{json.dumps(payload, default=_json_default, separators=(',', ':'))}"
            for name, payload in self._commands
        ]
        return "{" + ",".join(parts) + "}"


# ── Core admin ───────────────────────────────────────────────────────────────


class CreateAction:
    """Core-admin ``CREATE`` action."""

    name = "CREATE"

    def __init__(self) -> None:
        self.core: str | None = None
        self.config_set: str | None = None
        self.instance_dir: str | None = None

    def set_core(self, core: str) -> CreateAction:
        self.core = core
        return self

    def set_config_set(self, config_set: str | None) -> CreateAction:
        self.config_set = config_set
        return self

    def set_instance_dir(self, instance_dir: str | None) -> CreateAction:
        self.instance_dir = instance_dir
        return self

    def get_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"action": self.name, "name": self.core}
        if self.config_set:
            params["configSet"] = self.config_set
        if self.instance_dir:
            params["instanceDir"] = self.instance_dir
        return params


class UnloadAction:
    """Core-admin ``UNLOAD`` action, optionally deleting the core's files."""

    name = "UNLOAD"

    def __init__(self) -> None:
        self.core: str | None = None
        self.delete_index = False
        self.delete_data_dir = False
        self.delete_instance_dir = False

    def set_core(self, core: str) -> UnloadAction:
        self.core = core
        return self

    def set_delete_index(self, delete: bool) -> UnloadAction:
        self.delete_index = bool(delete)
        return self

    def set_delete_data_dir(self, delete: bool) -> UnloadAction:
        self.delete_data_dir = bool(delete)
        return self

    def set_delete_instance_dir(self, delete: bool) -> UnloadAction:
        self.delete_instance_dir = bool(delete)
        return self

    def get_params(self) -> dict[str, Any]:
        return {
            "action": self.name,
            "core": self.core,
            "deleteIndex": _bool_param(self.delete_index),
            "deleteDataDir": _bool_param(self.delete_data_dir),
            "deleteInstanceDir": _bool_param(self.delete_instance_dir),
        }


class CoreAdminQuery:
    """A request to ``/admin/cores`` carrying a single action."""

    def __init__(self) -> None:
        self.action: CreateAction | UnloadAction | None = None

    @staticmethod
    def create_create() -> CreateAction:
        return CreateAction()

    @staticmethod
    def create_unload() -> UnloadAction:
        return UnloadAction()

    def set_action(self, action: CreateAction | UnloadAction) -> CoreAdminQuery:
        self.action = action
        return self

    def get_params(self) -> dict[str, Any]:
        if self.action is None:
            raise ValueError("Core admin query has no action.")
        return {**self.action.get_params(), "wt": "json"}


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def format_datetime(value: date | datetime) -> str:
    """Render a date or datetime the way Solr date fields expect it.

    Values are converted to UTC and written as ``YYYY-MM-DDThh:mm:ssZ``.
    Naive datetimes are taken to be UTC already; dates become midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=UTC)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return format_datetime(value)
    return str(value)
