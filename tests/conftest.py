"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock

import pytest

from solrengine.client.client import SolrClient
from solrengine.config.settings import Settings
from solrengine.engines.solr import SolrEngine
from solrengine.models.searchable import Searchable

# ── Searchable models ────────────────────────────────────────────────────────


@dataclass
class SearchableModel(Searchable):
    """Indexed under ``table`` and keyed by ``id``."""

    __searchable_as__ = "table"

    id: int | None = None
    name: str = ""

    @classmethod
    def get_search_models_by_ids(cls, builder: Any, ids: Sequence[Any]) -> list[SearchableModel]:
        return [cls(id=int(i)) for i in ids]


@dataclass
class EmptySearchableModel(Searchable):
    """A model that never produces a searchable array."""

    __searchable_as__ = "table"

    id: int | None = None

    def to_searchable_array(self) -> dict[str, Any]:
        return {}

    @classmethod
    def get_search_models_by_ids(cls, builder: Any, ids: Sequence[Any]) -> list[EmptySearchableModel]:
        return []


@dataclass
class SearchableModelWithCustomKey(Searchable):
    """Keyed by ``other_id``, prefixed with ``custom-key.``."""

    __searchable_as__ = "table"
    search_key_name = "other_id"

    other_id: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def get_search_key(self) -> str:
        return f"custom-key.{self.other_id}"

    def to_searchable_array(self) -> dict[str, Any]:
        return {"other_id": self.get_search_key()}

    def search_metadata(self) -> dict[str, Any]:
        return self.metadata

    @classmethod
    def get_search_models_by_ids(cls, builder: Any, ids: Sequence[Any]) -> list[SearchableModelWithCustomKey]:
        return []


@pytest.fixture
def searchable_model() -> type[SearchableModel]:
    return SearchableModel


@pytest.fixture
def empty_searchable_model() -> type[EmptySearchableModel]:
    return EmptySearchableModel


@pytest.fixture
def custom_key_model() -> type[SearchableModelWithCustomKey]:
    return SearchableModelWithCustomKey


# ── Settings, client, engine ─────────────────────────────────────────────────


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def client() -> MagicMock:
    """A mocked Solr client."""
    return MagicMock(spec=SolrClient)


@pytest.fixture
def engine(client: MagicMock, settings: Settings) -> SolrEngine:
    return SolrEngine(client, settings.solr)


@pytest.fixture
def select_response() -> dict[str, Any]:
    """Sample Solr JSON response from /select with two documents."""
    return {
        "responseHeader": {"status": 0, "QTime": 3},
        "response": {
            "numFound": 2,
            "start": 0,
            "maxScore": 1.23,
            "docs": [
                {"id": "1", "name": "John Doe", "score": 1.23},
                {"id": "2", "name": "Jane Doe", "score": 0.87},
            ],
        },
    }
