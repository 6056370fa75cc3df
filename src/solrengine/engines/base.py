"""Base engine — Abstract interface for search engine drivers.

An engine is what a :class:`~solrengine.builder.Builder` runs against.
It is responsible for:
  1. Writing searchable models to the backend index (update, delete, flush)
  2. Executing searches built by a Builder
  3. Mapping raw results back to identifiers and domain models
  4. Administering indexes
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solrengine.builder import Builder
    from solrengine.models.searchable import Searchable


class Engine(ABC):
    """Abstract base class for search engines.

    Concrete engines implement the index writes, searches, result mapping
    and index administration; ``keys()``, ``get()`` and ``cursor()`` are
    built on top of those.
    """

    @abstractmethod
    def update(self, models: Sequence[Searchable]) -> Any:
        """Add or replace the given models in their index."""

    @abstractmethod
    def delete(self, models: Sequence[Searchable]) -> None:
        """Remove the given models from their index."""

    @abstractmethod
    def search(self, builder: Builder) -> Any:
        """Run the builder's search and return the raw results."""

    @abstractmethod
    def paginate(self, builder: Builder, per_page: int, page: int) -> Any:
        """Run one page of the builder's search and return the raw results."""

    @abstractmethod
    def map_ids(self, results: Any) -> list[Any]:
        """Pluck the document identifiers from raw results, in result order."""

    @abstractmethod
    def map(self, builder: Builder, results: Any, model: type[Searchable]) -> list[Searchable]:
        """Map raw results to domain models, in result order."""

    @abstractmethod
    def lazy_map(self, builder: Builder, results: Any, model: type[Searchable]) -> Iterator[Searchable]:
        """Like :meth:`map`, but fetch and yield the models lazily."""

    @abstractmethod
    def get_total_count(self, results: Any) -> int:
        """Total number of matches reported by the backend."""

    @abstractmethod
    def flush(self, model: type[Searchable]) -> None:
        """Remove every document of the model's index."""

    @abstractmethod
    def create_index(self, name: str, options: dict[str, Any] | None = None) -> Any:
        """Create a search index."""

    @abstractmethod
    def delete_index(self, name: str) -> Any:
        """Delete a search index."""

    def map_ids_from(self, results: Any, key: str) -> list[Any]:
        """Pluck ``key`` from each raw result document."""
        documents = getattr(results, "documents", results)
        return [document[key] for document in documents]

    def keys(self, builder: Builder) -> list[Any]:
        """Identifiers matching the builder's search."""
        return self.map_ids(self.search(builder))

    def get(self, builder: Builder) -> list[Searchable]:
        """Domain models matching the builder's search."""
        return self.map(builder, self.search(builder), builder.model)

    def cursor(self, builder: Builder) -> Iterator[Searchable]:
        """Lazily fetched domain models matching the builder's search."""
        return self.lazy_map(builder, self.search(builder), builder.model)
