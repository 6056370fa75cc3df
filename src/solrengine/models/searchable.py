"""Searchable mixin — What a domain model provides to be indexed and searched.

Usage::

    @dataclass
    class Post(Searchable):
        __searchable_as__ = "posts"

        id: int
        title: str

        @classmethod
        def get_search_models_by_ids(cls, builder, ids):
            return repository.posts_by_ids(ids)

    Post(id=1, title="Hello").searchable()
    Post.search("title:hello").get()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from solrengine.builder import Builder, SearchCallback
    from solrengine.engines.base import Engine


class Searchable(ABC):
    """Mixin for models stored in a search index.

    Subclasses must implement :meth:`get_search_models_by_ids`; the other
    hooks have defaults:

      - ``searchable_as()``: the ``__searchable_as__`` class attribute, or
        the lower-cased class name
      - ``to_searchable_array()``: ``model_dump()`` for pydantic models,
        the instance ``__dict__`` otherwise
      - ``search_metadata()``: nothing
      - ``get_search_key()``: the attribute named by ``search_key_name``
    """

    __searchable_as__: ClassVar[str | None] = None
    search_key_name: ClassVar[str] = "id"
    per_page: ClassVar[int] = 15

    # ── Index hooks ──

    @classmethod
    def searchable_as(cls) -> str:
        """Name of the index (Solr core) holding this model type."""
        return cls.__searchable_as__ or cls.__name__.lower()

    def to_searchable_array(self) -> dict[str, Any]:
        """Flat field mapping indexed for this model. Empty skips indexing."""
        dump = getattr(self, "model_dump", None)
        if callable(dump):
            return dict(dump())
        return dict(vars(self))

    def search_metadata(self) -> dict[str, Any]:
        """Extra fields merged into the indexed document."""
        return {}

    def get_search_key(self) -> Any:
        """Unique key of this model in the index."""
        return getattr(self, self.get_search_key_name())

    @classmethod
    def get_search_key_name(cls) -> str:
        return cls.search_key_name

    # ── Retrieval hooks ──

    @classmethod
    @abstractmethod
    def get_search_models_by_ids(cls, builder: Builder, ids: Sequence[Any]) -> Iterable[Searchable]:
        """Fetch the models with the given keys.

        Order does not matter; the engine reorders by search rank.
        """

    @classmethod
    def query_search_models_by_ids(cls, builder: Builder, ids: Sequence[Any]) -> Iterable[Searchable]:
        """Lazy variant of :meth:`get_search_models_by_ids`.

        Override to stream models from the data source. The result may be
        a forward-only iterator.
        """
        return iter(cls.get_search_models_by_ids(builder, ids))

    # ── Search ──

    @classmethod
    def search_using(cls) -> Engine:
        """Engine this model is indexed and searched with."""
        from solrengine.engines.manager import get_manager

        return get_manager().engine()

    @classmethod
    def search(cls, query: str = "", callback: SearchCallback | None = None) -> Builder:
        """Start a search against this model's index."""
        from solrengine.builder import Builder

        return Builder(cls, query, callback)

    # ── Index maintenance ──

    def searchable(self) -> None:
        """Index this model."""
        self.search_using().update([self])

    def unsearchable(self) -> None:
        """Remove this model from the index."""
        self.search_using().delete([self])

    @classmethod
    def make_all_searchable(cls, models: Sequence[Searchable]) -> None:
        if models:
            cls.search_using().update(models)

    @classmethod
    def remove_all_from_search(cls, models: Sequence[Searchable]) -> None:
        if models:
            cls.search_using().delete(models)

    @classmethod
    def flush_search(cls) -> None:
        """Remove every model of this type from the index."""
        cls.search_using().flush(cls)
