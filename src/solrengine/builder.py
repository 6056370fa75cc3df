"""Search builder — Fluent description of a model search.

Usage::

    posts = (
        Post.search("title:solr")
        .where("published", True)
        .where_in("category_id", [2, 3])
        .take(20)
        .get()
    )
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from solrengine.models.page import Page

if TYPE_CHECKING:
    from solrengine.engines.base import Engine
    from solrengine.models.searchable import Searchable

SearchCallback = Callable[[Any, str, dict[str, Any]], Any]
"""``callback(client, query, options)`` replacing the engine's own search."""


class Builder:
    """A search against one searchable model type.

    Args:
        model: The searchable model class.
        query: Raw query string, used when no constraints are set.
        callback: Optional callable that runs the search itself instead
            of the engine; it receives the engine's client, the raw query
            and the computed options.
        engine: Engine to run against. Defaults to ``model.search_using()``.
    """

    def __init__(
        self,
        model: type[Searchable],
        query: str = "",
        callback: SearchCallback | None = None,
        engine: Engine | None = None,
    ) -> None:
        self.model = model
        self.query = query
        self.callback = callback
        self.wheres: dict[str, Any] = {}
        self.where_ins: dict[str, list[Any]] = {}
        self.where_not_ins: dict[str, list[Any]] = {}
        self.orders: list[tuple[str, str]] = []
        self.limit: int | None = None
        self._engine = engine

    # ── Constraints ──

    def where(self, field: str, value: Any) -> Builder:
        self.wheres[field] = value
        return self

    def where_in(self, field: str, values: Iterable[Any]) -> Builder:
        self.where_ins[field] = list(values)
        return self

    def where_not_in(self, field: str, values: Iterable[Any]) -> Builder:
        self.where_not_ins[field] = list(values)
        return self

    def order_by(self, field: str, direction: str = "asc") -> Builder:
        self.orders.append((field, direction.lower()))
        return self

    def order_by_desc(self, field: str) -> Builder:
        return self.order_by(field, "desc")

    def take(self, limit: int) -> Builder:
        self.limit = limit
        return self

    # ── Execution ──

    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self.model.search_using()
        return self._engine

    def raw(self) -> Any:
        """Raw engine results."""
        return self.engine().search(self)

    def keys(self) -> list[Any]:
        """Identifiers of the matching models."""
        return self.engine().keys(self)

    def get(self) -> list[Searchable]:
        """Matching models, in result order."""
        return self.engine().get(self)

    def first(self) -> Searchable | None:
        models = self.get()
        return models[0] if models else None

    def cursor(self) -> Iterator[Searchable]:
        """Matching models, fetched lazily."""
        return self.engine().cursor(self)

    def paginate_raw(self, per_page: int | None = None, page: int = 1) -> Any:
        """Raw engine results for one page."""
        per_page = per_page or self.model.per_page
        return self.engine().paginate(self, per_page, page)

    def paginate(self, per_page: int | None = None, page: int = 1) -> Page:
        """One page of matching models."""
        engine = self.engine()
        per_page = per_page or self.model.per_page
        results = engine.paginate(self, per_page, page)
        return Page(
            items=engine.map(self, results, self.model),
            total=engine.get_total_count(results),
            per_page=per_page,
            current_page=page,
        )
