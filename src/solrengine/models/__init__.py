"""Domain-facing models: the Searchable mixin and pagination results."""

from solrengine.models.page import Page
from solrengine.models.searchable import Searchable

__all__ = ["Page", "Searchable"]
