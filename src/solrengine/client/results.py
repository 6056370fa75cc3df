"""Solr response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SolrResult(BaseModel):
    """Fields shared by every Solr JSON response."""

    status: int = Field(default=0, description="responseHeader.status")
    query_time: int = Field(default=0, description="responseHeader.QTime in ms")
    data: dict[str, Any] = Field(default_factory=dict, description="Full decoded response body", repr=False)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> SolrResult:
        header = data.get("responseHeader", {})
        return cls(status=header.get("status", 0), query_time=header.get("QTime", 0), data=data)


class UpdateResult(SolrResult):
    """Result of an ``/update`` request."""


class CoreAdminResult(SolrResult):
    """Result of a core-admin request."""


class SelectResult(SolrResult):
    """Result of a ``/select`` request.

    ``documents`` keeps Solr's order; ``num_found`` is the total number of
    matches on the server, not ``len(documents)``.
    """

    documents: list[dict[str, Any]] = Field(default_factory=list, description="Returned documents, in rank order")
    num_found: int = Field(default=0, description="Total matching documents")
    start: int = Field(default=0, description="Offset of the first returned document")
    max_score: float | None = Field(default=None, description="Highest relevance score")

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> SelectResult:
        header = data.get("responseHeader", {})
        response = data.get("response", {})
        return cls(
            status=header.get("status", 0),
            query_time=header.get("QTime", 0),
            data=data,
            documents=list(response.get("docs", [])),
            num_found=response.get("numFound", 0),
            start=response.get("start", 0),
            max_score=response.get("maxScore"),
        )

    def __len__(self) -> int:
        return len(self.documents)
