"""Solr client exceptions."""


class SolrError(Exception):
    """Base exception for Solr client errors."""


class SolrConnectionError(SolrError):
    """Raised when the client cannot reach the Solr server."""


class SolrResponseError(SolrError):
    """Raised when Solr answers with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Solr returned HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class CoreNotSelectedError(SolrError):
    """Raised when a core-level request has no core to target."""
