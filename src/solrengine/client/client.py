"""Solr HTTP client — Synchronous access to Solr's update, select and admin APIs.

Usage::

    with SolrClient(Endpoint(host="localhost")) as client:
        client.set_core("posts")
        query = client.create_select().set_query("title:solr").set_rows(5)
        result = client.select(query)
        print(result.num_found, [doc["id"] for doc in result.documents])
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from solrengine.client.endpoint import Endpoint
from solrengine.client.exceptions import CoreNotSelectedError, SolrConnectionError, SolrResponseError
from solrengine.client.queries import CoreAdminQuery, SelectQuery, UpdateQuery
from solrengine.client.results import CoreAdminResult, SelectResult, UpdateResult

logger = logging.getLogger(__name__)


class SolrClient:
    """Client for a Solr server.

    Every request goes to an :class:`Endpoint`: the one passed to the call,
    or the client's default endpoint. Core-level requests target the
    endpoint's ``core`` when it has one, otherwise the core selected with
    :meth:`set_core`.

    Args:
        endpoint: Default endpoint. Defaults to ``Endpoint()``.
        transport: Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.Client``.
    """

    def __init__(
        self,
        endpoint: Endpoint | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self.endpoint = endpoint or Endpoint()
        self._core: str | None = self.endpoint.core
        self._http = httpx.Client(transport=transport, **httpx_kwargs)

    def __enter__(self) -> SolrClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    # ── Core selection ──

    def set_core(self, target: Any) -> SolrClient:
        """Select the core for subsequent core-level requests.

        Args:
            target: A core name, or a searchable model (instance or class)
                whose ``searchable_as()`` names the core.
        """
        self._core = target if isinstance(target, str) else target.searchable_as()
        return self

    def get_core(self) -> str | None:
        return self._core

    # ── Query factories ──

    def create_update(self) -> UpdateQuery:
        return UpdateQuery()

    def create_select(self) -> SelectQuery:
        return SelectQuery()

    def create_core_admin(self) -> CoreAdminQuery:
        return CoreAdminQuery()

    # ── Execution ──

    def update(self, query: UpdateQuery, endpoint: Endpoint | None = None) -> UpdateResult:
        """Send an update request to the core's ``/update`` handler."""
        endpoint = endpoint or self.endpoint
        data = self._request(
            "POST",
            f"{self._core_url(endpoint)}/update",
            endpoint,
            params={"wt": "json"},
            content=query.build_body(),
            headers={"Content-Type": "application/json"},
        )
        return UpdateResult.from_response(data)

    def select(self, query: SelectQuery, endpoint: Endpoint | None = None) -> SelectResult:
        """Run a select request against the core's ``/select`` handler."""
        endpoint = endpoint or self.endpoint
        data = self._request("GET", f"{self._core_url(endpoint)}/select", endpoint, params=query.get_params())
        return SelectResult.from_response(data)

    def core_admin(self, query: CoreAdminQuery, endpoint: Endpoint | None = None) -> CoreAdminResult:
        """Send a core-admin request to the server's ``/admin/cores`` handler."""
        endpoint = endpoint or self.endpoint
        params = query.get_params()
        logger.info("Solr core admin %s for core '%s'", params.get("action"), params.get("name") or params.get("core"))
        data = self._request("GET", f"{endpoint.base_url}/admin/cores", endpoint, params=params)
        return CoreAdminResult.from_response(data)

    def ping(self, endpoint: Endpoint | None = None) -> dict[str, Any]:
        """Ping the core's ``/admin/ping`` handler and return the decoded body."""
        endpoint = endpoint or self.endpoint
        return self._request("GET", f"{self._core_url(endpoint)}/admin/ping", endpoint, params={"wt": "json"})

    # ── Helpers ──

    def _core_url(self, endpoint: Endpoint) -> str:
        core = endpoint.core or self._core
        if not core:
            raise CoreNotSelectedError("No Solr core selected. Call set_core() or configure the endpoint's core.")
        return endpoint.core_url(core)

    def _request(self, method: str, url: str, endpoint: Endpoint, **kwargs: Any) -> dict[str, Any]:
        auth = httpx.BasicAuth(endpoint.username, endpoint.password) if endpoint.has_auth else None
        logger.debug("Solr %s %s", method, url)
        try:
            resp = self._http.request(method, url, auth=auth, timeout=endpoint.timeout, **kwargs)
        except httpx.TransportError as e:
            raise SolrConnectionError(f"Failed to reach Solr at {url}: {e}") from e

        if resp.is_error:
            raise SolrResponseError(resp.status_code, _error_message(resp))
        return dict(resp.json())


def _error_message(resp: httpx.Response) -> str:
    """Extract Solr's ``error.msg`` from an error response, if it has one."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("msg"):
        return str(error["msg"])
    return resp.text or resp.reason_phrase
