"""Endpoint model — Connection parameters for a Solr server or core."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Endpoint(BaseModel):
    """Where and how to reach a Solr core.

    The base URL is ``{scheme}://{host}:{port}{path}{context}``; core-level
    requests append ``/{core}``.
    """

    scheme: str = Field(default="http", description="URL scheme: http or https")
    host: str = Field(default="127.0.0.1", description="Solr host name")
    port: int = Field(default=8983, description="Solr port")
    path: str = Field(default="/", description="Path prefix in front of the Solr context")
    context: str = Field(default="solr", description="Solr web application context")
    core: str | None = Field(default=None, description="Core/collection name; None = selected core")
    username: str | None = Field(default=None, description="Basic-auth username")
    password: str | None = Field(default=None, description="Basic-auth password")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    @property
    def base_url(self) -> str:
        """Server-level URL, e.g. ``http://127.0.0.1:8983/solr``."""
        parts = [p.strip("/") for p in (self.path, self.context) if p.strip("/")]
        root = f"{self.scheme}://{self.host}:{self.port}"
        return "/".join([root, *parts])

    def core_url(self, core: str) -> str:
        """URL of a core below this endpoint."""
        return f"{self.base_url}/{core}"

    @property
    def has_auth(self) -> bool:
        return bool(self.username and self.password)
