"""Integration test fixtures — a standalone Solr server.

Expects Solr to be running locally, for example:
    docker run -d -p 8983:8983 solr:9
"""

from __future__ import annotations

import time

import httpx
import pytest

SOLR_URL = "http://localhost:8983/solr"


def _wait_for_service(url: str, timeout: float = 60.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, params={"action": "STATUS", "wt": "json"}, timeout=10)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def solr_ready() -> str:
    """Ensure Solr is running."""
    if not _wait_for_service(f"{SOLR_URL}/admin/cores"):
        pytest.skip("Solr not available at localhost:8983")
    return SOLR_URL
