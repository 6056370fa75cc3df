"""Tests for the solrengine CLI."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from solrengine import cli
from solrengine.client.client import SolrClient
from solrengine.config.settings import Settings
from solrengine.engines import manager as manager_module
from solrengine.engines.solr import SolrEngine


@pytest.fixture
def requests(monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
    """Route the CLI's engine through a mock transport and record its requests."""
    recorded: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        recorded.append(request)
        if request.url.path.endswith("/select"):
            return httpx.Response(200, json={"response": {"numFound": 1, "docs": [{"id": "1"}]}})
        if request.url.path.endswith("/admin/ping"):
            return httpx.Response(200, json={"status": "OK"})
        if request.url.params.get("core") == "missing":
            return httpx.Response(400, json={"error": {"msg": "Cannot unload non-existent core [missing]"}})
        return httpx.Response(200, json={"responseHeader": {"status": 0, "QTime": 5}})

    def create_engine(settings: Settings) -> SolrEngine:
        client = SolrClient(settings.solr.endpoint, transport=httpx.MockTransport(handler))
        return SolrEngine(client, settings.solr)

    monkeypatch.setattr(manager_module, "create_solr_engine", create_engine)
    return recorded


class TestCli:
    def test_create_index(self, requests, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["create-index", "posts", "--config-set", "posts_conf"]) == 0

        params = requests[0].url.params
        assert (params["action"], params["name"], params["configSet"]) == ("CREATE", "posts", "posts_conf")
        assert json.loads(capsys.readouterr().out)["responseHeader"]["QTime"] == 5

    def test_delete_index(self, requests) -> None:
        assert cli.main(["delete-index", "posts"]) == 0
        assert requests[0].url.params["action"] == "UNLOAD"

    def test_select(self, requests, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["select", "posts", "title:solr", "--rows", "3"]) == 0

        params = requests[0].url.params
        assert requests[0].url.path == "/solr/posts/select"
        assert (params["q"], params["rows"]) == ("title:solr", "3")
        assert json.loads(capsys.readouterr().out) == {"num_found": 1, "documents": [{"id": "1"}]}

    def test_select_uses_configured_limit(self, requests, tmp_path: Path) -> None:
        config = tmp_path / "solrengine.yaml"
        config.write_text("solr:\n  select:\n    limit: 7\n")

        assert cli.main(["--config", str(config), "select", "posts"]) == 0
        assert requests[0].url.params["rows"] == "7"

    def test_ping(self, requests, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["ping", "posts"]) == 0
        assert requests[0].url.path == "/solr/posts/admin/ping"
        assert json.loads(capsys.readouterr().out) == {"status": "OK"}

    def test_solr_error_exits_with_message(self, requests, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["delete-index", "missing"]) == 1
        assert "non-existent core" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--config", str(tmp_path / "nope.yaml"), "ping", "posts"]) == 1
        assert "Config file not found" in capsys.readouterr().err
