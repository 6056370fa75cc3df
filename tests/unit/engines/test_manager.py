"""Tests for the engine manager."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from solrengine.client.client import SolrClient
from solrengine.config.settings import Settings
from solrengine.engines.base import Engine
from solrengine.engines.manager import EngineManager, EngineNotFoundError, get_manager, set_manager
from solrengine.engines.solr import SolrEngine


@pytest.fixture
def manager(settings: Settings) -> EngineManager:
    return EngineManager(settings)


class TestEngineManager:
    def test_solr_driver_is_registered(self, manager: EngineManager) -> None:
        assert manager.registered_drivers == ["solr"]

    def test_default_engine_is_solr(self, manager: EngineManager) -> None:
        engine = manager.engine()
        assert isinstance(engine, SolrEngine)
        assert isinstance(engine.client, SolrClient)
        assert engine.settings is manager.settings.solr

    def test_engine_is_built_once(self, manager: EngineManager) -> None:
        assert manager.engine("solr") is manager.engine("solr")

    def test_forget_engines(self, manager: EngineManager) -> None:
        first = manager.engine()
        manager.forget_engines()
        assert manager.engine() is not first

    def test_extend_registers_driver(self, manager: EngineManager) -> None:
        custom = MagicMock(spec=Engine)
        factory = MagicMock(return_value=custom)

        manager.extend("custom", factory)

        assert manager.engine("custom") is custom
        factory.assert_called_once_with(manager.settings)

    def test_extend_replaces_built_engine(self, manager: EngineManager) -> None:
        manager.engine("solr")
        replacement = MagicMock(spec=Engine)

        manager.extend("solr", lambda settings: replacement)

        assert manager.engine() is replacement

    def test_default_driver_from_settings(self) -> None:
        custom = MagicMock(spec=Engine)
        manager = EngineManager(Settings(_env_file=None, driver="custom"))  # type: ignore[call-arg]
        manager.extend("custom", lambda settings: custom)

        assert manager.engine() is custom

    def test_unknown_driver_raises(self, manager: EngineManager) -> None:
        with pytest.raises(EngineNotFoundError, match="Available drivers"):
            manager.engine("elastic")


class TestGlobalManager:
    def test_set_and_get_manager(self, manager: EngineManager) -> None:
        previous = get_manager()
        try:
            set_manager(manager)
            assert get_manager() is manager
        finally:
            set_manager(previous)

    def test_get_manager_creates_default(self) -> None:
        previous = get_manager()
        try:
            set_manager(None)
            assert isinstance(get_manager(), EngineManager)
        finally:
            set_manager(previous)
