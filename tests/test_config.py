"""
Tests for configuration defaults and environment overrides.
"""
import importlib

import pytest

import voice_menu.config as config_mod


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module after env changes, restoring it afterwards."""
    yield lambda: importlib.reload(config_mod)
    monkeypatch.undo()
    importlib.reload(config_mod)


class TestMatchingDefaults:

    def test_thresholds(self):
        assert config_mod.DEFAULT_MATCH_THRESHOLD == 0.75
        assert config_mod.UNCERTAIN_MATCH_THRESHOLD == 0.85
        assert config_mod.MAX_NGRAM_SIZE == 3


class TestEnvironmentOverrides:

    def test_defaults(self, monkeypatch, reload_config):
        monkeypatch.delenv("ORDER_ITEM_MATCH_THRESHOLD", raising=False)
        monkeypatch.delenv("ASR_HINT_LIMIT", raising=False)
        monkeypatch.delenv("PHONETIC_CATALOG_PATH", raising=False)
        config = reload_config()

        assert config.ORDER_ITEM_MATCH_THRESHOLD == 0.7
        assert config.ASR_HINT_LIMIT == 100
        assert config.get_catalog_path() == config.DEFAULT_CATALOG_PATH
        assert config.DEFAULT_CATALOG_PATH.exists()

    def test_overrides(self, monkeypatch, reload_config, tmp_path):
        monkeypatch.setenv("ORDER_ITEM_MATCH_THRESHOLD", "0.8")
        monkeypatch.setenv("ASR_HINT_LIMIT", "50")
        monkeypatch.setenv("PHONETIC_CATALOG_PATH", str(tmp_path / "catalog.json"))
        config = reload_config()

        assert config.ORDER_ITEM_MATCH_THRESHOLD == 0.8
        assert config.ASR_HINT_LIMIT == 50
        assert config.get_catalog_path() == tmp_path / "catalog.json"

    def test_blank_catalog_path_uses_packaged_catalog(self, monkeypatch, reload_config):
        monkeypatch.setenv("PHONETIC_CATALOG_PATH", "")
        config = reload_config()

        assert config.get_catalog_path() == config.DEFAULT_CATALOG_PATH
