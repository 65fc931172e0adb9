"""Tests for configuration loading, env overrides and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from cosmosfly.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "orders", "port": 8080}})
        assert config.get("app.name") == "orders"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("cosmosfly:\n  cosmosdb:\n    preferred_locations: West US\n")
        config = Config.from_file(config_file)
        assert config.get("cosmosfly.cosmosdb.preferred_locations") == "West US"
        assert str(config_file) in config.loaded_sources

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "settings.toml"
        config_file.write_text('[cosmosfly.cosmosdb]\nconnection_string_setting = "TomlCosmos"\n')
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("cosmosfly.cosmosdb.connection_string_setting") == "TomlCosmos"

    def test_library_defaults(self):
        config = Config.from_file("does-not-exist.yaml")
        assert config.get("cosmosfly.cosmosdb.connection_string_setting") == "CosmosDBConnection"
        assert config.get("cosmosfly.logging.format") == "console"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("COSMOSFLY_COSMOSDB_PREFERRED_LOCATIONS", "North Europe")
        config = Config({"cosmosfly": {"cosmosdb": {"preferred_locations": "West US"}}})
        assert config.get("cosmosfly.cosmosdb.preferred_locations") == "North Europe"

    def test_to_dict_is_a_copy(self):
        config = Config({"a": 1})
        config.to_dict()["a"] = 2
        assert config.get("a") == 1


class TestFromSources:
    def test_merge_order(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "cosmosfly.yaml").write_text("db:\n  name: from-config-dir\n  region: west\n")
        (tmp_path / "cosmosfly.yaml").write_text("db:\n  name: from-root\n")
        config = Config.from_sources(tmp_path, load_defaults=False)
        assert config.get("db.name") == "from-root"
        assert config.get("db.region") == "west"

    def test_profiles_win_in_order(self, tmp_path: Path):
        (tmp_path / "cosmosfly.yaml").write_text("db:\n  name: base\n")
        (tmp_path / "cosmosfly-dev.yaml").write_text("db:\n  name: dev\n")
        (tmp_path / "cosmosfly-local.yaml").write_text("db:\n  name: local\n")
        config = Config.from_sources(tmp_path, active_profiles=["dev", "local"], load_defaults=False)
        assert config.get("db.name") == "local"
        assert len(config.loaded_sources) == 3

    def test_missing_profile_is_skipped(self, tmp_path: Path):
        (tmp_path / "cosmosfly.yaml").write_text("db:\n  name: base\n")
        config = Config.from_sources(tmp_path, active_profiles=["nope"], load_defaults=False)
        assert config.get("db.name") == "base"


class TestPlaceholderResolution:
    def test_resolve_env_var(self, monkeypatch):
        monkeypatch.setenv("SALES_DB", "SalesDB")
        assert Config({"db": "${SALES_DB}"}).get("db") == "SalesDB"

    def test_resolve_config_reference(self):
        config = Config({"tenant": "acme", "db": "${tenant}-orders"})
        assert config.get("db") == "acme-orders"

    def test_resolve_with_default(self):
        assert Config({}).resolve_placeholders("${MISSING_VAR_X:fallback}") == "fallback"

    def test_unresolvable(self):
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            Config({}).resolve_placeholders("${missing.key}")

    def test_circular_reference(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="recursion"):
            config.get("a")


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="orders.store")
        @dataclass
        class StoreConfig:
            database: str = "db"
            throughput: int = 400
            shared: bool = False

        config = Config({"orders": {"store": {"database": "SalesDB", "throughput": "800", "shared": "yes"}}})
        store = config.bind(StoreConfig)
        assert store.database == "SalesDB"
        assert store.throughput == 800
        assert store.shared is True

    def test_bind_applies_env_overrides(self, monkeypatch):
        @config_properties(prefix="cosmosfly.store")
        @dataclass
        class StoreConfig:
            throughput: int = 400
            shared: bool = False

        monkeypatch.setenv("COSMOSFLY_STORE_THROUGHPUT", "1200")
        monkeypatch.setenv("COSMOSFLY_STORE_SHARED", "true")
        store = Config({"cosmosfly": {"store": {"throughput": 800}}}).bind(StoreConfig)
        assert store.throughput == 1200
        assert store.shared is True

    def test_bind_undecorated_class(self):
        @dataclass
        class Plain:
            value: int = 0

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
