"""Tests for CosmosDBProperties binding."""

import pytest

from cosmosfly.config.properties import CosmosDBProperties, LoggingProperties
from cosmosfly.core.config import Config


class TestCosmosDBProperties:
    def test_defaults(self):
        props = Config({}).bind(CosmosDBProperties)
        assert props.connection_string is None
        assert props.connection_string_setting == "CosmosDBConnection"
        assert props.preferred_locations is None
        assert props.default_collection_throughput is None

    def test_kebab_case_keys(self):
        config = Config(
            {
                "cosmosfly": {
                    "cosmosdb": {
                        "connection-string-setting": "OrdersCosmos",
                        "default-collection-throughput": 1000,
                    }
                }
            }
        )
        props = config.bind(CosmosDBProperties)
        assert props.connection_string_setting == "OrdersCosmos"
        assert props.default_collection_throughput == 1000

    def test_environment_overrides_section(self, monkeypatch):
        monkeypatch.setenv("COSMOSFLY_COSMOSDB_DEFAULT_COLLECTION_THROUGHPUT", "2000")
        monkeypatch.setenv("COSMOSFLY_COSMOSDB_PREFERRED_LOCATIONS", "North Europe")
        config = Config({"cosmosfly": {"cosmosdb": {"preferred_locations": "West US"}}})
        props = config.bind(CosmosDBProperties)
        assert props.default_collection_throughput == 2000
        assert props.preferred_locations == "North Europe"

    def test_config_placeholders_are_resolved(self, monkeypatch):
        monkeypatch.setenv("ORDERS_ACCOUNT", "AccountEndpoint=https://orders;")
        config = Config({"cosmosfly": {"cosmosdb": {"connection_string": "${ORDERS_ACCOUNT}"}}})
        assert config.bind(CosmosDBProperties).connection_string == "AccountEndpoint=https://orders;"

    def test_throughput_below_minimum_fails_fast(self):
        config = Config({"cosmosfly": {"cosmosdb": {"default_collection_throughput": 100}}})
        with pytest.raises(ValueError, match="CosmosDBProperties"):
            config.bind(CosmosDBProperties)


class TestLoggingProperties:
    def test_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.format == "console"
        assert props.level == {"root": "INFO"}

    def test_bound_values(self):
        config = Config({"cosmosfly": {"logging": {"format": "json", "level": {"root": "DEBUG"}}}})
        props = config.bind(LoggingProperties)
        assert props.format == "json"
        assert props.level == {"root": "DEBUG"}
