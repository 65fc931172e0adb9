# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the CosmosDB binding configuration record."""

import pytest

from cosmosfly.bindings.attribute import CosmosDB

DEFAULTS = {
    "database_name": None,
    "collection_name": None,
    "create_if_not_exists": False,
    "connection_string_setting": None,
    "id": None,
    "partition_key": None,
    "collection_throughput": 0,
    "sql_query": None,
    "use_multiple_write_locations": False,
    "use_default_json_serialization": False,
    "preferred_locations": None,
}


class TestConstruction:
    def test_empty_constructor_uses_defaults(self):
        binding = CosmosDB()
        assert binding.to_dict() == DEFAULTS
        assert binding._sql_query_parameters is None

    def test_identity_constructor(self):
        binding = CosmosDB("SalesDB", "Orders")
        assert binding.database_name == "SalesDB"
        assert binding.collection_name == "Orders"
        expected = dict(DEFAULTS, database_name="SalesDB", collection_name="Orders")
        assert binding.to_dict() == expected

    @pytest.mark.parametrize(
        ("database", "collection"),
        [("db", "coll"), ("{tenant}", "{tenant}-events"), ("", ""), ("${DB_NAME}", "items")],
    )
    def test_identity_values_kept_verbatim(self, database, collection):
        binding = CosmosDB(database, collection)
        assert binding.database_name == database
        assert binding.collection_name == collection

    def test_keyword_options(self):
        binding = CosmosDB(
            "SalesDB",
            "Orders",
            create_if_not_exists=True,
            collection_throughput=400,
            partition_key="/region",
        )
        expected = dict(
            DEFAULTS,
            database_name="SalesDB",
            collection_name="Orders",
            create_if_not_exists=True,
            collection_throughput=400,
            partition_key="/region",
        )
        assert binding.to_dict() == expected

    def test_no_validation_at_construction(self):
        binding = CosmosDB(collection_throughput=-5, sql_query="not sql at all")
        assert binding.collection_throughput == -5
        assert binding.sql_query == "not sql at all"


class TestIdentityIsReadOnly:
    def test_database_name_cannot_be_reassigned(self):
        binding = CosmosDB("SalesDB", "Orders")
        with pytest.raises(AttributeError, match="database_name"):
            binding.database_name = "Other"
        assert binding.database_name == "SalesDB"

    def test_collection_name_cannot_be_assigned_after_empty_construction(self):
        binding = CosmosDB()
        with pytest.raises(AttributeError, match="collection_name"):
            binding.collection_name = "Orders"


class TestSettableOptions:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("create_if_not_exists", True),
            ("connection_string_setting", "MyCosmos"),
            ("id", "{order_id}"),
            ("partition_key", "{region}"),
            ("collection_throughput", 1000),
            ("sql_query", "SELECT * FROM c WHERE c.x = {x}"),
            ("use_multiple_write_locations", True),
            ("use_default_json_serialization", True),
            ("preferred_locations", "East US,North Europe"),
        ],
    )
    def test_setting_one_option_leaves_others_untouched(self, name, value):
        binding = CosmosDB("SalesDB", "Orders")
        setattr(binding, name, value)
        expected = dict(DEFAULTS, database_name="SalesDB", collection_name="Orders")
        expected[name] = value
        assert binding.to_dict() == expected

    def test_sql_query_does_not_require_parameters(self):
        binding = CosmosDB("db", "coll")
        binding.sql_query = "SELECT * FROM c"
        assert binding._sql_query_parameters is None

    def test_instances_do_not_share_values(self):
        first = CosmosDB("db", "a")
        second = CosmosDB("db", "b")
        first.partition_key = "/pk"
        assert second.partition_key is None


class TestRoundTrip:
    def test_copy_through_properties_is_equal(self):
        original = CosmosDB(
            "SalesDB",
            "Orders",
            create_if_not_exists=True,
            connection_string_setting="Cosmos",
            id="{id}",
            partition_key="/region",
            collection_throughput=400,
            sql_query="SELECT * FROM c",
            use_multiple_write_locations=True,
            use_default_json_serialization=True,
            preferred_locations="West US",
        )
        copy = CosmosDB(original.database_name, original.collection_name)
        for name, value in original.to_dict().items():
            if name not in ("database_name", "collection_name"):
                setattr(copy, name, value)
        assert copy == original
        assert copy is not original

    def test_copy_through_keywords_is_equal(self):
        original = CosmosDB("db", "coll", partition_key="/pk", collection_throughput=800)
        assert CosmosDB(**original.to_dict()) == original

    def test_differing_option_is_not_equal(self):
        assert CosmosDB("db", "coll") != CosmosDB("db", "coll", id="1")

    def test_not_equal_to_other_types(self):
        assert CosmosDB("db", "coll") != {"database_name": "db", "collection_name": "coll"}

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(CosmosDB("db", "coll"))


class TestRepr:
    def test_repr_lists_identity_and_changed_options(self):
        binding = CosmosDB("SalesDB", "Orders", partition_key="/region")
        assert repr(binding) == "CosmosDB('SalesDB', 'Orders', partition_key='/region')"

    def test_repr_of_empty_binding(self):
        assert repr(CosmosDB()) == "CosmosDB(None, None)"
