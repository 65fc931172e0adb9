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
"""``CosmosDB``: binding configuration for an Azure Cosmos DB collection.

A :class:`CosmosDB` instance is pure configuration attached to a function
parameter or return value (see :func:`cosmosfly.bindings.registration.cosmos_db`).
It performs no I/O and no validation; a resolver reads it on each invocation
to expand placeholders and build a client.

The bound parameter is typically one of:

- a single document (input binding with ``id``)
- a list of documents (input binding with ``sql_query``)
- a document or list of documents returned or collected (output binding)

Usage::

    orders = CosmosDB(
        "SalesDB",
        "Orders",
        create_if_not_exists=True,
        collection_throughput=400,
        partition_key="/region",
    )
"""

from __future__ import annotations

from typing import Any

from cosmosfly.bindings.options import BindingOption, binding_options
from cosmosfly.bindings.sql import CosmosDBSqlResolutionPolicy, SqlParameterCollection


class CosmosDB:
    """Binding to an Azure Cosmos DB collection.

    ``database_name`` and ``collection_name`` are fixed at construction and
    read-only afterwards. Every other option is a plain attribute that may be
    set freely. Once registered, a binding is shared by concurrent
    invocations; mutating it during live use is undefined.
    """

    database_name = BindingOption(auto_resolve=True, read_only=True)
    """The database the parameter applies to. May include binding parameters."""

    collection_name = BindingOption(auto_resolve=True, read_only=True)
    """The collection the parameter applies to. May include binding parameters."""

    create_if_not_exists = BindingOption(False)
    """Output bindings only: create the database and collection when missing."""

    connection_string_setting = BindingOption(connection_string=True)
    """App setting holding the connection string, when different from the default setting."""

    id = BindingOption(auto_resolve=True)
    """Id of the document to retrieve. May include binding parameters."""

    partition_key = BindingOption(auto_resolve=True)
    """Partition key path for a created collection (output) or the lookup value (input)."""

    collection_throughput = BindingOption(0)
    """Throughput of a created collection, used with ``create_if_not_exists``."""

    sql_query = BindingOption(resolution_policy=CosmosDBSqlResolutionPolicy)
    """Query run by list input bindings. ``{name}`` tokens become SQL parameters."""

    use_multiple_write_locations = BindingOption(False)
    """Enable for multi-master accounts."""

    use_default_json_serialization = BindingOption(False)
    """Serialize documents with the process-wide default JSON settings.

    The defaults must be registered during start-up with
    :func:`cosmosfly.bindings.serialization.set_default_json_settings`.
    """

    preferred_locations = BindingOption(auto_resolve=True)
    """Comma-separated preferred regions, e.g. ``"East US,South Central US,North Europe"``."""

    def __init__(
        self,
        database_name: str | None = None,
        collection_name: str | None = None,
        *,
        create_if_not_exists: bool = False,
        connection_string_setting: str | None = None,
        id: str | None = None,
        partition_key: str | None = None,
        collection_throughput: int = 0,
        sql_query: str | None = None,
        use_multiple_write_locations: bool = False,
        use_default_json_serialization: bool = False,
        preferred_locations: str | None = None,
    ) -> None:
        type(self).database_name._initialize(self, database_name)
        type(self).collection_name._initialize(self, collection_name)
        self.create_if_not_exists = create_if_not_exists
        self.connection_string_setting = connection_string_setting
        self.id = id
        self.partition_key = partition_key
        self.collection_throughput = collection_throughput
        self.sql_query = sql_query
        self.use_multiple_write_locations = use_multiple_write_locations
        self.use_default_json_serialization = use_default_json_serialization
        self.preferred_locations = preferred_locations
        # Written only by the SQL resolution policy
        self._sql_query_parameters: SqlParameterCollection | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return every public option keyed by attribute name."""
        return {name: getattr(self, name) for name in binding_options(type(self))}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CosmosDB):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        options = binding_options(type(self))
        parts = [repr(self.database_name), repr(self.collection_name)]
        for name, option in options.items():
            if option.read_only:
                continue
            value = getattr(self, name)
            if value != option.default:
                parts.append(f"{name}={value!r}")
        return f"CosmosDB({', '.join(parts)})"
