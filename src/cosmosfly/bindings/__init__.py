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
"""Declarative Cosmos DB bindings for function parameters."""

from cosmosfly.bindings.attribute import CosmosDB
from cosmosfly.bindings.options import (
    BindingOption,
    auto_resolve_fields,
    binding_options,
    connection_string_fields,
)
from cosmosfly.bindings.policy import DefaultResolutionPolicy, ResolutionPolicy
from cosmosfly.bindings.registration import RETURN_VALUE, cosmos_db, get_bindings, is_bound
from cosmosfly.bindings.resolver import BindingResolver
from cosmosfly.bindings.sql import CosmosDBSqlResolutionPolicy, SqlParameter, SqlParameterCollection

__all__ = [
    "RETURN_VALUE",
    "BindingOption",
    "BindingResolver",
    "CosmosDB",
    "CosmosDBSqlResolutionPolicy",
    "DefaultResolutionPolicy",
    "ResolutionPolicy",
    "SqlParameter",
    "SqlParameterCollection",
    "auto_resolve_fields",
    "binding_options",
    "connection_string_fields",
    "cosmos_db",
    "get_bindings",
    "is_bound",
]
