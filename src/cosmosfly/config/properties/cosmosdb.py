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
"""Cosmos DB binding configuration properties."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cosmosfly.core.config import config_properties


@config_properties(prefix="cosmosfly.cosmosdb")
class CosmosDBProperties(BaseModel):
    """Defaults applied to every Cosmos DB binding (cosmosfly.cosmosdb.*).

    ``connection_string_setting`` names the app setting consulted when a
    binding does not set its own; ``connection_string`` is the literal
    fallback used when that setting is absent.
    """

    connection_string: str | None = None
    connection_string_setting: str = "CosmosDBConnection"
    preferred_locations: str | None = None
    default_collection_throughput: int | None = Field(default=None, ge=400)
