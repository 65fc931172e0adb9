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
"""BindingResolver: turns a registered binding into the one used by an invocation.

Resolution of an auto-resolve option happens in two passes:

1. ``${key}`` / ``${key:default}`` placeholders are expanded from
   :class:`~cosmosfly.core.config.Config` (environment first, then config).
2. ``{name}`` placeholders are bound from the invocation's binding data by the
   option's resolution policy. ``sql_query`` uses
   :class:`~cosmosfly.bindings.sql.CosmosDBSqlResolutionPolicy`, every other
   option :class:`~cosmosfly.bindings.policy.DefaultResolutionPolicy`.

The registered binding is never modified; :meth:`BindingResolver.resolve`
returns a new :class:`CosmosDB`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from cosmosfly.bindings.attribute import CosmosDB
from cosmosfly.bindings.options import BindingOption, binding_options
from cosmosfly.bindings.policy import DefaultResolutionPolicy, ResolutionPolicy
from cosmosfly.bindings.sql import SqlParameterCollection
from cosmosfly.config.properties.cosmosdb import CosmosDBProperties
from cosmosfly.core.config import Config
from cosmosfly.kernel.exceptions import BindingResolutionException, BindingValidationException

logger = logging.getLogger(__name__)

_REQUIRED = ("database_name", "collection_name")


class BindingResolver:
    """Resolve placeholders, connection strings and defaults for Cosmos DB bindings.

    Args:
        config: Application configuration; ``cosmosfly.cosmosdb.*`` is bound
            to :class:`CosmosDBProperties`.
        policies: Optional overrides keyed by the policy class an option
            declares (e.g. ``{CosmosDBSqlResolutionPolicy: MyPolicy()}``).
    """

    def __init__(
        self,
        config: Config,
        policies: Mapping[type, ResolutionPolicy] | None = None,
    ) -> None:
        self._config = config
        self._properties = config.bind(CosmosDBProperties)
        self._default_policy: ResolutionPolicy = DefaultResolutionPolicy()
        self._policies: dict[type, ResolutionPolicy] = {}
        for policy_type, policy in (policies or {}).items():
            if not isinstance(policy, ResolutionPolicy):
                raise TypeError(f"{type(policy).__name__} does not implement ResolutionPolicy")
            self._policies[policy_type] = policy

    @property
    def properties(self) -> CosmosDBProperties:
        return self._properties

    def resolve(self, binding: CosmosDB, binding_data: Mapping[str, Any] | None = None) -> CosmosDB:
        """Return a copy of *binding* with every auto-resolve option bound.

        Raises:
            BindingResolutionException: A placeholder has no value.
            BindingValidationException: The resolved database or collection
                name is empty.
        """
        data: Mapping[str, Any] = binding_data or {}
        values = binding.to_dict()
        deferred: list[tuple[BindingOption, str, ResolutionPolicy]] = []

        for name, option in binding_options(type(binding)).items():
            value = values[name]
            if not option.auto_resolve or not isinstance(value, str):
                continue
            template = self._expand_config(name, value)
            policy = self._policy_for(option)
            if option.resolution_policy is None:
                values[name] = policy.template_bind(template, data, binding)
            else:
                # Policies with their own state write it onto the resolved copy
                deferred.append((option, template, policy))

        resolved = type(binding)(**values)
        if binding._sql_query_parameters is not None:
            resolved._sql_query_parameters = SqlParameterCollection(list(binding._sql_query_parameters))
        for option, template, policy in deferred:
            option._initialize(resolved, policy.template_bind(template, data, resolved))

        self._validate(resolved)
        logger.debug("Resolved Cosmos DB binding %s -> %s", binding, resolved)
        return resolved

    def resolve_connection_string(self, binding: CosmosDB) -> str:
        """Look up the connection string for *binding*.

        The setting named by ``binding.connection_string_setting`` (or the
        configured default setting) is read from the environment, then from
        config; ``cosmosfly.cosmosdb.connection_string`` is the fallback.
        """
        setting = binding.connection_string_setting or self._properties.connection_string_setting
        value = os.environ.get(setting) or self._config.get(setting)
        if value:
            logger.debug("Using Cosmos DB connection string from setting '%s'", setting)
            return str(value)
        if self._properties.connection_string:
            logger.debug("Setting '%s' not found, using cosmosfly.cosmosdb.connection_string", setting)
            return self._properties.connection_string
        raise BindingResolutionException(
            f"Cosmos DB connection string setting '{setting}' is missing or empty",
            context={"setting": setting},
        )

    def preferred_location_list(self, binding: CosmosDB) -> list[str]:
        """Split ``preferred_locations`` into region names, falling back to the configured value."""
        raw = binding.preferred_locations or self._properties.preferred_locations or ""
        return [region.strip() for region in raw.split(",") if region.strip()]

    def effective_throughput(self, binding: CosmosDB) -> int | None:
        """Throughput for a collection created by *binding*; ``None`` means the service default."""
        if binding.collection_throughput:
            return binding.collection_throughput
        return self._properties.default_collection_throughput

    def _policy_for(self, option: BindingOption) -> ResolutionPolicy:
        if option.resolution_policy is None:
            return self._default_policy
        policy = self._policies.get(option.resolution_policy)
        if policy is None:
            policy = self._policies[option.resolution_policy] = option.resolution_policy()
        return policy

    def _expand_config(self, name: str, value: str) -> str:
        if "${" not in value:
            return value
        try:
            return self._config.resolve_placeholders(value)
        except ValueError as exc:
            raise BindingResolutionException(str(exc), context={"field": name, "value": value}) from exc

    @staticmethod
    def _validate(binding: CosmosDB) -> None:
        for name in _REQUIRED:
            if not getattr(binding, name):
                raise BindingValidationException(
                    f"Cosmos DB binding requires '{name}'",
                    context={"field": name},
                )
