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
"""SQL query parameters and the Cosmos DB SQL resolution policy.

Query text is never built by string interpolation: each ``{name}`` token in
``sql_query`` becomes an ``@name`` parameter reference and the bound value is
carried separately, keeping its Python type::

    SELECT * FROM c WHERE c.region = {region} AND c.total > {min_total}

resolves to::

    SELECT * FROM c WHERE c.region = @region AND c.total > @min_total

with parameters ``[{"name": "@region", "value": "west"}, {"name": "@min_total", "value": 100}]``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cosmosfly.bindings.policy import TOKEN_RE, lookup_binding_value
from cosmosfly.kernel.exceptions import BindingResolutionException

if TYPE_CHECKING:
    from cosmosfly.bindings.attribute import CosmosDB


@dataclass(frozen=True)
class SqlParameter:
    """A named query parameter; ``name`` includes the leading ``@``."""

    name: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


class SqlParameterCollection:
    """Ordered collection of :class:`SqlParameter` with unique names."""

    def __init__(self, parameters: list[SqlParameter] | None = None) -> None:
        self._parameters: dict[str, SqlParameter] = {}
        for parameter in parameters or []:
            self.add(parameter)

    def add(self, parameter: SqlParameter) -> None:
        """Add *parameter*; a parameter with the same name is replaced."""
        self._parameters[parameter.name] = parameter

    def get(self, name: str) -> SqlParameter | None:
        return self._parameters.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[SqlParameter]:
        return iter(self._parameters.values())

    def __len__(self) -> int:
        return len(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqlParameterCollection):
            return NotImplemented
        return list(self) == list(other)

    def to_list(self) -> list[dict[str, Any]]:
        """Parameters in the shape ``query_items(parameters=...)`` accepts."""
        return [parameter.to_dict() for parameter in self]

    def __repr__(self) -> str:
        return f"SqlParameterCollection({list(self)!r})"


def parameter_name(path: str) -> str:
    """``order.customer_id`` -> ``@order_customer_id``."""
    return "@" + path.replace(".", "_")


class CosmosDBSqlResolutionPolicy:
    """Rewrite ``{name}`` tokens as ``@name`` and record their values.

    Parameters are appended to the binding's internal
    ``_sql_query_parameters`` collection, created on first use. A token used
    more than once yields a single parameter. Two different tokens that
    encode to the same ``@name`` (``{a.b}`` and ``{a_b}``) are rejected.
    """

    def template_bind(self, template: str, binding_data: Mapping[str, Any], binding: CosmosDB) -> str:
        parameters = binding._sql_query_parameters
        if parameters is None:
            parameters = binding._sql_query_parameters = SqlParameterCollection()
        # parameter name -> token path it was bound from
        sources: dict[str, str] = {}

        def _replace(match: Any) -> str:
            path = match.group(1)
            name = parameter_name(path)
            if name in sources:
                if sources[name] != path:
                    raise BindingResolutionException(
                        f"Query tokens '{{{sources[name]}}}' and '{{{path}}}' both map to parameter '{name}'",
                        context={"token": path, "conflicts_with": sources[name], "parameter": name},
                    )
                return name
            sources[name] = path
            parameters.add(SqlParameter(name, lookup_binding_value(binding_data, path)))
            return name

        return TOKEN_RE.sub(_replace, template)
