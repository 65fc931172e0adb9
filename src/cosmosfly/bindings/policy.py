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
"""Resolution policies for ``{name}`` placeholders in binding options.

Placeholders name values in the per-invocation *binding data* (trigger
payload fields, route parameters, function arguments). Dotted paths such as
``{order.customer_id}`` walk into mappings and object attributes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from cosmosfly.kernel.exceptions import BindingResolutionException

if TYPE_CHECKING:
    from cosmosfly.bindings.attribute import CosmosDB

TOKEN_RE = re.compile(r"\{([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\}")


@runtime_checkable
class ResolutionPolicy(Protocol):
    """Turns a placeholder-bearing template into its final value."""

    def template_bind(self, template: str, binding_data: Mapping[str, Any], binding: CosmosDB) -> str: ...


def lookup_binding_value(binding_data: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted *path* against *binding_data*.

    Raises:
        BindingResolutionException: If any segment of the path is missing.
    """
    head, *rest = path.split(".")
    if head not in binding_data:
        raise BindingResolutionException(
            f"No value for named parameter '{path}'",
            context={"token": path, "available": sorted(binding_data)},
        )
    current = binding_data[head]
    for segment in rest:
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        elif hasattr(current, segment):
            current = getattr(current, segment)
        else:
            raise BindingResolutionException(
                f"No value for named parameter '{path}'",
                context={"token": path, "segment": segment},
            )
    return current


class DefaultResolutionPolicy:
    """Substitute each ``{name}`` token with the string form of its value."""

    def template_bind(self, template: str, binding_data: Mapping[str, Any], binding: CosmosDB) -> str:
        return TOKEN_RE.sub(lambda m: str(lookup_binding_value(binding_data, m.group(1))), template)
