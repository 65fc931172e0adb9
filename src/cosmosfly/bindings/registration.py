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
"""Explicit registration of Cosmos DB bindings on functions.

Provides the :func:`cosmos_db` decorator, which attaches a :class:`CosmosDB`
binding to a named parameter (or to the return value) of a function, and
:func:`get_bindings`, which a host reads back at start-up.

Usage::

    from cosmosfly.bindings import CosmosDB, RETURN_VALUE, cosmos_db

    @cosmos_db("order", CosmosDB("SalesDB", "Orders", id="{order_id}", partition_key="{region}"))
    @cosmos_db(RETURN_VALUE, CosmosDB("SalesDB", "Invoices", create_if_not_exists=True))
    async def make_invoice(order_id: str, region: str, order: dict) -> dict: ...
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from cosmosfly.bindings.attribute import CosmosDB
from cosmosfly.kernel.exceptions import BindingRegistrationException

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RETURN_VALUE = "$return"

_BINDINGS_ATTR = "__cosmosfly_bindings__"


def cosmos_db(parameter: str, binding: CosmosDB) -> Callable[[F], F]:
    """Bind *parameter* of the decorated function to a Cosmos DB collection.

    Args:
        parameter: Name of a parameter of the decorated function, or
            :data:`RETURN_VALUE` to bind the return value.
        binding: The binding configuration.

    Returns:
        A decorator that records the binding on the function via
        ``__cosmosfly_bindings__`` and returns the function unchanged.

    Raises:
        BindingRegistrationException: If *binding* is not a :class:`CosmosDB`,
            *parameter* is not a parameter of the function, or the parameter
            is already bound.
    """
    if not isinstance(binding, CosmosDB):
        raise BindingRegistrationException(
            f"Expected a CosmosDB binding for '{parameter}', got {type(binding).__name__}",
            context={"parameter": parameter},
        )

    def decorator(func: F) -> F:
        if parameter != RETURN_VALUE and parameter not in inspect.signature(func).parameters:
            raise BindingRegistrationException(
                f"{func.__qualname__} has no parameter named '{parameter}'",
                context={"function": func.__qualname__, "parameter": parameter},
            )

        # Own copy, so stacked decorators on a wrapped function never touch the original's dict
        bindings: dict[str, CosmosDB] = dict(func.__dict__.get(_BINDINGS_ATTR, {}))
        if parameter in bindings:
            raise BindingRegistrationException(
                f"{func.__qualname__} already binds '{parameter}'",
                context={"function": func.__qualname__, "parameter": parameter},
            )
        bindings[parameter] = binding
        setattr(func, _BINDINGS_ATTR, bindings)

        logger.debug(
            "Registered Cosmos DB binding %s on %s.%s",
            binding,
            func.__qualname__,
            parameter,
        )
        return func

    return decorator


def get_bindings(func: Callable[..., Any]) -> dict[str, CosmosDB]:
    """Return the bindings registered on *func*, keyed by parameter name."""
    return dict(getattr(func, _BINDINGS_ATTR, {}))


def is_bound(func: Callable[..., Any]) -> bool:
    """``True`` if *func* carries at least one Cosmos DB binding."""
    return bool(getattr(func, _BINDINGS_ATTR, None))
