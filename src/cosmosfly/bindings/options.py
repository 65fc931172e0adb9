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
"""Declarative binding options with resolution markers.

A :class:`BindingOption` declares one field of a binding record together with
the metadata a resolver needs: whether the value may carry ``{name}``
placeholders (``auto_resolve``), which policy turns those placeholders into
the final value (``resolution_policy``), and whether the value names an app
setting holding a connection string (``connection_string``).

Usage::

    class MyBinding:
        database_name = BindingOption(auto_resolve=True, read_only=True)
        throughput = BindingOption(0)
"""

from __future__ import annotations

from typing import Any


class BindingOption:
    """Data descriptor for a single binding field.

    Instance values live in the owner's ``__dict__``; unset fields read back
    as ``default``. A ``read_only`` option can only be written through
    ``_initialize``, which binding constructors call once.
    """

    def __init__(
        self,
        default: Any = None,
        *,
        auto_resolve: bool = False,
        resolution_policy: type | None = None,
        connection_string: bool = False,
        read_only: bool = False,
    ) -> None:
        self.default = default
        self.auto_resolve = auto_resolve or resolution_policy is not None
        self.resolution_policy = resolution_policy
        self.connection_string = connection_string
        self.read_only = read_only
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.read_only:
            raise AttributeError(f"'{type(instance).__name__}' attribute '{self.name}' is read-only")
        instance.__dict__[self.name] = value

    def _initialize(self, instance: Any, value: Any) -> None:
        """Assign the value regardless of ``read_only``; package-internal."""
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        markers = [
            m
            for m, on in (
                ("auto_resolve", self.auto_resolve),
                ("connection_string", self.connection_string),
                ("read_only", self.read_only),
            )
            if on
        ]
        return f"BindingOption({self.name!r}, default={self.default!r}, markers={markers})"


def binding_options(cls: type) -> dict[str, BindingOption]:
    """Return the binding options declared on *cls* and its bases, in declaration order."""
    options: dict[str, BindingOption] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, BindingOption):
                options[name] = value
    return options


def auto_resolve_fields(cls: type) -> list[str]:
    """Names of the fields eligible for placeholder resolution."""
    return [name for name, option in binding_options(cls).items() if option.auto_resolve]


def connection_string_fields(cls: type) -> list[str]:
    """Names of the fields holding connection string setting names."""
    return [name for name, option in binding_options(cls).items() if option.connection_string]
