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
"""Process-wide default JSON serialization settings.

Bindings with ``use_default_json_serialization=True`` serialize documents with
the keyword arguments registered here (passed to :func:`json.dumps`). The
defaults are meant to be registered once during start-up::

    set_default_json_settings(default=str, sort_keys=True)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cosmosfly.bindings.attribute import CosmosDB

logger = logging.getLogger(__name__)

_default_settings: dict[str, Any] = {}


def set_default_json_settings(**settings: Any) -> None:
    """Replace the process-wide default ``json.dumps`` settings."""
    global _default_settings
    _default_settings = dict(settings)
    logger.debug("Default JSON serialization settings: %s", sorted(settings))


def get_default_json_settings() -> dict[str, Any]:
    return dict(_default_settings)


def reset_default_json_settings() -> None:
    set_default_json_settings()


def serializer_settings(binding: CosmosDB) -> dict[str, Any]:
    """Settings that apply to *binding*: the defaults when it opts in, otherwise none."""
    if binding.use_default_json_serialization:
        return get_default_json_settings()
    return {}


def dumps(document: Any, binding: CosmosDB) -> str:
    """Serialize *document* the way *binding* asks for."""
    return json.dumps(document, **serializer_settings(binding))
