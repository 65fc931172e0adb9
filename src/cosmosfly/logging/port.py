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
"""Logging contract the library's start-up code depends on."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cosmosfly.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Something that configures logging from ``cosmosfly.logging.*`` and hands out loggers.

    :class:`~cosmosfly.logging.structlog_adapter.StructlogAdapter` is the
    implementation shipped with cosmosfly.
    """

    def configure(self, config: Config) -> None:
        """Apply ``cosmosfly.logging.format`` and ``cosmosfly.logging.level.*``."""

    def get_logger(self, name: str) -> Any:
        """Logger for *name*; binding modules pass ``__name__``."""

    def set_level(self, name: str, level: str) -> None:
        """Change one logger's level, e.g. ``("cosmosfly.bindings", "DEBUG")``."""
