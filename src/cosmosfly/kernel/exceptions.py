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
"""Unified exception hierarchy for cosmosfly.

All library exceptions inherit from CosmosFlyException, enabling unified
error handling across modules.

Categories:
- BusinessException: binding rule violations, validation errors
- InfrastructureException: registration and wiring failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class CosmosFlyException(Exception):
    """Base exception for all cosmosfly errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "COSMOSDB_BINDING_INVALID").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(CosmosFlyException):
    """Binding rule violations and configuration logic errors."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidRequestException(BusinessException):
    """Request is syntactically valid but semantically incorrect."""


class BindingValidationException(ValidationException):
    """A resolved binding is missing a required field."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="COSMOSDB_BINDING_INVALID", context=context)


class BindingResolutionException(InvalidRequestException):
    """A placeholder, query token or connection setting could not be resolved."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="COSMOSDB_BINDING_UNRESOLVED", context=context)


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(CosmosFlyException):
    """Wiring and registration failures."""


class BindingRegistrationException(InfrastructureException):
    """A binding could not be attached to a function."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="COSMOSDB_BINDING_REGISTRATION", context=context)
