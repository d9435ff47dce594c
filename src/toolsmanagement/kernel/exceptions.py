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
"""Unified exception hierarchy for the tools management registry.

Categories:
- BusinessException: input validation, missing resources, constraint violations
- InfrastructureException: failures of downstream services (file storage)

Every exception carries a machine-readable ``code`` so HTTP clients can tell
failure kinds apart without parsing the message.
"""

from __future__ import annotations


class ToolsManagementException(Exception):
    """Base exception for all registry errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.context: dict = context if context is not None else {}


# ---------------------------------------------------------------------------
# Business
# ---------------------------------------------------------------------------


class BusinessException(ToolsManagementException):
    """Domain rule violations and business logic errors."""

    default_code = "BAD_REQUEST"


class ValidationException(BusinessException):
    """Input validation failures at the API boundary."""

    default_code = "VALIDATION_ERROR"


class ResourceNotFoundException(BusinessException):
    """Requested resource does not exist."""

    default_code = "NOT_FOUND"


class InvalidRequestException(BusinessException):
    """Request is syntactically valid but semantically incorrect."""

    default_code = "BAD_REQUEST"


class DataIntegrityException(BusinessException):
    """A store constraint (unique, not-null, foreign key) was violated."""

    default_code = "DATA_INTEGRITY_VIOLATION"


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------


class InfrastructureException(ToolsManagementException):
    """Infrastructure failures: database, network, downstream services."""

    default_code = "INFRASTRUCTURE_ERROR"


class ServiceUnavailableException(InfrastructureException):
    """Downstream service is unavailable."""

    default_code = "SERVICE_UNAVAILABLE"
