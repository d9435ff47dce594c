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
"""Global exception handler — structured JSON error responses."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

import structlog
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from toolsmanagement.kernel.exceptions import (
    DataIntegrityException,
    InvalidRequestException,
    ResourceNotFoundException,
    ServiceUnavailableException,
    ToolsManagementException,
    ValidationException,
)

logger = structlog.get_logger(__name__)

DETAIL_HEADER = "detail"

_STATUS_MAP: dict[type, int] = {
    ResourceNotFoundException: 404,
    ValidationException: 400,
    InvalidRequestException: 400,
    DataIntegrityException: 400,
    ServiceUnavailableException: 503,
}


def get_status_code(exc: Exception) -> int:
    """Map exception type to HTTP status code."""
    for exc_type, status in _STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return status
    return 500


def _header_safe(message: str) -> str:
    return message.encode("latin-1", "replace").decode("latin-1").replace("\r", " ").replace("\n", " ")


def _error_response(request: Request, status: int, message: str, code: str, context: dict | None) -> JSONResponse:
    body: dict[str, Any] = {
        "error": {
            "message": message,
            "code": code,
            "transaction_id": getattr(request.state, "transaction_id", str(uuid.uuid4())),
            "timestamp": datetime.now(UTC).isoformat(),
            "status": status,
            "path": request.url.path,
        }
    }
    if context:
        body["error"]["context"] = context
    return JSONResponse(body, status_code=status, headers={DETAIL_HEADER: _header_safe(message)})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all exceptions with structured JSON responses."""
    if isinstance(exc, ToolsManagementException):
        status = get_status_code(exc)
        if status >= 500:
            logger.error("request_failed", path=request.url.path, code=exc.code, error=str(exc))
        else:
            logger.info("request_rejected", path=request.url.path, code=exc.code, error=str(exc))
        return _error_response(request, status, str(exc), exc.code, exc.context)

    logger.exception("unhandled_exception", path=request.url.path, error_type=type(exc).__name__)
    return _error_response(request, 500, "Internal server error", "INTERNAL_ERROR", None)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the same error shape."""
    assert isinstance(exc, HTTPException)
    code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    return _error_response(request, exc.status_code, str(exc.detail), code, None)
