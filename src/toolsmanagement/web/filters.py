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
"""Filters run around every HTTP request by the filter chain.

Chain order: :class:`TransactionIdFilter` first, so the id is bound before
:class:`RequestLoggingFilter` writes its access line.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable
from fnmatch import fnmatch
from typing import Any

import structlog
from starlette.requests import Request

CallNext = Callable[[Request], Awaitable[Any]]

TRANSACTION_ID_HEADER = "X-Transaction-Id"

logger = structlog.get_logger("toolsmanagement.web")


class WebFilter:
    """Base filter; subclasses override :meth:`do_filter`.

    ``skip_paths`` holds glob patterns of request paths the filter ignores.
    """

    skip_paths: tuple[str, ...] = ()

    def should_not_filter(self, request: Request) -> bool:
        return any(fnmatch(request.url.path, pattern) for pattern in self.skip_paths)

    async def do_filter(self, request: Request, call_next: CallNext) -> Any:
        return await call_next(request)


class TransactionIdFilter(WebFilter):
    """Takes ``X-Transaction-Id`` from the request or generates one.

    The id lands on ``request.state``, in the structlog context for the
    duration of the request, and on the response.
    """

    async def do_filter(self, request: Request, call_next: CallNext) -> Any:
        transaction_id = request.headers.get(TRANSACTION_ID_HEADER) or str(uuid.uuid4())
        request.state.transaction_id = transaction_id
        with structlog.contextvars.bound_contextvars(transaction_id=transaction_id):
            response = await call_next(request)
        response.headers[TRANSACTION_ID_HEADER] = transaction_id
        return response


class RequestLoggingFilter(WebFilter):
    """One access log line per request."""

    async def do_filter(self, request: Request, call_next: CallNext) -> Any:
        start = time.perf_counter()
        fields = {"method": request.method, "path": request.url.path}
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("http_request_failed", **fields, error_type=type(exc).__name__, duration_ms=_since(start))
            raise
        log = logger.warning if response.status_code >= 500 else logger.info
        log("http_request", **fields, status_code=response.status_code, duration_ms=_since(start))
        return response


def _since(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
