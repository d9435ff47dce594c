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
"""Web application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import structlog
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from toolsmanagement.core.config import config_properties
from toolsmanagement.kernel.exceptions import ToolsManagementException
from toolsmanagement.web.controller import ControllerRegistrar
from toolsmanagement.web.errors import global_exception_handler, http_exception_handler
from toolsmanagement.web.filter_chain import WebFilterChainMiddleware
from toolsmanagement.web.filters import RequestLoggingFilter, TransactionIdFilter, WebFilter

logger = structlog.get_logger(__name__)

CORS_METHODS = ("GET", "POST", "PUT", "DELETE")
CORS_MAX_AGE = 1800


@config_properties(prefix="toolsmanagement.web")
@dataclass(frozen=True)
class WebProperties:
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allowed_origins: tuple[str, ...] = ("*",)


def create_app(
    controllers: Iterable[object] = (),
    *,
    cors_allowed_origins: Sequence[str] = ("*",),
    extra_filters: Sequence[WebFilter] = (),
    debug: bool = False,
    lifespan: Any = None,
) -> Starlette:
    """Create the Starlette application.

    Includes:
    - WebFilter chain (transaction id, request logging, then *extra_filters*)
    - CORS for any of *cors_allowed_origins*
    - Routes of every controller in *controllers*
    - Exception handlers producing the JSON error shape
    """
    filters: list[WebFilter] = [TransactionIdFilter(), RequestLoggingFilter(), *extra_filters]

    middleware = [
        Middleware(WebFilterChainMiddleware, filters=filters),
        Middleware(
            CORSMiddleware,
            allow_origins=list(cors_allowed_origins),
            allow_methods=list(CORS_METHODS),
            allow_headers=["*"],
            expose_headers=["Location", "detail"],
            max_age=CORS_MAX_AGE,
        ),
    ]

    controllers = list(controllers)
    registrar = ControllerRegistrar()
    routes = registrar.collect_routes(controllers)
    for meta in registrar.collect_route_metadata(controllers):
        logger.debug("route_mapped", method=meta.http_method, path=meta.path, handler=meta.handler_name)

    return Starlette(
        debug=debug,
        middleware=middleware,
        routes=routes,
        lifespan=lifespan,
        exception_handlers={
            ToolsManagementException: global_exception_handler,
            HTTPException: http_exception_handler,
            Exception: global_exception_handler,
        },
    )
