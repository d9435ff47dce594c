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
"""Route collection and request dispatching for controller instances."""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from toolsmanagement.web.mappings import base_path, handler_mapping
from toolsmanagement.web.resolver import ParameterResolver
from toolsmanagement.web.response import handle_return_value


@dataclass(frozen=True)
class RouteMetadata:
    """One handler method mounted on a path."""

    path: str
    http_method: str
    status_code: int
    controller: str
    handler_name: str


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class ControllerRegistrar:
    """Builds Starlette routes from ``@request_mapping`` controller instances.

    For each controller:
    1. Reads the ``@request_mapping`` base path from the class
    2. Finds ``@*_mapping`` handler methods
    3. Builds a ParameterResolver for each handler
    4. Creates Starlette Route objects that dispatch requests

    Handlers may receive the current ``Request`` by declaring a parameter
    named ``request``.
    """

    def collect_routes(self, controllers: Iterable[object]) -> list[Route]:
        return [
            Route(meta.path, self._make_endpoint(getattr(controller, meta.handler_name), meta.status_code),
                  methods=[meta.http_method])
            for controller, meta in self._iter_handlers(controllers)
        ]

    def collect_route_metadata(self, controllers: Iterable[object]) -> list[RouteMetadata]:
        return [meta for _controller, meta in self._iter_handlers(controllers)]

    @staticmethod
    def _iter_handlers(controllers: Iterable[object]) -> Iterable[tuple[object, RouteMetadata]]:
        for controller in controllers:
            cls = type(controller)
            prefix = base_path(cls)
            for attr_name in sorted(dir(cls)):
                mapping = handler_mapping(getattr(cls, attr_name, None))
                if mapping is None:
                    continue
                yield controller, RouteMetadata(
                    path=(prefix + mapping.path) or "/",
                    http_method=mapping.method,
                    status_code=mapping.status_code,
                    controller=cls.__name__,
                    handler_name=attr_name,
                )

    @staticmethod
    def _make_endpoint(bound_method: Any, status_code: int) -> Any:
        resolver = ParameterResolver(bound_method)
        wants_request = "request" in inspect.signature(bound_method).parameters

        async def endpoint(request: Request) -> Response:
            kwargs = await resolver.resolve(request)
            if wants_request:
                kwargs["request"] = request
            result = await _maybe_await(bound_method(**kwargs))
            return handle_return_value(result, status_code)

        return endpoint
