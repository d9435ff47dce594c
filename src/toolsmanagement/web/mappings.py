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
"""Decorators mapping controller classes and methods onto HTTP routes.

``@request_mapping("/v1/tools/brands")`` on the class sets the base path;
``@get_mapping("/{id}")`` and friends on methods mark request handlers::

    @request_mapping("/v1/tools/brands")
    class BrandController:
        @get_mapping("/{id}")
        async def find(self, id: PathVar[int]) -> BrandInfo: ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

C = TypeVar("C", bound=type)
F = TypeVar("F", bound=Callable[..., Any])

BASE_PATH_ATTR = "__base_path__"
HANDLER_ATTR = "__handler_mapping__"


@dataclass(frozen=True)
class HandlerMapping:
    method: str
    path: str
    status_code: int


def request_mapping(path: str) -> Callable[[C], C]:
    def decorator(cls: C) -> C:
        setattr(cls, BASE_PATH_ATTR, path.rstrip("/"))
        return cls

    return decorator


def base_path(cls: type) -> str:
    return getattr(cls, BASE_PATH_ATTR, "")


def handler_mapping(obj: Any) -> HandlerMapping | None:
    return getattr(obj, HANDLER_ATTR, None)


def _mapping(method: str, path: str, status_code: int) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        setattr(func, HANDLER_ATTR, HandlerMapping(method, path, status_code))
        return func

    return decorator


def get_mapping(path: str = "", *, status_code: int = 200) -> Callable[[F], F]:
    return _mapping("GET", path, status_code)


def post_mapping(path: str = "", *, status_code: int = 200) -> Callable[[F], F]:
    return _mapping("POST", path, status_code)


def put_mapping(path: str = "", *, status_code: int = 200) -> Callable[[F], F]:
    return _mapping("PUT", path, status_code)


def delete_mapping(path: str = "", *, status_code: int = 200) -> Callable[[F], F]:
    return _mapping("DELETE", path, status_code)
