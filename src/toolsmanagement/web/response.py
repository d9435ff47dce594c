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
"""Return value handling — converts handler results to Starlette Responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


def _to_json_data(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_to_json_data(item) for item in result]
    return result


def handle_return_value(result: Any, status_code: int = 200) -> Response:
    """Convert a handler's return value into a Starlette Response.

    - ``None`` -> empty response (204 unless status_code explicitly set)
    - ``Response`` -> passed through unchanged
    - ``BaseModel`` -> JSON with camelCase aliases
    - ``dict``, ``list`` -> JSON
    """
    if result is None:
        return Response(status_code=status_code if status_code != 200 else 204)
    if isinstance(result, Response):
        return result
    return JSONResponse(_to_json_data(result), status_code=status_code)


def created(request: Request, id: Any) -> Response:
    """201 Created with ``Location`` pointing at ``{request path}/{id}``."""
    location = str(request.url.replace(query="", fragment="")).rstrip("/") + f"/{id}"
    return Response(status_code=201, headers={"Location": location})


def no_content() -> Response:
    return Response(status_code=204)
