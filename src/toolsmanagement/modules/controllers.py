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
"""Read endpoints shared by the entity-family controllers.

Subclasses add ``@request_mapping`` and their typed save handlers; the list
and detail handlers below are inherited as routes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from starlette.requests import Request
from starlette.responses import Response

from toolsmanagement.data.pageable import page_request
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.sort import STANDARD_SORT_FIELDS, SortResolver
from toolsmanagement.data.specification import Specification
from toolsmanagement.kernel.exceptions import InvalidRequestException
from toolsmanagement.modules.base import CrudService
from toolsmanagement.modules.specifications import name_filter
from toolsmanagement.web.mappings import get_mapping
from toolsmanagement.web.params import PathVar, QueryParam
from toolsmanagement.web.response import created, no_content
from toolsmanagement.web.schemas import FilterResponse


class EntityController:
    """``GET {base}`` and ``GET {base}/{id}`` over a :class:`CrudService`."""

    sort_fields: ClassVar[Mapping[str, str]] = STANDARD_SORT_FIELDS

    def __init__(self, service: CrudService[Any, Any, Any, Any], settings: QuerySettings = DEFAULT_QUERY_SETTINGS) -> None:
        self._service = service
        self._settings = settings
        self._sort = SortResolver(self.sort_fields, settings)

    def list_filter(self, name: str | None, is_archived: bool) -> Specification:
        return name_filter(name, is_archived, self._settings)

    @get_mapping("")
    async def find_all(
        self,
        page: QueryParam[int],
        size: QueryParam[int],
        name: QueryParam[str | None] = None,
        is_archived: QueryParam[bool] = False,
        sort: QueryParam[str | None] = None,
    ) -> FilterResponse[Any]:
        pageable = page_request(page, size, self._sort.resolve(sort), self._settings)
        result = await self._service.find_all(self.list_filter(name, is_archived), pageable)
        return FilterResponse.of(result)

    @get_mapping("/{id}")
    async def find(self, id: PathVar[int]) -> Any:
        return await self._service.find_by_id(id)

    async def _create(self, request: Request, rq: Any) -> Response:
        saved = await self._service.save(rq)
        return created(request, saved.id)

    async def _update(self, rq: Any) -> Response:
        require_id(rq)
        await self._service.save(rq)
        return no_content()


def require_id(rq: Any) -> None:
    """Updates name the row they change; creation goes through ``POST``."""
    if rq.id is None:
        raise InvalidRequestException("Id must be present for update", context={"field": "id"})
