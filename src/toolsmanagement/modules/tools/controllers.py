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
"""HTTP endpoints of the tools module."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from toolsmanagement.data.pageable import page_request
from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.sort import SortResolver
from toolsmanagement.data.specification import Specification
from toolsmanagement.integration.file_storage import FileType
from toolsmanagement.modules.controllers import EntityController, require_id
from toolsmanagement.modules.tools.schemas import (
    BrandRequest,
    CategoryRequest,
    CommentItem,
    CommentRequest,
    LabelRequest,
    ToolRequest,
)
from toolsmanagement.modules.tools.services import CategoryService, CommentService, ToolService
from toolsmanagement.modules.tools.specifications import (
    CATEGORY_SORT_FIELDS,
    COMMENT_SORT_FIELDS,
    category_filter,
    comment_filter,
)
from toolsmanagement.web.mappings import delete_mapping, get_mapping, post_mapping, put_mapping, request_mapping
from toolsmanagement.web.params import Body, File, PathVar, QueryParam, UploadedFile, Valid
from toolsmanagement.web.response import created, no_content
from toolsmanagement.web.schemas import FilterResponse, UploadPhotoResponse


@request_mapping("/v1/tools/brands")
class BrandController(EntityController):
    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[BrandRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[BrandRequest]]) -> Response:
        return await self._update(rq)


@request_mapping("/v1/tools/labels")
class ToolLabelController(EntityController):
    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[LabelRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[LabelRequest]]) -> Response:
        return await self._update(rq)


@request_mapping("/v1/tools/categories")
class CategoryController(EntityController):
    sort_fields = CATEGORY_SORT_FIELDS

    def __init__(self, service: CategoryService, settings: QuerySettings = DEFAULT_QUERY_SETTINGS) -> None:
        super().__init__(service, settings)

    def list_filter(self, name: str | None, is_archived: bool) -> Specification:
        return category_filter(name, is_archived, self._settings)

    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[CategoryRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[CategoryRequest]]) -> Response:
        return await self._update(rq)


@request_mapping("/v1/tools/tools")
class ToolController(EntityController):
    def __init__(self, service: ToolService, settings: QuerySettings = DEFAULT_QUERY_SETTINGS) -> None:
        super().__init__(service, settings)
        self._tools = service

    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[ToolRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[ToolRequest]]) -> Response:
        return await self._update(rq)

    @post_mapping("/photo")
    async def upload_photo(self, attachment: File[UploadedFile]) -> UploadPhotoResponse:
        return UploadPhotoResponse(photo_uuid=await self._tools.upload_photo(attachment))

    @get_mapping("/{id}/photo")
    async def find_photo(self, id: PathVar[int]) -> Response:
        return Response(await self._tools.find_photo(id), media_type=FileType.PHOTO_TOOL.media_type)


@request_mapping("/v1/tools/comments")
class CommentController:
    def __init__(self, service: CommentService, settings: QuerySettings = DEFAULT_QUERY_SETTINGS) -> None:
        self._service = service
        self._settings = settings
        self._sort = SortResolver(COMMENT_SORT_FIELDS, settings)

    @get_mapping("")
    async def find_all(
        self,
        page: QueryParam[int],
        size: QueryParam[int],
        tool_id: QueryParam[int],
        sort: QueryParam[str | None] = None,
    ) -> FilterResponse[CommentItem]:
        pageable = page_request(page, size, self._sort.resolve(sort), self._settings)
        return FilterResponse.of(await self._service.find_all(comment_filter(tool_id), pageable))

    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[CommentRequest]]) -> Response:
        saved = await self._service.save(rq)
        return created(request, saved.id)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[CommentRequest]]) -> Response:
        require_id(rq)
        await self._service.save(rq)
        return no_content()

    @delete_mapping("/{id}", status_code=204)
    async def delete(self, id: PathVar[int]) -> None:
        await self._service.delete_by_id(id)
