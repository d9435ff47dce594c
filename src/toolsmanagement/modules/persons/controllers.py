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
"""HTTP endpoints of the persons module."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.integration.file_storage import FileType
from toolsmanagement.modules.controllers import EntityController
from toolsmanagement.modules.persons.schemas import LabelRequest, PersonRequest, RoleRequest
from toolsmanagement.modules.persons.services import PersonService
from toolsmanagement.web.mappings import get_mapping, post_mapping, put_mapping, request_mapping
from toolsmanagement.web.params import Body, File, PathVar, UploadedFile, Valid
from toolsmanagement.web.schemas import UploadPhotoResponse


@request_mapping("/v1/persons/labels")
class PersonLabelController(EntityController):
    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[LabelRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[LabelRequest]]) -> Response:
        return await self._update(rq)


@request_mapping("/v1/persons/roles")
class RoleController(EntityController):
    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[RoleRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[RoleRequest]]) -> Response:
        return await self._update(rq)


@request_mapping("/v1/persons/persons")
class PersonController(EntityController):
    def __init__(self, service: PersonService, settings: QuerySettings = DEFAULT_QUERY_SETTINGS) -> None:
        super().__init__(service, settings)
        self._persons = service

    @post_mapping("", status_code=201)
    async def create(self, request: Request, rq: Valid[Body[PersonRequest]]) -> Response:
        return await self._create(request, rq)

    @put_mapping("", status_code=204)
    async def update(self, rq: Valid[Body[PersonRequest]]) -> Response:
        return await self._update(rq)

    @post_mapping("/photo")
    async def upload_photo(self, attachment: File[UploadedFile]) -> UploadPhotoResponse:
        return UploadPhotoResponse(photo_uuid=await self._persons.upload_photo(attachment))

    @get_mapping("/{id}/photo")
    async def find_photo(self, id: PathVar[int]) -> Response:
        return Response(await self._persons.find_photo(id), media_type=FileType.PHOTO_PERSON.media_type)
