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
"""HTTP client for the file storage service that keeps tool and person photos.

Wire contract of the storage service::

    POST /v1?fileType=PHOTO_TOOL        multipart part "attachment" -> {"uuid": ..., "error": ...}
    GET  /v1/{uuid}?fileType=PHOTO_TOOL -> raw bytes
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx
import structlog
from pydantic import BaseModel

from toolsmanagement.core.config import config_properties
from toolsmanagement.kernel.exceptions import (
    InvalidRequestException,
    ResourceNotFoundException,
    ServiceUnavailableException,
)
from toolsmanagement.web.params import UploadedFile

logger = structlog.get_logger(__name__)

BASE_PATH = "/v1"


class FileType(enum.Enum):
    """Kind of stored file; selects the bucket on the storage side."""

    PHOTO_PERSON = "PHOTO_PERSON"
    PHOTO_TOOL = "PHOTO_TOOL"

    @property
    def media_type(self) -> str:
        return "image/jpeg"


class UploadResponse(BaseModel):
    uuid: UUID | None = None
    error: str | None = None


@config_properties(prefix="toolsmanagement.integration.file-storage-api")
@dataclass(frozen=True)
class FileStorageProperties:
    url: str = "http://localhost:8081"
    timeout_seconds: float = 30.0
    buffer_megabytes: int = 5


class FileStorage(Protocol):
    async def upload(self, file: UploadedFile, file_type: FileType) -> UploadResponse: ...

    async def download(self, uuid: UUID, file_type: FileType) -> bytes: ...


class FileStorageClient:
    """File storage over ``httpx.AsyncClient``.

    Transport errors and unexpected statuses surface as
    :class:`ServiceUnavailableException`.
    """

    def __init__(self, http_client: httpx.AsyncClient, max_file_bytes: int | None = None) -> None:
        self._client = http_client
        self._max_file_bytes = max_file_bytes

    @classmethod
    def from_properties(cls, props: FileStorageProperties) -> FileStorageClient:
        http_client = httpx.AsyncClient(base_url=props.url, timeout=props.timeout_seconds)
        return cls(http_client, max_file_bytes=props.buffer_megabytes * 1024 * 1024)

    async def upload(self, file: UploadedFile, file_type: FileType) -> UploadResponse:
        if self._max_file_bytes is not None and file.size > self._max_file_bytes:
            raise InvalidRequestException(
                f"File is larger than {self._max_file_bytes} bytes",
                context={"size": file.size},
            )
        try:
            response = await self._client.post(
                BASE_PATH,
                params={"fileType": file_type.value},
                files={"attachment": (file.filename, file.content, file.content_type)},
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()
            return UploadResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("file_storage_upload_failed", file_type=file_type.value, error=str(exc))
            raise ServiceUnavailableException("Error upload photo to file storage") from exc

    async def download(self, uuid: UUID, file_type: FileType) -> bytes:
        try:
            response = await self._client.get(
                f"{BASE_PATH}/{uuid}",
                params={"fileType": file_type.value},
                headers={"Accept": "application/octet-stream"},
            )
        except httpx.HTTPError as exc:
            logger.error("file_storage_download_failed", uuid=str(uuid), error=str(exc))
            raise ServiceUnavailableException(f"File storage service unavailable. Try to get photo by id: {uuid}") from exc

        if response.status_code == 404:
            raise ResourceNotFoundException(f"File not found {uuid}")
        if response.status_code == 400:
            raise InvalidRequestException(f"Error retrieving file from storage {uuid}")
        if response.is_error:
            logger.error("file_storage_download_failed", uuid=str(uuid), status_code=response.status_code)
            raise ServiceUnavailableException(f"File storage service unavailable. Try to get photo by id: {uuid}")
        return response.content

    async def close(self) -> None:
        await self._client.aclose()
