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
"""Tests for the file storage HTTP client."""

from uuid import UUID

import httpx
import pytest

from toolsmanagement.integration.file_storage import FileStorageClient, FileType
from toolsmanagement.kernel.exceptions import (
    InvalidRequestException,
    ResourceNotFoundException,
    ServiceUnavailableException,
)
from toolsmanagement.web.params import UploadedFile

FILE_UUID = UUID("6f1c2d1e-8a43-4b38-9a7e-3b0f6a9c1d22")


def make_client(handler, max_file_bytes=None) -> FileStorageClient:
    transport = httpx.MockTransport(handler)
    return FileStorageClient(
        httpx.AsyncClient(transport=transport, base_url="http://files"),
        max_file_bytes=max_file_bytes,
    )


def photo(content: bytes = b"jpeg") -> UploadedFile:
    return UploadedFile("photo.jpg", "image/jpeg", content)


class TestUpload:
    async def test_sends_file_type_and_attachment_part(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"uuid": str(FILE_UUID)})

        client = make_client(handler)
        response = await client.upload(photo(), FileType.PHOTO_TOOL)

        assert response.uuid == FILE_UUID
        assert response.error is None
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1"
        assert request.url.params["fileType"] == "PHOTO_TOOL"
        body = request.read()
        assert b'name="attachment"' in body
        assert b'filename="photo.jpg"' in body

    async def test_error_field_is_returned(self):
        client = make_client(lambda request: httpx.Response(200, json={"error": "bucket full"}))
        response = await client.upload(photo(), FileType.PHOTO_PERSON)
        assert response.uuid is None
        assert response.error == "bucket full"

    async def test_error_status(self):
        client = make_client(lambda request: httpx.Response(500))
        with pytest.raises(ServiceUnavailableException, match="Error upload photo"):
            await client.upload(photo(), FileType.PHOTO_TOOL)

    async def test_oversize_file_is_rejected_before_sending(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        client = make_client(handler, max_file_bytes=3)
        with pytest.raises(InvalidRequestException):
            await client.upload(photo(b"four"), FileType.PHOTO_TOOL)
        assert calls == []


class TestDownload:
    async def test_returns_bytes(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"/v1/{FILE_UUID}"
            assert request.url.params["fileType"] == "PHOTO_PERSON"
            return httpx.Response(200, content=b"\xff\xd8")

        client = make_client(handler)
        assert await client.download(FILE_UUID, FileType.PHOTO_PERSON) == b"\xff\xd8"

    @pytest.mark.parametrize(
        "status, exc_type",
        [
            (404, ResourceNotFoundException),
            (400, InvalidRequestException),
            (500, ServiceUnavailableException),
            (503, ServiceUnavailableException),
        ],
    )
    async def test_error_statuses(self, status, exc_type):
        client = make_client(lambda request: httpx.Response(status))
        with pytest.raises(exc_type):
            await client.download(FILE_UUID, FileType.PHOTO_TOOL)

    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(ServiceUnavailableException, match=str(FILE_UUID)):
            await client.download(FILE_UUID, FileType.PHOTO_TOOL)
