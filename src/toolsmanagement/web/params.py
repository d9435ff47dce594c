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
"""Request binding types for controller handler methods.

Usage in handler signatures::

    async def find(self, id: PathVar[int]) -> BrandInfo: ...
    async def find_all(self, page: QueryParam[int], name: QueryParam[str | None] = None) -> dict: ...
    async def save(self, rq: Valid[Body[BrandRequest]]) -> Response: ...
    async def upload(self, attachment: File[UploadedFile]) -> UploadPhotoResponse: ...

Query parameters are looked up by their camelCase name first (``is_archived``
binds ``?isArchived=``), then by the parameter name itself.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PathVar(Generic[T]):
    """Path variable extracted from the URL path (e.g. ``/tools/{id}``)."""


class QueryParam(Generic[T]):
    """Query parameter; required unless the handler gives it a default."""


class Body(Generic[T]):
    """JSON request body, parsed with Pydantic when T is a BaseModel."""


class Valid(Generic[T]):
    """Validate the wrapped binding and report failures as 400 Bad Request.

    ``Valid[T]`` alone implies ``Valid[Body[T]]``.
    """


class File(Generic[T]):
    """Multipart file part named after the parameter."""


class UploadedFile:
    """A file received in a multipart request."""

    def __init__(self, filename: str, content_type: str, content: bytes) -> None:
        self.filename = filename
        self.content_type = content_type
        self.content = content

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    async def from_upload(cls, upload: Any) -> UploadedFile:
        """Read a Starlette ``UploadFile`` into memory."""
        content = await upload.read()
        return cls(
            filename=upload.filename or "",
            content_type=upload.content_type or "application/octet-stream",
            content=content,
        )
