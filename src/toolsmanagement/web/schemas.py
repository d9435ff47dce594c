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
"""Shared Pydantic shapes for request and response bodies."""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from toolsmanagement.data.page import Page

T = TypeVar("T")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NotBlankStr = Annotated[str, AfterValidator(_not_blank)]


class ApiModel(BaseModel):
    """Base for API bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FilterResponse(ApiModel, Generic[T]):
    """One page of a list endpoint: ``{"items": [...], "totalItems": n}``."""

    items: list[T]
    total_items: int

    @classmethod
    def of(cls, page: Page[T]) -> FilterResponse[T]:
        return cls(items=page.items, total_items=page.total)


class ShortInfo(ApiModel):
    """Name summary of an associated entity."""

    id: int
    name: str
    is_archived: bool


class UploadPhotoResponse(ApiModel):
    photo_uuid: UUID
