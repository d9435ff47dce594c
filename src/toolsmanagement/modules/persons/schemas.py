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
"""Request and response bodies of the persons module."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from toolsmanagement.web.schemas import ApiModel, NotBlankStr


class LabelRequest(ApiModel):
    id: int | None = None
    name: NotBlankStr
    is_archived: bool


class LabelInfo(ApiModel):
    id: int
    name: str
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class RoleRequest(LabelRequest):
    pass


class RoleInfo(LabelInfo):
    pass


class NamedShort(ApiModel):
    id: int
    name: str


class PersonRequest(ApiModel):
    id: int | None = None
    phone_number: str | None = None
    company_uuid: UUID | None = None
    surname: NotBlankStr
    name: NotBlankStr
    patronymic: str | None = None
    job_title: NotBlankStr
    is_archived: bool
    is_unregistered: bool
    photo_uuid: UUID | None = None
    labels: set[int]
    roles: set[int]


class PersonFields(ApiModel):
    id: int
    uuid: UUID
    phone_number: str | None = None
    company_uuid: UUID | None = None
    surname: str
    name: str
    patronymic: str | None = None
    job_title: str
    is_archived: bool
    is_unregistered: bool
    photo_uuid: UUID | None = None
    created_at: datetime
    updated_at: datetime


class PersonItem(PersonFields):
    """List view: labels and roles reduced to their names."""

    labels: list[str]
    roles: list[str]


class PersonInfo(PersonFields):
    labels: list[NamedShort]
    roles: list[NamedShort]
