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
"""Request and response bodies of the tools module."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from toolsmanagement.modules.tools.models import OwnershipType
from toolsmanagement.web.schemas import ApiModel, NotBlankStr, ShortInfo

# --- Brands and labels ---


class NamedRequest(ApiModel):
    """Save request of an entity that is just a unique name."""

    id: int | None = None
    name: NotBlankStr
    is_archived: bool


class NamedInfo(ApiModel):
    id: int
    name: str
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class BrandRequest(NamedRequest):
    pass


class BrandInfo(NamedInfo):
    pass


class LabelRequest(NamedRequest):
    pass


class LabelInfo(NamedInfo):
    pass


# --- Categories ---


class CategoryRequest(ApiModel):
    id: int | None = None
    name: NotBlankStr
    parent_category_id: int | None = None
    is_archived: bool


class CategoryInfo(ApiModel):
    id: int
    name: str
    parent_category_id: int | None = None
    subcategories: list[ShortInfo]
    is_archived: bool
    created_at: datetime
    updated_at: datetime


# --- Tools ---


class ToolRequest(ApiModel):
    id: int | None = None
    name: NotBlankStr
    is_consumable: bool
    inventory_number: NotBlankStr | None = None
    responsible_uuid: UUID | None = None
    project_uuid: UUID | None = None
    price: Decimal | None = None
    ownership_type: OwnershipType
    rent_till: date | None = None
    is_kit: bool
    kit_uuid: UUID | None = None
    photo_uuid: UUID | None = None
    brand_id: int | None = None
    category_id: int | None = None
    labels: set[int]
    is_archived: bool


class ToolFields(ApiModel):
    id: int
    uuid: UUID
    name: str
    is_consumable: bool
    inventory_number: str | None = None
    responsible_uuid: UUID | None = None
    project_uuid: UUID | None = None
    price: Decimal | None = None
    ownership_type: OwnershipType
    rent_till: date | None = None
    is_kit: bool
    kit_uuid: UUID | None = None
    photo_uuid: UUID | None = None
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class ToolItem(ToolFields):
    """List view: associations reduced to their names."""

    brand: str | None = None
    category: str | None = None
    labels: list[str]


class ToolInfo(ToolFields):
    brand: ShortInfo | None = None
    category: ShortInfo | None = None
    labels: list[ShortInfo]


# --- Comments ---


class CommentRequest(ApiModel):
    id: int | None = None
    tool_id: int
    content: NotBlankStr
    person_uuid: UUID


class PersonShort(ApiModel):
    id: int
    name: str
    surname: str
    job_title: str
    is_archived: bool


class CommentItem(ApiModel):
    id: int
    content: str
    person_uuid: UUID
    person: PersonShort | None = None
    created_at: datetime
    updated_at: datetime
