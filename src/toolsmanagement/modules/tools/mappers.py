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
"""Conversions between tools-module entities, save requests and views."""

from __future__ import annotations

from collections.abc import Iterable

from toolsmanagement.data.reference import Reference, reference_id
from toolsmanagement.modules.persons.models import Person
from toolsmanagement.modules.tools.models import Brand, Category, Comment, Tool, ToolLabel
from toolsmanagement.modules.tools.schemas import (
    BrandInfo,
    BrandRequest,
    CategoryInfo,
    CategoryRequest,
    CommentItem,
    CommentRequest,
    LabelInfo,
    LabelRequest,
    PersonShort,
    ToolInfo,
    ToolItem,
    ToolRequest,
)
from toolsmanagement.web.schemas import ShortInfo

# --- Entity mappers ---


def apply_brand(brand: Brand, rq: BrandRequest) -> Brand:
    brand.name = rq.name
    brand.is_archived = rq.is_archived
    return brand


def apply_label(label: ToolLabel, rq: LabelRequest) -> ToolLabel:
    label.name = rq.name
    label.is_archived = rq.is_archived
    return label


def apply_category(category: Category, rq: CategoryRequest, parent: Reference[Category] | None) -> Category:
    category.name = rq.name
    category.parent_category_id = reference_id(parent)
    category.is_archived = rq.is_archived
    return category


def apply_tool(
    tool: Tool,
    rq: ToolRequest,
    brand: Reference[Brand] | None,
    category: Reference[Category] | None,
    labels: Iterable[Reference[ToolLabel]],
) -> Tool:
    if tool.id is None:
        tool.assign_business_key()
    tool.replace_labels(labels)
    tool.name = rq.name
    tool.is_consumable = rq.is_consumable
    tool.inventory_number = rq.inventory_number
    tool.responsible_uuid = rq.responsible_uuid
    tool.project_uuid = rq.project_uuid
    tool.price = rq.price
    tool.ownership_type = rq.ownership_type
    tool.rent_till = rq.rent_till
    tool.is_kit = rq.is_kit
    tool.kit_uuid = rq.kit_uuid
    tool.photo_uuid = rq.photo_uuid
    tool.brand_id = reference_id(brand)
    tool.category_id = reference_id(category)
    tool.is_archived = rq.is_archived
    return tool


def apply_new_comment(comment: Comment, rq: CommentRequest) -> Comment:
    comment.content = rq.content
    comment.person_uuid = rq.person_uuid
    comment.tool_id = rq.tool_id
    return comment


def update_comment_content(comment: Comment, rq: CommentRequest) -> Comment:
    comment.content = rq.content
    return comment


# --- View mappers ---


def to_short(entity: Brand | Category | ToolLabel) -> ShortInfo:
    return ShortInfo(id=entity.id, name=entity.name, is_archived=entity.is_archived)


def to_brand_info(brand: Brand) -> BrandInfo:
    return BrandInfo.model_validate(brand)


def to_label_info(label: ToolLabel) -> LabelInfo:
    return LabelInfo.model_validate(label)


def to_category_info(category: Category) -> CategoryInfo:
    return CategoryInfo(
        id=category.id,
        name=category.name,
        parent_category_id=category.parent_category_id,
        subcategories=[to_short(sub) for sub in category.subcategories],
        is_archived=category.is_archived,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def _tool_fields(tool: Tool) -> dict:
    return {
        "id": tool.id,
        "uuid": tool.uuid,
        "name": tool.name,
        "is_consumable": tool.is_consumable,
        "inventory_number": tool.inventory_number,
        "responsible_uuid": tool.responsible_uuid,
        "project_uuid": tool.project_uuid,
        "price": tool.price,
        "ownership_type": tool.ownership_type,
        "rent_till": tool.rent_till,
        "is_kit": tool.is_kit,
        "kit_uuid": tool.kit_uuid,
        "photo_uuid": tool.photo_uuid,
        "is_archived": tool.is_archived,
        "created_at": tool.created_at,
        "updated_at": tool.updated_at,
    }


def to_tool_item(tool: Tool) -> ToolItem:
    return ToolItem(
        **_tool_fields(tool),
        brand=tool.brand.name if tool.brand is not None else None,
        category=tool.category.name if tool.category is not None else None,
        labels=[label.name for label in tool.labels],
    )


def to_tool_info(tool: Tool) -> ToolInfo:
    return ToolInfo(
        **_tool_fields(tool),
        brand=to_short(tool.brand) if tool.brand is not None else None,
        category=to_short(tool.category) if tool.category is not None else None,
        labels=[to_short(label) for label in tool.labels],
    )


def to_person_short(person: Person) -> PersonShort:
    return PersonShort.model_validate(person)


def to_comment_item(comment: Comment, person: Person | None = None) -> CommentItem:
    return CommentItem(
        id=comment.id,
        content=comment.content,
        person_uuid=comment.person_uuid,
        person=to_person_short(person) if person is not None else None,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
