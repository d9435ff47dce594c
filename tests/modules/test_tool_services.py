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
"""Tests for the tools-module services against SQLite."""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from toolsmanagement.data.pageable import Order, Sort, page_request
from toolsmanagement.data.sort import DEFAULT_SORT
from toolsmanagement.kernel.exceptions import (
    DataIntegrityException,
    InvalidRequestException,
    ResourceNotFoundException,
)
from toolsmanagement.modules.specifications import name_filter
from toolsmanagement.modules.tools.models import Comment, OwnershipType, ToolLabelLink
from toolsmanagement.modules.tools.schemas import (
    BrandRequest,
    CategoryRequest,
    CommentRequest,
    LabelRequest,
    ToolRequest,
)
from toolsmanagement.modules.tools.services import (
    BrandRepository,
    BrandService,
    CategoryRepository,
    CategoryService,
    CommentRepository,
    CommentService,
    ToolLabelRepository,
    ToolLabelService,
    ToolRepository,
    ToolService,
)
from toolsmanagement.modules.tools.specifications import category_filter, comment_filter


class StubStorage:
    async def upload(self, file, file_type):  # pragma: no cover
        raise AssertionError("not used")

    async def download(self, uuid, file_type):  # pragma: no cover
        raise AssertionError("not used")


@pytest.fixture
def brands(session_factory):
    return BrandService(BrandRepository(), session_factory)


@pytest.fixture
def labels(session_factory):
    return ToolLabelService(ToolLabelRepository(), session_factory)


@pytest.fixture
def categories(session_factory):
    return CategoryService(CategoryRepository(), session_factory)


@pytest.fixture
def tools(session_factory):
    return ToolService(
        ToolRepository(), BrandRepository(), CategoryRepository(), ToolLabelRepository(), session_factory, StubStorage()
    )


@pytest.fixture
def comments(session_factory):
    return CommentService(CommentRepository(), session_factory)


def tool_request(**overrides):
    data = {
        "name": "Drill",
        "is_consumable": False,
        "ownership_type": OwnershipType.OWN,
        "is_kit": False,
        "labels": set(),
        "is_archived": False,
    }
    data.update(overrides)
    return ToolRequest(**data)


# ---------------------------------------------------------------------------
# Brands
# ---------------------------------------------------------------------------


class TestBrandService:
    async def test_create_and_find(self, brands):
        saved = await brands.save(BrandRequest(name="Makita", is_archived=False))
        found = await brands.find_by_id(saved.id)
        assert found.name == "Makita"
        assert found.is_archived is False

    async def test_unknown_id_not_found(self, brands):
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await brands.find_by_id(404)
        assert str(exc_info.value) == "Brand not found id: 404"

    async def test_update_unknown_id_not_found(self, brands):
        with pytest.raises(ResourceNotFoundException):
            await brands.save(BrandRequest(id=77, name="Ghost", is_archived=False))

    async def test_list_excludes_archived(self, brands):
        for i, name in enumerate(["Makita", "Bosch", "DeWalt", "Hilti", "Metabo", "Ryobi"]):
            await brands.save(BrandRequest(name=name, is_archived=i == 5))
        page = await brands.find_all(name_filter(None, False), page_request(1, 10, DEFAULT_SORT))
        assert page.total == 5
        assert "Ryobi" not in [b.name for b in page.items]

    async def test_archive_moves_to_archived_list(self, brands):
        saved = await brands.save(BrandRequest(name="Makita", is_archived=False))
        await brands.save(BrandRequest(id=saved.id, name="Makita", is_archived=True))

        active = await brands.find_all(name_filter(None, False), page_request(1, 10))
        archived = await brands.find_all(name_filter(None, True), page_request(1, 10))
        assert active.total == 0
        assert [b.id for b in archived.items] == [saved.id]

    async def test_search_and_sort(self, brands):
        for name in ["Makita", "Makita Pro", "Bosch"]:
            await brands.save(BrandRequest(name=name, is_archived=False))
        page = await brands.find_all(name_filter("MAK", False), page_request(1, 10, Sort.by(Order.desc("name"))))
        assert [b.name for b in page.items] == ["Makita Pro", "Makita"]

    async def test_two_character_search_is_ignored(self, brands):
        for name in ["Makita", "Bosch"]:
            await brands.save(BrandRequest(name=name, is_archived=False))
        page = await brands.find_all(name_filter("Ma", False), page_request(1, 10))
        assert page.total == 2

    async def test_duplicate_name_is_integrity_violation(self, brands):
        await brands.save(BrandRequest(name="Makita", is_archived=False))
        with pytest.raises(DataIntegrityException):
            await brands.save(BrandRequest(name="Makita", is_archived=False))

    async def test_update_refreshes_updated_at(self, brands):
        saved = await brands.save(BrandRequest(name="Makita", is_archived=False))
        updated = await brands.save(BrandRequest(id=saved.id, name="Makita XR", is_archived=False))
        assert updated.created_at == saved.created_at
        assert updated.updated_at >= saved.updated_at
        assert updated.name == "Makita XR"


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class TestCategoryService:
    async def test_list_shows_roots_with_subcategories(self, categories):
        root = await categories.save(CategoryRequest(name="Power tools", is_archived=False))
        await categories.save(CategoryRequest(name="Drills", parent_category_id=root.id, is_archived=False))
        await categories.save(CategoryRequest(name="Saws", parent_category_id=root.id, is_archived=False))

        page = await categories.find_all(category_filter(None, False), page_request(1, 10))
        assert page.total == 1
        assert page.items[0].name == "Power tools"
        assert [sub.name for sub in page.items[0].subcategories] == ["Drills", "Saws"]

    async def test_detail_embeds_direct_subcategories(self, categories):
        root = await categories.save(CategoryRequest(name="Power tools", is_archived=False))
        drills = await categories.save(CategoryRequest(name="Drills", parent_category_id=root.id, is_archived=False))
        await categories.save(CategoryRequest(name="Cordless", parent_category_id=drills.id, is_archived=False))

        detail = await categories.find_by_id(root.id)
        assert [sub.name for sub in detail.subcategories] == ["Drills"]
        child = await categories.find_by_id(drills.id)
        assert child.parent_category_id == root.id
        assert [sub.name for sub in child.subcategories] == ["Cordless"]

    async def test_own_parent_rejected(self, categories):
        saved = await categories.save(CategoryRequest(name="Hand tools", is_archived=False))
        with pytest.raises(InvalidRequestException):
            await categories.save(
                CategoryRequest(id=saved.id, name="Hand tools", parent_category_id=saved.id, is_archived=False)
            )

    async def test_archiving_cascades_to_subcategories(self, categories):
        root = await categories.save(CategoryRequest(name="Power tools", is_archived=False))
        drills = await categories.save(CategoryRequest(name="Drills", parent_category_id=root.id, is_archived=False))

        archived = await categories.save(CategoryRequest(id=root.id, name="Power tools", is_archived=True))
        assert archived.is_archived is True
        assert all(sub.is_archived for sub in archived.subcategories)
        assert (await categories.find_by_id(drills.id)).is_archived is True

    async def test_missing_parent_is_integrity_violation(self, categories):
        with pytest.raises(DataIntegrityException):
            await categories.save(CategoryRequest(name="Orphan", parent_category_id=999, is_archived=False))


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class TestToolService:
    async def test_create_assigns_business_key(self, tools):
        saved = await tools.save(tool_request(price=Decimal("23400.11")))
        assert saved.uuid is not None
        assert saved.price == Decimal("23400.11")
        assert saved.labels == []

    async def test_update_keeps_business_key(self, tools):
        saved = await tools.save(tool_request())
        updated = await tools.save(tool_request(id=saved.id, name="Hammer drill"))
        assert updated.uuid == saved.uuid
        assert updated.name == "Hammer drill"

    async def test_associations_attached_by_id(self, tools, brands, categories, labels):
        brand = await brands.save(BrandRequest(name="Makita", is_archived=False))
        category = await categories.save(CategoryRequest(name="Drills", is_archived=False))
        label = await labels.save(LabelRequest(name="Fragile", is_archived=False))

        saved = await tools.save(tool_request(brand_id=brand.id, category_id=category.id, labels={label.id}))
        assert saved.brand.name == "Makita"
        assert saved.category.name == "Drills"
        assert [lbl.name for lbl in saved.labels] == ["Fragile"]

        page = await tools.find_all(name_filter(None, False), page_request(1, 10))
        item = page.items[0]
        assert (item.brand, item.category, item.labels) == ("Makita", "Drills", ["Fragile"])

    async def test_label_set_is_replaced(self, tools, labels, session_factory):
        a, b, c = [await labels.save(LabelRequest(name=n, is_archived=False)) for n in ("Alpha", "Beta", "Gamma")]
        saved = await tools.save(tool_request(labels={a.id, b.id}))
        updated = await tools.save(tool_request(id=saved.id, labels={b.id, c.id}))

        assert {lbl.id for lbl in updated.labels} == {b.id, c.id}
        async with session_factory() as session:
            rows = (await session.execute(select(ToolLabelLink.label_id))).scalars().all()
        assert sorted(rows) == sorted([b.id, c.id])

    async def test_missing_label_rolls_back_everything(self, tools, labels, session_factory):
        a = await labels.save(LabelRequest(name="Alpha", is_archived=False))
        saved = await tools.save(tool_request(labels={a.id}))

        with pytest.raises(DataIntegrityException):
            await tools.save(tool_request(id=saved.id, name="Renamed", labels={a.id, 9999}))

        found = await tools.find_by_id(saved.id)
        assert found.name == "Drill"
        assert [lbl.id for lbl in found.labels] == [a.id]
        async with session_factory() as session:
            count = (await session.execute(select(func.count()).select_from(ToolLabelLink))).scalar_one()
        assert count == 1

    async def test_missing_brand_on_create_persists_nothing(self, tools, session_factory):
        with pytest.raises(DataIntegrityException):
            await tools.save(tool_request(brand_id=12345))
        page = await tools.find_all(name_filter(None, False), page_request(1, 10))
        assert page.total == 0

    async def test_photo_uuid_missing(self, tools):
        saved = await tools.save(tool_request())
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await tools.find_photo_uuid(saved.id)
        assert str(exc_info.value) == f"Photo uuid not found in tool id: {saved.id}"


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestCommentService:
    async def test_listed_per_tool(self, tools, comments):
        drill = await tools.save(tool_request(name="Drill"))
        saw = await tools.save(tool_request(name="Saw"))
        person = uuid4()
        await comments.save(CommentRequest(tool_id=drill.id, content="Battery is weak", person_uuid=person))
        await comments.save(CommentRequest(tool_id=saw.id, content="Blade replaced", person_uuid=person))

        page = await comments.find_all(comment_filter(drill.id), page_request(1, 10))
        assert page.total == 1
        assert page.items[0].content == "Battery is weak"
        assert page.items[0].person is None

    async def test_update_changes_content_only(self, tools, comments):
        drill = await tools.save(tool_request(name="Drill"))
        saw = await tools.save(tool_request(name="Saw"))
        author = uuid4()
        saved = await comments.save(CommentRequest(tool_id=drill.id, content="First", person_uuid=author))

        updated = await comments.save(
            CommentRequest(id=saved.id, tool_id=saw.id, content="Edited", person_uuid=uuid4())
        )
        assert updated.content == "Edited"
        assert updated.person_uuid == author
        page = await comments.find_all(comment_filter(drill.id), page_request(1, 10))
        assert [c.id for c in page.items] == [saved.id]

    async def test_missing_tool_is_integrity_violation(self, comments):
        with pytest.raises(DataIntegrityException):
            await comments.save(CommentRequest(tool_id=999, content="Lost", person_uuid=uuid4()))

    async def test_delete(self, tools, comments):
        drill = await tools.save(tool_request())
        saved = await comments.save(CommentRequest(tool_id=drill.id, content="Remove me", person_uuid=uuid4()))
        await comments.delete_by_id(saved.id)
        page = await comments.find_all(comment_filter(drill.id), page_request(1, 10))
        assert page.total == 0

    async def test_newest_first_by_default(self, tools, comments, session_factory):
        drill = await tools.save(tool_request())
        first = await comments.save(CommentRequest(tool_id=drill.id, content="one", person_uuid=uuid4()))
        second = await comments.save(CommentRequest(tool_id=drill.id, content="two", person_uuid=uuid4()))
        async with session_factory() as session:
            (await session.get(Comment, first.id)).created_at = datetime(2024, 1, 1)
            (await session.get(Comment, second.id)).created_at = datetime(2024, 1, 1) + timedelta(hours=1)
            await session.commit()

        page = await comments.find_all(comment_filter(drill.id), page_request(1, 10, DEFAULT_SORT))
        assert [c.content for c in page.items] == ["two", "one"]
