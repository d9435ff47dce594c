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
"""Services of the tools module."""

from __future__ import annotations

from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from toolsmanagement.data.page import Page
from toolsmanagement.data.pageable import Pageable
from toolsmanagement.data.repository import Repository
from toolsmanagement.data.specification import Specification
from toolsmanagement.data.transactional import current_session, transactional
from toolsmanagement.integration.file_storage import FileStorage, FileType
from toolsmanagement.kernel.exceptions import InvalidRequestException, ResourceNotFoundException
from toolsmanagement.modules.base import CrudService, PhotoSupport
from toolsmanagement.modules.persons.models import Person
from toolsmanagement.modules.tools import mappers
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
    ToolInfo,
    ToolItem,
    ToolRequest,
)

logger = structlog.get_logger(__name__)


class BrandRepository(Repository[Brand, int]):
    pass


class ToolLabelRepository(Repository[ToolLabel, int]):
    pass


class CategoryRepository(Repository[Category, int]):
    pass


class ToolRepository(Repository[Tool, int]):
    pass


class CommentRepository(Repository[Comment, int]):
    pass


class BrandService(CrudService[Brand, BrandRequest, BrandInfo, BrandInfo]):
    entity_name = "Brand"
    entity_type = Brand

    def apply(self, entity: Brand, rq: BrandRequest) -> None:
        mappers.apply_brand(entity, rq)

    def to_info(self, entity: Brand) -> BrandInfo:
        return mappers.to_brand_info(entity)

    to_item = to_info


class ToolLabelService(CrudService[ToolLabel, LabelRequest, LabelInfo, LabelInfo]):
    entity_name = "Label"
    entity_type = ToolLabel

    def apply(self, entity: ToolLabel, rq: LabelRequest) -> None:
        mappers.apply_label(entity, rq)

    def to_info(self, entity: ToolLabel) -> LabelInfo:
        return mappers.to_label_info(entity)

    to_item = to_info


class CategoryService(CrudService[Category, CategoryRequest, CategoryInfo, CategoryInfo]):
    """Categories form a tree: a root category lists its subcategories.

    Archiving a category archives its direct subcategories in the same
    transaction.
    """

    entity_name = "Category"
    entity_type = Category
    load_options = (selectinload(Category.subcategories),)

    def apply(self, entity: Category, rq: CategoryRequest) -> None:
        if rq.id is not None and rq.id == rq.parent_category_id:
            raise InvalidRequestException(
                f"Category id: {rq.id} can not be its own parent",
                context={"id": rq.id},
            )
        archiving = rq.is_archived and not entity.is_archived
        parent = self._repository.get_reference(rq.parent_category_id) if rq.parent_category_id is not None else None
        mappers.apply_category(entity, rq, parent)
        if archiving and entity.id is not None:
            for sub in entity.subcategories:
                sub.is_archived = True
            logger.info("subcategories_archived", id=entity.id, count=len(entity.subcategories))

    def to_info(self, entity: Category) -> CategoryInfo:
        return mappers.to_category_info(entity)

    to_item = to_info


class ToolService(PhotoSupport[Tool, ToolRequest, ToolInfo, ToolItem]):
    entity_name = "Tool"
    entity_type = Tool
    photo_file_type = FileType.PHOTO_TOOL

    def __init__(
        self,
        repository: ToolRepository,
        brand_repository: BrandRepository,
        category_repository: CategoryRepository,
        label_repository: ToolLabelRepository,
        session_factory: async_sessionmaker[AsyncSession],
        file_storage: FileStorage,
    ) -> None:
        super().__init__(repository, session_factory, file_storage)
        self._brands = brand_repository
        self._categories = category_repository
        self._labels = label_repository

    def apply(self, entity: Tool, rq: ToolRequest) -> None:
        mappers.apply_tool(
            entity,
            rq,
            brand=self._brands.get_reference(rq.brand_id) if rq.brand_id is not None else None,
            category=self._categories.get_reference(rq.category_id) if rq.category_id is not None else None,
            labels=self._labels.get_references(rq.labels),
        )

    def to_info(self, entity: Tool) -> ToolInfo:
        return mappers.to_tool_info(entity)

    def to_item(self, entity: Tool) -> ToolItem:
        return mappers.to_tool_item(entity)


class CommentService:
    """Comments on a tool: listed per tool, editable content, hard delete."""

    def __init__(self, repository: CommentRepository, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._repository = repository
        self._session_factory = session_factory

    @transactional(read_only=True)
    async def find_all(self, spec: Specification, pageable: Pageable) -> Page[CommentItem]:
        page = await self._repository.find_all_by_spec_paged(spec, pageable)
        persons = await self._find_persons({comment.person_uuid for comment in page.items})
        return page.map(lambda comment: mappers.to_comment_item(comment, persons.get(comment.person_uuid)))

    @transactional()
    async def save(self, rq: CommentRequest) -> CommentItem:
        """Create a comment, or change only the content of an existing one."""
        if rq.id is None:
            comment = mappers.apply_new_comment(Comment(), rq)
        else:
            comment = await self._repository.find_by_id(rq.id)
            if comment is None:
                raise ResourceNotFoundException(f"Comment not found id: {rq.id}", context={"id": rq.id})
            mappers.update_comment_content(comment, rq)
        saved = await self._repository.save(comment)
        logger.info("entity_saved", entity="Comment", id=saved.id, created=rq.id is None)
        persons = await self._find_persons({saved.person_uuid})
        return mappers.to_comment_item(saved, persons.get(saved.person_uuid))

    @transactional()
    async def delete_by_id(self, id: int) -> None:
        comment = await self._repository.find_by_id(id)
        if comment is None:
            logger.debug("comment_delete_missing", id=id)
            return
        await self._repository.delete(comment)
        logger.info("comment_deleted", id=id)

    @staticmethod
    async def _find_persons(uuids: set[UUID]) -> dict[UUID, Person]:
        session = current_session()
        if not uuids or session is None:
            return {}
        result = await session.execute(select(Person).where(Person.uuid.in_(uuids)))
        return {person.uuid: person for person in result.scalars()}
