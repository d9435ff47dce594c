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
"""Save, find and list operations shared by every entity family."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm.interfaces import ORMOption

from toolsmanagement.data.page import Page
from toolsmanagement.data.pageable import Pageable
from toolsmanagement.data.repository import Repository
from toolsmanagement.data.specification import Specification
from toolsmanagement.data.transactional import transactional
from toolsmanagement.integration.file_storage import FileStorage, FileType
from toolsmanagement.kernel.exceptions import ResourceNotFoundException, ServiceUnavailableException
from toolsmanagement.web.params import UploadedFile

logger = structlog.get_logger(__name__)

E = TypeVar("E")
RQ = TypeVar("RQ")
INFO = TypeVar("INFO")
ITEM = TypeVar("ITEM")


class CrudService(Generic[E, RQ, INFO, ITEM]):
    """Base for entity services.

    Subclasses name the entity and implement the three mapping hooks:

    - :meth:`apply` copies a save request onto a new or loaded entity,
      attaching associations as references
    - :meth:`to_info` builds the detail view
    - :meth:`to_item` builds the list view

    Every public method runs in its own transaction, and entities are mapped
    to views before it ends.
    """

    entity_name: ClassVar[str] = "Entity"
    entity_type: ClassVar[type]
    load_options: ClassVar[Sequence[ORMOption]] = ()

    def __init__(self, repository: Repository[E, int], session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._repository = repository
        self._session_factory = session_factory

    def new_entity(self) -> E:
        return self.entity_type()

    def apply(self, entity: E, rq: RQ) -> None:
        raise NotImplementedError

    def to_info(self, entity: E) -> INFO:
        raise NotImplementedError

    def to_item(self, entity: E) -> ITEM:
        raise NotImplementedError

    async def _get_or_404(self, id: int) -> E:
        entity = await self._repository.find_by_id(id, options=self.load_options)
        if entity is None:
            raise ResourceNotFoundException(
                f"{self.entity_name} not found id: {id}",
                context={"entity": self.entity_name, "id": id},
            )
        return entity

    @transactional(read_only=True)
    async def find_by_id(self, id: int) -> INFO:
        return self.to_info(await self._get_or_404(id))

    @transactional(read_only=True)
    async def find_all(self, spec: Specification, pageable: Pageable) -> Page[ITEM]:
        page = await self._repository.find_all_by_spec_paged(spec, pageable, options=self.load_options)
        return page.map(self.to_item)

    @transactional()
    async def save(self, rq: Any) -> INFO:
        """Insert when ``rq.id`` is absent, otherwise update the stored row.

        An unknown id raises :class:`ResourceNotFoundException`. A reference
        to a missing associated row fails when the write is flushed.
        """
        if rq.id is None:
            entity = self.new_entity()
        else:
            entity = await self._get_or_404(rq.id)
        self.apply(entity, rq)
        saved = await self._repository.save(entity)
        logger.info("entity_saved", entity=self.entity_name, id=saved.id, created=rq.id is None)  # type: ignore[attr-defined]
        return self.to_info(saved)


class PhotoSupport(CrudService[E, RQ, INFO, ITEM]):
    """Service whose entity carries a ``photo_uuid`` kept in file storage."""

    photo_file_type: ClassVar[FileType]

    def __init__(
        self,
        repository: Repository[E, int],
        session_factory: async_sessionmaker[AsyncSession],
        file_storage: FileStorage,
    ) -> None:
        super().__init__(repository, session_factory)
        self._file_storage = file_storage

    async def upload_photo(self, file: UploadedFile) -> UUID:
        rs = await self._file_storage.upload(file, self.photo_file_type)
        if rs.error is not None or rs.uuid is None:
            raise ServiceUnavailableException(f"Upload photo error: {rs.error}")
        logger.info("photo_uploaded", entity=self.entity_name, photo_uuid=str(rs.uuid))
        return rs.uuid

    @transactional(read_only=True)
    async def find_photo_uuid(self, id: int) -> UUID:
        entity = await self._repository.find_by_id(id)
        photo_uuid = getattr(entity, "photo_uuid", None)
        if photo_uuid is None:
            raise ResourceNotFoundException(
                f"Photo uuid not found in {self.entity_name.lower()} id: {id}",
                context={"entity": self.entity_name, "id": id},
            )
        return photo_uuid

    async def find_photo(self, id: int) -> bytes:
        return await self._file_storage.download(await self.find_photo_uuid(id), self.photo_file_type)
