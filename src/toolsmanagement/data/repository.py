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
"""Generic async repository built on SQLAlchemy 2.0."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar, cast, get_args, get_origin

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from toolsmanagement.data.page import Page
from toolsmanagement.data.pageable import Pageable, Sort
from toolsmanagement.data.query_compiler import SpecificationCompiler
from toolsmanagement.data.reference import Reference, get_reference, get_references
from toolsmanagement.data.session import current_session
from toolsmanagement.data.specification import NO_OP, Specification

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(Generic[T, ID]):
    """Generic data access for one SQLAlchemy entity.

    Every call uses the session of the transaction running in the current
    task (see :func:`~toolsmanagement.data.transactional.transactional`), so
    one instance can serve concurrent requests. A *session* given to the
    constructor is used only outside a transaction; with neither, calls raise
    ``RuntimeError``.

    Usage::

        class BrandRepository(Repository[Brand, int]):
            pass  # entity type auto-extracted
    """

    _entity_type: type | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", []):
            if get_origin(base) is Repository:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    cls._entity_type = args[0]
                break

    def __init__(self, model: type[T] | None = None, session: AsyncSession | None = None) -> None:
        resolved = model or getattr(type(self), "_entity_type", None)
        if resolved is None:
            raise TypeError(
                f"{type(self).__name__} requires either Repository[Entity, ID] declaration or explicit model argument"
            )
        self._model: type[T] = cast(type[T], resolved)
        self._session = session
        self._compiler = SpecificationCompiler(self._model)

    @property
    def model(self) -> type[T]:
        return self._model

    def _require_session(self) -> AsyncSession:
        session = current_session()
        if session is None:
            session = self._session
        if session is None:
            raise RuntimeError(f"{type(self).__name__} has no active session; call it from a @transactional method")
        return session

    async def save(self, entity: T) -> T:
        """Persist an entity (insert or update) and flush it to the store."""
        session = self._require_session()
        session.add(entity)
        await session.flush()
        await session.refresh(entity)
        return entity

    async def find_by_id(self, id: ID, options: Sequence[ORMOption] = ()) -> T | None:
        """Find an entity by its primary key."""
        session = self._require_session()
        return await session.get(self._model, id, options=options)

    def get_reference(self, id: ID) -> Reference[T]:
        """Identifier-only handle; the store is not read."""
        return get_reference(self._model, id)

    def get_references(self, ids: Sequence[ID] | set[ID] | frozenset[ID] | None) -> frozenset[Reference[T]]:
        return get_references(self._model, ids)

    async def exists(self, id: ID) -> bool:
        session = self._require_session()
        stmt = select(func.count()).select_from(self._model).where(self._model.id == id)  # type: ignore[attr-defined]
        return bool((await session.execute(stmt)).scalar_one())

    async def find_all_by_spec(
        self,
        spec: Specification = NO_OP,
        sort: Sort | None = None,
        options: Sequence[ORMOption] = (),
    ) -> list[T]:
        """Find every entity matching *spec*, in *sort* order."""
        session = self._require_session()
        stmt = self._compiler.apply(select(self._model), spec)
        if sort is not None:
            stmt = self._compiler.apply_sort(stmt, sort)
        if options:
            stmt = stmt.options(*options)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def find_all_by_spec_paged(
        self,
        spec: Specification,
        pageable: Pageable,
        options: Sequence[ORMOption] = (),
    ) -> Page[T]:
        """One page of entities matching *spec*, plus the total match count."""
        session = self._require_session()
        filtered = self._compiler.apply(select(self._model), spec)

        count_stmt = select(func.count()).select_from(filtered.subquery())
        total = (await session.execute(count_stmt)).scalar_one()

        stmt = self._compiler.apply_sort(filtered, pageable.sort)
        stmt = stmt.offset(pageable.offset).limit(pageable.size)
        if options:
            stmt = stmt.options(*options)
        result = await session.execute(stmt)
        items = list(result.scalars().all())

        return Page.of(items, total, pageable)

    async def delete(self, entity: T) -> None:
        session = self._require_session()
        await session.delete(entity)
        await session.flush()
