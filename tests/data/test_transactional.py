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
"""Tests for the @transactional decorator."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from toolsmanagement.data.auditing import AuditingEntityListener
from toolsmanagement.data.engine import create_engine, create_schema, create_session_factory
from toolsmanagement.data.repository import Repository
from toolsmanagement.data.transactional import Propagation, current_session, transactional
from toolsmanagement.kernel.exceptions import DataIntegrityException
from toolsmanagement.modules.tools.models import Brand, OwnershipType, Tool
from toolsmanagement.modules.tools.schemas import BrandRequest
from toolsmanagement.modules.tools.services import BrandRepository, BrandService


class BrandStore:
    def __init__(self, session_factory):
        self._session_factory = session_factory
        self._repository = Repository(Brand)

    @transactional()
    async def create(self, name: str) -> int:
        brand = await self._repository.save(Brand(name=name))
        return brand.id

    @transactional()
    async def create_then_fail(self, name: str) -> None:
        await self._repository.save(Brand(name=name))
        raise RuntimeError("boom")

    @transactional()
    async def create_two(self, first: str, second: str) -> None:
        await self.create(first)
        await self.create(second)

    @transactional(read_only=True)
    async def count(self) -> int:
        session = current_session()
        return (await session.execute(select(func.count()).select_from(Brand))).scalar_one()

    @transactional(propagation=Propagation.MANDATORY)
    async def mandatory(self) -> None:
        pass

    @transactional(read_only=True)
    async def sessions_seen(self) -> tuple[object, object]:
        before = self._repository._require_session()
        await asyncio.sleep(0)
        return before, self._repository._require_session()

    @transactional()
    async def tool_with_missing_brand(self) -> None:
        tools = Repository(Tool, current_session())
        await tools.save(Tool(name="Drill", ownership_type=OwnershipType.OWN, brand_id=9999, uuid=uuid4()))


@pytest.fixture
def store(session_factory):
    return BrandStore(session_factory)


class TestTransactional:
    async def test_commits_on_success(self, store):
        await store.create("Makita")
        assert await store.count() == 1

    async def test_rolls_back_on_error(self, store):
        with pytest.raises(RuntimeError):
            await store.create_then_fail("Bosch")
        assert await store.count() == 0

    async def test_nested_calls_join(self, store):
        with pytest.raises(DataIntegrityException):
            await store.create_two("Hilti", "Hilti")
        assert await store.count() == 0

    async def test_unique_violation_translated(self, store):
        await store.create("Makita")
        with pytest.raises(DataIntegrityException) as exc_info:
            await store.create("Makita")
        assert exc_info.value.code == "DATA_INTEGRITY_VIOLATION"
        assert await store.count() == 1

    async def test_foreign_key_violation_translated(self, store):
        with pytest.raises(DataIntegrityException):
            await store.tool_with_missing_brand()

    async def test_mandatory_requires_transaction(self, store):
        with pytest.raises(RuntimeError):
            await store.mandatory()

    async def test_no_session_outside_transaction(self):
        assert current_session() is None


@pytest.fixture
async def file_session_factory(tmp_path):
    # One connection per session, as with a server database.
    AuditingEntityListener().register()
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}")
    await create_schema(engine)
    yield create_session_factory(engine)
    await engine.dispose()


class TestConcurrentTransactions:
    async def test_each_task_sees_its_own_session(self, store):
        first, second = await asyncio.gather(store.sessions_seen(), store.sessions_seen())
        assert first[0] is first[1]
        assert second[0] is second[1]
        assert first[0] is not second[0]

    async def test_shared_repository_outside_transaction_fails(self, store):
        with pytest.raises(RuntimeError, match="no active session"):
            await store._repository.find_by_id(1)

    async def test_concurrent_updates_through_one_service(self, file_session_factory):
        brands = BrandService(BrandRepository(), file_session_factory)
        makita = await brands.save(BrandRequest(name="Makita", is_archived=False))
        bosch = await brands.save(BrandRequest(name="Bosch", is_archived=False))

        updated = await asyncio.gather(
            brands.save(BrandRequest(id=makita.id, name="Makita XR", is_archived=False)),
            brands.save(BrandRequest(id=bosch.id, name="Bosch Pro", is_archived=True)),
        )

        assert [brand.name for brand in updated] == ["Makita XR", "Bosch Pro"]
        assert (await brands.find_by_id(makita.id)).name == "Makita XR"
        reloaded = await brands.find_by_id(bosch.id)
        assert (reloaded.name, reloaded.is_archived) == ("Bosch Pro", True)
