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
"""Shared fixtures: an in-memory SQLite database with the full schema."""

import pytest

import toolsmanagement.modules.persons.models  # noqa: F401
import toolsmanagement.modules.stocks.models  # noqa: F401
import toolsmanagement.modules.tools.models  # noqa: F401
from toolsmanagement.data.auditing import AuditingEntityListener
from toolsmanagement.data.engine import create_engine, create_schema, create_session_factory


@pytest.fixture
async def engine():
    AuditingEntityListener().register()
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
