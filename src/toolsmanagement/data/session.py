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
"""The session of the transaction running in the current task.

Each asyncio task carries its own value, so concurrent requests handled by
the same service and repository instances never see each other's session.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

from sqlalchemy.ext.asyncio import AsyncSession

_active_session: ContextVar[AsyncSession | None] = ContextVar("_active_session", default=None)


def current_session() -> AsyncSession | None:
    """Session of the transaction running in this context, if any."""
    return _active_session.get()


def bind_session(session: AsyncSession) -> Token[AsyncSession | None]:
    return _active_session.set(session)


def unbind_session(token: Token[AsyncSession | None]) -> None:
    _active_session.reset(token)
