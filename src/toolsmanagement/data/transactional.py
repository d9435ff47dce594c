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
"""Declarative transaction management decorator."""

from __future__ import annotations

import enum
import functools
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from toolsmanagement.data.session import bind_session, current_session, unbind_session
from toolsmanagement.kernel.exceptions import DataIntegrityException

F = TypeVar("F", bound=Callable[..., Any])

logger = structlog.get_logger(__name__)

__all__ = ["Propagation", "current_session", "transactional"]


class Propagation(enum.Enum):
    """Transaction propagation behaviour."""

    REQUIRED = "REQUIRED"
    REQUIRES_NEW = "REQUIRES_NEW"
    MANDATORY = "MANDATORY"


def transactional(
    propagation: Propagation = Propagation.REQUIRED,
    read_only: bool = False,
) -> Callable[[F], F]:
    """Run an async service method inside one database transaction.

    The session comes from ``self._session_factory`` and is bound to the
    running task for the duration of the call; repositories read it through
    :func:`current_session`. A ``REQUIRED`` call nested in another
    transactional call joins the outer transaction.

    The transaction commits when the method returns and rolls back when it
    raises. A ``read_only`` transaction is never committed; closing the
    session discards it while loaded instances stay readable. Constraint
    violations reported by the store, whether during a flush in the method or
    at commit, are re-raised as :class:`DataIntegrityException` after the
    rollback.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            self_arg = args[0] if args else None
            existing = current_session()

            if propagation is Propagation.MANDATORY:
                if existing is None:
                    raise RuntimeError("Propagation.MANDATORY requires an active transaction")
                return await func(*args, **kwargs)

            if propagation is Propagation.REQUIRED and existing is not None:
                return await func(*args, **kwargs)

            session_factory: async_sessionmaker[AsyncSession] | None = getattr(self_arg, "_session_factory", None)
            if session_factory is None:
                raise RuntimeError(
                    "No _session_factory available on self; ensure the service was built with an async_sessionmaker"
                )

            try:
                async with session_factory() as session:
                    token = bind_session(session)
                    try:
                        result = await func(*args, **kwargs)
                        if not read_only:
                            await session.commit()
                    except BaseException:
                        await session.rollback()
                        raise
                    finally:
                        unbind_session(token)
                    return result
            except IntegrityError as exc:
                logger.warning(
                    "transaction_integrity_violation",
                    method=func.__qualname__,
                    error=str(exc.orig),
                )
                raise DataIntegrityException(
                    f"Data integrity violation: {exc.orig}",
                    context={"method": func.__qualname__},
                ) from exc

        wrapper.__transactional__ = True  # type: ignore[attr-defined]
        wrapper.__propagation__ = propagation  # type: ignore[attr-defined]
        wrapper.__read_only__ = read_only  # type: ignore[attr-defined]

        return wrapper  # type: ignore[return-value]

    return decorator
