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
"""Declarative base and shared columns for all registry entities."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, Boolean, DateTime, Integer, MetaData, Uuid, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all registry entities."""

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s",
        }
    )


class BaseEntity(Base):
    """Store-assigned sequential id plus audit timestamps.

    ``created_at`` is written once on insert; ``updated_at`` is refreshed on
    every flush that touches the row (see
    :class:`~toolsmanagement.data.auditing.AuditingEntityListener`).
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )


class ArchivableMixin:
    """Soft-delete flag: archived rows stay in the table."""

    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)


class BusinessKeyMixin:
    """Externally shared UUID, assigned once when the row is first created."""

    uuid: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False)

    def assign_business_key(self) -> None:
        """Generate the business key if none has been assigned yet."""
        if self.uuid is None:
            self.uuid = uuid4()
