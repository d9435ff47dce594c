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
"""SQLAlchemy models of the stocks module."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from toolsmanagement.data.entity import ArchivableMixin, BaseEntity, BusinessKeyMixin


class Stock(ArchivableMixin, BusinessKeyMixin, BaseEntity):
    """A place where tools are kept."""

    __tablename__ = "stocks_stock"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(1024), nullable=False)
    company_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    responsible_company_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    responsible_person_uuid: Mapped[UUID | None] = mapped_column(Uuid)
