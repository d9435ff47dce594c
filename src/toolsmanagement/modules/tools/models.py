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
"""SQLAlchemy models of the tools module: tools, their brands, categories,
labels and comments."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, ForeignKey, Numeric, String, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from toolsmanagement.data.entity import ArchivableMixin, Base, BaseEntity, BusinessKeyMixin
from toolsmanagement.data.reference import Reference, replace_links


class OwnershipType(enum.Enum):
    OWN = "OWN"
    RENT = "RENT"


class Brand(ArchivableMixin, BaseEntity):
    __tablename__ = "tools_brand"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class ToolLabel(ArchivableMixin, BaseEntity):
    __tablename__ = "tools_label"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Category(ArchivableMixin, BaseEntity):
    """Tool category; a category with no parent is a root category."""

    __tablename__ = "tools_category"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    parent_category_id: Mapped[int | None] = mapped_column(ForeignKey("tools_category.id"), nullable=True)

    # Direct children only; deeper levels are never read.
    subcategories: Mapped[list[Category]] = relationship(
        viewonly=True,
        lazy="selectin",
        join_depth=1,
        order_by="Category.name",
    )


class ToolLabelLink(Base):
    __tablename__ = "tools_tool_label"

    tool_id: Mapped[int] = mapped_column(ForeignKey("tools_tool.id", ondelete="CASCADE"), primary_key=True)
    label_id: Mapped[int] = mapped_column(ForeignKey("tools_label.id"), primary_key=True)


class Tool(ArchivableMixin, BusinessKeyMixin, BaseEntity):
    """Inventory item.

    ``brand_id`` and ``category_id`` are written from references; the
    ``brand``, ``category`` and ``labels`` relationships only read.
    """

    __tablename__ = "tools_tool"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_consumable: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
    inventory_number: Mapped[str | None] = mapped_column(String(255))
    responsible_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    project_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    price: Mapped[Decimal | None] = mapped_column(Numeric(14, 2))
    ownership_type: Mapped[OwnershipType] = mapped_column(
        Enum(OwnershipType, native_enum=False, length=16),
        nullable=False,
    )
    rent_till: Mapped[date | None] = mapped_column(Date)
    is_kit: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
    kit_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    photo_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    brand_id: Mapped[int | None] = mapped_column(ForeignKey("tools_brand.id"))
    category_id: Mapped[int | None] = mapped_column(ForeignKey("tools_category.id"))

    brand: Mapped[Brand | None] = relationship(viewonly=True, lazy="selectin")
    category: Mapped[Category | None] = relationship(viewonly=True, lazy="selectin")
    label_links: Mapped[list[ToolLabelLink]] = relationship(
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    labels: Mapped[list[ToolLabel]] = relationship(
        secondary="tools_tool_label",
        viewonly=True,
        lazy="selectin",
        order_by="ToolLabel.name",
    )

    def replace_labels(self, refs: Iterable[Reference[ToolLabel]]) -> None:
        self.label_links = replace_links(
            self.label_links,
            refs,
            key=lambda link: link.label_id,
            factory=lambda id: ToolLabelLink(label_id=id),
        )


class Comment(BaseEntity):
    """Free-text note on a tool left by a person."""

    __tablename__ = "tools_comment"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    person_uuid: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    tool_id: Mapped[int] = mapped_column(ForeignKey("tools_tool.id", ondelete="CASCADE"), nullable=False)
