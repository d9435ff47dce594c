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
"""SQLAlchemy models of the persons module."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from toolsmanagement.data.entity import ArchivableMixin, Base, BaseEntity, BusinessKeyMixin
from toolsmanagement.data.reference import Reference, replace_links


class PersonLabel(ArchivableMixin, BaseEntity):
    __tablename__ = "persons_label"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class Role(ArchivableMixin, BaseEntity):
    __tablename__ = "persons_role"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)


class PersonLabelLink(Base):
    __tablename__ = "persons_person_label"

    person_id: Mapped[int] = mapped_column(ForeignKey("persons_person.id", ondelete="CASCADE"), primary_key=True)
    label_id: Mapped[int] = mapped_column(ForeignKey("persons_label.id"), primary_key=True)


class PersonRoleLink(Base):
    __tablename__ = "persons_person_role"

    person_id: Mapped[int] = mapped_column(ForeignKey("persons_person.id", ondelete="CASCADE"), primary_key=True)
    role_id: Mapped[int] = mapped_column(ForeignKey("persons_role.id"), primary_key=True)


class Person(ArchivableMixin, BusinessKeyMixin, BaseEntity):
    """A worker, registered in a company or not."""

    __tablename__ = "persons_person"

    phone_number: Mapped[str | None] = mapped_column(String(32))
    company_uuid: Mapped[UUID | None] = mapped_column(Uuid)
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    patronymic: Mapped[str | None] = mapped_column(String(255))
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    is_unregistered: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
    photo_uuid: Mapped[UUID | None] = mapped_column(Uuid)

    label_links: Mapped[list[PersonLabelLink]] = relationship(
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    role_links: Mapped[list[PersonRoleLink]] = relationship(
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )
    labels: Mapped[list[PersonLabel]] = relationship(
        secondary="persons_person_label",
        viewonly=True,
        lazy="selectin",
        order_by="PersonLabel.name",
    )
    roles: Mapped[list[Role]] = relationship(
        secondary="persons_person_role",
        viewonly=True,
        lazy="selectin",
        order_by="Role.name",
    )

    def replace_labels(self, refs: Iterable[Reference[PersonLabel]]) -> None:
        self.label_links = replace_links(
            self.label_links,
            refs,
            key=lambda link: link.label_id,
            factory=lambda id: PersonLabelLink(label_id=id),
        )

    def replace_roles(self, refs: Iterable[Reference[Role]]) -> None:
        self.role_links = replace_links(
            self.role_links,
            refs,
            key=lambda link: link.role_id,
            factory=lambda id: PersonRoleLink(role_id=id),
        )
