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
"""Services of the persons module."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from toolsmanagement.data.repository import Repository
from toolsmanagement.integration.file_storage import FileStorage, FileType
from toolsmanagement.modules.base import CrudService, PhotoSupport
from toolsmanagement.modules.persons import mappers
from toolsmanagement.modules.persons.models import Person, PersonLabel, Role
from toolsmanagement.modules.persons.schemas import (
    LabelInfo,
    LabelRequest,
    PersonInfo,
    PersonItem,
    PersonRequest,
    RoleInfo,
    RoleRequest,
)


class PersonLabelRepository(Repository[PersonLabel, int]):
    pass


class RoleRepository(Repository[Role, int]):
    pass


class PersonRepository(Repository[Person, int]):
    pass


class PersonLabelService(CrudService[PersonLabel, LabelRequest, LabelInfo, LabelInfo]):
    entity_name = "Label"
    entity_type = PersonLabel

    def apply(self, entity: PersonLabel, rq: LabelRequest) -> None:
        mappers.apply_label(entity, rq)

    def to_info(self, entity: PersonLabel) -> LabelInfo:
        return mappers.to_label_info(entity)

    to_item = to_info


class RoleService(CrudService[Role, RoleRequest, RoleInfo, RoleInfo]):
    entity_name = "Role"
    entity_type = Role

    def apply(self, entity: Role, rq: RoleRequest) -> None:
        mappers.apply_role(entity, rq)

    def to_info(self, entity: Role) -> RoleInfo:
        return mappers.to_role_info(entity)

    to_item = to_info


class PersonService(PhotoSupport[Person, PersonRequest, PersonInfo, PersonItem]):
    entity_name = "Person"
    entity_type = Person
    photo_file_type = FileType.PHOTO_PERSON

    def __init__(
        self,
        repository: PersonRepository,
        label_repository: PersonLabelRepository,
        role_repository: RoleRepository,
        session_factory: async_sessionmaker[AsyncSession],
        file_storage: FileStorage,
    ) -> None:
        super().__init__(repository, session_factory, file_storage)
        self._labels = label_repository
        self._roles = role_repository

    def apply(self, entity: Person, rq: PersonRequest) -> None:
        mappers.apply_person(
            entity,
            rq,
            labels=self._labels.get_references(rq.labels),
            roles=self._roles.get_references(rq.roles),
        )

    def to_info(self, entity: Person) -> PersonInfo:
        return mappers.to_person_info(entity)

    def to_item(self, entity: Person) -> PersonItem:
        return mappers.to_person_item(entity)
