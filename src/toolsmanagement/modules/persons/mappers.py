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
"""Conversions between persons-module entities, save requests and views."""

from __future__ import annotations

from collections.abc import Iterable

from toolsmanagement.data.reference import Reference
from toolsmanagement.modules.persons.models import Person, PersonLabel, Role
from toolsmanagement.modules.persons.schemas import (
    LabelInfo,
    LabelRequest,
    NamedShort,
    PersonInfo,
    PersonItem,
    PersonRequest,
    RoleInfo,
    RoleRequest,
)


def apply_label(label: PersonLabel, rq: LabelRequest) -> PersonLabel:
    label.name = rq.name
    label.is_archived = rq.is_archived
    return label


def apply_role(role: Role, rq: RoleRequest) -> Role:
    role.name = rq.name
    role.is_archived = rq.is_archived
    return role


def apply_person(
    person: Person,
    rq: PersonRequest,
    labels: Iterable[Reference[PersonLabel]],
    roles: Iterable[Reference[Role]],
) -> Person:
    if person.id is None:
        person.assign_business_key()
    person.replace_labels(labels)
    person.replace_roles(roles)
    person.phone_number = rq.phone_number
    person.company_uuid = rq.company_uuid
    person.surname = rq.surname
    person.name = rq.name
    person.patronymic = rq.patronymic
    person.job_title = rq.job_title
    person.is_archived = rq.is_archived
    person.is_unregistered = rq.is_unregistered
    person.photo_uuid = rq.photo_uuid
    return person


def to_label_info(label: PersonLabel) -> LabelInfo:
    return LabelInfo.model_validate(label)


def to_role_info(role: Role) -> RoleInfo:
    return RoleInfo.model_validate(role)


def _person_fields(person: Person) -> dict:
    return {
        "id": person.id,
        "uuid": person.uuid,
        "phone_number": person.phone_number,
        "company_uuid": person.company_uuid,
        "surname": person.surname,
        "name": person.name,
        "patronymic": person.patronymic,
        "job_title": person.job_title,
        "is_archived": person.is_archived,
        "is_unregistered": person.is_unregistered,
        "photo_uuid": person.photo_uuid,
        "created_at": person.created_at,
        "updated_at": person.updated_at,
    }


def to_person_item(person: Person) -> PersonItem:
    return PersonItem(
        **_person_fields(person),
        labels=[label.name for label in person.labels],
        roles=[role.name for role in person.roles],
    )


def to_person_info(person: Person) -> PersonInfo:
    return PersonInfo(
        **_person_fields(person),
        labels=[NamedShort(id=label.id, name=label.name) for label in person.labels],
        roles=[NamedShort(id=role.id, name=role.name) for role in person.roles],
    )
