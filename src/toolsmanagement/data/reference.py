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
"""Identifier-only association handles.

A :class:`Reference` stands in for an associated row when all a save needs is
the foreign-key link: ``tool.brand_id = ref.id`` or one link row per label.
Building one never touches the store, so a reference to a missing row is only
detected when the write is flushed, as a foreign-key violation.

References compare by entity type and id, so a set of references built from a
submitted id list is already de-duplicated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
L = TypeVar("L")


@dataclass(frozen=True)
class Reference(Generic[T]):
    """Handle to a row of *entity_type* with primary key *id*.

    It exposes nothing but the key; read the aggregate through its repository
    when its fields are needed.
    """

    entity_type: type[T]
    id: Any

    def __repr__(self) -> str:
        return f"Reference({self.entity_type.__name__}, id={self.id!r})"


def get_reference(entity_type: type[T], id: Any) -> Reference[T]:
    """Handle for *id*; the row is not checked for existence."""
    if id is None:
        raise ValueError(f"Cannot reference {entity_type.__name__} without an id")
    return Reference(entity_type, id)


def get_references(entity_type: type[T], ids: Iterable[Any] | None) -> frozenset[Reference[T]]:
    """Handles for every id in *ids*, duplicates collapsed."""
    return frozenset(get_reference(entity_type, id) for id in ids or ())


def reference_id(ref: Reference[Any] | None) -> Any:
    """Foreign-key value for an optional reference."""
    return None if ref is None else ref.id


def replace_links(
    links: Iterable[L],
    refs: Iterable[Reference[Any]],
    key: Callable[[L], Any],
    factory: Callable[[Any], L],
) -> list[L]:
    """Link rows for exactly the referenced ids.

    Links whose member id is still referenced are kept, the rest are dropped,
    and one new link is built per newly referenced id. The result is the same
    as clearing the collection and adding every reference, without deleting
    and re-inserting a row under the same key in one flush.
    """
    wanted = {ref.id for ref in refs}
    kept = [link for link in links if key(link) in wanted]
    present = {key(link) for link in kept}
    return kept + [factory(id) for id in sorted(wanted - present)]
