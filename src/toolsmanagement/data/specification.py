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
"""Composable query predicates as plain values.

Inspired by Spring Data's ``Specification`` pattern, but a specification here
is data, not a callback: each variant names an entity field and the condition
on it. The store-access layer (see :mod:`toolsmanagement.data.query_compiler`)
translates the value into SQL, so the factories that build specifications
never import SQLAlchemy.

Variants::

    NoOp()                       # no restriction
    Equals("is_archived", False)
    Like("name", "%drill%")      # case-insensitive substring
    IsNull("parent_category_id")
    IsNotNull("parent_category_id")
    And((spec_a, spec_b, ...))

Combine with :func:`and_all` or the ``&`` operator::

    spec = and_all(is_archived_spec(False), like_spec(name))
    spec = is_archived_spec(False) & like_spec("drill")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class Specification:
    """Base class of all predicate variants."""

    __slots__ = ()

    def __and__(self, other: Specification | None) -> Specification:
        """Combine with AND. ``None`` and :class:`NoOp` operands are elided."""
        return and_all(self, other)

    def __rand__(self, other: Specification | None) -> Specification:
        return and_all(other, self)

    @property
    def is_noop(self) -> bool:
        return False


@dataclass(frozen=True)
class NoOp(Specification):
    """Matches every row."""

    @property
    def is_noop(self) -> bool:
        return True


@dataclass(frozen=True)
class Equals(Specification):
    """``field = value``."""

    field: str
    value: Any


@dataclass(frozen=True)
class Like(Specification):
    """``lower(field) LIKE pattern``; *pattern* is already lower-cased."""

    field: str
    pattern: str
    escape: str | None = None


@dataclass(frozen=True)
class IsNull(Specification):
    """``field IS NULL``."""

    field: str


@dataclass(frozen=True)
class IsNotNull(Specification):
    """``field IS NOT NULL``."""

    field: str


@dataclass(frozen=True)
class And(Specification):
    """Conjunction of two or more specifications, in composition order."""

    specs: tuple[Specification, ...]


NO_OP = NoOp()


def and_all(*specs: Specification | None) -> Specification:
    """Conjunction of every present specification.

    ``None`` marks a filter that does not apply (e.g. a search string below the
    minimum length) and is skipped, as is :class:`NoOp`. Nested :class:`And`
    values are flattened so the result keeps the left-to-right order of the
    leaves.

    Returns :data:`NO_OP` when nothing is left, the single survivor when only
    one is left, and an :class:`And` otherwise.
    """
    present = list(_flatten(specs))
    if not present:
        return NO_OP
    if len(present) == 1:
        return present[0]
    return And(tuple(present))


def _flatten(specs: Iterable[Specification | None]) -> Iterable[Specification]:
    for spec in specs:
        if spec is None or spec.is_noop:
            continue
        if isinstance(spec, And):
            yield from _flatten(spec.specs)
        else:
            yield spec
