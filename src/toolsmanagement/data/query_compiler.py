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
"""SQLAlchemy compiler for specification values and sort orders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlalchemy import ColumnElement, Select, and_, func
from sqlalchemy.orm import InstrumentedAttribute

from toolsmanagement.data.pageable import Sort
from toolsmanagement.data.specification import And, Equals, IsNotNull, IsNull, Like, NoOp, Specification


class SpecificationCompiler:
    """Translate a :class:`Specification` into a WHERE clause over *entity*.

    Field names are attribute names on the mapped class; an unknown field is a
    programming error and raises ``AttributeError`` eagerly.
    """

    def __init__(self, entity: type[Any]) -> None:
        self._entity = entity
        self._dispatch: dict[type, Callable[[Any], ColumnElement[bool] | None]] = {
            NoOp: self._compile_noop,
            Equals: self._compile_equals,
            Like: self._compile_like,
            IsNull: self._compile_is_null,
            IsNotNull: self._compile_is_not_null,
            And: self._compile_and,
        }

    def to_clause(self, spec: Specification) -> ColumnElement[bool] | None:
        """WHERE clause for *spec*, or ``None`` when it restricts nothing."""
        compile_fn = self._dispatch.get(type(spec))
        if compile_fn is None:
            raise TypeError(f"Unsupported specification: {type(spec).__name__}")
        return compile_fn(spec)

    def apply(self, stmt: Select[Any], spec: Specification) -> Select[Any]:
        """Add *spec* to the WHERE clause of *stmt*."""
        clause = self.to_clause(spec)
        return stmt if clause is None else stmt.where(clause)

    def apply_sort(self, stmt: Select[Any], sort: Sort) -> Select[Any]:
        """Add ORDER BY terms for every order in *sort*."""
        for order in sort.orders:
            col = self._column(order.property)
            stmt = stmt.order_by(col.desc() if order.is_descending else col.asc())
        return stmt

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    def _column(self, field: str) -> InstrumentedAttribute[Any]:
        col = getattr(self._entity, field, None)
        if col is None:
            raise AttributeError(f"{self._entity.__name__} has no attribute '{field}'")
        return col

    def _compile_noop(self, spec: NoOp) -> None:
        return None

    def _compile_equals(self, spec: Equals) -> ColumnElement[bool]:
        return self._column(spec.field) == spec.value

    def _compile_like(self, spec: Like) -> ColumnElement[bool]:
        return func.lower(self._column(spec.field)).like(spec.pattern, escape=spec.escape)

    def _compile_is_null(self, spec: IsNull) -> ColumnElement[bool]:
        return self._column(spec.field).is_(None)

    def _compile_is_not_null(self, spec: IsNotNull) -> ColumnElement[bool]:
        return self._column(spec.field).is_not(None)

    def _compile_and(self, spec: And) -> ColumnElement[bool] | None:
        clauses = [c for c in (self.to_clause(s) for s in spec.specs) if c is not None]
        if not clauses:
            return None
        return and_(*clauses)
