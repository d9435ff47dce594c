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
"""Predicate factories shared by every entity family.

Each factory returns a :class:`~toolsmanagement.data.specification.Specification`
or ``None`` when the filter does not apply; ``None`` is elided by
:func:`~toolsmanagement.data.specification.and_all`.
"""

from __future__ import annotations

from typing import Any

from toolsmanagement.data.settings import DEFAULT_QUERY_SETTINGS, QuerySettings
from toolsmanagement.data.specification import Equals, IsNotNull, IsNull, Like

NAME_FIELD = "name"
ARCHIVED_FIELD = "is_archived"
PARENT_FIELD = "parent_category_id"

LIKE_ESCAPE = "\\"


def like_spec(
    search: str | None,
    field: str = NAME_FIELD,
    settings: QuerySettings = DEFAULT_QUERY_SETTINGS,
) -> Like | None:
    """Case-insensitive substring match of *search* against *field*.

    Returns ``None`` when *search* is ``None``, blank, or shorter than
    ``settings.min_search_length`` (a string of exactly that length is
    accepted). LIKE wildcards in *search* are escaped so they match literally.
    """
    if search is None or not search.strip() or len(search) < settings.min_search_length:
        return None
    return Like(field=field, pattern=f"%{_escape_like(search.lower())}%", escape=LIKE_ESCAPE)


def is_archived_spec(is_archived: bool, field: str = ARCHIVED_FIELD) -> Equals:
    """Equality on the archival flag."""
    if not isinstance(is_archived, bool):
        raise TypeError(f"is_archived must be a bool, got {type(is_archived).__name__}")
    return Equals(field=field, value=is_archived)


def is_parent_spec(is_parent: bool, field: str = PARENT_FIELD) -> IsNull | IsNotNull:
    """Root rows (no parent) when *is_parent* is true, child rows otherwise."""
    return IsNull(field=field) if is_parent else IsNotNull(field=field)


def equals_spec(field: str, value: Any) -> Equals | None:
    """Equality on *field*; ``None`` when *value* is ``None``."""
    if value is None:
        return None
    return Equals(field=field, value=value)


def _escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
