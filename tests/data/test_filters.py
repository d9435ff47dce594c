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
"""Tests for the text, archival, hierarchy and equality predicate factories."""

import pytest

from toolsmanagement.data.filters import equals_spec, is_archived_spec, is_parent_spec, like_spec
from toolsmanagement.data.settings import QuerySettings
from toolsmanagement.data.specification import Equals, IsNotNull, IsNull, Like


class TestLikeSpec:
    def test_none_and_blank_are_absent(self):
        assert like_spec(None) is None
        assert like_spec("") is None
        assert like_spec("    ") is None

    def test_below_minimum_length_is_absent(self):
        assert like_spec("ab") is None

    def test_minimum_length_is_accepted(self):
        assert like_spec("abc") == Like("name", "%abc%", escape="\\")

    def test_lower_cases_search(self):
        spec = like_spec("DrIlL")
        assert spec is not None
        assert spec.pattern == "%drill%"

    def test_whitespace_counts_towards_length(self):
        spec = like_spec(" ab")
        assert spec is not None
        assert spec.pattern == "% ab%"

    def test_wildcards_are_escaped(self):
        spec = like_spec("50%_off")
        assert spec is not None
        assert spec.pattern == "%50\\%\\_off%"

    def test_custom_field_and_threshold(self):
        settings = QuerySettings(min_search_length=5)
        assert like_spec("abcd", settings=settings) is None
        spec = like_spec("abcde", field="surname", settings=settings)
        assert spec is not None
        assert spec.field == "surname"


class TestIsArchivedSpec:
    @pytest.mark.parametrize("flag", [True, False])
    def test_equality_on_flag(self, flag):
        assert is_archived_spec(flag) == Equals("is_archived", flag)

    def test_rejects_non_bool(self):
        with pytest.raises(TypeError):
            is_archived_spec(None)  # type: ignore[arg-type]


class TestIsParentSpec:
    def test_parent_means_no_parent_reference(self):
        assert is_parent_spec(True) == IsNull("parent_category_id")

    def test_child_means_parent_reference_present(self):
        assert is_parent_spec(False) == IsNotNull("parent_category_id")


class TestEqualsSpec:
    def test_none_value_is_absent(self):
        assert equals_spec("tool_id", None) is None

    def test_value(self):
        assert equals_spec("tool_id", 7) == Equals("tool_id", 7)
