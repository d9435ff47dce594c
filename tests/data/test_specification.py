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
"""Tests for the predicate combinator."""

from toolsmanagement.data.specification import (
    NO_OP,
    And,
    Equals,
    IsNull,
    Like,
    NoOp,
    and_all,
)


class TestAndAll:
    def test_nothing_present_is_noop(self):
        assert and_all() is NO_OP
        assert and_all(None, None) is NO_OP
        assert and_all(NO_OP, None).is_noop

    def test_single_survivor_is_returned_as_is(self):
        eq = Equals("is_archived", False)
        assert and_all(None, eq, NO_OP) is eq

    def test_order_of_leaves_is_kept(self):
        a = Equals("is_archived", False)
        b = Like("name", "%dri%")
        c = IsNull("parent_category_id")
        spec = and_all(a, None, b, c)
        assert spec == And((a, b, c))

    def test_nested_and_is_flattened(self):
        a = Equals("is_archived", True)
        b = Like("name", "%saw%")
        c = IsNull("parent_category_id")
        assert and_all(and_all(a, b), c) == And((a, b, c))

    def test_absent_filter_equals_omitted_filter(self):
        a = Equals("is_archived", False)
        assert and_all(a, None) == and_all(a)


class TestOperator:
    def test_and_operator(self):
        a = Equals("is_archived", False)
        b = Like("name", "%saw%")
        assert (a & b) == And((a, b))

    def test_and_with_none(self):
        a = Equals("is_archived", False)
        assert (a & None) is a
        assert (None & a) is a

    def test_noop_flag(self):
        assert NoOp().is_noop
        assert not Equals("name", "x").is_noop
