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
"""Tests for the exception hierarchy and its HTTP status mapping."""

import pytest

from toolsmanagement.kernel.exceptions import (
    BusinessException,
    DataIntegrityException,
    InfrastructureException,
    InvalidRequestException,
    ResourceNotFoundException,
    ServiceUnavailableException,
    ToolsManagementException,
    ValidationException,
)
from toolsmanagement.web.errors import get_status_code


class TestHierarchy:
    def test_business_branch(self):
        for cls in (ValidationException, ResourceNotFoundException, InvalidRequestException, DataIntegrityException):
            assert issubclass(cls, BusinessException)
            assert issubclass(cls, ToolsManagementException)

    def test_infrastructure_branch(self):
        assert issubclass(ServiceUnavailableException, InfrastructureException)

    def test_default_code_and_context(self):
        exc = ResourceNotFoundException("Brand not found id: 3")
        assert exc.code == "NOT_FOUND"
        assert exc.context == {}
        assert str(exc) == "Brand not found id: 3"

    def test_explicit_code(self):
        assert ValidationException("bad", code="CUSTOM").code == "CUSTOM"


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (ResourceNotFoundException("x"), 404),
            (ValidationException("x"), 400),
            (InvalidRequestException("x"), 400),
            (DataIntegrityException("x"), 400),
            (ServiceUnavailableException("x"), 503),
            (ToolsManagementException("x"), 500),
            (RuntimeError("x"), 500),
        ],
    )
    def test_status(self, exc, status):
        assert get_status_code(exc) == status
