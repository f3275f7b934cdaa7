from __future__ import annotations

import pytest

from domain.exceptions import ValidationError
from domain.resource_request import AttributeScope, ResourceRequest, VariableName


class TestResourceRequest:
    def test_normalizes_path_and_override(self):
        request = ResourceRequest(resource_path="test/resource", override_context_param="Webapp")

        assert request.normalized_path == "/test/resource"
        assert request.normalized_override == "/Webapp"

    def test_override_trailing_slash_is_stripped(self):
        request = ResourceRequest(resource_path="/a", override_context_param="Webapp/")

        assert request.normalized_override == "/Webapp"

    @pytest.mark.parametrize("override", [None, "", "   "])
    def test_blank_override_is_none(self, override):
        request = ResourceRequest(resource_path="/a", override_context_param=override)

        assert request.normalized_override is None

    def test_request_frozen(self):
        request = ResourceRequest(resource_path="/a")
        with pytest.raises(Exception):  # FrozenInstanceError
            request.resource_path = "/b"


class TestAttributeScope:
    def test_default_is_page(self):
        assert AttributeScope.parse(None) is AttributeScope.PAGE

    def test_parse_is_case_insensitive(self):
        assert AttributeScope.parse(" Application ") is AttributeScope.APPLICATION

    def test_unknown_scope_raises(self):
        with pytest.raises(ValidationError, match="Unknown scope: galaxy"):
            AttributeScope.parse("galaxy")


class TestVariableName:
    def test_accepts_name(self):
        assert VariableName("cssUrl").value == "cssUrl"

    @pytest.mark.parametrize("value", ["", "  "])
    def test_blank_name_raises(self, value):
        with pytest.raises(ValidationError, match="Variable name must not be empty"):
            VariableName(value)
