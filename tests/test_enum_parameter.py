import pytest
from pydantic import ValidationError

from openapi_ir.ir.enum_parameter import EnumParameterInfo
from openapi_ir.ir.enums import EnumBackingType


class TestEnumParameterInfo:
    def test_defaults(self):
        p = EnumParameterInfo(name="status", values=["active", "inactive"])
        assert p.type == "string"
        assert p.required is True
        assert p.description == ""
        assert p.location == "path"
        assert p.enum_class == ""

    def test_from_dict_defaults(self):
        p = EnumParameterInfo.from_dict({"name": "status"})
        assert p.values == []
        assert p.location == "path"
        assert p.required is True
        assert p.type == "string"

    def test_from_dict_full(self):
        p = EnumParameterInfo.from_dict({
            "name": "priority",
            "type": "integer",
            "enum": [3, 1, 2],
            "required": False,
            "description": "Task priority",
            "in": "query",
            "enumClass": "App\\Enums\\Priority",
        })
        assert p.values == [3, 1, 2]
        assert p.is_query_parameter() is True
        assert p.is_path_parameter() is False
        assert p.is_integer_backed() is True
        assert p.is_string_backed() is False
        assert p.enum_class == "App\\Enums\\Priority"

    def test_values_keep_literal_kind(self):
        p = EnumParameterInfo.from_dict({"name": "mixed", "enum": ["1", 2]})
        assert p.values == ["1", 2]

    def test_boolean_values_are_rejected(self):
        with pytest.raises(ValidationError):
            EnumParameterInfo.from_dict({"name": "flag", "enum": [True, "a"]})

    def test_missing_name_is_rejected(self):
        with pytest.raises(ValidationError):
            EnumParameterInfo.from_dict({"enum": ["a"]})

    def test_to_dict_keys(self):
        p = EnumParameterInfo(name="status", values=["a", "b"], location="query")
        assert p.to_dict() == {
            "name": "status",
            "type": "string",
            "enum": ["a", "b"],
            "required": True,
            "description": "",
            "in": "query",
            "enumClass": "",
        }

    def test_round_trip(self):
        p = EnumParameterInfo(
            name="level",
            type="integer",
            values=[1, 2],
            required=False,
            description="Level",
            location="query",
            enum_class="Level",
        )
        assert EnumParameterInfo.from_dict(p.to_dict()) == p

    def test_backing_type(self):
        assert EnumParameterInfo(name="a", type="integer").backing_type() is EnumBackingType.INTEGER
        assert EnumParameterInfo(name="a").backing_type() is EnumBackingType.STRING
        assert EnumParameterInfo(name="a", type="boolean").backing_type() is None
