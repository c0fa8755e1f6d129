import pytest
import yaml
from pydantic import ValidationError

from openapi_ir.ir.callback import CallbackInfo
from openapi_ir.ir.type_info import TypeInfo


class TestCallbackInfo:
    def test_defaults_are_absent(self):
        cb = CallbackInfo(name="onPaid", expression="{$request.body#/callbackUrl}")
        assert cb.method == "post"
        assert cb.request_body is None
        assert cb.responses is None
        assert cb.description is None
        assert cb.summary is None
        assert cb.ref is None
        assert cb.has_ref() is False
        assert cb.has_request_body() is False
        assert cb.has_responses() is False

    def test_empty_is_not_absent(self):
        cb = CallbackInfo(name="onPaid", expression="{$url}", request_body={}, responses={}, description="")
        assert cb.has_request_body() is True
        assert cb.has_responses() is True
        assert cb.description == ""

    def test_from_dict(self):
        cb = CallbackInfo.from_dict({
            "name": "onOrderStatusChange",
            "expression": "{$request.body#/callbackUrl}",
            "method": "put",
            "requestBody": {"type": "object", "properties": {"status": {"type": "string"}}},
            "responses": {"204": {"description": "Ack"}},
            "summary": "Status changed",
            "ref": "OrderStatusCallback",
        })
        assert cb.method == "put"
        assert cb.request_body["properties"]["status"] == {"type": "string"}
        assert cb.has_ref() is True
        assert cb.description is None

    def test_typed_request_body_is_stored_keyed(self):
        body = TypeInfo.object({"id": TypeInfo.integer()})
        cb = CallbackInfo(name="onPaid", expression="{$url}", request_body=body)
        assert cb.request_body == {"type": "object", "properties": {"id": {"type": "integer"}}}

    def test_missing_expression_is_rejected(self):
        with pytest.raises(ValidationError):
            CallbackInfo.from_dict({"name": "onPaid"})

    def test_to_dict_keeps_absent_as_none(self):
        cb = CallbackInfo(name="onPaid", expression="{$url}")
        assert cb.to_dict() == {
            "name": "onPaid",
            "expression": "{$url}",
            "method": "post",
            "requestBody": None,
            "responses": None,
            "description": None,
            "summary": None,
            "ref": None,
        }

    def test_round_trip(self):
        cb = CallbackInfo(
            name="onRefund",
            expression="{$request.body#/hook}",
            request_body={"type": "object", "properties": {}},
            description="Refund issued",
        )
        assert CallbackInfo.from_dict(cb.to_dict()) == cb

    def test_nested_typed_nodes_are_stored_keyed(self):
        cb = CallbackInfo(
            name="onPaid",
            expression="{$url}",
            responses={"200": {"content": {"schema": TypeInfo.object({"id": TypeInfo.integer()})}}},
        )
        assert cb.responses == {
            "200": {"content": {"schema": {"type": "object", "properties": {"id": {"type": "integer"}}}}},
        }

    def test_list_fragments_are_accepted(self):
        cb = CallbackInfo.from_dict({"name": "onPaid", "expression": "{$url}", "responses": [], "requestBody": [TypeInfo.string()]})
        assert cb.responses == []
        assert cb.request_body == [{"type": "string"}]
        assert cb.has_responses() is True

    def test_to_dict_returns_copies(self):
        cb = CallbackInfo(name="onPaid", expression="{$url}", responses={"204": {"description": "Ack"}})
        data = cb.to_dict()
        data["responses"]["204"]["description"] = "Changed"
        data["responses"]["500"] = {}
        assert cb.responses == {"204": {"description": "Ack"}}

    def test_numeric_status_codes_become_strings(self):
        data = yaml.safe_load("name: onPaid\nexpression: '{$url}'\nresponses:\n  200:\n    description: OK\n")
        cb = CallbackInfo.from_dict(data)
        assert cb.responses == {"200": {"description": "OK"}}
