"""Tests for canonical payload serialization."""

import math
from dataclasses import dataclass
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from detached_jws.exceptions import SerializationError
from detached_jws.serializer import serialize


class SamplePayload(BaseModel):
    Key: Optional[str] = None


class AliasedPayload(BaseModel):
    order_id: int = Field(..., alias="orderId")
    tags: List[str] = Field(default_factory=list)


@dataclass
class Point:
    x: int
    y: int


class PlainObject:
    def __init__(self, name):
        self.name = name


def test_dict_is_compact_json():
    assert serialize({"Key": "random value"}) == b'{"Key":"random value"}'


def test_field_order_is_preserved():
    assert serialize({"b": 1, "a": 2}) == b'{"b":1,"a":2}'
    assert serialize({"a": 2, "b": 1}) == b'{"a":2,"b":1}'


def test_json_native_values():
    assert serialize([1, 2.5, True, None, "x"]) == b'[1,2.5,true,null,"x"]'
    assert serialize("text") == b'"text"'
    assert serialize(None) == b"null"


def test_non_ascii_is_utf8_encoded():
    assert serialize({"k": "é€"}) == '{"k":"é€"}'.encode("utf-8")


def test_pydantic_model_matches_equivalent_dict():
    assert serialize(SamplePayload(Key="random value")) == serialize({"Key": "random value"})


def test_pydantic_model_uses_aliases():
    payload = AliasedPayload(orderId=7, tags=["a"])
    assert serialize(payload) == b'{"orderId":7,"tags":["a"]}'


def test_dataclass_and_plain_object():
    assert serialize(Point(1, 2)) == b'{"x":1,"y":2}'
    assert serialize(PlainObject("n")) == b'{"name":"n"}'


def test_nested_models_inside_containers():
    payload = {"points": [Point(0, 1)], "model": SamplePayload(Key="v")}
    assert serialize(payload) == b'{"points":[{"x":0,"y":1}],"model":{"Key":"v"}}'


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_numbers_raise(value):
    with pytest.raises(SerializationError):
        serialize({"value": value})


def test_cyclic_dict_raises():
    payload = {}
    payload["self"] = payload
    with pytest.raises(SerializationError):
        serialize(payload)


def test_cyclic_object_raises():
    node = PlainObject("loop")
    node.other = node
    with pytest.raises(SerializationError):
        serialize(node)


def test_unrepresentable_value_raises_with_cause():
    with pytest.raises(SerializationError) as exc_info:
        serialize({"items": {1, 2}})
    assert isinstance(exc_info.value.__cause__, TypeError)
    assert "set" in str(exc_info.value)
