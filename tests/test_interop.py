"""
Tests for shapecheck.interop (Pydantic models from object schemas).
"""

import pytest
from pydantic import BaseModel, ValidationError

from shapecheck import (
    Any,
    Array,
    Boolean,
    Literal,
    Map,
    Null,
    Number,
    Object,
    Optional,
    String,
    Tuple,
    Undefined,
    Union,
    to_pydantic,
)
from shapecheck.meta import ARRAY_SCHEMA


class TestToPydantic:
    def test_simple_model(self):
        User = to_pydantic("User", Object({"name": String(), "age": Number()}))
        assert issubclass(User, BaseModel)
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        schema = Object({"name": String(), "email": Optional(String())})
        User = to_pydantic("User", schema)
        user = User(name="Alice")
        assert user.email is None

    def test_undefined_field_may_be_absent(self):
        schema = Object({"name": String(), "deleted": Undefined()})
        assert schema.matches({"name": "Alice"})
        Model = to_pydantic("Model", schema)
        assert Model(name="Alice").deleted is None

    def test_missing_required_field(self):
        User = to_pydantic("User", Object({"name": String()}))
        with pytest.raises(ValidationError):
            User()

    def test_scalar_types_are_strict(self):
        Model = to_pydantic(
            "Model", Object({"n": Number(), "s": String(), "b": Boolean()})
        )
        with pytest.raises(ValidationError):
            Model(n="1", s="x", b=True)
        with pytest.raises(ValidationError):
            Model(n=1, s=1, b=True)
        with pytest.raises(ValidationError):
            Model(n=1, s="x", b="true")

    def test_literals_and_unions(self):
        Model = to_pydantic(
            "Model",
            Object(
                {
                    "kind": Union(Literal("a"), Literal("b")),
                    "value": Number() | Null(),
                }
            ),
        )
        assert Model(kind="a", value=None).kind == "a"
        with pytest.raises(ValidationError):
            Model(kind="c", value=1)

    def test_containers(self):
        Model = to_pydantic(
            "Model",
            Object(
                {
                    "tags": Array(String()),
                    "scores": Map(Number()),
                    "point": Tuple(Number(), Number()),
                    "anything": Any(),
                }
            ),
        )
        model = Model(tags=["x"], scores={"a": 1}, point=[1, 2], anything={"k": [1]})
        assert model.tags == ["x"]
        assert model.point == (1, 2)
        with pytest.raises(ValidationError):
            Model(tags=[1], scores={}, point=[1, 2], anything=None)

    def test_nested_object(self):
        Model = to_pydantic("Order", Object({"customer": Object({"id": String()})}))
        order = Model(customer={"id": "c1"})
        assert type(order.customer).__name__ == "Order_customer"
        assert order.customer.id == "c1"

    def test_strict_object_forbids_extra(self):
        Model = to_pydantic("Point", Object({"x": Number()}, strict=True))
        with pytest.raises(ValidationError):
            Model(x=1, y=2)

    def test_non_object_schema(self):
        with pytest.raises(TypeError):
            to_pydantic("Tags", Array(String()))

    def test_self_referential_schema(self):
        with pytest.raises(ValueError):
            to_pydantic("ArrayNode", ARRAY_SCHEMA)
