"""Tests for core types and the error taxonomy."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from schemagen.core.errors import (
    LibraryCorruptedError,
    NothingToSaveError,
    PropertyNotFoundError,
    SchemaGenError,
    ValidationError,
)
from schemagen.core.types import FieldDescriptor, FieldKind, ModelDefinition


class TestFieldDescriptor:
    """Tests for FieldDescriptor."""

    def test_defaults(self):
        prop = FieldDescriptor(name="title")

        assert prop.kind == "String"
        assert prop.required is False
        assert prop.unique is False
        assert prop.min is None
        assert prop.max is None
        assert prop.default is None

    def test_accepts_wire_alias(self):
        prop = FieldDescriptor.model_validate({"name": "age", "type": "Number", "min": 0})

        assert prop.kind == FieldKind.NUMBER
        assert prop.min == 0

    def test_unknown_kind_is_kept(self):
        assert FieldDescriptor(name="price", kind="Decimal").kind == "Decimal"

    def test_is_blank(self):
        assert FieldDescriptor(name="").is_blank()
        assert FieldDescriptor(name=" \t").is_blank()
        assert not FieldDescriptor(name="a").is_blank()

    def test_frozen(self):
        prop = FieldDescriptor(name="title")
        with pytest.raises(PydanticValidationError):
            prop.name = "other"


class TestModelDefinition:
    """Tests for ModelDefinition."""

    def test_preserves_order_and_duplicates(self):
        props = [FieldDescriptor(name=n) for n in ("b", "a", "b")]
        model = ModelDefinition(model_name="thing", properties=props)

        assert [p.name for p in model.properties] == ["b", "a", "b"]

    def test_accepts_wire_alias(self):
        model = ModelDefinition.model_validate({"modelName": "user", "properties": []})
        assert model.model_name == "user"


class TestErrors:
    """Tests for the error taxonomy."""

    def test_all_derive_from_base(self):
        for error in (ValidationError(), NothingToSaveError(), PropertyNotFoundError(1, 1)):
            assert isinstance(error, SchemaGenError)

    def test_to_dict(self):
        data = ValidationError(details={"model_name": ""}).to_dict()

        assert data == {
            "code": "VALIDATION_ERROR",
            "message": "Model name and at least one property are required.",
            "hints": [],
            "details": {"model_name": ""},
        }

    def test_property_not_found_hints(self):
        error = PropertyNotFoundError(5, 2)

        assert error.hints == ["Valid indexes are 0 to 1"]
        assert error.details == {"index": 5, "count": 2}

    def test_library_corrupted_message(self):
        error = LibraryCorruptedError("/tmp/lib.json", "bad json")

        assert "/tmp/lib.json" in str(error)
        assert error.details["reason"] == "bad json"
