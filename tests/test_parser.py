"""Tests for the IR builder."""

import dataclasses
import json
import pytest
from json_converter.parser import JSONParser
from json_converter.types import (
    IRArray,
    IRObject,
    IRScalar,
    IRType,
    JSONSyntaxError,
    ParseError
)


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_object(self):
        """Test parsing an object into an IRObject with ordered children."""
        node = self.parser.parse('{"name": "Alice", "age": 30}')

        assert isinstance(node, IRObject)
        assert node.type == IRType.OBJECT
        assert node.path == ()
        assert node.value == {"name": "Alice", "age": 30}
        assert [child.path for child in node.children] == [("name",), ("age",)]
        assert node.children[0].type == IRType.STRING
        assert node.children[1].type == IRType.NUMBER

    def test_object_children_match_entries(self):
        """Test that an object has one child per key in key order."""
        data = {"z": 1, "a": None, "m": [1], "b": {"c": True}}
        node = self.parser.to_ir(data)

        assert len(node.children) == len(data)
        assert [child.name for child in node.children] == list(data)
        assert [child.type for child in node.children] == [
            IRType.NUMBER, IRType.NULL, IRType.ARRAY, IRType.OBJECT
        ]

    def test_scalar_classification(self):
        """Test scalar kinds, including bool before number."""
        assert self.parser.parse("true").type == IRType.BOOLEAN
        assert self.parser.parse("false").type == IRType.BOOLEAN
        assert self.parser.parse("0").type == IRType.NUMBER
        assert self.parser.parse("1.5").type == IRType.NUMBER
        assert self.parser.parse('"text"').type == IRType.STRING
        assert self.parser.parse("null").type == IRType.NULL

    def test_scalar_metadata(self):
        """Test scalar metadata records an example and required flag."""
        node = self.parser.parse("30")

        assert isinstance(node, IRScalar)
        assert node.metadata.example == 30
        assert node.metadata.is_required is True

    def test_array_samples_first_non_null_element(self):
        """Test the array child is built from the first non-null element."""
        node = self.parser.parse('[null, {"a": 1}, 5]')

        assert isinstance(node, IRArray)
        assert len(node.children) == 1
        assert node.element.type == IRType.OBJECT
        assert node.element.value == {"a": 1}
        assert node.element.path == ("0",)

    def test_array_first_element_sample(self):
        """Test a scalar first element is used even when later elements differ."""
        node = self.parser.parse('["a", 1, {"b": 2}]')

        assert node.element.type == IRType.STRING
        assert node.element.value == "a"

    def test_empty_and_all_null_arrays_have_no_children(self):
        """Test arrays without a usable sample have no children."""
        assert self.parser.parse("[]").children == ()
        assert self.parser.parse("[null, null]").children == ()
        assert self.parser.parse("[null]").element is None

    def test_nested_paths(self):
        """Test paths concatenate keys and array placeholders."""
        node = self.parser.parse('{"users": [{"id": 1, "roles": ["x"]}]}')

        users = node.children[0]
        user = users.element
        assert users.path == ("users",)
        assert user.path == ("users", "0")
        assert [child.path for child in user.children] == [
            ("users", "0", "id"),
            ("users", "0", "roles"),
        ]
        assert user.children[1].element.path == ("users", "0", "roles", "0")

    def test_raw_value_is_original(self):
        """Test nodes keep the original decoded value unchanged."""
        data = {"a": [1, 2], "b": {"c": None}}
        node = self.parser.to_ir(data)

        assert node.value is data
        assert node.children[0].value is data["a"]
        assert data == {"a": [1, 2], "b": {"c": None}}

    def test_nodes_are_immutable(self):
        """Test IR nodes cannot be reassigned."""
        node = self.parser.parse('{"a": 1}')

        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = {}

    def test_name_property(self):
        """Test name is the last path segment."""
        node = self.parser.parse('{"a": {"b": 1}}')

        assert node.name is None
        assert node.children[0].name == "a"
        assert node.children[0].children[0].name == "b"

    def test_parse_invalid_json_syntax(self):
        """Test malformed input raises the decoder's error."""
        with pytest.raises(JSONSyntaxError):
            self.parser.parse('{"users": {"user1": {"name": "Alice"}')

    def test_parse_error_aliases(self):
        """Test syntax errors are ValueErrors and json.JSONDecodeErrors."""
        assert ParseError is JSONSyntaxError
        with pytest.raises(ValueError):
            self.parser.parse("")
        with pytest.raises(json.JSONDecodeError):
            self.parser.parse("{'single': 'quotes'}")

    def test_to_ir_rejects_non_json_types(self):
        """Test values outside the JSON kinds raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            self.parser.to_ir({1, 2})

    def test_to_ir_accepts_list_path(self):
        """Test a list path is normalized to a tuple."""
        node = self.parser.to_ir({"a": 1}, ["root"])

        assert node.path == ("root",)
        assert node.children[0].path == ("root", "a")


class TestIRNodes:
    """Tests for the IR node variants."""

    @pytest.mark.parametrize("node_class, ir_type", [
        (IRObject, IRType.STRING),
        (IRObject, IRType.ARRAY),
        (IRArray, IRType.OBJECT),
        (IRScalar, IRType.OBJECT),
        (IRScalar, IRType.ARRAY),
    ])
    def test_variant_rejects_mismatched_type(self, node_class, ir_type):
        """Test each variant only accepts its own kinds."""
        with pytest.raises(ValueError, match="cannot carry type"):
            node_class(type=ir_type, path=(), value=None)

    @pytest.mark.parametrize("node_class, ir_type, value", [
        (IRObject, IRType.OBJECT, {}),
        (IRArray, IRType.ARRAY, []),
        (IRScalar, IRType.STRING, "x"),
        (IRScalar, IRType.NUMBER, 1),
        (IRScalar, IRType.BOOLEAN, True),
        (IRScalar, IRType.NULL, None),
    ])
    def test_variant_accepts_matching_type(self, node_class, ir_type, value):
        """Test variants build with their own kinds."""
        node = node_class(type=ir_type, path=(), value=value)

        assert node.type == ir_type
        assert node.is_scalar == (node_class is IRScalar)
