"""Pytest configuration and fixtures."""

import json
import pytest
import tempfile
from pathlib import Path
from json_converter.parser import JSONParser
from json_converter.types import ConversionOptions


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def parser():
    """Shared IR builder."""
    return JSONParser()


@pytest.fixture
def build_ir(parser):
    """Build IR from a decoded value."""
    return parser.to_ir


@pytest.fixture
def options():
    """Default conversion options."""
    return ConversionOptions()


@pytest.fixture
def sample_records():
    """Sample list of flat records."""
    return [
        {"id": 1, "name": "Item 1", "value": 100},
        {"id": 2, "name": "Item 2", "value": 200},
        {"id": 3, "name": "Item 3", "value": 300},
    ]


@pytest.fixture
def sample_nested_json():
    """Sample nested document touching every JSON kind."""
    return {
        "name": "Alice",
        "age": 30,
        "active": True,
        "nickname": None,
        "score": 9.5,
        "tags": ["admin", "staff"],
        "address": {
            "city": "New York",
            "zip": "10001"
        },
        "orders": [
            {"id": 1, "total": 12.5},
            {"id": 2, "total": 7}
        ],
        "empty_list": [],
        "empty_object": {}
    }


SAMPLE_DOCUMENTS = [
    {"name": "Alice", "age": 30},
    [{"id": 1}, {"id": 2, "extra": [1, {"deep": None}]}],
    {"users": [{"id": 1, "tags": ["a", "b"]}, {"id": 2, "tags": []}]},
    {"a": {"b": {"c": 1}}},
    [],
    {},
    [1, "two", None, True, [3]],
    "just a string",
    42,
    3.25,
    None,
    False,
    {"weird keys": {"with.dots": "x", "class": "y", "": "z"}},
    {"text": "line1\nline2", "quote": "say \"hi\"", "amp": "a & b <c>"},
]


@pytest.fixture(params=SAMPLE_DOCUMENTS, ids=lambda doc: json.dumps(doc)[:30])
def sample_document(request):
    """Each sample document in turn."""
    return request.param
