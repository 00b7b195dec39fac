"""
Tests for JSON/YAML conversion of Containers.

JSON objects become named containers with key order (and repeated keys)
preserved; arrays become unnamed containers and are never turned into
uniform vectors.
"""

import json

import pytest

import hlist.model as model
from hlist.errors import DepthLimitError, SerializationError, TypeMismatchError
from hlist.model import Container
from hlist.serialization import (
    container_from_json,
    container_from_yaml,
    container_to_json,
    container_to_python,
    container_to_yaml,
    load_container,
)

ISSUES_JSON = """
[
  {"id": 1, "locked": false, "state": "open", "user": {"login": "bob", "id": 7}},
  {"id": 2, "locked": true, "state": "closed", "user": {"login": "eve", "id": 9}}
]
"""


def test_json_objects_and_arrays():
    issues = container_from_json(ISSUES_JSON)
    assert not issues.is_named
    assert issues[0].names == ("id", "locked", "state", "user")
    assert issues[0]["user"]["login"] == "bob"
    assert issues[1]["locked"] is True


def test_json_key_order_preserved():
    c = container_from_json('{"z": 1, "a": 2, "m": 3}')
    assert c.names == ("z", "a", "m")


def test_json_repeated_keys_preserved():
    c = container_from_json('{"a": 1, "a": 2}')
    assert c.names == ("a", "a")
    assert list(c) == [1, 2]


def test_json_arrays_stay_heterogeneous():
    c = container_from_json('[1, "two", [3], null]')
    assert c == Container.of(1, "two", [3], None)


def test_json_scalar_document_rejected():
    with pytest.raises(TypeMismatchError):
        container_from_json("42")


def test_invalid_json():
    with pytest.raises(json.JSONDecodeError):
        container_from_json("[1,")


def test_json_roundtrip():
    issues = container_from_json(ISSUES_JSON)
    assert container_from_json(container_to_json(issues)) == issues


def test_to_python():
    c = Container.from_python({"a": [1, {"b": None}]})
    assert container_to_python(c) == {"a": [1, {"b": None}]}


def test_partially_named_cannot_be_serialized():
    c = Container.from_pairs([("a", 1), (None, 2)])
    with pytest.raises(SerializationError, match="partially named"):
        container_to_json(c)


def test_duplicate_names_cannot_be_serialized():
    c = Container.from_pairs([("a", 1), ("a", 2)])
    with pytest.raises(SerializationError):
        container_to_python(c)


def test_yaml_roundtrip():
    issues = container_from_json(ISSUES_JSON)
    yaml_str = container_to_yaml(issues)
    assert container_from_yaml(yaml_str) == issues


def test_yaml_keeps_insertion_order():
    yaml_str = container_to_yaml(Container.named(z=1, a=2))
    assert yaml_str.index("z:") < yaml_str.index("a:")


def test_load_container(tmp_path):
    json_file = tmp_path / "issues.json"
    json_file.write_text(ISSUES_JSON, encoding="utf-8")
    yaml_file = tmp_path / "issues.yaml"
    yaml_file.write_text("- id: 1\n  tags: [a, b]\n", encoding="utf-8")

    assert load_container(str(json_file))[1]["user"]["id"] == 9
    assert load_container(str(yaml_file)) == Container.from_python([{"id": 1, "tags": ["a", "b"]}])


def test_load_container_unknown_extension(tmp_path):
    path = tmp_path / "issues.txt"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_container(str(path))


def test_load_container_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_container(str(tmp_path / "missing.json"))


def test_json_depth_limit_spans_nested_objects(monkeypatch):
    """Nested objects count toward one depth limit, as with from_python."""
    monkeypatch.setattr(model, "MAX_DEPTH", 5)
    deep = '{"a": {"a": {"a": {"a": {"a": {"a": 1}}}}}}'
    with pytest.raises(DepthLimitError):
        container_from_json(deep)
    with pytest.raises(DepthLimitError):
        Container.from_python(json.loads(deep))


def test_json_depth_limit_mixed_arrays_and_objects(monkeypatch):
    monkeypatch.setattr(model, "MAX_DEPTH", 4)
    with pytest.raises(DepthLimitError):
        container_from_json('[{"a": [{"b": [1]}]}]')
    assert container_from_json('[{"a": [1]}]')[0]["a"][0] == 1
