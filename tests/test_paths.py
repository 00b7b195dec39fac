"""
Tests for path-based extraction.

Paths are followed with [[key_1]][[key_2]]... semantics. Missing components
fail with a LookupError unless a default is supplied.
"""

import pytest

from hlist.errors import PathLookupError, TypeMismatchError
from hlist.model import Container
from hlist.paths import (
    extract_bool,
    extract_float,
    extract_int,
    extract_path,
    extract_str,
    normalize_path,
    pluck,
)


@pytest.fixture
def records():
    return Container.from_python([
        {"id": 1, "user": {"login": "alice", "id": 11}, "labels": ["bug"]},
        {"id": 2, "user": {"login": "bob", "id": 7}, "labels": []},
    ])


class TestNormalizePath:

    def test_single_key(self):
        assert normalize_path("user") == ("user",)
        assert normalize_path(0) == (0,)

    def test_sequence(self):
        assert normalize_path(["user", 0]) == ("user", 0)

    def test_invalid_components(self):
        with pytest.raises(TypeMismatchError):
            normalize_path(1.5)
        with pytest.raises(TypeMismatchError):
            normalize_path(["user", None])
        with pytest.raises(TypeMismatchError):
            normalize_path(True)


class TestPluck:

    def test_nested_path(self, records):
        assert pluck(records, [0, "user", "login"]) == "alice"

    def test_empty_path_returns_element(self, records):
        assert pluck(records, []) is records

    def test_missing_component(self, records):
        with pytest.raises(PathLookupError) as exc:
            pluck(records[0], ["user", "email"])
        assert exc.value.component == "email"
        assert exc.value.path == ("user", "email")

    def test_missing_component_is_lookup_error(self, records):
        with pytest.raises(LookupError):
            pluck(records[0], "nope")

    def test_indexing_into_leaf(self, records):
        with pytest.raises(PathLookupError):
            pluck(records[0], ["id", 0])

    def test_default(self, records):
        assert pluck(records[0], ["user", "email"], default="n/a") == "n/a"
        assert pluck(records[0], ["id", "x"], default=None) is None


class TestExtractPath:

    def test_nested_login(self):
        data = Container.from_python([{"user": {"login": "bob", "id": 7}}])
        assert list(extract_path(data, ["user", "login"])) == ["bob"]

    def test_single_key(self, records):
        assert list(extract_path(records, "id")) == [1, 2]

    def test_is_lazy(self, records):
        """Lookups happen only when the iterator is consumed."""
        broken = records.concat(Container.of({"id": 3}))
        it = extract_path(broken, ["user", "login"])
        assert next(it) == "alice"
        assert next(it) == "bob"
        with pytest.raises(PathLookupError):
            next(it)

    def test_default_substituted(self, records):
        assert list(extract_path(records, ["labels", 0], default=None)) == ["bug", None]

    def test_containers_are_returned_as_is(self, records):
        users = list(extract_path(records, "user"))
        assert users[1] == Container.named(login="bob", id=7)


class TestTypedExtraction:

    def test_extract_int(self, records):
        assert list(extract_int(records, ["user", "id"])) == [11, 7]

    def test_extract_str(self, records):
        assert list(extract_str(records, ["user", "login"])) == ["alice", "bob"]

    def test_extract_float(self, records):
        result = list(extract_float(records, "id"))
        assert result == [1.0, 2.0]
        assert [type(v) for v in result] == [float, float]

    def test_extract_bool(self):
        data = Container.from_python([{"locked": True}, {"locked": False}])
        assert list(extract_bool(data, "locked")) == [True, False]

    def test_extract_bool_converts_zero_and_one(self):
        data = Container.from_python([{"locked": 1}, {"locked": 0.0}])
        result = list(extract_bool(data, "locked"))
        assert [type(v) for v in result] == [bool, bool]
        assert result == [True, False]

    def test_extract_int_from_integral_float(self):
        data = Container.from_python([{"n": 3.0}])
        result = list(extract_int(data, "n"))
        assert result == [3]
        assert type(result[0]) is int

    def test_type_mismatch(self, records):
        with pytest.raises(TypeMismatchError):
            list(extract_int(records, ["user", "login"]))

    def test_container_is_not_a_scalar(self, records):
        with pytest.raises(TypeMismatchError):
            list(extract_str(records, "labels"))

    def test_default_is_coerced(self, records):
        assert list(extract_int(records, ["user", "age"], default=0)) == [0, 0]

    def test_bad_default_fails(self, records):
        with pytest.raises(TypeMismatchError):
            list(extract_int(records, ["user", "age"], default=None))
