"""
Tests for the Container Analyzer.

Tests verify that the analyzer correctly:
    - Measures depth and size
    - Inventories leaf types
    - Detects naming problems
    - Decides whether a container is rectangular (transposable)
    - Raises warning flags
"""

from hlist.analyzer import analyze_container, depth
from hlist.errors import ShapeMismatchError
from hlist.examples import build_example_issues
from hlist.model import Container
from hlist.transpose import transpose


def test_depth():
    assert depth(1) == 0
    assert depth(Container()) == 1
    assert depth(Container.of(1, 2)) == 1
    assert depth(Container.of(1, [2, [3]])) == 3


def test_simple_records():
    """Analyze a list of uniform records."""
    c = Container.from_python([{"id": 1, "ok": True}, {"id": 2, "ok": False}])
    report = analyze_container(c)

    assert report.length == 2
    assert report.depth == 2
    assert report.leaf_count == 4
    assert report.container_count == 3
    assert report.leaf_types == {"integer": 2, "logical": 2}
    assert report.element_lengths == [2, 2]
    assert report.is_rectangular
    assert not report.is_named


def test_mixed_leaf_types_warning():
    report = analyze_container(Container.of(1, "a", None))
    assert "Mixed leaf types: character, integer" in report.warnings


def test_null_does_not_count_as_mixed():
    report = analyze_container(Container.of(1, None))
    assert report.warnings == []


def test_partial_naming_warning():
    report = analyze_container(Container.from_pairs([("a", 1), (None, 2)]))
    assert report.is_named
    assert not report.is_fully_named
    assert any("Partially named" in w for w in report.warnings)


def test_duplicate_names():
    report = analyze_container(Container.from_pairs([("a", 1), ("a", 2)]))
    assert report.duplicate_names == {"a"}
    assert any("Duplicate names: a" in w for w in report.warnings)


def test_inconsistent_shapes():
    c = Container.from_python([[1, 2], [3]])
    report = analyze_container(c)
    assert not report.is_rectangular
    assert report.element_lengths == [2, 1]
    assert any("Inconsistent element shapes" in w for w in report.warnings)


def test_mixed_leaves_and_containers():
    report = analyze_container(Container.of(1, [2]))
    assert not report.is_rectangular
    assert report.element_lengths == [None, 1]
    assert any("Mixed leaves and containers" in w for w in report.warnings)


def test_rectangular_matches_transpose():
    """is_rectangular agrees with whether transpose succeeds."""
    samples = [
        Container.from_python([[1, 2], [3, 4]]),
        Container.from_python([[1, 2], [3]]),
        Container.from_python([{"a": 1}, {"b": 2}]),
        Container.from_python([{"a": 1, "b": 2}, {"b": 3, "a": 4}]),
        Container.of(Container.from_pairs([("a", 1), ("a", 2)])),
        Container(),
        build_example_issues(),
    ]
    for c in samples:
        try:
            transpose(c)
            transposable = True
        except ShapeMismatchError:
            transposable = False
        assert analyze_container(c).is_rectangular == transposable


def test_warnings_not_duplicated():
    report = analyze_container(Container())
    report.add_warning("x")
    report.add_warning("x")
    assert report.warnings == ["x"]


def test_empty_container_is_rectangular():
    report = analyze_container(Container())
    assert report.is_rectangular
    assert report.warnings == []
