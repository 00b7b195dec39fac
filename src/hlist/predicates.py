"""
Predicate utilities: filtering, searching and testing containers.

A predicate is a callable returning a bool, or a path (see mapping.as_mapper)
whose plucked value must itself be a bool:

    keep(issues, lambda issue: issue["state"] == "open")
    keep(issues, "locked")

Anything other than True/False coming back from a predicate is an error
(TypeMismatchError). Truthiness is never used.

Every function evaluates the predicate at most once per element, and the
searching functions stop as soon as the answer is known.
"""

from typing import Any, Callable, Iterable, List, Union

from hlist.errors import TypeMismatchError
from hlist.mapping import Mapper, as_mapper
from hlist.model import Container, Entry

Key = Union[int, str]


def _as_predicate(p: Mapper) -> Callable[[Any, int], bool]:
    fn = as_mapper(p)

    def _test(value: Any, position: int) -> bool:
        result = fn(value)
        if not isinstance(result, bool):
            raise TypeMismatchError(
                f"Predicate must return True or False, got {type(result).__name__} "
                f"for element {position}"
            )
        return result

    return _test


def keep(container: Container, p: Mapper) -> Container:
    """Entries for which p is True, in their original order, with names."""
    test = _as_predicate(p)
    return Container(tuple(
        e for i, e in enumerate(container.entries) if test(e.value, i)
    ))


def discard(container: Container, p: Mapper) -> Container:
    """Entries for which p is False, in their original order, with names."""
    test = _as_predicate(p)
    return Container(tuple(
        e for i, e in enumerate(container.entries) if not test(e.value, i)
    ))


def head_while(container: Container, p: Mapper) -> Container:
    """Longest prefix where p holds for every element."""
    test = _as_predicate(p)
    end = 0
    for i, entry in enumerate(container.entries):
        if not test(entry.value, i):
            break
        end = i + 1
    return Container(container.entries[:end])


def tail_while(container: Container, p: Mapper) -> Container:
    """Longest suffix where p holds for every element (scanned from the end)."""
    test = _as_predicate(p)
    start = len(container.entries)
    for i in range(len(container.entries) - 1, -1, -1):
        if not test(container.entries[i].value, i):
            break
        start = i
    return Container(container.entries[start:])


def some(container: Container, p: Mapper) -> bool:
    """True if p holds for at least one element. False for an empty container."""
    test = _as_predicate(p)
    for i, value in enumerate(container):
        if test(value, i):
            return True
    return False


def every(container: Container, p: Mapper) -> bool:
    """True if p holds for all elements. True for an empty container."""
    test = _as_predicate(p)
    for i, value in enumerate(container):
        if not test(value, i):
            return False
    return True


def none(container: Container, p: Mapper) -> bool:
    """True if p holds for no element. True for an empty container."""
    return not some(container, p)


def detect_index(container: Container, p: Mapper, from_end: bool = False) -> int:
    """
    Position of the first element satisfying p, or -1.

    With from_end=True the search runs backwards and returns the position
    of the last match.
    """
    test = _as_predicate(p)
    positions: Iterable[int] = range(len(container.entries))
    if from_end:
        positions = reversed(positions)
    for i in positions:
        if test(container.entries[i].value, i):
            return i
    return -1


def detect(container: Container, p: Mapper, from_end: bool = False, default: Any = None) -> Any:
    """First element satisfying p (last with from_end=True), or default."""
    position = detect_index(container, p, from_end=from_end)
    if position == -1:
        return default
    return container.entries[position].value


def keep_at(container: Container, keys: Iterable[Key]) -> Container:
    """
    Entries whose name or position is in keys, in their original order.

    Unknown keys are ignored.
    """
    selected = _positions(container, keys)
    return Container(tuple(e for i, e in enumerate(container.entries) if i in selected))


def discard_at(container: Container, keys: Iterable[Key]) -> Container:
    """Entries whose name or position is not in keys, in their original order."""
    selected = _positions(container, keys)
    return Container(tuple(e for i, e in enumerate(container.entries) if i not in selected))


def _positions(container: Container, keys: Iterable[Key]) -> set:
    wanted_names = set()
    wanted_positions = set()
    size = len(container.entries)
    for key in keys:
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise TypeMismatchError(
                f"Keys must be int positions or str names, got {type(key).__name__}"
            )
        if isinstance(key, str):
            wanted_names.add(key)
        elif -size <= key < size:
            wanted_positions.add(key % size)

    return {
        i for i, e in enumerate(container.entries)
        if i in wanted_positions or (e.name is not None and e.name in wanted_names)
    }


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, Container) and len(value) == 0)


def compact(container: Container) -> Container:
    """Drop None leaves and empty containers (top level only)."""
    entries: List[Entry] = [e for e in container.entries if not _is_empty(e.value)]
    return Container(tuple(entries))


__all__ = [
    "keep",
    "discard",
    "head_while",
    "tail_while",
    "some",
    "every",
    "none",
    "detect",
    "detect_index",
    "keep_at",
    "discard_at",
    "compact",
]
