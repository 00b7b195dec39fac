"""
Mapping utilities.

Every mapper accepts either a callable or a path. A path is shorthand for
"pluck this out of each element", so these are equivalent:

    map_values(issues, lambda issue: issue["user"]["login"])
    map_values(issues, ["user", "login"])

map_values / imap / map2 return Containers. The typed maps (map_int,
map_str, ...) return plain Python lists and fail as soon as a result is not
coercible to the requested type.
"""

from typing import Any, Callable, List, Union

from hlist.errors import ShapeMismatchError
from hlist.leaves import LeafType, coerce_leaf
from hlist.model import Container, Entry, to_element
from hlist.paths import MISSING, PathLike, normalize_path, pluck

Mapper = Union[Callable[..., Any], PathLike]


def as_mapper(f: Mapper, default: Any = MISSING) -> Callable[..., Any]:
    """
    Turn a callable or a path into a callable.

    Args:
        f: Callable (returned unchanged) or key / sequence of keys
        default: Used by path mappers when a component is missing
    """
    if callable(f):
        return f
    keys = normalize_path(f)

    def _pluck(element: Any) -> Any:
        return pluck(element, keys, default)

    return _pluck


def map_values(container: Container, f: Mapper) -> Container:
    """Apply f to every value. Names are preserved."""
    fn = as_mapper(f)
    return Container(tuple(Entry(to_element(fn(e.value)), e.name) for e in container.entries))


def imap(container: Container, f: Callable[[Any, Any], Any]) -> Container:
    """Apply f(value, key), where key is the entry name or, if unnamed, its position."""
    entries = []
    for position, entry in enumerate(container.entries):
        key = entry.name if entry.name is not None else position
        entries.append(Entry(to_element(f(entry.value, key)), entry.name))
    return Container(tuple(entries))


def map2(x: Container, y: Container, f: Callable[[Any, Any], Any]) -> Container:
    """
    Apply f pairwise to two containers of the same length.

    Names are taken from x.

    Raises:
        ShapeMismatchError: If the lengths differ
    """
    if len(x) != len(y):
        raise ShapeMismatchError(f"Can't map over containers of length {len(x)} and {len(y)}")
    return Container(tuple(
        Entry(to_element(f(a.value, b.value)), a.name)
        for a, b in zip(x.entries, y.entries)
    ))


def map_typed(container: Container, f: Mapper, leaf_type: LeafType) -> List[Any]:
    fn = as_mapper(f)
    return [
        coerce_leaf(fn(value), leaf_type, where=f"element {position}")
        for position, value in enumerate(container)
    ]


def map_bool(container: Container, f: Mapper) -> List[bool]:
    return map_typed(container, f, LeafType.LOGICAL)


def map_int(container: Container, f: Mapper) -> List[int]:
    return map_typed(container, f, LeafType.INTEGER)


def map_float(container: Container, f: Mapper) -> List[float]:
    return map_typed(container, f, LeafType.DOUBLE)


def map_str(container: Container, f: Mapper) -> List[str]:
    return map_typed(container, f, LeafType.CHARACTER)


__all__ = [
    "as_mapper",
    "map_values",
    "imap",
    "map2",
    "map_typed",
    "map_bool",
    "map_int",
    "map_float",
    "map_str",
]
