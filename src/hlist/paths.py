"""
Path-based extraction.

A path is either a single key or an ordered sequence of keys, where a key
is an int position or a str name:

    "user"                  → element["user"]
    ["user", "login"]       → element["user"]["login"]
    ["labels", 0, "name"]   → element["labels"][0]["name"]

extract_path applies a path to every top-level element of a container and
yields the results lazily. Typed variants (extract_int, extract_str, ...)
also coerce each result and fail on values of the wrong type.
"""

from typing import Any, Iterator, Sequence, Tuple, Union

from hlist.errors import PathLookupError, TypeMismatchError
from hlist.leaves import LeafType, coerce_leaf
from hlist.model import Container

Key = Union[int, str]
PathLike = Union[Key, Sequence[Key]]


class _Missing:
    """Sentinel type for "no default supplied"."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def normalize_path(path: PathLike) -> Tuple[Key, ...]:
    """
    Turn a key or sequence of keys into a tuple of keys.

    Raises:
        TypeMismatchError: For components that are not int or str
    """
    if isinstance(path, (str, int)) and not isinstance(path, bool):
        return (path,)
    if not isinstance(path, (list, tuple)):
        raise TypeMismatchError(
            f"A path must be a key or a list of keys, got {type(path).__name__}"
        )
    for component in path:
        if isinstance(component, bool) or not isinstance(component, (int, str)):
            raise TypeMismatchError(
                f"Path components must be int or str, got {type(component).__name__}"
            )
    return tuple(path)


def pluck(element: Any, path: PathLike, default: Any = MISSING) -> Any:
    """
    Follow a path into a single element.

    Args:
        element: Leaf or Container
        path: Key or sequence of keys
        default: Returned instead of failing when a component is missing

    Returns:
        The value at the end of the path

    Raises:
        PathLookupError: If a component is missing and no default was given
    """
    keys = normalize_path(path)
    current = element
    for depth, key in enumerate(keys):
        if not isinstance(current, Container):
            if default is not MISSING:
                return default
            raise PathLookupError(
                f"Can't index into a leaf with {key!r} at path position {depth}",
                path=keys,
                component=key,
            )
        try:
            current = current[key]
        except PathLookupError as e:
            if default is not MISSING:
                return default
            raise PathLookupError(
                f"{e} (path {list(keys)!r}, position {depth})",
                path=keys,
                component=key,
            ) from e
    return current


def extract_path(container: Container, path: PathLike, default: Any = MISSING) -> Iterator[Any]:
    """
    Lazily pluck the same path out of every top-level element.

    The path is validated eagerly; lookups happen as the iterator is consumed.

    Example:
        records = Container.from_python([{"user": {"login": "bob", "id": 7}}])
        list(extract_path(records, ["user", "login"]))  # ["bob"]
    """
    keys = normalize_path(path)
    return (pluck(element, keys, default) for element in container)


def extract_typed(
    container: Container,
    path: PathLike,
    leaf_type: LeafType,
    default: Any = MISSING,
) -> Iterator[Any]:
    """Lazily extract a path and coerce each value to leaf_type."""
    keys = normalize_path(path)
    values = extract_path(container, keys, default)
    return (
        coerce_leaf(value, leaf_type, where=f"element {position}, path {list(keys)!r}")
        for position, value in enumerate(values)
    )


def extract_bool(container: Container, path: PathLike, default: Any = MISSING) -> Iterator[bool]:
    return extract_typed(container, path, LeafType.LOGICAL, default)


def extract_int(container: Container, path: PathLike, default: Any = MISSING) -> Iterator[int]:
    return extract_typed(container, path, LeafType.INTEGER, default)


def extract_float(container: Container, path: PathLike, default: Any = MISSING) -> Iterator[float]:
    return extract_typed(container, path, LeafType.DOUBLE, default)


def extract_str(container: Container, path: PathLike, default: Any = MISSING) -> Iterator[str]:
    return extract_typed(container, path, LeafType.CHARACTER, default)


__all__ = [
    "MISSING",
    "normalize_path",
    "pluck",
    "extract_path",
    "extract_typed",
    "extract_bool",
    "extract_int",
    "extract_float",
    "extract_str",
]
