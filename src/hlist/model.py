"""
Core Container Model

Defines the one data structure every hlist operation works on: an ordered,
optionally-named, recursively nested sequence.

    Container(
        Entry(1),
        Entry(Container(Entry("bob", name="login")), name="user"),
    )

Each Entry holds either a leaf (bool, int, float, str, None) or another
Container, plus an optional name. Names are not required to be unique and
never affect order.

ARCHITECTURAL RULE:
    Containers are immutable values.
        - entries are stored as tuples
        - equality is structural
        - every "modifying" operation returns a new Container

    Because of this a Container can never contain itself. Cycles can only
    appear in mutable Python input, and from_python rejects them.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Set, Tuple, Union

from hlist.errors import (
    CycleError,
    DepthLimitError,
    PathLookupError,
    ShapeMismatchError,
    TypeMismatchError,
)
from hlist.leaves import is_leaf_value

# Maximum nesting accepted when converting Python data
MAX_DEPTH = 256

Key = Union[int, str]


@dataclass(frozen=True)
class Entry:
    """
    A single position in a Container.

    Properties:
        value: A leaf or a nested Container
        name: Optional name (str) for this position
    """

    value: Any
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is not None and not isinstance(self.name, str):
            raise TypeMismatchError(
                f"Entry names must be strings, got {type(self.name).__name__}"
            )
        if not isinstance(self.value, Container) and not is_leaf_value(self.value):
            raise TypeMismatchError(
                f"Unsupported leaf value of type {type(self.value).__name__}"
            )


@dataclass(frozen=True)
class Container:
    """
    Ordered, optionally-named sequence of leaves and nested containers.

    Access:
        container[0]        value at position 0 (negative positions allowed)
        container["user"]   value of the first entry named "user"
        container[1:3]      new Container with those entries

    Missing positions or names raise PathLookupError.
    """

    entries: Tuple[Entry, ...] = ()

    def __post_init__(self):
        entries = tuple(self.entries)
        for entry in entries:
            if not isinstance(entry, Entry):
                raise TypeMismatchError(
                    f"Container entries must be Entry objects, got {type(entry).__name__}"
                )
        object.__setattr__(self, "entries", entries)

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def of(cls, *values: Any) -> "Container":
        """Build an unnamed container. Python lists/dicts are converted."""
        return cls(tuple(Entry(to_element(v)) for v in values))

    @classmethod
    def named(cls, **values: Any) -> "Container":
        """Build a named container, in keyword order."""
        return cls.from_pairs(values.items())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Optional[str], Any]]) -> "Container":
        """Build a container from (name, value) pairs. Names may be None or repeated."""
        return cls(tuple(Entry(to_element(v), name) for name, v in pairs))

    @classmethod
    def from_python(cls, obj: Any) -> "Container":
        """
        Convert nested Python data to a Container.

        dict → named container, list/tuple → unnamed container,
        scalars → leaves.

        Raises:
            TypeMismatchError: If obj is a scalar, or holds unsupported values
            CycleError: If obj contains itself
            DepthLimitError: If obj is nested deeper than MAX_DEPTH
        """
        element = to_element(obj)
        if not isinstance(element, Container):
            raise TypeMismatchError(
                f"Expected a list or dict, got {type(obj).__name__}"
            )
        return element

    # =========================================================================
    # INSPECTION
    # =========================================================================

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        for entry in self.entries:
            yield entry.value

    @property
    def names(self) -> Tuple[Optional[str], ...]:
        return tuple(entry.name for entry in self.entries)

    @property
    def is_named(self) -> bool:
        """True if at least one entry has a name."""
        return any(entry.name is not None for entry in self.entries)

    @property
    def is_fully_named(self) -> bool:
        """True if the container is non-empty and every entry has a name."""
        return bool(self.entries) and all(entry.name is not None for entry in self.entries)

    def values(self) -> Tuple[Any, ...]:
        return tuple(entry.value for entry in self.entries)

    def items(self) -> List[Tuple[Optional[str], Any]]:
        return [(entry.name, entry.value) for entry in self.entries]

    # =========================================================================
    # ACCESS
    # =========================================================================

    def index_of(self, key: Key) -> int:
        """
        Resolve a position or name to a position.

        Raises:
            PathLookupError: If the position is out of range or the name is absent
            TypeMismatchError: If key is neither int nor str
        """
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise TypeMismatchError(
                f"Keys must be int positions or str names, got {type(key).__name__}"
            )

        if isinstance(key, int):
            size = len(self.entries)
            position = key + size if key < 0 else key
            if not 0 <= position < size:
                raise PathLookupError(
                    f"Position {key} out of range for container of length {size}",
                    path=(key,),
                    component=key,
                )
            return position

        for position, entry in enumerate(self.entries):
            if entry.name == key:
                return position
        raise PathLookupError(f"No element named {key!r}", path=(key,), component=key)

    def __getitem__(self, key: Union[Key, slice]) -> Any:
        if isinstance(key, slice):
            return Container(self.entries[key])
        return self.entries[self.index_of(key)].value

    def get(self, key: Key, default: Any = None) -> Any:
        try:
            return self[key]
        except PathLookupError:
            return default

    def subset(self, keys: Iterable[Key]) -> "Container":
        """Select entries by position or name, in the order requested."""
        return Container(tuple(self.entries[self.index_of(k)] for k in keys))

    # =========================================================================
    # DERIVED CONTAINERS
    # =========================================================================

    def concat(self, *others: "Container") -> "Container":
        """Return a new container with the entries of others appended."""
        entries = list(self.entries)
        for other in others:
            if not isinstance(other, Container):
                raise TypeMismatchError(
                    f"Can only concatenate containers, got {type(other).__name__}"
                )
            entries.extend(other.entries)
        return Container(tuple(entries))

    def set_names(self, names: Optional[Iterable[Optional[str]]]) -> "Container":
        """
        Return a copy with replaced names.

        Passing None strips all names.

        Raises:
            ShapeMismatchError: If the number of names differs from len(self)
        """
        if names is None:
            return Container(tuple(Entry(e.value) for e in self.entries))
        names = list(names)
        if len(names) != len(self.entries):
            raise ShapeMismatchError(
                f"Got {len(names)} names for a container of length {len(self.entries)}"
            )
        return Container(tuple(Entry(e.value, n) for e, n in zip(self.entries, names)))

    def __repr__(self) -> str:
        parts = []
        for entry in self.entries:
            if entry.name is None:
                parts.append(repr(entry.value))
            elif entry.name.isidentifier():
                parts.append(f"{entry.name}={entry.value!r}")
            else:
                parts.append(f"{entry.name!r}={entry.value!r}")
        return f"Container({', '.join(parts)})"


class NamedPairs(list):
    """
    Ordered (name, value) pairs that convert to a named Container.

    Unlike a dict, repeated names are kept. Used as the JSON object hook.
    """

    def items(self):
        return iter(self)


def is_container(value: Any) -> bool:
    return isinstance(value, Container)


def to_element(obj: Any) -> Any:
    """
    Convert a Python value to a Container element (leaf or Container).

    Leaves and Containers are returned unchanged.
    """
    return _convert(obj, set(), 0)


def _convert(obj: Any, active: Set[int], depth: int) -> Any:
    """Recursively convert obj, tracking the ids of containers being visited."""
    if isinstance(obj, Container) or is_leaf_value(obj):
        return obj

    if not isinstance(obj, (dict, list, tuple)):
        raise TypeMismatchError(f"Unsupported value of type {type(obj).__name__}")

    if depth >= MAX_DEPTH:
        raise DepthLimitError(f"Input nested deeper than {MAX_DEPTH} levels")

    marker = id(obj)
    if marker in active:
        raise CycleError(f"{type(obj).__name__} at depth {depth} contains itself")

    active.add(marker)
    try:
        if isinstance(obj, (dict, NamedPairs)):
            entries = []
            for name, value in obj.items():
                if not isinstance(name, str):
                    raise TypeMismatchError(
                        f"Dict keys must be strings, got {type(name).__name__}"
                    )
                entries.append(Entry(_convert(value, active, depth + 1), name))
        else:
            entries = [Entry(_convert(value, active, depth + 1)) for value in obj]
    finally:
        active.discard(marker)

    return Container(tuple(entries))


__all__ = [
    "MAX_DEPTH",
    "Entry",
    "Container",
    "is_container",
    "NamedPairs",
    "to_element",
]
