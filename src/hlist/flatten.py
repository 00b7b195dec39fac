"""
Flatten family.

    flatten        removes exactly one level of nesting
    flatten_all    removes every level of nesting
    flatten_typed  flattens, then asserts every leaf has the requested type
    simplify       turns a container of leaves into a plain Python list

Nested containers are spliced in place, depth-first and left-to-right.
Leaves at the top level are kept where they are, so flattening a container
with no nesting returns an equal (new) container.

PREFER THE TYPED VARIANTS:
    An untyped flatten succeeds on whatever shape it is given. If the input
    drifts (a record grows an extra level, a field turns into a list), the
    untyped result silently changes shape with it. flatten_typed and
    simplify fail instead.
"""

import warnings
from collections import Counter
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

from hlist.errors import TypeMismatchError
from hlist.leaves import LeafType, coerce_leaf, common_leaf_type
from hlist.model import Container, Entry


class NamePolicy(Enum):
    """How names are carried into the flattened result."""
    DROP = "drop"      # Result is unnamed
    CONCAT = "concat"  # outer + sep + inner, or whichever exists
    INNER = "inner"    # Inner names; top-level leaves keep their own


def _combine_names(outer: Optional[str], inner: Optional[str], policy: NamePolicy, sep: str) -> Optional[str]:
    if policy is NamePolicy.DROP:
        return None
    if policy is NamePolicy.INNER:
        return inner
    if outer is None:
        return inner
    if inner is None:
        return outer
    return f"{outer}{sep}{inner}"


def _warn_duplicate_names(entries: List[Entry], policy: NamePolicy) -> None:
    if policy is NamePolicy.DROP:
        return
    counts = Counter(e.name for e in entries if e.name is not None)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        warnings.warn(
            f"Flattening with {policy.value} names produced duplicates: {', '.join(duplicates)}",
            UserWarning,
            stacklevel=3,
        )


def flatten(container: Container, names: NamePolicy = NamePolicy.DROP, sep: str = "_") -> Container:
    """
    Remove one level of nesting.

    Example:
        flatten(Container.of([1, 2], [3, 4]))  # Container(1, 2, 3, 4)
    """
    entries: List[Entry] = []
    for entry in container.entries:
        if isinstance(entry.value, Container):
            for inner in entry.value.entries:
                entries.append(Entry(inner.value, _combine_names(entry.name, inner.name, names, sep)))
        else:
            own = entry.name if names is not NamePolicy.DROP else None
            entries.append(Entry(entry.value, own))

    _warn_duplicate_names(entries, names)
    return Container(tuple(entries))


def _walk_leaves(container: Container, names: NamePolicy, sep: str) -> Iterator[Entry]:
    """Depth-first walk over leaves using an explicit stack."""
    stack: List[Tuple[Iterator[Entry], Optional[str]]] = [(iter(container.entries), None)]
    while stack:
        entries, prefix = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        name = _combine_names(prefix, entry.name, names, sep)
        if isinstance(entry.value, Container):
            stack.append((iter(entry.value.entries), name))
        else:
            yield Entry(entry.value, name)


def flatten_all(container: Container, names: NamePolicy = NamePolicy.DROP, sep: str = "_") -> Container:
    """Remove every level of nesting; the result contains leaves only."""
    entries = list(_walk_leaves(container, names, sep))
    _warn_duplicate_names(entries, names)
    return Container(tuple(entries))


def flatten_typed(
    container: Container,
    leaf_type: LeafType,
    full: bool = False,
    names: NamePolicy = NamePolicy.DROP,
    sep: str = "_",
) -> Container:
    """
    Flatten one level (or every level with full=True) and coerce each leaf.

    Raises:
        TypeMismatchError: If a container survives flattening, or a leaf
            is not coercible to leaf_type
    """
    flat = flatten_all(container, names, sep) if full else flatten(container, names, sep)
    entries = []
    for position, entry in enumerate(flat.entries):
        if isinstance(entry.value, Container):
            raise TypeMismatchError(
                f"Expected {leaf_type.value} at element {position}, got a container "
                f"(input is nested more than one level)"
            )
        entries.append(Entry(coerce_leaf(entry.value, leaf_type, where=f"element {position}"), entry.name))
    return Container(tuple(entries))


def flatten_bool(container: Container, full: bool = False) -> Container:
    return flatten_typed(container, LeafType.LOGICAL, full=full)


def flatten_int(container: Container, full: bool = False) -> Container:
    return flatten_typed(container, LeafType.INTEGER, full=full)


def flatten_float(container: Container, full: bool = False) -> Container:
    return flatten_typed(container, LeafType.DOUBLE, full=full)


def flatten_str(container: Container, full: bool = False) -> Container:
    return flatten_typed(container, LeafType.CHARACTER, full=full)


def simplify(container: Container, leaf_type: Optional[LeafType] = None) -> List[Any]:
    """
    Convert a container of leaves into a list of scalars of one type.

    If leaf_type is None the narrowest common type is inferred
    (logical < integer < double; character never mixes with numbers).
    Names are dropped.

    Raises:
        TypeMismatchError: If any element is a container, None, or of an
            incompatible type
    """
    values = container.values()
    if leaf_type is None:
        leaf_type = common_leaf_type(values)
        if leaf_type is None:
            return []
    return [coerce_leaf(v, leaf_type, where=f"element {i}") for i, v in enumerate(values)]


__all__ = [
    "NamePolicy",
    "flatten",
    "flatten_all",
    "flatten_typed",
    "flatten_bool",
    "flatten_int",
    "flatten_float",
    "flatten_str",
    "simplify",
]
