"""
Transpose: exchange the outer and inner index of a rectangular container.

    transpose({"x": {"a": 1, "b": 3}, "y": {"a": 2, "b": 4}})
        == {"a": {"x": 1, "y": 2}, "b": {"x": 3, "y": 4}}

For every valid i, j:  input[i][j] == output[j][i]

Naming:
    - If the first inner container is fully named, inner names become the
      result's outer names, and every other inner container is addressed by
      name (it must carry exactly the same set of names).
    - Otherwise inner containers are addressed by position and must all
      have the same length.
    - Outer names become the names of every inner container in the result.
      A partially named outer container gives partially named results;
      unnamed positions stay unnamed.

Anything that is not rectangular raises ShapeMismatchError. Nothing is
padded or truncated.
"""

from typing import List, Optional, Sequence

from hlist.errors import ShapeMismatchError
from hlist.model import Container, Entry


def _label(entry: Entry, position: int) -> str:
    return repr(entry.name) if entry.name is not None else f"at position {position}"


def _check_unique(names: Sequence[Optional[str]], where: str) -> None:
    seen = set()
    for name in names:
        if name in seen:
            raise ShapeMismatchError(f"Duplicate name {name!r} in element {where}")
        seen.add(name)


def transpose(container: Container) -> Container:
    """
    Transpose a container of N containers of M elements into M containers
    of N elements.

    Raises:
        ShapeMismatchError: If an element is a leaf, lengths differ, name
            sets differ, or inner names are duplicated
    """
    if len(container) == 0:
        return Container()

    for position, entry in enumerate(container.entries):
        if not isinstance(entry.value, Container):
            raise ShapeMismatchError(
                f"Element {_label(entry, position)} is a leaf; transpose needs a container of containers"
            )

    first_entry = container.entries[0]
    template: Container = first_entry.value
    width = len(template)

    # rows[j] collects output[j] as it is built
    rows: List[List[Entry]] = [[] for _ in range(width)]

    if template.is_fully_named:
        inner_names = template.names
        _check_unique(inner_names, _label(first_entry, 0))
        expected = set(inner_names)

        for i, entry in enumerate(container.entries):
            inner: Container = entry.value
            _check_unique(inner.names, _label(entry, i))
            if len(inner) != width or set(inner.names) != expected:
                raise ShapeMismatchError(
                    f"Element {_label(entry, i)} has names {list(inner.names)!r}, "
                    f"expected {list(inner_names)!r}"
                )
            out_name = entry.name
            for j, name in enumerate(inner_names):
                rows[j].append(Entry(inner[name], out_name))

        return Container(tuple(
            Entry(Container(tuple(row)), name) for name, row in zip(inner_names, rows)
        ))

    for i, entry in enumerate(container.entries):
        inner = entry.value
        if len(inner) != width:
            raise ShapeMismatchError(
                f"Element {_label(entry, i)} has length {len(inner)}, expected {width}"
            )
        out_name = entry.name
        for j, value in enumerate(inner):
            rows[j].append(Entry(value, out_name))

    return Container(tuple(Entry(Container(tuple(row))) for row in rows))


__all__ = ["transpose"]
