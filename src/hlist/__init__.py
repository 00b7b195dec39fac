"""
Hierarchical List (hlist) Package

Generic operations over a recursive, ordered, optionally-named container:

    - Path-based extraction   (pluck, extract_path, extract_int, ...)
    - Mapping                 (map_values, imap, map2, map_int, ...)
    - Flattening              (flatten, flatten_all, flatten_typed, simplify)
    - Transposition           (transpose)
    - Predicates              (keep, discard, some, every, detect, ...)

ARCHITECTURAL GUARANTEE:
------------------------
Every operation is pure. Containers are immutable values and every
operation that changes structure returns a new Container.

Typed variants are preferred over permissive ones: when a value has the
wrong type or a container has the wrong shape, the operation fails
immediately instead of producing a silently different result.
"""

__version__ = "0.1.0"
