"""
Leaf types and typed coercion.

A leaf is a scalar with no further structure. The supported set is a
tagged union:

    LOGICAL    bool
    INTEGER    int
    DOUBLE     float
    CHARACTER  str
    NULL       None

Coercion is lossless or it fails. There is no "best effort" mode:
a value that cannot be represented exactly in the target type raises
TypeMismatchError.
"""

from enum import Enum
from typing import Any, Optional

from hlist.errors import TypeMismatchError


class LeafType(Enum):
    """Scalar leaf types, in increasing order of numeric generality."""

    LOGICAL = "logical"
    INTEGER = "integer"
    DOUBLE = "double"
    CHARACTER = "character"
    NULL = "null"


# Numeric promotion order used when inferring a common type
_NUMERIC_RANK = {
    LeafType.LOGICAL: 0,
    LeafType.INTEGER: 1,
    LeafType.DOUBLE: 2,
}


def is_leaf_value(value: Any) -> bool:
    """True if value belongs to the supported scalar set."""
    return value is None or isinstance(value, (bool, int, float, str))


def leaf_type_of(value: Any) -> Optional[LeafType]:
    """
    Classify a value.

    Returns:
        LeafType for supported scalars, None for anything else
        (containers included)
    """
    if value is None:
        return LeafType.NULL
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return LeafType.LOGICAL
    if isinstance(value, int):
        return LeafType.INTEGER
    if isinstance(value, float):
        return LeafType.DOUBLE
    if isinstance(value, str):
        return LeafType.CHARACTER
    return None


def _describe(value: Any) -> str:
    kind = leaf_type_of(value)
    if kind is None:
        return type(value).__name__
    return kind.value


def coerce_leaf(value: Any, target: LeafType, where: str = "") -> Any:
    """
    Coerce a single value to the target leaf type.

    Args:
        value: Value to coerce
        target: LOGICAL, INTEGER, DOUBLE or CHARACTER
        where: Optional location used in the error message

    Returns:
        The coerced value

    Raises:
        TypeMismatchError: If value is not coercible to target
        TypeMismatchError: Also raised if target is NULL
    """
    if target is LeafType.NULL:
        raise TypeMismatchError("NULL is not a coercion target")

    source = leaf_type_of(value)
    suffix = f" at {where}" if where else ""

    if source in _NUMERIC_RANK and target in _NUMERIC_RANK:
        if target is LeafType.DOUBLE:
            return float(value)
        if target is LeafType.INTEGER:
            if source is LeafType.DOUBLE and not value.is_integer():
                raise TypeMismatchError(
                    f"Can't coerce {value!r}{suffix} from double to integer without losing precision"
                )
            return int(value)
        if target is LeafType.LOGICAL:
            if source is LeafType.LOGICAL:
                return value
            if value in (0, 1):
                return bool(value)
            raise TypeMismatchError(
                f"Can't coerce {value!r}{suffix} from {source.value} to logical"
            )

    if target is LeafType.CHARACTER and source is LeafType.CHARACTER:
        return value

    raise TypeMismatchError(
        f"Expected {target.value}{suffix}, got {_describe(value)} ({value!r})"
    )


def common_leaf_type(values) -> Optional[LeafType]:
    """
    Infer the narrowest type every value can be coerced to.

    Returns None for an empty input.

    Raises:
        TypeMismatchError: For containers, None, or strings mixed with numbers
    """
    result: Optional[LeafType] = None
    for position, value in enumerate(values):
        kind = leaf_type_of(value)
        if kind is None or kind is LeafType.NULL:
            raise TypeMismatchError(
                f"Element {position} is {_describe(value)}, not a simplifiable scalar"
            )
        if result is None:
            result = kind
        elif kind is result:
            continue
        elif kind in _NUMERIC_RANK and result in _NUMERIC_RANK:
            if _NUMERIC_RANK[kind] > _NUMERIC_RANK[result]:
                result = kind
        else:
            raise TypeMismatchError(
                f"Can't combine {result.value} and {kind.value} (element {position})"
            )
    return result


__all__ = [
    "LeafType",
    "is_leaf_value",
    "leaf_type_of",
    "coerce_leaf",
    "common_leaf_type",
]
