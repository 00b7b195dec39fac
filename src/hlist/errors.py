"""
Error taxonomy for hlist.

Every failure raised by the package derives from ContainerError, and also
from the builtin exception a caller would naturally expect to catch
(LookupError for missing paths, TypeError for type problems, and so on).

ARCHITECTURAL RULE:
    Failures surface immediately to the caller of the offending operation.
    Nothing is retried, and nothing is silently coerced.
"""


class ContainerError(Exception):
    """Base class for all hlist errors."""
    pass


class PathLookupError(ContainerError, LookupError):
    """
    Raised when a path component does not exist in an element.

    Properties:
        path: The full path being followed (tuple of keys)
        component: The key that could not be resolved
    """

    def __init__(self, message: str, path: tuple = (), component=None):
        super().__init__(message)
        self.path = path
        self.component = component


class TypeMismatchError(ContainerError, TypeError):
    """Raised when a value is not of (or coercible to) the required type."""
    pass


class ShapeMismatchError(ContainerError, ValueError):
    """Raised when containers do not have the shape an operation requires."""
    pass


class CycleError(ContainerError, ValueError):
    """Raised when Python input refers back to itself."""
    pass


class DepthLimitError(ContainerError, RecursionError):
    """Raised when input is nested deeper than the configured limit."""
    pass


class SerializationError(ContainerError, ValueError):
    """Raised when a container cannot be represented in JSON or YAML."""
    pass


__all__ = [
    "ContainerError",
    "PathLookupError",
    "TypeMismatchError",
    "ShapeMismatchError",
    "CycleError",
    "DepthLimitError",
    "SerializationError",
]
