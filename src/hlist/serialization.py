"""
Serialization helpers for Containers.

JSON and YAML are read without flattening arrays into uniform vectors:

    JSON object  → named Container (key order and repeated keys preserved)
    JSON array   → unnamed Container
    JSON scalar  → leaf

Writing goes the other way through plain Python data, which is only
possible for containers that are either unnamed (→ list) or fully and
uniquely named (→ dict). Anything else raises SerializationError rather
than dropping entries.
"""
from __future__ import annotations

import json
import os
from typing import Any

import yaml

from hlist.errors import SerializationError, TypeMismatchError
from hlist.model import Container, NamedPairs, to_element


def element_to_python(element: Any) -> Any:
    """Convert a leaf or Container to plain Python data (dict / list / scalar)."""
    if not isinstance(element, Container):
        return element
    if not element.is_named:
        return [element_to_python(v) for v in element]
    if not element.is_fully_named:
        missing = [i for i, name in enumerate(element.names) if name is None]
        raise SerializationError(
            f"Container is partially named (unnamed positions: {missing}); "
            f"it has no dict or list equivalent"
        )
    if len(set(element.names)) != len(element):
        raise SerializationError(f"Container has duplicate names: {list(element.names)!r}")
    return {name: element_to_python(value) for name, value in element.items()}


def container_to_python(c: Container) -> Any:
    return element_to_python(c)


def container_from_python(obj: Any) -> Container:
    return Container.from_python(obj)


def container_from_json(s: str) -> Container:
    """
    Parse JSON text into a Container.

    Raises:
        TypeMismatchError: If the document is a bare scalar
        json.JSONDecodeError: If the text is not valid JSON
    """
    d = json.loads(s, object_pairs_hook=NamedPairs)
    element = to_element(d)
    if not isinstance(element, Container):
        raise TypeMismatchError(f"JSON document is a scalar ({element!r}), not an array or object")
    return element


def container_to_json(c: Container, indent: int | None = None) -> str:
    return json.dumps(container_to_python(c), indent=indent)


def container_from_yaml(s: str) -> Container:
    d = yaml.safe_load(s)
    return container_from_python(d)


def container_to_yaml(c: Container) -> str:
    return yaml.safe_dump(container_to_python(c), sort_keys=False)


def load_container(filepath: str) -> Container:
    """
    Load a Container from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the extension is not recognised
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported file extension: {ext or '(none)'}")

    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read()

    if ext == ".json":
        return container_from_json(content)
    return container_from_yaml(content)


__all__ = [
    "element_to_python",
    "container_to_python",
    "container_from_python",
    "container_from_json",
    "container_to_json",
    "container_from_yaml",
    "container_to_yaml",
    "load_container",
]
