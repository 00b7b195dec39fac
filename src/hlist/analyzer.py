"""
Container Analyzer: structure inventory and early diagnostics.

This module provides lightweight, read-only analysis of a Container:
    - Depth and size
    - Leaf type inventory
    - Naming status (partial naming, duplicates)
    - Element shapes (can it be transposed?)
    - Warning flags for shapes that make typed operations fail

IMPORTANT: This does NOT modify the container. It only produces reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from hlist.leaves import leaf_type_of
from hlist.model import Container


def depth(element) -> int:
    """
    Nesting depth: 0 for a leaf, 1 for a container of leaves (or an empty
    container), plus one per additional level.
    """
    if not isinstance(element, Container):
        return 0
    deepest = 1
    stack = [(element, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        for value in node:
            if isinstance(value, Container):
                stack.append((value, level + 1))
    return deepest


def _element_shape(value) -> Optional[tuple]:
    """Shape key used for rectangularity: names if fully named, else length."""
    if not isinstance(value, Container):
        return None
    if value.is_fully_named:
        return ("names", frozenset(value.names), len(value))
    return ("length", len(value))


@dataclass
class ContainerReport:
    """Analysis report for a container."""

    length: int = 0
    depth: int = 0

    # Inventory (whole tree)
    leaf_count: int = 0
    container_count: int = 0
    leaf_types: Dict[str, int] = field(default_factory=dict)

    # Top-level naming
    is_named: bool = False
    is_fully_named: bool = False
    duplicate_names: Set[str] = field(default_factory=set)

    # Top-level element shapes
    element_lengths: List[Optional[int]] = field(default_factory=list)
    is_rectangular: bool = False

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_container(container: Container) -> ContainerReport:
    """
    Analyze a container.

    Checks for:
    - Leaf types mixed across the tree
    - Partially named or duplicately named top level
    - Top-level elements of inconsistent shape

    Returns a ContainerReport with metrics and warnings.
    """
    report = ContainerReport(length=len(container), depth=depth(container))

    # =========================================================================
    # 1. INVENTORY
    # =========================================================================

    type_counts: Counter = Counter()
    stack = [container]
    while stack:
        node = stack.pop()
        report.container_count += 1
        for value in node:
            if isinstance(value, Container):
                stack.append(value)
            else:
                report.leaf_count += 1
                type_counts[leaf_type_of(value).value] += 1
    report.leaf_types = dict(type_counts)

    # =========================================================================
    # 2. NAMING
    # =========================================================================

    report.is_named = container.is_named
    report.is_fully_named = container.is_fully_named
    name_counts = Counter(n for n in container.names if n is not None)
    report.duplicate_names = {n for n, count in name_counts.items() if count > 1}

    # =========================================================================
    # 3. SHAPES
    # =========================================================================

    report.element_lengths = [
        len(v) if isinstance(v, Container) else None for v in container
    ]
    shapes = [_element_shape(v) for v in container]
    report.is_rectangular = _is_rectangular(container)

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    kinds = set(report.leaf_types) - {"null"}
    if len(kinds) > 1:
        report.add_warning(f"Mixed leaf types: {', '.join(sorted(kinds))}")

    if report.is_named and not report.is_fully_named:
        report.add_warning("Partially named container: some top-level elements have no name")

    if report.duplicate_names:
        report.add_warning(f"Duplicate names: {', '.join(sorted(report.duplicate_names))}")

    containers = [s for s in shapes if s is not None]
    if containers and len(containers) < len(shapes):
        report.add_warning("Mixed leaves and containers at top level")
    if len(set(containers)) > 1:
        report.add_warning("Inconsistent element shapes: top-level containers differ in length or names")

    return report


def _is_rectangular(container: Container) -> bool:
    """Mirror of the shape rules transpose enforces."""
    values = list(container)
    if not values:
        return True
    if not all(isinstance(v, Container) for v in values):
        return False
    first = values[0]
    if not first.is_fully_named:
        return all(len(v) == len(first) for v in values)
    expected = _element_shape(first)
    return all(
        _element_shape(v) == expected and len(set(v.names)) == len(v)
        for v in values
    )


__all__ = ["ContainerReport", "analyze_container", "depth"]
