"""Dependency-ordered LaTeX document assembly."""

from .builder import SchemaError, build_items
from .models import BuildResult, DocumentMetadata, Item
from .sorter import (
    CycleError,
    OrderingError,
    SortResult,
    UnknownDependency,
    sort_dependencies,
    sort_items,
)

__all__ = [
    "BuildResult",
    "CycleError",
    "DocumentMetadata",
    "Item",
    "OrderingError",
    "SchemaError",
    "SortResult",
    "UnknownDependency",
    "build_items",
    "sort_dependencies",
    "sort_items",
]
