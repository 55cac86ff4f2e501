"""
Data layer for Taxonomy Guard.

This module provides reference data access through the ReferenceSource abstraction.
Use create_reference_source() factory function to get a source instance.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

from .interface import ReferenceSource
from .json_source import DictReferenceSource, JsonReferenceSource
from .sqlite_source import SQLiteReferenceSource, create_schema, write_snapshot


def create_reference_source(
    backend: Literal["json", "sqlite", "memory"] = "json",
    path: Optional[Union[str, Path]] = None,
    snapshot: Optional[Dict[str, Any]] = None,
) -> ReferenceSource:
    """
    Factory function to create a reference source.

    Args:
        backend: "json", "sqlite" or "memory"
        path: Path to reference file (json/sqlite)
        snapshot: Snapshot dict (memory)

    Returns:
        ReferenceSource implementation

    Example:
        >>> source = create_reference_source("json", "./reference.json")
        >>> graph = load_graph(source)
    """
    if backend == "memory":
        if snapshot is None:
            raise ValueError("snapshot is required for the memory backend")
        return DictReferenceSource(snapshot)

    if path is None:
        raise ValueError(f"path is required for the {backend} backend")

    if backend == "json":
        return JsonReferenceSource(path)
    elif backend == "sqlite":
        return SQLiteReferenceSource(path)
    else:
        raise ValueError(f"Unknown reference backend: {backend}")


__all__ = [
    "ReferenceSource",
    "DictReferenceSource",
    "JsonReferenceSource",
    "SQLiteReferenceSource",
    "create_schema",
    "write_snapshot",
    "create_reference_source",
]
