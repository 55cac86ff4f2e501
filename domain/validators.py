"""
Input validators for Taxonomy Guard.

These validators check the shape of reference snapshots and input paths
before anything is built from them.
Snapshot validators raise MalformedReferenceData, path validators raise
ValidationError.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import MalformedReferenceData, ValidationError
from .models import is_blank, to_text


def validate_snapshot(snapshot: Any) -> Mapping[str, Any]:
    """
    Validate that a reference snapshot is a mapping.

    Args:
        snapshot: Raw snapshot

    Returns:
        The snapshot

    Raises:
        MalformedReferenceData: If snapshot is not a mapping
    """
    if not isinstance(snapshot, Mapping):
        raise MalformedReferenceData(
            "Reference snapshot must be a mapping",
            details={"type": type(snapshot).__name__},
        )
    return snapshot


def validate_node_list(key: str, value: Any, parent_field: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Validate a node list (e.g. "categories").

    Entries are either plain names or objects with a "name" and optional
    "id" plus an optional parent field (e.g. "businessUnit", "range").

    Args:
        key: Snapshot key being validated (for error details)
        value: Raw list (None is treated as empty)
        parent_field: Optional parent field to carry over

    Returns:
        List of {"name", "id", "parent"} dicts

    Raises:
        MalformedReferenceData: If value is not a list or an entry has no name
    """
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise MalformedReferenceData(
            f"'{key}' must be a list",
            details={"key": key, "type": type(value).__name__},
        )

    nodes = []
    for position, entry in enumerate(value):
        if isinstance(entry, Mapping):
            name = to_text(entry.get("name"))
            node_id = entry.get("id")
            parent = to_text(entry.get(parent_field)) if parent_field else ""
        elif isinstance(entry, (str, int, float)) and not isinstance(entry, bool):
            name = to_text(entry)
            node_id = None
            parent = ""
        else:
            raise MalformedReferenceData(
                f"'{key}' entry {position} has unsupported type",
                details={"key": key, "position": position, "type": type(entry).__name__},
            )

        if not name:
            raise MalformedReferenceData(
                f"'{key}' entry {position} has no name",
                details={"key": key, "position": position},
            )

        nodes.append({"name": name, "id": node_id, "parent": parent or None})

    return nodes


def validate_name_list(key: str, value: Any) -> List[str]:
    """
    Validate a plain list of names (e.g. "sharedCampaigns").

    Blank entries are dropped.

    Raises:
        MalformedReferenceData: If value is not a list
    """
    return [node["name"] for node in validate_node_list(key, _drop_blank(value))]


def validate_edge_map(key: str, value: Any) -> Dict[str, List[str]]:
    """
    Validate a one-to-many edge map (e.g. "categoryToRanges").

    A single string target is accepted as a one-element list. Blank source
    keys and blank targets are dropped.

    Args:
        key: Snapshot key being validated
        value: Raw mapping (None is treated as empty)

    Returns:
        Dict of source name -> list of target names

    Raises:
        MalformedReferenceData: If value is not a mapping of lists
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedReferenceData(
            f"'{key}' must be a mapping",
            details={"key": key, "type": type(value).__name__},
        )

    edges = {}
    for source, targets in value.items():
        source_name = to_text(source)
        if not source_name:
            continue
        if isinstance(targets, str):
            targets = [targets]
        edges[source_name] = validate_name_list(f"{key}.{source_name}", targets)
    return edges


def validate_scalar_map(key: str, value: Any) -> Dict[str, str]:
    """
    Validate a one-to-one map (e.g. "campaignToRangeMap").

    Entries with a blank target are kept with an empty string so callers
    can tell "mapped to nothing" from "not listed".

    Raises:
        MalformedReferenceData: If value is not a mapping of names
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedReferenceData(
            f"'{key}' must be a mapping",
            details={"key": key, "type": type(value).__name__},
        )

    mapping = {}
    for source, target in value.items():
        source_name = to_text(source)
        if not source_name:
            continue
        if isinstance(target, (list, tuple, Mapping)):
            raise MalformedReferenceData(
                f"'{key}.{source_name}' must be a single name",
                details={"key": key, "source": source_name},
            )
        mapping[source_name] = to_text(target)
    return mapping


def validate_file_path(
    file_path: Union[Path, str],
    must_exist: bool = True,
    allowed_extensions: Optional[list] = None,
) -> Path:
    """
    Validate file path.

    Args:
        file_path: File path to validate
        must_exist: If True, file must exist on disk
        allowed_extensions: List of allowed extensions (e.g., ['.csv', '.xlsx'])

    Returns:
        Path object

    Raises:
        ValidationError: If invalid
    """
    if not file_path:
        raise ValidationError("File path cannot be empty")

    path = Path(file_path)

    if must_exist and not path.exists():
        raise ValidationError(
            f"File does not exist: {path}",
            details={"file_path": str(path)},
        )

    if allowed_extensions:
        if path.suffix.lower() not in [ext.lower() for ext in allowed_extensions]:
            raise ValidationError(
                f"Invalid file extension: {path.suffix}. Allowed: {allowed_extensions}",
                details={"file_path": str(path), "allowed": allowed_extensions},
            )

    return path


def _drop_blank(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [entry for entry in value if not is_blank(entry)]
    return value
