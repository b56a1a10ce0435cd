"""Dotted key-path lookup into parsed JSON/YAML documents."""

from __future__ import annotations

from typing import Any

_MISSING = object()


def lookup(data: Any, key_path: str) -> Any:
    """Walk ``key_path`` ("a.b.c") through nested mappings.

    Returns None when any segment is missing or an intermediate value is
    not a mapping. List indices are accepted as numeric segments.
    """
    current = data
    for segment in key_path.split("."):
        if isinstance(current, dict):
            current = current.get(segment, _MISSING)
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else _MISSING
        else:
            return None
        if current is _MISSING:
            return None
    return current


def scalar_to_str(value: Any) -> str | None:
    """Convert a looked-up scalar to its string form.

    None, mappings and lists yield None. Booleans render lower-case like
    jq/yq would print them.
    """
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
