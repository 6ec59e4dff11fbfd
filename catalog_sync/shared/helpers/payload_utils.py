"""
Helpers for reading nested JSON-like payloads
"""

from typing import Any, Mapping, Sequence


def get_nested_value(data: Any, keys: Sequence[Any], default: Any = None) -> Any:
    """Safely get a nested value from dicts and lists.

    ``get_nested_value(product, ["variants", "edges", 0, "node", "sku"])``
    returns ``default`` as soon as one step of the path does not exist.
    """
    current = data
    for key in keys:
        if isinstance(current, Mapping):
            if key not in current:
                return default
            current = current[key]
        elif isinstance(current, list) and isinstance(key, int):
            if key < -len(current) or key >= len(current):
                return default
            current = current[key]
        else:
            return default
    return current


def get_list(data: Any, key: str) -> list:
    """Return ``data[key]`` when it is a list, else an empty list"""
    if isinstance(data, Mapping):
        value = data.get(key)
        if isinstance(value, list):
            return value
    return []
