"""Deterministic JSON output for generated config files."""

from typing import Any

import msgspec

__all__ = ("deep_sort_dict", "encode_json")


def deep_sort_dict(obj: Any) -> Any:
    """Recursively sort all dictionary keys for deterministic JSON output.

    Args:
        obj: Any Python object (dict, list, or primitive).

    Returns:
        The object with all nested dict keys sorted.
    """
    if isinstance(obj, dict):
        return {k: deep_sort_dict(v) for k, v in sorted(obj.items())}  # pyright: ignore[reportUnknownVariableType,reportUnknownArgumentType]
    if isinstance(obj, list):
        return [deep_sort_dict(item) for item in obj]  # pyright: ignore[reportUnknownVariableType]
    return obj


def encode_json(data: dict[str, Any], *, indent: int = 2, sort_keys: bool = False) -> str:
    """Encode a JSON document with a trailing newline.

    Key order follows insertion order unless ``sort_keys`` is set, in which
    case every nested mapping is sorted.

    Args:
        data: Dictionary to encode.
        indent: Indentation level for formatting.
        sort_keys: Sort keys at every level.

    Returns:
        Formatted JSON text.
    """
    if sort_keys:
        data = deep_sort_dict(data)
    content = msgspec.json.format(msgspec.json.encode(data), indent=indent).decode("utf-8")
    if not content.endswith("\n"):
        content += "\n"
    return content
