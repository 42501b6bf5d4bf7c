"""Element serialization — JSON round-trip for blockscribe trees.

Converts element trees to/from JSON-compatible dicts. Useful for caching
generated fixtures and for inspecting trees built by other tools.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from blockscribe import Block, Line
    from blockscribe.serialization import to_json, from_json

    tree = Block("plugins", [Line("id 'java'")])
    restored = from_json(to_json(tree))
    assert tree == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from blockscribe.elements import Block, Element, Line
from blockscribe.errors import ElementError

# Registry of element type names to classes for deserialization
_ELEMENT_TYPES: dict[str, type[Element]] = {
    "Block": Block,
    "Line": Line,
}


def to_dict(element: Element) -> dict[str, Any]:
    """Convert an element to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Children are serialized recursively, in order.

    """
    result: dict[str, Any] = {"_type": type(element).__name__}

    for f in fields(element):
        value = getattr(element, f.name)
        if isinstance(value, tuple):
            result[f.name] = [to_dict(child) for child in value]
        else:
            result[f.name] = value

    return result


def from_dict(data: dict[str, Any]) -> Element:
    """Reconstruct a typed element from a dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, ``data`` is not a
            dict, or the fields do not make a valid element.

    """
    if not isinstance(data, dict):
        msg = f"Expected a dict for a serialized element, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized element"
        raise ValueError(msg)

    element_cls = _ELEMENT_TYPES.get(type_name)
    if element_cls is None:
        msg = f"Unknown element type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(element_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "children":
            if not isinstance(raw, list):
                msg = f"'children' must be a list, got {type(raw).__name__}"
                raise ValueError(msg)
            kwargs[f.name] = tuple(from_dict(item) for item in raw)
        else:
            kwargs[f.name] = raw

    try:
        return element_cls(**kwargs)
    except (TypeError, ElementError) as e:
        msg = f"Invalid serialized {type_name}: {e}"
        raise ValueError(msg) from e


def to_json(element: Element, *, indent: int | None = None) -> str:
    """Serialize an element tree to a JSON string.

    Args:
        element: Root of the tree to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(element), sort_keys=True, indent=indent)


def from_json(data: str) -> Element:
    """Deserialize an element tree from a JSON string."""
    return from_dict(json.loads(data))
