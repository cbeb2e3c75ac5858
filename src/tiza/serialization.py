"""Tree serialization: JSON round-trip for Tiza expression trees.

Converts typed nodes to/from JSON-compatible dicts. This is the handoff
format for layout engines in other processes, and is also useful for
caching parsed formulas to disk and for debugging.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from tiza import parse
    from tiza.serialization import to_json, from_json

    root = parse("\\frac{a}{b}")
    json_str = to_json(root)
    assert from_json(json_str) == root

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import MISSING, fields
from enum import Enum
from typing import Any

from tiza.errors import SerializationError
from tiza.nodes import (
    Accent,
    Arrow,
    ArrowKind,
    Binomial,
    BracketStyle,
    Color,
    Delimiter,
    Enclosure,
    EnclosureKind,
    Fraction,
    Horizontal,
    MathNode,
    Matrix,
    Node,
    Operator,
    Script,
    ScriptKind,
    Space,
    Sqrt,
    StructureLiteral,
    Text,
)
from tiza.styles import FontStyle, StyleContext

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Text,
        Horizontal,
        Script,
        Operator,
        Fraction,
        Binomial,
        Sqrt,
        Matrix,
        Delimiter,
        Accent,
        Enclosure,
        Arrow,
        Color,
        Space,
        StructureLiteral,
    )
}

# Enum fields are tagged with their class name
_ENUM_TYPES: dict[str, type[Enum]] = {
    cls.__name__: cls
    for cls in (FontStyle, ScriptKind, BracketStyle, EnclosureKind, ArrowKind)
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a tree node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes, styles and enum fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, StyleContext):
        return {
            "_type": "StyleContext",
            "font_style": value.font_style.value,
            "size": value.size,
        }
    if isinstance(value, Enum):
        return {"_type": type(value).__name__, "value": value.value}
    if isinstance(value, tuple):
        # Matrix rows nest one level deeper than other child tuples
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, None
    return value


def from_dict(data: dict[str, Any]) -> MathNode:
    """Reconstruct a typed node from a dict.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a
            required field is absent.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            if f.default is MISSING:
                msg = f"{type_name} is missing required field {f.name!r}"
                raise SerializationError(msg)
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)  # type: ignore[return-value]


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "StyleContext":
            return StyleContext(
                font_style=_deserialize_enum(FontStyle, value.get("font_style")),
                size=value.get("size", 1.0),
            )
        enum_cls = _ENUM_TYPES.get(type_name)
        if enum_cls is not None:
            return _deserialize_enum(enum_cls, value.get("value"))
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def _deserialize_enum[E: Enum](enum_cls: type[E], raw: Any) -> E:
    try:
        return enum_cls(raw)
    except ValueError as exc:
        msg = f"Invalid {enum_cls.__name__} value: {raw!r}"
        raise SerializationError(msg) from exc


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        node: Root of the tree to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(node), sort_keys=True, ensure_ascii=False, indent=indent)


def from_json(data: str) -> MathNode:
    """Deserialize a tree from a JSON string.

    Raises:
        SerializationError: If the string is not valid JSON or does not
            describe a node.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc.msg}"
        raise SerializationError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"Expected a serialized node, got {type(raw).__name__}"
        raise SerializationError(msg)
    return from_dict(raw)
