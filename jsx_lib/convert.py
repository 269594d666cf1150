"""
Conversion between nodes and Babel's JSON representation of a tree, e.g. the
output of ``JSON.stringify(babel.parse(src, {plugins: ["jsx"]}))``.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from loguru import logger

from .nodes import NODE_CLASSES, Fragment, Node, OpaqueNode

# Babel key -> field name, where they differ
_RENAMED_KEYS = {
    "openingElement": "opening",
    "closingElement": "closing",
    "selfClosing": "self_closing",
}
_BABEL_KEYS = {field: key for key, field in _RENAMED_KEYS.items()}

# Position and comment bookkeeping has no counterpart in the node classes
IGNORED_KEYS = frozenset(
    {
        "start",
        "end",
        "loc",
        "range",
        "extra",
        "comments",
        "leadingComments",
        "trailingComments",
        "innerComments",
    }
)

# Rebuilt by `to_dict`
_FRAGMENT_KEYS = frozenset({"openingFragment", "closingFragment"})


def _from_value(value: Any) -> Any:
    if isinstance(value, list):
        return [_from_value(item) for item in value]
    if isinstance(value, Mapping):
        if isinstance(value.get("type"), str):
            return from_dict(value)
        return {key: _from_value(item) for key, item in value.items()}
    return value


def from_dict(data: Mapping[str, Any]) -> Node:
    node_type = data.get("type")
    if not isinstance(node_type, str):
        raise ValueError(f"Expected a mapping with a string `type`, got: {data!r}")

    values = {
        _RENAMED_KEYS.get(key, key): _from_value(value)
        for key, value in data.items()
        if key != "type" and key not in IGNORED_KEYS
    }

    cls = NODE_CLASSES.get(node_type)
    if cls is None:
        return OpaqueNode(node_type, values)

    field_names = {field.name for field in dataclasses.fields(cls)}  # pyright: ignore
    dropped = values.keys() - field_names - _FRAGMENT_KEYS
    if dropped:
        logger.debug(f"{node_type}: dropping keys without a field: {sorted(dropped)}")

    kwargs = {name: value for name, value in values.items() if name in field_names}
    return cls(**kwargs)


def _to_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, list):
        return [_to_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_value(item) for key, item in value.items()}
    return value


def to_dict(node: Node) -> dict[str, Any]:
    if isinstance(node, OpaqueNode):
        return {"type": node.type, **_to_value(node.fields)}

    data: dict[str, Any] = {"type": node.kind}
    for field in dataclasses.fields(node):  # pyright: ignore
        data[_BABEL_KEYS.get(field.name, field.name)] = _to_value(
            getattr(node, field.name)
        )
    if isinstance(node, Fragment):
        data["openingFragment"] = {"type": "JSXOpeningFragment"}
        data["closingFragment"] = {"type": "JSXClosingFragment"}
    return data
