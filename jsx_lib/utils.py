from __future__ import annotations

from typing import Any, Iterator, Mapping

from .nodes import (
    Attribute,
    AttributeValue,
    Child,
    ClosingElement,
    Element,
    ElementName,
    Identifier,
    MemberExpression,
    NamespacedName,
    Node,
    OpaqueNode,
    OpeningElement,
    SpreadAttribute,
    StringLiteral,
    Text,
)

# ---------------------------------------------------------------------------- #
#                                Generic descent                               #
# ---------------------------------------------------------------------------- #


def is_node(value: Any) -> bool:
    return isinstance(value, Node)


def iter_fields(node: Node) -> Iterator[tuple[str, Any]]:
    """
    Yield ``(name, value)`` for every child-bearing field of *node*, the way
    ``ast.iter_fields`` does. For an ``OpaqueNode`` these are the entries of
    its ``fields`` mapping.
    """
    if isinstance(node, OpaqueNode):
        yield from node.fields.items()
        return
    for name in node._fields:
        yield name, getattr(node, name, None)


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """
    Yield all direct child nodes of *node*: every field holding a node and
    every node inside a field holding a list. Anything else is skipped.
    """
    for _, value in iter_fields(node):
        if isinstance(value, list):
            for item in value:
                if is_node(item):
                    yield item
        elif is_node(value):
            yield value


def walk(node: Node) -> Iterator[Node]:
    """
    Recursively yield all descendant nodes in the tree starting at *node*
    (including *node* itself) in depth-first pre-order.
    """
    yield node
    for child in iter_child_nodes(node):
        yield from walk(child)


# ---------------------------------------------------------------------------- #
#                                   Builders                                   #
# ---------------------------------------------------------------------------- #


def parse_name(name: str) -> ElementName:
    """
    Build an element name from its written form: ``"div"``, ``"A.B.C"`` or
    ``"svg:path"``.
    """
    if ":" in name:
        namespace, _, local = name.partition(":")
        return NamespacedName(Identifier(namespace), Identifier(local))
    head, *rest = name.split(".")
    result: Identifier | MemberExpression = Identifier(head)
    for part in rest:
        result = MemberExpression(result, Identifier(part))
    return result


def make_attribute(name: str, value: AttributeValue | str = None) -> Attribute:
    """
    Build ``name=value`` with a plain identifier name, so ``"xlink:href"`` stays
    a single ``Identifier`` that name lookups can find again.
    """
    if isinstance(value, str):
        value = StringLiteral(value)
    return Attribute(Identifier(name), value)  # pyright: ignore


def make_element(
    name: str,
    attributes: Mapping[str, AttributeValue | str] | None = None,
    children: list[Child | str] | None = None,
    *,
    self_closing: bool | None = None,
) -> Element:
    """
    Shorthand constructor used by tests and scripts::

        make_element("div", {"id": "main"}, [make_element("span"), "text"])

    Plain strings in *children* become ``Text`` nodes. An element without
    children is self-closing unless told otherwise.
    """
    attrs: list[Attribute | SpreadAttribute] = [
        make_attribute(key, value) for key, value in (attributes or {}).items()
    ]
    kids: list[Child] = [
        Text(child) if isinstance(child, str) else child for child in children or []
    ]
    if self_closing is None:
        self_closing = not kids
    opening = OpeningElement(parse_name(name), attrs, self_closing)
    closing = None if self_closing else ClosingElement(parse_name(name))
    return Element(opening, closing, kids)
