"""Node classes of the JSX tree.

Every node is a pydantic dataclass with ``eq=False``: two nodes compare equal
only when they are the same object, which is what every lookup in this
package relies on. ``_fields`` lists the child-bearing fields in source order,
like ``ast.AST._fields``.
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Union

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass, rebuild_dataclass

node_dataclass = dataclass(eq=False, config=ConfigDict(arbitrary_types_allowed=True))


class Node:
    kind: ClassVar[str] = "Node"
    _fields: ClassVar[tuple[str, ...]] = ()


# ---------------------------------------------------------------------------- #
#                                     Names                                    #
# ---------------------------------------------------------------------------- #


@node_dataclass
class Identifier(Node):
    kind: ClassVar[str] = "JSXIdentifier"

    name: str


@node_dataclass
class MemberExpression(Node):
    kind: ClassVar[str] = "JSXMemberExpression"
    _fields: ClassVar[tuple[str, ...]] = ("object", "property")

    object: Identifier | MemberExpression
    property: Identifier


@node_dataclass
class NamespacedName(Node):
    kind: ClassVar[str] = "JSXNamespacedName"
    _fields: ClassVar[tuple[str, ...]] = ("namespace", "name")

    namespace: Identifier
    name: Identifier


# ---------------------------------------------------------------------------- #
#                                    Values                                    #
# ---------------------------------------------------------------------------- #


@node_dataclass
class StringLiteral(Node):
    kind: ClassVar[str] = "StringLiteral"

    value: str


@node_dataclass
class EmptyExpression(Node):
    kind: ClassVar[str] = "JSXEmptyExpression"


@node_dataclass
class ExpressionContainer(Node):
    kind: ClassVar[str] = "JSXExpressionContainer"
    _fields: ClassVar[tuple[str, ...]] = ("expression",)

    expression: Node


@node_dataclass
class Text(Node):
    kind: ClassVar[str] = "JSXText"

    value: str


# ---------------------------------------------------------------------------- #
#                                  Attributes                                  #
# ---------------------------------------------------------------------------- #


@node_dataclass
class Attribute(Node):
    kind: ClassVar[str] = "JSXAttribute"
    _fields: ClassVar[tuple[str, ...]] = ("name", "value")

    name: Identifier | NamespacedName
    # None is a boolean attribute, e.g. <input disabled />
    value: StringLiteral | ExpressionContainer | Element | Fragment | None = None


@node_dataclass
class SpreadAttribute(Node):
    kind: ClassVar[str] = "JSXSpreadAttribute"
    _fields: ClassVar[tuple[str, ...]] = ("argument",)

    argument: Node


# ---------------------------------------------------------------------------- #
#                                   Elements                                   #
# ---------------------------------------------------------------------------- #


@node_dataclass
class SpreadChild(Node):
    kind: ClassVar[str] = "JSXSpreadChild"
    _fields: ClassVar[tuple[str, ...]] = ("expression",)

    expression: Node


@node_dataclass
class OpeningElement(Node):
    kind: ClassVar[str] = "JSXOpeningElement"
    _fields: ClassVar[tuple[str, ...]] = ("name", "attributes")

    name: Identifier | MemberExpression | NamespacedName
    attributes: list[Attribute | SpreadAttribute]
    self_closing: bool = False


@node_dataclass
class ClosingElement(Node):
    kind: ClassVar[str] = "JSXClosingElement"
    _fields: ClassVar[tuple[str, ...]] = ("name",)

    name: Identifier | MemberExpression | NamespacedName


@node_dataclass
class Element(Node):
    kind: ClassVar[str] = "JSXElement"
    _fields: ClassVar[tuple[str, ...]] = ("opening", "children", "closing")

    opening: OpeningElement
    closing: ClosingElement | None
    children: list[Element | Text | ExpressionContainer | Fragment | SpreadChild]


@node_dataclass
class Fragment(Node):
    kind: ClassVar[str] = "JSXFragment"
    _fields: ClassVar[tuple[str, ...]] = ("children",)

    children: list[Element | Text | ExpressionContainer | Fragment | SpreadChild]


# ---------------------------------------------------------------------------- #
#                                Foreign nodes                                 #
# ---------------------------------------------------------------------------- #


@node_dataclass
class OpaqueNode(Node):
    """Any node outside the JSX schema (``Program``, ``ReturnStatement``, ...).

    ``fields`` maps field names to plain values, nodes or lists of nodes. Only
    the node values take part in traversal.
    """

    kind: ClassVar[str] = "Opaque"

    type: str
    fields: dict[str, Any]


ElementName = Union[Identifier, MemberExpression, NamespacedName]
AttributeValue = Union[StringLiteral, ExpressionContainer, Element, Fragment, None]
Child = Union[Element, Text, ExpressionContainer, Fragment, SpreadChild]

NODE_CLASSES: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Identifier,
        MemberExpression,
        NamespacedName,
        StringLiteral,
        EmptyExpression,
        ExpressionContainer,
        Text,
        Attribute,
        SpreadAttribute,
        SpreadChild,
        OpeningElement,
        ClosingElement,
        Element,
        Fragment,
    )
}

for _cls in (*NODE_CLASSES.values(), OpaqueNode):
    rebuild_dataclass(_cls)


def clone_node[N: Node](node: N) -> N:
    """Return a deep, fully detached copy of ``node``."""
    return copy.deepcopy(node)


__all__ = (
    "Node",
    "Identifier",
    "MemberExpression",
    "NamespacedName",
    "StringLiteral",
    "EmptyExpression",
    "ExpressionContainer",
    "Text",
    "Attribute",
    "SpreadAttribute",
    "SpreadChild",
    "OpeningElement",
    "ClosingElement",
    "Element",
    "Fragment",
    "OpaqueNode",
    "ElementName",
    "AttributeValue",
    "Child",
    "NODE_CLASSES",
    "clone_node",
)
