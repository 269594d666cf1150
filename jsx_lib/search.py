from __future__ import annotations

from typing import Callable

from loguru import logger

from .names import get_element_name
from .nodes import Element, Node
from .visitor import BaseNodeVisitor, NodeVisitor, ParentMap, SkipNode, nodelist_collector


class ElementNameVisitor(NodeVisitor):
    """
    Calls *callback* on every element named *name*, or on every element when
    *name* is empty. Below an element only its children are searched; any
    other node is searched through all of its node-valued fields.
    """

    def __init__(self, name: str, callback: Callable[[Element], object]):
        self.name = name
        self.callback = callback

    def visit_Element(self, node: Element) -> None:
        if not self.name or get_element_name(node) == self.name:
            self.callback(node)
        for child in node.children:
            self.visit(child)


def visit_elements_by_name(
    node: Node, name: str, visitor: Callable[[Element], object]
) -> None:
    ElementNameVisitor(name, visitor).visit(node)


def get_children_names(element: Element) -> list[str]:
    return [
        get_element_name(child)
        for child in element.children
        if isinstance(child, Element)
    ]


class ElementCollector(BaseNodeVisitor):
    def __init__(self, name: str = ""):
        self.name = name
        super().__init__()

    @nodelist_collector(Element)
    def elements(self, node: Element) -> Element:
        if self.name and get_element_name(node) != self.name:
            raise SkipNode(node)
        return node

    def visit_Element(self, node: Element) -> None:
        for child in node.children:
            self.visit(child)


def find_elements(node: Node, name: str = "") -> list[Element]:
    collector = ElementCollector(name)
    collector.visit(node)
    logger.debug(f"Found {len(collector.elements)} element(s) named {name!r}")
    return collector.elements


class ParentFinder(BaseNodeVisitor):
    parent_map = ParentMap()


def find_parent(root: Node, node: Node) -> Node | None:
    """
    Return the node holding *node* in one of its fields: the element (or
    fragment) for a child, the opening element for an attribute, the wrapper
    for a node inside an ``OpaqueNode``. ``None`` for the root or a node
    outside the tree.
    """
    finder = ParentFinder()
    finder.visit(root)
    return finder.parent_map.get(node)
