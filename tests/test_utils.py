import io

from loguru import logger

import jsx_lib
from jsx_lib.children import insert_after
from jsx_lib.nodes import ClosingElement, ExpressionContainer, OpaqueNode, Text
from jsx_lib.utils import iter_child_nodes, iter_fields, make_element, walk


def test_make_element():
    element = make_element("div", {"id": "x"}, [make_element("br"), "text"])
    assert not element.opening.self_closing
    assert isinstance(element.closing, ClosingElement)
    assert isinstance(element.children[1], Text)

    empty = make_element("br")
    assert empty.opening.self_closing
    assert empty.closing is None

    forced = make_element("div", self_closing=False)
    assert forced.closing is not None


def test_iter_fields_of_opaque_node():
    inner = make_element("a")
    node = OpaqueNode("ArrayExpression", {"elements": [inner, None, 1], "trailing": True})
    assert dict(iter_fields(node)) == node.fields
    assert list(iter_child_nodes(node)) == [inner]


def test_walk_is_preorder():
    leaf = OpaqueNode("Identifier", {"name": "x"})
    container = ExpressionContainer(leaf)
    element = make_element("p", children=[container])
    nodes = list(walk(element))
    assert nodes[0] is element
    assert nodes.index(container) < nodes.index(leaf)
    assert element.closing in nodes


def test_set_debug_toggles_logging():
    sink = io.StringIO()
    handler_id = logger.add(sink, format="{message}")
    parent = make_element("div")
    try:
        insert_after(parent, make_element("a"), make_element("b"))
        assert sink.getvalue() == ""

        jsx_lib.set_debug(True)
        insert_after(parent, make_element("a"), make_element("b"))
        assert "target is not a child" in sink.getvalue()
    finally:
        jsx_lib.set_debug(False)
        logger.remove(handler_id)
