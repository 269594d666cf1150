from jsx_lib import dump
from jsx_lib.attributes import add_attribute, get_attribute_value, update_attribute
from jsx_lib.children import append_child
from jsx_lib.clone import clone_element
from jsx_lib.nodes import ExpressionContainer, OpaqueNode, Text, clone_node
from jsx_lib.search import get_children_names
from jsx_lib.utils import make_element, walk


def test_clone_is_structurally_equal():
    original = make_element(
        "Components.Card",
        {"id": "card"},
        [make_element("h1", children=["Title"]), ExpressionContainer(OpaqueNode("Identifier", {"name": "body"}))],
    )
    clone = clone_element(original)
    assert dump(clone) == dump(original)


def test_clone_shares_no_node():
    original = make_element(
        "div",
        {"class": "main"},
        [make_element("span", {"id": "s"}, ["text"]), Text("tail")],
    )
    original_ids = {id(node) for node in walk(original)}
    assert not any(id(node) in original_ids for node in walk(clone_element(original)))


def test_clone_independence():
    child = make_element("span")
    original = make_element("div", {"id": "a"}, [child])
    clone = clone_element(original)

    assert clone is not original
    assert clone.opening.attributes is not original.opening.attributes
    assert clone.children is not original.children
    assert clone.children[0] is not child

    update_attribute(clone, "id", "b")
    add_attribute(clone, "title", "t")
    append_child(clone, make_element("p"))
    add_attribute(clone.children[0], "class", "x")  # pyright: ignore

    assert get_attribute_value(original, "id") == "a"
    assert len(original.opening.attributes) == 1
    assert get_children_names(original) == ["span"]
    assert child.opening.attributes == []

    add_attribute(original, "lang", "en")
    assert len(clone.opening.attributes) == 2


def test_clone_keeps_self_closing_and_closing():
    empty = make_element("img", {"src": "a.png"})
    clone = clone_element(empty)
    assert clone.opening.self_closing
    assert clone.closing is None

    full = make_element("p", children=["x"])
    clone = clone_element(full)
    assert not clone.opening.self_closing
    assert clone.closing is not None
    assert clone.closing is not full.closing
    assert dump(clone.closing) == dump(full.closing)  # pyright: ignore


def test_clone_node_copies_payload():
    payload = OpaqueNode("ArrayExpression", {"elements": [OpaqueNode("Identifier", {"name": "x"})]})
    container = ExpressionContainer(payload)
    copy = clone_node(container)
    assert copy.expression is not payload
    assert copy.expression.fields["elements"] is not payload.fields["elements"]  # pyright: ignore
