from jsx_lib.children import (
    append_child,
    insert_after,
    insert_before,
    remove_child,
    replace_child,
    replace_children,
)
from jsx_lib.nodes import Fragment, Text
from jsx_lib.search import get_children_names
from jsx_lib.utils import make_element


def make_parent():
    first, second = make_element("span"), make_element("span")
    parent = make_element("div", children=[first, "text", second])
    return parent, first, second


def assert_same_children(parent, expected):
    assert len(parent.children) == len(expected)
    assert all(a is b for a, b in zip(parent.children, expected))


def test_append_child():
    parent = make_element("div", children=["a"])
    child = make_element("p")
    assert append_child(parent, child) is parent
    assert parent.children[-1] is child

    text = Text("b")
    append_child(parent, text)
    assert parent.children[-1] is text


def test_insert_after_targets_identity():
    parent, first, second = make_parent()
    sibling = make_element("b")

    assert insert_after(parent, second, sibling) is parent
    assert_same_children(parent, [first, parent.children[1], second, sibling])

    other = make_element("i")
    insert_after(parent, first, other)
    assert parent.children[1] is other
    assert parent.children[3] is second


def test_insert_before_targets_identity():
    parent, first, second = make_parent()
    sibling = make_element("b")

    assert insert_before(parent, second, sibling) is parent
    assert parent.children[2] is sibling
    assert parent.children[3] is second
    assert parent.children[0] is first


def test_structurally_equal_stranger_is_not_found():
    parent, first, second = make_parent()
    before = list(parent.children)
    stranger = make_element("span")

    insert_after(parent, stranger, make_element("b"))
    assert_same_children(parent, before)
    insert_before(parent, stranger, make_element("b"))
    assert_same_children(parent, before)
    replace_child(parent, stranger, make_element("b"))
    assert_same_children(parent, before)
    remove_child(parent, stranger)
    assert_same_children(parent, before)


def test_text_children_are_not_targets():
    parent, _, _ = make_parent()
    text = parent.children[1]
    before = list(parent.children)
    insert_after(parent, text, make_element("b"))  # type: ignore
    replace_child(parent, text, make_element("b"))  # type: ignore
    remove_child(parent, text)  # type: ignore
    assert_same_children(parent, before)


def test_replace_child():
    parent, first, second = make_parent()
    new = make_element("em")
    assert replace_child(parent, first, new) is parent
    assert parent.children[0] is new
    assert parent.children[2] is second
    assert get_children_names(parent) == ["em", "span"]


def test_remove_child_keeps_other_children():
    parent, first, second = make_parent()
    text = parent.children[1]
    assert remove_child(parent, second) is parent
    assert_same_children(parent, [first, text])


def test_replace_children():
    parent, _, _ = make_parent()
    children = [make_element("li"), Text("x")]
    replace_children(parent, children)
    assert parent.children is children


def test_fragment_parent():
    item = make_element("li")
    fragment = Fragment([item])
    insert_before(fragment, item, make_element("hr"))
    assert get_children_names(make_element("ul", children=fragment.children)) == [
        "hr",
        "li",
    ]
