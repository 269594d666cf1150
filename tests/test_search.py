from jsx_lib.names import get_element_name
from jsx_lib.nodes import ExpressionContainer, Fragment, OpaqueNode, Text
from jsx_lib.search import (
    find_elements,
    find_parent,
    get_children_names,
    visit_elements_by_name,
)
from jsx_lib.utils import make_element


def make_program():
    """
    function App() {
      return <div id="app"><Button /><ul><li>a</li><li>{cond && <Button />}</li></ul></div>;
    }
    """
    inner_button = make_element("Button")
    logical = OpaqueNode(
        "LogicalExpression",
        {
            "operator": "&&",
            "left": OpaqueNode("Identifier", {"name": "cond"}),
            "right": inner_button,
        },
    )
    tree = make_element(
        "div",
        {"id": "app"},
        [
            make_element("Button"),
            make_element(
                "ul",
                children=[
                    make_element("li", children=["a"]),
                    make_element("li", children=[ExpressionContainer(logical)]),
                ],
            ),
        ],
    )
    ret = OpaqueNode("ReturnStatement", {"argument": tree})
    program = OpaqueNode(
        "Program",
        {
            "body": [
                OpaqueNode(
                    "FunctionDeclaration",
                    {
                        "id": OpaqueNode("Identifier", {"name": "App"}),
                        "params": [],
                        "body": OpaqueNode("BlockStatement", {"body": [ret]}),
                    },
                )
            ],
            "sourceType": "module",
        },
    )
    return program, tree, inner_button


def collect(node, name):
    found = []
    visit_elements_by_name(node, name, found.append)
    return found


def test_children_names_skip_text():
    element = make_element("div", children=[make_element("span"), "text", make_element("p")])
    assert get_children_names(element) == ["span", "p"]


def test_search_tunnels_through_wrappers():
    program, tree, inner_button = make_program()
    buttons = collect(program, "Button")
    assert len(buttons) == 2
    assert buttons[0] is tree.children[0]
    assert buttons[1] is inner_button


def test_empty_name_visits_every_element_in_preorder():
    program, _, _ = make_program()
    names = [get_element_name(element) for element in collect(program, "")]
    assert names == ["div", "Button", "ul", "li", "li", "Button"]


def test_search_continues_below_a_match():
    inner = make_element("div")
    outer = make_element("div", children=[make_element("div", children=[inner])])
    found = collect(outer, "div")
    assert len(found) == 3
    assert found[0] is outer
    assert found[2] is inner


def test_search_without_match():
    program, _, _ = make_program()
    assert collect(program, "Missing") == []


def test_search_does_not_enter_attributes_of_elements():
    nested = make_element("Icon")
    element = make_element("Button", {"icon": ExpressionContainer(nested)})
    assert collect(element, "Icon") == []
    # Starting at the attribute itself reaches it
    assert collect(element.opening.attributes[0], "Icon") == [nested]


def test_search_fragment_root():
    fragment = Fragment([make_element("a"), Text("x"), make_element("b")])
    assert [get_element_name(e) for e in collect(fragment, "")] == ["a", "b"]


def test_find_elements_matches_visit_order():
    program, _, _ = make_program()
    for name in ("", "Button", "li", "Missing"):
        found = find_elements(program, name)
        expected = collect(program, name)
        assert len(found) == len(expected)
        assert all(a is b for a, b in zip(found, expected))


def test_find_parent():
    program, tree, inner_button = make_program()
    ul = tree.children[1]
    first_li = ul.children[0]  # pyright: ignore

    assert find_parent(program, first_li) is ul
    assert find_parent(program, program) is None
    assert find_parent(program, make_element("li")) is None

    logical = find_parent(program, inner_button)
    assert isinstance(logical, OpaqueNode)
    assert logical.type == "LogicalExpression"

    attr = tree.opening.attributes[0]
    assert find_parent(program, attr) is tree.opening
