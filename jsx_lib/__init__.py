import dataclasses

from loguru import logger

from . import nodes
from .attributes import (
    add_attribute,
    get_attribute,
    get_attribute_value,
    get_attributes,
    has_attribute_value,
    has_id,
    make_attribute_filter,
    remove_attribute_by_name,
    update_attribute,
    update_attributes,
    visit_attributes,
)
from .children import (
    append_child,
    insert_after,
    insert_before,
    remove_child,
    replace_child,
    replace_children,
)
from .clone import clone_element
from .convert import from_dict, to_dict
from .names import get_attribute_name, get_element_name, get_member_expression_name
from .nodes import *
from .search import find_elements, find_parent, get_children_names, visit_elements_by_name
from .utils import iter_child_nodes, iter_fields, make_attribute, make_element, walk
from .visitor import (
    # Core visitor
    BaseNodeVisitor,
    Hook,
    HookMode,
    NodeListCollector,
    NodeReducer,
    NodeVisitor,
    ParentMap,
    PureNodeVisitHook,
    SkipNode,
    nodelist_collector,
    pure_visit,
)

logger.disable(__name__)


def set_debug(enabled: bool = True) -> None:
    """Turn the package's loguru debug output on or off."""
    if enabled:
        logger.enable(__name__)
    else:
        logger.disable(__name__)


def dump(
    node: nodes.Node,
    annotate_fields=True,
    *,
    indent: int | str | None = None,
) -> str:
    """
    Return a formatted dump of the tree in node, like ``ast.dump``. If
    annotate_fields is true (by default), field names are shown next to their
    values; otherwise the output omits them. If indent is a non-negative
    integer or string, the tree is pretty-printed with that indent level.
    None (the default) selects the single line representation.
    """

    def _fields(node: nodes.Node) -> list[tuple[str, object]]:
        if isinstance(node, nodes.OpaqueNode):
            return [("type", node.type), *node.fields.items()]
        return [
            (field.name, getattr(node, field.name))
            for field in dataclasses.fields(node)  # pyright: ignore
        ]

    def _format(node, level=0):
        if isinstance(indent, str):
            level += 1
            prefix = "\n" + indent * level
            sep = ",\n" + indent * level
        else:
            prefix = ""
            sep = ", "
        if isinstance(node, nodes.Node):
            args = []
            allsimple = True
            for name, value in _fields(node):
                value, simple = _format(value, level)
                allsimple = allsimple and simple
                if annotate_fields:
                    args.append("%s=%s" % (name, value))
                else:
                    args.append(value)
            if allsimple and len(args) <= 3:
                return "%s(%s)" % (node.__class__.__name__, ", ".join(args)), not args
            return "%s(%s%s)" % (node.__class__.__name__, prefix, sep.join(args)), False
        elif isinstance(node, list):
            if not node:
                return "[]", True
            return "[%s%s]" % (
                prefix,
                sep.join(_format(x, level)[0] for x in node),
            ), False
        return repr(node), True

    if indent is not None and not isinstance(indent, str):
        indent = " " * indent
    return _format(node)[0]


__all__ = (
    # Names
    "get_element_name",
    "get_member_expression_name",
    "get_attribute_name",
    # Attributes
    "visit_attributes",
    "get_attributes",
    "get_attribute",
    "get_attribute_value",
    "remove_attribute_by_name",
    "add_attribute",
    "update_attribute",
    "update_attributes",
    "make_attribute_filter",
    "has_attribute_value",
    "has_id",
    # Children
    "append_child",
    "insert_after",
    "insert_before",
    "replace_child",
    "remove_child",
    "replace_children",
    # Search
    "visit_elements_by_name",
    "get_children_names",
    "find_elements",
    "find_parent",
    # Clone
    "clone_element",
    # Conversion
    "from_dict",
    "to_dict",
    # Utils
    "iter_fields",
    "iter_child_nodes",
    "walk",
    "make_attribute",
    "make_element",
    # Visitor
    "NodeVisitor",
    "BaseNodeVisitor",
    "Hook",
    "HookMode",
    "SkipNode",
    "ParentMap",
    "PureNodeVisitHook",
    "pure_visit",
    "NodeReducer",
    "NodeListCollector",
    "nodelist_collector",
    "dump",
    "set_debug",
)

__all__ += nodes.__all__
