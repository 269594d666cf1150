from __future__ import annotations

from loguru import logger

from .names import get_element_name
from .nodes import Element, OpeningElement, clone_node


def clone_element(element: Element) -> Element:
    """
    Deep-copy *element*: name, attributes, closing tag and children are all
    new objects, so edits on the copy never reach the original.
    """
    logger.debug(f"Cloning <{get_element_name(element)}>")
    opening = element.opening
    return Element(
        OpeningElement(
            clone_node(opening.name),
            [clone_node(attr) for attr in opening.attributes],
            opening.self_closing,
        ),
        clone_node(element.closing) if element.closing is not None else None,
        [clone_node(child) for child in element.children],
    )
