from __future__ import annotations

from typing import Callable, Mapping

from loguru import logger

from .nodes import Attribute, AttributeValue, Element, Identifier, StringLiteral
from .utils import make_attribute

type AttributeInput = AttributeValue | str


def _name_is(attr: object, name: str) -> bool:
    # Namespaced attribute names never match a plain name
    return (
        isinstance(attr, Attribute)
        and isinstance(attr.name, Identifier)
        and attr.name.name == name
    )


def visit_attributes(element: Element, visitor: Callable[[Attribute], object]) -> None:
    """Call *visitor* on every ``Attribute`` of *element*, skipping spreads."""
    for attr in element.opening.attributes:
        if isinstance(attr, Attribute):
            visitor(attr)


def get_attributes(element: Element) -> list[Attribute]:
    return [attr for attr in element.opening.attributes if isinstance(attr, Attribute)]


def get_attribute(element: Element, name: str) -> Attribute | None:
    for attr in element.opening.attributes:
        if _name_is(attr, name):
            return attr  # pyright: ignore
    return None


def get_attribute_value(element: Element, name: str) -> str | None:
    attr = get_attribute(element, name)
    if attr is not None and isinstance(attr.value, StringLiteral):
        return attr.value.value
    return None


def remove_attribute_by_name(element: Element, name: str) -> Element:
    element.opening.attributes = [
        attr for attr in element.opening.attributes if not _name_is(attr, name)
    ]
    return element


def add_attribute(element: Element, name: str, value: AttributeInput = None) -> Element:
    """Append ``name=value``. Existing attributes with the same name are kept."""
    element.opening.attributes.append(make_attribute(name, value))
    return element


def update_attribute(element: Element, name: str, value: AttributeInput) -> Element:
    """
    Replace the first attribute called *name* with a new one carrying *value*.
    Does nothing when there is no such attribute; use ``add_attribute`` for that.
    """
    attributes = element.opening.attributes
    for index, attr in enumerate(attributes):
        if _name_is(attr, name):
            attributes[index] = make_attribute(name, value)
            return element

    logger.debug(f"Attribute {name!r} not found, nothing to update")
    return element


def update_attributes(element: Element, values: Mapping[str, AttributeInput]) -> Element:
    for name, value in values.items():
        update_attribute(element, name, value)
    return element


def make_attribute_filter(
    predicate: Callable[[Attribute], bool],
) -> Callable[[Element], Element]:
    """
    Build a reusable filter that drops every ``Attribute`` matching
    *predicate*. Spread attributes always survive.
    """

    def apply(element: Element) -> Element:
        element.opening.attributes = [
            attr
            for attr in element.opening.attributes
            if not isinstance(attr, Attribute) or not predicate(attr)
        ]
        return element

    return apply


def has_attribute_value(element: Element, name: str, value: str) -> bool:
    return any(
        _name_is(attr, name)
        and isinstance(attr.value, StringLiteral)
        and attr.value.value == value
        for attr in get_attributes(element)
    )


def has_id(element: Element, id: str) -> bool:
    return has_attribute_value(element, "id", id)
