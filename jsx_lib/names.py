from __future__ import annotations

from .nodes import Attribute, Element, Identifier, MemberExpression, NamespacedName


def get_element_name(element: Element) -> str:
    """
    Return the written name of *element*: ``"div"``, ``"Components.Button"``
    or ``"svg:path"``. Unknown name shapes give ``""``.
    """
    match element.opening.name:
        case Identifier(name=name):
            return name
        case MemberExpression() as member:
            return get_member_expression_name(member)
        case NamespacedName(namespace=namespace, name=local):
            return f"{namespace.name}:{local.name}"
        case _:
            return ""


def get_member_expression_name(member: MemberExpression) -> str:
    match member.object:
        case Identifier(name=name):
            object_name = name
        case MemberExpression() as inner:
            object_name = get_member_expression_name(inner)
        case _:
            object_name = ""
    return f"{object_name}.{member.property.name}"


def get_attribute_name(attribute: Attribute) -> str:
    match attribute.name:
        case Identifier(name=name):
            return name
        case NamespacedName(namespace=namespace, name=local):
            return f"{namespace.name}:{local.name}"
        case _:
            return ""
