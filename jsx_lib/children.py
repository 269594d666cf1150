"""
In-place edits of an element's child list.

Targets are found by identity among the ``Element`` children only, so two
structurally identical siblings stay independently addressable. A target that
is not there turns the edit into a no-op; nothing is raised.
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from .nodes import Child, Element


class HasChildren(Protocol):
    children: list[Child]


def _index_of(parent: HasChildren, target: Element) -> int:
    for index, child in enumerate(parent.children):
        if isinstance(child, Element) and child is target:
            return index
    return -1


def append_child[P: HasChildren](parent: P, child: Child) -> P:
    parent.children.append(child)
    return parent


def insert_after[P: HasChildren](parent: P, target: Element, sibling: Child) -> P:
    index = _index_of(parent, target)
    if index == -1:
        logger.debug("insert_after: target is not a child of parent, skipped")
        return parent
    parent.children.insert(index + 1, sibling)
    return parent


def insert_before[P: HasChildren](parent: P, target: Element, sibling: Child) -> P:
    index = _index_of(parent, target)
    if index == -1:
        logger.debug("insert_before: target is not a child of parent, skipped")
        return parent
    parent.children.insert(index, sibling)
    return parent


def replace_child[P: HasChildren](parent: P, old: Element, new: Child) -> P:
    index = _index_of(parent, old)
    if index == -1:
        logger.debug("replace_child: target is not a child of parent, skipped")
        return parent
    parent.children[index] = new
    return parent


def remove_child[P: HasChildren](parent: P, child: Element) -> P:
    parent.children = [
        item
        for item in parent.children
        if not (isinstance(item, Element) and item is child)
    ]
    return parent


def replace_children[P: HasChildren](parent: P, children: list[Child]) -> P:
    parent.children = children
    return parent
