from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator

from ..nodes import Node
from .core import Hook, HookMode, HookProvider, NodeVisitor
from .utils import DescriptorHelper, call_with_optional_self

type NodeTypes[N] = type[N] | tuple[type[N], ...]
type VisitHook[VisitorT: NodeVisitor, N: Node] = (
    Callable[[N], Any] | Callable[[VisitorT, N], Any]
)


class ParentMap(HookProvider, DescriptorHelper):
    """
    Records, for every visited node, the node whose field holds it. The root
    maps to ``None``.
    """

    def get_hook(self) -> Hook:
        def setup(instance: NodeVisitor) -> None:
            self._set_attr(instance, "stack", [])
            self._set_attr(instance, "parent_map", {})

        @contextmanager
        def func(instance: NodeVisitor, node: Node) -> Iterator[None]:
            stack: list[Node] = self._get_attr(instance, "stack")
            parent_map: dict[Node, Node | None] = self._get_attr(instance, "parent_map")
            parent_map[node] = stack[-1] if stack else None
            stack.append(node)
            try:
                yield
            finally:
                stack.pop()

        return Hook((Node,), "wrap", func, setup)

    def __get__(
        self, instance: NodeVisitor | None, owner: type[NodeVisitor]
    ) -> dict[Node, Node | None]:
        if instance is None:
            return self  # pyright: ignore
        return self._get_attr(instance, "parent_map")


class PureNodeVisitHook[VisitorT: NodeVisitor, N: Node](HookProvider, DescriptorHelper):
    def __init__(
        self,
        node_types: NodeTypes[N],
        func: VisitHook[VisitorT, N],
        mode: HookMode = "before",
        before: tuple[str, ...] = (),
        after: tuple[str, ...] = (),
        names: tuple[str, ...] = (),
    ):
        if not isinstance(node_types, tuple):
            node_types = (node_types,)

        def hook_func(instance: NodeVisitor, node: Node):
            return call_with_optional_self(func, instance, node)

        self.hook = Hook(
            node_types,
            mode,
            hook_func,
            setup=None,
            before=before,
            after=after,
            names=names,
        )

    def get_hook(self) -> Hook:
        return self.hook


def pure_visit[VisitorT: NodeVisitor, N: Node](
    *node_types: type[N],
    mode: HookMode = "before",
    before: tuple[str, ...] = (),
    after: tuple[str, ...] = (),
    names: tuple[str, ...] = (),
) -> Callable[[VisitHook[VisitorT, N]], PureNodeVisitHook[VisitorT, N]]:
    """
    Turn a method into a hook run for every node of *node_types*::

        class Visitor(BaseNodeVisitor):
            @pure_visit(Element, names=("button",))
            def on_button(self, node: Element): ...
    """

    def wrapper(func: VisitHook[VisitorT, N]) -> PureNodeVisitHook[VisitorT, N]:
        return PureNodeVisitHook(node_types, func, mode, before, after, names)

    return wrapper
