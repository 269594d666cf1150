from __future__ import annotations

from abc import abstractmethod
from collections import defaultdict
from contextlib import AbstractContextManager
from typing import (
    Any,
    Callable,
    ClassVar,
    Literal,
    NamedTuple,
    Protocol,
    runtime_checkable,
)

from pydantic.dataclasses import dataclass

from ..names import get_element_name
from ..nodes import Element, Node
from ..utils import iter_child_nodes
from .exception import SkipNode

type HookMode = Literal["before", "after", "wrap"]


class NodeVisitor:
    """
    Walks a tree and calls ``visit_<ClassName>`` for every node, falling back
    to ``generic_visit``; the counterpart of ``ast.NodeVisitor``.
    """

    def visit(self, node: Node) -> Any:
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Node) -> None:
        for child in iter_child_nodes(node):
            self.visit(child)


@dataclass
class Hook:
    node_types: tuple[type[Node], ...]
    mode: HookMode
    func: Callable[..., Any]
    #
    setup: Callable[..., None] | None = None
    before: tuple[str, ...] = ()
    after: tuple[str, ...] = ()
    # Only elements with one of these names trigger the hook
    names: tuple[str, ...] = ()

    def applies_to(self, node: Node) -> bool:
        if not isinstance(node, self.node_types):
            return False
        if not self.names:
            return True
        return isinstance(node, Element) and get_element_name(node) in self.names


@runtime_checkable
class HookProvider(Protocol):
    @abstractmethod
    def get_hook(self) -> Hook: ...


class HookEvent(NamedTuple):
    type: Literal["enter", "exit"]
    name: str


def solve_hook_order(hooks: dict[str, Hook]) -> list[HookEvent]:
    # topological sort over `before`/`after` edges; children_map[name] run after name
    # ! an `after` hook can never run ahead of a `before` hook

    def check_hook_name(name: str) -> None:
        if name not in hooks:
            raise ValueError(f"Hook name {name} is not defined")

    def check_valid(earlier: str, later: str) -> None:
        if hooks[earlier].mode == "after" and hooks[later].mode == "before":
            raise ValueError(
                f"Hook {later} has mode `before` but must run after {earlier}, which has mode `after`"
            )

    children_map: dict[str, list[str]] = defaultdict(list)
    for name, hook in hooks.items():
        for before in hook.before:
            check_hook_name(before)
            children_map[name].append(before)
        for after in hook.after:
            check_hook_name(after)
            children_map[after].append(name)

    for name, children in children_map.items():
        for child in children:
            check_valid(name, child)

    status_map: dict[str, Literal["white", "gray", "black"]] = {
        name: "white" for name in hooks
    }
    reversed_events: list[HookEvent] = []

    def dfs(cur_name: str, path: list[str]) -> None:
        if status_map[cur_name] == "black":
            return
        if status_map[cur_name] == "gray":
            cycle = path[path.index(cur_name) :] + [cur_name]
            raise ValueError(f"Cycle detected in hooks: {' -> '.join(cycle)}")

        status_map[cur_name] = "gray"
        for child in children_map[cur_name]:
            dfs(child, path + [cur_name])
        status_map[cur_name] = "black"

        match hooks[cur_name].mode:
            case "wrap":
                reversed_events.append(HookEvent("exit", cur_name))
                reversed_events.append(HookEvent("enter", cur_name))
            case "before":
                reversed_events.append(HookEvent("enter", cur_name))
            case "after":
                reversed_events.append(HookEvent("exit", cur_name))

    # without edges, declaration order is kept
    for name in reversed(hooks):
        dfs(name, [])

    return reversed_events[::-1]


class BaseNodeVisitor(NodeVisitor):
    """
    A ``NodeVisitor`` whose class attributes can contribute hooks (see
    ``HookProvider``). Enter events (before hooks, wrap enter) run ahead of
    the ``visit_*`` method, exit events (wrap exit, after hooks) after it. Within
    each group hooks keep their declaration order unless their ``before`` /
    ``after`` names say otherwise.
    """

    __visit_hook_map__: ClassVar[dict[str, Hook]] = {}
    __visit_hook_events__: ClassVar[list[HookEvent]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        hooks_map: dict[str, Hook] = {}
        for base in reversed(cls.__mro__):
            for obj_name, obj in base.__dict__.items():
                if isinstance(obj, HookProvider):
                    hooks_map[obj_name] = obj.get_hook()

        cls.__visit_hook_map__ = hooks_map
        cls.__visit_hook_events__ = solve_hook_order(hooks_map)

    def __init__(self) -> None:
        for hook in self.__visit_hook_map__.values():
            if hook.setup is not None:
                hook.setup(self)

    def visit(self, node: Node) -> Any:
        events = self.__visit_hook_events__
        enter_names = [event.name for event in events if event.type == "enter"]
        exit_names = [event.name for event in events if event.type == "exit"]
        wrap_contexts: dict[str, AbstractContextManager] = {}

        try:
            for name in enter_names:
                hook = self.__visit_hook_map__[name]
                if not hook.applies_to(node):
                    continue

                try:
                    if hook.mode == "before":
                        hook.func(self, node)
                    elif hook.mode == "wrap":
                        ctx = hook.func(self, node)
                        if not isinstance(ctx, AbstractContextManager):
                            raise ValueError(
                                f"Hook {name} with mode 'wrap' must return a context manager"
                            )
                        ctx.__enter__()
                        wrap_contexts[name] = ctx
                    else:
                        raise ValueError(
                            f"Invalid hook mode for event `enter`: {hook.mode}"
                        )
                except SkipNode:
                    _exit_contexts(wrap_contexts)
                    return None

            ret = super().visit(node)

            for name in exit_names:
                hook = self.__visit_hook_map__[name]
                if not hook.applies_to(node):
                    continue
                if hook.mode == "after":
                    hook.func(self, node)
                elif hook.mode == "wrap":
                    wrap_contexts.pop(name).__exit__(None, None, None)
                else:
                    raise ValueError(f"Invalid hook mode for event `exit`: {hook.mode}")
        finally:
            # Left over only when the visit was cut short
            _exit_contexts(wrap_contexts)

        return ret


def _exit_contexts(wrap_contexts: dict[str, AbstractContextManager]) -> None:
    while wrap_contexts:
        _, ctx = wrap_contexts.popitem()
        ctx.__exit__(None, None, None)
