from __future__ import annotations

from typing import Callable, Generator, Literal, TypedDict, Unpack, cast

from ..nodes import Node
from .core import Hook, HookProvider, NodeVisitor
from .exception import SkipNode
from .utils import DescriptorHelper, call_with_optional_self

# ---------------------------------------------------------------------------- #
#                                     Types                                    #
# ---------------------------------------------------------------------------- #

type ReducerHookMode = Literal["before", "after"]

type NodeTypes[N] = type[N] | tuple[type[N], ...]
type InitialValue[T] = Callable[[], T] | T
type GetValue[VisitorT, N, T] = Callable[[N], T] | Callable[[VisitorT, N], T]


class ReducerOptions(TypedDict, total=False):
    mode: ReducerHookMode
    before: tuple[str, ...]
    names: tuple[str, ...]


_DEFAULT_OPTIONS: ReducerOptions = {
    "mode": "before",
    "before": (),
    "names": (),
}


# ------------------------------- Base Reducer ------------------------------- #


class NodeReducer[VisitorT: NodeVisitor, N: Node, T](HookProvider, DescriptorHelper):
    """
    Folds every visited node of *node_types* into a value kept on the visitor
    and exposed through the attribute this reducer is assigned to.
    """

    def __init__(
        self,
        node_types: NodeTypes[N],
        initial_value: InitialValue[T],
        reducer: Callable[..., T],
        **kwargs: Unpack[ReducerOptions],
    ):
        if not isinstance(node_types, tuple):
            node_types = (node_types,)

        self.node_types = node_types
        self.initial_value = initial_value
        self.reducer = reducer
        self.options = kwargs

    def __get__(self, instance: VisitorT | None, owner: type[VisitorT]) -> T:
        if instance is None:
            return self  # pyright: ignore
        return self._get_attr(instance, "value")

    def get_hook(self) -> Hook:
        def setup(instance: NodeVisitor) -> None:
            value: T
            if callable(self.initial_value):
                value = cast(T, self.initial_value())
            else:
                value = cast(T, self.initial_value)
            self._set_attr(instance, "value", value)

        def func(instance: NodeVisitor, node: Node):
            prev_value = self._get_attr(instance, "value")
            try:
                value = call_with_optional_self(self.reducer, instance, prev_value, node)
            except SkipNode:
                return

            self._set_attr(instance, "value", value)

        return Hook(
            self.node_types,
            self.options.get("mode", _DEFAULT_OPTIONS["mode"]),
            func,
            setup=setup,
            before=self.options.get("before", _DEFAULT_OPTIONS["before"]),
            names=self.options.get("names", _DEFAULT_OPTIONS["names"]),
        )


# ----------------------------------- List ----------------------------------- #


class NodeListCollector[VisitorT: NodeVisitor, N: Node, Value](
    NodeReducer[VisitorT, N, list[Value]]
):
    def __init__(
        self,
        node_types: NodeTypes[N],
        get_value: GetValue[VisitorT, N, Value | Generator[Value]],
        **kwargs: Unpack[ReducerOptions],
    ):
        def reducer(instance: VisitorT, acc: list[Value], node: N) -> list[Value]:
            value = call_with_optional_self(get_value, instance, node)
            if isinstance(value, Generator):
                acc.extend(value)
            else:
                acc.append(value)
            return acc

        super().__init__(node_types, list, reducer, **kwargs)


def nodelist_collector[VisitorT: NodeVisitor, N: Node, Value](
    *node_types: type[N],
    **kwargs: Unpack[ReducerOptions],
):
    def decorator(get_value: GetValue[VisitorT, N, Value | Generator[Value]]):
        return NodeListCollector(node_types, get_value, **kwargs)

    return decorator
