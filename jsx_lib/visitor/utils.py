from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .core import NodeVisitor


def count_positional_params(func: Callable[..., Any]) -> int:
    sig = inspect.signature(func)
    for name, param in sig.parameters.items():
        if param.kind in (
            inspect.Parameter.KEYWORD_ONLY,
            inspect.Parameter.VAR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            raise ValueError(f"Invalid parameter kind of {name}: {param.kind}")
    return len(sig.parameters)


def call_with_optional_self[R](
    func: Callable[..., R],
    self: NodeVisitor,
    *args: Any,
) -> R:
    """
    Call *func* with *args*, prepending the visitor when *func* takes one more
    parameter than that. Lets callbacks be written as ``lambda node: ...`` or
    as methods ``def f(self, node): ...``.
    """
    num_params = count_positional_params(func)

    if num_params == len(args):
        return func(*args)
    if num_params == len(args) + 1:
        return func(self, *args)

    raise ValueError(
        f"Callback {getattr(func, '__name__', func)!r} takes {num_params} "
        f"arguments, expected {len(args)} or {len(args) + 1}"
    )


class DescriptorHelper:
    """Stores per-visitor state under ``_<attribute name>_<key>``."""

    _name: str | None = None

    def __set_name__(self, owner: type[NodeVisitor], name: str) -> None:
        self._name = name

    def _make_attr_name(self, name: str) -> str:
        if self._name is None:
            raise ValueError("DescriptorHelper is not initialized")
        return f"_{self._name}_{name}"

    def _has_attr(self, instance: NodeVisitor, name: str) -> bool:
        return hasattr(instance, self._make_attr_name(name))

    def _get_attr(self, instance: NodeVisitor, name: str) -> Any:
        return getattr(instance, self._make_attr_name(name))

    def _set_attr(self, instance: NodeVisitor, name: str, value: Any) -> None:
        setattr(instance, self._make_attr_name(name), value)
