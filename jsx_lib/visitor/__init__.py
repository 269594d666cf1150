from .core import (
    BaseNodeVisitor,
    Hook,
    HookMode,
    HookProvider,
    NodeVisitor,
)
from .exception import (
    SkipNode,
)
from .presets import (
    ParentMap,
    PureNodeVisitHook,
    pure_visit,
)
from .reducer import (
    NodeListCollector,
    NodeReducer,
    nodelist_collector,
)

__all__ = [
    # Core visitor
    "NodeVisitor",
    "BaseNodeVisitor",
    "Hook",
    "HookMode",
    "HookProvider",
    # Exception
    "SkipNode",
    # Presets
    "ParentMap",
    "PureNodeVisitHook",
    "pure_visit",
    # Reducers and collectors
    "NodeReducer",
    "NodeListCollector",
    "nodelist_collector",
]
