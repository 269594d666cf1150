from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..nodes import Node


class SkipNode(Exception):
    """
    Raised from a hook to leave *node* alone: a before/wrap hook skips the
    node's subtree, a reducer callback skips the node's contribution.
    """

    def __init__(self, node: Node):
        super().__init__()
        self.node = node
