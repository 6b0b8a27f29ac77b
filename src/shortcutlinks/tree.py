"""Bottom-up traversal over document trees.

Works on any tree whose nodes expose ``type`` and ``children``, which is the
shape of markdown-it-py's ``SyntaxTreeNode``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


def walk_bottom_up(root: Any, node_type: str | None = None) -> Iterator[Any]:
    """Yield nodes children-first, in reading order among siblings.

    Args:
        root: Tree root.
        node_type: Only yield nodes of this type; None yields every node.
    """
    # (node, children already pushed)
    stack: list[tuple[Any, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            if node_type is None or node.type == node_type:
                yield node
            continue
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))


class TreeVisitor(ABC):
    """Calls ``visit`` on every node of one type, bottom-up.

    Subclasses implement ``visit``; ``node_type`` picks the node kind.
    """

    node_type: str | None = None

    def __init__(self, node_type: str | None = None) -> None:
        if node_type is not None:
            self.node_type = node_type

    @abstractmethod
    def visit(self, node: Any) -> None:
        """Handle one matching node."""

    def run(self, root: Any) -> None:
        """Visit all matching nodes under root (root included)."""
        for node in walk_bottom_up(root, self.node_type):
            self.visit(node)

