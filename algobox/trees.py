"""Binary tree node and recovery of a tree whose values were overwritten."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


class FindElements:
    """Restore a contaminated tree (root 0, children 2x+1 and 2x+2) and answer lookups."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values: set[int] = set()
        pending = [(root, 0)]
        while pending:
            node, value = pending.pop()
            if node is None:
                continue
            node.val = value
            self._values.add(value)
            pending.append((node.right, 2 * value + 2))
            pending.append((node.left, 2 * value + 1))

    def find(self, target: int) -> bool:
        """Tell whether ``target`` is a value of the restored tree."""
        return target in self._values