"""Deep copy of a linked list whose nodes carry an extra random pointer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node with a ``next`` link and an arbitrary ``random`` link."""

    val: int
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def _interleave_copies(head: RandomNode) -> None:
    node = head
    while node is not None:
        following = node.next
        node.next = RandomNode(node.val, following)
        node = following


def _connect_random(head: RandomNode) -> None:
    node = head
    while node is not None:
        copy = node.next
        copy.random = node.random.next if node.random is not None else None
        node = copy.next


def _split_copies(head: RandomNode) -> RandomNode:
    dummy = RandomNode(-1)
    tail = dummy
    node = head
    while node is not None:
        copy = node.next
        tail.next = copy
        tail = copy
        node.next = copy.next
        node = node.next
    return dummy.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of the list; the original is left unchanged."""
    if head is None:
        return None
    _interleave_copies(head)
    _connect_random(head)
    return _split_copies(head)