"""Singly linked list node and the classic operations on such lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    dummy = ListNode(-1)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end and return the new head.

    Raises ValueError when n is not between 1 and the length of the list.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    slow.next = slow.next.next
    return head


def _kth_node(node: Optional[ListNode], k: int) -> Optional[ListNode]:
    steps = k - 1
    while node is not None and steps > 0:
        steps -= 1
        node = node.next
    return node


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in groups of k nodes; a short final group stays as is."""
    current = head
    prev_last: Optional[ListNode] = None
    while current is not None:
        kth = _kth_node(current, k)
        if kth is None:
            if prev_last is not None:
                prev_last.next = current
            break
        next_group = kth.next
        kth.next = None
        reverse_list(current)
        if current is head:
            head = kth
        else:
            prev_last.next = kth
        prev_last = current
        current = next_group
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places and return the new head."""
    if head is None or k == 0:
        return head
    length = 1
    tail = head
    while tail.next is not None:
        length += 1
        tail = tail.next
    k %= length
    if k == 0:
        return head
    tail.next = head
    new_last = head
    for _ in range(length - k - 1):
        new_last = new_last.next
    head = new_last.next
    new_last.next = None
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None for an acyclic list."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return fast
    return None


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def _middle_for_split(head: ListNode) -> ListNode:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    middle = _middle_for_split(head)
    right = middle.next
    middle.next = None
    return merge_two_lists(sort_list(head), sort_list(right))


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next
        b = b.next
        if a is b:
            return a
        if a is None:
            a = head_b
        if b is None:
            b = head_a
    return a


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second_head = reverse_list(slow.next)
    first, second = head, second_head
    result = True
    while second is not None:
        if first.val != second.val:
            result = False
            break
        first = first.next
        second = second.next
    # slow.next still points at the node that heads the restored half.
    reverse_list(second_head)
    return result


def delete_node(node: Optional[ListNode]) -> None:
    """Remove ``node`` from its list given only that node; a tail node is left alone."""
    if node is None or node.next is None:
        return
    node.val = node.next.val
    node.next = node.next.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group the nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = odd.next.next
        even.next = even.next.next
        odd = odd.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the middle node (index len // 2) and return the head."""
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head