"""Singly linked lists of integers and a merge sort over them."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = field(default=None, repr=False)


def merge_lists(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two ascending lists into one by relinking their nodes."""
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list by merge sort, splitting with slow and fast pointers."""
    if head is None or head.next is None:
        return head

    dummy = ListNode(0, head)
    slow: ListNode = dummy
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow.next is not None
        slow = slow.next
    second = slow.next
    slow.next = None

    return merge_lists(sort_list(head), sort_list(second))


def from_iterable(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def iter_values(head: Optional[ListNode]) -> Iterator[int]:
    """Yield the values of a linked list from head to tail."""
    while head is not None:
        yield head.val
        head = head.next


def format_list(head: Optional[ListNode]) -> str:
    """Render a linked list as its values joined by ``" -> "``."""
    return " -> ".join(str(value) for value in iter_values(head))


_DEMO_CASES = (
    [4, 2, 1, 3],
    [1, 2, 3, 4],
    [],
    [1],
    [3, 1, 4, 1, 2],
)


def main(argv: Optional[list[str]] = None) -> int:
    """Print a few lists before and after sorting."""
    parser = argparse.ArgumentParser(description="Demonstrate linked-list merge sort.")
    parser.parse_args(argv)

    for number, values in enumerate(_DEMO_CASES):
        prefix = "\n" if number else ""
        head = from_iterable(values)
        if head is None:
            print(f"{prefix}Original list: (empty)")
        else:
            print(f"{prefix}Original list: {format_list(head)}")
        head = sort_list(head)
        print(f"Sorted list: {format_list(head)}")
    return 0