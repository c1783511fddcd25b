"""Singly linked lists: building, printing, reversing and merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[Any]:
    """The values of the list starting at ``head``."""
    return [node.value for node in _nodes(head)]


def format_list(head: Optional[ListNode]) -> str:
    """Each value followed by an arrow, e.g. ``1->2->``."""
    return "".join(f"{node.value}->" for node in _nodes(head))


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def merge_sorted(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list, reusing their nodes.

    On equal values the node from ``second`` goes first.
    """
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next