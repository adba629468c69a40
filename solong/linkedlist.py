"""A doubly linked list of integer-carrying nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a :class:`DoublyLinkedList`.

    Besides its value and links, a node carries bookkeeping fields that
    sorting algorithms built on the list may use.
    """

    data: Any
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A list with head and tail references and links in both directions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def push_back(self, data: Any) -> Node:
        """Append a new node holding ``data`` and return it."""
        node = Node(data)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        return node

    def push_front(self, data: Any) -> Node:
        """Prepend a new node holding ``data`` and return it."""
        node = Node(data)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        return node

    def clear(self) -> None:
        """Remove every node, unlinking each one."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = node.prev = None
            node = following
        self.head = self.tail = None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the value of each node, head first."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "DoublyLinkedList":
        """Return a new list of ``func`` applied to each value, in order."""
        return DoublyLinkedList(func(value) for value in self)