"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["ListNode", "LinkedList"]


@dataclass
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with constant-time insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the front and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` at the back and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def last(self) -> ListNode | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def remove_first(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Unlink the first node and return its content.

        ``delete`` is called with the content before it is returned.
        Raises IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("remove_first from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content from front to back."""
        for content in self:
            func(content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"