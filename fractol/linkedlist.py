"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    content: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: T) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: T) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[T]:
        """The content of the last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each content that is not None to ``delete``."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None and node.content is not None:
                delete(node.content)
            node = node.next

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents mapped so far are handed to
        ``delete`` and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result