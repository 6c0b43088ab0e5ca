"""A singly linked list of nodes that each carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any = None
    next: Optional["Node"] = None

    def delete(self, delete: Optional[Deleter]) -> None:
        """Release this node's content with ``delete``; the successor is untouched."""
        if delete is None:
            return
        delete(self.content)


class LinkedList:
    """A singly linked list reachable from its ``head`` node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(Node(content))

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node from head to tail."""
        for node in self.nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, node: Optional[Node]) -> None:
        """Insert ``node`` at the beginning of the list."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Append ``node`` at the end of the list."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def clear(self, delete: Optional[Deleter]) -> None:
        """Delete every node's content with ``delete`` and empty the list.

        Without a ``delete`` function the list is left as it is.
        """
        if delete is None:
            return
        for node in self.nodes():
            node.delete(delete)
        self.head = None

    def for_each(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of every node, in order."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Optional[Callable[[Any], Any]],
        delete: Optional[Deleter],
    ) -> "LinkedList":
        """Return a new list holding ``f`` applied to each content.

        If ``f`` raises, the contents already produced are released with
        ``delete`` and the exception propagates. Without ``f`` or
        ``delete`` the result is an empty list.
        """
        result = LinkedList()
        if f is None or delete is None:
            return result
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result