"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the following node."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that grows at the front."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in reversed(list(contents)):
            self.push(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push(self, node: Node) -> None:
        """Put ``node`` at the front of the list."""
        node.next = self.head
        self.head = node

    def pop(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def for_each(self, f: Callable[[Node], None]) -> None:
        """Call ``f`` on every node from front to back."""
        for node in self._nodes():
            f(node)

    def map(self, f: Callable[[Node], Node]) -> "LinkedList":
        """Return a new list of the nodes ``f`` makes from each node in order."""
        produced = [f(node) for node in self._nodes()]
        result = LinkedList()
        for node in reversed(produced):
            result.push(node)
        return result

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())