"""A singly linked list of integers with 0-based positions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False)
class Node:
    """A list node linked to the one after it."""

    value: int
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with head and tail references."""

    def __init__(self, value: int | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        if value is not None:
            self.append(value)

    @property
    def head(self) -> Node | None:
        return self._head

    @property
    def tail(self) -> Node | None:
        return self._tail

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current:
            yield current
            current = current.next

    def _node_at(self, index: int) -> Node:
        return next(islice(self._nodes(), index, None))

    def append(self, value: int) -> None:
        """Add a value after the tail."""
        new_tail = Node(value)
        if self._tail:
            self._tail.next = new_tail
        else:
            self._head = new_tail
        self._tail = new_tail
        self._size += 1

    def prepend(self, value: int) -> None:
        """Add a value before the head."""
        self._head = Node(value, self._head)
        self._tail = self._tail or self._head
        self._size += 1

    def insert(self, index: int, value: int) -> None:
        """Insert a value before the node at a position; raise IndexError if none is there."""
        if index == 0:
            self.prepend(value)
            return
        if not 0 < index < self._size:
            raise IndexError(f"index {index} out of bounds")
        previous = self._node_at(index - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def delete_last(self) -> int:
        """Remove the tail and return its value; raise IndexError when empty."""
        removed = self._tail
        if removed is None:
            raise IndexError("delete from an empty list")
        if self._head is removed:
            self._head = self._tail = None
        else:
            self._tail = self._node_at(self._size - 2)
            self._tail.next = None
        self._size -= 1
        return removed.value

    def get(self, index: int) -> Node:
        """Return the node at a position; raise IndexError if out of range."""
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of bounds")
        return self._node_at(index)

    def set(self, index: int, value: int) -> None:
        """Replace the value at a position; raise IndexError if out of range."""
        self.get(index).value = value

    def find_middle(self) -> Node | None:
        """Return the middle node, the later one for an even length, or None when empty."""
        slow = fast = self._head
        if slow is None:
            return None
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
        return slow

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Show the values from head to tail."""
        values = ", ".join(str(node.value) for node in self._nodes())
        return f"My List:[{values}]" if self._head else "List is Empty!"


def main(argv: list[str] | None = None) -> int:
    """Run the sample session, showing the list after each change."""
    linked = LinkedList(5)
    print(linked.render())
    for method, *args in (
        (linked.append, 10),
        (linked.append, 15),
        (linked.prepend, 20),
        (linked.insert, 2, 25),
    ):
        method(*args)
        print(linked.render())
    linked.set(3, 220)
    print("Updated index: 3, with value: 220")
    print(linked.render())
    while len(linked):
        linked.delete_last()
    print(linked.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())