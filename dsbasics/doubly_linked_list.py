"""A doubly linked list of integers with 1-based positions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from itertools import islice


@dataclass(eq=False)
class Node:
    """A list node linked to its neighbours in both directions."""

    value: int
    next: Node | None = field(default=None, repr=False)
    prev: Node | None = field(default=None, repr=False)


def _chain(node: Node | None, link: str) -> Iterator[Node]:
    while node is not None:
        yield node
        node = getattr(node, link)


class DoublyLinkedList:
    """Doubly linked list; positions are counted from 1 at the head."""

    def __init__(self, value: int | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._length = 0
        if value is not None:
            self.append(value)

    @property
    def head(self) -> Node | None:
        return self._head

    @property
    def tail(self) -> Node | None:
        return self._tail

    def _add_end(self, value: int, at_head: bool) -> None:
        node = Node(value)
        old = self._head if at_head else self._tail
        if old is None:
            self._head = self._tail = node
        elif at_head:
            node.next, old.prev = old, node
            self._head = node
        else:
            node.prev, old.next = old, node
            self._tail = node
        self._length += 1

    def _remove_end(self, at_head: bool) -> int:
        node = self._head if at_head else self._tail
        if node is None:
            raise IndexError("delete from an empty list")
        if self._head is self._tail:
            self._head = self._tail = None
        elif at_head:
            self._head, node.next = node.next, None
            assert self._head is not None
            self._head.prev = None
        else:
            self._tail, node.prev = node.prev, None
            assert self._tail is not None
            self._tail.next = None
        self._length -= 1
        return node.value

    def append(self, value: int) -> None:
        """Add a value after the tail."""
        self._add_end(value, at_head=False)

    def prepend(self, value: int) -> None:
        """Add a value before the head."""
        self._add_end(value, at_head=True)

    def delete_first(self) -> int:
        """Remove the head and return its value; raise IndexError when empty."""
        return self._remove_end(at_head=True)

    def delete_last(self) -> int:
        """Remove the tail and return its value; raise IndexError when empty."""
        return self._remove_end(at_head=False)

    def _node_at(self, index: int) -> Node:
        return next(islice(_chain(self._head, "next"), index - 1, None))

    def insert(self, index: int, value: int) -> None:
        """Insert a value at a position.

        Position 1 prepends, a position equal to the length appends, and any
        position in between places the value before the node found there.
        """
        if index == 1:
            self.prepend(value)
        elif 1 < index < self._length:
            following = self._node_at(index)
            preceding = following.prev
            assert preceding is not None
            node = Node(value, next=following, prev=preceding)
            preceding.next = following.prev = node
            self._length += 1
        elif index > 1 and index == self._length:
            self.append(value)
        else:
            raise IndexError(f"index {index} not found")

    def get_by_index(self, index: int) -> Node:
        """Return the node at a 1-based position; raise IndexError if out of range."""
        if not 1 <= index <= self._length:
            raise IndexError(f"index {index} out of bounds")
        return self._node_at(index)

    def get_by_value(self, value: int) -> Node | None:
        """Return the first node holding a value, or None if there is none."""
        return next((n for n in _chain(self._head, "next") if n.value == value), None)

    def set(self, index: int, value: int) -> None:
        """Replace the value at a 1-based position; raise IndexError if out of range."""
        self.get_by_index(index).value = value

    def swap_first_last(self) -> None:
        """Exchange the head and tail nodes; lists shorter than two are left alone."""
        if self._length < 2:
            return
        first, last = self._head, self._tail
        assert first is not None and last is not None
        if self._length == 2:
            last.prev, last.next = None, first
            first.prev, first.next = last, None
        else:
            second, penultimate = first.next, last.prev
            assert second is not None and penultimate is not None
            last.prev, last.next = None, second
            second.prev = last
            first.prev, first.next = penultimate, None
            penultimate.next = first
        self._head, self._tail = last, first

    def __iter__(self) -> Iterator[int]:
        return (n.value for n in _chain(self._head, "next"))

    def __reversed__(self) -> Iterator[int]:
        return (n.value for n in _chain(self._tail, "prev"))

    def __len__(self) -> int:
        return self._length

    def render(self) -> str:
        """Show every node with its neighbours, followed by the length."""
        if self._head is None:
            return "List is Empty!"
        pieces = []
        for node in _chain(self._head, "next"):
            before = "nullptr" if node.prev is None else str(node.prev.value)
            after = " -> nullptr" if node.next is None else f" -> {node.next.value} | "
            pieces.append(f"{before} <- ({node.value}){after}")
        return f"My List:[{''.join(pieces)}]\nList length is: {self._length}"


def _apply(dll: DoublyLinkedList, steps: list[tuple[Callable[..., object], ...]]) -> None:
    for method, *args in steps:
        method(*args)
        print(dll.render())


def main(argv: list[str] | None = None) -> int:
    """Run the sample session, showing the list after each change."""
    dll = DoublyLinkedList(5)
    print(dll.render())
    _apply(
        dll,
        [
            (dll.append, 10),
            (dll.append, 20),
            (dll.append, 25),
            (dll.prepend, 0),
            (dll.insert, 4, 15),
            (dll.insert, 1, -5),
            (dll.insert, 7, 50),
        ],
    )
    print(f"Returning node: {dll.get_by_index(7).value}")
    found = dll.get_by_value(20)
    if found is None:
        print("Node with value: 20, does not exist!")
    else:
        print(f"Returning node: {found.value}")
    _apply(
        dll,
        [(dll.set, 8, 30), (dll.delete_first,)] + [(dll.delete_last,)] * 4,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())