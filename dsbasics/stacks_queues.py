"""A stack and a queue of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator


class _Container:
    """Shared storage and display for the stack and the queue."""

    def __init__(self, value: int | None = None) -> None:
        self._items: deque[int] = deque()
        if value is not None:
            self._items.append(value)

    def _take_front(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty container")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Show the contents from the end values leave by."""
        if not self._items:
            return "List is Empty!"
        return f"My List:[{', '.join(str(item) for item in self._items)}]"


class Stack(_Container):
    """Last-in first-out stack; iteration starts at the top."""

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        return self._take_front()

    def render(self) -> str:
        """Show the contents from top to bottom."""
        return super().render()


class Queue(_Container):
    """First-in first-out queue; iteration starts at the front."""

    def enqueue(self, value: int) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        return self._take_front()

    def render(self) -> str:
        """Show the contents from front to back."""
        return super().render()


def _demo(
    container: _Container,
    add: Callable[[int], None],
    take: Callable[[], int],
    values: tuple[int, ...],
) -> None:
    print(container.render())
    for value in values:
        add(value)
        print(container.render())
    while len(container):
        take()
        print(container.render())


def main(argv: list[str] | None = None) -> int:
    """Fill and drain a sample stack and queue, showing each step."""
    stack = Stack(5)
    _demo(stack, stack.push, stack.pop, (4, 3, 2, 1, 0))
    queue = Queue(5)
    _demo(queue, queue.enqueue, queue.dequeue, (6, 7, 8, 9, 10))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())