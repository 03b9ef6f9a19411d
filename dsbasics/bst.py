"""A binary search tree of integers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

log = logging.getLogger(__name__)

_INDENT = "    "


@dataclass
class Node:
    """A tree node holding a value and its two children."""

    value: int
    left: Node | None = None
    right: Node | None = None


class BST:
    """Binary search tree; values equal to a node go to its left subtree."""

    def __init__(self, value: int | None = None) -> None:
        self.root: Node | None = None
        if value is not None:
            self.root = Node(value)
            log.debug("Added parent")

    def insert(self, value: int) -> None:
        """Insert a value at the leaf where the search for it ends."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            side = "right" if value > node.value else "left"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, new_node)
                log.debug("Added %s child", side)
                return
            node = child

    def contains(self, value: int) -> bool:
        """Return whether the value is stored in the tree."""
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left
        return False

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def _walk(self, descending: bool = False) -> Iterator[tuple[Node, int]]:
        """Yield each node with its depth, in ascending or descending order."""
        near, far = ("right", "left") if descending else ("left", "right")
        pending: list[tuple[Node, int]] = []
        node, level = self.root, 0
        while pending or node is not None:
            while node is not None:
                pending.append((node, level))
                node, level = getattr(node, near), level + 1
            node, level = pending.pop()
            yield node, level
            node, level = getattr(node, far), level + 1

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        return (node.value for node, _ in self._walk())

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, one level per indent."""
        return "\n".join(
            f"{_INDENT * level}{node.value}" for node, level in self._walk(descending=True)
        )


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree, draw it and look up a missing value."""
    tree = BST(10)
    for value in (15, 8, 13, 16, 9, 7):
        tree.insert(value)
    print(tree.render())
    wanted = -9
    verdict = "contains" if tree.contains(wanted) else "does not contain"
    print(f"Tree {verdict} value: {wanted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())