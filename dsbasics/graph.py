"""An undirected graph stored as an adjacency list."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class Graph:
    """Undirected graph of string vertices."""

    def __init__(self) -> None:
        self._adjacency: dict[str, set[str]] = {}

    def add_vertex(self, vertex: str) -> bool:
        """Add a vertex; return False if it was already present."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = set()
        log.debug("Added Key: %s", vertex)
        return True

    def add_edge(self, first: str, second: str) -> bool:
        """Connect two existing vertices; raise KeyError if either is missing."""
        missing = [v for v in dict.fromkeys((first, second)) if v not in self._adjacency]
        if missing:
            raise KeyError(f"add vertex first: {', '.join(missing)}")
        self._adjacency[first].add(second)
        self._adjacency[second].add(first)
        log.debug("%s<-->%s", first, second)
        return True

    def remove_edge(self, first: str, second: str) -> bool:
        """Remove the edge between two vertices; return False if either is missing."""
        if first not in self._adjacency or second not in self._adjacency:
            return False
        self._adjacency[first].discard(second)
        self._adjacency[second].discard(first)
        log.debug("Removed edge")
        return True

    def remove_vertex(self, vertex: str) -> None:
        """Remove a vertex and every edge that leads to it."""
        self._adjacency.pop(vertex, None)
        for other, neighbours in self._adjacency.items():
            if vertex in neighbours:
                neighbours.discard(vertex)
                log.debug("Removed Edge: %s, from Vertex: %s", vertex, other)

    def vertices(self) -> list[str]:
        """Return the vertices in the order they were added."""
        return list(self._adjacency)

    def neighbours(self, vertex: str) -> frozenset[str]:
        """Return the vertices adjacent to a vertex."""
        return frozenset(self._adjacency[vertex])

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def render(self) -> str:
        """List the vertices, numbered from 1."""
        return "\n".join(
            f"{number}: {vertex}" for number, vertex in enumerate(self._adjacency, start=1)
        )


def main(argv: list[str] | None = None) -> int:
    """Run the sample session: two vertices, an edge, then removals."""
    graph = Graph()
    graph.add_vertex("Kiro")
    graph.add_vertex("Dodo")
    graph.add_edge("Kiro", "Dodo")
    print("Kiro<-->Dodo")
    print(graph.render())
    graph.remove_edge("Kiro", "Dodo")
    print("Removed edge")
    graph.remove_vertex("Dodo")
    rendered = graph.render()
    if rendered:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())