"""Undirected graphs on numbered vertices and breadth-first search."""

from collections import deque
from collections.abc import Iterable


class Graph:
    """An undirected graph with vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.vertices = vertices
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, v1: int, v2: int) -> None:
        """Connect two vertices; newest neighbours come first."""
        self._check(v1)
        self._check(v2)
        self._adjacency[v2].appendleft(v1)
        self._adjacency[v1].appendleft(v2)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first visiting order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def _farthest(start: int, adjacency: list[list[int]]) -> tuple[int, int]:
    """Return the farthest vertex from ``start`` (lowest on ties) and its distance."""
    distance = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if neighbour not in distance:
                distance[neighbour] = distance[current] + 1
                queue.append(neighbour)
    best = max(distance.values())
    vertex = min(v for v, d in distance.items() if d == best)
    return vertex, best


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Length in edges of the longest path in a tree on vertices ``1 .. n``."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise IndexError(f"vertex {vertex} out of range 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    end, _ = _farthest(1, adjacency)
    _, diameter = _farthest(end, adjacency)
    return diameter