"""Undirected graphs as adjacency matrices and adjacency lists."""

from __future__ import annotations

from collections import deque


class _Vertices:
    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._count = vertices

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._count:
            raise IndexError(f"vertex {vertex} out of range 0..{self._count - 1}")


class MatrixGraph(_Vertices):
    """Undirected graph stored as an adjacency matrix."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj = [[0] * vertices for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u][v] = 1
        self._adj[v][u] = 1

    def matrix(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [list(row) for row in self._adj]

    def format(self) -> str:
        """Render the adjacency matrix as text."""
        lines = ["Adjacency Matrix:"]
        lines.extend(" ".join(str(cell) for cell in row) for row in self._adj)
        return "\n".join(lines)


class Graph(_Vertices):
    """Undirected graph stored as adjacency lists, in insertion order."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order edges were added."""
        self._check(vertex)
        return list(self._adj[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order = []
        pending = deque([start])
        while pending:
            node = pending.popleft()
            order.append(node)
            for neighbor in self._adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    pending.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._adj[start])]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adj[neighbor]))
                    break
            else:
                stack.pop()
        return order

    def is_cyclic(self) -> bool:
        """Return whether the graph contains a cycle."""
        visited = [False] * self._count
        for root in range(self._count):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, -1, iter(self._adj[root]))]
            while stack:
                vertex, parent, neighbors = stack[-1]
                for neighbor in neighbors:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        stack.append((neighbor, vertex, iter(self._adj[neighbor])))
                        break
                    if neighbor != parent:
                        return True
                else:
                    stack.pop()
        return False

    def format(self) -> str:
        """Render the adjacency lists as text."""
        lines = ["Adjacency List:"]
        lines.extend(
            f"{i}:" + "".join(f" {n}" for n in neighbors)
            for i, neighbors in enumerate(self._adj)
        )
        return "\n".join(lines)