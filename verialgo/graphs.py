"""Graph traversal, shortest paths, spanning trees and topological order.

Dense graphs are given as square matrices indexed by vertex number. In an
adjacency matrix an entry of 1 marks an edge. In a weighted matrix any
non-zero entry is the weight of an edge, unless the function says otherwise.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

Matrix = Sequence[Sequence[float]]


@dataclass(frozen=True)
class Edge:
    """A directed or undirected edge from ``u`` to ``v`` carrying ``weight``."""

    u: int
    v: int
    weight: float


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source shortest path result.

    ``distances[v]`` is ``math.inf`` when ``v`` cannot be reached, and
    ``parents[v]`` is the predecessor of ``v`` on a shortest path, or None
    for the start vertex and for unreached vertices.
    """

    distances: list[float]
    parents: list[int | None]


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a minimum spanning tree (or forest) and their total weight."""

    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def weight(self) -> float:
        return sum(edge.weight for edge in self.edges)


def _size(graph: Matrix) -> int:
    """Return the vertex count of a square matrix, or raise ValueError."""
    n = len(graph)
    for row in graph:
        if len(row) != n:
            raise ValueError(f"graph must be a square matrix, found a row of length {len(row)} in a {n}-vertex graph")
    return n


def _check_vertex(vertex: int, n: int, role: str = "start") -> None:
    if not 0 <= vertex < n:
        raise IndexError(f"{role} vertex {vertex} outside 0..{n - 1}")


def bellman_ford(vertex_count: int, edges: Iterable[Edge], start: int) -> ShortestPaths:
    """Shortest paths from ``start`` over directed weighted edges.

    Performs ``vertex_count - 1`` rounds of relaxing every edge in the given
    order. Negative weights are allowed; negative cycles are not detected.
    Raises IndexError for a start vertex or edge endpoint out of range.
    """
    edge_list = list(edges)
    _check_vertex(start, vertex_count)
    for edge in edge_list:
        _check_vertex(edge.u, vertex_count, "edge")
        _check_vertex(edge.v, vertex_count, "edge")

    distances: list[float] = [math.inf] * vertex_count
    parents: list[int | None] = [None] * vertex_count
    distances[start] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            if distances[edge.u] == math.inf:
                continue
            candidate = distances[edge.u] + edge.weight
            if candidate < distances[edge.v]:
                distances[edge.v] = candidate
                parents[edge.v] = edge.u
    return ShortestPaths(distances, parents)


def bfs(adjacency: Matrix, start: int) -> list[int | None]:
    """Breadth-first search from ``start`` over an adjacency matrix.

    Returns the number of edges on a shortest path to each vertex, or None
    for vertices that cannot be reached.
    """
    n = _size(adjacency)
    _check_vertex(start, n)
    distances: list[int | None] = [None] * n
    distances[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, connected in enumerate(adjacency[node]):
            if connected == 1 and distances[neighbour] is None:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Depth-first search from ``start`` with an explicit stack.

    Returns the reachable vertices in the order they are discovered.
    """
    n = _size(adjacency)
    _check_vertex(start, n)
    order = [start]
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for neighbour, connected in enumerate(adjacency[node]):
            if connected == 1 and neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                stack.append(neighbour)
    return order


def dijkstra(graph: Matrix, start: int) -> ShortestPaths:
    """Shortest paths from ``start`` in a weighted matrix (0 means no edge)."""
    n = _size(graph)
    _check_vertex(start, n)
    distances: list[float] = [math.inf] * n
    parents: list[int | None] = [None] * n
    visited = [False] * n
    distances[start] = 0
    for _ in range(n):
        u = min(
            (vertex for vertex in range(n) if not visited[vertex]),
            key=distances.__getitem__,
            default=None,
        )
        if u is None:
            break
        visited[u] = True
        if distances[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not visited[v] and weight != 0 and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u
    return ShortestPaths(distances, parents)


def floyd(graph: Matrix) -> list[list[float]]:
    """All-pairs shortest path lengths (Floyd–Warshall).

    ``graph[i][j]`` is the length of the edge from ``i`` to ``j``, with
    ``math.inf`` where there is none. The diagonal is taken as given.
    Returns a new matrix; the input is not modified.
    """
    n = _size(graph)
    dist = [list(row) for row in graph]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, onward in enumerate(through):
                if onward != math.inf and via + onward < row[j]:
                    row[j] = via + onward
    return dist


class _DisjointSet:
    """Union–find with union by rank and path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        return True


def kruskal(vertex_count: int, edges: Iterable[Edge]) -> SpanningTree:
    """Minimum spanning tree (or forest) of an undirected graph by Kruskal's method.

    Raises ValueError if ``vertex_count`` is not positive and IndexError for
    an edge endpoint out of range.
    """
    if vertex_count <= 0:
        raise ValueError(f"vertex_count must be positive, got {vertex_count}")
    edge_list = sorted(edges, key=lambda edge: edge.weight)
    for edge in edge_list:
        _check_vertex(edge.u, vertex_count, "edge")
        _check_vertex(edge.v, vertex_count, "edge")
    components = _DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in edge_list:
        if len(chosen) >= vertex_count - 1:
            break
        if components.union(edge.u, edge.v):
            chosen.append(edge)
    return SpanningTree(tuple(chosen))


def prim(graph: Matrix) -> SpanningTree:
    """Minimum spanning tree grown from vertex 0 by Prim's method.

    ``graph`` is a symmetric weighted matrix where 0 means no edge. Vertices
    not reachable from vertex 0 are left out. The edges are listed by the
    vertex they lead to, each as ``Edge(parent, vertex, weight)``.
    Raises ValueError for an empty graph or a negative weight.
    """
    n = _size(graph)
    if n == 0:
        raise ValueError("graph must have at least one vertex")
    if any(weight < 0 for row in graph for weight in row):
        raise ValueError("prim needs non-negative weights")
    key: list[float] = [math.inf] * n
    visited = [False] * n
    parents: list[int | None] = [None] * n
    key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not visited[v] and key[v] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=key.__getitem__)
        visited[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not visited[v] and weight < key[v]:
                key[v] = weight
                parents[v] = u
    return SpanningTree(
        tuple(
            Edge(parent, vertex, graph[parent][vertex])
            for vertex, parent in enumerate(parents)
            if parent is not None
        )
    )


def topo_sort(graph: Matrix) -> list[int]:
    """Topological order of a directed adjacency matrix (Kahn's algorithm).

    Vertices with no incoming edges are taken first, in index order.
    Raises ValueError if the graph has a cycle.
    """
    n = _size(graph)
    in_degree = [sum(1 for row in graph if row[i] == 1) for i in range(n)]
    queue = deque(i for i in range(n) if in_degree[i] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for i, connected in enumerate(graph[node]):
            if connected == 1:
                in_degree[i] -= 1
                if in_degree[i] == 0:
                    queue.append(i)
    if len(order) != n:
        raise ValueError("graph has a cycle; no topological order exists")
    return order