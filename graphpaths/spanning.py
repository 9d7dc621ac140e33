"""Disjoint sets and spanning questions on undirected graphs with nodes 1..n."""

from collections.abc import Iterable

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


class DisjointSet:
    """Union-find over the items 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            following = self._parent[item]
            self._parent[item] = root
            item = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; return False when they were already one set."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            x, y = y, x
        self._parent[y] = x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        return True


def _check_nodes(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def road_reparation(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Return the cost of a minimum spanning tree, or None when the graph is disconnected."""
    if n < 1:
        raise ValueError("a graph needs at least one node")
    roads = []
    for a, b, cost in edges:
        _check_nodes(n, a, b)
        roads.append((cost, a, b))
    roads.sort()
    sets = DisjointSet(n + 1)
    total = 0
    joined = 0
    for cost, a, b in roads:
        if sets.union(a, b):
            total += cost
            joined += 1
    return total if joined == n - 1 else None


def road_construction(n: int, edges: Iterable[Edge]) -> list[tuple[int, int]]:
    """After each added road, report (number of components, size of the largest)."""
    if n < 1:
        raise ValueError("a graph needs at least one node")
    sets = DisjointSet(n + 1)
    sizes = [1] * (n + 1)
    components = n
    largest = 1
    report = []
    for a, b in edges:
        _check_nodes(n, a, b)
        x, y = sets.find(a), sets.find(b)
        if x != y:
            sets.union(x, y)
            root = sets.find(a)
            sizes[root] = sizes[x] + sizes[y]
            components -= 1
            largest = max(largest, sizes[root])
        report.append((components, largest))
    return report