"""Route questions on directed acyclic graphs whose nodes are numbered 1..n."""

from collections.abc import Callable, Iterable

from .shortest import MOD

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a graph needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adjacency[a].append(b)
    return adjacency


def _walk(adjacency: list[list[int]], start: int, combine: Callable[[int, int], None]) -> None:
    """Depth-first walk calling combine(node, child) once the child is finished or seen."""
    visited = [False] * len(adjacency)
    visited[start] = True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if not visited[child]:
                visited[child] = True
                stack.append((child, iter(adjacency[child])))
                break
            combine(node, child)
        else:
            stack.pop()
            if stack:
                combine(stack[-1][0], node)


def longest_flight_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a route from 1 to n with the most nodes, or None when none exists."""
    adjacency = _adjacency(n, edges)
    best = [-1] * (n + 1)
    best[n] = 1
    parent = [0] * (n + 1)

    def combine(node: int, child: int) -> None:
        if best[child] != -1 and best[child] + 1 > best[node]:
            best[node] = best[child] + 1
            parent[node] = child

    _walk(adjacency, 1, combine)
    if best[1] == -1:
        return None
    route = []
    node = 1
    while node:
        route.append(node)
        node = parent[node]
    return route


def count_game_routes(n: int, edges: Iterable[Edge]) -> int:
    """Count the routes from 1 to n, modulo 1_000_000_007."""
    adjacency = _adjacency(n, edges)
    ways = [0] * (n + 1)
    ways[n] = 1

    def combine(node: int, child: int) -> None:
        ways[node] = (ways[node] + ways[child]) % MOD

    _walk(adjacency, 1, combine)
    return ways[1]