"""Strong connectivity questions on directed graphs whose nodes are numbered 1..n."""

from collections.abc import Iterable

Edge = tuple[int, int]


def _graphs(n: int, edges: Iterable[Edge]) -> tuple[list[list[int]], list[list[int]]]:
    if n < 0:
        raise ValueError("node count must not be negative")
    forward: list[list[int]] = [[] for _ in range(n + 1)]
    backward: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        forward[a].append(b)
        backward[b].append(a)
    return forward, backward


def _reach(adjacency: list[list[int]], start: int) -> list[bool]:
    seen = [False] * len(adjacency)
    seen[start] = True
    pending = [start]
    while pending:
        node = pending.pop()
        for nxt in adjacency[node]:
            if not seen[nxt]:
                seen[nxt] = True
                pending.append(nxt)
    return seen


def flight_routes_check(n: int, edges: Iterable[Edge]) -> tuple[int, int] | None:
    """Return None if every node reaches every other, else a pair (a, b) with no route a to b."""
    if n < 1:
        raise ValueError("a graph needs at least one node")
    forward, backward = _graphs(n, edges)
    seen = _reach(forward, 1)
    missing = next((node for node in range(1, n + 1) if not seen[node]), None)
    if missing is not None:
        return 1, missing
    seen = _reach(backward, 1)
    missing = next((node for node in range(1, n + 1) if not seen[node]), None)
    if missing is not None:
        return missing, 1
    return None


def planets_and_kingdoms(n: int, edges: Iterable[Edge]) -> list[int]:
    """Label nodes 1..n by strongly connected component, numbered from 1.

    The number of components is the largest label.
    """
    forward, backward = _graphs(n, edges)
    visited = [False] * (n + 1)
    finished = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(forward[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(forward[child])))
                    break
            else:
                stack.pop()
                finished.append(node)

    labels = [0] * (n + 1)
    count = 0
    for node in reversed(finished):
        if labels[node]:
            continue
        count += 1
        labels[node] = count
        pending = [node]
        while pending:
            current = pending.pop()
            for prev in backward[current]:
                if not labels[prev]:
                    labels[prev] = count
                    pending.append(prev)
    return labels[1:]