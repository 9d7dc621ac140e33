"""Connectivity questions on graphs whose nodes are numbered 1..n."""

from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge], directed: bool) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def build_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the roads (1, r) that join every component to the one holding node 1.

    r is the smallest node of each further component, in increasing order.
    """
    adjacency = _adjacency(n, edges, directed=False)
    visited = [False] * (n + 1)
    leaders = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        leaders.append(root)
        visited[root] = True
        pending = [root]
        while pending:
            node = pending.pop()
            for nxt in adjacency[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    pending.append(nxt)
    return [(1, leader) for leader in leaders[1:]]


def message_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a route with fewest nodes from 1 to n, or None when there is none.

    A graph of a single node has no route.
    """
    adjacency = _adjacency(n, edges, directed=False)
    previous = [0] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    found = False
    while queue and not found:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if visited[nxt]:
                continue
            previous[nxt] = node
            visited[nxt] = True
            if nxt == n:
                found = True
                break
            queue.append(nxt)
    if not found:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(previous[route[-1]])
    route.reverse()
    return route


def build_teams(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Split nodes into teams 1 and 2 so no edge joins one team; None if impossible.

    The result lists the team of nodes 1..n in order.
    """
    adjacency = _adjacency(n, edges, directed=False)
    team = [-1] * (n + 1)
    for root in range(1, n + 1):
        if team[root] != -1:
            continue
        team[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nxt in adjacency[node]:
                if team[nxt] == -1:
                    team[nxt] = 1 - team[node]
                    queue.append(nxt)
                elif team[nxt] == team[node]:
                    return None
    return [t + 1 for t in team[1:]]


def _cycle_walk(n: int, adjacency: list[list[int]], directed: bool) -> list[int] | None:
    """Depth-first walk returning the path that closes on a cycle, or None."""
    visited = [False] * (n + 1)
    on_stack = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        path = [root]
        visited[root] = on_stack[root] = True
        stack = [(root, None, iter(adjacency[root]))]
        while stack:
            node, parent, successors = stack[-1]
            for nxt in successors:
                if not directed and nxt == parent:
                    continue
                path.append(nxt)
                if not visited[nxt]:
                    visited[nxt] = on_stack[nxt] = True
                    stack.append((nxt, node, iter(adjacency[nxt])))
                    break
                if not directed or on_stack[nxt]:
                    return path
                path.pop()
            else:
                stack.pop()
                on_stack[node] = False
                if stack:
                    path.pop()
    return None


def _closing_segment(path: list[int]) -> list[int]:
    last = path[-1]
    start = len(path) - 2 - path[-2::-1].index(last)
    return path[start:]


def find_round_trip(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a cycle in an undirected graph as nodes starting and ending on one node."""
    path = _cycle_walk(n, _adjacency(n, edges, directed=False), directed=False)
    if path is None:
        return None
    return _closing_segment(path)[::-1]


def find_directed_cycle(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a directed cycle as nodes in edge order, starting and ending on one node."""
    path = _cycle_walk(n, _adjacency(n, edges, directed=True), directed=True)
    if path is None:
        return None
    return _closing_segment(path)


def course_schedule(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a topological order of nodes 1..n, or None when the graph has a cycle."""
    adjacency = _adjacency(n, edges, directed=True)
    indegree = [0] * (n + 1)
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    order = [node for node in range(1, n + 1) if indegree[node] == 0]
    queue = deque(order)
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if indegree[nxt] > 0:
                indegree[nxt] -= 1
                if indegree[nxt] == 0:
                    queue.append(nxt)
                    order.append(nxt)
    return order if len(order) == n else None