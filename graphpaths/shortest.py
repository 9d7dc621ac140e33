"""Weighted shortest-path questions on graphs whose nodes are numbered 1..n."""

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MOD = 1_000_000_007
_FAR = 10**18

WeightedEdge = tuple[int, int, int]
Query = tuple[int, int]


@dataclass(frozen=True)
class RouteStats:
    """Summary of the cheapest routes from node 1 to node n."""

    price: int
    routes: int
    min_flights: int
    max_flights: int


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _edge_list(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    if n < 1:
        raise ValueError("a graph needs at least one node")
    checked = []
    for a, b, c in edges:
        _check_node(n, a)
        _check_node(n, b)
        checked.append((a, b, c))
    return checked


def _adjacency(n: int, edges: Iterable[WeightedEdge]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, c in _edge_list(n, edges):
        adjacency[a].append((b, c))
    return adjacency


def _reachable(n: int, arcs: Iterable[tuple[int, int]], start: int) -> list[bool]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in arcs:
        adjacency[a].append(b)
    seen = [False] * (n + 1)
    seen[start] = True
    pending = [start]
    while pending:
        node = pending.pop()
        for nxt in adjacency[node]:
            if not seen[nxt]:
                seen[nxt] = True
                pending.append(nxt)
    return seen


def shortest_routes(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the shortest distance from node 1 to each node 1..n over directed edges.

    Unreachable nodes get None.
    """
    adjacency = _adjacency(n, edges)
    dist = [_FAR] * (n + 1)
    dist[1] = 0
    done = [False] * (n + 1)
    heap = [(0, 1)]
    while heap:
        _, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        base = dist[node]
        for nxt, weight in adjacency[node]:
            if base + weight < dist[nxt]:
                dist[nxt] = base + weight
                heapq.heappush(heap, (dist[nxt], nxt))
    return [None if d >= _FAR else d for d in dist[1:]]


def shortest_route_queries(
    n: int, edges: Iterable[WeightedEdge], queries: Iterable[Query]
) -> list[int | None]:
    """Answer shortest-distance queries on an undirected graph; None when unreachable."""
    dist = [[_FAR] * n for _ in range(n)]
    for a, b, c in _edge_list(n, edges):
        i, j = a - 1, b - 1
        dist[i][j] = min(dist[i][j], c)
        dist[j][i] = min(dist[j][i], c)

    for k, through_k in enumerate(dist):
        for row in dist:
            to_k = row[k]
            if to_k >= _FAR:
                continue
            for j, from_k in enumerate(through_k):
                if from_k < _FAR and to_k + from_k < row[j]:
                    row[j] = to_k + from_k

    answers: list[int | None] = []
    for a, b in queries:
        _check_node(n, a)
        _check_node(n, b)
        if a == b:
            answers.append(0)
        else:
            d = dist[a - 1][b - 1]
            answers.append(None if d >= _FAR else d)
    return answers


def high_score(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Return the largest total score of a route from 1 to n over directed edges.

    Returns None when the score can grow without bound. Raises ValueError when
    node n cannot be reached from node 1.
    """
    edge_list = _edge_list(n, edges)
    dist = [_FAR] * (n + 1)
    dist[1] = 0
    for _ in range(n):
        for a, b, c in edge_list:
            if dist[a] != _FAR:
                dist[b] = min(dist[b], dist[a] - c)

    from_start = _reachable(n, ((a, b) for a, b, _ in edge_list), 1)
    to_end = _reachable(n, ((b, a) for a, b, _ in edge_list), n)
    for a, b, c in edge_list:
        if from_start[a] and to_end[b] and dist[b] > dist[a] - c:
            return None
    if dist[n] == _FAR:
        raise ValueError(f"node {n} cannot be reached from node 1")
    return -dist[n]


def flight_discount(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Return the cheapest price from 1 to n when one flight may be halved (rounded down).

    Returns None when no route that uses a flight exists.
    """
    adjacency = _adjacency(n, edges)
    dist = [[_FAR, _FAR] for _ in range(n + 1)]
    dist[1][0] = 0
    heap = [(0, 0, 1)]
    while heap:
        cost, used, node = heapq.heappop(heap)
        if cost != dist[node][used]:
            continue
        if node == n:
            break
        for nxt, weight in adjacency[node]:
            if not used:
                discounted = cost + weight // 2
                if discounted < dist[nxt][1]:
                    dist[nxt][1] = discounted
                    heapq.heappush(heap, (discounted, 1, nxt))
            full = cost + weight
            if full < dist[nxt][used]:
                dist[nxt][used] = full
                heapq.heappush(heap, (full, used, nxt))
    best = dist[n][1]
    return None if best >= _FAR else best


def find_negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Return a negative cycle as nodes in edge order, first and last equal, or None."""
    edge_list = _edge_list(n, edges)
    dist = [_FAR] * (n + 1)
    dist[1] = 0
    parent = [0] * (n + 1)
    last = 0
    for _ in range(n):
        last = 0
        for a, b, c in edge_list:
            if dist[a] + c < dist[b]:
                dist[b] = dist[a] + c
                parent[b] = a
                last = b
    if not last:
        return None
    for _ in range(n):
        last = parent[last]
    cycle = [last]
    node = parent[last]
    while True:
        cycle.append(node)
        if node == last:
            break
        node = parent[node]
    cycle.reverse()
    return cycle


def flight_routes(n: int, edges: Iterable[WeightedEdge], k: int) -> list[int]:
    """Return the k cheapest route prices from 1 to n in increasing order.

    Fewer prices come back when fewer routes exist.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    adjacency = _adjacency(n, edges)
    kept: list[list[int]] = [[] for _ in range(n + 1)]
    kept[1].append(0)
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > -kept[node][0]:
            continue
        for nxt, weight in adjacency[node]:
            price = cost + weight
            prices = kept[nxt]
            if len(prices) < k:
                heapq.heappush(prices, -price)
                heapq.heappush(heap, (price, nxt))
            elif -prices[0] > price:
                heapq.heapreplace(prices, -price)
                heapq.heappush(heap, (price, nxt))
    return sorted(-p for p in kept[n])


def investigate(n: int, edges: Iterable[WeightedEdge]) -> RouteStats | None:
    """Describe the cheapest routes from 1 to n, or None when n is unreachable.

    The route count is taken modulo 1_000_000_007.
    """
    adjacency = _adjacency(n, edges)
    dist = [_FAR] * (n + 1)
    routes = [0] * (n + 1)
    fewest = [0] * (n + 1)
    most = [0] * (n + 1)
    dist[1] = 0
    routes[1] = 1
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost != dist[node]:
            continue
        for nxt, weight in adjacency[node]:
            price = cost + weight
            if price < dist[nxt]:
                dist[nxt] = price
                routes[nxt] = routes[node] % MOD
                fewest[nxt] = fewest[node] + 1
                most[nxt] = most[node] + 1
                heapq.heappush(heap, (price, nxt))
            elif price == dist[nxt]:
                routes[nxt] = (routes[nxt] + routes[node]) % MOD
                fewest[nxt] = min(fewest[nxt], fewest[node] + 1)
                most[nxt] = max(most[nxt], most[node] + 1)
    if dist[n] >= _FAR:
        return None
    return RouteStats(dist[n], routes[n], fewest[n], most[n])


__all__: Sequence[str] = (
    "MOD",
    "RouteStats",
    "shortest_routes",
    "shortest_route_queries",
    "high_score",
    "flight_discount",
    "find_negative_cycle",
    "flight_routes",
    "investigate",
)