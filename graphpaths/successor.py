"""Successor graphs: every node has exactly one outgoing edge."""

from collections.abc import Iterable


def _validated(successors: Iterable[int]) -> list[int]:
    nodes = list(successors)
    size = len(nodes)
    for position, target in enumerate(nodes, start=1):
        if not 1 <= target <= size:
            raise ValueError(f"successor {target} of node {position} is outside 1..{size}")
    return nodes


class SuccessorGraph:
    """A functional graph on nodes 1..n answering jump and distance queries."""

    def __init__(self, successors: Iterable[int]) -> None:
        nodes = _validated(successors)
        self._size = len(nodes)
        self._table: list[list[int]] = [[0, *nodes]]
        self._depth = self._walk_lengths()

    def _walk_lengths(self) -> list[int]:
        """Steps from each node until its first walk meets a node already seen."""
        succ = self._table[0]
        depth = [0] * (self._size + 1)
        visited = [False] * (self._size + 1)
        for start in range(1, self._size + 1):
            path = []
            node = start
            while not visited[node]:
                visited[node] = True
                path.append(node)
                node = succ[node]
            for node in reversed(path):
                depth[node] = depth[succ[node]] + 1
        return depth

    def _extend(self, levels: int) -> None:
        while len(self._table) < levels:
            previous = self._table[-1]
            self._table.append([previous[target] for target in previous])

    def _jump(self, node: int, steps: int) -> int:
        if steps <= 0:
            return node
        self._extend(steps.bit_length())
        level = 0
        while steps:
            if steps & 1:
                node = self._table[level][node]
            steps >>= 1
            level += 1
        return node

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._size:
            raise ValueError(f"node {node} is outside 1..{self._size}")

    def jump(self, node: int, steps: int) -> int:
        """Return the node reached from node after the given number of steps."""
        self._check(node)
        if steps < 0:
            raise ValueError("steps must not be negative")
        return self._jump(node, steps)

    def distance(self, source: int, target: int) -> int | None:
        """Return the fewest steps from source to target, or None if never reached."""
        self._check(source)
        self._check(target)
        depth = self._depth
        gap = depth[source] - depth[target]
        if self._jump(source, gap) == target:
            return gap
        entry = self._jump(source, depth[source])
        if self._jump(entry, depth[entry] - depth[target]) == target:
            return depth[entry] + gap
        return None


def planet_cycles(successors: Iterable[int]) -> list[int]:
    """For each node 1..n, count the distinct nodes visited walking from it."""
    nodes = _validated(successors)
    size = len(nodes)
    succ = [0, *nodes]
    answer = [0] * (size + 1)
    state = [0] * (size + 1)  # 0 unseen, 1 on current walk, 2 settled
    for start in range(1, size + 1):
        if state[start]:
            continue
        path = []
        node = start
        while not state[node]:
            state[node] = 1
            path.append(node)
            node = succ[node]
        if state[node] == 1:
            split = path.index(node)
            cycle = path[split:]
            for member in cycle:
                answer[member] = len(cycle)
            path = path[:split]
        for member in reversed(path):
            answer[member] = answer[succ[member]] + 1
        for member in path:
            state[member] = 2
        if state[node] == 1:
            for member in path[len(path):]:
                state[member] = 2
        node = start
        while state[node] == 1:
            state[node] = 2
            node = succ[node]
    return answer[1:]