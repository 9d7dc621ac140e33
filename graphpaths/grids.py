"""Searches over character grids: rooms, labyrinth paths and escaping monsters."""

from collections import deque
from collections.abc import Iterator, Sequence

WALL = "#"
FLOOR = "."
START = "A"
TARGET = "B"
MONSTER = "M"

_MOVES = (("U", -1, 0), ("R", 0, 1), ("D", 1, 0), ("L", 0, -1))
_BACK = {"U": (1, 0), "D": (-1, 0), "L": (0, 1), "R": (0, -1)}

Cell = tuple[int, int]


def _neighbours(rows: int, cols: int, row: int, col: int) -> Iterator[tuple[str, int, int]]:
    """Yield (direction, row, col) for each in-bounds neighbour, in U, R, D, L order."""
    for letter, dr, dc in _MOVES:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield letter, nr, nc


def _locate(grid: Sequence[str], mark: str) -> Cell:
    for r, line in enumerate(grid):
        c = line.find(mark)
        if c >= 0:
            return r, c
    raise ValueError(f"grid has no {mark!r} cell")


def _trace(came_from: dict[Cell, str], start: Cell, end: Cell) -> str:
    """Rebuild the move string that leads from start to end."""
    letters = []
    cell = end
    while cell != start:
        letter = came_from[cell]
        letters.append(letter)
        dr, dc = _BACK[letter]
        cell = (cell[0] + dr, cell[1] + dc)
    return "".join(reversed(letters))


def count_rooms(grid: Sequence[str]) -> int:
    """Count the groups of connected non-wall cells that contain a floor cell."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen = [[ch == WALL for ch in line] for line in grid]
    rooms = 0
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch != FLOOR or seen[r][c]:
                continue
            rooms += 1
            seen[r][c] = True
            pending = [(r, c)]
            while pending:
                cr, cc = pending.pop()
                for _, nr, nc in _neighbours(rows, cols, cr, cc):
                    if not seen[nr][nc]:
                        seen[nr][nc] = True
                        pending.append((nr, nc))
    return rooms


def find_labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest move string (U, R, D, L) from 'A' to 'B', or None if unreachable.

    Raises ValueError when the grid has no 'A'.
    """
    start = _locate(grid, START)
    rows, cols = len(grid), len(grid[0])
    blocked = [[ch == WALL for ch in line] for line in grid]
    blocked[start[0]][start[1]] = True
    came_from: dict[Cell, str] = {}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for letter, nr, nc in _neighbours(rows, cols, r, c):
            if blocked[nr][nc]:
                continue
            came_from[(nr, nc)] = letter
            if grid[nr][nc] == TARGET:
                return _trace(came_from, start, (nr, nc))
            blocked[nr][nc] = True
            queue.append((nr, nc))
    return None


def escape_monsters(grid: Sequence[str]) -> str | None:
    """Return a move string leading 'A' to the border ahead of every monster, or None.

    Each turn the monsters spread one step first, then the walker moves.
    An empty string means 'A' already stands on the border.
    Raises ValueError when the grid has no 'A'.
    """
    start = _locate(grid, START)
    rows, cols = len(grid), len(grid[0])

    def on_border(row: int, col: int) -> bool:
        return row in (0, rows - 1) or col in (0, cols - 1)

    if on_border(*start):
        return ""

    cells = [list(line) for line in grid]
    monsters = deque(
        (r, c) for r, line in enumerate(grid) for c, ch in enumerate(line) if ch == MONSTER
    )
    cells[start[0]][start[1]] = WALL
    walkers = deque([start])
    came_from: dict[Cell, str] = {}
    closed = (WALL, MONSTER)

    while walkers:
        for _ in range(len(monsters)):
            r, c = monsters.popleft()
            for _, nr, nc in _neighbours(rows, cols, r, c):
                if cells[nr][nc] in closed:
                    continue
                cells[nr][nc] = MONSTER
                monsters.append((nr, nc))
        for _ in range(len(walkers)):
            r, c = walkers.popleft()
            for letter, nr, nc in _neighbours(rows, cols, r, c):
                if cells[nr][nc] in closed:
                    continue
                came_from[(nr, nc)] = letter
                cells[nr][nc] = WALL
                if on_border(nr, nc):
                    return _trace(came_from, start, (nr, nc))
                walkers.append((nr, nc))
    return None