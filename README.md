# graphpaths

Graph algorithms for character grids, undirected and directed graphs,
weighted graphs and successor (functional) graphs. Nodes are numbered from
1 to `n`. Edges are tuples: `(a, b)` or, when weighted, `(a, b, weight)`.
Where there is no answer, functions return `None`. Nodes outside `1..n`
raise `ValueError`.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

### `graphpaths.grids`

Grids are sequences of equal-length strings made of `.` (floor), `#` (wall),
`A` (start), `B` (target) and `M` (monster). Moves are the letters `U`, `R`,
`D`, `L`.

- `count_rooms(grid)`: the number of connected groups of non-wall cells that
  contain a floor cell.
- `find_labyrinth_path(grid)`: a shortest move string from `A` to `B`, or `None`.
- `escape_monsters(grid)`: a move string that takes `A` to the border before
  any monster can get there, or `None`. Each turn the monsters spread first.
  The result is `""` when `A` already stands on the border.

Both path functions raise `ValueError` when the grid has no `A`.

### `graphpaths.connectivity`

- `build_roads(n, edges)`: the roads `(1, r)` that join every other component
  to the one holding node 1. `r` is the smallest node of each component.
- `message_route(n, edges)`: a route from 1 to `n` with the fewest nodes.
- `build_teams(n, edges)`: the team (1 or 2) of each node, such that no edge
  lies within one team.
- `find_round_trip(n, edges)`: a cycle in an undirected graph. The first and
  last nodes are the same.
- `find_directed_cycle(n, edges)`: a directed cycle in edge order. The first
  and last nodes are the same.
- `course_schedule(n, edges)`: a topological order of the nodes.

### `graphpaths.shortest`

All edges here are directed, except in `shortest_route_queries`.

- `shortest_routes(n, edges)`: Dijkstra distances from node 1 to every node.
  Unreachable nodes get `None`.
- `shortest_route_queries(n, edges, queries)`: Floyd–Warshall on an undirected
  graph. It answers each `(a, b)` query with a distance or `None`.
- `high_score(n, edges)`: the largest total weight of a route from 1 to `n`.
  It returns `None` when the total can grow without bound, and raises
  `ValueError` when `n` cannot be reached.
- `flight_discount(n, edges)`: the cheapest price from 1 to `n` when one edge
  may be halved, rounding down.
- `find_negative_cycle(n, edges)`: a negative cycle in edge order. The first
  and last nodes are the same.
- `flight_routes(n, edges, k)`: the `k` cheapest route prices from 1 to `n`,
  in increasing order. It returns fewer when fewer routes exist.
- `investigate(n, edges)`: a `RouteStats(price, routes, min_flights,
  max_flights)` for the cheapest routes from 1 to `n`. The route count is
  taken modulo `MOD` (1 000 000 007).

### `graphpaths.dag`

- `longest_flight_route(n, edges)`: a route from 1 to `n` with the most nodes.
- `count_game_routes(n, edges)`: the number of routes from 1 to `n`, modulo
  1 000 000 007.

### `graphpaths.successor`

- `SuccessorGraph(successors)`: built from the successor of each node 1..n.
  - `jump(node, steps)`: the node reached after `steps` steps.
  - `distance(source, target)`: the fewest steps from `source` to `target`,
    or `None`.
- `planet_cycles(successors)`: for each node, how many distinct nodes a walk
  from it visits.

### `graphpaths.spanning`

- `DisjointSet(size)`: union-find over `0..size-1`.
  - `find(item)` returns the representative of the set that holds `item`.
  - `union(a, b)` merges two sets. It returns `False` when `a` and `b` were
    already in one set.
- `road_reparation(n, edges)`: the cost of a minimum spanning tree, or `None`
  when the graph is disconnected.
- `road_construction(n, edges)`: after each added edge, the pair
  `(number of components, size of the largest)`.

### `graphpaths.components`

- `flight_routes_check(n, edges)`: `None` when every node reaches every other.
  Otherwise it returns a pair `(a, b)` with no route from `a` to `b`.
- `planets_and_kingdoms(n, edges)`: a strongly connected component label for
  each node, numbered from 1.

## Example

```python
from graphpaths.grids import count_rooms
from graphpaths.shortest import shortest_routes

rooms = count_rooms([
    "########",
    "#..#...#",
    "####.#.#",
    "#..#...#",
    "########",
])
# rooms == 3

distances = shortest_routes(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3)])
# distances == [0, 5, 2]
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
graphs from text input. Build the edge lists and grids in Python and pass them
to the functions.

## Running the tests

```
pytest
```