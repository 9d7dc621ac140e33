import pytest

from graphpaths.dag import count_game_routes, longest_flight_route
from graphpaths.shortest import MOD


def _diamond_chain(count):
    edges = []
    for i in range(count):
        hub = 3 * i + 1
        nxt = hub + 3
        edges += [(hub, hub + 1), (hub, hub + 2), (hub + 1, nxt), (hub + 2, nxt)]
    return 3 * count + 1, edges


def _assert_route(route, n, edges):
    arcs = set(edges)
    assert route[0] == 1
    assert route[-1] == n
    for a, b in zip(route, route[1:]):
        assert (a, b) in arcs


def test_longest_route_sample():
    edges = [(1, 2), (2, 5), (1, 3), (3, 4), (4, 5)]
    route = longest_flight_route(5, edges)
    assert route == [1, 3, 4, 5]
    _assert_route(route, 5, edges)


def test_longest_route_on_diamonds():
    count = 5
    n, edges = _diamond_chain(count)
    route = longest_flight_route(n, edges)
    _assert_route(route, n, edges)
    assert len(route) == 2 * count + 1


def test_longest_route_prefers_more_nodes():
    edges = [(1, 6), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    route = longest_flight_route(6, edges)
    _assert_route(route, 6, edges)
    assert len(route) == 6


def test_longest_route_impossible():
    assert longest_flight_route(3, [(1, 2), (3, 2)]) is None


def test_longest_route_single_node():
    assert longest_flight_route(1, []) == [1]


def test_longest_route_rejects_bad_node():
    with pytest.raises(ValueError):
        longest_flight_route(2, [(1, 4)])


def test_game_routes_sample():
    edges = [(1, 2), (2, 4), (1, 3), (3, 4), (1, 4)]
    assert count_game_routes(4, edges) == 3


def test_game_routes_none():
    assert count_game_routes(3, [(1, 2), (3, 2)]) == 0


def test_game_routes_modulo():
    count = 40
    n, edges = _diamond_chain(count)
    assert count_game_routes(n, edges) == 2**count % MOD


def test_game_routes_chain_has_one():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert count_game_routes(4, edges) == len(edges) - 2


def test_game_routes_rejects_empty_graph():
    with pytest.raises(ValueError):
        count_game_routes(0, [])