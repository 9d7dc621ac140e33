import pytest

from graphpaths.shortest import (
    MOD,
    RouteStats,
    find_negative_cycle,
    flight_discount,
    flight_routes,
    high_score,
    investigate,
    shortest_route_queries,
    shortest_routes,
)


def _diamond_chain(count, weight=1):
    edges = []
    for i in range(count):
        hub = 3 * i + 1
        nxt = hub + 3
        edges += [
            (hub, hub + 1, weight),
            (hub, hub + 2, weight),
            (hub + 1, nxt, weight),
            (hub + 2, nxt, weight),
        ]
    return 3 * count + 1, edges


def _assert_cycle(cycle, edges):
    weights = {}
    for a, b, c in edges:
        weights[(a, b)] = min(c, weights.get((a, b), c))
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 2
    total = 0
    for a, b in zip(cycle, cycle[1:]):
        assert (a, b) in weights
        total += weights[(a, b)]
    assert total < 0


SAMPLE_ROUTES = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)]


def test_shortest_routes_sample():
    assert shortest_routes(3, SAMPLE_ROUTES) == [0, 5, 2]


def test_shortest_routes_triangle_inequality():
    edges = [(1, 2, 7), (1, 3, 2), (3, 2, 1), (2, 4, 3), (3, 4, 9), (4, 5, 1)]
    dist = shortest_routes(5, edges)
    assert dist[0] == 0
    for a, b, c in edges:
        assert dist[b - 1] <= dist[a - 1] + c


def test_shortest_routes_unreachable_is_none():
    assert shortest_routes(3, [(1, 2, 4)]) == [0, 4, None]


def test_shortest_routes_rejects_bad_node():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])


def test_queries_match_single_source_on_undirected_graph():
    edges = [(1, 2, 5), (2, 3, 1), (1, 3, 9), (3, 4, 2)]
    both = edges + [(b, a, c) for a, b, c in edges]
    single = shortest_routes(4, both)
    answers = shortest_route_queries(4, edges, [(1, j) for j in range(1, 5)])
    assert answers == single


def test_queries_symmetric_and_same_node():
    edges = [(1, 2, 5), (2, 3, 1), (1, 3, 9)]
    answers = shortest_route_queries(3, edges, [(1, 3), (3, 1), (2, 2)])
    assert answers[0] == answers[1]
    assert answers[2] == 0


def test_queries_parallel_edges_and_unreachable():
    answers = shortest_route_queries(3, [(1, 2, 5), (2, 1, 3)], [(1, 2), (1, 3)])
    assert answers == [3, None]


def test_queries_reject_bad_node():
    with pytest.raises(ValueError):
        shortest_route_queries(2, [], [(1, 5)])


def test_high_score_chain_sums_weights():
    assert high_score(3, [(1, 2, 4), (2, 3, 6)]) == 4 + 6


def test_high_score_picks_larger_route():
    edges = [(1, 2, 3), (2, 4, 3), (1, 3, 1), (3, 4, 10)]
    assert high_score(4, edges) == max(3 + 3, 1 + 10)


def test_high_score_unbounded_cycle_on_route():
    assert high_score(3, [(1, 2, 3), (2, 1, 4), (2, 3, 5)]) is None


def test_high_score_ignores_cycle_off_route():
    edges = [(1, 2, 1), (2, 4, 1), (1, 3, 1), (3, 3, 5)]
    assert high_score(4, edges) == 1 + 1


def test_high_score_unreachable_raises():
    with pytest.raises(ValueError):
        high_score(3, [(1, 2, 1)])


def test_flight_discount_single_flight():
    assert flight_discount(2, [(1, 2, 9)]) == 9 // 2


def test_flight_discount_best_leg_halved():
    assert flight_discount(3, [(1, 2, 8), (2, 3, 3)]) == min(8 // 2 + 3, 8 + 3 // 2)


def test_flight_discount_not_above_full_price():
    edges = [(1, 2, 7), (1, 3, 2), (3, 2, 1), (2, 4, 3), (3, 4, 9), (4, 5, 1)]
    assert flight_discount(5, edges) <= shortest_routes(5, edges)[-1]


def test_flight_discount_unreachable():
    assert flight_discount(3, [(1, 2, 4)]) is None


def test_negative_cycle_absent():
    assert find_negative_cycle(3, [(1, 2, 1), (2, 3, -5)]) is None


def test_negative_cycle_found():
    edges = [(1, 2, 1), (2, 3, -3), (3, 1, 1), (3, 4, 2)]
    cycle = find_negative_cycle(4, edges)
    _assert_cycle(cycle, edges)


def test_negative_cycle_away_from_node_one():
    edges = [(2, 3, -1), (3, 2, -1)]
    cycle = find_negative_cycle(3, edges)
    _assert_cycle(cycle, edges)


def test_negative_self_loop():
    edges = [(1, 2, 2), (2, 2, -1)]
    assert find_negative_cycle(2, edges) == [2, 2]


def test_flight_routes_sample():
    edges = [(1, 2, 1), (1, 3, 3), (2, 3, 2), (2, 4, 6), (3, 2, 8), (3, 4, 1)]
    assert flight_routes(4, edges, 3) == [4, 4, 7]


def test_flight_routes_first_is_shortest_and_sorted():
    edges = [(1, 2, 7), (1, 3, 2), (3, 2, 1), (2, 4, 3), (3, 4, 9), (1, 4, 20)]
    prices = flight_routes(4, edges, 3)
    assert len(prices) == 3
    assert prices == sorted(prices)
    assert prices[0] == shortest_routes(4, edges)[-1]


def test_flight_routes_fewer_than_k():
    assert flight_routes(2, [(1, 2, 5)], 3) == [5]


def test_flight_routes_rejects_zero_k():
    with pytest.raises(ValueError):
        flight_routes(2, [(1, 2, 5)], 0)


def test_investigate_sample():
    edges = [(1, 4, 5), (1, 2, 4), (2, 4, 5), (1, 3, 2), (3, 4, 3)]
    assert investigate(4, edges) == RouteStats(5, 2, 1, 2)


def test_investigate_price_matches_shortest_routes():
    edges = [(1, 2, 7), (1, 3, 2), (3, 2, 1), (2, 4, 3), (3, 4, 9), (4, 5, 1)]
    stats = investigate(5, edges)
    assert stats.price == shortest_routes(5, edges)[-1]
    assert stats.min_flights <= stats.max_flights


def test_investigate_counts_modulo():
    count = 40
    n, edges = _diamond_chain(count)
    stats = investigate(n, edges)
    assert stats == RouteStats(2 * count, 2**count % MOD, 2 * count, 2 * count)


def test_investigate_unreachable():
    assert investigate(3, [(1, 2, 1)]) is None