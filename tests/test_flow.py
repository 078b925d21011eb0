import copy

import pytest

from dsakit.flow import ford_fulkerson

NETWORK = [
    [0, 8, 0, 0, 3, 0],
    [0, 0, 9, 0, 0, 0],
    [0, 0, 0, 0, 7, 2],
    [0, 0, 0, 0, 0, 5],
    [0, 0, 7, 4, 0, 0],
    [0, 0, 0, 0, 0, 0],
]


def _transpose(matrix):
    return [list(column) for column in zip(*matrix)]


def test_source_example():
    assert ford_fulkerson(NETWORK, 0, 5) == 6


def test_single_edge_carries_its_capacity():
    assert ford_fulkerson([[0, 7], [0, 0]], 0, 1) == 7


def test_no_path_gives_no_flow():
    assert ford_fulkerson([[0, 0], [0, 0]], 0, 1) == 0


def test_capacity_matrix_is_not_modified():
    original = copy.deepcopy(NETWORK)
    ford_fulkerson(NETWORK, 0, 5)
    assert NETWORK == original


def test_flow_bounded_by_source_and_sink_capacity():
    flow = ford_fulkerson(NETWORK, 0, 5)
    assert flow <= sum(NETWORK[0])
    assert flow <= sum(row[5] for row in NETWORK)


def test_reversed_network_gives_same_flow():
    assert ford_fulkerson(_transpose(NETWORK), 5, 0) == ford_fulkerson(NETWORK, 0, 5)


def test_reverse_direction_in_directed_network_has_no_flow():
    assert ford_fulkerson(NETWORK, 5, 0) == ford_fulkerson([[0, 0], [0, 0]], 0, 1)


def test_rejects_same_source_and_sink():
    with pytest.raises(ValueError):
        ford_fulkerson(NETWORK, 2, 2)


def test_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        ford_fulkerson([[0, 1, 2], [0, 0, 1]], 0, 1)


def test_rejects_vertex_out_of_range():
    with pytest.raises(IndexError):
        ford_fulkerson(NETWORK, 0, 6)