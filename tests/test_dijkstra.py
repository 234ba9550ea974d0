import io
import math

import networkx as nx
import pytest

from routesim import Graph, VertexNotFoundError, ospf, shortest_path
from routesim.report import format_path

# (source, dest, weight), loaded as undirected links
LINKS = [
    ('A', 'B', 2), ('A', 'C', 5),
    ('B', 'C', 1), ('B', 'D', 4),
    ('C', 'D', 2), ('C', 'E', 3),
    ('D', 'F', 1), ('E', 'F', 5),
]


@pytest.fixture
def triangle():
    g = Graph()
    g.add_undirected_edge('A', 'B', 1)
    g.add_undirected_edge('B', 'C', 2)
    g.add_undirected_edge('A', 'C', 10)
    return g


def test_shortest_route(triangle):
    assert ospf(triangle, 'A')
    assert triangle.vertex('C').dist == 3.0
    assert format_path(triangle, 'C') == "A B C 3.0"


def test_down_edge_forces_detour(triangle):
    triangle.edge_down('B', 'C')
    ospf(triangle, 'A')
    assert format_path(triangle, 'C') == "A C 10.0"


def test_down_vertex_is_unreachable(triangle):
    triangle.edge_down('B', 'C')
    triangle.vertex_down('C')
    ospf(triangle, 'A')
    assert format_path(triangle, 'C') == "C is unreachable"


def test_distance_to_self_is_zero(triangle):
    ospf(triangle, 'B')
    assert triangle.vertex('B').dist == 0
    assert format_path(triangle, 'B') == "B 0.0"


def test_down_start_reports_and_skips(triangle):
    ospf(triangle, 'A')
    triangle.vertex_down('A')
    out = io.StringIO()
    assert not ospf(triangle, 'A', out=out)
    assert out.getvalue() == "Starting location is down\n"
    # previous results are cleared
    assert all(math.isinf(v.dist) for v in triangle.vertices())


def test_missing_start_raises(triangle):
    with pytest.raises(VertexNotFoundError):
        ospf(triangle, 'Z')


def test_missing_destination_raises(triangle):
    ospf(triangle, 'A')
    with pytest.raises(VertexNotFoundError):
        format_path(triangle, 'Z')


def test_unreachable_is_not_an_error():
    g = Graph()
    g.add_edge('A', 'B', 1)
    g.get_or_create('C')
    ospf(g, 'A')
    assert format_path(g, 'C') == "C is unreachable"
    # directed edge only goes one way
    ospf(g, 'B')
    assert format_path(g, 'A') == "A is unreachable"


def test_deleted_direction_leaves_reverse_traversable():
    g = Graph()
    g.add_undirected_edge('A', 'B', 5.0)
    g.delete_edge('A', 'B')
    assert shortest_path(g, 'B', 'A') == (['B', 'A'], 5.0)
    path, cost = shortest_path(g, 'A', 'B')
    assert path == [] and math.isinf(cost)


def test_distance_is_truncated_not_rounded():
    g = Graph()
    g.add_edge('A', 'B', 0.333)
    g.add_edge('B', 'C', 0.333)
    g.add_edge('C', 'D', 1.0)
    ospf(g, 'A')
    assert format_path(g, 'C') == "A B C 0.66"
    assert format_path(g, 'D') == "A B C D 1.66"


def test_ties_follow_insertion_order():
    g = Graph()
    g.add_edge('A', 'B', 1)
    g.add_edge('A', 'C', 1)
    g.add_edge('B', 'D', 1)
    g.add_edge('C', 'D', 1)
    assert shortest_path(g, 'A', 'D') == (['A', 'B', 'D'], 2.0)

    h = Graph()
    h.add_edge('A', 'C', 1)
    h.add_edge('A', 'B', 1)
    h.add_edge('C', 'D', 1)
    h.add_edge('B', 'D', 1)
    assert shortest_path(h, 'A', 'D') == (['A', 'C', 'D'], 2.0)


def test_parallel_edges_use_cheapest():
    g = Graph()
    g.add_edge('A', 'B', 7)
    g.add_edge('A', 'B', 3)
    assert shortest_path(g, 'A', 'B') == (['A', 'B'], 3.0)


def test_matches_networkx_on_up_subgraph():
    g = Graph()
    for u, v, w in LINKS:
        g.add_undirected_edge(u, v, w)
    g.edge_down('B', 'C')
    g.edge_down('C', 'D')
    g.vertex_down('E')

    ospf(g, 'A')
    expected = nx.single_source_dijkstra_path_length(g.to_networkx(up_only=True), 'A')
    for v in g.vertices():
        if v.name in expected:
            assert v.dist == pytest.approx(expected[v.name])
        else:
            assert math.isinf(v.dist)

    assert shortest_path(g, 'A', 'F') == (['A', 'B', 'D', 'F'], 7.0)
