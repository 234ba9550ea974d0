import io

import matplotlib

matplotlib.use("Agg")

from routesim import Graph  # noqa: E402
from routesim.simulator import run  # noqa: E402
from routesim.visualize_network import draw_graph, drawing_graph  # noqa: E402


def make_graph():
    g = Graph()
    g.add_undirected_edge('A', 'B', 1)
    g.add_undirected_edge('B', 'C', 2)
    g.add_edge('A', 'B', 9)
    return g


def test_drawing_graph_collapses_parallel_edges():
    g = make_graph()
    g.edge_down('B', 'C')
    g.vertex_down('A')
    G = drawing_graph(g)
    assert G.number_of_edges() == 4
    assert G['A']['B']['weight'] == 1.0
    assert G['A']['B']['down']
    assert G['B']['C']['down']
    assert not G['C']['B']['down']
    assert G.nodes['A']['down']


def test_draw_graph_saves_png(tmp_path):
    g = make_graph()
    target = tmp_path / "plots" / "topology.png"
    out = io.StringIO()
    draw_graph(g, path=['A', 'B', 'C'], output_link=str(target), out=out)
    assert target.exists()
    assert out.getvalue() == f"Saved {target}\n"


def test_draw_command(tmp_path):
    target = tmp_path / "net.png"
    out = io.StringIO()
    run(make_graph(), [f"draw {target}"], out=out)
    assert target.exists()
