import pytest

from graph import (
    Edge,
    EdgeEndpointError,
    Graph,
    GraphConstructionError,
    InvalidGraphSizeError,
    UnknownVertexError,
    Vertex,
)


def test_create_empty_allocates_dense_ids():
    g = Graph.create_empty(5)
    assert [v.id for v in g.all_vertices()] == [0, 1, 2, 3, 4]
    assert g.all_edges() == []
    assert len(g) == 5


def test_zero_size_graph_is_allowed():
    g = Graph.create_empty(0)
    assert g.vertex_count() == 0
    assert g.edge_count() == 0


@pytest.mark.parametrize("size", [-1, 2.5, "3", True])
def test_bad_size_is_rejected(size):
    with pytest.raises(InvalidGraphSizeError):
        Graph(size)


def test_add_edge_updates_both_endpoints_and_edge_list():
    g = Graph(3)
    e = g.create_edge(0, 2, 7)

    assert g.all_edges() == [e]
    assert g.vertex_at(0).edges == [e]
    assert g.vertex_at(2).edges == [e]
    assert g.vertex_at(1).edges == []
    assert e.index == 0


def test_every_edge_sits_in_exactly_its_endpoints_adjacency():
    g = Graph.from_edge_list(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1), (0, 2, 5)])
    for e in g.all_edges():
        holders = [v.id for v in g.all_vertices() if any(x is e for x in v.edges)]
        assert sorted(holders) == sorted({e.first, e.second})


def test_parallel_edges_are_all_kept_in_insertion_order():
    g = Graph(2)
    heavy = g.create_edge(0, 1, 5)
    light = g.create_edge(0, 1, 2)
    assert g.vertex_at(0).edges == [heavy, light]
    assert g.vertex_at(1).edges == [heavy, light]
    assert g.edge_count() == 2


def test_self_loop_lands_twice_on_its_vertex():
    g = Graph(1)
    loop = g.create_edge(0, 0, 5)
    assert g.vertex_at(0).edges == [loop, loop]
    assert g.vertex_at(0).degree() == 2
    assert g.vertex_at(0).neighbours() == [0, 0]


@pytest.mark.parametrize("start,end", [(0, 3), (-1, 0), (3, 3), (0, None)])
def test_unknown_vertex_leaves_graph_untouched(start, end):
    g = Graph(3)
    g.create_edge(0, 1, 1)
    with pytest.raises(UnknownVertexError):
        g.create_edge(start, end, 1)
    assert g.edge_count() == 1
    assert [v.degree() for v in g.all_vertices()] == [1, 1, 0]


def test_unknown_vertex_is_a_construction_error():
    with pytest.raises(GraphConstructionError):
        Graph(2).create_edge(0, 2, 1)


def test_vertex_at_out_of_range():
    with pytest.raises(UnknownVertexError):
        Graph(2).vertex_at(2)


def test_edge_cannot_be_registered_twice():
    g = Graph(2)
    e = g.add_edge(Edge(0, 1, 3))
    with pytest.raises(GraphConstructionError):
        g.add_edge(e)
    with pytest.raises(GraphConstructionError):
        Graph(2).add_edge(e)


def test_accessors_return_copies():
    g = Graph.from_edge_list(2, [(0, 1, 1)])
    g.all_edges().clear()
    g.all_vertices().clear()
    assert g.edge_count() == 1
    assert g.vertex_count() == 2


def test_from_vertices_adopts_prebuilt_vertices():
    g = Graph.from_vertices([Vertex(0), Vertex(1), Vertex(2)])
    g.create_edge(0, 2, 4)
    assert g.vertex_at(2).neighbours() == [0]


def test_from_vertices_rejects_gaps_and_used_vertices():
    with pytest.raises(GraphConstructionError):
        Graph.from_vertices([Vertex(0), Vertex(2)])

    used = Vertex(0)
    used.attach(Edge(0, 0, 1))
    with pytest.raises(GraphConstructionError):
        Graph.from_vertices([used])


def test_vertex_belongs_to_one_graph_only():
    v0, v1, v2 = Vertex(0), Vertex(1), Vertex(2)
    a = Graph.from_vertices([v0, v1, v2])
    with pytest.raises(GraphConstructionError):
        Graph.from_vertices([v0])

    a.create_edge(0, 2, 1)
    assert v0.neighbours() == [2]


def test_rejected_adoption_leaves_vertices_free():
    free = Vertex(0)
    with pytest.raises(GraphConstructionError):
        Graph.from_vertices([free, Graph(2).vertex_at(1)])
    assert not free.owned
    g = Graph.from_vertices([free])
    assert g.vertex_at(0) is free


def test_graph_vertices_cannot_be_adopted_elsewhere():
    g = Graph(2)
    with pytest.raises(GraphConstructionError):
        Graph.from_vertices(g.all_vertices())


def test_dict_round_trip():
    g = Graph.from_edge_list(3, [(0, 1, 4), (2, 1, 0)])
    data = g.to_dict()
    assert data == {"size": 3, "edges": [[0, 1, 4], [2, 1, 0]]}
    assert Graph.from_dict(data).to_dict() == data


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
def test_other_end_from_either_side():
    e = Edge(3, 8, 2)
    assert e.other_end(3) == 8
    assert e.other_end(8) == 3


def test_other_end_of_self_loop_is_itself():
    assert Edge(4, 4, 1).other_end(4) == 4


def test_other_end_rejects_a_stranger():
    with pytest.raises(EdgeEndpointError):
        Edge(0, 1, 1).other_end(2)


def test_endpoints_are_read_only():
    e = Edge(0, 1, 1)
    with pytest.raises(AttributeError):
        e.first = 5
    assert e.endpoints == (0, 1)


def test_connects_ignores_order():
    e = Edge(1, 2, 9)
    assert e.connects(1, 2)
    assert e.connects(2, 1)
    assert not e.connects(1, 3)


@pytest.mark.parametrize("triple", [[0, 1], [0, 1, 2, 3], "012", 7, None])
def test_from_dict_rejects_malformed_triples(triple):
    with pytest.raises(GraphConstructionError):
        Graph.from_dict({"size": 2, "edges": [triple]})


def test_from_list_accepts_tuples():
    edge = Edge.from_list((1, 0, 6))
    assert edge.endpoints == (1, 0)
    assert edge.weight == 6
