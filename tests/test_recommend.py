import pytest

from friendrank import Graph, UnknownNodeReference, compute_pagerank, recommend


def test_excludes_self_and_existing_friends(star_edges):
    graph = Graph.from_edges(star_edges)
    result = compute_pagerank(graph)
    recs = recommend(graph, result, 1)
    assert [r.node for r in recs] == [2, 3]
    assert recs[0].score == result.scores[2]


def test_hub_has_nothing_to_recommend(star_edges):
    graph = Graph.from_edges(star_edges)
    assert recommend(graph, compute_pagerank(graph), 0) == []


def test_orders_by_score_and_limits_k():
    edges = [(0, 1), (1, 2), (1, 3), (1, 4), (4, 5), (5, 6), (6, 7)]
    graph = Graph.from_edges(edges)
    result = compute_pagerank(graph)
    recs = recommend(graph, result, 7, k=2)
    assert len(recs) == 2
    assert recs[0].node == 1
    assert recs[0].score >= recs[1].score


def test_recommend_then_connect_recomputes(star_edges):
    graph = Graph.from_edges(star_edges)
    rec = recommend(graph, compute_pagerank(graph), 1, k=1)[0]
    graph = graph.with_edge(1, rec.node)
    recs = recommend(graph, compute_pagerank(graph), 1)
    assert [r.node for r in recs] == [3]


def test_unknown_node(star_edges):
    graph = Graph.from_edges(star_edges)
    with pytest.raises(UnknownNodeReference):
        recommend(graph, compute_pagerank(graph), 99)
