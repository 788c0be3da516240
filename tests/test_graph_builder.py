import pytest

from spatialgraph.controller.graph_builder import build_graph
from spatialgraph.errors import RecordFormatError


RECORDS = [
    {"primaryItem": "C++", "relatedItems": ["CUDA", "CMake"]},
    {"primaryItem": "CUDA", "relatedItems": ["C++"]},
    {"primaryItem": "Python", "relatedItems": []},
]


def test_items_are_deduplicated():
    graph = build_graph(RECORDS)
    assert [node.payload for node in graph] == ["C++", "CUDA", "CMake", "Python"]


def test_edges_are_undirected_and_unique():
    graph = build_graph(RECORDS)
    assert sorted(graph.edges()) == [(0, 1), (0, 2)]
    assert graph.is_symmetric()


def test_isolated_item_has_no_links():
    graph = build_graph(RECORDS)
    assert graph.find("Python").links == []


def test_nodes_start_at_origin_with_size():
    graph = build_graph(RECORDS, node_size=0.5)
    for node in graph:
        assert node.position.tolist() == [0.0, 0.0, 0.0]
        assert node.size == 0.5


def test_self_reference_is_ignored():
    graph = build_graph([{"primaryItem": "a", "relatedItems": ["a", "b"]}])
    assert graph.number_of_edges == 1


def test_missing_related_items_means_no_edges():
    graph = build_graph([{"primaryItem": "a"}])
    assert graph.number_of_nodes == 1


@pytest.mark.parametrize("record", [
    "not a record",
    {"relatedItems": ["a"]},
    {"primaryItem": "a", "relatedItems": "b"},
    {"primaryItem": ["a"], "relatedItems": ["b"]},
    {"primaryItem": "a", "relatedItems": [{"name": "b"}]},
])
def test_malformed_records(record):
    with pytest.raises(RecordFormatError):
        build_graph([record])
