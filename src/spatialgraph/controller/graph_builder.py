"""
Graph Builder
=============
Turns skill records into a ``Graph`` ready for layout.

A record has the shape ``{"primaryItem": str, "relatedItems": [str, ...]}``.
Every related item implies an undirected edge to the primary item. Items are
deduplicated by value, so a skill mentioned by several records becomes a
single node.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from spatialgraph.analysis.graph import Graph
from spatialgraph.analysis.node import DEFAULT_NODE_SIZE, GraphNode
from spatialgraph.errors import RecordFormatError

logger = logging.getLogger(__name__)

PRIMARY_KEY = "primaryItem"
RELATED_KEY = "relatedItems"


def _validate_record(index: int, record: Any) -> tuple[Any, list[Any]]:
    if not isinstance(record, Mapping):
        raise RecordFormatError(f"Record {index} is not an object: {record!r}")
    if PRIMARY_KEY not in record:
        raise RecordFormatError(f"Record {index} has no '{PRIMARY_KEY}'.")
    related = record.get(RELATED_KEY, [])
    if not isinstance(related, list):
        raise RecordFormatError(f"Record {index}: '{RELATED_KEY}' must be a list, got {type(related).__name__}.")
    primary = record[PRIMARY_KEY]
    for item in [primary, *related]:
        try:
            hash(item)
        except TypeError as e:
            raise RecordFormatError(f"Record {index}: item {item!r} cannot be used as a node label.") from e
    return primary, related


def build_graph(
    records: Iterable[Mapping[str, Any]],
    node_size: float = DEFAULT_NODE_SIZE,
    dimension: int = 3,
) -> Graph:
    """
    Build a graph from skill records.

    Args:
        records: Records with a primary item and its related items.
        node_size: Radius given to every node.
        dimension: Number of position components.

    Returns:
        Graph with one node per distinct item and symmetric links.
    """
    graph = Graph(dimension=dimension)
    by_item: dict[Any, GraphNode] = {}

    def node_for(item: Any) -> GraphNode:
        node = by_item.get(item)
        if node is None:
            node = graph.add_node(item, size=node_size)
            by_item[item] = node
        return node

    for index, record in enumerate(records):
        primary, related = _validate_record(index, record)
        primary_node = node_for(primary)
        for item in related:
            if item == primary:
                logger.warning(f"Ignoring self reference of {primary!r} in record {index}.")
                continue
            primary_node.link(node_for(item))

    logger.info(f"Built graph with {graph.number_of_nodes} nodes and {graph.number_of_edges} edges.")
    return graph
