"""
Graph Container
===============
Arena of ``GraphNode`` objects addressed by a stable index.

Nodes keep direct references to their neighbours, the graph additionally
exposes the adjacency as index lists and the undirected edge set, which is
what a renderer needs to draw one line per connection.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator

import numpy as np

from spatialgraph.analysis.node import DEFAULT_NODE_SIZE, GraphNode

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Graph:
    """
    Collection of nodes taking part in one layout.
    """
    def __init__(self, dimension: int = 3) -> None:
        self.dimension = dimension
        self.nodes: list[GraphNode] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.number_of_nodes}, edges={self.number_of_edges})"

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> GraphNode:
        return self.nodes[index]

    @property
    def number_of_nodes(self) -> int:
        return len(self.nodes)

    @property
    def number_of_edges(self) -> int:
        return sum(1 for _ in self.edges())

    def add_node(self, payload: Any, size: float = DEFAULT_NODE_SIZE) -> GraphNode:
        """Create a node, register it and return it."""
        node = GraphNode(payload=payload, size=size, dimension=self.dimension)
        node.index = len(self.nodes)
        self.nodes.append(node)
        return node

    def link(self, a: int | GraphNode, b: int | GraphNode) -> None:
        """Connect two nodes, given either by index or by reference."""
        node_a = self._resolve(a)
        node_b = self._resolve(b)
        node_a.link(node_b)

    def find(self, payload: Any) -> GraphNode | None:
        """First node carrying ``payload``, if any."""
        for node in self.nodes:
            if node.payload == payload:
                return node
        return None

    def adjacency(self) -> list[list[int]]:
        """Neighbour indices of every node, in node order."""
        return [[self._index_of(other) for other in node.links] for node in self.nodes]

    def edges(self) -> Iterator[tuple[int, int]]:
        """
        Yield every undirected edge once as ``(i, j)`` with ``i < j``.

        An edge reached from both of its ends is reported a single time.
        """
        seen: set[tuple[int, int]] = set()
        for node in self.nodes:
            for other in node.links:
                key = tuple(sorted((self._index_of(node), self._index_of(other))))
                if key in seen:
                    continue
                seen.add(key)
                yield key

    def is_symmetric(self) -> bool:
        """True when every link has its reverse link."""
        for node in self.nodes:
            for other in node.links:
                if not any(n is node for n in other.links):
                    logger.debug(f"Asymmetric link {node.payload!r} -> {other.payload!r}")
                    return False
        return True

    def positions(self) -> npt.NDArray[np.float64]:
        """Positions of all nodes as an (n, dimension) array."""
        if not self.nodes:
            return np.empty((0, self.dimension), dtype=np.float64)
        return np.vstack([node.position for node in self.nodes])

    def _resolve(self, ref: int | GraphNode) -> GraphNode:
        if isinstance(ref, GraphNode):
            self._index_of(ref)
            return ref
        return self.nodes[ref]

    def _index_of(self, node: GraphNode) -> int:
        if node.index is None or node.index >= len(self.nodes) or self.nodes[node.index] is not node:
            raise KeyError(f"Node {node.payload!r} does not belong to this graph.")
        return node.index
