from spatialgraph.analysis.node import GraphNode, DEFAULT_NODE_SIZE
from spatialgraph.analysis.graph import Graph

__all__ = ["GraphNode", "DEFAULT_NODE_SIZE", "Graph"]
