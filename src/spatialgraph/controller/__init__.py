from spatialgraph.controller.graph_builder import build_graph
from spatialgraph.controller.placement import place_on_ring

__all__ = ["build_graph", "place_on_ring"]
