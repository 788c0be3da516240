"""3D force-directed layout of small undirected graphs."""
from spatialgraph.analysis import Graph, GraphNode
from spatialgraph.controller import build_graph, place_on_ring
from spatialgraph.errors import (
    DimensionMismatchError,
    EmptyGraphError,
    MissingForceModelError,
    RecordFormatError,
    SpatialGraphError,
)
from spatialgraph.solvers import EadesForceModel, ErrorMetric, ForceModel, LayoutResult, SpringEmbedderLayout

__all__ = [
    "Graph",
    "GraphNode",
    "build_graph",
    "place_on_ring",
    "DimensionMismatchError",
    "EmptyGraphError",
    "MissingForceModelError",
    "RecordFormatError",
    "SpatialGraphError",
    "EadesForceModel",
    "ErrorMetric",
    "ForceModel",
    "LayoutResult",
    "SpringEmbedderLayout",
]
