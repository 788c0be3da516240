from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from spatialgraph.analysis.node import GraphNode


def place_on_ring(nodes: Sequence[GraphNode], radius: float = 0.5) -> None:
    """
    Spread the nodes evenly on a horizontal circle around the origin.

    Node ``i`` of ``n`` is put at angle ``2 * pi * i / n`` in the x-z plane.
    Distinct starting positions keep the layout free of random tie-breaking.

    Args:
        nodes: Nodes to place, their positions are overwritten.
        radius: Radius of the circle.
    """
    if radius <= 0.0:
        raise ValueError(f"Ring radius must be positive, got {radius}")
    count = len(nodes)
    for i, node in enumerate(nodes):
        angle = 2 * math.pi * (i / count)
        if node.position.size < 3:
            raise ValueError(f"Ring placement needs 3D positions, {node.payload!r} has {node.position.size}.")
        position = np.zeros_like(node.position)
        position[0] = math.cos(angle) * radius
        position[2] = math.sin(angle) * radius
        node.position = position
