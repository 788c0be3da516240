from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from spatialgraph.analysis.node import GraphNode


class ForceModel(ABC):
    """
    Abstract base class for the force laws driving a spring embedder.

    Implementations must not modify any node, the layout loop moves the nodes
    itself once the forces on all of them are known.
    """
    NAME: str = "Force Model"

    @abstractmethod
    def total_attractive_force(self, node: GraphNode) -> npt.NDArray[np.float64]:
        """
        Compute the attractive force acting on a node from its neighbours.

        Args:
            node: Node the force acts on.

        Returns:
            Force vector.
        """
        pass

    @abstractmethod
    def total_repulsive_force(
        self,
        node: GraphNode,
        all_nodes: Sequence[GraphNode]
    ) -> npt.NDArray[np.float64]:
        """
        Compute the repulsive force acting on a node from the rest of the graph.

        Args:
            node: Node the force acts on.
            all_nodes: Every node of the graph.

        Returns:
            Force vector.
        """
        pass

    def total_force(
        self,
        node: GraphNode,
        all_nodes: Sequence[GraphNode]
    ) -> npt.NDArray[np.float64]:
        """Sum of the attractive and the repulsive force on a node."""
        return self.total_attractive_force(node) + self.total_repulsive_force(node, all_nodes)
