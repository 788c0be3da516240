from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import numpy as np

from spatialgraph.model import vector_math

if TYPE_CHECKING:
    import numpy.typing as npt

DEFAULT_NODE_SIZE = 0.25


class GraphNode:
    """
    Represents a vertex of a graph placed in 3D space.

    The node holds non-owning references to its neighbours in ``links``. The
    layout engine only ever changes ``position`` and only through ``move``.
    """
    def __init__(
        self,
        payload: Any,
        links: Optional[list[GraphNode]] = None,
        size: float = DEFAULT_NODE_SIZE,
        dimension: int = 3,
    ) -> None:
        """
        Initialize the node at the origin.

        Args:
            payload: Caller defined label of the node, never interpreted.
            links: Nodes this node is connected to.
            size: Radius of the node when rendered.
            dimension: Number of position components.
        """
        if size <= 0.0:
            raise ValueError(f"Node size must be positive, got {size}")
        self.payload = payload
        self.links: list[GraphNode] = links if links is not None else []
        self.size = size
        self.position: npt.NDArray[np.float64] = vector_math.zeros(dimension)
        self.index: int | None = None

    def __repr__(self) -> str:
        """String representation of the node."""
        return f"{self.__class__.__name__}(payload={self.payload!r}, position={self.position})"

    @property
    def degree(self) -> int:
        """Number of neighbours."""
        return len(self.links)

    def link(self, other: GraphNode) -> None:
        """Connect this node and ``other`` in both directions (at most once)."""
        if other is self:
            raise ValueError(f"Cannot link {self.payload!r} to itself.")
        if not any(n is other for n in self.links):
            self.links.append(other)
        if not any(n is self for n in other.links):
            other.links.append(self)

    def subtract(self, other: GraphNode) -> npt.NDArray[np.float64]:
        """Vector pointing from ``other`` to this node."""
        return vector_math.subtract(self.position, other.position)

    def distance(self, other: GraphNode) -> float:
        """Euclidean distance between this node and ``other``."""
        return vector_math.norm(self.subtract(other))

    def distance_or(self, other: GraphNode, alternative: float) -> float:
        """Distance to ``other``, or ``alternative`` if the nodes coincide."""
        distance = self.distance(other)
        return alternative if distance == 0.0 else distance

    def direction_to(self, other: GraphNode) -> npt.NDArray[np.float64]:
        """Unit vector pointing from this node to ``other`` (zero vector if they coincide)."""
        magnitude = self.distance_or(other, 1.0)
        return vector_math.scalar_divide(other.subtract(self), magnitude)

    def direction_to_or(
        self,
        other: GraphNode,
        alternative: vector_math.VectorLike
    ) -> npt.NDArray[np.float64]:
        """
        Unit vector pointing from this node to ``other``.

        Args:
            other: Target node.
            alternative: Returned instead when the direction is the zero vector.

        Returns:
            The direction, or ``alternative`` as a vector.
        """
        direction = self.direction_to(other)
        if np.all(direction == 0.0):
            return vector_math.as_vector(alternative)
        return direction

    def move(self, force: vector_math.VectorLike) -> None:
        """Displace the node by ``force``."""
        self.position = vector_math.add(self.position, force)
