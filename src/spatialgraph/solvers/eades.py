from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from spatialgraph.model import vector_math
from spatialgraph.solvers.force_model import ForceModel

if TYPE_CHECKING:
    import numpy.typing as npt
    from spatialgraph.analysis.node import GraphNode


class EadesForceModel(ForceModel):
    """
    Eades spring embedder.

    Edges act as logarithmic springs with rest length ``ideal_length``, every
    pair of nodes repels with an inverse square law. Coincident nodes are
    separated along a random unit direction drawn from ``rng``.
    """
    NAME = "Eades"

    def __init__(
        self,
        repulsion: float,
        attraction: float,
        ideal_length: float,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        include_self: bool = False,
    ) -> None:
        """
        Initialize the force model.

        Args:
            repulsion: Repulsion constant C_rep.
            attraction: Spring constant C_spring.
            ideal_length: Edge length at which a spring exerts no force.
            rng: Random generator used for tie-breaking jitter.
            seed: Seed for a fresh generator, ignored when ``rng`` is given.
            include_self: Let a node repel itself. Its zero distance then adds a
                random jitter term to every node in every iteration.
        """
        for name, value in (("repulsion", repulsion), ("attraction", attraction), ("ideal_length", ideal_length)):
            if not value > 0.0:
                raise ValueError(f"{name} must be positive, got {value}")
        self.repulsion = float(repulsion)
        self.attraction = float(attraction)
        self.ideal_length = float(ideal_length)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.include_self = include_self

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(repulsion={self.repulsion}, "
            f"attraction={self.attraction}, ideal_length={self.ideal_length})"
        )

    def jitter(self, dimension: int) -> npt.NDArray[np.float64]:
        """Random unit vector with non-negative components."""
        while True:
            sample = self.rng.random(dimension)
            if np.any(sample > 0.0):
                return vector_math.normalize(sample)

    def direction_or_jitter(self, origin: GraphNode, target: GraphNode) -> npt.NDArray[np.float64]:
        """Unit vector from ``origin`` to ``target``, a fresh jitter if the two coincide."""
        direction = origin.direction_to(target)
        if np.all(direction == 0.0):
            return origin.direction_to_or(target, self.jitter(origin.position.size))
        return direction

    def repulsive_force(self, node_a: GraphNode, node_b: GraphNode) -> npt.NDArray[np.float64]:
        """
        Compute the repulsive force on ``node_a`` from ``node_b``.

        Args:
            node_a: Node being pushed.
            node_b: Node pushing.

        Returns:
            Force vector pointing away from ``node_b``.
        """
        magnitude = self.repulsion / node_a.distance_or(node_b, 1.0) ** 2
        direction = self.direction_or_jitter(node_b, node_a)
        return vector_math.scalar_multiply(direction, magnitude)

    def total_repulsive_force(
        self,
        node: GraphNode,
        all_nodes: Sequence[GraphNode]
    ) -> npt.NDArray[np.float64]:
        force = vector_math.zeros(node.position.size)
        for other in all_nodes:
            if other is node and not self.include_self:
                continue
            force = vector_math.add(force, self.repulsive_force(node, other))
        return force

    def spring_magnitude(self, node: GraphNode, other: GraphNode) -> float:
        """
        Signed spring strength between two linked nodes.

        Negative when the nodes are closer than ``ideal_length``, zero at it and
        positive beyond it.
        """
        distance = node.distance_or(other, self.ideal_length)
        return self.attraction * math.log10(distance / self.ideal_length)

    def total_attractive_force(self, node: GraphNode) -> npt.NDArray[np.float64]:
        force = vector_math.zeros(node.position.size)
        for other in node.links:
            # the pair's own repulsion is already counted by total_repulsive_force
            repulsive_force_to_ignore = self.repulsive_force(node, other)
            direction = self.direction_or_jitter(node, other)
            force_from_other = vector_math.subtract(
                vector_math.scalar_multiply(direction, self.spring_magnitude(node, other)),
                repulsive_force_to_ignore
            )
            force = vector_math.add(force, force_from_other)
        return force
