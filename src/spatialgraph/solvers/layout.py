from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Optional, Sequence

import numpy as np

from spatialgraph.errors import EmptyGraphError, MissingForceModelError
from spatialgraph.model import vector_math
from spatialgraph.solvers.force_model import ForceModel

if TYPE_CHECKING:
    import numpy.typing as npt
    from spatialgraph.analysis.node import GraphNode

logger = logging.getLogger(__name__)

VERTICAL_AXIS = 1


class ErrorMetric(StrEnum):
    """How the per-node forces of one iteration are reduced to a single error."""
    SIGNED = "signed"
    MAGNITUDE = "magnitude"

    @property
    def default_threshold(self) -> float:
        """
        Per-node error threshold used when none is configured.

        SIGNED uses 0.1. MAGNITUDE uses 1e-4, the summed force lengths of a
        layout stay above 0.1 per node only during the first few iterations.
        """
        return DEFAULT_THRESHOLDS[self]

    def reduce(self, forces: npt.NDArray[np.float64]) -> float:
        """
        Reduce an (n, dimension) array of forces to a scalar.

        SIGNED sums all components, so opposing forces cancel. MAGNITUDE sums
        the length of every force.
        """
        if self is ErrorMetric.SIGNED:
            return float(np.sum(np.sum(forces, axis=0)))
        return float(np.sum(np.linalg.norm(forces, axis=1)))


DEFAULT_THRESHOLDS = {
    ErrorMetric.SIGNED: 0.1,
    ErrorMetric.MAGNITUDE: 1e-4,
}


@dataclass
class LayoutResult:
    """Outcome of one layout run."""
    iterations: int
    error: float
    converged: bool
    cancelled: bool = False
    error_history: list[float] = field(default_factory=list)


class SpringEmbedderLayout:
    """
    Iterative force-directed layout.

    Every iteration evaluates the force model on all nodes, then moves all of
    them at once by the force damped with a cooling factor. The loop stops
    when the error drops to ``error_threshold * len(nodes)`` or after
    ``max_iterations``.
    """

    def __init__(
        self,
        force_model: ForceModel,
        cool_down: float = 0.99,
        error_threshold: Optional[float] = None,
        max_iterations: int = 100,
        error_metric: ErrorMetric | str = ErrorMetric.MAGNITUDE,
    ) -> None:
        """
        Initialize the layout with a force model and loop constants.

        Args:
            force_model: Attraction/repulsion law evaluated for every node.
            cool_down: Factor in (0, 1) applied to the cooling factor after each iteration.
            error_threshold: Convergence threshold per node, the metric's
                ``default_threshold`` when omitted.
            max_iterations: Hard cap on the number of iterations.
            error_metric: Reduction of the forces used as the convergence error.
        """
        if not isinstance(force_model, ForceModel):
            raise MissingForceModelError(
                f"{self.__class__.__name__} needs a ForceModel, got {type(force_model).__name__}"
            )
        if not 0.0 < cool_down < 1.0:
            raise ValueError(f"cool_down must lie in (0, 1), got {cool_down}")
        if error_threshold is not None and error_threshold < 0.0:
            raise ValueError(f"error_threshold must not be negative, got {error_threshold}")
        if max_iterations < 0:
            raise ValueError(f"max_iterations must not be negative, got {max_iterations}")

        self.force_model = force_model
        self.cool_down = cool_down
        self.error_metric = ErrorMetric(error_metric)
        self.error_threshold = (
            error_threshold if error_threshold is not None else self.error_metric.default_threshold
        )
        self.max_iterations = int(max_iterations)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(force_model={self.force_model!r}, cool_down={self.cool_down}, "
            f"error_threshold={self.error_threshold}, max_iterations={self.max_iterations}, "
            f"error_metric={self.error_metric})"
        )

    def compute_forces(self, nodes: Sequence[GraphNode]) -> npt.NDArray[np.float64]:
        """
        Forces on every node for the current positions, as an (n, dimension) array.

        No node is moved here.
        """
        forces = []
        for node in nodes:
            force = self.force_model.total_force(node, nodes)
            logger.debug(f"{node.payload!r}: force={force}")
            forces.append(force)
        return np.vstack(forces)

    def layout(
        self,
        nodes: Sequence[GraphNode],
        should_stop: Optional[Callable[[], bool]] = None,
        timeout: Optional[float] = None,
    ) -> LayoutResult:
        """
        Move the nodes to their layout positions in place.

        Args:
            nodes: Nodes to arrange, with symmetric links.
            should_stop: Polled between iterations, a True return ends the run.
            timeout: Wall-clock budget in seconds, checked between iterations.

        Returns:
            Summary of the run. The layout is normalized even when cancelled.
        """
        if not isinstance(self.force_model, ForceModel):
            raise MissingForceModelError("No force model configured.")
        if len(nodes) == 0:
            raise EmptyGraphError("Cannot lay out a graph without nodes.")

        iteration = 0
        error = math.inf
        cooling_factor = 1.0
        cancelled = False
        history: list[float] = []
        threshold = self.error_threshold * len(nodes)
        start = time.perf_counter()

        while error > threshold and iteration < self.max_iterations:
            forces = self.compute_forces(nodes)
            for node, force in zip(nodes, forces):
                node.move(vector_math.scalar_multiply(force, cooling_factor))

            error = self.error_metric.reduce(forces)
            history.append(error)
            logger.debug(f"Iteration {iteration}: error={error:.6g}, cooling={cooling_factor:.4f}")

            cooling_factor *= self.cool_down
            iteration += 1

            if should_stop is not None and should_stop():
                logger.info(f"Layout stopped by caller after {iteration} iterations.")
                cancelled = True
                break
            if timeout is not None and time.perf_counter() - start > timeout:
                logger.warning(f"Layout timed out after {iteration} iterations ({timeout} s).")
                cancelled = True
                break

        self.normalize(nodes)

        converged = error <= threshold
        logger.info(
            f"Layout of {len(nodes)} nodes finished after {iteration} iterations "
            f"(error={error:.6g}, converged={converged})."
        )
        return LayoutResult(
            iterations=iteration,
            error=error,
            converged=converged,
            cancelled=cancelled,
            error_history=history,
        )

    @staticmethod
    def normalize(nodes: Sequence[GraphNode], vertical_axis: int = VERTICAL_AXIS) -> None:
        """
        Shift the nodes so the lowest one sits at height 0 and the remaining
        axes are centered on the origin.
        """
        positions = np.vstack([node.position for node in nodes])
        offset = positions.mean(axis=0)
        offset[vertical_axis] = positions[:, vertical_axis].min()
        for node in nodes:
            node.position = vector_math.subtract(node.position, offset)
