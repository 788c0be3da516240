"""
Input/Output Manager (JSON)
Reads skill records and writes laid out scenes for a renderer.

Scene format::

    {
        "version": "...",
        "nodes": [{"index": 0, "payload": "C++", "position": [x, y, z], "size": 0.25}, ...],
        "edges": [[0, 1], ...]
    }

Each undirected edge is listed once.
"""
from __future__ import annotations

import json
import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Optional

from spatialgraph.analysis.graph import Graph
from spatialgraph.errors import RecordFormatError

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("spatialgraph")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


def load_records(filepath: str) -> list[dict[str, Any]]:
    """Load a JSON array of skill records."""
    logger.info(f"Loading records from: {filepath}")
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise RecordFormatError(f"'{filepath}' must contain a JSON array of records.")
    return data


def scene_to_dict(graph: Graph, result: Optional[Any] = None) -> dict[str, Any]:
    """
    Serialize node payloads, positions and sizes plus the deduplicated edges.

    Args:
        graph: Laid out graph.
        result: Optional ``LayoutResult`` whose summary is stored under "layout".
    """
    scene: dict[str, Any] = {
        "version": APP_VERSION,
        "nodes": [
            {
                "index": node.index,
                "payload": node.payload,
                "position": [float(c) for c in node.position],
                "size": node.size,
            }
            for node in graph.nodes
        ],
        "edges": [list(edge) for edge in graph.edges()],
    }
    if result is not None:
        scene["layout"] = {
            "iterations": result.iterations,
            "error": result.error,
            "converged": result.converged,
            "cancelled": result.cancelled,
        }
    return scene


def export_scene(graph: Graph, filepath: str, result: Optional[Any] = None) -> None:
    """Write the scene of a laid out graph to a JSON file."""
    logger.info(f"Saving scene to: {filepath}")
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(scene_to_dict(graph, result), f, indent=2)
        f.write("\n")
