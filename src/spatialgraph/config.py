"""
Configuration & Path Management
===============================
Central registry for bundled resources and the default layout constants.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_SKILLS_PATH (str): Absolute path to the bundled sample records.
    LayoutSettings: Every tunable constant of a layout run.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/spatialgraph/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_SKILLS_PATH: str = os.path.join(ASSETS_PATH, "skills_sample.json")

# setting name -> (accepted types, None allowed)
_SETTING_TYPES: dict[str, tuple[tuple[type, ...], bool]] = {
    "repulsion": ((int, float), False),
    "attraction": ((int, float), False),
    "ideal_length": ((int, float), False),
    "cool_down": ((int, float), False),
    "error_threshold": ((int, float), True),
    "max_iterations": ((int,), False),
    "error_metric": ((str,), False),
    "ring_radius": ((int, float), False),
    "seed": ((int,), True),
}


def _check_type(key: str, value: Any) -> None:
    accepted, nullable = _SETTING_TYPES[key]
    if value is None and nullable:
        return
    # bool is an int subclass, but JSON true/false is never a valid number here
    if isinstance(value, bool) or not isinstance(value, accepted):
        expected = " or ".join(t.__name__ for t in accepted)
        raise ValueError(f"Layout setting '{key}' must be {expected}, got {type(value).__name__} {value!r}")


@dataclass
class LayoutSettings:
    """
    Force model and loop constants, with the values the engine ships with.

    ``error_threshold`` left as None picks the default of the chosen error
    metric (0.1 for "signed", 1e-4 for "magnitude").
    """
    repulsion: float = 0.25
    attraction: float = 0.25
    ideal_length: float = 1.0
    cool_down: float = 0.99
    error_threshold: Optional[float] = None
    max_iterations: int = 100
    error_metric: str = "magnitude"
    ring_radius: float = 0.5
    seed: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutSettings:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown layout settings: {', '.join(sorted(unknown))}")
        for key, value in data.items():
            _check_type(key, value)
        return cls(**data)

    def updated(self, **overrides: Any) -> LayoutSettings:
        """Copy with every override that is not None applied."""
        data = self.to_dict()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return LayoutSettings.from_dict(data)


def load_settings(path: str) -> LayoutSettings:
    """Read layout settings from a JSON object file."""
    logger.info(f"Loading layout settings from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file '{path}' must contain a JSON object.")
    return LayoutSettings.from_dict(data)
