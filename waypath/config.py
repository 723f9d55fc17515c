"""
Tween settings - defaults shared by every tween a manager creates.

Settings can be kept in a JSON file:

    {
        "default_segment": 10,
        "pool_capacity": 32,
        "up_axis": [0.0, 0.0, 1.0],
        "forward_epsilon": 1e-9
    }
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path

from waypath import log
from waypath.errors import InvalidParametersError


@dataclass
class TweenSettings:
    """
    Defaults for PathTweenManager.

    default_segment: curve subdivision used when create() gets segment=None
    pool_capacity: number of tween slots allocated up front
    up_axis: reference up for forward alignment
    forward_epsilon: shortest bracket with a defined direction of travel
    """

    default_segment: int = 10
    pool_capacity: int = 0
    up_axis: tuple[float, float, float] = (0.0, 0.0, 1.0)
    forward_epsilon: float = 1e-9

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        try:
            default_segment = int(self.default_segment)
            pool_capacity = int(self.pool_capacity)
            up_axis = [float(v) for v in self.up_axis]
            forward_epsilon = float(self.forward_epsilon)
        except (TypeError, ValueError) as e:
            raise InvalidParametersError(f"Bad tween settings: {e}") from e

        if default_segment < 1:
            raise InvalidParametersError(
                f"default_segment must be >= 1, got {self.default_segment}"
            )
        if pool_capacity < 0:
            raise InvalidParametersError(
                f"pool_capacity must be >= 0, got {self.pool_capacity}"
            )
        if (
            len(up_axis) != 3
            or not all(math.isfinite(v) for v in up_axis)
            or not any(up_axis)
        ):
            raise InvalidParametersError(
                f"up_axis must be a finite non-zero 3D vector, got {self.up_axis}"
            )
        if not math.isfinite(forward_epsilon) or forward_epsilon < 0:
            raise InvalidParametersError(
                f"forward_epsilon must be finite and >= 0, got {self.forward_epsilon}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "default_segment": self.default_segment,
            "pool_capacity": self.pool_capacity,
            "up_axis": list(self.up_axis),
            "forward_epsilon": self.forward_epsilon,
        }

    @staticmethod
    def from_dict(data: dict) -> "TweenSettings":
        """Deserialize from dictionary. Unknown keys are ignored."""
        defaults = TweenSettings()
        try:
            default_segment = int(data.get("default_segment", defaults.default_segment))
            pool_capacity = int(data.get("pool_capacity", defaults.pool_capacity))
            up_axis = tuple(float(v) for v in data.get("up_axis", defaults.up_axis))
            forward_epsilon = float(data.get("forward_epsilon", defaults.forward_epsilon))
        except (TypeError, ValueError) as e:
            raise InvalidParametersError(f"Bad tween settings: {e}") from e

        return TweenSettings(
            default_segment=default_segment,
            pool_capacity=pool_capacity,
            up_axis=up_axis,
            forward_epsilon=forward_epsilon,
        )

    @staticmethod
    def load(path: str | Path) -> "TweenSettings":
        """Load settings from a JSON file."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = TweenSettings.from_dict(data)
        log.info(f"[TweenSettings] Loaded from {path}")
        return settings

    def save(self, path: str | Path) -> None:
        """Save settings to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        log.info(f"[TweenSettings] Saved to {path}")
