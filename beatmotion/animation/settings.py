"""
Animation settings: optimizer thresholds and bake frequency.

Thresholds are the minimum delta for points to be kept. When the delta is
less than the threshold the point is considered for removal.

Settings can be stored as JSON (see load_animation_settings /
save_animation_settings).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, List, Optional, Union

from beatmotion import log


@dataclass
class OptimizeSimilarPointsSettings:
    """Settings of the similar point heuristic."""

    active: bool = True
    difference_threshold: float = 1
    time_difference_threshold: float = 0.001

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "OptimizeSimilarPointsSettings":
        """Deserialize from dictionary."""
        return OptimizeSimilarPointsSettings(
            active=data.get("active", True),
            difference_threshold=data.get("difference_threshold", 1),
            time_difference_threshold=data.get("time_difference_threshold", 0.001),
        )


@dataclass
class OptimizeSimilarPointsSlopeSettings:
    """Settings of the similar slope heuristic."""

    active: bool = True
    difference_threshold: float = 0.03
    time_difference_threshold: float = 0.025
    y_intercept_difference_threshold: float = 0.5

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "OptimizeSimilarPointsSlopeSettings":
        """Deserialize from dictionary."""
        return OptimizeSimilarPointsSlopeSettings(
            active=data.get("active", True),
            difference_threshold=data.get("difference_threshold", 0.03),
            time_difference_threshold=data.get("time_difference_threshold", 0.025),
            y_intercept_difference_threshold=data.get("y_intercept_difference_threshold", 0.5),
        )


@dataclass
class OptimizeSettings:
    """
    Settings of the keyframe optimizer.

    - disabled: skip optimization altogether
    - passes: how many times every heuristic runs over the points
    - performance_log: log point counts before and after
    - optimize_duplicates: remove points with identical values
    - optimize_similar_points: remove points similar within a threshold
    - optimize_similar_points_slope: remove points that don't change the slope
    - additional_optimizers: extra heuristics, run first; not serialized
    """

    disabled: bool = False
    passes: int = 5
    performance_log: bool = False
    optimize_duplicates: bool = True
    optimize_similar_points: OptimizeSimilarPointsSettings = field(
        default_factory=OptimizeSimilarPointsSettings
    )
    optimize_similar_points_slope: OptimizeSimilarPointsSlopeSettings = field(
        default_factory=OptimizeSimilarPointsSlopeSettings
    )
    additional_optimizers: List[Callable] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "disabled": self.disabled,
            "passes": self.passes,
            "performance_log": self.performance_log,
            "optimize_duplicates": self.optimize_duplicates,
            "optimize_similar_points": self.optimize_similar_points.to_dict(),
            "optimize_similar_points_slope": self.optimize_similar_points_slope.to_dict(),
        }

    @staticmethod
    def from_dict(data: dict) -> "OptimizeSettings":
        """Deserialize from dictionary."""
        return OptimizeSettings(
            disabled=data.get("disabled", False),
            passes=data.get("passes", 5),
            performance_log=data.get("performance_log", False),
            optimize_duplicates=data.get("optimize_duplicates", True),
            optimize_similar_points=OptimizeSimilarPointsSettings.from_dict(
                data.get("optimize_similar_points", {})
            ),
            optimize_similar_points_slope=OptimizeSimilarPointsSlopeSettings.from_dict(
                data.get("optimize_similar_points_slope", {})
            ),
        )


@dataclass
class AnimationSettings:
    """
    Settings for animations that get baked and optimized.

    bake_sample_frequency: samples per unit of time, both ends included.
    """

    bake_sample_frequency: int = 32
    optimize_settings: OptimizeSettings = field(default_factory=OptimizeSettings)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "bake_sample_frequency": self.bake_sample_frequency,
            "optimize_settings": self.optimize_settings.to_dict(),
        }

    @staticmethod
    def from_dict(data: dict) -> "AnimationSettings":
        """Deserialize from dictionary."""
        return AnimationSettings(
            bake_sample_frequency=data.get("bake_sample_frequency", 32),
            optimize_settings=OptimizeSettings.from_dict(data.get("optimize_settings", {})),
        )


def load_animation_settings(path: Union[str, Path]) -> AnimationSettings:
    """
    Load settings from a JSON file.

    A missing or unreadable file gives default settings.
    """
    path = Path(path)
    if not path.exists():
        return AnimationSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = AnimationSettings.from_dict(data)
        log.info(f"[AnimationSettings] Loaded settings from {path}")
        return settings
    except Exception as e:
        log.error(f"[AnimationSettings] Failed to load settings: {e}")
        return AnimationSettings()


def save_animation_settings(settings: AnimationSettings, path: Union[str, Path]) -> bool:
    """Save settings to a JSON file. Returns False if the file cannot be written."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
        log.info(f"[AnimationSettings] Saved settings to {path}")
        return True
    except OSError as e:
        log.error(f"[AnimationSettings] Failed to save settings: {e}")
        return False
