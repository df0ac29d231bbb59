from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from beatmotion.animation.points import complexify_points, get_point_time


@dataclass(frozen=True)
class AnimationDomain:
    """Time span covered by an animation.

    The default (min=1, max=0) is the empty domain returned when nothing
    was scanned.
    """
    min: float = 1
    max: float = 0

    @property
    def is_empty(self) -> bool:
        return self.min > self.max

    @property
    def duration(self) -> float:
        return self.max - self.min

    def union(self, other: "AnimationDomain") -> "AnimationDomain":
        return AnimationDomain(min(self.min, other.min), max(self.max, other.max))


def _scan(times: Iterable[float]) -> AnimationDomain:
    lo = 1
    hi = 0
    for time in times:
        if time < lo:
            lo = time
        if time > hi:
            hi = time
    return AnimationDomain(lo, hi)


def get_animation_domain(definition: list) -> AnimationDomain:
    """Minimum and maximum point times of a definition (constants sit at 0)."""
    return _scan(get_point_time(p) for p in complexify_points(definition))


def get_animated_object_domain(animation: Mapping) -> AnimationDomain:
    """Combined domain of the position, rotation and scale channels."""
    position = get_animation_domain(animation.get("position") or [0, 0, 0])
    rotation = get_animation_domain(animation.get("rotation") or [0, 0, 0])
    scale = get_animation_domain(animation.get("scale") or [1, 1, 1])
    return position.union(rotation).union(scale)
