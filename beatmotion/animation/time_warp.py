"""
Time warping of point definitions: reverse, mirror, normalize.

The easing flag of a point describes the segment that ends at that point.
Reversing the time therefore moves every easing one point to the right and
flips its direction (In <-> Out). Splines are not corrected.
"""

from __future__ import annotations

from dataclasses import dataclass

from beatmotion.easing import Ease
from beatmotion.animation.points import (
    PointDefinition,
    are_points_simple,
    complexify_points,
    copy_points,
    get_point_easing,
    get_point_time,
    set_point_easing,
    set_point_time,
    simplify_points,
)


def _reverse_easing(flag: str) -> str:
    ease = Ease.from_flag(flag)
    if ease is None:
        return flag
    return ease.reversed().value


def reverse_animation(definition: PointDefinition) -> PointDefinition:
    """
    Play a definition backwards over [0, 1].

    Every time t becomes 1 - t and the point order is reversed. The input is
    not modified.
    """
    if are_points_simple(definition):
        return copy_points(definition)

    points = [copy_points(p) for p in reversed(definition)]
    easings = []
    for point in points:
        set_point_time(point, 1 - get_point_time(point))
        easings.append(get_point_easing(point))
        set_point_easing(point, None)

    # the last point has no outgoing segment, its easing is dropped
    for i in range(len(points) - 1):
        if easings[i] is not None:
            set_point_easing(points[i + 1], _reverse_easing(easings[i]))

    return points


def mirror_animation(definition: PointDefinition) -> PointDefinition:
    """
    Play a definition forward in [0, 0.5] and backwards in [0.5, 1].

    Definitions that are a single point are returned unchanged.
    """
    points = complexify_points(definition)
    if len(points) == 1:
        return copy_points(definition)

    output = []
    for point in copy_points(points):
        set_point_time(point, get_point_time(point) / 2)
        output.append(point)

    for point in reverse_animation(points):
        set_point_time(point, get_point_time(point) / 2 + 0.5)
        output.append(point)

    return output


@dataclass
class NormalizedAnimation:
    """Points rescaled to [0, 1] and the time span they came from."""
    points: PointDefinition
    min: float
    max: float
    duration: float


def normalize_beats_to_unit(definition: PointDefinition) -> NormalizedAnimation:
    """
    Rescale point times (usually beats) so the earliest is 0 and the latest 1.

    With a zero duration every time becomes 0.
    """
    points = copy_points(complexify_points(definition))
    times = [get_point_time(p) for p in points]
    lo = min(times) if times else 0
    hi = max(times) if times else 0
    duration = hi - lo

    for point in points:
        if duration == 0:
            set_point_time(point, 0)
        else:
            set_point_time(point, (get_point_time(point) - lo) / duration)

    return NormalizedAnimation(simplify_points(points), lo, hi, duration)
