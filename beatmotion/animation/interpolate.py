"""Evaluate point definitions at arbitrary times."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from beatmotion.color import lerp_hsv
from beatmotion.easing import apply_easing
from beatmotion.util import array_lerp, inverse_lerp, lerp_rotation
from beatmotion.animation.points import (
    Point,
    Spline,
    are_points_runtime,
    are_points_simple,
    get_point_easing,
    get_point_hsv_lerp,
    get_point_spline,
    get_point_time,
    get_point_values,
)
from beatmotion.animation.properties import InterpolationKind, resolve_interpolation


@dataclass
class PointBracket:
    """
    Where a time falls inside a sorted list of points.

    interpolate=False means the time is clamped to `left` (before the first
    or after the last point). Otherwise left.time < time <= right.time and
    normal_time is the eased progress between them.
    """
    interpolate: bool
    left: Optional[Point] = None
    right: Optional[Point] = None
    normal_time: float = 0.0
    left_index: int = 0
    right_index: int = 0


def time_in_points(time: float, points: Sequence[Point]) -> PointBracket:
    """Find the pair of points around `time` by binary search."""
    if len(points) == 0:
        return PointBracket(interpolate=False)

    first = points[0]
    if get_point_time(first) >= time:
        return PointBracket(interpolate=False, left=first)

    last = points[-1]
    if get_point_time(last) <= time:
        return PointBracket(interpolate=False, left=last, left_index=len(points) - 1)

    left_index = 0
    right_index = len(points)
    while left_index < right_index - 1:
        m = (left_index + right_index) // 2
        if get_point_time(points[m]) < time:
            left_index = m
        else:
            right_index = m

    left = points[left_index]
    right = points[right_index]

    normal_time = inverse_lerp(get_point_time(left), get_point_time(right), time)
    easing = get_point_easing(right)
    if easing:
        normal_time = apply_easing(easing, normal_time)

    return PointBracket(
        interpolate=True,
        left=left,
        right=right,
        normal_time=normal_time,
        left_index=left_index,
        right_index=right_index,
    )


def spline_catmull_rom_lerp(bracket: PointBracket, points: Sequence[Point]) -> List[float]:
    """
    Catmull-Rom through the bracketing pair and their neighbours.

    Missing neighbours at either end of the list are replaced by the
    bracketing point itself.
    """
    p1 = get_point_values(bracket.left)
    p2 = get_point_values(bracket.right)

    if bracket.left_index - 1 < 0:
        p0 = p1
    else:
        p0 = get_point_values(points[bracket.left_index - 1])

    if bracket.right_index + 1 > len(points) - 1:
        p3 = p2
    else:
        p3 = get_point_values(points[bracket.right_index + 1])

    t = bracket.normal_time
    tt = t * t
    ttt = tt * t

    q0 = -ttt + 2 * tt - t
    q1 = 3 * ttt - 5 * tt + 2
    q2 = -3 * ttt + 4 * tt + t
    q3 = ttt - tt

    return [
        0.5 * (p0[i] * q0 + p1[i] * q1 + p2[i] * q2 + p3[i] * q3)
        for i in range(len(p1))
    ]


def get_values_at_time(
    prop: Union[str, InterpolationKind],
    definition: list,
    time: float,
) -> List[float]:
    """
    Value of an animated property at `time`.

    Args:
        prop: Property name ("position", "rotation", "color", ...) or an
            InterpolationKind. Decides how values are blended.
        definition: Constant vector or list of points.
        time: Time to sample at. Times outside the points clamp to the
            first/last value.

    Raises:
        ValueError: If the points hold runtime values.
    """
    if are_points_simple(definition):
        return list(definition)

    if are_points_runtime(definition):
        raise ValueError("Runtime points cannot be evaluated numerically")

    points = sorted(definition, key=get_point_time)
    bracket = time_in_points(time, points)

    if not bracket.interpolate:
        return get_point_values(bracket.left)

    left_values = get_point_values(bracket.left)
    right_values = get_point_values(bracket.right)
    kind = resolve_interpolation(prop)

    if kind is InterpolationKind.ROTATION:
        return lerp_rotation(left_values, right_values, bracket.normal_time)
    if kind is InterpolationKind.COLOR and get_point_hsv_lerp(bracket.right):
        return lerp_hsv(left_values, right_values, bracket.normal_time)
    if get_point_spline(bracket.right) == Spline.CATMULL_ROM.value:
        return spline_catmull_rom_lerp(bracket, points)
    return array_lerp(left_values, right_values, bracket.normal_time)
