"""
Keyframe optimizer.

Removes redundant points from dense point lists (typically baked ones).
Each heuristic looks at two or three consecutive points and may nominate
one of them for removal. Nominated points are dropped after every pass.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy

from beatmotion import log
from beatmotion.animation.points import (
    PointDefinition,
    are_points_runtime,
    complexify_points,
    copy_points,
    get_point_time_index,
    simplify_points,
)
from beatmotion.animation.settings import (
    OptimizeSettings,
    OptimizeSimilarPointsSettings,
    OptimizeSimilarPointsSlopeSettings,
)


@dataclass(eq=False)
class PointInfo:
    """Parsed point. Compared by identity."""

    values: numpy.ndarray
    time: float
    has_flags: bool
    original: list

    @staticmethod
    def from_point(point: list) -> "PointInfo":
        time_index = get_point_time_index(point)
        return PointInfo(
            values=numpy.asarray(point[:time_index], dtype=float),
            time=point[time_index],
            has_flags=len(point) > time_index + 1,
            original=point,
        )


Optimizer = Callable[[PointInfo, PointInfo, Optional[PointInfo]], Optional[PointInfo]]


def _check_lengths(a: numpy.ndarray, b: numpy.ndarray) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"Arrays are not matching lengths. First: {len(a)} Second: {len(b)}"
        )


def _identical(a: numpy.ndarray, b: numpy.ndarray) -> bool:
    return len(a) == len(b) and bool(numpy.all(a == b))


def _similar(a: numpy.ndarray, b: numpy.ndarray, threshold: float) -> bool:
    """True if every component differs by less than threshold."""
    _check_lengths(a, b)
    return bool(numpy.all(numpy.abs(a - b) < threshold))


def _points_similar(a: PointInfo, b: PointInfo,
                    difference_threshold: float, time_difference_threshold: float) -> bool:
    return (_similar(a.values, b.values, difference_threshold)
            and abs(a.time - b.time) <= time_difference_threshold)


def _slopes(a: PointInfo, b: PointInfo) -> numpy.ndarray:
    """Per component dtime/dvalue from a to b, 0 where undefined."""
    _check_lengths(a.values, b.values)
    time_diff = b.time - a.time
    value_diff = b.values - a.values
    slopes = numpy.zeros(len(value_diff))
    if time_diff != 0:
        moving = value_diff != 0
        slopes[moving] = time_diff / value_diff[moving]
    return slopes


def _y_intercepts(point: PointInfo, slopes: numpy.ndarray) -> numpy.ndarray:
    return point.time - slopes * point.values


def optimize_duplicates(a: PointInfo, b: PointInfo, c: Optional[PointInfo]) -> Optional[PointInfo]:
    """
    Remove points repeating the same values, whatever their times.

    Flags are not looked at: points with different easings still collapse.
    """
    if c is None:
        return a if _identical(a.values, b.values) else None

    if _identical(a.values, b.values) and _identical(b.values, c.values):
        return b
    return None


def optimize_similar_points(
    a: PointInfo,
    b: PointInfo,
    c: Optional[PointInfo],
    settings: OptimizeSimilarPointsSettings,
) -> Optional[PointInfo]:
    """Remove points that are close both in value and in time."""
    if a.has_flags or b.has_flags or (c is not None and c.has_flags):
        return None

    diff = settings.difference_threshold
    time_diff = settings.time_difference_threshold

    if c is None:
        return a if _points_similar(a, b, diff, time_diff) else None

    if _points_similar(a, b, diff, time_diff) and _points_similar(b, c, diff, time_diff):
        return b
    return None


def optimize_similar_points_slope(
    a: PointInfo,
    b: PointInfo,
    c: Optional[PointInfo],
    settings: OptimizeSimilarPointsSlopeSettings,
) -> Optional[PointInfo]:
    """
    Remove the middle point if it lies on the line from a to c.

    Slopes are taken with time as the dependent axis. Components that stay
    constant over the three points have no slope and are not compared.
    """
    if c is None:
        return None

    if a.has_flags or b.has_flags or c.has_flags:
        return None

    time_threshold = settings.time_difference_threshold
    if (abs(a.time - c.time) <= time_threshold
            or abs(a.time - b.time) <= time_threshold
            or abs(b.time - c.time) <= time_threshold):
        return None

    # pause: same values held over a long time
    if (abs(c.time - b.time) > settings.difference_threshold
            and _similar(c.values, b.values, settings.difference_threshold)):
        return None

    middle_slopes = _slopes(a, b)
    end_slopes = _slopes(a, c)
    middle_intercepts = _y_intercepts(b, middle_slopes)
    end_intercepts = _y_intercepts(c, end_slopes)

    varying = ~((a.values == b.values) & (b.values == c.values))

    if (_similar(middle_intercepts[varying], end_intercepts[varying],
                 settings.y_intercept_difference_threshold)
            and _similar(middle_slopes[varying], end_slopes[varying],
                         settings.difference_threshold)):
        return b
    return None


def _active_optimizers(settings: OptimizeSettings) -> List[Optimizer]:
    optimizers: List[Optimizer] = list(settings.additional_optimizers)
    if settings.optimize_duplicates:
        optimizers.append(optimize_duplicates)
    if settings.optimize_similar_points.active:
        optimizers.append(functools.partial(
            optimize_similar_points, settings=settings.optimize_similar_points))
    if settings.optimize_similar_points_slope.active:
        optimizers.append(functools.partial(
            optimize_similar_points_slope, settings=settings.optimize_similar_points_slope))
    return optimizers


def _optimize_pass(infos: List[PointInfo], optimizers: List[Optimizer]) -> List[PointInfo]:
    nominated = []

    if len(infos) == 2:
        for optimizer in optimizers:
            nominated.append(optimizer(infos[0], infos[1], None))

    for i in range(1, len(infos) - 1):
        a, b, c = infos[i - 1], infos[i], infos[i + 1]
        for optimizer in optimizers:
            nominated.append(optimizer(a, b, c))

    removed = {id(info) for info in nominated if info is not None}
    return [info for info in infos if id(info) not in removed]


def optimize_points(definition: PointDefinition,
                    settings: Optional[OptimizeSettings] = None) -> PointDefinition:
    """
    Remove unnecessary points from a point definition.

    The input is not modified. Definitions with one or two points are only
    normalized. Runtime points are returned as they are.

    Returns:
        Optimized copy, collapsed to a bare value when a single point at
        time 0 remains.
    """
    if settings is None:
        settings = OptimizeSettings()

    points = complexify_points(definition)

    if len(points) == 1:
        return copy_points(definition)

    if len(points) <= 2 or settings.disabled or are_points_runtime(points):
        return copy_points(points)

    infos = sorted((PointInfo.from_point(p) for p in points), key=lambda info: info.time)
    optimizers = _active_optimizers(settings)

    if settings.performance_log:
        log.info(f"[Optimizer] Optimizing {len(points)} points")

    for _ in range(settings.passes):
        infos = _optimize_pass(infos, optimizers)

    if settings.performance_log:
        percent = len(infos) / len(points) * 100
        log.info(f"[Optimizer] Optimized to {len(infos)} ({percent:.1f}%) points")

    return simplify_points([copy_points(info.original) for info in infos])
