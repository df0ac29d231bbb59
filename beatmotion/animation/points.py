"""
Point encoding used by animated beatmap properties.

A point (keyframe) is a flat list ``[v0, ..., vN, time, flag?, flag?, flag?]``.
Time is the right-most element that is not a string; flags trailing it are
easing names ("easeInQuad"), the spline name ("splineCatmullRom") or
"lerpHSV".

A point definition is either a bare vector ``[x, y, z]`` (constant value,
"simple") or a list of points (``[[x, y, z, t], ...]``, "complex").

Runtime points carry a string token (e.g. "baseHeadLocalPosition") or a
nested runtime expression instead of numbers; the game resolves them, so
they never take part in numeric evaluation here.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Union

Point = List[Any]
PointDefinition = List[Any]

HSV_LERP_FLAG = "lerpHSV"


class Spline(Enum):
    """Spline interpolation flags."""

    CATMULL_ROM = "splineCatmullRom"


# --- Complexity ---

def are_points_simple(definition: Sequence) -> bool:
    """
    True if definition is a bare value and not a list of points.

    An empty list is not simple: it is an (empty) list of points.
    """
    if len(definition) == 0:
        return False
    return not isinstance(definition[0], (list, tuple))


def complexify_points(definition: PointDefinition) -> List[Point]:
    """
    Ensure definition is a list of points.

    [x, y, z] becomes [[x, y, z, 0]]; lists of points are returned as-is.
    """
    if not are_points_simple(definition):
        return definition
    return [[*definition, 0]]


def simplify_points(points: List[Point]) -> PointDefinition:
    """
    Collapse a single point at time 0 to a bare value.

    [[x, y, z, 0]] becomes [x, y, z]. Any other definition is returned
    unchanged, including a single point at a non-zero time.
    """
    if len(points) == 1 and not are_points_simple(points):
        point = points[0]
        time_index = get_point_time_index(point)
        if point[time_index] == 0:
            return list(point[:time_index])
    return points


def are_points_runtime(definition: Any) -> bool:
    """
    True if the definition holds values only known at runtime.

    Recognizes a token anywhere in a bare definition
    (["baseHeadLocalPosition"], [[0, 1, 0], "baseHeadLocalPosition", "opAdd"]),
    a token inside a point ([["baseHeadLocalPosition", 0]]) and nested
    expression terms ([[0, 0, 0, ["baseHeadLocalPosition"], "opAdd", 0]]).
    """
    if isinstance(definition, str):
        return False

    if any(isinstance(e, str) for e in definition):
        return True

    for inner in definition:
        if isinstance(inner, (list, tuple)):
            if len(inner) > 0 and isinstance(inner[0], str):
                return True
            if any(isinstance(e, (list, tuple)) for e in inner):
                return True
    return False


def copy_points(definition: PointDefinition) -> PointDefinition:
    """Deep copy of a point definition."""
    return copy.deepcopy(definition)


def iterate_points(points: PointDefinition, fn: Callable[[Point, int], None]) -> None:
    """
    Run fn(point, index) on every point of a definition, in place.

    Simple definitions are visited as a single point at time 0 and written
    back in simple form when they still collapse.
    """
    complex_points = complexify_points(points)
    for i, point in enumerate(complex_points):
        fn(point, i)
    result = simplify_points(complex_points)
    points[:] = list(result)


# --- Getters ---

def get_point_time_index(point: Sequence) -> int:
    """Index of the time value of a point, -1 if the point has none."""
    for i in range(len(point) - 1, -1, -1):
        if not isinstance(point[i], str):
            return i
    return -1


def get_point_time(point: Sequence) -> float:
    return point[get_point_time_index(point)]


def get_point_values(point: Sequence) -> list:
    """Values of a point: [x, y, z, time] gives [x, y, z]."""
    return list(point[:get_point_time_index(point)])


def get_point_flag_index(point: Sequence, flag: str, exact: bool = True) -> int:
    """
    Index of the last flag matching `flag`, -1 if absent.

    With exact=False any flag containing `flag` matches, so "ease" finds
    every easing name.
    """
    for i in range(len(point) - 1, -1, -1):
        element = point[i]
        if not isinstance(element, str):
            continue
        if exact and element == flag:
            return i
        if not exact and flag in element:
            return i
    return -1


def _get_flag(point: Sequence, flag: str, exact: bool) -> Optional[str]:
    index = get_point_flag_index(point, flag, exact)
    return None if index == -1 else point[index]


def get_point_easing(point: Sequence) -> Optional[str]:
    """Easing flag of a point, None if not eased."""
    return _get_flag(point, "ease", False)


def get_point_spline(point: Sequence) -> Optional[str]:
    """Spline flag of a point, None if absent."""
    return _get_flag(point, "spline", False)


def get_point_hsv_lerp(point: Sequence) -> bool:
    return get_point_flag_index(point, HSV_LERP_FLAG) != -1


# --- Setters ---

def set_point_time(point: Point, value: float) -> float:
    point[get_point_time_index(point)] = value
    return value


def set_point_values(point: Point, values: Sequence[float]) -> None:
    """Overwrite the values of a point in place, up to its time index."""
    for i in range(get_point_time_index(point)):
        point[i] = values[i]


def set_point_easing(point: Point, value: Union[str, Enum, None]) -> None:
    """Set or replace the easing flag; None removes it."""
    set_point_flag(point, _flag_value(value), "ease")


def set_point_spline(point: Point, value: Union[str, Spline, None]) -> None:
    """Set or replace the spline flag; None removes it."""
    set_point_flag(point, _flag_value(value), "spline")


def set_point_hsv_lerp(point: Point, has_hsv_lerp: bool) -> None:
    set_point_flag(point, HSV_LERP_FLAG if has_hsv_lerp else None, HSV_LERP_FLAG, True)


def set_point_flag(
    point: Point,
    value: Optional[str],
    old: Optional[str] = None,
    exact: Optional[bool] = None,
) -> None:
    """
    Set, replace or remove a flag.

    The slot is looked up by `old` (or by `value` when old is not given),
    matched exactly or by containment. A missing slot is appended. A None
    value deletes the slot, shifting later elements left.
    """
    if exact is None:
        exact = old is None

    if not old and not value:
        raise ValueError(
            'Old value cannot be inferred when both "old" and "value" are undefined.'
        )

    index = get_point_flag_index(point, old if old else value, exact)
    if index == -1:
        index = len(point)

    if not value:
        if index < len(point):
            del point[index]
    elif index == len(point):
        point.append(value)
    else:
        point[index] = value


def _flag_value(value):
    if isinstance(value, Enum):
        return value.value
    return value
