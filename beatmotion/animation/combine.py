from __future__ import annotations

import math

from beatmotion.animation.points import (
    PointDefinition,
    are_points_simple,
    complexify_points,
    copy_points,
    get_point_time_index,
    simplify_points,
)
from beatmotion.animation.properties import (
    ANIMATION_PROPERTIES,
    InterpolationKind,
    POSITION_PROPERTIES,
)


def _combine_value(prop: str, value: float, offset: float) -> float:
    if prop in POSITION_PROPERTIES:
        return value + offset
    schema = ANIMATION_PROPERTIES.get(prop)
    if schema is not None and schema.interpolation is InterpolationKind.ROTATION:
        return math.fmod(value + offset, 360)
    if prop == "scale":
        return value * offset
    return value


def combine_animations(anim1: PointDefinition, anim2: PointDefinition, prop: str) -> PointDefinition:
    """
    Apply a constant value to every point of another definition.

    Positions add, rotations add modulo 360 (keeping the sign) and scales
    multiply. Other properties are left as they are.

    Raises:
        ValueError: If neither definition is a constant.
    """
    if are_points_simple(anim1):
        constant, animated = anim1, anim2
    elif are_points_simple(anim2):
        constant, animated = anim2, anim1
    else:
        raise ValueError(f"[{anim1}] and [{anim2}] are unable to combine")

    points = copy_points(complexify_points(animated))
    for point in points:
        count = min(len(constant), get_point_time_index(point))
        for i in range(count):
            point[i] = _combine_value(prop, point[i], constant[i])

    return simplify_points(points)
