"""
Emulation of a parent transform on an animated child.

Cheap cases are handled without sampling:
- both sides static: one matrix composition;
- parent only translates by a constant: offset every child position point;
- child position is constant and the parent only translates: offset every
  parent position point.
Everything else is baked, composing the parent at every sample.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping, Optional, Sequence

from beatmotion.animation.bake import TransformSample, bake_animation
from beatmotion.animation.domain import get_animated_object_domain
from beatmotion.animation.interpolate import get_values_at_time
from beatmotion.animation.points import are_points_simple, copy_points, iterate_points
from beatmotion.animation.settings import AnimationSettings
from beatmotion.kinematic.transform import combine_transforms

_DEFAULTS = {
    "position": [0, 0, 0],
    "rotation": [0, 0, 0],
    "scale": [1, 1, 1],
}


class Complexity(IntEnum):
    DEFAULT = 0     # constant equal to the default value
    SIMPLE = 1      # constant
    ANIMATED = 2    # list of points


def get_complexity(definition, default: Sequence[float]) -> Complexity:
    if not are_points_simple(definition):
        return Complexity.ANIMATED
    if list(definition) == list(default):
        return Complexity.DEFAULT
    return Complexity.SIMPLE


def _full_transform(animation: Mapping) -> dict:
    return {key: animation.get(key) or default for key, default in _DEFAULTS.items()}


def _add_offset(definition, offset: Sequence[float]):
    result = copy_points(definition)

    def shift(point, _):
        for i in range(3):
            point[i] += offset[i]

    iterate_points(result, shift)
    return result


def emulate_parent(
    child: Mapping,
    parent: Mapping,
    anchor: Sequence[float] = (0, 0, 0),
    settings: Optional[AnimationSettings] = None,
) -> dict:
    """
    Child transform with the parent transform applied.

    Returns:
        {"position": ..., "rotation": ..., "scale": ...} with point
        definitions (constants when nothing is animated).
    """
    if settings is None:
        settings = AnimationSettings()

    child_obj = _full_transform(child)
    parent_obj = _full_transform(parent)

    child_cx = {key: get_complexity(child_obj[key], d) for key, d in _DEFAULTS.items()}
    parent_cx = {key: get_complexity(parent_obj[key], d) for key, d in _DEFAULTS.items()}

    if all(c <= Complexity.SIMPLE for c in [*child_cx.values(), *parent_cx.values()]):
        return combine_transforms(child_obj, parent_obj, anchor)

    parent_translates_only = (parent_cx["rotation"] == Complexity.DEFAULT
                              and parent_cx["scale"] == Complexity.DEFAULT)

    if (parent_translates_only
            and child_cx["position"] >= Complexity.SIMPLE
            and parent_cx["position"] <= Complexity.SIMPLE):
        return {
            "position": _add_offset(child_obj["position"], parent_obj["position"]),
            "rotation": copy_points(child_obj["rotation"]),
            "scale": copy_points(child_obj["scale"]),
        }

    if (parent_translates_only
            and child_cx["position"] <= Complexity.SIMPLE
            and parent_cx["position"] >= Complexity.SIMPLE):
        return {
            "position": _add_offset(parent_obj["position"], child_obj["position"]),
            "rotation": copy_points(child_obj["rotation"]),
            "scale": copy_points(child_obj["scale"]),
        }

    domain = get_animated_object_domain(child_obj).union(get_animated_object_domain(parent_obj))

    def apply_parent(sample: TransformSample):
        parent_transform = {
            key: get_values_at_time(key, parent_obj[key], sample.time)
            for key in _DEFAULTS
        }
        combined = combine_transforms(
            {"position": sample.position, "rotation": sample.rotation, "scale": sample.scale},
            parent_transform,
            anchor,
        )
        sample.position = combined["position"]
        sample.rotation = combined["rotation"]
        sample.scale = combined["scale"]

    return bake_animation(child_obj, apply_parent, settings, domain)
