"""Schema of animatable properties: arity and interpolation strategy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Union


class InterpolationKind(Enum):
    """How values between two points of a property are blended."""

    LINEAR = auto()      # per component
    ROTATION = auto()    # Euler degrees, quaternion slerp
    COLOR = auto()       # linear, or through HSV for points flagged "lerpHSV"


@dataclass(frozen=True)
class PropertySchema:
    arity: int
    interpolation: InterpolationKind = InterpolationKind.LINEAR


ANIMATION_PROPERTIES: Dict[str, PropertySchema] = {
    "position": PropertySchema(3),
    "localPosition": PropertySchema(3),
    "definitePosition": PropertySchema(3),
    "offsetPosition": PropertySchema(3),
    "scale": PropertySchema(3),
    "rotation": PropertySchema(3, InterpolationKind.ROTATION),
    "localRotation": PropertySchema(3, InterpolationKind.ROTATION),
    "offsetWorldRotation": PropertySchema(3, InterpolationKind.ROTATION),
    "color": PropertySchema(4, InterpolationKind.COLOR),
    "dissolve": PropertySchema(1),
    "dissolveArrow": PropertySchema(1),
    "interactable": PropertySchema(1),
    "time": PropertySchema(1),
}

POSITION_PROPERTIES = frozenset(
    ("position", "localPosition", "definitePosition", "offsetPosition")
)


def resolve_interpolation(prop: Union[str, InterpolationKind]) -> InterpolationKind:
    """Interpolation kind of a property name; unknown names interpolate linearly."""
    if isinstance(prop, InterpolationKind):
        return prop
    schema = ANIMATION_PROPERTIES.get(prop)
    if schema is None:
        return InterpolationKind.LINEAR
    return schema.interpolation
