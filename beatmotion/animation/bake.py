from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from beatmotion.util import EPSILON, ceil_to, floor_to
from beatmotion.animation.domain import AnimationDomain, get_animated_object_domain
from beatmotion.animation.interpolate import get_values_at_time
from beatmotion.animation.optimizer import optimize_points
from beatmotion.animation.settings import AnimationSettings


@dataclass
class TransformSample:
    """
    Один отсчёт запекаемой анимации.

    Колбэк bake_animation может менять поля на месте, например
    домножать трансформ родителя.
    """
    position: List[float]
    rotation: List[float]
    scale: List[float]
    time: float


def bake_animation(
    animation: Mapping,
    for_sample: Optional[Callable[[TransformSample], None]] = None,
    settings: Optional[AnimationSettings] = None,
    domain: Optional[AnimationDomain] = None,
) -> Dict[str, list]:
    """
    Sample an animated transform into dense points and optimize them.

    Args:
        animation: Mapping with optional "position", "rotation" and "scale"
            point definitions.
        for_sample: Called with every TransformSample before it is stored.
        settings: Sample frequency and optimizer settings.
        domain: Time span to sample. Computed from the animation when None.

    Returns:
        {"position": ..., "rotation": ..., "scale": ...}
    """
    if settings is None:
        settings = AnimationSettings()

    position = animation.get("position") or [0, 0, 0]
    rotation = animation.get("rotation") or [0, 0, 0]
    scale = animation.get("scale") or [1, 1, 1]

    if domain is None:
        domain = get_animated_object_domain(animation)

    step = 1 / (settings.bake_sample_frequency - 1)
    start = floor_to(domain.min, step)
    end = ceil_to(domain.max, step)

    data = {"position": [], "rotation": [], "scale": []}

    k = 0
    time = start
    while time <= end + EPSILON:
        sample = TransformSample(
            position=get_values_at_time("position", position, time),
            rotation=get_values_at_time("rotation", rotation, time),
            scale=get_values_at_time("scale", scale, time),
            time=time,
        )
        if for_sample is not None:
            for_sample(sample)

        data["position"].append([*sample.position, sample.time])
        data["rotation"].append([*sample.rotation, sample.time])
        data["scale"].append([*sample.scale, sample.time])

        k += 1
        time = start + k * step

    return {
        key: optimize_points(points, settings.optimize_settings)
        for key, points in data.items()
    }
