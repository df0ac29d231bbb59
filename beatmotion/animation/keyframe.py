from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from beatmotion.easing import Ease
from beatmotion.animation.points import (
    HSV_LERP_FLAG,
    Spline,
    are_points_runtime,
    complexify_points,
    get_point_easing,
    get_point_hsv_lerp,
    get_point_spline,
    get_point_time,
    get_point_values,
    simplify_points,
)


def _first_token(point: Sequence) -> str:
    for e in point:
        if isinstance(e, str):
            return e
        if isinstance(e, (list, tuple)):
            name = _first_token(e)
            if name:
                return name
    return ""


@dataclass
class RuntimeToken:
    """
    Точка, значение которой вычисляет игра во время исполнения
    (например "baseHeadLocalPosition").

    point хранит исходный список без изменений.
    """
    name: str
    point: list = field(default_factory=list)


@dataclass
class Keyframe:
    """
    Типизированное представление точки анимации.

    values:   компоненты значения (1, 3 или 4 числа)
    time:     время точки
    easing:   сглаживание сегмента, который заканчивается этой точкой
    spline:   сплайн сегмента, который заканчивается этой точкой
    hsv_lerp: интерполировать цвет через HSV
    """
    values: List[float]
    time: float
    easing: Optional[Ease] = None
    spline: Optional[Spline] = None
    hsv_lerp: bool = False

    def __post_init__(self):
        self.values = [float(v) for v in self.values]
        self.time = float(self.time)
        if self.easing is not None and not isinstance(self.easing, Ease):
            self.easing = Ease(self.easing)
        if self.spline is not None and not isinstance(self.spline, Spline):
            self.spline = Spline(self.spline)

    @staticmethod
    def from_point(point: Sequence) -> Union["Keyframe", RuntimeToken]:
        """Разобрать сырую точку [..., time, flags...]."""
        if are_points_runtime([point]):
            return RuntimeToken(name=_first_token(point), point=list(point))

        return Keyframe(
            values=get_point_values(point),
            time=get_point_time(point),
            easing=get_point_easing(point),
            spline=get_point_spline(point),
            hsv_lerp=get_point_hsv_lerp(point),
        )

    def to_point(self) -> list:
        """Сырая точка: [*values, time, easing?, spline?, "lerpHSV"?]."""
        point: list = [*self.values, self.time]
        if self.easing is not None:
            point.append(self.easing.value)
        if self.spline is not None:
            point.append(self.spline.value)
        if self.hsv_lerp:
            point.append(HSV_LERP_FLAG)
        return point


def keyframes_from_points(definition: list) -> List[Union[Keyframe, RuntimeToken]]:
    """Типизированные кадры для любого определения (простого или составного)."""
    return [Keyframe.from_point(p) for p in complexify_points(definition)]


def points_from_keyframes(keyframes: Sequence[Union[Keyframe, RuntimeToken]]) -> list:
    """Обратное преобразование; один кадр во время 0 схлопывается в вектор."""
    points = []
    for keyframe in keyframes:
        if isinstance(keyframe, RuntimeToken):
            points.append(list(keyframe.point))
        else:
            points.append(keyframe.to_point())
    return simplify_points(points)
