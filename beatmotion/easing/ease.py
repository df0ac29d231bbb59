"""Функции сглаживания (easing) для ключевых кадров.

Имя функции сглаживания хранится во флаге точки анимации ("easeInQuad",
"easeOutBounce", ...) и применяется к нормализованному прогрессу сегмента,
который заканчивается этой точкой.

Все функции принимают t в диапазоне [0, 1] и возвращают значение в том же
диапазоне (за исключением Back и Elastic, которые могут выходить за пределы).

Терминология:
- In (вход): медленное начало, ускорение к концу
- Out (выход): быстрое начало, замедление к концу
- InOut: медленное начало и конец, быстрая середина

Out и InOut варианты выводятся из In-функции:
    out(t)    = 1 - in(1 - t)
    in_out(t) = in(2t) / 2              при t < 0.5
              = 1 - in(2 - 2t) / 2      иначе
Исключения — InOutBack и InOutElastic, у которых свои константы.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Optional, Union


class Ease(Enum):
    """
    Имена функций сглаживания в том виде, в каком они записываются во флаги.

    Семейства: Quad, Cubic, Quart, Quint (степенные), Sine, Expo, Circ,
    Back (отскок назад), Elastic (пружина), Bounce (мячик).
    """

    LINEAR = "easeLinear"
    STEP = "easeStep"

    IN_QUAD = "easeInQuad"
    OUT_QUAD = "easeOutQuad"
    IN_OUT_QUAD = "easeInOutQuad"

    IN_CUBIC = "easeInCubic"
    OUT_CUBIC = "easeOutCubic"
    IN_OUT_CUBIC = "easeInOutCubic"

    IN_QUART = "easeInQuart"
    OUT_QUART = "easeOutQuart"
    IN_OUT_QUART = "easeInOutQuart"

    IN_QUINT = "easeInQuint"
    OUT_QUINT = "easeOutQuint"
    IN_OUT_QUINT = "easeInOutQuint"

    IN_SINE = "easeInSine"
    OUT_SINE = "easeOutSine"
    IN_OUT_SINE = "easeInOutSine"

    IN_EXPO = "easeInExpo"
    OUT_EXPO = "easeOutExpo"
    IN_OUT_EXPO = "easeInOutExpo"

    IN_CIRC = "easeInCirc"
    OUT_CIRC = "easeOutCirc"
    IN_OUT_CIRC = "easeInOutCirc"

    IN_BACK = "easeInBack"
    OUT_BACK = "easeOutBack"
    IN_OUT_BACK = "easeInOutBack"

    IN_ELASTIC = "easeInElastic"
    OUT_ELASTIC = "easeOutElastic"
    IN_OUT_ELASTIC = "easeInOutElastic"

    IN_BOUNCE = "easeInBounce"
    OUT_BOUNCE = "easeOutBounce"
    IN_OUT_BOUNCE = "easeInOutBounce"

    @classmethod
    def from_flag(cls, flag: Union[str, "Ease", None]) -> Optional["Ease"]:
        """Ease по флагу точки; None для отсутствующего или неизвестного флага."""
        if flag is None or isinstance(flag, Ease):
            return flag
        try:
            return cls(flag)
        except ValueError:
            return None

    @property
    def is_in_out(self) -> bool:
        return self.name.startswith("IN_OUT_")

    def reversed(self) -> "Ease":
        """
        Сглаживание для того же сегмента, проигранного в обратном времени.

        In <-> Out, InOut, Linear и Step не меняются.
        """
        if self.is_in_out:
            return self
        if self.name.startswith("IN_"):
            return Ease["OUT_" + self.name[3:]]
        if self.name.startswith("OUT_"):
            return Ease["IN_" + self.name[4:]]
        return self


# ============================================================================
# In-функции семейств
# ============================================================================


def in_quad(t: float) -> float:
    return t * t


def in_cubic(t: float) -> float:
    return t * t * t


def in_quart(t: float) -> float:
    return t ** 4


def in_quint(t: float) -> float:
    return t ** 5


def in_sine(t: float) -> float:
    """Самое мягкое сглаживание."""
    return 1 - math.cos(t * math.pi / 2)


def in_expo(t: float) -> float:
    """Очень медленный старт, резкое ускорение."""
    return 0 if t == 0 else 2 ** (10 * t - 10)


def in_circ(t: float) -> float:
    """Движение по дуге окружности."""
    return 1 - math.sqrt(1 - t * t)


_BACK_C1 = 1.70158


def in_back(t: float) -> float:
    """Отходит назад перед движением вперёд."""
    c3 = _BACK_C1 + 1
    return c3 * t * t * t - _BACK_C1 * t * t


def in_elastic(t: float) -> float:
    """Колебания в начале движения."""
    if t == 0:
        return 0
    if t == 1:
        return 1
    c4 = (2 * math.pi) / 3
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * c4)


def out_bounce(t: float) -> float:
    """Отскоки на выходе: как падающий мячик."""
    n1 = 7.5625
    d1 = 2.75
    if t < 1 / d1:
        return n1 * t * t
    elif t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    else:
        t -= 2.625 / d1
        return n1 * t * t + 0.984375


def in_bounce(t: float) -> float:
    return 1 - out_bounce(1 - t)


def in_out_back(t: float) -> float:
    c2 = _BACK_C1 * 1.525
    if t < 0.5:
        return ((2 * t) ** 2 * ((c2 + 1) * 2 * t - c2)) / 2
    return ((2 * t - 2) ** 2 * ((c2 + 1) * (t * 2 - 2) + c2) + 2) / 2


def in_out_elastic(t: float) -> float:
    if t == 0:
        return 0
    if t == 1:
        return 1
    c5 = (2 * math.pi) / 4.5
    if t < 0.5:
        return -(2 ** (20 * t - 10) * math.sin((20 * t - 11.125) * c5)) / 2
    return (2 ** (-20 * t + 10) * math.sin((20 * t - 11.125) * c5)) / 2 + 1


def make_out(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Out-вариант из In-функции."""
    def out(t: float) -> float:
        return 1 - fn(1 - t)
    return out


def make_in_out(fn: Callable[[float], float]) -> Callable[[float], float]:
    """InOut-вариант из In-функции."""
    def in_out(t: float) -> float:
        if t < 0.5:
            return fn(2 * t) / 2
        return 1 - fn(2 - 2 * t) / 2
    return in_out


# ============================================================================
# Маппинг Ease -> функция
# ============================================================================

_IN_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "QUAD": in_quad,
    "CUBIC": in_cubic,
    "QUART": in_quart,
    "QUINT": in_quint,
    "SINE": in_sine,
    "EXPO": in_expo,
    "CIRC": in_circ,
    "BACK": in_back,
    "ELASTIC": in_elastic,
    "BOUNCE": in_bounce,
}

_EASE_FUNCTIONS: dict[Ease, Callable[[float], float]] = {}
for _family, _fn in _IN_FUNCTIONS.items():
    _EASE_FUNCTIONS[Ease["IN_" + _family]] = _fn
    _EASE_FUNCTIONS[Ease["OUT_" + _family]] = make_out(_fn)
    _EASE_FUNCTIONS[Ease["IN_OUT_" + _family]] = make_in_out(_fn)

_EASE_FUNCTIONS[Ease.OUT_BOUNCE] = out_bounce
_EASE_FUNCTIONS[Ease.IN_OUT_BACK] = in_out_back
_EASE_FUNCTIONS[Ease.IN_OUT_ELASTIC] = in_out_elastic


def evaluate(ease: Ease, t: float) -> float:
    """Вычислить значение функции сглаживания в момент времени t (0..1)."""
    if ease is Ease.LINEAR:
        return t
    if ease is Ease.STEP:
        return 1 if t == 1 else 0
    return _EASE_FUNCTIONS[ease](t)


def apply_easing(easing: Union[Ease, str, None], value: float) -> float:
    """
    Пропустить прогресс сегмента через сглаживание.

    easing может быть Ease, именем из флага точки или None (без сглаживания).
    Неизвестное имя — ValueError.
    """
    if easing is None:
        return value
    if not isinstance(easing, Ease):
        easing = Ease(easing)
    return evaluate(easing, value)
