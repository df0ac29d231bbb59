"""Colour helpers used by HSV-aware colour interpolation.

Colours are lists [r, g, b] or [r, g, b, a]. Components may exceed 1
(HDR/boosted colours) and are passed through unchanged otherwise.
"""

from __future__ import annotations

import colorsys
from typing import Sequence

from beatmotion.util import lerp, positive_mod


def rgb_to_hsv(color: Sequence[float]) -> list:
    """Convert [r, g, b(, a)] to [h, s, v(, a)], hue in 0..1."""
    h, s, v = colorsys.rgb_to_hsv(color[0], color[1], color[2])
    output = [h, s, v]
    if len(color) > 3:
        output.append(color[3])
    return output


def hsv_to_rgb(color: Sequence[float]) -> list:
    """Convert [h, s, v(, a)] to [r, g, b(, a)]. Hue wraps around 1."""
    r, g, b = colorsys.hsv_to_rgb(positive_mod(color[0], 1), color[1], color[2])
    output = [r, g, b]
    if len(color) > 3:
        output.append(color[3])
    return output


def lerp_wrap(start: float, end: float, fraction: float) -> float:
    """Interpolate a value living on the 0..1 circle along the shortest path."""
    distance = abs(end - start)
    if distance <= 0.5:
        return lerp(start, end, fraction)

    if end > start:
        start += 1
    else:
        start -= 1
    result = lerp(start, end, fraction)
    if result < 0:
        result = 1 + result
    return result % 1


def lerp_hsv(start: Sequence[float], end: Sequence[float], fraction: float) -> list:
    """
    Interpolate two RGB(A) colours through HSV space.

    Hue takes the shortest way around the colour wheel, saturation, value
    and alpha are interpolated linearly. Returns RGB(A).
    """
    start = list(start)
    end = list(end)
    if len(start) != len(end):
        if len(start) < 4:
            start.append(1)
        if len(end) < 4:
            end.append(1)

    hsv_start = rgb_to_hsv(start)
    hsv_end = rgb_to_hsv(end)

    output = [
        lerp_wrap(hsv_start[0], hsv_end[0], fraction),
        lerp(hsv_start[1], hsv_end[1], fraction),
        lerp(hsv_start[2], hsv_end[2], fraction),
    ]
    if len(hsv_start) > 3:
        output.append(lerp(hsv_start[3], hsv_end[3], fraction))

    return hsv_to_rgb(output)
