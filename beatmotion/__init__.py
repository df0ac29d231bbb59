"""
beatmotion - ядро анимации ключевых кадров для редактора битмапов.

Основные модули:
- animation - кодирование точек, интерполяция, оптимизатор, запекание,
  обращение времени
- easing - функции сглаживания
- geombase - поза с масштабом (Pose)
- kinematic - композиция трансформов, эмуляция родителя
- log - логирование
"""

from .animation import (
    AnimationSettings,
    OptimizeSettings,
    bake_animation,
    get_values_at_time,
    mirror_animation,
    optimize_points,
    reverse_animation,
)
from .easing import Ease
from .kinematic import combine_transforms, emulate_parent

__version__ = '0.1.0'

__all__ = [
    # Animation
    'AnimationSettings',
    'OptimizeSettings',
    'bake_animation',
    'get_values_at_time',
    'mirror_animation',
    'optimize_points',
    'reverse_animation',
    # Easing
    'Ease',
    # Kinematic
    'combine_transforms',
    'emulate_parent',
]
