"""
Базовые геометрические классы.

- Pose - поза с масштабом (кватернион + смещение + масштаб), 4x4 TRS матрицы
"""

from .pose import Pose

__all__ = [
    'Pose',
]
