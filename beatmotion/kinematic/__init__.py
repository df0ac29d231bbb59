from .transform import (
    apply_anchor,
    combine_rotations,
    combine_transforms,
    look_at,
    rotate_point,
)
from .parent import Complexity, emulate_parent

__all__ = [
    "apply_anchor",
    "combine_rotations",
    "combine_transforms",
    "look_at",
    "rotate_point",
    "Complexity",
    "emulate_parent",
]
