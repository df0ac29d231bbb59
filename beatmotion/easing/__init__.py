"""
Easing module - named easing curves used by animation point flags.

Usage:
    from beatmotion.easing import Ease, apply_easing

    apply_easing("easeOutQuad", 0.5)
    apply_easing(Ease.IN_OUT_BOUNCE, 0.25)
    Ease.IN_CUBIC.reversed()  # Ease.OUT_CUBIC
"""

from beatmotion.easing.ease import Ease, apply_easing, evaluate

__all__ = [
    "Ease",
    "apply_easing",
    "evaluate",
]
