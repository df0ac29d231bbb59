from .points import (
    HSV_LERP_FLAG,
    Spline,
    are_points_runtime,
    are_points_simple,
    complexify_points,
    copy_points,
    get_point_easing,
    get_point_flag_index,
    get_point_hsv_lerp,
    get_point_spline,
    get_point_time,
    get_point_time_index,
    get_point_values,
    iterate_points,
    set_point_easing,
    set_point_flag,
    set_point_hsv_lerp,
    set_point_spline,
    set_point_time,
    set_point_values,
    simplify_points,
)
from .keyframe import Keyframe, RuntimeToken, keyframes_from_points, points_from_keyframes
from .properties import ANIMATION_PROPERTIES, InterpolationKind, PropertySchema, resolve_interpolation
from .interpolate import PointBracket, get_values_at_time, spline_catmull_rom_lerp, time_in_points
from .domain import AnimationDomain, get_animated_object_domain, get_animation_domain
from .settings import (
    AnimationSettings,
    OptimizeSettings,
    OptimizeSimilarPointsSettings,
    OptimizeSimilarPointsSlopeSettings,
    load_animation_settings,
    save_animation_settings,
)
from .optimizer import (
    PointInfo,
    optimize_duplicates,
    optimize_points,
    optimize_similar_points,
    optimize_similar_points_slope,
)
from .bake import TransformSample, bake_animation
from .time_warp import NormalizedAnimation, mirror_animation, normalize_beats_to_unit, reverse_animation
from .combine import combine_animations

__all__ = [
    "HSV_LERP_FLAG",
    "Spline",
    "are_points_runtime",
    "are_points_simple",
    "complexify_points",
    "copy_points",
    "get_point_easing",
    "get_point_flag_index",
    "get_point_hsv_lerp",
    "get_point_spline",
    "get_point_time",
    "get_point_time_index",
    "get_point_values",
    "iterate_points",
    "set_point_easing",
    "set_point_flag",
    "set_point_hsv_lerp",
    "set_point_spline",
    "set_point_time",
    "set_point_values",
    "simplify_points",
    "Keyframe",
    "RuntimeToken",
    "keyframes_from_points",
    "points_from_keyframes",
    "ANIMATION_PROPERTIES",
    "InterpolationKind",
    "PropertySchema",
    "resolve_interpolation",
    "PointBracket",
    "get_values_at_time",
    "spline_catmull_rom_lerp",
    "time_in_points",
    "AnimationDomain",
    "get_animated_object_domain",
    "get_animation_domain",
    "AnimationSettings",
    "OptimizeSettings",
    "OptimizeSimilarPointsSettings",
    "OptimizeSimilarPointsSlopeSettings",
    "load_animation_settings",
    "save_animation_settings",
    "PointInfo",
    "optimize_duplicates",
    "optimize_points",
    "optimize_similar_points",
    "optimize_similar_points_slope",
    "TransformSample",
    "bake_animation",
    "NormalizedAnimation",
    "mirror_animation",
    "normalize_beats_to_unit",
    "reverse_animation",
    "combine_animations",
]
