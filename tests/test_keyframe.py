"""Tests for the typed keyframe view over raw points."""

import pytest

from beatmotion.animation.keyframe import (
    Keyframe,
    RuntimeToken,
    keyframes_from_points,
    points_from_keyframes,
)
from beatmotion.animation.points import Spline
from beatmotion.easing import Ease


class TestKeyframe:
    def test_from_point(self):
        keyframe = Keyframe.from_point([1, 2, 3, 0.5, "easeInQuad", "splineCatmullRom"])
        assert keyframe.values == [1, 2, 3]
        assert keyframe.time == 0.5
        assert keyframe.easing is Ease.IN_QUAD
        assert keyframe.spline is Spline.CATMULL_ROM
        assert not keyframe.hsv_lerp

    def test_to_point(self):
        keyframe = Keyframe([1, 0, 0, 1], 0.25, easing="easeOutBounce", hsv_lerp=True)
        assert keyframe.to_point() == [1, 0, 0, 1, 0.25, "easeOutBounce", "lerpHSV"]

    def test_unknown_easing(self):
        with pytest.raises(ValueError):
            Keyframe([0], 0, easing="easeSideways")

    def test_runtime_token(self):
        token = Keyframe.from_point(["baseHeadLocalPosition", 0])
        assert isinstance(token, RuntimeToken)
        assert token.name == "baseHeadLocalPosition"
        assert token.point == ["baseHeadLocalPosition", 0]


class TestDefinitions:
    def test_simple_definition(self):
        keyframes = keyframes_from_points([1, 2, 3])
        assert keyframes == [Keyframe([1, 2, 3], 0)]
        assert points_from_keyframes(keyframes) == [1, 2, 3]

    def test_points(self):
        points = [[0, 0, 0, 0], [1, 1, 1, 1, "easeInOutCubic"]]
        assert points_from_keyframes(keyframes_from_points(points)) == points

    def test_runtime_points_kept(self):
        points = [["baseHeadLocalPosition", 0], [0, 0, 0, 1]]
        assert points_from_keyframes(keyframes_from_points(points)) == points

    def test_nested_runtime_expression(self):
        point = [0, 0, 0, ["baseHeadLocalPosition"], "opAdd", 0]
        token = Keyframe.from_point(point)
        assert isinstance(token, RuntimeToken)
        assert token.name == "baseHeadLocalPosition"
        assert token.point == point

        keyframes = keyframes_from_points([point, [1, 1, 1, 1]])
        assert isinstance(keyframes[0], RuntimeToken)
        assert keyframes[1] == Keyframe([1, 1, 1], 1)
        assert points_from_keyframes(keyframes) == [point, [1, 1, 1, 1]]
