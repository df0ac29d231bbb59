"""Tests for applying constants to animations and for colour helpers."""

import pytest

from beatmotion.animation.combine import combine_animations
from beatmotion.color import hsv_to_rgb, lerp_hsv, lerp_wrap, rgb_to_hsv


class TestCombineAnimations:
    def test_position_adds(self):
        result = combine_animations([1, 2, 3], [[0, 0, 0, 0], [1, 1, 1, 1]], "position")
        assert result == [[1, 2, 3, 0], [2, 3, 4, 1]]

    def test_order_of_arguments(self):
        result = combine_animations([[0, 0, 0, 0], [1, 1, 1, 1]], [1, 2, 3], "localPosition")
        assert result == [[1, 2, 3, 0], [2, 3, 4, 1]]

    def test_rotation_wraps(self):
        result = combine_animations([0, 270, 0], [[0, 180, 0, 0], [0, -300, 0, 1]], "rotation")
        assert result == [[0, 90, 0, 0], [0, -30, 0, 1]]

    def test_scale_multiplies(self):
        result = combine_animations([2, 2, 2], [[1, 1, 1, 0], [1, 3, 1, 1]], "scale")
        assert result == [[2, 2, 2, 0], [2, 6, 2, 1]]

    def test_other_properties_unchanged(self):
        points = [[0, 0], [1, 1, "easeInQuad"]]
        assert combine_animations([5], points, "dissolve") == points

    def test_flags_untouched(self):
        result = combine_animations([1, 1, 1], [[0, 0, 0, 0.5, "easeOutQuad"]], "position")
        assert result == [[1, 1, 1, 0.5, "easeOutQuad"]]

    def test_both_simple(self):
        assert combine_animations([1, 2, 3], [1, 1, 1], "position") == [2, 3, 4]

    def test_both_animated(self):
        with pytest.raises(ValueError):
            combine_animations([[0, 0]], [[1, 1]], "position")

    def test_inputs_not_modified(self):
        points = [[0, 0, 0, 0], [1, 1, 1, 1]]
        combine_animations([1, 2, 3], points, "position")
        assert points == [[0, 0, 0, 0], [1, 1, 1, 1]]


class TestColor:
    def test_hsv_round_trip(self):
        for color in ([1, 0, 0, 1], [0.2, 0.4, 0.6], [0, 0, 0, 0.5]):
            assert hsv_to_rgb(rgb_to_hsv(color)) == pytest.approx(color)

    def test_hue_wraps(self):
        assert hsv_to_rgb([1.5, 1, 1]) == pytest.approx(hsv_to_rgb([0.5, 1, 1]))
        assert hsv_to_rgb([-0.25, 1, 1]) == pytest.approx(hsv_to_rgb([0.75, 1, 1]))

    def test_lerp_wrap_short_way(self):
        assert lerp_wrap(0.9, 0.1, 0.5) == pytest.approx(0.0)
        assert lerp_wrap(0.1, 0.3, 0.5) == pytest.approx(0.2)

    def test_lerp_hsv_pads_alpha(self):
        result = lerp_hsv([1, 0, 0], [0, 0, 1, 0], 0.5)
        assert result == pytest.approx([1, 0, 1, 0.5])
