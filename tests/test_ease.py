"""Tests for easing curves and their flag names."""

import pytest

from beatmotion.easing import Ease, apply_easing, evaluate


class TestEaseCurves:
    def test_endpoints(self):
        """Every curve starts at 0 and ends at 1."""
        for ease in Ease:
            assert evaluate(ease, 0) == pytest.approx(0, abs=1e-9), ease
            assert evaluate(ease, 1) == pytest.approx(1, abs=1e-9), ease

    def test_quad(self):
        assert evaluate(Ease.IN_QUAD, 0.5) == pytest.approx(0.25)
        assert evaluate(Ease.OUT_QUAD, 0.5) == pytest.approx(0.75)
        assert evaluate(Ease.IN_OUT_QUAD, 0.25) == pytest.approx(0.125)
        assert evaluate(Ease.IN_OUT_QUAD, 0.75) == pytest.approx(0.875)

    def test_in_out_symmetric(self):
        for ease in (Ease.IN_OUT_CUBIC, Ease.IN_OUT_SINE, Ease.IN_OUT_CIRC):
            assert evaluate(ease, 0.5) == pytest.approx(0.5)

    def test_back_overshoots(self):
        assert evaluate(Ease.IN_BACK, 0.2) < 0
        assert evaluate(Ease.OUT_BACK, 0.8) > 1

    def test_linear(self):
        assert evaluate(Ease.LINEAR, 0.3) == 0.3

    def test_step(self):
        assert evaluate(Ease.STEP, 0.5) == 0
        assert evaluate(Ease.STEP, 0.999) == 0
        assert evaluate(Ease.STEP, 1) == 1


class TestApplyEasing:
    def test_none_is_identity(self):
        assert apply_easing(None, 0.3) == 0.3

    def test_by_flag_name(self):
        assert apply_easing("easeInCubic", 0.5) == pytest.approx(0.125)

    def test_by_enum(self):
        assert apply_easing(Ease.OUT_CUBIC, 0.5) == pytest.approx(0.875)

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            apply_easing("easeSideways", 0.5)


class TestEaseNames:
    def test_flag_values(self):
        assert Ease.IN_OUT_BOUNCE.value == "easeInOutBounce"
        assert Ease("easeOutExpo") is Ease.OUT_EXPO

    def test_from_flag(self):
        assert Ease.from_flag("easeInSine") is Ease.IN_SINE
        assert Ease.from_flag("splineCatmullRom") is None
        assert Ease.from_flag(None) is None

    def test_reversed(self):
        assert Ease.IN_QUAD.reversed() is Ease.OUT_QUAD
        assert Ease.OUT_ELASTIC.reversed() is Ease.IN_ELASTIC
        assert Ease.IN_OUT_BACK.reversed() is Ease.IN_OUT_BACK
        assert Ease.LINEAR.reversed() is Ease.LINEAR
        assert Ease.STEP.reversed() is Ease.STEP

    def test_reversed_curve_mirrors_time(self):
        """out(t) = 1 - in(1 - t)"""
        for t in (0.1, 0.4, 0.7):
            assert evaluate(Ease.OUT_QUART, t) == pytest.approx(1 - evaluate(Ease.IN_QUART, 1 - t))
