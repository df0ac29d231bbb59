"""Tests for baking animated transforms into points."""

import pytest

from beatmotion.animation.bake import TransformSample, bake_animation
from beatmotion.animation.domain import AnimationDomain
from beatmotion.animation.interpolate import get_values_at_time
from beatmotion.animation.settings import AnimationSettings


class TestBake:
    def test_linear_ramp(self):
        """Samples at 0, 0.5, 1; the collinear middle sample is optimized away."""
        samples = []
        settings = AnimationSettings(bake_sample_frequency=3)
        result = bake_animation(
            {"position": [[0, 0, 0, 0], [10, 0, 0, 1]]},
            lambda s: samples.append([*s.position, s.time]),
            settings,
            AnimationDomain(0, 1),
        )

        assert [s[3] for s in samples] == pytest.approx([0, 0.5, 1])
        assert [s[0] for s in samples] == pytest.approx([0, 5, 10])
        assert result["position"] == [[0, 0, 0, 0], [10, 0, 0, 1]]

    def test_static_channels_collapse(self):
        settings = AnimationSettings(bake_sample_frequency=3)
        result = bake_animation({"position": [[0, 0, 0, 0], [10, 0, 0, 1]]}, settings=settings)
        assert len(result["rotation"]) == 1
        assert get_values_at_time("rotation", result["rotation"], 0.5) == [0, 0, 0]
        assert get_values_at_time("scale", result["scale"], 0.5) == [1, 1, 1]

    def test_sample_count(self):
        count = []
        bake_animation(
            {"position": [[0, 0, 0, 0], [1, 0, 0, 1]]},
            lambda s: count.append(s.time),
            AnimationSettings(bake_sample_frequency=5),
        )
        assert count == pytest.approx([0, 0.25, 0.5, 0.75, 1])

    def test_domain_rounded_to_step(self):
        times = []
        bake_animation(
            {"position": [[0, 0, 0, 0.3], [1, 0, 0, 0.6]]},
            lambda s: times.append(s.time),
            AnimationSettings(bake_sample_frequency=5),
            AnimationDomain(0.3, 0.6),
        )
        assert times == pytest.approx([0.25, 0.5, 0.75])

    def test_callback_mutates_sample(self):
        def lift(sample: TransformSample):
            sample.position = [sample.position[0], sample.position[1] + 2, sample.position[2]]

        result = bake_animation(
            {"position": [[0, 0, 0, 0], [10, 0, 0, 1]]},
            lift,
            AnimationSettings(bake_sample_frequency=3),
        )
        assert result["position"] == [[0, 2, 0, 0], [10, 2, 0, 1]]

    def test_rotation_sampled_with_slerp(self):
        samples = []
        bake_animation(
            {"rotation": [[0, 0, 0, 0], [0, 90, 0, 1]]},
            lambda s: samples.append(s.rotation),
            AnimationSettings(bake_sample_frequency=3),
        )
        assert samples[1] == pytest.approx([0, 45, 0], abs=1e-9)

    def test_constant_animation(self):
        result = bake_animation({"position": [1, 2, 3]})
        assert get_values_at_time("position", result["position"], 0.7) == [1, 2, 3]

    def test_input_not_modified(self):
        animation = {"position": [[0, 0, 0, 0], [10, 0, 0, 1]]}
        bake_animation(animation, settings=AnimationSettings(bake_sample_frequency=3))
        assert animation == {"position": [[0, 0, 0, 0], [10, 0, 0, 1]]}
