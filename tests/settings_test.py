import json

from beatmotion import log
from beatmotion.animation.settings import (
    AnimationSettings,
    OptimizeSettings,
    OptimizeSimilarPointsSettings,
    OptimizeSimilarPointsSlopeSettings,
    load_animation_settings,
    save_animation_settings,
)


class TestDefaults:
    def test_optimize_defaults(self):
        settings = OptimizeSettings()
        assert not settings.disabled
        assert settings.passes == 5
        assert settings.optimize_duplicates
        assert settings.optimize_similar_points.difference_threshold == 1
        assert settings.optimize_similar_points.time_difference_threshold == 0.001
        assert settings.optimize_similar_points_slope.difference_threshold == 0.03
        assert settings.optimize_similar_points_slope.time_difference_threshold == 0.025
        assert settings.optimize_similar_points_slope.y_intercept_difference_threshold == 0.5
        assert settings.additional_optimizers == []

    def test_animation_defaults(self):
        settings = AnimationSettings()
        assert settings.bake_sample_frequency == 32
        assert isinstance(settings.optimize_settings, OptimizeSettings)

    def test_instances_not_shared(self):
        a = OptimizeSettings()
        b = OptimizeSettings()
        a.optimize_similar_points.active = False
        assert b.optimize_similar_points.active


class TestSerialization:
    def test_round_trip(self):
        settings = AnimationSettings(
            bake_sample_frequency=8,
            optimize_settings=OptimizeSettings(
                passes=2,
                optimize_similar_points=OptimizeSimilarPointsSettings(active=False),
                optimize_similar_points_slope=OptimizeSimilarPointsSlopeSettings(difference_threshold=0.1),
            ),
        )
        restored = AnimationSettings.from_dict(settings.to_dict())
        assert restored == settings

    def test_additional_optimizers_not_serialized(self):
        settings = OptimizeSettings(additional_optimizers=[lambda a, b, c: None])
        data = settings.to_dict()
        assert "additional_optimizers" not in data
        json.dumps(data)

    def test_partial_dict(self):
        settings = AnimationSettings.from_dict({"optimize_settings": {"passes": 1}})
        assert settings.bake_sample_frequency == 32
        assert settings.optimize_settings.passes == 1
        assert settings.optimize_settings.optimize_similar_points_slope.active


class TestPersistence:
    def test_save_and_load(self, tmp_path):
        path = tmp_path / "settings" / "animation.json"
        settings = AnimationSettings(bake_sample_frequency=16)
        assert save_animation_settings(settings, path)
        assert load_animation_settings(path) == settings

    def test_missing_file(self, tmp_path):
        assert load_animation_settings(tmp_path / "missing.json") == AnimationSettings()

    def test_broken_file(self, tmp_path):
        path = tmp_path / "animation.json"
        path.write_text("{not json", encoding="utf-8")

        messages = []
        log.set_callback(lambda level, msg: messages.append((level, msg)))
        try:
            settings = load_animation_settings(path)
        finally:
            log.set_callback(None)

        assert settings == AnimationSettings()
        assert any(
            level == log.Level.ERROR and msg.startswith("[AnimationSettings] Failed to load")
            for level, msg in messages
        )
