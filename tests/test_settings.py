import json

import pygame

from slideswitch.ui.settings import AppSettings


def test_missing_file_gives_defaults(tmp_path):
    settings = AppSettings.load(str(tmp_path / "nope.json"))
    assert settings.graphics.resolution == (480, 640)
    assert settings.animation.easing == "linear"
    assert settings.controls.key_next == pygame.K_RIGHT


def test_save_and_load_round_trip(tmp_path):
    path = str(tmp_path / "settings.json")
    settings = AppSettings()
    settings.graphics.resolution = (800, 600)
    settings.graphics.right_to_left = True
    settings.animation.duration = 0.5
    settings.animation.easing = "ease_out_cubic"
    settings.controls.key_next = pygame.K_l
    settings.save(path)

    loaded = AppSettings.load(path)
    assert loaded.graphics.resolution == (800, 600)
    assert loaded.graphics.right_to_left is True
    assert loaded.animation.duration == 0.5
    assert loaded.animation.easing == "ease_out_cubic"
    assert loaded.controls.key_next == pygame.K_l


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "graphics": {"max_fps": 30, "warp_drive": True},
        "audio": {"volume": 11},
    }))

    loaded = AppSettings.load(str(path))
    assert loaded.graphics.max_fps == 30
    assert not hasattr(loaded.graphics, "warp_drive")


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    loaded = AppSettings.load(str(path))
    assert loaded.graphics.resolution == (480, 640)
    assert "Error loading settings" in caplog.text


def test_wrong_type_keeps_default(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "animation": {"duration": "fast", "easing": "ease_out_cubic"},
        "graphics": {"fullscreen": 1, "max_fps": 30.5},
    }))

    loaded = AppSettings.load(str(path))
    assert loaded.animation.duration == 0.35
    assert loaded.animation.easing == "ease_out_cubic"
    assert loaded.graphics.fullscreen is False
    assert loaded.graphics.max_fps == 60
    assert "animation.duration" in caplog.text


def test_int_accepted_for_float_field(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"animation": {"duration": 1}}))

    assert AppSettings.load(str(path)).animation.duration == 1


def test_bad_resolution_keeps_default(tmp_path, caplog):
    for bad in ([480], [480, 0], ["480", "640"], 480):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"graphics": {"resolution": bad}}))

        loaded = AppSettings.load(str(path))
        assert loaded.graphics.resolution == (480, 640)
    assert "graphics.resolution" in caplog.text


def test_resolution_only_read_from_graphics(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"controls": {"resolution": [1, 2]}}))

    loaded = AppSettings.load(str(path))
    assert not hasattr(loaded.controls, "resolution")
    assert loaded.graphics.resolution == (480, 640)


def test_non_object_section_is_skipped(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"controls": [1, 2], "graphics": {"max_fps": 30}}))

    loaded = AppSettings.load(str(path))
    assert loaded.graphics.max_fps == 30
