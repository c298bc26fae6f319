"""
tests/test_config.py — YAML Configuration Loader Tests
=======================================================
"""

from __future__ import annotations

import pytest

from rpgtracker.config import RpgConfig, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nope.yaml")
        assert cfg == RpgConfig()
        assert cfg.default_xp_award == 5
        assert cfg.pet_unlock_level == 5
        assert cfg.default_pet_name == "Companion"

    def test_overrides_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "pet_unlock_level: 3\n"
            "dungeon_min_completed: '2'\n"
            "default_pet_type: Dragon\n"
            "seed_demo_user: true\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.pet_unlock_level == 3
        assert cfg.dungeon_min_completed == 2
        assert cfg.default_pet_type == "Dragon"
        assert cfg.seed_demo_user is True
        assert cfg.suggestion_min_count == 3

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == RpgConfig()

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("guild_id: 123\nport: 9000\n", encoding="utf-8")
        assert load_config(path).port == 9000

    @pytest.mark.parametrize(
        "bad",
        [
            "pet_unlock_level: zero",
            "port: 0",
            "- a\n- b",
            "seed_demo_user: 'false'",
            "seed_demo_user: 1",
        ],
    )
    def test_invalid_values_raise(self, tmp_path, bad):
        path = tmp_path / "config.yaml"
        path.write_text(bad, encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_config_is_frozen(self):
        cfg = RpgConfig()
        with pytest.raises(AttributeError):
            cfg.port = 1  # type: ignore[misc]
