"""Tests for polyreply.apps.config: JSON loading and defaults."""

from __future__ import annotations

import json

import pytest

from polyreply.apps.config import (
    LanguageConfig,
    PolyreplyConfig,
    TranslationConfig,
    config_dir,
    load_config,
)


class TestDefaults:
    def test_missing_file(self, config_home) -> None:
        config = load_config()
        assert config == PolyreplyConfig()
        assert config.languages == LanguageConfig(user="en", send="auto")
        assert config.tone == "auto"
        assert config.translation.model is None
        assert config.slang.seed is None

    def test_config_dir_env(self, config_home) -> None:
        assert config_dir() == config_home

    def test_default_prompt_file_picked_up(self, config_home) -> None:
        (config_home / "prompt.md").write_text("Translate {source} to {target}.\n")
        config = load_config()
        assert config.translation.prompt == "Translate {source} to {target}."

    def test_frozen(self) -> None:
        config = PolyreplyConfig()
        with pytest.raises(AttributeError):
            config.tone = "formal"  # type: ignore[misc]


class TestLoadConfig:
    def test_full_file(self, config_home) -> None:
        (config_home / "config.json").write_text(
            json.dumps(
                {
                    "languages": {"user": "fr", "send": "es"},
                    "tone": "friendly",
                    "translation": {
                        "model": "ollama/llama3.2",
                        "max_tokens": 256,
                        "flags": {"temperature": 0.2},
                    },
                    "slang": {"seed": 7},
                }
            )
        )
        config = load_config()
        assert config.languages == LanguageConfig(user="fr", send="es")
        assert config.tone == "friendly"
        assert config.translation == TranslationConfig(
            model="ollama/llama3.2",
            prompt=None,
            max_tokens=256,
            flags={"temperature": 0.2},
        )
        assert config.slang.seed == 7

    def test_explicit_path(self, tmp_path, config_home) -> None:
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"tone": "formal"}))
        assert load_config(str(path)).tone == "formal"

    def test_prompt_file_relative_to_config_dir(self, config_home) -> None:
        (config_home / "custom.md").write_text("  Be brief.  ")
        (config_home / "config.json").write_text(
            json.dumps(
                {"translation": {"prompt": "ignored", "prompt_file": "custom.md"}}
            )
        )
        assert load_config().translation.prompt == "Be brief."

    def test_inline_prompt(self, config_home) -> None:
        (config_home / "config.json").write_text(
            json.dumps({"translation": {"prompt": "Inline prompt"}})
        )
        assert load_config().translation.prompt == "Inline prompt"

    @pytest.mark.parametrize("seed", ["seven", True, None])
    def test_non_integer_seed_ignored(self, config_home, seed) -> None:
        (config_home / "config.json").write_text(json.dumps({"slang": {"seed": seed}}))
        assert load_config().slang.seed is None

    def test_non_object_top_level(self, config_home, caplog) -> None:
        (config_home / "config.json").write_text("[1, 2, 3]")
        with caplog.at_level("WARNING", logger="polyreply"):
            assert load_config() == PolyreplyConfig()
        assert "not an object" in caplog.text

    def test_invalid_json_raises(self, config_home) -> None:
        (config_home / "config.json").write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config()
