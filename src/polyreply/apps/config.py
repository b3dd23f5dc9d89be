"""Application-level configuration.

Loaded from ``~/.config/polyreply/config.json``::

    {
      "languages": {"user": "en", "send": "auto"},
      "tone": "auto",
      "translation": {
        "model": "ollama/llama3.2",
        "prompt_file": "prompt.md",
        "max_tokens": 512,
        "flags": {"temperature": 0.2}
      },
      "slang": {"seed": 7}
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from polyreply.core.constants import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    DEFAULT_PROMPT_FILE,
    DEFAULT_SEND_LANGUAGE,
    DEFAULT_TRANSLATION_MAX_TOKENS,
    DEFAULT_USER_LANGUAGE,
)
from polyreply.core.types import AUTO_TONE

_log = logging.getLogger("polyreply")


# ---------------------------------------------------------------------------
# Nested config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LanguageConfig:
    """Default user and send languages (``send`` may be ``"auto"``)."""

    user: str = DEFAULT_USER_LANGUAGE
    send: str = DEFAULT_SEND_LANGUAGE


@dataclass(frozen=True, slots=True)
class TranslationConfig:
    """LLM translation backend settings."""

    model: str | None = None
    prompt: str | None = None
    max_tokens: int = DEFAULT_TRANSLATION_MAX_TOKENS
    flags: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SlangConfig:
    """Slang injection settings. A seed makes runs repeatable."""

    seed: int | None = None


@dataclass(frozen=True, slots=True)
class PolyreplyConfig:
    """Top-level configuration loaded from ~/.config/polyreply/config.json."""

    languages: LanguageConfig = field(default_factory=LanguageConfig)
    tone: str = AUTO_TONE
    translation: TranslationConfig = field(default_factory=TranslationConfig)
    slang: SlangConfig = field(default_factory=SlangConfig)


# ---------------------------------------------------------------------------
# Config loading helpers
# ---------------------------------------------------------------------------


def config_dir() -> Path:
    """Config directory, honouring ``POLYREPLY_CONFIG_DIR``."""
    return Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()


def _resolve_config_path(base: Path, path_str: str) -> Path:
    """Resolve a path relative to *base*. Absolute paths used as-is."""
    p = Path(path_str).expanduser()
    if p.is_absolute():
        return p
    return base / p


def _resolve_prompt(base: Path, section: dict[str, Any]) -> str | None:
    """Resolve ``prompt`` / ``prompt_file`` from the translation section."""
    prompt = section.get("prompt")
    prompt_file = section.get("prompt_file")
    if prompt and prompt_file:
        _log.debug(
            "Both 'prompt' and 'prompt_file' in translation; using 'prompt_file'"
        )
    if prompt_file:
        path = _resolve_config_path(base, str(prompt_file))
        return path.read_text(encoding="utf-8").strip()
    if prompt:
        return str(prompt)
    return None


def _read_default_prompt_file(base: Path) -> str | None:
    """Fallback: read ``prompt.md`` from *base* if it exists."""
    path = base / DEFAULT_PROMPT_FILE
    if path.exists():
        return path.read_text(encoding="utf-8").strip() or None
    return None


def _defaults(base: Path) -> PolyreplyConfig:
    prompt = _read_default_prompt_file(base)
    if prompt:
        return PolyreplyConfig(translation=TranslationConfig(prompt=prompt))
    return PolyreplyConfig()


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    return None


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(path: str | None = None) -> PolyreplyConfig:
    """Load polyreply configuration from a JSON file.

    Reads ``~/.config/polyreply/config.json`` (or *path*). Relative
    ``prompt_file`` paths are resolved against the config directory.

    Returns a default config if the file does not exist or its top level
    is not a JSON object.
    """
    base = config_dir()
    config_path = Path(path).expanduser() if path else base / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        return _defaults(base)

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        _log.warning("Ignoring %s: top level is not an object", config_path)
        return _defaults(base)

    # -- languages ---------------------------------------------------------
    lang_raw = data.get("languages", {})
    languages = LanguageConfig(
        user=str(lang_raw.get("user", DEFAULT_USER_LANGUAGE)),
        send=str(lang_raw.get("send", DEFAULT_SEND_LANGUAGE)),
    )

    # -- translation -------------------------------------------------------
    tr_raw = data.get("translation", {})
    tr_prompt = _resolve_prompt(base, tr_raw)
    if tr_prompt is None:
        tr_prompt = _read_default_prompt_file(base)
    translation = TranslationConfig(
        model=tr_raw.get("model"),
        prompt=tr_prompt,
        max_tokens=int(tr_raw.get("max_tokens", DEFAULT_TRANSLATION_MAX_TOKENS)),
        flags=dict(tr_raw.get("flags", {})),
    )

    # -- slang -------------------------------------------------------------
    slang_raw = data.get("slang", {})
    slang = SlangConfig(seed=_optional_int(slang_raw.get("seed")))

    return PolyreplyConfig(
        languages=languages,
        tone=str(data.get("tone", AUTO_TONE)),
        translation=translation,
        slang=slang,
    )
