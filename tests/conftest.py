"""Shared test fixtures: no real LLM backend needed."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from polyreply.core.types import TranslationResult


class FakeRandom:
    """Scripted random source.

    ``random()`` pops from *draws* and ``integers()`` from *picks*; calls
    are recorded so tests can assert whether a draw happened.
    """

    def __init__(
        self, draws: Iterable[float] = (), picks: Iterable[int] = ()
    ) -> None:
        self._draws = list(draws)
        self._picks = list(picks)
        self.random_calls = 0
        self.integer_calls: list[int] = []

    def random(self) -> float:
        self.random_calls += 1
        return self._draws.pop(0) if self._draws else 0.999

    def integers(self, high: int, /) -> int:
        self.integer_calls.append(high)
        pick = self._picks.pop(0) if self._picks else 0
        return min(pick, high - 1)


class FakeTranslator:
    """Prefixes the target language code; records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    async def translate(
        self, source: str, target: str, text: str
    ) -> TranslationResult:
        self.calls.append((source, target, text))
        return TranslationResult(
            original=text, translated=f"[{target}] {text}", model="fake"
        )


class FailingTranslator:
    """Raises on every request, like a dropped connection."""

    def __init__(self) -> None:
        self.calls = 0

    async def translate(
        self, source: str, target: str, text: str
    ) -> TranslationResult:
        self.calls += 1
        raise ConnectionError("backend unreachable")


class ErrorResultTranslator:
    """Reports failure through ``TranslationResult.error``."""

    async def translate(
        self, source: str, target: str, text: str
    ) -> TranslationResult:
        return TranslationResult(
            original=text, translated="", model="fake", error="quota exceeded"
        )


@pytest.fixture
def quiet_rng() -> FakeRandom:
    """Random source whose draws never trigger slang injection."""
    return FakeRandom(draws=[0.999] * 8)


@pytest.fixture
def eager_rng() -> FakeRandom:
    """Random source whose draws always trigger slang injection."""
    return FakeRandom(draws=[0.0] * 8)


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def failing_translator() -> FailingTranslator:
    return FailingTranslator()


@pytest.fixture
def error_translator() -> ErrorResultTranslator:
    return ErrorResultTranslator()


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the config directory at an empty temp dir."""
    monkeypatch.setenv("POLYREPLY_CONFIG_DIR", str(tmp_path))
    return tmp_path
