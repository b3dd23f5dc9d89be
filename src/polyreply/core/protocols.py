"""Structural type protocols for the pipeline's pluggable collaborators."""

from typing import Protocol

from polyreply.core.types import Intent, Tone, TranslationResult


class RandomSource(Protocol):
    """Structural type for ``numpy.random.Generator``-compatible sources."""

    def random(self) -> float: ...

    def integers(self, high: int, /) -> int: ...


class Translator(Protocol):
    """Asynchronous translation backend.

    Implementations return the input unchanged when both languages are the
    same or unsupported, and report failures either by raising or through
    ``TranslationResult.error``.
    """

    async def translate(
        self, source: str, target: str, text: str
    ) -> TranslationResult: ...


class IntentClassifier(Protocol):
    """Intent strategy. ``None`` means no confident answer."""

    def predict(self, text: str) -> Intent | None: ...


class ToneClassifier(Protocol):
    """Tone strategy. ``None`` means no confident answer."""

    def predict(self, text: str) -> Tone | None: ...
