"""Pluggable classification strategies with a rule-based fallback.

A strategy answers ``predict(text)`` with a label, or ``None`` when it has
no confident answer. ``ClassifierChain`` asks each strategy in order and
falls back to a classifier that always answers (the rule-based one).
A model-backed strategy slots in without touching any call site.
"""

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from polyreply.core.env import LOGGER
from polyreply.core.types import Intent, Tone

L = TypeVar("L", Intent, Tone)


class ClassifierChain(Generic[L]):
    """Ordered strategies in front of an always-answering fallback."""

    __slots__ = ("fallback", "strategies")

    def __init__(self, fallback, strategies: Sequence = ()) -> None:
        self.fallback = fallback
        self.strategies = tuple(strategies)

    def predict(self, text: str) -> L:
        for strategy in self.strategies:
            try:
                label = strategy.predict(text)
            except Exception as exc:
                LOGGER.warning(
                    "%s failed, trying next classifier: %s",
                    type(strategy).__name__,
                    exc,
                )
                continue
            if label is not None:
                return label
        return self.fallback.predict(text)


class ScoredClassifier(Generic[L]):
    """Adapts a ``text -> (label, confidence)`` scorer into a strategy.

    Predictions below *min_confidence*, or labels that are not members of
    *labels*, come back as ``None`` so the chain moves on.
    """

    __slots__ = ("scorer", "labels", "min_confidence")

    def __init__(
        self,
        scorer: Callable[[str], tuple[str, float]],
        labels: type[L],
        min_confidence: float = 0.6,
    ) -> None:
        self.scorer = scorer
        self.labels = labels
        self.min_confidence = min_confidence

    def predict(self, text: str) -> L | None:
        label, confidence = self.scorer(text)
        if confidence < self.min_confidence:
            return None
        try:
            return self.labels(str(label).strip().lower())
        except ValueError:
            LOGGER.debug("Scorer returned unknown label %r", label)
            return None
