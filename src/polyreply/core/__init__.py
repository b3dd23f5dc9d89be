"""Core reply pipeline, free of UI or backend dependencies.

Re-exports key symbols for convenience.
"""

from polyreply.core.classifier import ClassifierChain, ScoredClassifier
from polyreply.core.engine import ReplyEngine, ReplyGenerationError
from polyreply.core.intent import RuleIntentClassifier, classify_intent
from polyreply.core.language import codes_equal, guess_language, primary_language
from polyreply.core.protocols import (
    IntentClassifier,
    RandomSource,
    ToneClassifier,
    Translator,
)
from polyreply.core.slang import inject_slang, make_rng, normalize
from polyreply.core.style import style_reply
from polyreply.core.tone import (
    RuleToneClassifier,
    classify_tone,
    formality_score,
    is_likely_formal,
)
from polyreply.core.types import (
    AUTO_TONE,
    Intent,
    ReplyResult,
    SlangEntry,
    Tone,
    TranslationResult,
)

__all__ = [
    "AUTO_TONE",
    "ClassifierChain",
    "Intent",
    "IntentClassifier",
    "RandomSource",
    "ReplyEngine",
    "ReplyGenerationError",
    "ReplyResult",
    "RuleIntentClassifier",
    "RuleToneClassifier",
    "ScoredClassifier",
    "SlangEntry",
    "Tone",
    "ToneClassifier",
    "TranslationResult",
    "Translator",
    "classify_intent",
    "classify_tone",
    "codes_equal",
    "formality_score",
    "guess_language",
    "inject_slang",
    "is_likely_formal",
    "make_rng",
    "normalize",
    "primary_language",
    "style_reply",
]
