"""Rule-based tone classification and the formality probe."""

from dataclasses import dataclass

from polyreply.core.classifier import ClassifierChain
from polyreply.core.constants import FORMALITY_MAX, FORMALITY_THRESHOLD
from polyreply.core.lexicon import ToneLexicon, tone_lexicon
from polyreply.core.protocols import ToneClassifier
from polyreply.core.types import Tone

_EMOJI_FIRST = 0x1F300
_EMOJI_LAST = 0x1FAFF


@dataclass(frozen=True, slots=True)
class ToneSignals:
    """Boolean features extracted from one message."""

    emoji: bool
    exclaim: bool
    question: bool
    all_caps: bool
    slang: bool
    positive: bool
    negative: bool
    apology: bool
    support: bool
    laugh: bool
    formality: int


def has_emoji(text: str) -> bool:
    return any(_EMOJI_FIRST <= ord(ch) <= _EMOJI_LAST for ch in text)


def has_all_caps_word(text: str) -> bool:
    """True if a whitespace-separated word is longer than 2 and shouting."""
    for word in text.split():
        if len(word) > 2 and word == word.upper() and word != word.lower():
            return True
    return False


def _contains_any(text: str, words: tuple[str, ...]) -> bool:
    return any(w in text for w in words)


def _score(lower: str, emoji: bool, slang: bool, lexicon: ToneLexicon) -> int:
    score = 0
    if _contains_any(lower, lexicon.formal_markers):
        score += 4
    if len(lower) > 40 and not slang:
        score += 2
    score += -2 if emoji else 1
    if slang:
        score -= 3
    if lower.endswith((".", "?", "!")):
        score += 1
    return max(0, min(FORMALITY_MAX, score))


def formality_score(text: str | None) -> int:
    """Formality on a 0–10 scale; blank input scores 0."""
    if text is None:
        return 0
    lower = text.strip().lower()
    if not lower:
        return 0
    lexicon = tone_lexicon()
    slang = bool(lexicon.slang_pattern.search(lower))
    return _score(lower, has_emoji(text), slang, lexicon)


def is_likely_formal(text: str | None) -> bool:
    """True when the formality score reaches the formal threshold."""
    return formality_score(text) >= FORMALITY_THRESHOLD


def extract_signals(text: str) -> ToneSignals:
    lexicon = tone_lexicon()
    stripped = text.strip()
    lower = stripped.lower()
    emoji = has_emoji(stripped)
    slang = bool(lexicon.slang_pattern.search(lower))
    return ToneSignals(
        emoji=emoji,
        exclaim="!" in lower,
        question="?" in lower,
        all_caps=has_all_caps_word(stripped),
        slang=slang,
        positive=_contains_any(lower, lexicon.positive),
        negative=_contains_any(lower, lexicon.negative),
        apology=_contains_any(lower, lexicon.apology),
        support=_contains_any(lower, lexicon.support),
        laugh=_contains_any(lower, lexicon.laugh),
        formality=_score(lower, emoji, slang, lexicon),
    )


def decide_tone(s: ToneSignals) -> Tone:
    """Map signals to a tone; the first matching rule wins."""
    if s.formality >= FORMALITY_THRESHOLD:
        return Tone.FORMAL
    if s.negative and (s.exclaim or s.all_caps):
        return Tone.ANGRY
    if s.negative and not s.positive:
        return Tone.SAD
    if s.apology or s.support:
        return Tone.EMPATHETIC
    if s.slang or s.emoji or s.exclaim:
        if s.emoji and s.laugh:
            return Tone.HUMOROUS
        return Tone.CASUAL
    if s.positive:
        return Tone.FRIENDLY
    return Tone.NEUTRAL


class RuleToneClassifier:
    """Deterministic signal-based classifier. Never returns ``None``."""

    def predict(self, text: str) -> Tone:
        if not text.strip():
            return Tone.NEUTRAL
        return decide_tone(extract_signals(text))


DEFAULT_TONE_CLASSIFIER: ClassifierChain[Tone] = ClassifierChain(
    RuleToneClassifier()
)


def classify_tone(
    text: str | None, *, classifier: ToneClassifier | None = None
) -> Tone:
    """Classify the tone of *text*; blank input is ``neutral``."""
    if text is None or not text.strip():
        return Tone.NEUTRAL
    chain = classifier or DEFAULT_TONE_CLASSIFIER
    return chain.predict(text) or Tone.NEUTRAL
