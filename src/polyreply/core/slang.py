"""Slang normalisation (before classification) and injection (after styling).

Both operations are pure functions of their arguments plus the random
source; the lexicon tables are never mutated.
"""

import re

import numpy as np

from polyreply.core.language import primary_language
from polyreply.core.lexicon import InjectionRule, slang_entries, slang_lexicon
from polyreply.core.protocols import RandomSource
from polyreply.core.types import Intent, Tone

_DEFAULT_RNG: RandomSource = np.random.default_rng()


def make_rng(seed: int | None = None) -> RandomSource:
    """Create a random source; a fixed *seed* makes injection repeatable."""
    return np.random.default_rng(seed)


def normalize(language: str, text: str) -> str:
    """Replace known slang with its canonical meaning.

    Each entry is matched as a case-insensitive whole word. Entries are
    applied in lexicon order, each one scanning the text as rewritten by
    the entries before it.
    """
    if not text:
        return text
    for entry in slang_entries(primary_language(language)):
        pattern = re.compile(
            r"\b" + re.escape(entry.slang) + r"\b", re.IGNORECASE
        )
        text = pattern.sub(lambda _m, meaning=entry.meaning: meaning, text)
    return text


def append_phrase(base: str, addition: str) -> str:
    if not addition:
        return base
    return f"{base} {addition}"


def _condition_holds(rule: InjectionRule, text: str, tone: Tone) -> bool:
    lexicon = slang_lexicon()
    match rule.when:
        case "always":
            return True
        case "casual":
            return tone in lexicon.casual_tones
        case "empathetic":
            return tone == Tone.EMPATHETIC
        case "bro_context":
            lower = text.lower()
            return any(m in lower for m in lexicon.bro_markers)
    return False


def inject_slang(
    language: str,
    text: str,
    tone: Tone | str,
    intent: Intent | str,
    rng: RandomSource | None = None,
) -> str:
    """Append at most one language- and intent-specific slang phrase.

    Formal tone never gets slang. Otherwise the first rule whose
    condition holds for (language, intent) is the only candidate: it
    fires when a uniform draw falls below its chance, and one of its
    phrases is picked at random. Unknown languages use the English table.
    """
    if not text:
        return text

    tone_value = str(tone).strip().lower()
    if tone_value == Tone.FORMAL:
        return text

    try:
        resolved_tone = Tone(tone_value)
    except ValueError:
        resolved_tone = Tone.NEUTRAL

    source = rng or _DEFAULT_RNG
    table = slang_lexicon().table_for(primary_language(language))

    for rule in table.rules_for(str(intent).strip().lower()):
        if not _condition_holds(rule, text, resolved_tone):
            continue
        if rule.chance < 1.0 and source.random() >= rule.chance:
            return text
        phrase = rule.phrases[int(source.integers(len(rule.phrases)))]
        return append_phrase(text, phrase)
    return text
