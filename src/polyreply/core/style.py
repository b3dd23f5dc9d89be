"""Reply style engine.

Rich languages (those with a full template table) swap the user's reply
for a curated template chosen by intent and tone, or lightly punctuate
and decorate it when no template applies. Every other language keeps
the user's words and only gains a trailing emoji.
"""

from polyreply.core.constants import GENERIC_STYLE_MAX_LENGTH
from polyreply.core.language import primary_language
from polyreply.core.lexicon import StyleLexicon, style_lexicon
from polyreply.core.types import Intent, Tone

_TEMPLATE_INTENTS = frozenset(
    {Intent.GREETING, Intent.THANKS, Intent.APOLOGY, Intent.CONGRATS, Intent.LOVE}
)
_EXCITED_TONES = frozenset({Tone.HUMOROUS, Tone.CASUAL, Tone.FRIENDLY})
# Dingbats/misc symbols (❤) and the pictographic planes.
_EMOJI_RANGES = ((0x2600, 0x27BF), (0x1F300, 0x1FAFF))
_EMOJI_MODIFIERS = "\u200d\ufe0f"


def is_rich_language(language: str) -> bool:
    return primary_language(language) in style_lexicon().rich_languages


def looks_like_greeting(lower: str, language: str) -> bool:
    """True for bare greetings such as "hello!" or "bonjour"."""
    patterns = style_lexicon().greeting_patterns
    pattern = patterns.get(language, patterns["en"])
    return pattern.match(lower) is not None


def template_for(language: str, intent: Intent, tone: Tone) -> str:
    """Curated template for (language, intent, tone family)."""
    lexicon = style_lexicon()
    family = lexicon.tone_families.get(tone, "neutral")
    return lexicon.templates[language][intent][family]


def _emoji_tail(lexicon: StyleLexicon, tone: str, intent: str) -> str:
    emoji = lexicon.intent_emoji.get(intent) or lexicon.tone_emoji.get(tone)
    return f" {emoji}" if emoji else ""


def _is_emoji(ch: str) -> bool:
    return any(lo <= ord(ch) <= hi for lo, hi in _EMOJI_RANGES)


def has_emoji(text: str) -> bool:
    return any(_is_emoji(ch) for ch in text)


def ends_with_emoji(text: str) -> bool:
    stripped = text.rstrip().rstrip(_EMOJI_MODIFIERS)
    return bool(stripped) and _is_emoji(stripped[-1])


def style_generic(text: str, tone: Tone, intent: Intent) -> str:
    """Ensure terminal punctuation and add one emoji for short replies.

    Text that already carries an emoji (a template, or a reply styled
    before) keeps it: no second emoji, and no punctuation after one.
    """
    if len(text) > GENERIC_STYLE_MAX_LENGTH or ends_with_emoji(text):
        return text
    if not text.endswith(("!", "?", ".")):
        text += "!" if tone in _EXCITED_TONES else "."
    if has_emoji(text):
        return text
    return text + _emoji_tail(style_lexicon(), tone, intent)


def add_emoji_fallback(text: str, tone: Tone, intent: Intent) -> str:
    if has_emoji(text):
        return text
    return text + _emoji_tail(style_lexicon(), tone, intent)


def _coerce(value: str, kind: type, default):
    try:
        return kind(str(value).strip().lower())
    except ValueError:
        return default


def style_reply(
    raw_reply: str,
    language: str,
    tone: Tone | str,
    intent: Intent | str,
) -> str:
    """Produce the styled reply in *language*.

    Blank replies are returned unchanged. An ``unknown`` intent is
    upgraded to ``greeting`` when the reply is a bare greeting.
    """
    text = raw_reply.strip()
    if not text:
        return raw_reply

    lang = primary_language(language)
    resolved_tone = _coerce(tone, Tone, Tone.NEUTRAL)
    resolved_intent = _coerce(intent, Intent, Intent.UNKNOWN)

    if resolved_intent == Intent.UNKNOWN and looks_like_greeting(text.lower(), lang):
        resolved_intent = Intent.GREETING

    if lang in style_lexicon().rich_languages:
        if resolved_intent in _TEMPLATE_INTENTS:
            return template_for(lang, resolved_intent, resolved_tone)
        return style_generic(text, resolved_tone, resolved_intent)

    return add_emoji_fallback(text, resolved_tone, resolved_intent)
