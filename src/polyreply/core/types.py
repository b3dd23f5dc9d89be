"""Core data types shared across polyreply modules."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

AUTO_TONE: Final = "auto"


class Intent(StrEnum):
    """Communicative purpose of a message."""

    GREETING = "greeting"
    FAREWELL = "farewell"
    THANKS = "thanks"
    APOLOGY = "apology"
    LOVE = "love"
    CONGRATS = "congrats"
    HATE = "hate"
    SMALLTALK = "smalltalk"
    QUESTION = "question"
    UNKNOWN = "unknown"


class Tone(StrEnum):
    """Emotional register of a message."""

    FORMAL = "formal"
    FRIENDLY = "friendly"
    HUMOROUS = "humorous"
    EMPATHETIC = "empathetic"
    CASUAL = "casual"
    NEUTRAL = "neutral"
    ANGRY = "angry"
    SAD = "sad"


@dataclass(frozen=True, slots=True)
class SlangEntry:
    """A slang phrase and its canonical meaning within one language."""

    slang: str
    meaning: str


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Immutable result of a translation request."""

    original: str
    translated: str
    model: str
    error: str = ""


@dataclass(frozen=True, slots=True)
class ReplyResult:
    """Immutable outcome of one reply pipeline run.

    Attributes:
        intent: Intent detected from the incoming text and the reply.
        tone: Tone actually used (the override when given, else detected).
        user_language: Language the user reads and typed in.
        send_language: Language of *final_reply_to_send*. Reset to
            *user_language* when translation failed.
        styled_reply_in_user_language: Styled reply, always in the user's
            language.
        final_reply_to_send: Text to paste into the conversation.
        translation_error: Message of an absorbed translation failure.
    """

    intent: Intent
    tone: Tone
    user_language: str
    send_language: str
    styled_reply_in_user_language: str
    final_reply_to_send: str
    translation_error: str = ""
