"""Public API for polyreply.

Nothing here imports litellm; translation backends are passed in by the
caller, so ``import polyreply.api`` stays cheap.

Typical usage::

    import asyncio

    from polyreply.api import generate_reply
    from polyreply.apps.translate import LitellmTranslator

    result = asyncio.run(
        generate_reply(
            "Hola, ¿cómo estás?",
            "thanks buddy",
            user_language="en",
            send_language="es",
            translator=LitellmTranslator(model="ollama/llama3.2"),
        )
    )
    print(result.final_reply_to_send)
"""

from __future__ import annotations

from polyreply.core.engine import ReplyEngine, ReplyGenerationError
from polyreply.core.intent import classify_intent
from polyreply.core.protocols import RandomSource, Translator
from polyreply.core.tone import classify_tone, is_likely_formal
from polyreply.core.types import AUTO_TONE, Intent, ReplyResult, Tone

__all__ = [
    "Intent",
    "ReplyEngine",
    "ReplyGenerationError",
    "ReplyResult",
    "Tone",
    "classify_intent",
    "classify_tone",
    "generate_reply",
    "is_likely_formal",
]


async def generate_reply(
    incoming_text: str,
    user_reply: str,
    user_language: str,
    send_language: str,
    tone: Tone | str | None = AUTO_TONE,
    *,
    translator: Translator | None = None,
    rng: RandomSource | None = None,
) -> ReplyResult:
    """Generate a styled reply, translated into *send_language* when possible.

    Args:
        incoming_text: The message being replied to.
        user_reply: What the user typed, in *user_language*.
        user_language: Language the user reads and writes.
        send_language: Language the reply should be sent in.
        tone: A :class:`Tone`, its name, or ``"auto"`` to detect it.
        translator: Translation backend; without one, cross-language
            replies fall back to *user_language*.
        rng: Random source for slang injection.

    Returns:
        A :class:`ReplyResult`. Translation failures never raise.

    Raises:
        ReplyGenerationError: A pipeline stage failed unexpectedly.
    """
    engine = ReplyEngine(translator=translator, rng=rng)
    return await engine.generate_reply(
        incoming_text, user_reply, user_language, send_language, tone
    )
