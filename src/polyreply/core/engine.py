"""Reply orchestrator: normalise, classify, style, translate, inject slang.

ReplyEngine sequences the pipeline stages. All domain logic lives in the
stage modules (slang, intent, tone, style); the engine only decides which
branch to take and how to recover when translation fails.

Translation is advisory: a failed translation degrades the run to the
same-language path instead of failing it.
"""

from polyreply.core.classifier import ClassifierChain
from polyreply.core.constants import DEFAULT_USER_LANGUAGE
from polyreply.core.env import LOGGER
from polyreply.core.intent import (
    DEFAULT_INTENT_CLASSIFIER,
    RuleIntentClassifier,
    classify_intent,
)
from polyreply.core.language import codes_equal
from polyreply.core.protocols import (
    IntentClassifier,
    RandomSource,
    ToneClassifier,
    Translator,
)
from polyreply.core.slang import inject_slang, normalize
from polyreply.core.style import style_reply
from polyreply.core.tone import (
    DEFAULT_TONE_CLASSIFIER,
    RuleToneClassifier,
    classify_tone,
)
from polyreply.core.types import AUTO_TONE, Intent, ReplyResult, Tone


class ReplyGenerationError(RuntimeError):
    """A pipeline stage failed unexpectedly; the run produced no reply."""


def resolve_tone(override: Tone | str | None, detected: Tone) -> Tone:
    """Return the caller's tone override, or *detected* for ``"auto"``.

    Unrecognised overrides are logged and ignored.
    """
    if override is None:
        return detected
    value = str(override).strip().lower()
    if not value or value == AUTO_TONE:
        return detected
    try:
        return Tone(value)
    except ValueError:
        LOGGER.warning("Unknown tone override %r; using detected %s", override, detected)
        return detected


class ReplyEngine:
    """Async orchestrator producing one :class:`ReplyResult` per run.

    Args:
        translator: Backend used when the send language differs from the
            user language. ``None`` makes every cross-language run take
            the fallback path.
        rng: Random source for slang injection (process-wide default when
            omitted).
        intent_classifier: Extra intent strategy tried before the rules.
        tone_classifier: Extra tone strategy tried before the rules.
    """

    __slots__ = ("translator", "rng", "intent_classifier", "tone_classifier")

    def __init__(
        self,
        translator: Translator | None = None,
        rng: RandomSource | None = None,
        intent_classifier: IntentClassifier | None = None,
        tone_classifier: ToneClassifier | None = None,
    ) -> None:
        self.translator = translator
        self.rng = rng
        self.intent_classifier = (
            ClassifierChain(RuleIntentClassifier(), [intent_classifier])
            if intent_classifier is not None
            else DEFAULT_INTENT_CLASSIFIER
        )
        self.tone_classifier = (
            ClassifierChain(RuleToneClassifier(), [tone_classifier])
            if tone_classifier is not None
            else DEFAULT_TONE_CLASSIFIER
        )

    async def generate_reply(
        self,
        incoming_text: str,
        user_reply: str,
        user_language: str = DEFAULT_USER_LANGUAGE,
        send_language: str = DEFAULT_USER_LANGUAGE,
        tone: Tone | str | None = AUTO_TONE,
    ) -> ReplyResult:
        """Run the pipeline for one reply.

        Only unexpected faults surface, as :class:`ReplyGenerationError`;
        translation failures are absorbed and reported through
        ``ReplyResult.translation_error`` with ``send_language`` reset to
        *user_language*.
        """
        incoming_text = incoming_text or ""
        user_reply = user_reply or ""

        try:
            normalized = normalize(user_language, user_reply)
            intent = classify_intent(
                incoming_text, normalized, classifier=self.intent_classifier
            )
            detected = classify_tone(normalized, classifier=self.tone_classifier)
            final_tone = resolve_tone(tone, detected)
            styled = style_reply(user_reply, user_language, final_tone, intent)
        except Exception as exc:
            raise ReplyGenerationError(f"reply pipeline failed: {exc}") from exc

        LOGGER.debug(
            "intent=%s tone=%s (detected %s) user=%s send=%s",
            intent, final_tone, detected, user_language, send_language,
        )

        if codes_equal(user_language, send_language):
            return self._finalize(
                intent, final_tone, user_language, send_language, styled, styled
            )

        translated, error = await self._translate(user_language, send_language, styled)
        if error:
            LOGGER.warning(
                "Translation %s->%s failed: %s; sending in %s",
                user_language, send_language, error, user_language,
            )
            return self._finalize(
                intent, final_tone, user_language, user_language, styled, styled,
                translation_error=error,
            )

        return self._finalize(
            intent, final_tone, user_language, send_language, styled, translated
        )

    async def _translate(self, source: str, target: str, text: str) -> tuple[str, str]:
        """Issue the single translation request. Returns (text, error)."""
        if self.translator is None:
            return "", "no translator configured"
        try:
            result = await self.translator.translate(source, target, text)
        except Exception as exc:
            return "", str(exc) or type(exc).__name__
        if result.error:
            return "", result.error
        return result.translated, ""

    def _finalize(
        self,
        intent: Intent,
        tone: Tone,
        user_language: str,
        send_language: str,
        styled: str,
        outgoing: str,
        translation_error: str = "",
    ) -> ReplyResult:
        try:
            final = inject_slang(
                send_language, outgoing, tone, intent, rng=self.rng
            )
        except Exception as exc:
            raise ReplyGenerationError(f"slang injection failed: {exc}") from exc
        return ReplyResult(
            intent=intent,
            tone=tone,
            user_language=user_language,
            send_language=send_language,
            styled_reply_in_user_language=styled,
            final_reply_to_send=final,
            translation_error=translation_error,
        )
