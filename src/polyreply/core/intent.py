"""Rule-based intent classification.

Rule groups are evaluated in a fixed priority order (greeting, farewell,
thanks, apology, congrats, love, hate, question, smalltalk) and the first
group with a matching pattern wins. Patterns cover English, Spanish,
French and Tamil; see ``data/intents.json``.
"""

from polyreply.core.classifier import ClassifierChain
from polyreply.core.lexicon import intent_rules
from polyreply.core.protocols import IntentClassifier
from polyreply.core.types import Intent


class RuleIntentClassifier:
    """Deterministic keyword/regex classifier. Never returns ``None``."""

    def predict(self, text: str) -> Intent:
        lowered = text.strip().lower()
        if not lowered:
            return Intent.UNKNOWN
        for rule in intent_rules():
            if rule.matches(lowered):
                return rule.intent
        return Intent.UNKNOWN


DEFAULT_INTENT_CLASSIFIER: ClassifierChain[Intent] = ClassifierChain(
    RuleIntentClassifier()
)


def join_texts(incoming: str | None, reply: str | None) -> str:
    """Trim both texts, join non-empty ones with one space, lower-case."""
    parts = [p.strip() for p in (incoming, reply) if p and p.strip()]
    return " ".join(parts).lower()


def classify_intent(
    text: str | None,
    reply: str | None = None,
    *,
    classifier: IntentClassifier | None = None,
) -> Intent:
    """Classify one text, or an (incoming, reply) pair.

    With a single argument the text is classified directly; blank input
    is ``unknown``.

    With *reply* given, *text* is the incoming message. The reply is
    classified first, because it carries what the user is actually
    saying. If the reply alone yields ``unknown`` (or is empty), the
    trimmed, space-joined, lower-cased combination of both texts is
    classified instead.

    This is not plain concatenation: classifying only the joined text
    would let a greeting in the incoming message win over the reply
    ("Hola, ¿cómo estás?" + "gracias amigo" would be ``greeting``, here
    it is ``thanks``).
    """
    chain = classifier or DEFAULT_INTENT_CLASSIFIER

    if reply is None:
        if text is None or not text.strip():
            return Intent.UNKNOWN
        return chain.predict(text) or Intent.UNKNOWN

    own = reply.strip().lower()
    if own:
        intent = chain.predict(own)
        if intent is not None and intent != Intent.UNKNOWN:
            return Intent(intent)

    combined = join_texts(text, reply)
    if not combined:
        return Intent.UNKNOWN
    return chain.predict(combined) or Intent.UNKNOWN
