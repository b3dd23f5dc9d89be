"""Language code helpers and a minimal script/keyword language guess."""

import re

from polyreply.core.constants import DEFAULT_USER_LANGUAGE, UNDETERMINED_LANGUAGE

_NAMES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "ta": "Tamil",
    "de": "German",
}

_SPANISH_ACCENTS = re.compile(r"[áéíóúñ]")
_FRENCH_ACCENTS = re.compile(r"[àâäçéèêëîïôœùûüÿ]")
_SPANISH_KEYWORDS = ("hola", "gracias", "bienvenido")
_FRENCH_KEYWORDS = ("bonjour", "merci")


def primary_language(code: str | None) -> str:
    """Return the lower-cased primary subtag of *code* (``"ES-419"`` -> ``"es"``).

    Blank or missing codes map to ``"und"``.
    """
    if code is None:
        return UNDETERMINED_LANGUAGE
    cleaned = code.strip().lower().replace("_", "-")
    if not cleaned:
        return UNDETERMINED_LANGUAGE
    return cleaned.split("-", 1)[0]


def codes_equal(a: str | None, b: str | None) -> bool:
    """Compare two language codes, ignoring case, whitespace and region."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return primary_language(a) == primary_language(b)


def language_name(code: str | None) -> str:
    """English display name for *code*; unknown codes read as English."""
    return _NAMES.get(primary_language(code), _NAMES[DEFAULT_USER_LANGUAGE])


def language_code(name_or_code: str | None) -> str:
    """Resolve a display name (``"Spanish"``) or code (``"es-ES"``) to a code.

    Unrecognised values fall back to English.
    """
    if not name_or_code or not name_or_code.strip():
        return DEFAULT_USER_LANGUAGE
    lowered = name_or_code.strip().lower()
    for code, name in _NAMES.items():
        if name.lower() in lowered:
            return code
    primary = primary_language(lowered)
    if primary in _NAMES:
        return primary
    return DEFAULT_USER_LANGUAGE


def guess_language(text: str | None) -> str:
    """Guess the language of *text* from script, accents and a few keywords.

    Only Tamil, Spanish and French are recognised. Anything else is
    ``"und"`` rather than English, so callers can decide the default.
    """
    if text is None or not text.strip():
        return UNDETERMINED_LANGUAGE

    stripped = text.strip()
    lower = stripped.lower()

    if any("\u0b80" <= ch <= "\u0bff" for ch in stripped):
        return "ta"

    if "¿" in stripped or "¡" in stripped:
        return "es"
    if _SPANISH_ACCENTS.search(lower):
        return "es"
    if any(word in lower for word in _SPANISH_KEYWORDS):
        return "es"

    if _FRENCH_ACCENTS.search(lower):
        return "fr"
    if any(word in lower for word in _FRENCH_KEYWORDS):
        return "fr"

    return UNDETERMINED_LANGUAGE
