"""Default configuration values for polyreply."""

from typing import Final

DEFAULT_USER_LANGUAGE: Final = "en"
DEFAULT_SEND_LANGUAGE: Final = "auto"
UNDETERMINED_LANGUAGE: Final = "und"

FORMALITY_THRESHOLD: Final = 6
FORMALITY_MAX: Final = 10
GENERIC_STYLE_MAX_LENGTH: Final = 80

# Languages the bundled translator will send to a backend; others pass through.
TRANSLATABLE_LANGUAGES: Final = ("en", "es", "fr", "ta")

DEFAULT_TRANSLATION_MAX_TOKENS: Final = 512
DEFAULT_TRANSLATION_PROMPT: Final = (
    "Translate the user's chat message from {source} to {target}. Keep the "
    "meaning, register and every emoji exactly as they are. Do not add "
    "quotes, notes or explanations. Reply with only the translated message."
)

DEFAULT_CONFIG_DIR: Final = "~/.config/polyreply"
DEFAULT_CONFIG_DIR_ENV: Final = "POLYREPLY_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
DEFAULT_PROMPT_FILE: Final = "prompt.md"
