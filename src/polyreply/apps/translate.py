"""LLM-backed translation collaborator.

Uses litellm for provider-agnostic LLM access (Ollama, OpenAI, Claude, etc.).
"""

from __future__ import annotations

import asyncio
from typing import Any

from polyreply.apps.config import TranslationConfig
from polyreply.core.constants import (
    DEFAULT_TRANSLATION_MAX_TOKENS,
    DEFAULT_TRANSLATION_PROMPT,
    TRANSLATABLE_LANGUAGES,
)
from polyreply.core.env import LOGGER, suppress_output
from polyreply.core.language import codes_equal, language_name, primary_language
from polyreply.core.types import TranslationResult


def is_translatable(code: str | None) -> bool:
    """True for codes the translator sends to the backend (``"es-419"`` too)."""
    return primary_language(code) in TRANSLATABLE_LANGUAGES


class LitellmTranslator:
    """Translate chat replies with a single LLM completion per request.

    Same-language and unsupported-language requests are returned
    unchanged without calling the backend.
    """

    __slots__ = ("model", "prompt", "max_tokens", "flags")

    def __init__(
        self,
        model: str | None,
        prompt: str | None = None,
        max_tokens: int = DEFAULT_TRANSLATION_MAX_TOKENS,
        flags: dict[str, Any] | None = None,
    ) -> None:
        self.model = model
        self.prompt = prompt or DEFAULT_TRANSLATION_PROMPT
        self.max_tokens = max_tokens
        self.flags = dict(flags or {})

    @classmethod
    def from_config(cls, config: TranslationConfig) -> LitellmTranslator:
        return cls(
            model=config.model,
            prompt=config.prompt,
            max_tokens=config.max_tokens,
            flags=config.flags,
        )

    def system_prompt(self, source: str, target: str) -> str:
        """Fill the ``{source}``/``{target}`` placeholders; other braces stay literal."""
        return self.prompt.replace("{source}", language_name(source)).replace(
            "{target}", language_name(target)
        )

    async def translate(
        self, source: str, target: str, text: str
    ) -> TranslationResult:
        """Translate *text* from *source* to *target*.

        The blocking litellm call runs in a worker thread so the event
        loop stays free.
        """
        model = self.model or ""
        if codes_equal(source, target):
            return TranslationResult(original=text, translated=text, model=model)
        if not is_translatable(source) or not is_translatable(target):
            LOGGER.debug("No translation for %s->%s; passing through", source, target)
            return TranslationResult(original=text, translated=text, model=model)
        if not model:
            return TranslationResult(
                original=text,
                translated="",
                model=model,
                error="no translation model configured",
            )
        return await asyncio.to_thread(self._complete, source, target, text)

    def _complete(self, source: str, target: str, text: str) -> TranslationResult:
        """Blocking completion call.

        Exceptions are captured in *result.error* rather than raised so that
        the reply pipeline can fall back to the user's language.
        """
        from litellm import completion  # deferred import

        try:
            with suppress_output():
                response = completion(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": self.system_prompt(source, target)},
                        {"role": "user", "content": text},
                    ],
                    max_tokens=self.max_tokens,
                    **self.flags,
                )
            content = (response.choices[0].message.content or "").strip()
        except Exception as exc:
            return TranslationResult(
                original=text,
                translated="",
                model=self.model or "",
                error=str(exc),
            )
        if not content:
            return TranslationResult(
                original=text,
                translated="",
                model=self.model or "",
                error="empty translation",
            )
        return TranslationResult(
            original=text,
            translated=content,
            model=self.model or "",
        )
