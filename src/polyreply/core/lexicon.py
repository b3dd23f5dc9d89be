"""Immutable lexicon tables loaded from the JSON files in ``core/data``.

Every table is read once per process and frozen: tuples for ordered
lists, ``MappingProxyType`` for lookups, pre-compiled regexes for
patterns. Classifiers, the slang transformer and the style engine only
ever read these structures, so they are safe to share across threads.
"""

import functools
import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Any, Literal

from polyreply.core.types import Intent, SlangEntry, Tone

Condition = Literal["always", "casual", "empathetic", "bro_context"]


@dataclass(frozen=True, slots=True)
class IntentRule:
    """One rule group: any matching pattern assigns *intent*."""

    intent: Intent
    regexes: tuple[re.Pattern[str], ...] = ()
    contains: tuple[str, ...] = ()
    prefixes: tuple[str, ...] = ()

    def matches(self, lowered: str) -> bool:
        if any(p in lowered for p in self.contains):
            return True
        if any(lowered.startswith(p) for p in self.prefixes):
            return True
        return any(r.search(lowered) for r in self.regexes)


@dataclass(frozen=True, slots=True)
class ToneLexicon:
    """Keyword lists feeding the tone signals."""

    positive: tuple[str, ...]
    negative: tuple[str, ...]
    apology: tuple[str, ...]
    support: tuple[str, ...]
    laugh: tuple[str, ...]
    formal_markers: tuple[str, ...]
    slang_pattern: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class InjectionRule:
    """Append one of *phrases* with probability *chance* when *when* holds."""

    when: Condition
    chance: float
    phrases: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SlangTable:
    """Normalisation entries and injection rules for one language."""

    language: str
    entries: tuple[SlangEntry, ...]
    injections: Mapping[str, tuple[InjectionRule, ...]]

    def rules_for(self, intent: str) -> tuple[InjectionRule, ...]:
        """Rules for *intent*, or the language's ``default`` rules."""
        if intent in self.injections:
            return self.injections[intent]
        return self.injections.get("default", ())


@dataclass(frozen=True, slots=True)
class SlangLexicon:
    """All slang tables plus the shared context markers."""

    tables: Mapping[str, SlangTable]
    fallback_language: str
    bro_markers: tuple[str, ...]
    casual_tones: frozenset[Tone]

    def table_for(self, language: str) -> SlangTable:
        return self.tables.get(language, self.tables[self.fallback_language])


@dataclass(frozen=True, slots=True)
class StyleLexicon:
    """Reply templates and decoration tables for the style engine."""

    templates: Mapping[str, Mapping[str, Mapping[str, str]]]
    tone_families: Mapping[str, str]
    greeting_patterns: Mapping[str, re.Pattern[str]]
    intent_emoji: Mapping[str, str]
    tone_emoji: Mapping[str, str]

    @property
    def rich_languages(self) -> frozenset[str]:
        return frozenset(self.templates)


def _read(name: str) -> dict[str, Any]:
    path = resources.files("polyreply.core").joinpath("data", name)
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _freeze(mapping: dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(
        {
            k: _freeze(v) if isinstance(v, dict) else v
            for k, v in mapping.items()
        }
    )


@functools.cache
def intent_rules() -> tuple[IntentRule, ...]:
    """Intent rule groups in evaluation (priority) order."""
    data = _read("intents.json")
    return tuple(
        IntentRule(
            intent=Intent(raw["intent"]),
            regexes=tuple(re.compile(p) for p in raw.get("regex", [])),
            contains=tuple(raw.get("contains", [])),
            prefixes=tuple(raw.get("prefixes", [])),
        )
        for raw in data["rules"]
    )


@functools.cache
def tone_lexicon() -> ToneLexicon:
    data = _read("tone.json")
    markers = sorted(data["slang_markers"], key=len, reverse=True)
    slang_pattern = re.compile(
        r"\b(?:" + "|".join(re.escape(m) for m in markers) + r")\b"
    )
    return ToneLexicon(
        positive=tuple(data["positive"]),
        negative=tuple(data["negative"]),
        apology=tuple(data["apology"]),
        support=tuple(data["support"]),
        laugh=tuple(data["laugh"]),
        formal_markers=tuple(data["formal_markers"]),
        slang_pattern=slang_pattern,
    )


@functools.cache
def slang_lexicon() -> SlangLexicon:
    data = _read("slang.json")
    tables: dict[str, SlangTable] = {}
    for language, raw in data["languages"].items():
        injections = {
            intent: tuple(
                InjectionRule(
                    when=rule["when"],
                    chance=float(rule["chance"]),
                    phrases=tuple(rule["phrases"]),
                )
                for rule in rules
            )
            for intent, rules in raw.get("injections", {}).items()
        }
        tables[language] = SlangTable(
            language=language,
            entries=tuple(SlangEntry(s, m) for s, m in raw.get("entries", [])),
            injections=MappingProxyType(injections),
        )
    return SlangLexicon(
        tables=MappingProxyType(tables),
        fallback_language=data["fallback_language"],
        bro_markers=tuple(data["bro_markers"]),
        casual_tones=frozenset(Tone(t) for t in data["casual_tones"]),
    )


@functools.cache
def style_lexicon() -> StyleLexicon:
    data = _read("templates.json")
    return StyleLexicon(
        templates=_freeze(data["templates"]),
        tone_families=_freeze(data["tone_families"]),
        greeting_patterns=MappingProxyType(
            {
                lang: re.compile(pattern)
                for lang, pattern in data["greeting_patterns"].items()
            }
        ),
        intent_emoji=_freeze(data["intent_emoji"]),
        tone_emoji=_freeze(data["tone_emoji"]),
    )


def slang_entries(language: str) -> tuple[SlangEntry, ...]:
    """Ordered normalisation entries for *language* (English if unknown)."""
    return slang_lexicon().table_for(language).entries
