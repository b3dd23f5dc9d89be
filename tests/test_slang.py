"""Tests for polyreply.core.slang: normalisation and probabilistic injection."""

from __future__ import annotations

from polyreply.core.lexicon import slang_lexicon
from polyreply.core.slang import append_phrase, inject_slang, make_rng, normalize
from polyreply.core.types import Intent, Tone

from conftest import FakeRandom


class TestNormalize:
    def test_replaces_whole_words(self) -> None:
        assert normalize("en", "ngl u r cool") == "not going to lie you r cool"

    def test_case_insensitive(self) -> None:
        assert normalize("en", "NGL that was fun") == "not going to lie that was fun"

    def test_substrings_untouched(self) -> None:
        assert normalize("en", "under the umbrella") == "under the umbrella"

    def test_spanish_table(self) -> None:
        assert normalize("es", "tqm amigo") == "te quiero mucho amigo"

    def test_region_subtag_ignored(self) -> None:
        assert normalize("fr-CA", "dsl pour hier") == "désolé pour hier"

    def test_unknown_language_uses_english(self) -> None:
        assert normalize("ja", "thx") == "thanks"

    def test_entries_apply_in_order(self) -> None:
        # "tysm" is listed before "ty" and must not become "thank yousm"
        assert normalize("en", "tysm") == "thank you so much"

    def test_empty(self) -> None:
        assert normalize("en", "") == ""

    def test_lexicon_not_mutated(self) -> None:
        before = slang_lexicon().table_for("en").entries
        normalize("en", "brb gonna eat")
        assert slang_lexicon().table_for("en").entries == before


class TestInjectSlang:
    def test_formal_never_injects(self) -> None:
        rng = FakeRandom(draws=[0.0])
        text = "Thank you, I genuinely appreciate your help and time. 🙏"
        assert inject_slang("en", text, Tone.FORMAL, Intent.THANKS, rng) == text
        assert rng.random_calls == 0

    def test_casual_thanks_injects_below_chance(self) -> None:
        rng = FakeRandom(draws=[0.1], picks=[0])
        out = inject_slang("en", "Thanks!", Tone.FRIENDLY, Intent.THANKS, rng)
        assert out == "Thanks! ngl you’re a real one 🙌"

    def test_draw_at_or_above_chance_leaves_text(self) -> None:
        rng = FakeRandom(draws=[0.6])
        out = inject_slang("en", "Thanks!", Tone.CASUAL, Intent.THANKS, rng)
        assert out == "Thanks!"
        assert rng.integer_calls == []

    def test_bro_context_always_fires(self) -> None:
        rng = FakeRandom(picks=[2])
        out = inject_slang("en", "love you bro", Tone.NEUTRAL, Intent.LOVE, rng)
        assert out == "love you bro no cap"
        assert rng.random_calls == 0
        assert rng.integer_calls == [4]

    def test_condition_not_met(self) -> None:
        rng = FakeRandom(draws=[0.0])
        out = inject_slang("en", "love you", Tone.NEUTRAL, Intent.LOVE, rng)
        assert out == "love you"
        assert rng.random_calls == 0

    def test_empathetic_apology(self) -> None:
        rng = FakeRandom(draws=[0.2])
        out = inject_slang("fr", "Désolé.", Tone.EMPATHETIC, Intent.APOLOGY, rng)
        assert out == "Désolé. j’avoue c’était pas ouf 😅"

    def test_default_rules_for_other_intents(self) -> None:
        rng = FakeRandom(draws=[0.1], picks=[2])
        out = inject_slang("es", "Nos vemos.", Tone.CASUAL, Intent.FAREWELL, rng)
        assert out == "Nos vemos. todo chill 😎"

    def test_unknown_language_uses_english(self) -> None:
        rng = FakeRandom(draws=[0.0], picks=[0])
        out = inject_slang("ja", "ok", Tone.CASUAL, Intent.UNKNOWN, rng)
        assert out == "ok ngl"

    def test_string_labels_accepted(self) -> None:
        rng = FakeRandom(draws=[0.0], picks=[0])
        out = inject_slang("es", "Gracias", "friendly", "thanks", rng)
        assert out == "Gracias de pana 🙏"

    def test_empty_text(self) -> None:
        assert inject_slang("en", "", Tone.CASUAL, Intent.THANKS, FakeRandom()) == ""

    def test_seeded_rng_is_repeatable(self) -> None:
        outs = {
            inject_slang("en", "nice", Tone.CASUAL, Intent.CONGRATS, make_rng(7))
            for _ in range(5)
        }
        assert len(outs) == 1

    def test_at_most_one_phrase(self) -> None:
        rng = FakeRandom(draws=[0.0] * 5, picks=[0] * 5)
        out = inject_slang("en", "gg", Tone.CASUAL, Intent.CONGRATS, rng)
        assert out == "gg you’re killing it 🔥"
        assert rng.random_calls == 1


class TestAppendPhrase:
    def test_space_joined(self) -> None:
        assert append_phrase("hi", "fr") == "hi fr"

    def test_empty_addition(self) -> None:
        assert append_phrase("hi", "") == "hi"
