"""Tests for polyreply.ui: pure renderers."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel

from polyreply.core.types import Intent, ReplyResult, Tone
from polyreply.ui import (
    render_classification,
    render_labels,
    render_reply_panel,
    result_to_dict,
)


def _result(**overrides: object) -> ReplyResult:
    base = dict(
        intent=Intent.THANKS,
        tone=Tone.FRIENDLY,
        user_language="en",
        send_language="es",
        styled_reply_in_user_language="Thanks!",
        final_reply_to_send="¡Gracias!",
    )
    base.update(overrides)
    return ReplyResult(**base)  # type: ignore[arg-type]


def _plain(renderable: object) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestResultToDict:
    def test_plain_values(self) -> None:
        data = result_to_dict(_result())
        assert data == {
            "intent": "thanks",
            "tone": "friendly",
            "user_language": "en",
            "send_language": "es",
            "styled_reply_in_user_language": "Thanks!",
            "final_reply_to_send": "¡Gracias!",
            "translation_error": "",
        }
        assert type(data["intent"]) is str


class TestRenderReplyPanel:
    def test_cross_language_title(self) -> None:
        panel = render_reply_panel(_result())
        assert isinstance(panel, Panel)
        assert panel.title == "Reply en -> es"
        text = _plain(panel)
        assert "You (English): Thanks!" in text
        assert "Send (Spanish): ¡Gracias!" in text

    def test_same_language_title(self) -> None:
        panel = render_reply_panel(_result(send_language="en-US"))
        assert panel.title == "Reply"

    def test_translation_error_shown(self) -> None:
        result = _result(send_language="en", translation_error="timeout")
        text = _plain(render_reply_panel(result))
        assert "Translation failed" in text
        assert "timeout" in text


class TestRenderOthers:
    def test_labels(self) -> None:
        assert render_labels(Intent.LOVE, Tone.CASUAL).plain == (
            "Intent: love | Tone: casual"
        )

    def test_classification(self) -> None:
        text = _plain(
            render_classification("hola", Intent.GREETING, Tone.NEUTRAL, 1, "es")
        )
        assert "greeting" in text
        assert "1/10" in text
        assert "es" in text
