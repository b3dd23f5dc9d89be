"""Terminal rendering for polyreply.

All render functions are pure: they take results and return Rich
renderables. No side effects, no mutation.
"""

from dataclasses import asdict
from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from polyreply.core.language import codes_equal, language_name
from polyreply.core.types import Intent, ReplyResult, Tone


def result_to_dict(result: ReplyResult) -> dict[str, Any]:
    """Plain-JSON view of a result (enum labels as strings)."""
    data = asdict(result)
    data["intent"] = str(result.intent)
    data["tone"] = str(result.tone)
    return data


def render_labels(intent: Intent, tone: Tone) -> Text:
    labels = Text()
    labels.append("Intent: ", style="bold")
    labels.append(str(intent), style="cyan")
    labels.append(" | ")
    labels.append("Tone: ", style="bold")
    labels.append(str(tone), style="cyan")
    return labels


def render_reply_panel(result: ReplyResult) -> Panel:
    """Render a pipeline result: labels, user-language preview, outgoing text."""
    body = render_labels(result.intent, result.tone)
    body.append("\n\n")
    body.append(f"You ({language_name(result.user_language)}): ", style="bold green")
    body.append(result.styled_reply_in_user_language)
    body.append("\n")
    body.append(f"Send ({language_name(result.send_language)}): ", style="bold magenta")
    body.append(result.final_reply_to_send)
    if result.translation_error:
        body.append("\n\n")
        body.append("Translation failed, sending in your language: ", style="yellow")
        body.append(result.translation_error, style="dim")

    title = "Reply"
    if not codes_equal(result.user_language, result.send_language):
        title = f"Reply {result.user_language} -> {result.send_language}"
    return Panel(body, title=title, padding=(0, 1))


def render_classification(
    text: str,
    intent: Intent,
    tone: Tone,
    formality: int,
    language: str,
) -> Table:
    """Render a classify-only report as a two-column grid."""
    table = Table.grid(expand=True, padding=(0, 1))
    table.add_column(justify="right", style="cyan")
    table.add_column()
    table.add_row("Text", text or "--")
    table.add_row("Intent", str(intent))
    table.add_row("Tone", str(tone))
    table.add_row("Formality", f"{formality}/10")
    table.add_row("Language", language)
    return table
