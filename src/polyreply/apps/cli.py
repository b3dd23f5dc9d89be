"""CLI entry point for polyreply.

Parses arguments, configures logging, and runs the requested command.
setup_environment() is called before the translator module is imported so
litellm picks up the quieter environment.

Subcommands:
    reply     classify, style and translate a reply to a message
    classify  show intent, tone and formality for a text
"""

import argparse
import logging
import os

from polyreply.core.constants import UNDETERMINED_LANGUAGE
from polyreply.core.types import AUTO_TONE, Tone


def _add_config_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config-file",
        default=None,
        help="JSON config file (default: ~/.config/polyreply/config.json)",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with subcommand support."""
    parser = argparse.ArgumentParser(
        description="Style, translate and slang-up replies to foreign-language messages"
    )
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    # `polyreply reply`
    reply_parser = subparsers.add_parser(
        "reply",
        help="Generate a styled reply, translated into the send language",
    )
    reply_parser.add_argument(
        "--incoming", default="", help="The message you are replying to"
    )
    reply_parser.add_argument(
        "--reply", required=True, help="Your reply, in your own language"
    )
    reply_parser.add_argument(
        "--user-lang",
        default=None,
        help="Your language, as a code or name (default: from config or en)",
    )
    reply_parser.add_argument(
        "--send-lang",
        default=None,
        help="Language to send in; 'auto' guesses it from --incoming "
        "(default: from config or auto)",
    )
    reply_parser.add_argument(
        "--tone",
        default=None,
        choices=[AUTO_TONE, *(t.value for t in Tone)],
        help="Tone override (default: from config or auto)",
    )
    reply_parser.add_argument(
        "--translate-model",
        default=None,
        help="LLM model for translation (e.g., ollama/llama3.2, openai/gpt-4o-mini). "
        "Falls back to translation.model in config.json.",
    )
    reply_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for slang injection (default: from config, else random)",
    )
    reply_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    _add_config_arg(reply_parser)

    # `polyreply classify`
    classify_parser = subparsers.add_parser(
        "classify",
        help="Show intent, tone and formality for a text",
    )
    classify_parser.add_argument("text", help="Text to classify")
    classify_parser.add_argument(
        "--reply",
        default=None,
        help="Optional reply; classifies the (text, reply) pair for intent",
    )
    return parser


def resolve_language(value: str) -> str:
    """Accept a display name ("Spanish") or pass a code through as given."""
    from polyreply.core.language import language_code, language_name

    code = language_code(value)
    if language_name(code).lower() == value.strip().lower():
        return code
    return value.strip()


def resolve_send_language(send: str, user: str, incoming: str) -> str:
    """Resolve ``auto`` from the incoming text, else the user language."""
    from polyreply.core.language import guess_language

    if send.strip().lower() != "auto":
        return resolve_language(send)
    guessed = guess_language(incoming)
    if guessed == UNDETERMINED_LANGUAGE:
        return user
    return guessed


def _run_reply(args: argparse.Namespace) -> int:
    """Run the reply pipeline once and print the result."""
    import asyncio
    import dataclasses

    from rich.console import Console

    from polyreply.apps.config import load_config
    from polyreply.apps.translate import LitellmTranslator
    from polyreply.core.engine import ReplyEngine, ReplyGenerationError
    from polyreply.core.env import LOGGER
    from polyreply.core.language import codes_equal
    from polyreply.core.slang import make_rng
    from polyreply.ui import render_reply_panel, result_to_dict

    config = load_config(args.config_file)

    user_language = resolve_language(args.user_lang or config.languages.user)
    send_language = resolve_send_language(
        args.send_lang or config.languages.send, user_language, args.incoming
    )

    translation = config.translation
    if args.translate_model:
        translation = dataclasses.replace(translation, model=args.translate_model)

    if not codes_equal(user_language, send_language) and not translation.model:
        parser = build_arg_parser()
        parser.error(
            f"sending in {send_language!r} needs a translation model; use "
            "--translate-model or set translation.model in config.json"
        )

    seed = args.seed if args.seed is not None else config.slang.seed
    engine = ReplyEngine(
        translator=LitellmTranslator.from_config(translation),
        rng=make_rng(seed) if seed is not None else None,
    )

    try:
        result = asyncio.run(
            engine.generate_reply(
                args.incoming,
                args.reply,
                user_language,
                send_language,
                args.tone or config.tone,
            )
        )
    except ReplyGenerationError as exc:
        LOGGER.error("%s", exc)
        return 1

    console = Console()
    if args.json:
        console.print_json(data=result_to_dict(result))
    else:
        console.print(render_reply_panel(result))
    return 0


def _run_classify(args: argparse.Namespace) -> int:
    """Classify a text (or text + reply pair) and print a report."""
    from rich.console import Console

    from polyreply.core.intent import classify_intent
    from polyreply.core.language import guess_language
    from polyreply.core.tone import classify_tone, formality_score
    from polyreply.ui import render_classification

    if args.reply is None:
        intent = classify_intent(args.text)
    else:
        intent = classify_intent(args.text, args.reply)
    tone_source = args.reply if args.reply is not None else args.text

    Console().print(
        render_classification(
            args.text,
            intent,
            classify_tone(tone_source),
            formality_score(tone_source),
            guess_language(args.text),
        )
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code."""
    from polyreply.core.env import setup_environment

    setup_environment()

    from rich.console import Console
    from rich.logging import RichHandler

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.subcommand == "classify":
        return _run_classify(args)

    return _run_reply(args)
