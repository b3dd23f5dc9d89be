__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from polyreply.api for convenience."""
    _api_names = {
        "Intent",
        "Tone",
        "ReplyResult",
        "ReplyEngine",
        "ReplyGenerationError",
        "classify_intent",
        "classify_tone",
        "is_likely_formal",
        "generate_reply",
    }
    if name in _api_names:
        from polyreply import api

        return getattr(api, name)
    raise AttributeError(f"module 'polyreply' has no attribute {name!r}")
