"""Environment setup, output suppression, and logging for polyreply.

setup_environment() should be called before litellm is imported so that
its telemetry and advisory output stay out of an interactive CLI.
"""

import contextlib
import io
import logging
import os
import sys
import threading
import warnings
from collections.abc import Generator
from typing import TextIO

LOGGER = logging.getLogger("polyreply")

_SUPPRESS_LOCK = threading.Lock()
_suppress_depth = 0
_saved_streams: tuple[TextIO, TextIO] | None = None


def setup_environment() -> None:
    """Configure warning filters and env vars before backend imports."""
    warnings.filterwarnings("ignore", category=DeprecationWarning)
    warnings.filterwarnings("ignore", category=FutureWarning)

    os.environ.setdefault("LITELLM_LOG", "ERROR")
    os.environ.setdefault("LITELLM_TELEMETRY", "False")
    os.environ["TOKENIZERS_PARALLELISM"] = "false"


@contextlib.contextmanager
def suppress_output() -> Generator[None, None, None]:
    """Hide backend prints while translation requests are in flight.

    ``sys.stdout``/``sys.stderr`` are process-wide, so overlapping calls
    from worker threads share one redirect: the first entry swaps the
    streams and only the last exit restores them.
    """
    global _suppress_depth, _saved_streams

    with _SUPPRESS_LOCK:
        if _suppress_depth == 0:
            _saved_streams = (sys.stdout, sys.stderr)
            sys.stdout = io.StringIO()
            sys.stderr = io.StringIO()
        _suppress_depth += 1
    try:
        yield
    finally:
        with _SUPPRESS_LOCK:
            _suppress_depth -= 1
            if _suppress_depth == 0 and _saved_streams is not None:
                sys.stdout, sys.stderr = _saved_streams
                _saved_streams = None
