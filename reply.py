# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "polyreply",
# ]
#
# [tool.uv.sources]
# polyreply = { path = "." }
# ///
"""Standalone reply assistant: style, translate and slang-up chat replies."""

from polyreply.apps.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
