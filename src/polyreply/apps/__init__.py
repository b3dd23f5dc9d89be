"""Application layer: configuration, translation backend, and CLI."""
