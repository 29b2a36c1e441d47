"""Parser and dispatch wiring for the packguard entrypoint."""
