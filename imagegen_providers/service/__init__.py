"""Outer-layer entrypoints (CLI) built on top of the provider adapters."""
