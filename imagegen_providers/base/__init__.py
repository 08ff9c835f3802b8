"""Shared building blocks for image provider adapters.

Holds the error taxonomy, request/wire DTOs, value types, capability
protocols and the HTTP, logging and timeout infrastructure used by every
adapter.
"""
