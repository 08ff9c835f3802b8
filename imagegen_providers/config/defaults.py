"""imagegen_providers.config.defaults
==================================

Central place for small, stable default values used across the
imagegen_providers package and its CLI. These defaults can be overridden via
environment variables or external configuration.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- ModelScope ----
MODELSCOPE_PROVIDER_ID = "modelscope"
MODELSCOPE_DISPLAY_NAME = "ModelScope"
MODELSCOPE_DEFAULT_BASE_URL = "https://api-inference.modelscope.cn/v1"
MODELSCOPE_DEFAULT_MODEL = "Tongyi-MAI/Z-Image-Turbo"
MODELSCOPE_DEFAULT_STEPS = 9
MODELSCOPE_MAX_POLL_ATTEMPTS = 35
MODELSCOPE_POLL_INTERVAL_SECONDS = 3.0

# ---- Auth ----
# Shortest token accepted before any network call is attempted.
MIN_TOKEN_LENGTH = 8

# ---- CLI Defaults ----
CLI_DEFAULT_PROVIDER = MODELSCOPE_PROVIDER_ID
CLI_DEFAULT_WIDTH = 1024
CLI_DEFAULT_HEIGHT = 1024

__all__ = [
    "MODELSCOPE_PROVIDER_ID",
    "MODELSCOPE_DISPLAY_NAME",
    "MODELSCOPE_DEFAULT_BASE_URL",
    "MODELSCOPE_DEFAULT_MODEL",
    "MODELSCOPE_DEFAULT_STEPS",
    "MODELSCOPE_MAX_POLL_ATTEMPTS",
    "MODELSCOPE_POLL_INTERVAL_SECONDS",
    "MIN_TOKEN_LENGTH",
    "CLI_DEFAULT_PROVIDER",
    "CLI_DEFAULT_WIDTH",
    "CLI_DEFAULT_HEIGHT",
]
