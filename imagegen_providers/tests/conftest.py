"""Pytest configuration for the providers test suite.

Keeps tests hermetic: provider environment variables, ``.env`` loading and
config caches are reset around every test, and pooled HTTP clients are closed.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from imagegen_providers.base.http import close_all_clients
from imagegen_providers.config import reset_config_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip provider env vars and config caches so tests never see host settings."""
    for name in list(os.environ):
        if name.startswith(("MODELSCOPE_", "IMAGEGEN_")):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture(autouse=True)
def close_http_clients() -> Iterator[None]:
    yield
    close_all_clients()
