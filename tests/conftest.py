"""Pytest fixtures for textparts tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.config import get_settings
from textparts.domain.value_objects import ChunkingStrategy


@pytest.fixture
def fixed_config() -> ChunkingConfig:
    """Default config for FixedChunker tests."""
    return ChunkingConfig(chunk_size=3, strategy=ChunkingStrategy.FIXED)


@pytest.fixture
def delimited_config() -> ChunkingConfig:
    """Comma-delimited config for DelimitedChunker tests (delimiter dropped)."""
    return ChunkingConfig(
        chunk_size=5,
        strategy=ChunkingStrategy.DELIMITED,
        delimiter=",",
    )


@pytest.fixture
def clean_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Clear TEXTPARTS_* env vars and the settings cache around a test."""
    for var in (
        "TEXTPARTS_CHUNK_SIZE",
        "TEXTPARTS_STRATEGY",
        "TEXTPARTS_DELIMITER",
        "TEXTPARTS_RETAIN_DELIMITER",
        "TEXTPARTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
