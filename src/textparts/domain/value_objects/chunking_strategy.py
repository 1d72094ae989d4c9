"""Chunking strategy for text splitting."""

from enum import StrEnum


class ChunkingStrategy(StrEnum):
    """Supported chunking strategies."""

    FIXED = "fixed"
    DELIMITED = "delimited"
