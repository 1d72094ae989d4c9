"""Chunkers: split text according to a ChunkingConfig."""

from textparts.infrastructure.chunking.delimited_chunker import DelimitedChunker
from textparts.infrastructure.chunking.fixed_chunker import FixedChunker
from textparts.infrastructure.chunking.registry import (
    get_chunker,
    split_text,
    supported_strategies,
)

__all__ = [
    "DelimitedChunker",
    "FixedChunker",
    "get_chunker",
    "split_text",
    "supported_strategies",
]
