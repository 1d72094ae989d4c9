"""Delimiter-aware text chunker implementation."""

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.domain.chunking import delimited_chunks, fixed_chunks
from textparts.domain.value_objects import ChunkingStrategy
from textparts.logger import get_logger

logger = get_logger(__name__)


class DelimitedChunker:
    """Chunker splitting on a delimiter while bounding chunk length."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[str]:
        """Split text on ``config.delimiter``; without one, cut by length only."""
        if config.strategy != ChunkingStrategy.DELIMITED:
            raise ValueError(f"Unsupported strategy: {config.strategy}")

        if config.delimiter is None:
            chunks = fixed_chunks(text, config.chunk_size)
        else:
            chunks = delimited_chunks(
                text,
                config.delimiter,
                config.chunk_size,
                retain_delimiter=config.retain_delimiter,
            )
        logger.debug(
            "text_chunked",
            strategy=str(config.strategy),
            delimiter=config.delimiter,
            retain_delimiter=config.retain_delimiter,
            text_length=len(text),
            chunk_count=len(chunks),
        )
        return chunks
