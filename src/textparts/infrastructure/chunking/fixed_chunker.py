"""Fixed-length text chunker implementation."""

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.domain.chunking import fixed_chunks
from textparts.domain.value_objects import ChunkingStrategy
from textparts.logger import get_logger

logger = get_logger(__name__)


class FixedChunker:
    """Chunker cutting text into slices of exactly ``chunk_size`` characters."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[str]:
        """Split text into fixed-length chunks; the last one holds the remainder."""
        if config.strategy != ChunkingStrategy.FIXED:
            raise ValueError(f"Unsupported strategy: {config.strategy}")

        chunks = fixed_chunks(text, config.chunk_size)
        logger.debug(
            "text_chunked",
            strategy=str(config.strategy),
            text_length=len(text),
            chunk_count=len(chunks),
        )
        return chunks
