"""Registry: select chunker by strategy and split text with it."""

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.application.ports import Chunker
from textparts.domain.value_objects import ChunkingStrategy
from textparts.infrastructure.chunking.delimited_chunker import DelimitedChunker
from textparts.infrastructure.chunking.fixed_chunker import FixedChunker

# strategy -> chunker instance (chunkers are stateless)
_CHUNKERS_BY_STRATEGY: dict[ChunkingStrategy, Chunker] = {
    ChunkingStrategy.FIXED: FixedChunker(),
    ChunkingStrategy.DELIMITED: DelimitedChunker(),
}


def get_chunker(strategy: ChunkingStrategy | str | None) -> Chunker | None:
    """Return chunker for given strategy (enum or its value) or None."""
    if not strategy:
        return None
    try:
        return _CHUNKERS_BY_STRATEGY.get(ChunkingStrategy(strategy))
    except ValueError:
        return None


def split_text(text: str, config: ChunkingConfig) -> list[str]:
    """
    Select chunker by config.strategy, run it, return the chunks.
    Raises ValueError if no chunker is registered for the strategy.
    """
    chunker = get_chunker(config.strategy)
    if not chunker:
        raise ValueError(f"No chunker for strategy: {config.strategy}")
    return chunker.chunk(text, config)


def supported_strategies() -> list[str]:
    """Return list of supported strategy names."""
    return sorted(str(s) for s in _CHUNKERS_BY_STRATEGY)
