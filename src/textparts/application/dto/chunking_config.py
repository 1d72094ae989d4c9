"""Chunking configuration DTO."""

from dataclasses import dataclass

from textparts.domain.checks import require_strictly_positive
from textparts.domain.value_objects import ChunkingStrategy, Delimiter


@dataclass
class ChunkingConfig:
    """Configuration for text chunking."""

    chunk_size: int
    strategy: ChunkingStrategy
    delimiter: str | None = None
    retain_delimiter: bool = False

    def __post_init__(self) -> None:
        require_strictly_positive(
            self.chunk_size, f"chunk_size must be > 0, got {self.chunk_size}"
        )
        if self.delimiter is not None:
            Delimiter(self.delimiter)
