"""Domain value objects."""

from textparts.domain.value_objects.chunking_strategy import ChunkingStrategy
from textparts.domain.value_objects.delimiter import Delimiter

__all__ = [
    "ChunkingStrategy",
    "Delimiter",
]
