"""textparts - length-bounded, delimiter-aware text chunking."""

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.domain.checks import (
    require_non_null,
    require_positive,
    require_strictly_positive,
)
from textparts.domain.chunking import delimited_chunks, fixed_chunks
from textparts.domain.exceptions import InvalidArgument, NullInput, TextPartsError
from textparts.domain.formatting import format_template
from textparts.domain.strings import is_repetition_of, substring
from textparts.domain.value_objects import ChunkingStrategy
from textparts.infrastructure.chunking import split_text

__version__ = "0.1.0"

__all__ = [
    "ChunkingConfig",
    "ChunkingStrategy",
    "InvalidArgument",
    "NullInput",
    "TextPartsError",
    "__version__",
    "delimited_chunks",
    "fixed_chunks",
    "format_template",
    "is_repetition_of",
    "require_non_null",
    "require_positive",
    "require_strictly_positive",
    "split_text",
    "substring",
]
