"""Application ports - interfaces for chunking adapters."""

from textparts.application.ports.chunker import Chunker

__all__ = ["Chunker"]
