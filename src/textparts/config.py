"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textparts.application.dto.chunking_config import ChunkingConfig
from textparts.domain.value_objects import ChunkingStrategy


class Settings(BaseSettings):
    """Default chunking settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTPARTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking
    chunk_size: int = Field(default=512, gt=0, description="Maximum chunk length")
    strategy: ChunkingStrategy = Field(
        default=ChunkingStrategy.FIXED,
        description="Default chunking strategy",
    )
    delimiter: str | None = Field(
        default=None,
        description="Delimiter character for the delimited strategy",
    )
    retain_delimiter: bool = Field(
        default=False,
        description="Emit each delimiter as its own chunk",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("delimiter", mode="before")
    @classmethod
    def _blank_delimiter_to_none(cls, value: object) -> object:
        if value == "":
            return None
        return value

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value

    def chunking_config(self) -> ChunkingConfig:
        """Build a ChunkingConfig from these settings."""
        return ChunkingConfig(
            chunk_size=self.chunk_size,
            strategy=self.strategy,
            delimiter=self.delimiter,
            retain_delimiter=self.retain_delimiter,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
