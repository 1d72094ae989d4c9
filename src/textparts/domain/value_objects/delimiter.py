"""Delimiter character that forces a chunk boundary."""

from dataclasses import dataclass

from textparts.domain.exceptions import InvalidArgument, NullInput


@dataclass(frozen=True)
class Delimiter:
    """Single delimiter character."""

    char: str

    def __post_init__(self) -> None:
        if self.char is None:
            raise NullInput("Delimiter must not be None")
        if len(self.char) != 1:
            raise InvalidArgument(
                f"Delimiter must be a single character, got {self.char!r}"
            )

    def __str__(self) -> str:
        return self.char
