"""Domain exceptions."""


class TextPartsError(Exception):
    """Base exception for textparts."""

    pass


class NullInput(TextPartsError, TypeError):
    """A required argument was None."""

    pass


class InvalidArgument(TextPartsError, ValueError):
    """An argument is outside of its accepted range."""

    pass
