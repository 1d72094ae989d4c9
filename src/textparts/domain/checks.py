"""Precondition helpers used to validate arguments before any work starts."""

from collections.abc import Callable
from typing import TypeVar

from textparts.domain.exceptions import InvalidArgument, NullInput

T = TypeVar("T")

ErrorSpec = str | Callable[[], BaseException] | None


def _fail(default: type[BaseException], error: ErrorSpec, message: str) -> BaseException:
    """Build the exception to raise for a failed check."""
    if error is None:
        return default(message)
    if isinstance(error, str):
        return default(error)
    return error()


def require_non_null(ref: T | None, error: ErrorSpec = None) -> T:
    """Return ``ref`` unchanged, raising NullInput when it is None.

    ``error`` is either a message for the default exception or a zero-argument
    callable producing the exception to raise instead.
    """
    if ref is None:
        raise _fail(NullInput, error, "Argument must not be None")
    return ref


def require_strictly_positive(x: int, error: ErrorSpec = None) -> int:
    """Return ``x`` unchanged, raising InvalidArgument when ``x <= 0``."""
    if x <= 0:
        raise _fail(InvalidArgument, error, f"Expected a value > 0, got {x}")
    return x


def require_positive(x: int, error: ErrorSpec = None) -> int:
    """Return ``x`` unchanged, raising InvalidArgument when ``x < 0``. Zero passes."""
    if x < 0:
        raise _fail(InvalidArgument, error, f"Expected a value >= 0, got {x}")
    return x
