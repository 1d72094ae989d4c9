"""Small string helpers."""

from textparts.domain.checks import require_non_null
from textparts.domain.exceptions import InvalidArgument


def substring(s: str, start: int, end: int) -> str:
    """Return ``s[start:end]``, running to the end of ``s`` when ``end`` overshoots.

    Raises InvalidArgument if ``start`` is negative or past the end of ``s``,
    or if ``end`` is before ``start``.
    """
    require_non_null(s, "Text must not be None")
    if start < 0 or start > len(s):
        raise InvalidArgument(f"start {start} out of range for length {len(s)}")
    if end < start:
        raise InvalidArgument(f"end {end} is before start {start}")
    return s[start:end]


def is_repetition_of(s: str, base: str) -> bool:
    """Check whether ``s`` is ``base`` repeated one or more times."""
    require_non_null(s, "Text must not be None")
    require_non_null(base, "Base must not be None")
    n, m = len(s), len(base)
    if m == 0 or m > n or n % m != 0:
        return False
    return all(s[i] == base[i % m] for i in range(n))
