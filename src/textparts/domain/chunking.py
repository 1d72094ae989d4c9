"""Length-bounded and delimiter-aware text chunking."""

from textparts.domain.checks import require_non_null, require_strictly_positive
from textparts.domain.value_objects import Delimiter


def fixed_chunks(s: str, max_len: int) -> list[str]:
    """Split ``s`` into consecutive slices of ``max_len`` characters.

    The last slice holds whatever remains, so it may be shorter. An empty
    string yields an empty list.

    Example:
        >>> fixed_chunks("abcdefg", 3)
        ['abc', 'def', 'g']

    Raises:
        NullInput: if ``s`` is None.
        InvalidArgument: if ``max_len`` is not greater than zero.
    """
    require_non_null(s, "Text must not be None")
    require_strictly_positive(max_len, f"max_len must be > 0, got {max_len}")
    return [s[i : i + max_len] for i in range(0, len(s), max_len)]


def delimited_chunks(
    s: str,
    delimiter: str,
    max_len: int,
    retain_delimiter: bool = False,
) -> list[str]:
    """Split ``s`` on ``delimiter`` with no chunk longer than ``max_len``.

    A delimiter always closes the pending chunk, even a short one. A pending
    chunk that reaches ``max_len`` is cut before the next character is looked
    at, delimiter or not. Empty chunks are never emitted.

    With ``retain_delimiter`` every delimiter is emitted as its own
    one-character chunk, so ``"".join(result) == s``. Otherwise delimiters are
    dropped and ``"".join(result) == s.replace(delimiter, "")``.

    Example:
        >>> delimited_chunks("ab-cdefg-hij", "-", 4)
        ['ab', 'cdef', 'g', 'hij']
        >>> delimited_chunks("ab-cdefg-hij", "-", 4, retain_delimiter=True)
        ['ab', '-', 'cdef', 'g', '-', 'hij']

    Raises:
        NullInput: if ``s`` or ``delimiter`` is None.
        InvalidArgument: if ``max_len`` is not greater than zero or
            ``delimiter`` is not a single character.
    """
    require_non_null(s, "Text must not be None")
    require_non_null(delimiter, "Delimiter must not be None")
    require_strictly_positive(max_len, f"max_len must be > 0, got {max_len}")
    delimiter = Delimiter(delimiter).char

    n = len(s)
    parts: list[str] = []
    left = right = 0
    while right < n:
        if right - left >= max_len:
            parts.append(s[left:right])
            left = right
        if s[right] == delimiter:
            if right > left:
                parts.append(s[left:right])
            if retain_delimiter:
                parts.append(delimiter)
            right += 1
            left = right
        else:
            right += 1
    if left < n:
        parts.append(s[left:])
    return parts
