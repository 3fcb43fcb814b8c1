"""String helpers for command parsing: prefix matching, tokens, integers."""

from __future__ import annotations

_DIGITS = "0123456789"
_ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare ``s2`` against the command word ``s1`` case-insensitively.

    The first ``n`` characters of ``s1`` are mandatory; the rest are optional.
    Returns 0 when ``s2`` is an accepted abbreviation of ``s1``, a negative or
    positive number otherwise.
    """
    if n <= 0:
        raise ValueError("mandatory length must be positive")
    if len(s1) < n:
        raise ValueError("mandatory length exceeds the command word")
    if not s2:
        return -1
    for i, ch1 in enumerate(s1):
        if i == len(s2):
            return 1 if i < n else 0
        a = ch1.lower() if ch1.isascii() else ch1
        b = s2[i].lower() if s2[i].isascii() else s2[i]
        if a != b:
            return ord(a) - ord(b)
    return len(s1) - len(s2)


def get_token(
    text: str, pos: int = 0, delimiter: str = " "
) -> tuple[str, int | None]:
    """Return the next token of ``text`` from ``pos`` and the position past it.

    Leading delimiters are skipped. The position is ``None`` when the token
    runs to the end of the text or when no token is left, in which case the
    token is the empty string.
    """
    begin = pos
    while begin < len(text) and text[begin] == delimiter:
        begin += 1
    if begin >= len(text):
        return "", None
    end = text.find(delimiter, begin)
    if end == -1:
        return text[begin:], None
    return text[begin:end], end


def parse_int(text: str) -> int:
    """Parse a decimal integer with an optional leading minus sign.

    Raises ValueError if ``text`` is not such a number.
    """
    body = text[1:] if text.startswith("-") else text
    if not body or any(ch not in _DIGITS for ch in body):
        raise ValueError(f"not an integer: {text!r}")
    value = int(body)
    return -value if text.startswith("-") else value


def is_valid_var_name(text: str) -> bool:
    """Tell whether ``text`` starts with [a-zA-Z_] followed by [a-zA-Z0-9_]."""
    if not text:
        return False
    head, rest = text[0], text[1:]
    if head not in _ASCII_LETTERS and head != "_":
        return False
    return all(ch in _ASCII_LETTERS or ch in _DIGITS or ch == "_" for ch in rest)