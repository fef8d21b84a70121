"""
Input Token Normalization
-------------------------

Turns a flat stream of whitespace-delimited tokens into
``(unit, value, unit)`` triples.

Steps:
  1) strip each token and drop commas ("1,000" -> "1000")
  2) reject anything but letters, digits, "." and "-"
  3) split joined value+unit tokens at the first letter ("250m" -> "m", "250")
  4) group into triples, padding the last with ""
  5) swap the first two elements when a triple starts with a number

Examples:
  >>> normalize_tokens(["250m", "ft"])
  [('m', '250', 'ft')]

  >>> normalize_tokens(["3", "yd", "m", "ft", "1", "in"])
  [('yd', '3', 'm'), ('ft', '1', 'in')]
"""

import re
import select
import sys
from typing import IO, Iterable, List, Optional, Tuple

from ckconv.utils.errors import MalformedInputError

Triple = Tuple[str, str, str]

_NUMBER = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_NUMERIC_ONLY = re.compile(r"[0-9.\-]+")

# Seconds to wait for a writer that has not flushed yet ("echo 10 yd | ckconv m")
PIPE_WAIT = 0.1


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def clean_token(token: str) -> str:
    return token.strip().replace(",", "")


def validate_number(number: str, token: str) -> str:
    """Check a numeric run: one optional leading sign, at most one decimal point.

    Raises:
        MalformedInputError: with a reason naming the problem
    """
    if number.count(".") > 1:
        raise MalformedInputError(token, "contains more than one decimal point")
    if "-" in number[1:] or number.count("-") > 1:
        raise MalformedInputError(token, "has a misplaced sign")
    if not _NUMBER.fullmatch(number):
        raise MalformedInputError(token, "is not a valid number")
    return number


def validate_unit(unit: str, token: str) -> str:
    if not unit.isalpha():
        raise MalformedInputError(token, "is invalid")
    return unit


def split_token(token: str) -> List[str]:
    """Validate one token and split it into one or two tokens.

    Examples:
        >>> split_token("250m")
        ['m', '250']
        >>> split_token("-1.5km")
        ['km', '-1.5']
        >>> split_token("yards")
        ['yards']
    """
    s = clean_token(token)

    for c in s:
        if not (c.isalpha() or _is_digit(c) or c in ".-"):
            raise MalformedInputError(s, "contains unexpected characters")

    has_digit = any(_is_digit(c) for c in s)
    has_alpha = any(c.isalpha() for c in s)

    if has_digit and has_alpha:
        alpha_pos = next(i for i, c in enumerate(s) if c.isalpha())
        number, unit = s[:alpha_pos], s[alpha_pos:]
        if any(_is_digit(c) for c in unit):
            raise MalformedInputError(s, "is invalid")
        return [validate_unit(unit, s), validate_number(number, s)]

    if has_digit:
        return [validate_number(s, s)]

    return [validate_unit(s, s)]


def expand_tokens(tokens: Iterable[str]) -> List[str]:
    """Split every raw token, dropping empty ones, preserving order."""
    expanded: List[str] = []
    for raw in tokens:
        for token in str(raw).split():
            if clean_token(token):
                expanded.extend(split_token(token))
    return expanded


def is_numeric(token: str) -> bool:
    return bool(token) and _NUMERIC_ONLY.fullmatch(token) is not None


def group_triples(tokens: List[str]) -> List[Triple]:
    """Group a flat token list into (unit, value, unit) triples.

    Examples:
        >>> group_triples(["m", "250", "ft", "yd"])
        [('m', '250', 'ft'), ('yd', '', '')]
        >>> group_triples(["250", "m", "ft"])
        [('m', '250', 'ft')]
    """
    triples: List[Triple] = []
    for i in range(0, len(tokens), 3):
        chunk = list(tokens[i:i + 3])
        chunk += [""] * (3 - len(chunk))
        if is_numeric(chunk[0]):
            chunk[0], chunk[1] = chunk[1], chunk[0]
        triples.append((chunk[0], chunk[1], chunk[2]))
    return triples


def normalize_tokens(tokens: Iterable[str]) -> List[Triple]:
    """Expand and group raw tokens into conversion triples.

    Raises:
        MalformedInputError: the first malformed token aborts the batch
    """
    return group_triples(expand_tokens(tokens))


def has_pending_input(stream: IO[str], timeout: float = PIPE_WAIT) -> bool:
    """True when ``stream`` has data (or EOF) ready to read within ``timeout`` seconds.

    Streams without a file descriptor, such as ``io.StringIO``, are always ready.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return True
    try:
        ready, _, _ = select.select([fd], [], [], timeout)
    except (OSError, ValueError):
        # select() only accepts sockets on Windows
        return True
    return bool(ready)


def read_piped_tokens(stream: Optional[IO[str]] = None) -> List[str]:
    """Whitespace-delimited tokens piped into ``stream`` (stdin by default).

    Returns an empty list when the stream is an interactive terminal, or an
    open pipe nobody has written to.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None or stream.closed or stream.isatty():
        return []
    if not has_pending_input(stream):
        return []
    return stream.read().split()


__all__ = [
    "Triple",
    "clean_token",
    "validate_number",
    "validate_unit",
    "split_token",
    "expand_tokens",
    "is_numeric",
    "group_triples",
    "normalize_tokens",
    "PIPE_WAIT",
    "has_pending_input",
    "read_piped_tokens",
]
