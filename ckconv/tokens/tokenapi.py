"""Input normalization API.

Public API for turning raw command-line / piped tokens into
``(unit, value, unit)`` conversion triples.
"""

from typing import IO, Iterable, List, Optional

from ckconv.tokens.tokennormalize import (
    Triple,
    normalize_tokens as _normalize_tokens,
    read_piped_tokens,
)
from ckconv.utils.result import Result, returns_result


def normalize_tokens(raw_tokens: Iterable[str]) -> Result[List[Triple]]:
    """Split and group raw tokens into conversion triples.

    Accepts ``<UNIT> <VALUE> <UNIT>``, ``<VALUE> <UNIT> <UNIT>`` and
    ``<VALUE><UNIT> <UNIT>`` forms, any number of times in a row.

    Args:
        raw_tokens: Whitespace-delimited tokens

    Returns:
        Result holding a list of (in_unit, value, out_unit) string triples,
        or a MalformedInput error for the first bad token

    Examples:
        >>> normalize_tokens(["250m", "ft"]).value
        [('m', '250', 'ft')]

        >>> normalize_tokens(["12.5.6m"]).kind
        <ErrorKind.MALFORMED_INPUT: 'MalformedInput'>
    """
    return returns_result(_normalize_tokens)(list(raw_tokens))


def collect_tokens(parameters: Iterable[str], stream: Optional[IO[str]] = None) -> List[str]:
    """Piped tokens first, then command-line parameters.

    Examples:
        >>> import io
        >>> collect_tokens(["ft"], io.StringIO("10 m\\n"))
        ['10', 'm', 'ft']
    """
    return read_piped_tokens(stream) + list(parameters)


__all__ = [
    "normalize_tokens",
    "collect_tokens",
    "read_piped_tokens",
]
