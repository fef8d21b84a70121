"""Shared text normalization utilities.

Used by the unit resolver for case-insensitive name comparison and by the
fuzzy suggestion index.
"""

import re
import unicodedata

_METRE = re.compile("metre", re.IGNORECASE)


def normalize_name(s: str) -> str:
    """Normalization for case-insensitive comparison.

    Transformations:
      1. Unicode normalization (NFKC)
      2. Lowercase
      3. Collapse whitespace and trim

    Examples:
        >>> normalize_name("  Nautical   Mile ")
        'nautical mile'

        >>> normalize_name("KILOMETER")
        'kilometer'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFKC", s)
    s = s.lower()
    s = re.sub(r"\s+", " ", s).strip()
    return s


def normalize_quotes(s: str) -> str:
    """Normalize typographic quotes and primes to ASCII quotes.

    Lets the foot (') and inch (") symbols be typed with smart quotes.

    Examples:
        >>> normalize_quotes("’")
        "'"

        >>> normalize_quotes("”")
        '"'
    """
    s = s.replace("‘", "'").replace("’", "'").replace("′", "'")
    s = s.replace("“", '"').replace("”", '"').replace("″", '"')
    return s


def change_metre_to_meter(s: str) -> str:
    """Replace the first occurrence of 'metre', ignoring case, with 'meter'.

    Examples:
        >>> change_metre_to_meter("Kilometres")
        'Kilometers'

        >>> change_metre_to_meter("metre")
        'meter'

        >>> change_metre_to_meter("yard")
        'yard'
    """
    return _METRE.sub("meter", s, count=1)


def strip_plural(s: str) -> str:
    """Drop a single trailing 's' from an already-normalized name."""
    return s[:-1] if s.endswith("s") else s


__all__ = [
    "normalize_name",
    "normalize_quotes",
    "change_metre_to_meter",
    "strip_plural",
]
