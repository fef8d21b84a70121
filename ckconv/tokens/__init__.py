"""Raw input tokens to conversion triples."""

from ckconv.tokens.tokenapi import (
    normalize_tokens,
    collect_tokens,
    read_piped_tokens,
)

__all__ = [
    "normalize_tokens",
    "collect_tokens",
    "read_piped_tokens",
]
