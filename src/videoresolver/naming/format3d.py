"""3D format token detection."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from videoresolver.naming.base import NamingOptions


@dataclass(frozen=True)
class Format3DResult:
    """3D markers found in a name."""

    is_3d: bool = False
    format_3d: Optional[str] = None
    tokens: Tuple[str, ...] = ()
    """Raw tokens that matched, in name order (used to clean the name)."""


def split_tokens(name: str, delimiters: str) -> list[str]:
    """Split *name* on any of *delimiters*, dropping empty tokens."""
    pattern = "[" + re.escape(delimiters) + "]+"
    return [token for token in re.split(pattern, name) if token]


def parse_3d_format(name: str, options: NamingOptions) -> Format3DResult:
    """Find 3D markers in *name*.

    A format token (``hsbs``, ``tab``, ...) marks the name as 3D and sets the
    format; a bare ``3d`` token only sets the flag. The last format token
    wins. Matching is case-insensitive but the raw token is returned.
    """
    format_tokens = {token.lower() for token in options.format_3d_tokens}
    flag = options.flag_3d_token.lower()

    is_3d = False
    format_3d: Optional[str] = None
    matched: list[str] = []
    for token in split_tokens(name, options.delimiters):
        lowered = token.lower()
        if lowered in format_tokens:
            is_3d = True
            format_3d = token
            matched.append(token)
        elif lowered == flag:
            is_3d = True
            matched.append(token)

    return Format3DResult(is_3d=is_3d, format_3d=format_3d, tokens=tuple(matched))
