"""Stub file detection.

A stub is a small marker file (``Movie (2009).dvd.disc``) standing in for
media stored elsewhere, typically on a physical disc. The token before the
stub extension names the kind of disc.
"""

from pathlib import PurePath

from videoresolver.models.naming import StubResult
from videoresolver.naming.base import NamingOptions


def stub_tokens(options: NamingOptions) -> set[str]:
    """Return every token that declares a stub kind."""
    return {token for tokens in options.stub_types.values() for token in tokens}


def resolve_stub(path: str, options: NamingOptions) -> StubResult:
    """Detect whether *path* is a stub file and which kind it declares.

    Args:
        path: File path to inspect.
        options: Naming options holding the stub extensions and kind rules.

    Returns:
        StubResult with ``is_stub`` False for ordinary files. A stub whose
        name carries no known kind token has ``stub_type`` None.
    """
    pure = PurePath(path)
    if pure.suffix.lower() not in options.stub_extensions:
        return StubResult()

    for token in reversed(pure.stem.split(".")):
        token = token.strip().lower()
        for stub_type, tokens in options.stub_types.items():
            if token in tokens:
                return StubResult(is_stub=True, stub_type=stub_type)

    return StubResult(is_stub=True)
