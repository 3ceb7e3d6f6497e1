"""Default filename-based name parser.

FilenameParser extracts a display name, production year, container, stub
and 3D information from a path using token rules only; it never touches
the filesystem.

Examples:
    ``Movie.Name.2020.mkv``         -> name "Movie Name", year 2020
    ``Avatar (2009) 3D HSBS.mkv``   -> name "Avatar", year 2009, 3D "HSBS"
    ``Alien (1979).bluray.disc``    -> stub of kind "bluray"
"""

import logging
import re
from pathlib import PurePath
from typing import Iterable, Optional, Self

from videoresolver.models.naming import StubResult, VideoFileInfo
from videoresolver.naming.base import NameParser
from videoresolver.naming.format3d import parse_3d_format
from videoresolver.naming.stubs import resolve_stub, stub_tokens

logger = logging.getLogger(__name__)

_SEPARATORS = r" ._\-\[\]\(\),"

# The greedy name group makes the *last* year win, so titles that start with
# a number ("2001 A Space Odyssey (1968)") keep it in the name.
YEAR_PATTERN = re.compile(
    rf"^(?P<name>.*[^{_SEPARATORS}])[{_SEPARATORS}]+"
    rf"(?P<year>(?:19|20)\d{{2}})(?=$|[{_SEPARATORS}])"
)

_WHITESPACE = re.compile(r"\s+")


def _remove_tokens(name: str, tokens: Iterable[str]) -> str:
    """Blank out whole-token occurrences of *tokens* in *name*."""
    for token in set(tokens):
        name = re.sub(
            rf"(?i)(?<![^{_SEPARATORS}]){re.escape(token)}(?![^{_SEPARATORS}])",
            ".",
            name,
        )
    return name


def _extract_name_and_year(raw: str) -> tuple[str, Optional[int]]:
    """Split *raw* into a cleaned display name and an optional year."""
    name = raw
    year: Optional[int] = None
    match = YEAR_PATTERN.match(raw)
    if match:
        name = match.group("name")
        year = int(match.group("year"))

    # Dotted scene names ("Movie.Name") use dots as word separators.
    if " " not in name.strip():
        name = name.replace(".", " ")
    name = _WHITESPACE.sub(" ", name.replace("_", " "))
    name = name.strip(" .-_[(,")
    return name, year


class FilenameParser(NameParser):
    """Parse video metadata from file and directory names."""

    def resolve_file(self: Self, path: str) -> Optional[VideoFileInfo]:
        """Parse metadata from a file path.

        Returns None for an empty path and for files that are neither a known
        video extension nor a stub.
        """
        pure = PurePath(path)
        if not path or not pure.name:
            return None

        extension = pure.suffix.lower()
        if extension in self.options.video_extensions:
            stub = StubResult()
        else:
            stub = resolve_stub(path, self.options)
            if not stub.is_stub:
                logger.debug("Unsupported extension %r for %s", extension, path)
                return None

        stem = pure.stem
        if stub.is_stub:
            tokens = stub_tokens(self.options)
            parts = stem.split(".")
            while len(parts) > 1 and parts[-1].strip().lower() in tokens:
                parts.pop()
            stem = ".".join(parts)

        return self._build_info(
            path,
            stem,
            container=extension.lstrip(".") or None,
            stub=stub,
            is_directory=False,
        )

    def resolve_directory(self: Self, path: str) -> Optional[VideoFileInfo]:
        """Parse metadata from a directory path.

        Only the last path component is considered. Returns None when it is
        empty.
        """
        if not path:
            return None
        name = PurePath(path).name
        if not name:
            return None
        return self._build_info(
            path, name, container=None, stub=StubResult(), is_directory=True
        )

    def _build_info(
        self: Self,
        path: str,
        raw_name: str,
        *,
        container: Optional[str],
        stub: StubResult,
        is_directory: bool,
    ) -> VideoFileInfo:
        format_3d = parse_3d_format(raw_name, self.options)
        cleaned = _remove_tokens(raw_name, format_3d.tokens)
        name, year = _extract_name_and_year(cleaned)
        if not name:
            name = raw_name

        return VideoFileInfo(
            path=path,
            name=name,
            year=year,
            container=container,
            is_stub=stub.is_stub,
            stub_type=stub.stub_type,
            is_3d=format_3d.is_3d,
            format_3d=format_3d.format_3d,
            is_directory=is_directory,
        )
