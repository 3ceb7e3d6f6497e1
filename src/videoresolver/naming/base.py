"""Base abstract class and options for name parsers.

This module defines the interface resolvers use to turn a raw path into
VideoFileInfo, plus the option set shared by parser implementations.
- NamingOptions: groups the extension tables and token rules a parser applies.
- NameParser: abstract base class every parser implements.

Extensibility:
- To plug in a different naming grammar, subclass NameParser and implement
  resolve_file and resolve_directory. Resolvers only depend on this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Self, Tuple

from videoresolver.models.naming import VideoFileInfo

# Stub kinds and the filename tokens that declare them, checked in order.
DEFAULT_STUB_TYPES: Dict[str, Tuple[str, ...]] = {
    "dvd": ("dvd",),
    "hddvd": ("hddvd",),
    "bluray": ("bluray", "brrip", "bd25", "bd50", "blu-ray"),
    "vhs": ("vhs",),
    "tv": ("hdtv",),
}

DEFAULT_FORMAT_3D_TOKENS: Tuple[str, ...] = (
    "fsbs",
    "ftab",
    "hsbs",
    "htab",
    "sbs",
    "sbs3d",
    "tab",
    "mvc",
)


def _default_video_extensions() -> FrozenSet[str]:
    # Deferred import: videoresolver.core imports this package.
    from videoresolver.core.extensions import SHORTCUT_EXTENSIONS, VIDEO_FILE_EXTENSIONS

    return VIDEO_FILE_EXTENSIONS | SHORTCUT_EXTENSIONS


@dataclass
class NamingOptions:
    """Configuration for name parsers."""

    video_extensions: FrozenSet[str] = field(default_factory=_default_video_extensions)
    stub_extensions: FrozenSet[str] = frozenset({".disc"})
    stub_types: Dict[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_STUB_TYPES)
    )
    format_3d_tokens: Tuple[str, ...] = DEFAULT_FORMAT_3D_TOKENS
    flag_3d_token: str = "3d"
    # Characters that separate tokens in media file names.
    delimiters: str = " ._-[]()"


class NameParser(ABC):
    """Abstract base class for name parsers.

    A name parser extracts display name, year, container, stub and 3D
    information from a path. It must not keep state between calls.
    """

    def __init__(self: Self, options: Optional[NamingOptions] = None) -> None:
        """Initialize a parser.

        Args:
            options: Token and extension rules; defaults to NamingOptions().
        """
        self.options = options or NamingOptions()

    @abstractmethod
    def resolve_file(self: Self, path: str) -> Optional[VideoFileInfo]:
        """Parse metadata from a file path.

        Args:
            path: Path of the file.

        Returns:
            Parsed metadata, or None if the path is not a parseable video file.
        """
        pass

    @abstractmethod
    def resolve_directory(self: Self, path: str) -> Optional[VideoFileInfo]:
        """Parse metadata from a directory path.

        Args:
            path: Path of the directory.

        Returns:
            Parsed metadata, or None if the name cannot be parsed.
        """
        pass
