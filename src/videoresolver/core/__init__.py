"""Core functionality for videoresolver.

This package exposes the classification engine and the library scanner.
- VideoResolver / MovieResolver / MusicVideoResolver: classify one entry.
- is_dvd_directory / is_bluray_directory: disc-structure marker tests.
- scan_directory: walk a library tree and classify every entry.

See resolver.py for the classification rules.
"""

from videoresolver.core.resolver import (
    BaseVideoResolver,
    MovieResolver,
    MusicVideoResolver,
    VideoResolver,
    get_3d_format,
    is_bluray_directory,
    is_dvd_directory,
)
from videoresolver.core.scanner import scan_directory

__all__ = [
    "BaseVideoResolver",
    "MovieResolver",
    "MusicVideoResolver",
    "VideoResolver",
    "get_3d_format",
    "is_bluray_directory",
    "is_dvd_directory",
    "scan_directory",
]
