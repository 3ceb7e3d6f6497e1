"""Domain models for the videoresolver application."""

from videoresolver.models.core import (
    FileSystemChild,
    ItemResolveArgs,
    Movie,
    MusicVideo,
    Video,
    Video3DFormat,
    VideoType,
)
from videoresolver.models.naming import StubResult, VideoFileInfo
from videoresolver.models.scan import ScanOptions, ScanResult

__all__ = [
    "FileSystemChild",
    "ItemResolveArgs",
    "Movie",
    "MusicVideo",
    "ScanOptions",
    "ScanResult",
    "StubResult",
    "Video",
    "Video3DFormat",
    "VideoFileInfo",
    "VideoType",
]
