"""Core domain models for videoresolver.

This module defines the data structures that flow through classification:
- ItemResolveArgs describes one filesystem entry (and, for directories, its
  immediate children) handed to a resolver.
- Video is the classification record a resolver produces. Movie and
  MusicVideo are concrete subtypes a resolver can be asked to build.

Design:
- VideoType and Video3DFormat are ``str`` enums so records serialise to plain
  strings in JSON output.
- ItemResolveArgs is immutable for the duration of a classification call; the
  resolver never mutates it.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VideoType(str, Enum):
    """Physical packaging of a video item."""

    VIDEO_FILE = "videofile"
    ISO = "iso"
    DVD = "dvd"
    BLURAY = "bluray"
    HDDVD = "hddvd"


class Video3DFormat(str, Enum):
    """Stereoscopic encoding of 3D content.

    Full variants keep the full resolution per eye; half variants squeeze both
    eyes into a single frame.
    """

    FULL_SIDE_BY_SIDE = "fullsidebyside"
    FULL_TOP_AND_BOTTOM = "fulltopandbottom"
    HALF_SIDE_BY_SIDE = "halfsidebyside"
    HALF_TOP_AND_BOTTOM = "halftopandbottom"


class FileSystemChild(BaseModel):
    """An immediate child of a directory entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    """Name of the child (last path component only)."""

    is_directory: bool = False
    """Whether the child carries the directory attribute."""


class ItemResolveArgs(BaseModel):
    """Descriptor for a single filesystem entry to classify.

    Children are kept in the order supplied by the caller. Resolvers scan them
    in that order and stop at the first match.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    """Path of the entry being classified."""

    is_directory: bool = False
    """Whether the entry is a directory."""

    file_system_children: List[FileSystemChild] = Field(default_factory=list)
    """Immediate children of a directory entry (empty for files)."""

    @classmethod
    def from_path(cls, path: Path) -> "ItemResolveArgs":
        """Build a descriptor by inspecting *path* on disk.

        Children are sorted by case-folded name so that the result does not
        depend on filesystem enumeration order.

        Args:
            path: File or directory to describe.

        Returns:
            The populated ItemResolveArgs.

        Raises:
            OSError: If the directory cannot be listed.
        """
        if not path.is_dir():
            return cls(path=path, is_directory=False)

        children = [
            FileSystemChild(name=child.name, is_directory=child.is_dir())
            for child in path.iterdir()
        ]
        children.sort(key=lambda child: child.name.casefold())
        return cls(path=path, is_directory=True, file_system_children=children)


class Video(BaseModel):
    """Classification record for a video item.

    Produced fresh by a resolver for each call; ownership passes to the caller.
    """

    path: Path
    """Path of the classified entry."""

    name: str
    """Display name (parsed or taken verbatim from the path)."""

    video_type: VideoType = VideoType.VIDEO_FILE
    """Physical packaging of the item."""

    production_year: Optional[int] = None
    """Production year, when the name parser found one."""

    is_in_mixed_folder: bool = False
    """True for single files, which may share a folder with unrelated files."""

    is_placeholder: bool = False
    """True when the source is a stub marker file rather than real media."""

    is_shortcut: bool = False
    """True when the source is a reference (``.strm``) file."""

    video_3d_format: Optional[Video3DFormat] = None
    """Stereoscopic encoding, when the content is 3D and the format is known."""

    @property
    def is_3d(self: "Video") -> bool:
        """Whether a stereoscopic format was detected."""
        return self.video_3d_format is not None


class Movie(Video):
    """A feature film."""


class MusicVideo(Video):
    """A music video."""
