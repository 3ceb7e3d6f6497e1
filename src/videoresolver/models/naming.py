"""Models produced by name parsers.

VideoFileInfo is the metadata a NameParser extracts from a file or directory
path. Resolvers consume it read-only when building a Video record.
"""

from typing import Optional

from pydantic import BaseModel


class VideoFileInfo(BaseModel):
    """Metadata parsed from a file or directory name."""

    path: str
    """The path that was parsed."""

    name: str
    """Cleaned display name."""

    year: Optional[int] = None
    """Production year found in the name."""

    container: Optional[str] = None
    """Lowercase extension without the dot, e.g. ``"mkv"``, ``"iso"``, ``"strm"``."""

    is_stub: bool = False
    """Whether the path is a stub marker for media stored elsewhere."""

    stub_type: Optional[str] = None
    """Kind of stub, e.g. ``"dvd"``, ``"hddvd"``, ``"bluray"``."""

    is_3d: bool = False
    """Whether the name marks the content as 3D."""

    format_3d: Optional[str] = None
    """Raw 3D format token as it appeared in the name, e.g. ``"hsbs"``."""

    is_directory: bool = False


class StubResult(BaseModel):
    """Outcome of stub detection for a single path."""

    is_stub: bool = False
    stub_type: Optional[str] = None
