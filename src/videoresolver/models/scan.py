"""Scan options and results.

This module defines the configuration and output of a library scan.
- ScanOptions parameterises how the scanner walks a directory tree.
- ScanResult aggregates every classified item plus counters and errors, so a
  partial failure never hides what was found.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field

from videoresolver.models.core import Video, VideoType


class ScanOptions(BaseModel):
    """Options for scanning a media library."""

    recursive: bool = True
    """Whether to descend into unclassified subdirectories."""

    include_hidden: bool = False
    """Whether to include entries whose names start with a dot."""

    parse_name: bool = True
    """Use the parsed display name instead of the raw path component."""


class ScanResult(BaseModel):
    """Result of a library scan."""

    items: List[Video]
    """Every entry that classified as a video, in walk order."""

    root_dir: Path
    """Root directory of the scan (absolute path)."""

    scan_time: datetime = Field(default_factory=datetime.now)
    """When the scan was run."""

    total_entries: int = 0
    """Number of files and directories examined."""

    skipped_entries: int = 0
    """Entries examined that did not classify as a video."""

    by_video_type: Dict[VideoType, int] = Field(default_factory=dict)
    """Count of items per packaging type."""

    scan_duration_seconds: float = 0.0

    errors: List[str] = Field(default_factory=list)
    """Errors encountered while walking the tree."""
