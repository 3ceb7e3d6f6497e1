"""Directory scanner for video libraries.

This module walks a library tree and classifies every entry with a video
resolver. Disc folders (DVD / Blu-ray structures) are classified as a whole
and never descended into, so their ``VIDEO_TS``/``BDMV`` contents do not show
up as separate items.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from videoresolver.core.resolver import (
    BaseVideoResolver,
    VideoResolver,
    is_bluray_directory,
    is_dvd_directory,
)
from videoresolver.models.core import ItemResolveArgs, Video, VideoType
from videoresolver.models.scan import ScanOptions, ScanResult

# Logger for this module
logger = logging.getLogger(__name__)


def is_hidden(path: Path) -> bool:
    """Check if a path's own name is hidden (starts with a dot).

    Args:
        path: The path to check

    Returns:
        True if the path is hidden, False otherwise
    """
    return path.name.startswith(".")


def is_disc_structure_folder(path: Path) -> bool:
    """Check if *path* is itself a ``VIDEO_TS`` or ``BDMV`` folder."""
    return is_dvd_directory(path.name) or is_bluray_directory(path.name)


@dataclass
class _ScanState:
    """Counters and results accumulated during a walk."""

    total_entries: int = 0
    skipped_entries: int = 0
    items: List[Video] = field(default_factory=list)
    by_video_type: Dict[VideoType, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    def add(self, video: Video) -> None:
        self.items.append(video)
        self.by_video_type[video.video_type] = (
            self.by_video_type.get(video.video_type, 0) + 1
        )


def _sorted_children(directory: Path) -> List[Path]:
    return sorted(directory.iterdir(), key=lambda child: child.name.casefold())


def _handle_directory(
    directory: Path,
    resolver: BaseVideoResolver,
    options: ScanOptions,
    state: _ScanState,
) -> None:
    """Classify *directory* and descend into it if it is not a video itself."""
    state.total_entries += 1
    try:
        args = ItemResolveArgs.from_path(directory)
    except OSError as e:
        state.errors.append(f"Error accessing directory {directory}: {str(e)}")
        return

    video = resolver.resolve_video(args, options.parse_name)
    if video is not None:
        state.add(video)
        return

    state.skipped_entries += 1
    if is_disc_structure_folder(directory):
        # Contents of an unparseable disc folder are not standalone videos.
        logger.debug("Skipping disc structure folder %s", directory)
        return
    if options.recursive:
        _process_directory(directory, resolver, options, state)


def _handle_file(
    file_path: Path,
    resolver: BaseVideoResolver,
    options: ScanOptions,
    state: _ScanState,
) -> None:
    state.total_entries += 1
    video = resolver.resolve_video(
        ItemResolveArgs(path=file_path, is_directory=False), options.parse_name
    )
    if video is None:
        state.skipped_entries += 1
    else:
        state.add(video)


def _process_directory(
    current_dir: Path,
    resolver: BaseVideoResolver,
    options: ScanOptions,
    state: _ScanState,
) -> None:
    """Classify every child of *current_dir*."""
    try:
        children = _sorted_children(current_dir)
    except OSError as e:
        state.errors.append(f"Error accessing directory {current_dir}: {str(e)}")
        return

    for item in children:
        if is_hidden(item) and not options.include_hidden:
            continue
        try:
            if item.is_dir():
                _handle_directory(item, resolver, options, state)
            elif item.is_file():
                _handle_file(item, resolver, options, state)
        except OSError as e:
            # Log access errors but continue processing
            state.errors.append(f"Error accessing {item}: {str(e)}")


def scan_directory(
    root_dir: Path,
    resolver: Optional[BaseVideoResolver] = None,
    *,  # Force the rest of the parameters to be keyword-only
    options: Optional[ScanOptions] = None,
) -> ScanResult:
    """Scan a library directory and classify every entry.

    The root itself is not classified; its children are.

    Args:
        root_dir: The directory to scan
        resolver: Resolver used for classification. Defaults to VideoResolver.
        options: Scan options. If None, default options will be used.

    Returns:
        ScanResult object containing the classified items and statistics

    Raises:
        FileNotFoundError: If the directory doesn't exist
        ValueError: If the path is not a directory
    """
    if not root_dir.exists():
        raise FileNotFoundError(f"Directory does not exist: {root_dir}")
    if not root_dir.is_dir():
        raise ValueError(f"Path is not a directory: {root_dir}")

    # Use absolute path to avoid relative path issues
    root_dir = root_dir.absolute()
    resolver = resolver or VideoResolver()
    options = options or ScanOptions()

    start_time = time.time()
    state = _ScanState()
    _process_directory(root_dir, resolver, options, state)
    scan_duration = time.time() - start_time

    logger.debug(
        "Scanned %s: %d entries, %d videos, %d errors",
        root_dir,
        state.total_entries,
        len(state.items),
        len(state.errors),
    )

    return ScanResult(
        items=state.items,
        root_dir=root_dir,
        total_entries=state.total_entries,
        skipped_entries=state.skipped_entries,
        by_video_type=state.by_video_type,
        scan_duration_seconds=scan_duration,
        errors=state.errors,
    )
