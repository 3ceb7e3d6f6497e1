"""Library-wide video extension table.

VIDEO_FILE_EXTENSIONS is intentionally broad and covers container formats
plus disc images (``.iso``, ``.img``) that media servers treat as playable
video. ``.strm`` shortcut files are not listed; resolvers accept them through
the shortcut rule.
"""

import logging
from pathlib import PurePath
from typing import FrozenSet, Iterable, Optional, Union

from videoresolver.utils.config import resolve_list_setting

logger = logging.getLogger(__name__)

VIDEO_FILE_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        ".001",
        ".3gp",
        ".asf",
        ".avi",
        ".bivx",
        ".divx",
        ".dv",
        ".dvr-ms",
        ".f4v",
        ".fli",
        ".flv",
        ".img",
        ".iso",
        ".m2t",
        ".m2ts",
        ".m2v",
        ".m4v",
        ".mk3d",
        ".mkv",
        ".mov",
        ".mp4",
        ".mpeg",
        ".mpg",
        ".mts",
        ".nsv",
        ".nuv",
        ".ogm",
        ".ogv",
        ".pva",
        ".qt",
        ".rec",
        ".rm",
        ".rmvb",
        ".svq3",
        ".tp",
        ".ts",
        ".ty",
        ".viv",
        ".vob",
        ".vp3",
        ".webm",
        ".wmv",
        ".wtv",
        ".xvid",
    }
)

SHORTCUT_EXTENSIONS: FrozenSet[str] = frozenset({".strm"})


def normalize_extension(extension: str) -> str:
    """Return *extension* lowercased with a single leading dot."""
    return "." + extension.strip().lower().lstrip(".")


def configured_extensions(extra: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Return the built-in table merged with configured extra extensions.

    Args:
        extra: Extra extensions to add. When None, the
            ``library.extra_video_extensions`` setting is used.
    """
    if extra is None:
        extra = resolve_list_setting("library.extra_video_extensions")
    additions = {normalize_extension(ext) for ext in extra if ext.strip(" .")}
    if additions - VIDEO_FILE_EXTENSIONS:
        logger.debug(
            "Extra video extensions: %s",
            ", ".join(sorted(additions - VIDEO_FILE_EXTENSIONS)),
        )
    return VIDEO_FILE_EXTENSIONS | additions


def is_video_file(
    path: Union[str, PurePath], extensions: Optional[FrozenSet[str]] = None
) -> bool:
    """Check whether *path* has a recognised video extension.

    Args:
        path: File path (only the suffix is inspected).
        extensions: Extension set to test against; defaults to the built-in
            table.

    Returns:
        True if the lowercased suffix is a known video extension.
    """
    suffix = PurePath(path).suffix.lower()
    return bool(suffix) and suffix in (extensions or VIDEO_FILE_EXTENSIONS)
