"""Video resolvers: classify a filesystem entry into a Video record.

A resolver turns an ItemResolveArgs descriptor into a Video (or one of its
subtypes) or None when the entry is not a video. Classification is purely
name- and structure-based:

Directories:
    The first child directory named ``VIDEO_TS`` or ``BDMV`` (in the order
    supplied) marks the directory as a DVD or Blu-ray package. The directory
    itself must still be parseable by the name parser.

Files:
    A file is a candidate when its extension is a known video extension, the
    parser flags it as a stub, or it is a ``.strm`` shortcut. ``.iso``/``.img``
    containers become ISO packaging; a stub's declared kind (dvd, hddvd,
    bluray) overrides that.

Both branches then map the parser's 3D token to a Video3DFormat.

Design:
- BaseVideoResolver is generic over the Video subtype it builds; concrete
  resolvers pick the subtype through ``video_class``.
- The resolver keeps no per-call state, so a single instance can classify
  entries from several threads at once.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Generic, Optional, Self, Type, TypeVar, Union, cast

from videoresolver.core.extensions import is_video_file as default_is_video_file
from videoresolver.models.core import (
    ItemResolveArgs,
    Movie,
    MusicVideo,
    Video,
    Video3DFormat,
    VideoType,
)
from videoresolver.models.naming import VideoFileInfo
from videoresolver.naming.base import NameParser
from videoresolver.naming.parser import FilenameParser

logger = logging.getLogger(__name__)

TVideo = TypeVar("TVideo", bound=Video)

DVD_DIRECTORY_NAME = "video_ts"
BLURAY_DIRECTORY_NAME = "bdmv"

SHORTCUT_CONTAINER = "strm"
ISO_CONTAINERS = frozenset({"iso", "img"})

STUB_TYPE_VIDEO_TYPES: Dict[str, VideoType] = {
    "dvd": VideoType.DVD,
    "hddvd": VideoType.HDDVD,
    "bluray": VideoType.BLURAY,
}

FORMAT_3D_TOKENS: Dict[str, Video3DFormat] = {
    "fsbs": Video3DFormat.FULL_SIDE_BY_SIDE,
    "ftab": Video3DFormat.FULL_TOP_AND_BOTTOM,
    "hsbs": Video3DFormat.HALF_SIDE_BY_SIDE,
    "htab": Video3DFormat.HALF_TOP_AND_BOTTOM,
    "sbs": Video3DFormat.HALF_SIDE_BY_SIDE,
    "sbs3d": Video3DFormat.HALF_SIDE_BY_SIDE,
    "tab": Video3DFormat.HALF_TOP_AND_BOTTOM,
}


def is_dvd_directory(directory_name: str) -> bool:
    """Check whether *directory_name* is a DVD structure folder (``VIDEO_TS``)."""
    return directory_name.lower() == DVD_DIRECTORY_NAME


def is_bluray_directory(directory_name: str) -> bool:
    """Check whether *directory_name* is a Blu-ray structure folder (``BDMV``)."""
    return directory_name.lower() == BLURAY_DIRECTORY_NAME


def get_3d_format(video_info: VideoFileInfo) -> Optional[Video3DFormat]:
    """Map the parser's 3D token to a Video3DFormat.

    Returns None when the info is not flagged 3D or the token is unknown.
    """
    if not video_info.is_3d or not video_info.format_3d:
        return None
    return FORMAT_3D_TOKENS.get(video_info.format_3d.lower())


def _disc_video_type(directory_name: str) -> Optional[VideoType]:
    if is_dvd_directory(directory_name):
        return VideoType.DVD
    if is_bluray_directory(directory_name):
        return VideoType.BLURAY
    return None


class BaseVideoResolver(ABC, Generic[TVideo]):
    """Resolves a path into a Video or Video subclass.

    Args:
        name_parser: Parser used to extract names, years, stub and 3D data.
            Defaults to FilenameParser.
        is_video_file: Predicate telling whether a path has a recognised video
            extension. Defaults to the built-in extension table.
    """

    def __init__(
        self: Self,
        name_parser: Optional[NameParser] = None,
        is_video_file: Optional[Callable[[Union[str, Path]], bool]] = None,
    ) -> None:
        self.name_parser = name_parser or FilenameParser()
        self.is_video_file = is_video_file or default_is_video_file

    @property
    @abstractmethod
    def video_class(self: Self) -> Type[TVideo]:
        """The Video subtype this resolver builds."""
        pass

    def resolve(self: Self, args: ItemResolveArgs) -> Optional[TVideo]:
        """Resolve *args* using parsed names."""
        return cast(Optional[TVideo], self.resolve_video(args, parse_name=True))

    def resolve_video(
        self: Self,
        args: ItemResolveArgs,
        parse_name: bool,
        video_class: Optional[Type[Video]] = None,
    ) -> Optional[Video]:
        """Classify a single filesystem entry.

        Args:
            args: The entry to classify.
            parse_name: Use the parser's display name; otherwise use the path's
                last component (extension stripped for files).
            video_class: Video subtype to build; defaults to ``video_class``.

        Returns:
            A populated record of the requested type, or None if the entry is
            not a video.
        """
        cls = video_class or self.video_class
        if args.is_directory:
            return self._resolve_directory(args, parse_name, cls)
        return self._resolve_file(args, parse_name, cls)

    def _resolve_directory(
        self: Self, args: ItemResolveArgs, parse_name: bool, cls: Type[Video]
    ) -> Optional[Video]:
        # The first marker child wins, so callers control precedence through
        # child order.
        for child in args.file_system_children:
            if not child.is_directory:
                continue
            video_type = _disc_video_type(child.name)
            if video_type is None:
                continue

            video_info = self.name_parser.resolve_directory(str(args.path))
            if video_info is None:
                logger.debug(
                    "Found %s in %s but the folder name could not be parsed",
                    child.name,
                    args.path,
                )
                return None

            name = video_info.name if parse_name else args.path.name
            logger.debug("Resolved %s as %s", args.path, video_type.value)
            return cls(
                path=args.path,
                name=name,
                video_type=video_type,
                production_year=video_info.year,
                video_3d_format=get_3d_format(video_info),
            )

        return None

    def _resolve_file(
        self: Self, args: ItemResolveArgs, parse_name: bool, cls: Type[Video]
    ) -> Optional[Video]:
        video_info = self.name_parser.resolve_file(str(args.path))
        if video_info is None:
            return None

        container = (video_info.container or "").lower()
        is_shortcut = container == SHORTCUT_CONTAINER

        if not (self.is_video_file(args.path) or video_info.is_stub or is_shortcut):
            logger.debug("Not a video file: %s", args.path)
            return None

        video_type = VideoType.ISO if container in ISO_CONTAINERS else VideoType.VIDEO_FILE

        # A stub's declared disc kind takes precedence over the container.
        if video_info.is_stub and video_info.stub_type:
            video_type = STUB_TYPE_VIDEO_TYPES.get(
                video_info.stub_type.lower(), video_type
            )

        name = video_info.name if parse_name else args.path.stem
        logger.debug("Resolved %s as %s", args.path, video_type.value)
        return cls(
            path=args.path,
            name=name,
            video_type=video_type,
            production_year=video_info.year,
            is_in_mixed_folder=True,
            is_placeholder=video_info.is_stub,
            is_shortcut=is_shortcut,
            video_3d_format=get_3d_format(video_info),
        )


class VideoResolver(BaseVideoResolver[Video]):
    """Resolver producing plain Video records."""

    @property
    def video_class(self: Self) -> Type[Video]:
        return Video


class MovieResolver(BaseVideoResolver[Movie]):
    """Resolver producing Movie records."""

    @property
    def video_class(self: Self) -> Type[Movie]:
        return Movie


class MusicVideoResolver(BaseVideoResolver[MusicVideo]):
    """Resolver producing MusicVideo records."""

    @property
    def video_class(self: Self) -> Type[MusicVideo]:
        return MusicVideo
