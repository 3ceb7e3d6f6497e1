"""Tests for the core models module."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from videoresolver.models.core import (
    FileSystemChild,
    ItemResolveArgs,
    Movie,
    Video,
    Video3DFormat,
    VideoType,
)
from videoresolver.models.naming import VideoFileInfo
from videoresolver.models.scan import ScanResult


class TestEnums:
    """Tests for the VideoType and Video3DFormat enums."""

    def test_video_type_values(self) -> None:
        assert VideoType.VIDEO_FILE.value == "videofile"
        assert VideoType.ISO.value == "iso"
        assert VideoType.DVD.value == "dvd"
        assert VideoType.BLURAY.value == "bluray"
        assert VideoType.HDDVD.value == "hddvd"

    def test_video_3d_format_values(self) -> None:
        assert {f.value for f in Video3DFormat} == {
            "fullsidebyside",
            "fulltopandbottom",
            "halfsidebyside",
            "halftopandbottom",
        }


class TestVideo:
    """Tests for the Video record."""

    def test_defaults(self) -> None:
        video = Video(path=Path("/m/Heat.mkv"), name="Heat")

        assert video.video_type == VideoType.VIDEO_FILE
        assert video.production_year is None
        assert video.is_in_mixed_folder is False
        assert video.is_placeholder is False
        assert video.is_shortcut is False
        assert video.video_3d_format is None
        assert video.is_3d is False

    def test_is_3d(self) -> None:
        video = Video(
            path=Path("/m/Avatar.mkv"),
            name="Avatar",
            video_3d_format=Video3DFormat.HALF_TOP_AND_BOTTOM,
        )
        assert video.is_3d is True

    def test_serialization(self) -> None:
        video = Video(
            path=Path("/m/Heat.iso"),
            name="Heat",
            video_type=VideoType.ISO,
            production_year=1995,
        )
        parsed = json.loads(video.model_dump_json())

        assert parsed["video_type"] == "iso"
        assert parsed["production_year"] == 1995
        assert parsed["video_3d_format"] is None

    def test_subtype_is_a_video(self) -> None:
        movie = Movie(path=Path("/m/Heat.mkv"), name="Heat")
        assert isinstance(movie, Video)

    def test_invalid_year_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Video(path=Path("/m/Heat.mkv"), name="Heat", production_year="soon")


class TestItemResolveArgs:
    """Tests for the entry descriptor."""

    def test_is_immutable(self) -> None:
        args = ItemResolveArgs(path=Path("/m/Heat.mkv"))
        with pytest.raises(ValidationError):
            args.is_directory = True  # type: ignore[misc]

    def test_from_path_file(self, tmp_path: Path) -> None:
        file_path = tmp_path / "Heat.mkv"
        file_path.touch()

        args = ItemResolveArgs.from_path(file_path)

        assert args.is_directory is False
        assert args.file_system_children == []

    def test_from_path_directory_sorted_children(self, tmp_path: Path) -> None:
        (tmp_path / "VIDEO_TS").mkdir()
        (tmp_path / "BDMV").mkdir()
        (tmp_path / "a.nfo").touch()

        args = ItemResolveArgs.from_path(tmp_path)

        assert args.is_directory is True
        assert args.file_system_children == [
            FileSystemChild(name="a.nfo", is_directory=False),
            FileSystemChild(name="BDMV", is_directory=True),
            FileSystemChild(name="VIDEO_TS", is_directory=True),
        ]


class TestOtherModels:
    def test_video_file_info_defaults(self) -> None:
        info = VideoFileInfo(path="/m/x.mkv", name="x")

        assert info.year is None
        assert info.is_stub is False
        assert info.is_3d is False

    def test_scan_result_defaults(self) -> None:
        result = ScanResult(items=[], root_dir=Path("/lib"))

        assert result.total_entries == 0
        assert result.errors == []
        assert result.by_video_type == {}
