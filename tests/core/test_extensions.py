"""Tests for the library video extension table."""

from pathlib import Path

import pytest

from videoresolver.core.extensions import (
    SHORTCUT_EXTENSIONS,
    VIDEO_FILE_EXTENSIONS,
    configured_extensions,
    is_video_file,
    normalize_extension,
)


@pytest.mark.parametrize(
    "path", ["/m/a.mkv", "/m/a.MP4", Path("/m/a.iso"), "/m/a.img", "a.m2ts"]
)
def test_known_video_extensions(path) -> None:
    assert is_video_file(path)


@pytest.mark.parametrize("path", ["/m/a.strm", "/m/a.disc", "/m/a.nfo", "/m/noext", ""])
def test_non_video_extensions(path) -> None:
    assert not is_video_file(path)


def test_strm_is_a_shortcut_not_a_video_extension() -> None:
    assert ".strm" in SHORTCUT_EXTENSIONS
    assert ".strm" not in VIDEO_FILE_EXTENSIONS


@pytest.mark.parametrize("raw", ["xyz", ".xyz", "XYZ", " .Xyz "])
def test_normalize_extension(raw: str) -> None:
    assert normalize_extension(raw) == ".xyz"


def test_configured_extensions_explicit_extra() -> None:
    extensions = configured_extensions(["xyz", ".ABC", "", "."])

    assert ".xyz" in extensions
    assert ".abc" in extensions
    assert "." not in extensions
    assert VIDEO_FILE_EXTENSIONS <= extensions


def test_configured_extensions_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIDEORESOLVER_LIBRARY_EXTRA_VIDEO_EXTENSIONS", "xyz, .qq")

    extensions = configured_extensions()

    assert {".xyz", ".qq"} <= extensions


def test_configured_extensions_from_config_file(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text('[library]\nextra_video_extensions = ["xyz"]\n')

    assert ".xyz" in configured_extensions()


def test_is_video_file_with_custom_table() -> None:
    extensions = configured_extensions(["xyz"])

    assert is_video_file("/m/movie.xyz", extensions)
    assert is_video_file("/m/movie.mkv", extensions)
    assert not is_video_file("/m/movie.nfo", extensions)
