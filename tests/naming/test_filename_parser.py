"""Tests for the default filename parser.

Covers name/year extraction, container detection, stub kinds and 3D tokens
for both files and directories.
"""

import pytest

from videoresolver.naming.base import NamingOptions
from videoresolver.naming.format3d import parse_3d_format, split_tokens
from videoresolver.naming.parser import FilenameParser
from videoresolver.naming.stubs import resolve_stub


@pytest.fixture
def parser() -> FilenameParser:
    return FilenameParser()


class TestResolveFile:
    """Tests for FilenameParser.resolve_file."""

    @pytest.mark.parametrize(
        "path, name, year",
        [
            ("/m/Movie.Name.2020.mkv", "Movie Name", 2020),
            ("/m/Heat (1995).mkv", "Heat", 1995),
            ("/m/Blade Runner 2049 (2017).mp4", "Blade Runner 2049", 2017),
            ("/m/2001 A Space Odyssey (1968).avi", "2001 A Space Odyssey", 1968),
            ("/m/Some_Movie_2010.mkv", "Some Movie", 2010),
            ("/m/Movie.2010.1080p.BluRay.x264.mkv", "Movie", 2010),
            ("/m/1917.mkv", "1917", None),
            ("/m/Untitled.mkv", "Untitled", None),
        ],
    )
    def test_name_and_year(
        self, parser: FilenameParser, path: str, name: str, year: int | None
    ) -> None:
        info = parser.resolve_file(path)

        assert info is not None
        assert info.name == name
        assert info.year == year

    def test_container_is_lowercase_extension(self, parser: FilenameParser) -> None:
        info = parser.resolve_file("/m/Heat.1995.MKV")

        assert info is not None
        assert info.container == "mkv"
        assert info.is_stub is False
        assert info.is_directory is False

    @pytest.mark.parametrize("ext", ["iso", "img", "strm"])
    def test_special_containers(self, parser: FilenameParser, ext: str) -> None:
        info = parser.resolve_file(f"/m/Heat (1995).{ext}")

        assert info is not None
        assert info.container == ext

    @pytest.mark.parametrize("path", ["/m/notes.txt", "/m/cover.jpg", "/m/noext", ""])
    def test_unsupported_files_return_none(self, parser: FilenameParser, path: str) -> None:
        assert parser.resolve_file(path) is None

    @pytest.mark.parametrize(
        "path, stub_type",
        [
            ("/m/Alien (1979).dvd.disc", "dvd"),
            ("/m/Alien (1979).hddvd.disc", "hddvd"),
            ("/m/Alien (1979).bluray.disc", "bluray"),
            ("/m/Alien (1979).BD50.disc", "bluray"),
            ("/m/Alien (1979).vhs.disc", "vhs"),
            ("/m/Alien (1979).disc", None),
        ],
    )
    def test_stub_files(
        self, parser: FilenameParser, path: str, stub_type: str | None
    ) -> None:
        info = parser.resolve_file(path)

        assert info is not None
        assert info.is_stub is True
        assert info.stub_type == stub_type
        assert info.container == "disc"
        assert info.name == "Alien"
        assert info.year == 1979

    def test_stub_token_removed_from_name_without_year(
        self, parser: FilenameParser
    ) -> None:
        info = parser.resolve_file("/m/Alien.dvd.disc")

        assert info is not None
        assert info.name == "Alien"

    @pytest.mark.parametrize(
        "path, format_3d",
        [
            ("/m/Avatar (2009) 3D HSBS.mkv", "HSBS"),
            ("/m/Avatar.2009.3D.ftab.mkv", "ftab"),
            ("/m/Avatar.2009.sbs.mkv", "sbs"),
            ("/m/Avatar.2009.3D.mkv", None),
        ],
    )
    def test_3d_tokens(
        self, parser: FilenameParser, path: str, format_3d: str | None
    ) -> None:
        info = parser.resolve_file(path)

        assert info is not None
        assert info.is_3d is True
        assert info.format_3d == format_3d
        assert info.name == "Avatar"
        assert info.year == 2009

    def test_3d_token_must_be_whole(self, parser: FilenameParser) -> None:
        info = parser.resolve_file("/m/Tablet.Story.mkv")

        assert info is not None
        assert info.is_3d is False
        assert info.name == "Tablet Story"


class TestResolveDirectory:
    """Tests for FilenameParser.resolve_directory."""

    def test_name_and_year(self, parser: FilenameParser) -> None:
        info = parser.resolve_directory("/media/movies/Heat (1995)")

        assert info is not None
        assert info.name == "Heat"
        assert info.year == 1995
        assert info.container is None
        assert info.is_stub is False
        assert info.is_directory is True

    def test_3d_directory(self, parser: FilenameParser) -> None:
        info = parser.resolve_directory("/media/movies/Avatar (2009) [3D HTAB]")

        assert info is not None
        assert info.is_3d is True
        assert info.format_3d == "HTAB"
        assert info.name == "Avatar"

    def test_disc_suffix_is_not_a_stub_for_directories(
        self, parser: FilenameParser
    ) -> None:
        info = parser.resolve_directory("/media/movies/Alien.dvd.disc")

        assert info is not None
        assert info.is_stub is False

    @pytest.mark.parametrize("path", ["", "/"])
    def test_empty_name_returns_none(self, parser: FilenameParser, path: str) -> None:
        assert parser.resolve_directory(path) is None


class TestHelpers:
    """Tests for stub and 3D helper functions."""

    def test_resolve_stub_last_token_wins(self) -> None:
        result = resolve_stub("/m/Movie.dvd.bluray.disc", NamingOptions())

        assert result.is_stub is True
        assert result.stub_type == "bluray"

    def test_resolve_stub_requires_stub_extension(self) -> None:
        result = resolve_stub("/m/Movie.dvd.mkv", NamingOptions())

        assert result.is_stub is False
        assert result.stub_type is None

    def test_custom_stub_rules(self) -> None:
        options = NamingOptions(stub_types={"dvd": ("dvd9",)})

        assert resolve_stub("/m/Movie.DVD9.disc", options).stub_type == "dvd"
        assert resolve_stub("/m/Movie.dvd.disc", options).stub_type is None

    def test_split_tokens(self) -> None:
        assert split_tokens("Avatar (2009) [3D-HSBS]", " ._-[]()") == [
            "Avatar",
            "2009",
            "3D",
            "HSBS",
        ]

    def test_parse_3d_format_returns_matched_tokens(self) -> None:
        result = parse_3d_format("Movie.3D.HSBS", NamingOptions())

        assert result.is_3d is True
        assert result.format_3d == "HSBS"
        assert result.tokens == ("3D", "HSBS")

    def test_parse_3d_format_no_tokens(self) -> None:
        result = parse_3d_format("Movie.2010", NamingOptions())

        assert result.is_3d is False
        assert result.format_3d is None
        assert result.tokens == ()
