"""Renderer for CLI output.

Renders classification records and scan results as Rich tables. Packaging
types are colour-coded so disc packages stand out from plain files.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from videoresolver.models.core import Video, VideoType
from videoresolver.models.scan import ScanResult

VIDEO_TYPE_STYLES = {
    VideoType.VIDEO_FILE: "green",
    VideoType.ISO: "cyan",
    VideoType.DVD: "magenta bold",
    VideoType.BLURAY: "blue bold",
    VideoType.HDDVD: "red bold",
}


def _flags(video: Video) -> str:
    flags = []
    if video.is_placeholder:
        flags.append("placeholder")
    if video.is_shortcut:
        flags.append("shortcut")
    if video.is_in_mixed_folder:
        flags.append("mixed-folder")
    return ", ".join(flags)


def build_video_table(videos: Iterable[Video], title: str) -> Table:
    """Build a table with one row per video."""
    table = Table(title=title)
    table.add_column("Type", style="bold")
    table.add_column("Name", style="white")
    table.add_column("Year", justify="right")
    table.add_column("3D", style="yellow")
    table.add_column("Flags", style="dim")
    table.add_column("Path", style="cyan", overflow="fold")

    for video in videos:
        table.add_row(
            video.video_type.value,
            escape(video.name),
            str(video.production_year) if video.production_year else "",
            video.video_3d_format.value if video.video_3d_format else "",
            _flags(video),
            escape(str(video.path)),
            style=VIDEO_TYPE_STYLES.get(video.video_type, "white"),
        )
    return table


def render_video(video: Video, console: Console | None = None) -> None:
    """Render a single classification record."""
    console = console or Console()
    console.print(build_video_table([video], title=type(video).__name__))


def render_scan(result: ScanResult, console: Console | None = None) -> None:
    """Render a scan result as a table followed by a summary line."""
    console = console or Console()
    if result.items:
        title = f"Scan: {escape(str(result.root_dir))}"
        console.print(build_video_table(result.items, title=title))

    console.print(f"Total: {result.total_entries} | Skipped: {result.skipped_entries}")
    if result.by_video_type:
        breakdown = ", ".join(
            f"{video_type.value}: {count}"
            for video_type, count in sorted(
                result.by_video_type.items(), key=lambda item: item[0].value
            )
        )
        console.print(f"By type: {breakdown}")
    for message in result.errors:
        console.print(message, style="red", markup=False)
