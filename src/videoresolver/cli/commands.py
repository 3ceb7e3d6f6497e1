"""CLI commands for videoresolver.

This module implements the user-facing CLI commands: classify, scan and
version.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through a Rich Console (see ConsoleManager) unless
  ``--json`` is requested, in which case plain JSON goes to stdout.
- Options left unset on the command line fall back to environment variables
  and the config file via resolve_setting().

Design:
- Annotated is used for CLI argument/option definitions to provide type safety
  and rich help text.
- Exit codes are defined as an Enum for clarity and maintainability.
"""

import os
import sys
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Annotated, Dict, Optional, Type

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from videoresolver.cli.console import ENV_DISABLE_RICH, ConsoleManager
from videoresolver.cli.renderer import render_scan, render_video
from videoresolver.core.extensions import (
    SHORTCUT_EXTENSIONS,
    configured_extensions,
    is_video_file,
)
from videoresolver.core.resolver import (
    BaseVideoResolver,
    MovieResolver,
    MusicVideoResolver,
    VideoResolver,
)
from videoresolver.core.scanner import scan_directory
from videoresolver.models.core import ItemResolveArgs
from videoresolver.models.scan import ScanOptions
from videoresolver.naming import FilenameParser, NamingOptions
from videoresolver.utils.config import resolve_setting
from videoresolver.utils.debug import set_debug

app = typer.Typer(
    name="videoresolver",
    help="Classify media-library files and folders into video items.",
    add_completion=False,
)


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1
    NOT_A_VIDEO = 2


RESOLVERS: Dict[str, Type[BaseVideoResolver]] = {
    "video": VideoResolver,
    "movie": MovieResolver,
    "musicvideo": MusicVideoResolver,
}


def validate_kind(value: str) -> str:
    """Validate the --kind option.

    Raises:
        typer.BadParameter: If the value is not a known resolver kind.
    """
    kind = value.lower()
    if kind not in RESOLVERS:
        raise typer.BadParameter(f"Invalid kind. Must be one of: {', '.join(RESOLVERS)}")
    return kind


def build_resolver(kind: str = "video") -> BaseVideoResolver:
    """Create a resolver of *kind* honouring configured extra extensions.

    The parser and the extension predicate share one extension table, so an
    extra extension is accepted by both.
    """
    extensions = configured_extensions()
    parser = FilenameParser(
        NamingOptions(video_extensions=extensions | SHORTCUT_EXTENSIONS)
    )
    return RESOLVERS[kind](
        name_parser=parser,
        is_video_file=partial(is_video_file, extensions=extensions),
    )


ENTRY_PATH = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=True,
        resolve_path=True,
        help="File or folder to classify",
    ),
]

ROOT_PATH = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        help="Library root directory to scan",
    ),
]

PARSE_NAME = Annotated[
    Optional[bool],
    typer.Option(
        "--parse-name/--no-parse-name",
        help="Use the parsed display name instead of the raw file or folder name",
    ),
]

KIND = Annotated[
    str,
    typer.Option(
        "--kind",
        "-k",
        callback=validate_kind,
        help="Record type to build (video, movie, musicvideo)",
    ),
]

JSON_OUTPUT = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output results in JSON format",
    ),
]

RECURSIVE = Annotated[
    Optional[bool],
    typer.Option(
        "--recursive/--no-recursive",
        help="Descend into folders that are not videos themselves",
    ),
]

INCLUDE_HIDDEN = Annotated[
    Optional[bool],
    typer.Option(
        "--include-hidden/--skip-hidden",
        help="Include files and folders whose names start with a dot",
    ),
]


@app.callback()
def callback(
    no_rich: bool = typer.Option(
        False,
        "--no-rich",
        help=(
            "Disable Rich coloured output and spinners. "
            "Can also be set with the VIDEORESOLVER_NO_RICH environment variable."
        ),
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging (same as VIDEORESOLVER_DEBUG=1).",
    ),
) -> None:
    """Top-level CLI callback adding global options."""
    if no_rich:
        os.environ[ENV_DISABLE_RICH] = "1"
    if debug:
        set_debug(True)


@app.command()
def classify(
    path: ENTRY_PATH,
    parse_name: PARSE_NAME = None,
    kind: KIND = "video",
    json_output: JSON_OUTPUT = False,
) -> None:
    """Classify a single file or folder."""
    use_parsed_name = resolve_setting(
        "naming.parse_name", default=True, cli_value=parse_name
    )
    with ConsoleManager() as console:
        try:
            args = ItemResolveArgs.from_path(path)
        except OSError as e:
            console.print(f"Error: {str(e)}", style="red", markup=False)
            raise typer.Exit(ExitCode.ERROR)

        video = build_resolver(kind).resolve_video(args, use_parsed_name)
        if video is None:
            if json_output:
                sys.stdout.write("null\n")
            else:
                console.print(f"Not a video: {path}", style="yellow", markup=False)
            raise typer.Exit(ExitCode.NOT_A_VIDEO)

        if json_output:
            sys.stdout.write(video.model_dump_json(indent=2) + "\n")
        else:
            render_video(video, console=console)


@app.command()
def scan(
    root: ROOT_PATH,
    parse_name: PARSE_NAME = None,
    recursive: RECURSIVE = None,
    include_hidden: INCLUDE_HIDDEN = None,
    kind: KIND = "video",
    json_output: JSON_OUTPUT = False,
) -> None:
    """Scan a library folder and classify every entry."""
    options = ScanOptions(
        recursive=resolve_setting("scan.recursive", default=True, cli_value=recursive),
        include_hidden=resolve_setting(
            "scan.include_hidden", default=False, cli_value=include_hidden
        ),
        parse_name=resolve_setting(
            "naming.parse_name", default=True, cli_value=parse_name
        ),
    )
    with ConsoleManager() as console:
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
                disable=json_output,
            ) as progress:
                progress.add_task("Scanning library...", total=None)
                result = scan_directory(root, build_resolver(kind), options=options)
        except (FileNotFoundError, PermissionError, ValueError) as e:
            console.print(f"Error: {str(e)}", style="red", markup=False)
            raise typer.Exit(ExitCode.ERROR)

        if json_output:
            sys.stdout.write(result.model_dump_json(indent=2) + "\n")
            return

        if not result.items:
            console.print("[yellow]No videos found.[/yellow]")
        render_scan(result, console=console)


@app.command()
def version() -> None:
    """Show the version of videoresolver."""
    from videoresolver.__about__ import __version__

    with ConsoleManager() as console:
        console.print(f"VideoResolver version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()
