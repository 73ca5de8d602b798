"""Command-line interface for os-path."""
import sys
import logging
from typing import Tuple

import click
from rich.markup import escape

from . import __version__
from .core.models import Config, get_conventions
from .core.os_path import OsPath
from .core.report import PathReport
from .utils.console_base import THEMES, ConsoleManager


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


class CliState:
    """Options shared by every subcommand."""

    def __init__(self, platform: str, theme: str, debug: bool):
        self.conventions = get_conventions(platform)
        self.console = ConsoleManager(theme=theme)
        self.debug = debug

    def parse(self, text: str) -> OsPath:
        return OsPath(text, self.conventions)

    def emit(self, path: OsPath) -> None:
        self.console.print(path.to_string(), markup=False)


def run_safely(state: CliState, action) -> None:
    """Run a subcommand body, reporting any failure and exiting with 1."""
    try:
        action()
    except KeyboardInterrupt:
        state.console.print_error("PROCESS TERMINATED BY USER")
        sys.exit(1)
    except Exception as e:
        state.console.print_error(f"CRITICAL ERROR: {e}")
        if state.debug:
            state.console.print_exception()
        sys.exit(1)


@click.group()
@click.option('--platform', '-p', type=click.Choice(['auto', 'posix', 'windows']),
              default=None, help='Path conventions to use (default: OS_PATH_PLATFORM or auto)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.version_option(__version__)
@click.pass_context
def main(ctx: click.Context, platform: str, theme: str, debug: bool) -> None:
    """
    Normalize, join and resolve paths the same way on every platform.

    Examples:

        os-path normalize '/\\\\foo//bar\\baz.txt'

        os-path join /foo/bar /baz.txt

        os-path join /foo/bar/baz.txt ../pow.txt

        os-path --platform windows info 'C:/Users/me/notes.txt' --json
    """
    config = Config()
    setup_logging(debug)
    ctx.obj = CliState(
        platform=platform or config.platform,
        theme=theme or config.theme,
        debug=debug,
    )


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
def normalize(state: CliState, paths: Tuple[str, ...]) -> None:
    """Print each PATH in canonical native form."""
    def action():
        for text in paths:
            state.emit(state.parse(text))

    run_safely(state, action)


@main.command()
@click.argument('base')
@click.argument('parts', nargs=-1, required=True)
@click.option('--resolve', 'resolve_result', is_flag=True,
              help='Collapse remaining ".." segments in the result')
@click.pass_obj
def join(state: CliState, base: str, parts: Tuple[str, ...], resolve_result: bool) -> None:
    """Join each PART onto BASE, treating leading slashes as relative."""
    def action():
        result = state.parse(base).join(*parts)
        if resolve_result:
            result.resolve()
        state.emit(result)

    run_safely(state, action)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
def resolve(state: CliState, paths: Tuple[str, ...]) -> None:
    """Print each PATH with its ".." segments collapsed."""
    def action():
        for text in paths:
            state.emit(state.parse(text).resolved())

    run_safely(state, action)


@main.command()
@click.argument('path')
@click.option('--exists', 'check_exists', is_flag=True,
              help='Also check whether the path exists on this machine')
@click.option('--json', 'as_json', is_flag=True, help='Print the report as JSON')
@click.pass_obj
def info(state: CliState, path: str, check_exists: bool, as_json: bool) -> None:
    """Describe PATH: name, extension, parent and flags."""
    def action():
        report = PathReport.from_path(state.parse(path), check_exists=check_exists)
        if as_json:
            state.console.print(report.to_json(), markup=False)
            return

        console = state.console
        console.print_info_with_heading("PATH:", str(report.path))
        console.print_info_with_heading("NATIVE:", report.native)
        console.print_info_with_heading("NAME:", report.name or "-")
        console.print_info_with_heading("EXTENSION:", report.extension or "-")
        parent = str(report.parent) if report.parent is not None else "-"
        console.print_info_with_heading("PARENT:", parent)
        console.print_info_with_heading("PLATFORM:", report.platform)
        console.print_info_with_heading("ABSOLUTE:", "yes" if report.absolute else "no")
        kind = "directory" if report.directory else "file"
        console.print_info_with_heading("KIND:", kind)
        console.print(f"[heading]COMPONENTS:[/heading] [number]{len(report.components)}[/number]")
        for component in report.components:
            console.print(f"  [dim]>[/dim] [path]{escape(component)}[/path]")
        if report.exists is not None:
            if report.exists:
                console.print_success("EXISTS")
            else:
                console.print_error("NOT FOUND")

    run_safely(state, action)


if __name__ == '__main__':
    main()
