# src/pdfi_cli/cli.py

import re
import sys
from typing import Annotated, NoReturn

import click
import typer
from typer.core import TyperCommand

from . import __version__
from .commands import CommandCall, CommandRouter, default_registry
from .config import CliConfig
from .errors import MissingArgumentError, PdfiError, UnknownCommandError
from .log import configure_logging

registry = default_registry()
USAGE = registry.usage()

# unknown options pass through as positionals; "-1" stays an address token
_UNKNOWN_OPTION = re.compile(r"-[^0-9].*")

app = typer.Typer(add_completion=False)


class UsageCommand(TyperCommand):
    """Reports click usage errors like every other bad request: usage, exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            typer.echo(typer.style(e.format_message(), fg="red"), err=True)
            typer.echo(USAGE)
            raise typer.Exit(code=1) from e


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _fail(config: CliConfig, message: str, *, show_usage: bool = False) -> NoReturn:
    typer.echo(typer.style(message, fg="red"), err=True, color=config.colorize)
    if show_usage:
        typer.echo(USAGE)
    raise typer.Exit(code=1)


@app.command(
    cls=UsageCommand,
    help="\b\n" + USAGE,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
def main(
    command: Annotated[str | None, typer.Argument(help="command to run")] = None,
    filename: Annotated[str | None, typer.Argument(help="PDF file to read")] = None,
    args: Annotated[
        list[str] | None, typer.Argument(help="object addresses (N or N:G)")
    ] = None,
    decode: Annotated[
        bool, typer.Option("--decode", help="decode content streams")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="print extra output")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="print version",
        ),
    ] = False,
) -> None:
    # if set to verbose, colorize regardless of whether stderr is a TTY
    config = CliConfig(verbose=verbose, colorize=verbose or sys.stderr.isatty())
    configure_logging(config)

    for token in [command, filename, *(args or [])]:
        if token is not None and _UNKNOWN_OPTION.fullmatch(token):
            _fail(config, f"No such option: {token}", show_usage=True)

    if command is None:
        _fail(config, "Missing command", show_usage=True)

    router = CommandRouter(
        registry,
        config,
        stdout=sys.stdout.buffer,
        stderr=sys.stderr,
    )
    call = CommandCall(
        command_id=command,
        filename=filename,
        args=args or [],
        decode=decode,
    )
    try:
        status = router.dispatch(call)
    except (UnknownCommandError, MissingArgumentError) as e:
        _fail(config, str(e), show_usage=True)
    except (PdfiError, OSError) as e:
        _fail(config, f"{type(e).__name__}: {e}")
    if status:
        raise typer.Exit(code=status)
