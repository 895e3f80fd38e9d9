"""Create the main Typer CLI app."""

from typing import Annotated

import typer

from railfence.api.cipher.CipherMode import CipherMode
from railfence.api.cipher.cmd_decode import cmd_decode
from railfence.api.cipher.cmd_encode import cmd_encode
from railfence.api.config.cmd_version import cmd_version
from railfence.api.config.RailFenceConfig import RailFenceConfig
from railfence.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from railfence.utils.logger import configure_logging


def _print_version(value: bool) -> None:
    """Eager --version callback."""
    if not value:
        return
    result = cmd_version()
    list(result.progress_callback(result))
    typer.echo(result.output["full_version"])
    raise typer.Exit()


def _text_printer(mode: CipherMode):
    """Printer for the text display format: the labelled result on stdout."""

    def printer(output: dict) -> None:
        if output["errors"]:
            return
        typer.echo(f"{mode.label}: {output['text']}")

    return printer


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="railfence",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Encrypts or decrypts text using the Rail Fence cipher",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command(help="Encrypts or decrypts text using the Rail Fence cipher")
    def main_command(
        depth: Annotated[str, typer.Option("--depth", "-d", metavar="DEPTH", help="Sets the depth of the Rail Fence cipher")],
        text: Annotated[str, typer.Option("--input", "-i", metavar="TEXT", help="The text to encrypt or decrypt")],
        decrypt: Annotated[
            bool, typer.Option("--decrypt", "-x", help="Decrypt the input text instead of encrypting")
        ] = False,
        display: Annotated[
            str | None, typer.Option("--display", help="Output format: text, json or yaml (default from config)")
        ] = None,
        verbose: Annotated[bool, typer.Option("--verbose", help="Show progress on stderr")] = False,
        version: Annotated[  # noqa: ARG001
            bool,
            typer.Option("--version", "-V", callback=_print_version, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        try:
            config = RailFenceConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        configure_logging(level=config.log.level)

        display_format = display or config.display.format
        if display_format not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display_format}'", err=True)
            raise typer.Exit(1)

        mode = CipherMode.DECRYPT if decrypt else CipherMode.ENCRYPT
        command = cmd_decode if decrypt else cmd_encode
        _handle_stage_result(
            command,
            display_format=display_format,
            result_printer=_text_printer(mode),
            suppress_output=not verbose,
        )(text, depth)

    return app
