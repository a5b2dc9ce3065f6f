"""Command line interface for termpicker-nvim."""

from __future__ import annotations

import logging
from typing import Any, Optional

import typer

from termpicker_nvim.adapters.platform_detector import OsPlatformDetector
from termpicker_nvim.domain.color import extract_color
from termpicker_nvim.domain.exceptions import (
    TermpickerConfigError,
    UnsupportedPlatformError,
)
from termpicker_nvim.factories import (
    create_color_picker,
    create_installer,
    create_resolver,
)

app = typer.Typer(
    help="Locate, install and run the termpicker color picker.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log lookup and install details.",
    ),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@app.command("path")
def path_command() -> None:
    """Print the path of the termpicker binary."""
    binary = create_resolver().path()
    if binary is None:
        typer.echo("Termpicker binary not found", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(binary))


@app.command("install")
def install_command() -> None:
    """Install termpicker with Go or from the release archive."""
    outcome = create_installer().run()
    if not outcome.success:
        raise typer.Exit(code=1)
    typer.echo(str(outcome.path))


@app.command("platform")
def platform_command() -> None:
    """Print the release platform identifier of this host."""
    try:
        platform = OsPlatformDetector().detect()
    except UnsupportedPlatformError as exc:
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(platform.identifier)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Text that may contain a color."),
) -> None:
    """Print the first color found in TEXT."""
    color = extract_color(text)
    if color is None:
        raise typer.Exit(code=1)
    typer.echo(color)


@app.command("pick")
def pick_command(
    selection: Optional[str] = typer.Option(
        None,
        "--selection",
        "-s",
        help="Selected text; a color in it seeds the picker.",
    ),
    color: Optional[str] = typer.Option(
        None,
        "--color",
        "-c",
        help="Starting color used when the selection holds none.",
    ),
    sample_text: Optional[str] = typer.Option(
        None, "--sample-text", "-t", help="Text used to preview colors."
    ),
    background: Optional[str] = typer.Option(
        None, "--bg", help="Background used when previewing as foreground."
    ),
    foreground: Optional[str] = typer.Option(
        None, "--fg", help="Foreground used when previewing as background."
    ),
    prefer_config_color: bool = typer.Option(
        False,
        "--prefer-config-color",
        help="Let --color win over a color in the selection.",
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Install termpicker without asking."
    ),
) -> None:
    """Run termpicker and print the picked color."""
    overrides: dict[str, Any] = {
        "preview": {
            "text": sample_text,
            "background": background,
            "foreground": foreground,
        },
        "behavior": {"prefer_config_color": prefer_config_color},
    }
    if color is not None:
        overrides["starting_color"] = color

    confirm = (lambda _prompt: True) if yes else _confirm_install
    picker = create_color_picker(confirm=confirm)

    try:
        result = picker.pick(initial_text=selection, overrides=overrides)
    except TermpickerConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if not result.picked:
        raise typer.Exit(code=1)
    typer.echo(result.color)


def _confirm_install(prompt: str) -> bool:
    return typer.confirm(prompt, default=True, err=True)


if __name__ == "__main__":  # pragma: no cover
    app()
