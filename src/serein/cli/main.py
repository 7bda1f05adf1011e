"""serein CLI entrypoint.

Typer application; subcommands live in `serein.cli.commands` and register
themselves on `app`.
"""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="serein",
    add_completion=False,
    no_args_is_help=True,
    help="A Minecraft: Bedrock Edition creation manage tool.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """serein CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("version")
def version() -> None:
    """Print the installed serein version."""
    from serein import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `serein --help` is fast.
    """
    from serein.cli.commands import init as init_cmd
    from serein.cli.commands import switch as switch_cmd
    from serein.cli.commands import tasks as tasks_cmd

    init_cmd.register(app)
    switch_cmd.register(app)
    tasks_cmd.register(app)


_register_commands()


def main() -> None:
    app()
