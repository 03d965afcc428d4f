from __future__ import annotations

import typer

from .commands import channel_cmd, config_cmd, endpoint_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="mgs",
        help="Message gateway channel CLI",
        no_args_is_help=True,
    )

    app.add_typer(channel_cmd.app, name="channel")
    app.add_typer(config_cmd.app, name="config")
    app.command("endpoint")(endpoint_cmd.endpoint)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
