from __future__ import annotations

import typer

from .commands import auth_cmd, config_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="syncano",
        help="syncano CLI",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(config_cmd.app, name="config")
    app.command("whoami")(auth_cmd.whoami_impl)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
