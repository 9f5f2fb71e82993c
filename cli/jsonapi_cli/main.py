from __future__ import annotations

import typer

from .commands import calls_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="jsonapi",
        help="Call JSONAPI server methods over HTTP.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("key")(calls_cmd.key)
    app.command("url")(calls_cmd.url)
    app.command("call")(calls_cmd.call)
    app.command("call-multiple")(calls_cmd.call_multiple)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
