from __future__ import annotations

import typer

from .util import configure_logging, configure_stdio

app = typer.Typer(help="manifest-config: inspect crash-reporting configuration from manifest metadata")


@app.callback()
def _init(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level for diagnostics written to stderr",
        envvar="MANIFEST_CONFIG_LOG_LEVEL",
    ),
):
    configure_stdio()
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


from .commands import config_cmd as config_cmd  # noqa: E402

app.add_typer(config_cmd.app, name="config", help="Config inspection and validation")


def main():
    app()
