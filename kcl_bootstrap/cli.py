"""Typer entry point for bootstrapping the KCL MultiLangDaemon."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from .bootstrap import BootstrapContainer, run_bootstrap
from .domain import LaunchOptions
from .errors import BootstrapError
from .logging_config import configure_logging
from .settings import Settings, get_settings

log = logging.getLogger(__name__)

# 2 is reserved for "java not found"
USAGE_ERROR_EXIT_CODE = 1

app = typer.Typer(
    add_completion=False,
    help="Download the KCL MultiLangDaemon jars, then launch it or print the command that does.",
)


def build_container(settings: Settings) -> BootstrapContainer:
    return BootstrapContainer(settings)


@app.command()
def bootstrap(
    java: Optional[str] = typer.Option(
        None,
        "--java",
        "-j",
        help="Path to java, used to start the KCL multi-lang daemon. Attempts to auto-detect if not specified.",
    ),
    properties: Optional[str] = typer.Option(
        None,
        "--properties",
        "-p",
        help="Path to properties file used to configure the KCL. Must be provided when --execute flag is provided.",
    ),
    jar_folder: Optional[str] = typer.Option(
        None,
        "--jar-folder",
        help="Folder to place required jars in. Defaults to ./jars",
    ),
    execute: bool = typer.Option(
        False,
        "--execute",
        "-e",
        help="Actually launch the KCL. If not specified, prints the command used to launch the KCL.",
    ),
    log_configuration: Optional[str] = typer.Option(
        None,
        "--log-configuration",
        "-l",
        help="A Logback XML configuration file.",
    ),
) -> None:
    """Fetch the daemon's jars and start (or print) the MultiLangDaemon command."""
    if execute and not properties:
        typer.echo("Error: --properties is required with --execute", err=True)
        raise typer.Exit(code=USAGE_ERROR_EXIT_CODE)

    settings = get_settings()
    configure_logging(settings)
    options = LaunchOptions(
        java_location=java,
        properties_file=properties,
        jar_folder=jar_folder,
        execute=execute,
        log_configuration=log_configuration,
    )
    container = build_container(settings)
    try:
        status = run_bootstrap(options, container)
    except BootstrapError as exc:
        log.error("%s", exc)
        raise typer.Exit(code=1) from exc
    finally:
        container.close()
    raise typer.Exit(code=status)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
