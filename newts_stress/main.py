from __future__ import annotations

import sys
from typing import Optional, Sequence

import click
import typer

from newts_stress.config import get_settings
from newts_stress.drivers import dispatch
from newts_stress.errors import DriverNotFound, ParseError
from newts_stress.loader import ConfigLoader
from newts_stress.reporter import print_configuration, print_parse_error
from newts_stress.utils.logging import configure_logging, get_logger

EXIT_OK = 0
EXIT_DRIVER_FAILED = 1
EXIT_USAGE = 2
EXIT_CANCELLED = 130

log = get_logger(__name__)


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse `argv`, render the effective configuration and hand it to the
    workload driver registered for its command. Returns the exit status.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    args = list(sys.argv[1:] if argv is None else argv)

    loader = ConfigLoader()
    try:
        config = loader.parse(args)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except ParseError as exc:
        log.debug(
            "Argument parsing failed",
            extra={"error": type(exc).__name__, "option": exc.option},
        )
        print_parse_error(exc, loader.usage())
        return EXIT_USAGE

    for note in config.advisories():
        log.warning(note, extra={"command": config.command.name})

    print_configuration(config)

    try:
        dispatch(config)
    except DriverNotFound as exc:
        log.warning(f"{exc}; configuration validated only", extra={"command": config.command.name})
    except Exception:  # noqa: BLE001 - driver failures end the process with a status
        log.exception("Workload driver failed", extra={"command": config.command.name})
        return EXIT_DRIVER_FAILED
    return EXIT_OK


def main() -> None:
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(EXIT_CANCELLED)


if __name__ == "__main__":
    main()
