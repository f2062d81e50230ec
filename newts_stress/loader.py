"""
Command-line option table and loader for the stress tool.

The option table is a typer command whose signature lists every option with
its aliases, metavar and help text. Values are converted by click parameter
types built from the pure converters in `newts_stress.converters`, and the
numeric rules are checked by per-option callbacks as each value is bound.

Usage:
    from newts_stress.loader import ConfigLoader

    config = ConfigLoader().parse(["insert", "-n", "8", "-r", "3"])
    print(config.threads, config.resources)
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, Optional, Sequence, Tuple, Type

import click
import typer
from pydantic import ValidationError

from newts_stress.converters import parse_command, parse_duration, parse_timestamp
from newts_stress.domain.models import Command, Configuration
from newts_stress.errors import (
    ConstraintViolation,
    InvalidValue,
    MissingArgument,
    ParseError,
    UnknownOption,
)

PROG_NAME = "newts-stress"


class ConverterParamType(click.ParamType):
    """
    click parameter type backed by a pure text converter.

    Values that are already of the target type (option defaults) pass through;
    a ValueError from the converter becomes a click BadParameter.
    """

    def __init__(self, name: str, func: Callable[[str], Any], target: Type[Any]) -> None:
        self.name = name
        self._func = func
        self._target = target

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Any:
        if isinstance(value, self._target):
            return value
        try:
            return self._func(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


COMMAND = ConverterParamType("command", parse_command, Command)
TIMESTAMP = ConverterParamType("timestamp", parse_timestamp, datetime)
DURATION = ConverterParamType("duration", parse_duration, timedelta)


def _positive(option: str, message: str) -> Callable[[int], int]:
    def check(value: int) -> int:
        if value <= 0:
            raise ConstraintViolation(message, option=option)
        return value

    return check


def _default(field: str) -> Any:
    return Configuration.model_fields[field].default


def _seconds(field: str) -> str:
    return str(int(_default(field).total_seconds()))


app = typer.Typer(
    name=PROG_NAME,
    help="Stress a Newts time-series store with synthetic INSERT or SELECT workloads.",
    add_completion=False,
    rich_markup_mode=None,
    pretty_exceptions_enable=False,
)


@app.command()
def build_configuration(
    command: Command = typer.Argument(
        ...,
        metavar="<command>",
        help="The operation to run (insert or select).",
        click_type=COMMAND,
        show_default=False,
    ),
    threads: int = typer.Option(
        _default("threads"),
        "-n",
        "--num-threads",
        metavar="<threads>",
        help="Concurrency level.",
        callback=_positive("threads", "-n/--num-threads must be at least 1"),
    ),
    cassandra_host: str = typer.Option(
        _default("cassandra_host"),
        "-H",
        "--cassandra-host",
        metavar="<hostname>",
        help="Cassandra hostname.",
    ),
    cassandra_port: int = typer.Option(
        _default("cassandra_port"),
        "-p",
        "--cassandra-port",
        metavar="<port>",
        help="Cassandra port number.",
        callback=_positive("cassandra_port", "Cassandra port number must be greater than zero"),
    ),
    cassandra_keyspace: str = typer.Option(
        _default("cassandra_keyspace"),
        "-k",
        "--cassandra-keyspace",
        metavar="<keyspace>",
        help="Cassandra keyspace.",
    ),
    start: datetime = typer.Option(
        _default("start"),
        "-s",
        "--start",
        metavar="<start>",
        help="ISO8601 formatted start time.",
        click_type=TIMESTAMP,
        show_default=_default("start").isoformat(),
    ),
    end: datetime = typer.Option(
        _default("end"),
        "-e",
        "--end",
        metavar="<end>",
        help="ISO8601 formatted ending time.",
        click_type=TIMESTAMP,
        show_default=_default("end").isoformat(),
    ),
    interval: timedelta = typer.Option(
        _default("interval"),
        "-i",
        "--interval",
        metavar="<interval>",
        help="Sample interval in seconds.",
        click_type=DURATION,
        show_default=_seconds("interval"),
    ),
    num_resources: int = typer.Option(
        _default("num_resources"),
        "-r",
        "--num-resources",
        metavar="<resources>",
        help="Number of resources.",
        callback=_positive("num_resources", "Number of resources must be greater than zero."),
    ),
    num_metrics: int = typer.Option(
        _default("num_metrics"),
        "-m",
        "--num-metrics",
        metavar="<metrics>",
        help="Number of metrics.",
        callback=_positive("num_metrics", "Number of metrics must be greater than zero."),
    ),
    batch_size: int = typer.Option(
        _default("batch_size"),
        "-B",
        "--batch-size",
        metavar="<size>",
        help="Number of samples per batch.",
        callback=_positive("batch_size", "Batch size must be greater than zero."),
    ),
    # Expected to exceed the resolution; only reported by Configuration.advisories().
    select_length: timedelta = typer.Option(
        _default("select_length"),
        "-sl",
        "--select-length",
        metavar="<length>",
        help="Length of select in seconds.",
        click_type=DURATION,
        show_default=_seconds("select_length"),
    ),
    resolution: timedelta = typer.Option(
        _default("resolution"),
        "-R",
        "--resolution",
        metavar="<resolution>",
        help="Aggregate resolution in seconds.",
        click_type=DURATION,
        show_default=_seconds("resolution"),
    ),
) -> Configuration:
    """Stress a Newts time-series store with synthetic INSERT or SELECT workloads."""
    return Configuration(
        command=command,
        threads=threads,
        cassandra_host=cassandra_host,
        cassandra_port=cassandra_port,
        cassandra_keyspace=cassandra_keyspace,
        start=start,
        end=end,
        interval=interval,
        resolution=resolution,
        num_resources=num_resources,
        num_metrics=num_metrics,
        batch_size=batch_size,
        select_length=select_length,
    )


def _param_name(exc: click.exceptions.BadParameter) -> Optional[str]:
    return exc.param.name if exc.param is not None else None


class ConfigLoader:
    """
    Turn a raw argument vector into a validated Configuration.

    The loader only holds the immutable option table, so one instance can be
    reused for any number of argument lists.
    """

    def __init__(self, prog_name: str = PROG_NAME) -> None:
        self.prog_name = prog_name
        self._command = typer.main.get_command(app)

    def parse(self, args: Sequence[str]) -> Configuration:
        """
        Parse `args` (without the program name) into a Configuration.

        Raises
        ------
        ParseError
            One of MissingArgument, UnknownCommand, InvalidValue,
            ConstraintViolation or UnknownOption for the first failure met.
            Other usage errors (e.g. extra positional arguments) raise
            ParseError itself.
        click.exceptions.Exit
            When `--help` is given; the help text has already been printed.
        """
        try:
            ctx = self._command.make_context(self.prog_name, list(args))
        except click.exceptions.NoSuchOption as exc:
            raise UnknownOption(exc.format_message(), option=exc.option_name) from exc
        except click.exceptions.MissingParameter as exc:
            raise MissingArgument(exc.format_message(), option=_param_name(exc)) from exc
        except click.exceptions.BadParameter as exc:
            raise InvalidValue(exc.format_message(), option=_param_name(exc)) from exc
        except click.exceptions.BadOptionUsage as exc:
            raise InvalidValue(exc.format_message(), option=exc.option_name) from exc
        except click.exceptions.UsageError as exc:
            raise ParseError(exc.format_message()) from exc

        try:
            return build_configuration(**ctx.params)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            raise ConstraintViolation(f"{field}: {error['msg']}", option=field) from exc

    def usage(self) -> str:
        """Full usage text: synopsis, arguments and every option with its default."""
        ctx = click.Context(self._command, info_name=self.prog_name)
        return self._command.get_help(ctx)

    def options(self) -> Tuple[Tuple[str, ...], ...]:
        """Flag spellings of every option, in declaration order."""
        return tuple(
            tuple(param.opts)
            for param in self._command.params
            if isinstance(param, click.Option) and not param.is_eager
        )


def parse_args(args: Sequence[str]) -> Configuration:
    """Parse with a default ConfigLoader."""
    return ConfigLoader().parse(args)


__all__ = [
    "COMMAND",
    "DURATION",
    "PROG_NAME",
    "TIMESTAMP",
    "ConfigLoader",
    "ConverterParamType",
    "app",
    "build_configuration",
    "parse_args",
]
