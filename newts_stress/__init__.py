"""
newts-stress - configuration surface of a Newts/Cassandra stress tool.

Turns a command line into a validated, immutable Configuration for the INSERT
and SELECT workload drivers:

- Option table with short and long aliases (typer/click)
- ISO-8601 timestamp and duration converters
- Field-local constraint checks with a typed error taxonomy
- Derived values (heartbeat, synthetic resource and metric names)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "Apache-2.0"

# Public API exports
from newts_stress.config import Settings, get_settings
from newts_stress.converters import parse_duration, parse_timestamp
from newts_stress.domain.models import CASSANDRA_TTL, Command, Configuration
from newts_stress.drivers import WorkloadDriver, dispatch, register_driver
from newts_stress.errors import (
    ConstraintViolation,
    DriverNotFound,
    InvalidValue,
    MissingArgument,
    ParseError,
    UnknownCommand,
    UnknownOption,
)
from newts_stress.loader import ConfigLoader, parse_args
from newts_stress.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Settings
    "Settings",
    "get_settings",
    # Configuration
    "CASSANDRA_TTL",
    "Command",
    "Configuration",
    "ConfigLoader",
    "parse_args",
    "parse_duration",
    "parse_timestamp",
    # Errors
    "ParseError",
    "MissingArgument",
    "UnknownCommand",
    "InvalidValue",
    "ConstraintViolation",
    "UnknownOption",
    "DriverNotFound",
    # Drivers
    "WorkloadDriver",
    "dispatch",
    "register_driver",
    # Logging
    "configure_logging",
    "get_logger",
]
