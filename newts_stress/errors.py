"""
Error taxonomy for the stress tool configuration surface.

Every failure detected while turning an argument vector into a Configuration
is raised as a ParseError subclass. The CLI prints the message together with
the usage text and exits; nothing in the loader recovers from these.
"""

from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """Base class for argument parsing failures."""

    def __init__(self, message: str, option: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.option = option

    def __str__(self) -> str:
        return self.message


class MissingArgument(ParseError):
    """The positional <command> argument was not supplied."""


class UnknownCommand(ParseError):
    """The positional argument does not name a known command."""


class InvalidValue(ParseError):
    """An option value could not be converted to the option's type."""


class ConstraintViolation(ParseError):
    """A well-formed value fails the option's range rule."""


class UnknownOption(ParseError):
    """An unrecognized flag was supplied."""


class DriverNotFound(LookupError):
    """No workload driver is registered for a command."""


__all__ = [
    "ParseError",
    "MissingArgument",
    "UnknownCommand",
    "InvalidValue",
    "ConstraintViolation",
    "UnknownOption",
    "DriverNotFound",
]
