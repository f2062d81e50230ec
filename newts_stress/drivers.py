"""
Workload driver interface and registry.

The INSERT and SELECT workload generators live outside this package. They
plug in by implementing the WorkloadDriver protocol and registering a factory
for their command; `dispatch` hands the parsed Configuration to the driver
registered for `config.command`.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Protocol, runtime_checkable

from newts_stress.domain.models import Command, Configuration
from newts_stress.errors import DriverNotFound
from newts_stress.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class WorkloadDriver(Protocol):
    """
    Common interface of the workload drivers.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    command : Command
        The command this driver runs.
    """

    name: str
    command: Command

    def run(self, config: Configuration) -> None:
        """Run the workload described by `config`. Receives only validated values."""
        ...


_registry: Dict[Command, Callable[[], WorkloadDriver]] = {}


def register_driver(command: Command, factory: Callable[[], WorkloadDriver]) -> None:
    """Register (or replace) the driver factory for `command`."""
    _registry[command] = factory


def unregister_driver(command: Command) -> None:
    _registry.pop(command, None)


def available_drivers() -> List[Command]:
    """Commands that currently have a registered driver, in declaration order."""
    return [command for command in Command if command in _registry]


def resolve_driver(command: Command) -> WorkloadDriver:
    if command not in _registry:
        raise DriverNotFound(f"No workload driver registered for {command.name}")
    return _registry[command]()


def dispatch(config: Configuration) -> WorkloadDriver:
    """Run the driver registered for `config.command` and return it."""
    driver = resolve_driver(config.command)
    log.info(
        f"[DRIVER START] {driver.name}",
        extra={"driver": driver.name, "command": config.command.name, "threads": config.threads},
    )
    driver.run(config)
    log.info(f"[DRIVER COMPLETE] {driver.name}", extra={"driver": driver.name})
    return driver


__all__ = [
    "WorkloadDriver",
    "available_drivers",
    "dispatch",
    "register_driver",
    "resolve_driver",
    "unregister_driver",
]
