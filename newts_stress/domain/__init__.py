"""
Domain package for the stress tool.

Exports the command enum and the immutable Configuration value handed to the
workload drivers. Keep this package focused on data definitions and validation.
"""

from newts_stress.domain.models import (
    CASSANDRA_TTL,
    DEFAULT_END,
    DEFAULT_START,
    Command,
    Configuration,
)

__all__ = [
    "CASSANDRA_TTL",
    "DEFAULT_END",
    "DEFAULT_START",
    "Command",
    "Configuration",
]
