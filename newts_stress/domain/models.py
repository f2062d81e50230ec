"""
Domain models for the stress tool.

`Configuration` is the immutable value every workload driver receives. The
loader builds it from command-line options, but the model validates its own
numeric constraints so an instance built directly holds the same invariants.
"""
from __future__ import annotations

import enum
from datetime import datetime, timedelta, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator

# Number of seconds to keep Cassandra-stored samples.
CASSANDRA_TTL = 86400

DEFAULT_START = datetime.fromtimestamp(900_000_000, tz=timezone.utc)
DEFAULT_END = datetime.fromtimestamp(931_536_000, tz=timezone.utc)


class Command(str, enum.Enum):
    """Workload to run."""

    INSERT = "insert"
    SELECT = "select"


class Configuration(BaseModel):
    """
    Validated stress tool configuration.

    Derived values (`heartbeat`, `resources`, `metrics`) are recomputed on every
    access from the primary fields and cannot be set.
    """

    command: Command = Field(..., description="The operation to run.")
    threads: int = Field(4, gt=0, description="Concurrency level.")
    cassandra_host: str = Field("localhost", description="Cassandra hostname.")
    cassandra_port: int = Field(9042, gt=0, description="Cassandra port number.")
    cassandra_keyspace: str = Field("newts", description="Cassandra keyspace.")
    start: datetime = Field(DEFAULT_START, description="Start of the workload time range.")
    end: datetime = Field(DEFAULT_END, description="End of the workload time range.")
    interval: timedelta = Field(timedelta(seconds=300), description="Sample interval.")
    resolution: timedelta = Field(timedelta(seconds=3600), description="Aggregate resolution.")
    num_resources: int = Field(1, gt=0, description="Number of resources.")
    num_metrics: int = Field(1, gt=0, description="Number of metrics.")
    batch_size: int = Field(100, gt=0, description="Number of samples per batch.")
    select_length: timedelta = Field(timedelta(seconds=86400), description="Length of select.")
    cassandra_ttl: int = Field(CASSANDRA_TTL, gt=0, description="Sample retention in seconds.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("start", "end")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_validator("interval", "resolution", "select_length")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value

    @property
    def heartbeat(self) -> timedelta:
        # There is presently no option to assign this; hard-coded to 2x the sample interval.
        return self.interval * 2

    @property
    def resources(self) -> List[str]:
        return [f"r{i}" for i in range(self.num_resources)]

    @property
    def metrics(self) -> List[str]:
        return [f"m{i}" for i in range(self.num_metrics)]

    def advisories(self) -> List[str]:
        """
        Report cross-field relationships that are expected but not enforced.

        Returns an empty list when the resolution exceeds the interval and the
        select length exceeds the resolution.
        """
        notes: List[str] = []
        if self.resolution <= self.interval:
            notes.append(
                f"resolution ({int(self.resolution.total_seconds())}s) should be greater "
                f"than interval ({int(self.interval.total_seconds())}s)"
            )
        if self.select_length <= self.resolution:
            notes.append(
                f"select length ({int(self.select_length.total_seconds())}s) should be greater "
                f"than resolution ({int(self.resolution.total_seconds())}s)"
            )
        return notes


__all__ = ["CASSANDRA_TTL", "Command", "Configuration", "DEFAULT_END", "DEFAULT_START"]
