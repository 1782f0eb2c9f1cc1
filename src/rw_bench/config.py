"""Configuration module for rw_bench."""

import logging
from datetime import timedelta
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from rw_bench.speed import (
  PASS_THROUGH_TAG,
  USIZE_MAX,
  Bps,
  PassThrough,
  Speed,
  format_speed,
  parse_speed,
)

logger = logging.getLogger(__name__)

_SECOND = timedelta(seconds=1)


class Operation(StrEnum):
  """Kind of I/O a benchmark run performs."""

  READ = "Read"
  WRITE = "Write"


class Config(BaseModel):
  """Configuration for a benchmark run.

  ``Config()`` is the default run: ten minutes of reads then writes every
  half hour, uncapped.

  Attributes:
    duration: Total length of one run.
    frequency: Interval between runs.
    operations: Operations performed by a run, in order. Repeats are allowed.
    speed: Throughput cap applied to each operation.
  """

  duration: timedelta = Field(
    timedelta(minutes=10), description="Total length of one run."
  )
  frequency: timedelta = Field(
    timedelta(minutes=30), description="Interval between runs."
  )
  operations: tuple[Operation, ...] = Field(
    (Operation.READ, Operation.WRITE),
    description="Operations performed by a run, in order.",
  )
  speed: Speed = Field(
    default_factory=PassThrough,
    description="Throughput cap applied to each operation.",
  )

  model_config = {"frozen": True}

  @field_validator("duration", "frequency")
  @classmethod
  def _check_non_negative(cls, value: timedelta) -> timedelta:
    if value < timedelta(0):
      msg = "must not be negative"
      raise ValueError(msg)
    return value

  @field_validator("speed", mode="before")
  @classmethod
  def _decode_speed(cls, value: Any) -> Any:
    """Accept a byte count, the PassThrough tag, or a human speed string."""
    if isinstance(value, bool):
      msg = "speed must be a byte count or a speed string"
      raise ValueError(msg)  # noqa: TRY004
    if isinstance(value, int):
      if not 0 <= value <= USIZE_MAX:
        msg = f"byte rate {value} is out of range"
        raise ValueError(msg)
      return Bps(bps=value)
    if isinstance(value, str):
      if value == PASS_THROUGH_TAG:
        return PassThrough()
      speed = parse_speed(value)
      logger.debug(f"Decoded speed {value!r} as {format_speed(speed)}")
      return speed
    return value

  @field_serializer("speed")
  def _encode_speed(self, speed: Speed) -> int | str:
    if isinstance(speed, PassThrough):
      return PASS_THROUGH_TAG
    return speed.bps

  def __str__(self) -> str:
    operations = ":".join(str(op) for op in self.operations)
    return (
      f"Config {{Duration: {self.duration // _SECOND}sec, "
      f"Frequency: {self.frequency // _SECOND}sec, "
      f"Operations: {operations}, "
      f"Speed: {format_speed(self.speed)}}}"
    )
