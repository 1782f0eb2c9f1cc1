"""Run configuration and throughput caps for read/write benchmarks."""

from rw_bench.config import Config, Operation
from rw_bench.speed import (
  GIB,
  KIB,
  MIB,
  USIZE_MAX,
  Bps,
  PassThrough,
  Speed,
  SpeedParseError,
  format_speed,
  parse_speed,
)

__all__ = [
  # Units
  "GIB",
  "KIB",
  "MIB",
  "USIZE_MAX",
  # Data model
  "Bps",
  "Config",
  "Operation",
  "PassThrough",
  "Speed",
  # Text encoding
  "SpeedParseError",
  "format_speed",
  "parse_speed",
]
