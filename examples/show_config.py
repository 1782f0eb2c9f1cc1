#!/usr/bin/env python3
"""Benchmark configuration preview script.

Assembles a run configuration from command-line options and prints it, either
as the one-line summary or as JSON ready to be saved as a config file.

Example:
  python examples/show_config.py -d 300 -o Read -o Read -s 512KBps
"""

import logging
import sys
from datetime import timedelta
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from rw_bench.config import Config, Operation
from rw_bench.setup_logging import setup_logging
from rw_bench.speed import SpeedParseError, format_speed, parse_speed

setup_logging(level="INFO")
logger = logging.getLogger(__name__)


def main(
  duration: Annotated[
    int | None,
    typer.Option("--duration", "-d", help="Run length in seconds.", min=0),
  ] = None,
  frequency: Annotated[
    int | None,
    typer.Option("--frequency", "-f", help="Seconds between runs.", min=0),
  ] = None,
  operations: Annotated[
    list[Operation] | None,
    typer.Option(
      "--operation", "-o", help="Operation to run; repeat for several, in order."
    ),
  ] = None,
  speed: Annotated[
    str | None,
    typer.Option(
      "--speed",
      "-s",
      help="Throughput cap, e.g. 1024, 64KBps, 10MBps or pass_through.",
    ),
  ] = None,
  as_json: Annotated[
    bool, typer.Option("--json", help="Print the configuration as JSON.")
  ] = False,
) -> None:
  """Print the benchmark configuration built from the given options."""
  fields: dict[str, Any] = {}
  if duration is not None:
    fields["duration"] = timedelta(seconds=duration)
  if frequency is not None:
    fields["frequency"] = timedelta(seconds=frequency)
  if operations:
    fields["operations"] = operations
  if speed is not None:
    try:
      fields["speed"] = parse_speed(speed)
    except SpeedParseError as e:
      logger.error(f"Invalid speed {speed!r}: {e}")
      sys.exit(1)
    logger.info(f"Throughput cap: {format_speed(fields['speed'])}")

  try:
    config = Config(**fields)
  except ValidationError:
    logger.exception("Invalid configuration")
    sys.exit(1)

  if as_json:
    typer.echo(config.model_dump_json(indent=2))
  else:
    typer.echo(str(config))


if __name__ == "__main__":
  typer.run(main)
