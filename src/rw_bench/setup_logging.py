"""Logging configuration for the rw_bench package."""

import coloredlogs

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
  """Configure the root logger with a short, colored, and tidy format.

  Should be called once at the entry point of the application.

  Args:
    level: Logging level (e.g., "INFO", "DEBUG", "WARNING").
  """
  coloredlogs.install(
    level=level,
    fmt=LOG_FORMAT,
    datefmt=DATE_FORMAT,
  )
