"""Throughput cap values and their human-friendly text encoding.

A speed is either an exact byte rate (``Bps``) or ``PassThrough``, meaning
no cap at all. ``parse_speed`` reads strings such as ``"1024"``,
``"512KBps"`` or ``"pass_through"``; ``format_speed`` renders a speed with
the largest binary unit that keeps the number at or above one.

The two are deliberately not inverses: ``format_speed(Bps(bps=1500))`` gives
``"1.46484375KBps"``, which ``parse_speed`` rejects since it only reads
integers.
"""

import re

from pydantic import BaseModel, Field, field_validator

KIB = 1 << 10
MIB = 1 << 20
GIB = 1 << 30

# Byte rates are bounded by a 64-bit unsigned word.
USIZE_MAX = (1 << 64) - 1

PASS_THROUGH_INPUT = "pass_through"
PASS_THROUGH_TAG = "PassThrough"
BPS_SUFFIX = "Bps"

_SCALES = {"K": KIB, "M": MIB, "G": GIB}
_DIGITS = re.compile(r"[0-9]+")


class SpeedParseError(ValueError):
  """Raised when a string cannot be read as a speed."""


class Bps(BaseModel):
  """An exact throughput cap in bytes per second.

  Attributes:
    bps: The byte rate.
  """

  bps: int = Field(..., ge=0, strict=True)

  model_config = {"frozen": True, "extra": "forbid"}

  @field_validator("bps")
  @classmethod
  def _check_width(cls, value: int) -> int:
    if value > USIZE_MAX:
      msg = f"byte rate must not exceed {USIZE_MAX}"
      raise ValueError(msg)
    return value

  def __str__(self) -> str:
    return format_speed(self)


class PassThrough(BaseModel):
  """No throughput cap."""

  model_config = {"frozen": True, "extra": "forbid"}

  def __str__(self) -> str:
    return format_speed(self)


Speed = Bps | PassThrough


def _parse_unsigned(text: str) -> int:
  """Read ``text`` as an unsigned base-10 integer no larger than USIZE_MAX."""
  if not text:
    msg = "cannot parse integer from empty string"
    raise SpeedParseError(msg)
  if _DIGITS.fullmatch(text) is None:
    msg = "invalid digit found in string"
    raise SpeedParseError(msg)

  value = int(text)
  if value > USIZE_MAX:
    msg = "number too large to fit in target type"
    raise SpeedParseError(msg)
  return value


def parse_speed(text: str) -> Speed:
  """Parse a human-entered throughput cap.

  Accepted forms, checked in order:
    - ``"pass_through"``: no cap.
    - ``"<n>Bps"``, ``"<n>KBps"``, ``"<n>MBps"``, ``"<n>GBps"``: ``n`` bytes
      per second scaled by 1, 2**10, 2**20 or 2**30.
    - ``"<n>"``: ``n`` bytes per second.

  Args:
    text: The string to parse.

  Returns:
    The parsed speed.

  Raises:
    SpeedParseError: If ``text`` matches none of the forms above or the
      scaled value does not fit in USIZE_MAX.
  """
  if text == PASS_THROUGH_INPUT:
    return PassThrough()

  if not text.endswith(BPS_SUFFIX):
    return Bps(bps=_parse_unsigned(text))

  body = text[: -len(BPS_SUFFIX)]
  if not body:
    msg = "Invalid speed"
    raise SpeedParseError(msg)

  # Only a K/M/G right before "Bps" is a unit; "1024Bps" keeps its last digit.
  scale = _SCALES.get(body[-1], 1)
  if scale != 1:
    body = body[:-1]

  value = _parse_unsigned(body) * scale
  if value > USIZE_MAX:
    msg = "overflow"
    raise SpeedParseError(msg)

  return Bps(bps=value)


def _format_number(value: float) -> str:
  """Shortest decimal for ``value``, dropping a zero fractional part."""
  text = repr(value)
  if text.endswith(".0"):
    return text[:-2]
  return text


def format_speed(speed: Speed) -> str:
  """Render a speed using the largest binary unit not exceeding it.

  Args:
    speed: The speed to render.

  Returns:
    ``"PassThrough"`` or the byte rate as ``Bps``, ``KBps``, ``MBps`` or
    ``GBps``. Scaled rates may be fractional, e.g. ``"1.5KBps"``.
  """
  if isinstance(speed, PassThrough):
    return PASS_THROUGH_TAG

  bps = speed.bps
  if bps < KIB:
    return f"{bps}{BPS_SUFFIX}"
  if bps < MIB:
    return f"{_format_number(float(bps) / KIB)}K{BPS_SUFFIX}"
  if bps < GIB:
    return f"{_format_number(float(bps) / MIB)}M{BPS_SUFFIX}"
  return f"{_format_number(float(bps) / GIB)}G{BPS_SUFFIX}"
