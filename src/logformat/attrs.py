"""
Attributes and value rendering.

An attribute is a key/value pair attached to a record or fixed on a sink.
Values are rendered to text by ``describe``, a single-dispatch function.
Support for a new value kind is added by registering it::

    @describe.register
    def _(value: Decimal) -> str:
        return format(value, "f")
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from functools import singledispatch
from typing import Any

BAD_KEY = "!BADKEY"
ERROR_PREFIX = "!ERROR:"


@dataclass(frozen=True)
class Attr:
    """A key/value pair. Attributes with an empty key are never rendered."""

    key: str
    value: Any

    def __str__(self) -> str:
        return f"{self.key}={describe_safely(self.value)}"


@singledispatch
def describe(value: Any) -> str:
    """
    Render an attribute value as text.

    Objects with a ``log_value()`` method are resolved first and the
    result described in turn. Anything else falls back to ``str()``.
    """
    log_value = getattr(value, "log_value", None)
    if callable(log_value):
        return describe(log_value())
    return str(value)


@describe.register
def _describe_str(value: str) -> str:
    return value


@describe.register
def _describe_bool(value: bool) -> str:
    return "true" if value else "false"


@describe.register
def _describe_int(value: int) -> str:
    return str(value)


@describe.register
def _describe_float(value: float) -> str:
    return format_float(value)


@describe.register
def _describe_timedelta(value: timedelta) -> str:
    return format_duration(value)


@describe.register
def _describe_date(value: date) -> str:
    # datetime is a date subclass; both render as ISO 8601
    return value.isoformat()


@describe.register
def _describe_exception(value: BaseException) -> str:
    return str(value)


def describe_safely(value: Any) -> str:
    """
    Like ``describe``, but a value that fails to render becomes a placeholder.

    ``!ERROR:RuntimeError: boom`` is rendered in place of the value, so a
    broken ``__str__`` never stops the rest of the line from being written.
    """
    try:
        return describe(value)
    except Exception as exc:
        return f"{ERROR_PREFIX}{type(exc).__name__}: {exc}"


def format_float(value: float) -> str:
    """
    Render a float with the fewest digits that round-trip.

    Plain decimal notation is used for exponents from -4 up to 5, and
    scientific notation with a two-digit exponent outside that range::

        100.0 -> 100    1.2 -> 1.2    1e6 -> 1e+06    0.00001 -> 1e-05
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    exp10 = point - 1
    prefix = "-" if sign else ""

    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{exp10:+03d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def format_duration(delta: timedelta) -> str:
    """
    Render a duration in compact unit form.

    Examples: ``0s``, ``250µs``, ``1.5ms``, ``2.25s``, ``3m0s``, ``1h2m3.5s``.
    """
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_with_fraction(micros, 1_000)}ms"

    total_seconds, fraction = divmod(micros, 1_000_000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    text = _with_fraction(seconds * 1_000_000 + fraction, 1_000_000) + "s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def _with_fraction(amount: int, unit: int) -> str:
    whole, frac = divmod(amount, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def args_to_attrs(
    args: Sequence[Any] = (),
    kwargs: Mapping[str, Any] | None = None,
) -> tuple[Attr, ...]:
    """
    Convert loose logging arguments into an ordered tuple of attributes.

    Positional ``Attr`` instances are used as is. Other positional arguments
    are read as alternating key/value pairs. A dangling value, or a
    non-string in key position, is kept under the ``!BADKEY`` key.
    Keyword arguments follow the positional ones, in call order.

    Example:
        >>> args_to_attrs(("user", "ada", Attr("n", 3)), {"ok": True})
        (Attr(key='user', value='ada'), Attr(key='n', value=3), Attr(key='ok', value=True))
    """
    result: list[Attr] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if isinstance(arg, Attr):
            result.append(arg)
            i += 1
        elif isinstance(arg, str) and i + 1 < len(args):
            result.append(Attr(arg, args[i + 1]))
            i += 2
        else:
            result.append(Attr(BAD_KEY, arg))
            i += 1

    if kwargs:
        result.extend(Attr(key, value) for key, value in kwargs.items())

    return tuple(result)
