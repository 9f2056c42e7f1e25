"""Encoding of Facebook "simple types" into query parameter text.

See https://developers.facebook.com/docs/opengraph/simpletypes/ for the
formats Facebook accepts. Support for additional value types can be added
from anywhere with ``encode_simple.register``::

    @encode_simple.register
    def _(value: Fraction) -> str:
        return str(float(value))
"""

from __future__ import annotations

import numbers
from datetime import date, datetime, timezone
from decimal import Decimal
from functools import singledispatch
from typing import Any, NamedTuple

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y%m%dT%H%MZ"


class Argument(NamedTuple):
    """A query parameter whose value is already in wire format."""

    key: str
    value: str


@singledispatch
def encode_simple(value: Any) -> str:
    """Return the text Facebook expects for ``value``."""

    raise TypeError(f"{type(value).__name__} is not a Facebook simple type")


@encode_simple.register
def _encode_bool(value: bool) -> str:
    return "1" if value else "0"


@encode_simple.register
def _encode_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


@encode_simple.register
def _encode_datetime(value: datetime) -> str:
    # Naive values are taken to be UTC already.
    if value.utcoffset() is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATETIME_FORMAT)


@encode_simple.register(numbers.Integral)
def _encode_integral(value: numbers.Integral) -> str:
    return str(int(value))


@encode_simple.register(numbers.Real)
def _encode_real(value: numbers.Real) -> str:
    return repr(float(value))


@encode_simple.register
def _encode_decimal(value: Decimal) -> str:
    return str(value)


@encode_simple.register
def _encode_text(value: str) -> str:
    return value


def arg(key: str, value: Any) -> Argument:
    """Build an `Argument` from a key and any simple-type value."""

    return Argument(key, encode_simple(value))


__all__ = ["Argument", "arg", "encode_simple", "DATE_FORMAT", "DATETIME_FORMAT"]
