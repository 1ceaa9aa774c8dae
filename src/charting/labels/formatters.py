"""Axis value formatters used by the label generators.

Each axis of a generator owns exactly one formatter. A formatter is either
numeric (``NumberFormatter``) or date based (``DateFormatter``); holding a
single object per axis keeps the two kinds mutually exclusive.

Number formatting defaults to the familiar "number instance" layout:
thousands grouping, at most three fraction digits and no forced trailing
zeros. Values print with their shortest round-trip digits (``1e23`` is
``"100,000,000,000,000,000,000,000"``); only when rounding cuts into those
digits is the exact binary value rounded half-even, so ``0.0625`` becomes
``"0.062"``.

Date formatting treats numeric values as milliseconds since the Unix
epoch, matching how time series charts store their x values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Any, Protocol
import numbers

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import InvalidArgumentError, null_not_permitted
from ..settings import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_MIN_FRACTION_DIGITS,
    DEFAULT_TIMEZONE,
)

__all__ = [
    "ValueFormatter",
    "NumberFormatter",
    "DateFormatter",
    "is_date_formatter",
    "ensure_formatter",
]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_UTC_NAMES = {"UTC", "Z"}


class ValueFormatter(Protocol):  # pragma: no cover - structural only
    """Anything that turns a single data value into display text."""

    def format(self, value: Any) -> str:
        ...


@dataclass(frozen=True)
class NumberFormatter:
    """Locale neutral decimal formatter.

    Attributes:
        min_fraction_digits: Fraction digits always shown (zero padded).
        max_fraction_digits: Fraction digits kept after half-even rounding.
        grouping: Insert ``,`` thousands separators.
        spec: Optional Python format spec (e.g. ``",.2f"``). When set it
            replaces the digit options entirely.
    """

    min_fraction_digits: int = DEFAULT_MIN_FRACTION_DIGITS
    max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS
    grouping: bool = True
    spec: str | None = None

    def __post_init__(self) -> None:
        if self.min_fraction_digits < 0 or self.max_fraction_digits < 0:
            raise InvalidArgumentError(
                "Fraction digit counts must be non-negative.",
                context={
                    "min_fraction_digits": self.min_fraction_digits,
                    "max_fraction_digits": self.max_fraction_digits,
                },
            )
        if self.min_fraction_digits > self.max_fraction_digits:
            raise InvalidArgumentError(
                "min_fraction_digits exceeds max_fraction_digits.",
                context={
                    "min_fraction_digits": self.min_fraction_digits,
                    "max_fraction_digits": self.max_fraction_digits,
                },
            )

    def format(self, value: Any) -> str:
        if self.spec is not None:
            return format(value, self.spec)
        number = _to_decimal(value, self.max_fraction_digits)
        if number.is_nan():
            return "NaN"
        if number.is_infinite():
            return "-∞" if number.is_signed() else "∞"
        digits = self.max_fraction_digits
        with localcontext() as ctx:
            # quantize needs room for every integer digit plus the fraction
            ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
            rounded = number.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_EVEN)
        text = format(rounded, f"{',' if self.grouping else ''}.{digits}f")
        return self._trim_fraction(text)

    def _trim_fraction(self, text: str) -> str:
        if "." not in text:
            return text
        whole, fraction = text.split(".")
        fraction = fraction.rstrip("0").ljust(self.min_fraction_digits, "0")
        return f"{whole}.{fraction}" if fraction else whole


def _to_decimal(value: Any, max_fraction_digits: int) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    as_float = float(value)
    # shortest repr digits unless rounding would depend on the binary tail
    shortest = Decimal(repr(as_float))
    if shortest.is_finite() and shortest.as_tuple().exponent >= -max_fraction_digits:
        return shortest
    return Decimal(as_float)


@dataclass(frozen=True)
class DateFormatter:
    """``strftime`` based formatter for timestamps.

    Numeric values are epoch milliseconds (truncated to whole milliseconds).
    Naive ``datetime`` values are taken to be in ``tz``; aware ones are
    converted into it. ``tz`` accepts a zone name or a ``tzinfo`` and is
    normalised to the resolved ``tzinfo``, so ``"UTC"`` and ``timezone.utc``
    compare equal.
    """

    pattern: str = DEFAULT_DATE_PATTERN
    tz: str | tzinfo = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        null_not_permitted(self.pattern, "pattern")
        null_not_permitted(self.tz, "tz")
        object.__setattr__(self, "tz", _resolve_zone(self.tz))

    def format(self, value: Any) -> str:
        return self.to_datetime(value).strftime(self.pattern)

    def to_datetime(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=self.tz)
            return value.astimezone(self.tz)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=self.tz)
        millis = int(value)
        return (_EPOCH + timedelta(milliseconds=millis)).astimezone(self.tz)


def _resolve_zone(tz: str | tzinfo) -> tzinfo:
    if isinstance(tz, tzinfo):
        return tz
    if tz in _UTC_NAMES:
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise InvalidArgumentError(f"Unknown time zone: {tz!r}", context={"tz": tz}) from e


def is_date_formatter(formatter: Any) -> bool:
    return isinstance(formatter, DateFormatter)


def ensure_formatter(formatter: Any, name: str) -> None:
    """Validate that ``formatter`` can be used as an axis formatter."""
    null_not_permitted(formatter, name)
    if isinstance(formatter, str) or not callable(getattr(formatter, "format", None)):
        raise InvalidArgumentError(
            f"'{name}' must provide a format(value) method.",
            context={"argument": name, "type": type(formatter).__name__},
        )
