"""
Classification of raw filter values.

A grid sends every filter value as a string. Before a predicate can be
built the value is classified by an ordered chain of classifiers; each
returns a :class:`Classified` result or ``None`` and the first match wins::

    classify("42").kind         # ValueKind.NUMERIC
    classify("2023-05-01T00:00:00Z").kind  # ValueKind.INSTANT
    classify("central").value   # "CENTRAL"

Classifiers are pure functions, so the chain can be reordered or extended
per translator.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_OFFSET = timedelta(hours=18)

# Any Unicode decimal digit, as int() accepts.
_INTEGER = re.compile(r"[+-]?\d+")
_INSTANT = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[Tt](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]{1,9}))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}(?::[0-9]{2})?)"
)


class ValueKind(str, enum.Enum):
    NUMERIC = "numeric"
    INSTANT = "instant"
    TEXT = "text"


@dataclass(frozen=True)
class Classified:
    """
    Outcome of a successful classification.

    ``value`` is the parsed form: an ``int`` for numeric input, an aware
    ``datetime`` for an instant, the upper-cased string for text.
    ``raw`` always keeps the value exactly as received.
    """

    kind: ValueKind
    raw: str
    value: Any


Classifier = Callable[[str], Classified | None]


def parse_int(raw: str) -> int | None:
    """Return ``raw`` as a signed 32-bit integer, or ``None``."""
    if not _INTEGER.fullmatch(raw):
        return None
    number = int(raw)
    if number < INT_MIN or number > INT_MAX:
        return None
    return number


def _parse_offset(token: str) -> timezone | None:
    if token in ("Z", "z"):
        return timezone.utc
    sign = -1 if token[0] == "-" else 1
    hours = int(token[1:3])
    minutes = int(token[4:6]) if len(token) > 3 else 0
    if minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    if offset > MAX_OFFSET:
        return None
    return timezone(sign * offset)


def parse_instant(raw: str) -> datetime | None:
    """
    Return ``raw`` as an aware ``datetime`` if it is an ISO-8601 instant.

    An instant needs a date, a time with seconds and an explicit offset
    (``Z``, ``+hh`` or ``+hh:mm``). Date-only and offset-less values are not
    instants. Fractions beyond microseconds are truncated.
    """
    match = _INSTANT.fullmatch(raw)
    if match is None:
        return None
    zone = _parse_offset(match["offset"])
    if zone is None:
        return None
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=zone,
        )
    except ValueError:
        return None


def to_local_date(instant: datetime, zone: tzinfo | None = None) -> date:
    """
    Calendar date of ``instant`` in ``zone``.

    ``zone=None`` uses the system local zone. Raises ``OverflowError`` when
    the shift pushes the instant outside the supported date range.
    """
    return instant.astimezone(zone).date()


def _local_midnight(day: date, zone: tzinfo | None) -> datetime:
    midnight = datetime.combine(day, time.min)
    local = midnight.astimezone() if zone is None else midnight.replace(tzinfo=zone)
    return local.astimezone(timezone.utc)


def local_day_bounds(
    day: date, zone: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """
    UTC instants ``[start, end)`` covering the calendar ``day`` in ``zone``.

    Stored timestamps are UTC; a local calendar date is this half-open
    range of them. ``zone=None`` uses the system local zone. Raises ``OverflowError`` at the ends of the
    supported date range.
    """
    return _local_midnight(day, zone), _local_midnight(day + timedelta(days=1), zone)


def classify_numeric(raw: str) -> Classified | None:
    number = parse_int(raw)
    if number is None:
        return None
    return Classified(ValueKind.NUMERIC, raw, number)


def classify_instant(raw: str) -> Classified | None:
    instant = parse_instant(raw)
    if instant is None:
        return None
    return Classified(ValueKind.INSTANT, raw, instant)


def classify_text(raw: str) -> Classified:
    return Classified(ValueKind.TEXT, raw, raw.upper())


DEFAULT_CLASSIFIERS: tuple[Classifier, ...] = (
    classify_numeric,
    classify_instant,
    classify_text,
)


def classify(
    raw: str, classifiers: Sequence[Classifier] = DEFAULT_CLASSIFIERS
) -> Classified:
    """Run ``classifiers`` in order and return the first match.

    Falls back to :func:`classify_text` when no classifier matches.
    """
    for classifier in classifiers:
        result = classifier(raw)
        if result is not None:
            return result
    return classify_text(raw)
