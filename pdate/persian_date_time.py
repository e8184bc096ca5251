import datetime
import logging
import re
from functools import total_ordering

import jdatetime

from pdate.errors import DateParseError, UnsupportedFieldError
from pdate.fields import Field
from pdate.persian_date import PersianDate

logger = logging.getLogger(__name__)

_ISO_DATE_TIME = re.compile(
    r'(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})T'
    r'(?P<time>[0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{3}(?:[0-9]{3})?)?)?)'
)

_TIME_GETTERS = {
    Field.HOUR_OF_DAY: lambda t: t.hour,
    Field.MINUTE_OF_HOUR: lambda t: t.minute,
    Field.SECOND_OF_MINUTE: lambda t: t.second,
    Field.MICRO_OF_SECOND: lambda t: t.microsecond,
}


def _strptime_fields(text, fmt):
    """
    Reads date and time fields from ``text`` with jdatetime, without its leap rule.

    jdatetime refuses Esfand 30 of a year its own calendar treats as common,
    even where the 2820-year rule makes it leap.  On a refusal the day
    directive is retried as the literal ``30``; jdatetime then checks only
    the first of the month and the day is restored afterwards.
    """
    try:
        parsed = jdatetime.datetime.strptime(text, fmt)
        day = parsed.day
    except ValueError as exc:
        logger.debug("jdatetime rejected %r with format %r: %s", text, fmt, exc)
        parsed = None
        if '%d' in fmt:
            try:
                parsed = jdatetime.datetime.strptime(text, fmt.replace('%d', '30', 1))
            except ValueError:
                parsed = None
        if parsed is None or parsed.month != 12:
            raise DateParseError(f"Text '{text}' does not match format '{fmt}'") from exc
        day = 30
    return (parsed.year, parsed.month, day,
            parsed.hour, parsed.minute, parsed.second, parsed.microsecond)


@total_ordering
class PersianDateTime:
    """
    A Persian date paired with a wall-clock time, without a time zone.

    Printed as ``1400-09-28T14:20:56``.
    """

    __slots__ = ('_date', '_time')

    def __init__(self, date, time):
        if not isinstance(date, PersianDate):
            raise TypeError("date must be a PersianDate")
        if not isinstance(time, datetime.time):
            raise TypeError("time must be a datetime.time")
        if time.tzinfo is not None:
            raise ValueError("time must not carry a time zone")
        object.__setattr__(self, '_date', date)
        object.__setattr__(self, '_time', time)

    def __setattr__(self, name, value):
        raise AttributeError("PersianDateTime is immutable")

    def __reduce__(self):
        return type(self), (self._date, self._time)

    @classmethod
    def of(cls, year, month=None, day_of_month=None, hour=0, minute=0, second=0, microsecond=0):
        """
        Builds a date-time either from a date and a time, ``of(date, time)``,
        or from its fields, ``of(1400, 9, 28, 14, 20, 56)``.
        """
        if isinstance(year, PersianDate):
            return cls(year, month)
        return cls(PersianDate(year, month, day_of_month), datetime.time(hour, minute, second, microsecond))

    @classmethod
    def from_gregorian(cls, value):
        """Converts the date part of a :class:`datetime.datetime`; the time is kept as is."""
        return cls(PersianDate.from_gregorian(value.date()), value.time().replace(tzinfo=None))

    @classmethod
    def now(cls, clock=datetime.datetime.now):
        """
        Returns the current date-time.

        :param clock: Callable returning the current Gregorian ``datetime``.
        """
        return cls.from_gregorian(clock())

    @classmethod
    def parse(cls, text, fmt=None):
        """
        Parses ``text`` into a date-time.

        Without ``fmt`` the text must be ISO-like, ``1400-12-03T12:15:30``.
        With ``fmt`` it is read with :func:`jdatetime.datetime.strptime`
        using ``strftime`` directives, e.g. ``"%Y/%m/%d %H:%M"``; only the
        parsed fields are taken from jdatetime, validation is our own.
        """
        if fmt is None:
            match = _ISO_DATE_TIME.fullmatch(text)
            if match is None:
                raise DateParseError(f"Text '{text}' could not be parsed as a Persian date-time")
            return cls(PersianDate.parse(match.group('date')), datetime.time.fromisoformat(match.group('time')))
        return cls.of(*_strptime_fields(text, fmt))

    @property
    def date(self):
        return self._date

    @property
    def time(self):
        return self._time

    @property
    def year(self):
        return self._date.year

    @property
    def month(self):
        return self._date.month

    @property
    def day_of_month(self):
        return self._date.day_of_month

    @property
    def hour(self):
        return self._time.hour

    @property
    def minute(self):
        return self._time.minute

    @property
    def second(self):
        return self._time.second

    @property
    def microsecond(self):
        return self._time.microsecond

    def to_gregorian(self):
        return datetime.datetime.combine(self._date.to_gregorian(), self._time)

    def is_supported(self, field):
        return field in _TIME_GETTERS or self._date.is_supported(field)

    def get_long(self, field):
        getter = _TIME_GETTERS.get(field)
        if getter is not None:
            return getter(self._time)
        if self._date.is_supported(field):
            return self._date.get_long(field)
        raise UnsupportedFieldError(field)

    def plus_days(self, days):
        return PersianDateTime(self._date.plus_days(days), self._time)

    def plus_months(self, months):
        return PersianDateTime(self._date.plus_months(months), self._time)

    def plus_years(self, years):
        return PersianDateTime(self._date.plus_years(years), self._time)

    def with_time(self, time):
        return PersianDateTime(self._date, time)

    def __eq__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return (self._date, self._time) == (other._date, other._time)

    def __lt__(self, other):
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return (self._date, self._time) < (other._date, other._time)

    def __hash__(self):
        return hash((self._date, self._time))

    def __str__(self):
        return f"{self._date}T{self._time.isoformat()}"

    def __repr__(self):
        return f"PersianDateTime({self._date!r}, {self._time!r})"
