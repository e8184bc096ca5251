"""Fields, units and value ranges shared by the date types.

The names follow the usual ISO-8601 vocabulary so that callers moving
between calendars read the same words in each of them.
"""

from enum import Enum, IntEnum
from typing import NamedTuple

from pdate.util.math_util import is_between


class ValueRange(NamedTuple):
    """Valid values of a field.

    ``largest_minimum`` and ``smallest_maximum`` describe variable bounds,
    e.g. a month has at least 29 and at most 31 days.
    """

    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    @classmethod
    def of(cls, minimum, maximum, largest_minimum=None, smallest_maximum=None):
        return cls(
            minimum,
            minimum if largest_minimum is None else largest_minimum,
            maximum if smallest_maximum is None else smallest_maximum,
            maximum,
        )

    def is_fixed(self):
        return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

    def is_valid_value(self, value):
        return is_between(value, self.minimum, self.maximum)

    def __str__(self):
        low = str(self.minimum) if self.minimum == self.largest_minimum else f"{self.minimum}/{self.largest_minimum}"
        high = str(self.maximum) if self.smallest_maximum == self.maximum else f"{self.smallest_maximum}/{self.maximum}"
        return f"{low} - {high}"


class Field(Enum):
    # date fields
    DAY_OF_WEEK = 'DayOfWeek'
    ALIGNED_DAY_OF_WEEK_IN_MONTH = 'AlignedDayOfWeekInMonth'
    ALIGNED_DAY_OF_WEEK_IN_YEAR = 'AlignedDayOfWeekInYear'
    DAY_OF_MONTH = 'DayOfMonth'
    DAY_OF_YEAR = 'DayOfYear'
    EPOCH_DAY = 'EpochDay'
    ALIGNED_WEEK_OF_MONTH = 'AlignedWeekOfMonth'
    ALIGNED_WEEK_OF_YEAR = 'AlignedWeekOfYear'
    MONTH_OF_YEAR = 'MonthOfYear'
    PROLEPTIC_MONTH = 'ProlepticMonth'
    YEAR_OF_ERA = 'YearOfEra'
    YEAR = 'Year'
    ERA = 'Era'
    # time fields
    HOUR_OF_DAY = 'HourOfDay'
    MINUTE_OF_HOUR = 'MinuteOfHour'
    SECOND_OF_MINUTE = 'SecondOfMinute'
    MICRO_OF_SECOND = 'MicroOfSecond'

    def is_date_based(self):
        return self not in TIME_FIELDS

    def is_time_based(self):
        return self in TIME_FIELDS

    def range(self):
        """Calendar-independent range of the field."""
        return _GENERIC_RANGES[self]

    def __str__(self):
        return self.value


TIME_FIELDS = frozenset({
    Field.HOUR_OF_DAY,
    Field.MINUTE_OF_HOUR,
    Field.SECOND_OF_MINUTE,
    Field.MICRO_OF_SECOND,
})

_GENERIC_RANGES = {
    Field.DAY_OF_WEEK: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange.of(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange.of(1, 7),
    Field.DAY_OF_MONTH: ValueRange.of(1, 31, smallest_maximum=28),
    Field.DAY_OF_YEAR: ValueRange.of(1, 366, smallest_maximum=365),
    Field.EPOCH_DAY: ValueRange.of(-365243219162, 365241780471),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 5, smallest_maximum=4),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange.of(1, 53),
    Field.MONTH_OF_YEAR: ValueRange.of(1, 12),
    Field.PROLEPTIC_MONTH: ValueRange.of(-999999999 * 12, 999999999 * 12 + 11),
    Field.YEAR_OF_ERA: ValueRange.of(1, 1000000000, smallest_maximum=999999999),
    Field.YEAR: ValueRange.of(-999999999, 999999999),
    Field.ERA: ValueRange.of(0, 1),
    Field.HOUR_OF_DAY: ValueRange.of(0, 23),
    Field.MINUTE_OF_HOUR: ValueRange.of(0, 59),
    Field.SECOND_OF_MINUTE: ValueRange.of(0, 59),
    Field.MICRO_OF_SECOND: ValueRange.of(0, 999999),
}


class Unit(Enum):
    MICROS = 'Micros'
    SECONDS = 'Seconds'
    MINUTES = 'Minutes'
    HOURS = 'Hours'
    HALF_DAYS = 'HalfDays'
    DAYS = 'Days'
    WEEKS = 'Weeks'
    MONTHS = 'Months'
    YEARS = 'Years'
    DECADES = 'Decades'
    CENTURIES = 'Centuries'
    MILLENNIA = 'Millennia'
    ERAS = 'Eras'
    FOREVER = 'Forever'

    def __str__(self):
        return self.value


# months per unit, for the month-based units
MONTHS_PER_UNIT = {
    Unit.MONTHS: 1,
    Unit.YEARS: 12,
    Unit.DECADES: 120,
    Unit.CENTURIES: 1200,
    Unit.MILLENNIA: 12000,
}


class DayOfWeek(IntEnum):
    """Day of the week, numbered from Monday (1) to Sunday (7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def plus(self, days):
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days):
        return self.plus(-days)
