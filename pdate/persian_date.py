import logging
import re

from pdate.abstract_date import AbstractDate
from pdate.chronology import PERSIAN
from pdate.civil_date import CivilDate
from pdate.constants import DAYS_IN_WEEK, JULIAN_DAY_TO_1970, MAX_YEAR, MIN_YEAR
from pdate.errors import (
    DateParseError,
    InvalidCalendarDateError,
    NonLeapEsfandError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from pdate.fields import MONTHS_PER_UNIT, DayOfWeek, Field, Unit, ValueRange
from pdate.period import Period
from pdate.persian.algorithmic_converter import AlgorithmicConverter
from pdate.persian.era import PersianEra
from pdate.persian.month import PersianMonth
from pdate.util.math_util import trunc_div
from pdate.util.twelve_months_year import TwelveMonthsYear
from pdate.year_month_date import YearMonthDate

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')


class PersianDate(AbstractDate, YearMonthDate):
    """
    An immutable date in the Solar Hijri (Persian, Jalali) calendar.

    Build one from its fields, from a day number or from a date of another
    calendar::

        PersianDate(1396, 8, 6)
        PersianDate(jdn=2458054)
        PersianDate(date=datetime.date(2017, 10, 28))

    Construction always validates, so an instance is a real calendar day
    between :attr:`MIN` and :attr:`MAX`.  Arithmetic returns new instances.
    """

    __slots__ = ()

    jdn_of_1970 = JULIAN_DAY_TO_1970

    MIN = None
    MAX = None

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        super().__init__(year=year, month=month, day_of_month=day_of_month, jdn=jdn, date=date)

    @classmethod
    def validate(cls, year, month, day_of_month):
        PERSIAN.check_valid_value(year, Field.YEAR)
        PERSIAN.check_valid_value(month, Field.MONTH_OF_YEAR)
        PERSIAN.check_valid_value(day_of_month, Field.DAY_OF_MONTH)
        leap_year = AlgorithmicConverter.is_leap_year(year)
        persian_month = PersianMonth(month)
        if day_of_month > persian_month.length(leap_year):
            if persian_month is PersianMonth.ESFAND and day_of_month == 30 and not leap_year:
                raise NonLeapEsfandError(year)
            raise InvalidCalendarDateError(
                year, month, day_of_month, f"Invalid date {persian_month.name} {day_of_month}"
            )

    # Factories

    @classmethod
    def of(cls, year, month, day_of_month):
        return cls(year, month, day_of_month)

    @classmethod
    def of_julian_day(cls, jdn):
        """
        Returns the date of a day number; ``2458054`` is 1396-08-06.

        :raises NonPositiveDayCountError: if ``jdn`` is not positive.
        :raises OutOfRangeError: if the date falls outside the supported years.
        """
        return cls(jdn=jdn)

    @classmethod
    def of_epoch_day(cls, epoch_day):
        """Returns the date ``epoch_day`` days after Gregorian 1970-01-01; ``17468`` is 1396-08-07."""
        return cls(jdn=epoch_day + JULIAN_DAY_TO_1970)

    @classmethod
    def from_gregorian(cls, value):
        """
        Converts a Gregorian date to its Persian equivalent.

        :param value: A :class:`datetime.date`, a :class:`datetime.datetime`
            (its time is ignored) or a :class:`CivilDate`.
        """
        return cls(date=value)

    @classmethod
    def of_gregorian(cls, year, month, day_of_month):
        return cls(date=CivilDate(year, month, day_of_month))

    @classmethod
    def parse(cls, text):
        """Parses the canonical ``YYYY-MM-DD`` form, e.g. ``1396-08-06``."""
        match = _ISO_DATE.fullmatch(text)
        if match is None:
            raise DateParseError(f"Text '{text}' could not be parsed as a Persian date")
        return cls(*(int(group) for group in match.groups()))

    @classmethod
    def from_jdn(cls, jdn):
        return AlgorithmicConverter.from_jdn(jdn)

    # Converters

    def to_jdn(self):
        return AlgorithmicConverter.to_jdn(self.year, self.month, self.day_of_month)

    def to_gregorian(self):
        return self.to_civil().to_date()

    def to_civil(self):
        return CivilDate(date=self)

    # Accessors

    @property
    def chronology(self):
        return PERSIAN

    @property
    def era(self):
        return PersianEra.AHS

    @property
    def persian_month(self):
        return PersianMonth(self.month)

    @property
    def day_of_year(self):
        return self.persian_month.days_to_first_of_month() + self.day_of_month

    @property
    def day_of_week(self):
        return DayOfWeek((self.to_jdn() + 1) % DAYS_IN_WEEK + 1)

    @property
    def proleptic_month(self):
        return TwelveMonthsYear.proleptic_month(self.year, self.month)

    @property
    def aligned_day_of_week_in_month(self):
        return (self.day_of_month - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_day_of_week_in_year(self):
        return (self.day_of_year - 1) % DAYS_IN_WEEK + 1

    @property
    def aligned_week_of_month(self):
        return (self.day_of_month - 1) // DAYS_IN_WEEK + 1

    @property
    def aligned_week_of_year(self):
        return (self.day_of_year - 1) // DAYS_IN_WEEK + 1

    def is_leap_year(self):
        return AlgorithmicConverter.is_leap_year(self.year)

    def length_of_month(self):
        return self.persian_month.length(self.is_leap_year())

    def length_of_year(self):
        return 366 if self.is_leap_year() else 365

    def is_supported(self, field):
        return field in _FIELD_GETTERS

    def get_long(self, field):
        """
        Returns the value of ``field`` for this date.

        :raises UnsupportedFieldError: for time fields and anything that is not a date field.
        """
        getter = _FIELD_GETTERS.get(field)
        if getter is None:
            raise UnsupportedFieldError(field)
        return getter(self)

    def get(self, field):
        return self.get_long(field)

    def range(self, field):
        """Returns the valid values of ``field`` for this particular date."""
        if field is Field.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is Field.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if not self.is_supported(field):
            raise UnsupportedFieldError(field)
        return PERSIAN.range(field)

    # Arithmetic

    def plus_years(self, years):
        """
        Returns a copy of this date with ``years`` added.

        The day-of-month is clamped to the last valid day of the target month,
        so 1387-12-30 (a leap year) plus one year is 1388-12-29.

        :raises OutOfRangeError: if the resulting year is outside 1..1999.
        """
        return self.plus_months(years * 12)

    def plus_months(self, months):
        """
        Returns a copy of this date with ``months`` added.

        As with :meth:`plus_years` the day-of-month never rolls over into the
        following month: 1388-11-30 plus one month is 1388-12-29.

        :raises OutOfRangeError: if the resulting year is outside 1..1999.
        """
        if months == 0:
            return self
        year, month = TwelveMonthsYear.from_proleptic_month(self.proleptic_month + months)
        return self._resolve_previous_valid(year, month, self.day_of_month)

    def plus_days(self, days):
        """
        Returns a copy of this date with ``days`` added, carrying into
        following months and years as needed; 1396-12-29 plus one day is
        1397-01-01.

        :raises OutOfRangeError: if the result is outside the supported range.
        """
        if days == 0:
            return self
        epoch_day = PERSIAN.check_valid_value(self.to_epoch_day() + days, Field.EPOCH_DAY)
        return PersianDate.of_epoch_day(epoch_day)

    def minus_years(self, years):
        return self.plus_years(-years)

    def minus_months(self, months):
        return self.plus_months(-months)

    def minus_days(self, days):
        return self.plus_days(-days)

    def plus(self, amount, unit):
        if unit is Unit.DAYS:
            return self.plus_days(amount)
        if unit is Unit.WEEKS:
            return self.plus_days(amount * DAYS_IN_WEEK)
        if unit in MONTHS_PER_UNIT:
            return self.plus_months(amount * MONTHS_PER_UNIT[unit])
        raise UnsupportedUnitError(unit)

    def minus(self, amount, unit):
        return self.plus(-amount, unit)

    def _resolve_previous_valid(self, year, month, day_of_month):
        leap_year = PERSIAN.is_leap_year(year)
        max_days_of_month = PersianMonth(month).length(leap_year)
        if day_of_month > max_days_of_month:
            logger.debug("Clamping day %d to %d for %04d-%02d", day_of_month, max_days_of_month, year, month)
            day_of_month = max_days_of_month
        return PersianDate(year, month, day_of_month)

    def month_start_of_months_distance(self, months_distance):
        return TwelveMonthsYear.month_start_of_months_distance(self, months_distance, PersianDate)

    def months_distance_to(self, date):
        return TwelveMonthsYear.months_distance_to(self, PERSIAN.date_from(date))

    # Differences

    def until(self, end, unit=None):
        """
        Returns the amount of time from this date until ``end``.

        With a ``unit``, the result is the signed number of complete units:
        from 1396-06-15 to 1396-08-14 is one month, being one day short of
        two.  Without one, the result is a :class:`Period` of years, months
        and days all carrying the same sign.

        :param end: The end date, exclusive; a :class:`PersianDate`, a
            :class:`CivilDate` or a :class:`datetime.date`.
        :param unit: One of DAYS, WEEKS, MONTHS, YEARS, DECADES, CENTURIES,
            MILLENNIA or ERAS.
        :raises UnsupportedUnitError: for any other unit.
        """
        end = PERSIAN.date_from(end)
        if unit is None:
            return self._period_until(end)
        if unit is Unit.DAYS:
            return self._days_until(end)
        if unit is Unit.WEEKS:
            return trunc_div(self._days_until(end), DAYS_IN_WEEK)
        if unit in MONTHS_PER_UNIT:
            return trunc_div(self._months_until(end), MONTHS_PER_UNIT[unit])
        if unit is Unit.ERAS:
            return end.get_long(Field.ERA) - self.get_long(Field.ERA)
        raise UnsupportedUnitError(unit)

    def _days_until(self, end):
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end):
        packed1 = self.proleptic_month * 32 + self.day_of_month
        packed2 = end.proleptic_month * 32 + end.day_of_month
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end):
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day_of_month - self.day_of_month
        if total_months > 0 and days < 0:
            total_months -= 1
            calc_date = self.plus_months(total_months)
            days = end.to_epoch_day() - calc_date.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = trunc_div(total_months, 12)
        months = total_months - years * 12
        return Period(years, months, days)


_FIELD_GETTERS = {
    Field.DAY_OF_WEEK: lambda d: d.day_of_week.value,
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: d.aligned_day_of_week_in_month,
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: d.aligned_day_of_week_in_year,
    Field.DAY_OF_MONTH: lambda d: d.day_of_month,
    Field.DAY_OF_YEAR: lambda d: d.day_of_year,
    Field.EPOCH_DAY: lambda d: d.to_epoch_day(),
    Field.ALIGNED_WEEK_OF_MONTH: lambda d: d.aligned_week_of_month,
    Field.ALIGNED_WEEK_OF_YEAR: lambda d: d.aligned_week_of_year,
    Field.MONTH_OF_YEAR: lambda d: d.month,
    Field.PROLEPTIC_MONTH: lambda d: d.proleptic_month,
    Field.YEAR_OF_ERA: lambda d: d.year,
    Field.YEAR: lambda d: d.year,
    Field.ERA: lambda d: d.era.value,
}

PersianDate.MIN = PersianDate(MIN_YEAR, 1, 1)
PersianDate.MAX = PersianDate(MAX_YEAR, 12, 29)
