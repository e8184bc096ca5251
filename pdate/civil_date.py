import datetime

from pdate.abstract_date import AbstractDate
from pdate.constants import MONTHS_IN_YEAR
from pdate.errors import InvalidCalendarDateError
from pdate.util.math_util import require_positive_day_count, require_range
from pdate.util.twelve_months_year import TwelveMonthsYear

_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


class CivilDate(AbstractDate):
    """
    Proleptic Gregorian date.

    Day numbers are civil Julian Day Numbers (noon-anchored), so
    2017-10-28 is 2458055.  The Gregorian rules are applied to every year,
    with no switch to the Julian calendar before 1582, matching
    :class:`datetime.date`.
    """

    __slots__ = ()

    jdn_of_1970 = 2440588

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        super().__init__(year=year, month=month, day_of_month=day_of_month, jdn=jdn, date=date)

    @classmethod
    def validate(cls, year, month, day_of_month):
        require_range(year, 1, 9999, "year")
        require_range(month, 1, MONTHS_IN_YEAR, "month")
        require_range(day_of_month, 1, 31, "day")
        if day_of_month > CivilDate.days_in_month(year, month):
            raise InvalidCalendarDateError(year, month, day_of_month)

    # Converters
    def to_jdn(self):
        l_year = self.year
        l_month = self.month
        l_day = self.day_of_month
        a = -1 if l_month <= 2 else 0  # (month - 14) / 12, truncated

        return (
            (1461 * (l_year + 4800 + a)) // 4
            + (367 * (l_month - 2 - 12 * a)) // 12
            - (3 * ((l_year + 4900 + a) // 100)) // 4
            + l_day
            - 32075
        )

    @classmethod
    def from_jdn(cls, jdn):
        require_positive_day_count(jdn, "julian_day")
        l = jdn + 68569
        n = (4 * l) // 146097
        l -= (146097 * n + 3) // 4
        i = (4000 * (l + 1)) // 1461001
        l = l - (1461 * i) // 4 + 31
        j = (80 * l) // 2447
        day = l - (2447 * j) // 80
        l = j // 11
        month = j + 2 - 12 * l
        year = 100 * (n - 49) + i + l
        return [year, month, day]

    @staticmethod
    def is_leap_year(year):
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    @staticmethod
    def days_in_month(year, month):
        if month == 2 and CivilDate.is_leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def month_start_of_months_distance(self, months_distance):
        return TwelveMonthsYear.month_start_of_months_distance(self, months_distance, CivilDate)

    def months_distance_to(self, date):
        return TwelveMonthsYear.months_distance_to(self, date)

    @classmethod
    def from_date(cls, value):
        if isinstance(value, datetime.datetime):
            value = value.date()
        return cls(value.year, value.month, value.day)

    def to_date(self):
        return datetime.date(self.year, self.month, self.day_of_month)
