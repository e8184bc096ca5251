from enum import IntEnum

from pdate.constants import DAYS_TO_MONTH, MONTHS_IN_YEAR, PERSIAN_MONTH_NAMES
from pdate.util.math_util import require_range


class PersianMonth(IntEnum):
    """
    Months of the Persian calendar.

    The first six months have 31 days, the next five 30 days, and Esfand has
    30 days in a leap year and 29 otherwise.
    """

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @classmethod
    def of(cls, month: int) -> 'PersianMonth':
        """
        Returns the month for a 1-based ordinal.

        :raises OutOfRangeError: if the ordinal is not between 1 and 12.
        """
        require_range(month, 1, MONTHS_IN_YEAR, "month")
        return cls(month)

    @property
    def persian_name(self) -> str:
        return PERSIAN_MONTH_NAMES[self.value - 1]

    def length(self, leap_year: bool) -> int:
        """
        Returns the number of days in this month.

        :param leap_year: Whether the year is a leap year; only Esfand depends on it.
        """
        if self.value < 7:
            return 31
        if self is not PersianMonth.ESFAND:
            return 30
        return 30 if leap_year else 29

    def max_length(self) -> int:
        return self.length(True)

    def min_length(self) -> int:
        return self.length(False)

    def days_to_first_of_month(self) -> int:
        """Returns the number of days in the year before the first of this month."""
        return DAYS_TO_MONTH[self.value - 1]

    def plus(self, months: int) -> 'PersianMonth':
        # wraps around, so ESFAND.plus(1) is FARVARDIN
        return PersianMonth((self.value - 1 + months) % MONTHS_IN_YEAR + 1)

    def minus(self, months: int) -> 'PersianMonth':
        return self.plus(-months)

    @staticmethod
    def from_days_count(day_of_year: int) -> 'PersianMonth':
        """
        Returns the month containing the given 1-based day of the year.

        :raises OutOfRangeError: if ``day_of_year`` is not between 1 and 366.
        """
        require_range(day_of_year, 1, DAYS_TO_MONTH[-1], "day_of_year")
        return PersianMonth(next(i for i, d in enumerate(DAYS_TO_MONTH) if d >= day_of_year))
