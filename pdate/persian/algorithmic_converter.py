from pdate.constants import (
    CYCLE_BASE_YEAR,
    GRAND_CYCLE_DAYS,
    GRAND_CYCLE_YEARS,
    PERSIAN_EPOCH,
)
from pdate.persian.month import PersianMonth
from pdate.util.math_util import ceil_div, require_positive_day_count


class AlgorithmicConverter:
    """
    Arithmetic Persian calendar built on the 2820-year grand cycle.

    Day numbers are counted from the midnight that starts the day, so
    1396-08-06 (Gregorian 2017-10-28) is day 2458054.  Every division floors
    toward negative infinity, which keeps years before 474 on the same
    cycle as the rest.
    """

    days_in_366_year_chunk = 366
    last_day_of_cycle = GRAND_CYCLE_DAYS - 1
    first_day_of_30_day_months = 186

    @staticmethod
    def to_jdn(year, month, day):
        epbase = year - CYCLE_BASE_YEAR
        epyear = CYCLE_BASE_YEAR + epbase % GRAND_CYCLE_YEARS
        return (
            day
            + PersianMonth(month).days_to_first_of_month()
            + (epyear * 682 - 110) // 2816
            + (epyear - 1) * 365
            + epbase // GRAND_CYCLE_YEARS * GRAND_CYCLE_DAYS
            + (PERSIAN_EPOCH - 1)
        )

    @staticmethod
    def from_jdn(jdn):
        require_positive_day_count(jdn, "julian_day")
        depoch = jdn - CYCLE_START_JDN
        cycle, cyear = divmod(depoch, GRAND_CYCLE_DAYS)
        if cyear == AlgorithmicConverter.last_day_of_cycle:
            ycycle = GRAND_CYCLE_YEARS
        else:
            aux1, aux2 = divmod(cyear, AlgorithmicConverter.days_in_366_year_chunk)
            ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1
        year = ycycle + GRAND_CYCLE_YEARS * cycle + CYCLE_BASE_YEAR
        yday = jdn - AlgorithmicConverter.to_jdn(year, 1, 1) + 1
        if yday <= AlgorithmicConverter.first_day_of_30_day_months:
            month = ceil_div(yday, 31)
        else:
            month = ceil_div(yday - 6, 30)
        day = jdn - AlgorithmicConverter.to_jdn(year, month, 1) + 1
        return [year, month, day]

    @staticmethod
    def year_length(year):
        return AlgorithmicConverter.to_jdn(year + 1, 1, 1) - AlgorithmicConverter.to_jdn(year, 1, 1)

    @staticmethod
    def is_leap_year(year):
        """
        Returns True if ``year`` has 366 days.

        No range check is made here; callers that need one go through the
        chronology.
        """
        return AlgorithmicConverter.year_length(year) > 365


# day number of 0475-01-01, the first year of the cycle anchored at 474
CYCLE_START_JDN = AlgorithmicConverter.to_jdn(CYCLE_BASE_YEAR + 1, 1, 1)
