from pdate.constants import MONTHS_IN_YEAR


class TwelveMonthsYear:
    @staticmethod
    def proleptic_month(year: int, month: int) -> int:
        """
        Returns the number of months from the start of year zero to the given month.

        :param year: The proleptic year.
        :param month: The month-of-year, 1-based.
        :return: ``year * 12 + (month - 1)``.
        """
        return year * MONTHS_IN_YEAR + (month - 1)

    @staticmethod
    def from_proleptic_month(proleptic_month: int):
        """
        Splits a proleptic month index back into year and 1-based month.

        Negative indexes floor toward negative infinity, so month ``-1`` is
        the last month of year ``-1``.

        :param proleptic_month: The proleptic month index.
        :return: A ``(year, month)`` tuple.
        """
        year, month = divmod(proleptic_month, MONTHS_IN_YEAR)
        return year, month + 1

    @staticmethod
    def month_start_of_months_distance(base_date, months_distance: int, create_date):
        """
        Returns the date at the start of the month after a given number of months from the base date.

        :param base_date: The base date to start from.
        :param months_distance: The number of months to move.
        :param create_date: A callable taking ``(year, month, day)`` and building the date.
        :return: The new date at the start of the calculated month.
        """
        year, month = TwelveMonthsYear.from_proleptic_month(
            TwelveMonthsYear.proleptic_month(base_date.year, base_date.month) + months_distance
        )
        return create_date(year, month, 1)

    @staticmethod
    def months_distance_to(base_date, to_date) -> int:
        """
        Calculates the number of months between the base date and the target date.

        Only year and month take part; the day-of-month is ignored.

        :param base_date: The starting date.
        :param to_date: The target date.
        :return: The number of months between the two dates.
        """
        return ((to_date.year - base_date.year) * MONTHS_IN_YEAR) + to_date.month - base_date.month
