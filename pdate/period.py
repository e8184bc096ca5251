from typing import NamedTuple

from pdate.errors import UnsupportedUnitError
from pdate.fields import Unit


class Period(NamedTuple):
    """
    An amount of time in years, months and days, such as "2 years, 3 months and 4 days".

    Periods produced by :meth:`PersianDate.until` carry the same sign in
    every component.
    """

    years: int = 0
    months: int = 0
    days: int = 0

    def get(self, unit):
        if unit is Unit.YEARS:
            return self.years
        if unit is Unit.MONTHS:
            return self.months
        if unit is Unit.DAYS:
            return self.days
        raise UnsupportedUnitError(unit)

    @property
    def units(self):
        return (Unit.YEARS, Unit.MONTHS, Unit.DAYS)

    def is_zero(self):
        return self.years == 0 and self.months == 0 and self.days == 0

    def is_negative(self):
        return self.years < 0 or self.months < 0 or self.days < 0

    def to_total_months(self):
        return self.years * 12 + self.months

    def negated(self):
        return Period(-self.years, -self.months, -self.days)

    def __str__(self):
        if self.is_zero():
            return "P0D"
        text = "P"
        if self.years:
            text += f"{self.years}Y"
        if self.months:
            text += f"{self.months}M"
        if self.days:
            text += f"{self.days}D"
        return text
