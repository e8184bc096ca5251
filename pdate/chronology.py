"""Calendar systems as capability objects.

A :class:`Chronology` bundles the operations a generic date framework asks of
a calendar: building dates from fields or day counts, reporting field ranges
and deciding leap years.  Dates do not inherit from any framework type; they
just point at their chronology.
"""

import datetime
from abc import ABC, abstractmethod

from pdate.abstract_date import AbstractDate, epoch_day_of
from pdate.constants import JULIAN_DAY_TO_1970, MAX_YEAR, MIN_YEAR
from pdate.fields import Field, ValueRange
from pdate.persian.algorithmic_converter import AlgorithmicConverter
from pdate.persian.era import PersianEra
from pdate.util.math_util import require_range


class Chronology(ABC):

    @property
    @abstractmethod
    def id(self):
        pass

    @property
    @abstractmethod
    def calendar_type(self):
        pass

    @abstractmethod
    def date(self, proleptic_year, month, day_of_month):
        pass

    @abstractmethod
    def date_year_day(self, proleptic_year, day_of_year):
        pass

    @abstractmethod
    def date_epoch_day(self, epoch_day):
        pass

    @abstractmethod
    def is_leap_year(self, proleptic_year):
        pass

    @abstractmethod
    def range(self, field):
        pass

    @abstractmethod
    def eras(self):
        pass

    def date_from(self, value):
        """Converts a date of any supported calendar to a date of this chronology."""
        return self.date_epoch_day(epoch_day_of(value))

    def era_of(self, value):
        for era in self.eras():
            if era.value == value:
                return era
        raise ValueError(f"Invalid era: {value}")

    def check_valid_value(self, value, field):
        value_range = self.range(field)
        return require_range(value, value_range.minimum, value_range.maximum, _FIELD_NAMES.get(field, str(field)))

    def __str__(self):
        return self.id


_FIELD_NAMES = {
    Field.YEAR: "year",
    Field.MONTH_OF_YEAR: "month",
    Field.DAY_OF_MONTH: "day",
    Field.DAY_OF_YEAR: "day_of_year",
    Field.EPOCH_DAY: "epoch_day",
}

_MIN_EPOCH_DAY = AlgorithmicConverter.to_jdn(MIN_YEAR, 1, 1) - JULIAN_DAY_TO_1970
_MAX_EPOCH_DAY = AlgorithmicConverter.to_jdn(MAX_YEAR, 12, 29) - JULIAN_DAY_TO_1970

_PERSIAN_RANGES = {
    Field.DAY_OF_MONTH: ValueRange.of(1, 31, smallest_maximum=29),
    Field.DAY_OF_YEAR: ValueRange.of(1, 366, smallest_maximum=365),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange.of(1, 5),
    Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    Field.YEAR_OF_ERA: ValueRange.of(MIN_YEAR, MAX_YEAR),
    Field.ERA: ValueRange.of(1, 1),
    Field.PROLEPTIC_MONTH: ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    Field.EPOCH_DAY: ValueRange.of(_MIN_EPOCH_DAY, _MAX_EPOCH_DAY),
}


class PersianChronology(Chronology):
    """The Solar Hijri calendar, proleptic years 1 to 1999."""

    @property
    def id(self):
        return "Persian"

    @property
    def calendar_type(self):
        return "persian"

    def date(self, proleptic_year, month, day_of_month):
        from pdate.persian_date import PersianDate
        return PersianDate(proleptic_year, month, day_of_month)

    def date_year_day(self, proleptic_year, day_of_year):
        from pdate.persian_date import PersianDate
        max_day_of_year = 366 if self.is_leap_year(proleptic_year) else 365
        require_range(day_of_year, 1, max_day_of_year, "day_of_year")
        return PersianDate(proleptic_year, 1, 1).plus_days(day_of_year - 1)

    def date_epoch_day(self, epoch_day):
        from pdate.persian_date import PersianDate
        return PersianDate.of_epoch_day(epoch_day)

    def date_from(self, value):
        from pdate.persian_date import PersianDate
        if isinstance(value, PersianDate):
            return value
        if not isinstance(value, (AbstractDate, datetime.date)):
            raise TypeError(f"Cannot convert {type(value).__name__} to a Persian date")
        return super().date_from(value)

    def is_leap_year(self, proleptic_year):
        self.check_valid_value(proleptic_year, Field.YEAR)
        return AlgorithmicConverter.is_leap_year(proleptic_year)

    def proleptic_year(self, era, year_of_era):
        if not isinstance(era, PersianEra):
            raise TypeError("Era must be PersianEra")
        return year_of_era

    def range(self, field):
        return _PERSIAN_RANGES.get(field) or field.range()

    def eras(self):
        return list(PersianEra)

    def era_of(self, value):
        return PersianEra.of(value)


PERSIAN = PersianChronology()
