import datetime
import operator
from functools import total_ordering


@total_ordering
class AbstractDate:
    """
    Abstract class representing an immutable year-month-day date.

    A date is built from one of three inputs: its fields, a day number
    (``jdn``) in the subclass's own numbering, or another date of any
    calendar (``date``), converted through the epoch day.  Subclasses supply
    ``to_jdn``, ``from_jdn``, ``validate`` and ``jdn_of_1970``.
    """

    __slots__ = ('_year', '_month', '_day_of_month')

    # day number, in the subclass's numbering, of Gregorian 1970-01-01
    jdn_of_1970 = None

    def __init__(self, year=None, month=None, day_of_month=None, jdn=None, date=None):
        if jdn is not None:
            year, month, day_of_month = self.from_jdn(jdn)
        elif date is not None:
            year, month, day_of_month = self.from_jdn(epoch_day_of(date) + self.jdn_of_1970)
        # integers only; a float or a string is a TypeError, never truncated
        year, month, day_of_month = (int(operator.index(value)) for value in (year, month, day_of_month))
        self.validate(year, month, day_of_month)
        object.__setattr__(self, '_year', year)
        object.__setattr__(self, '_month', month)
        object.__setattr__(self, '_day_of_month', day_of_month)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self._year, self._month, self._day_of_month)

    @property
    def year(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day_of_month(self):
        return self._day_of_month

    @property
    def day(self):
        return self._day_of_month

    def component1(self):
        return self.year

    def component2(self):
        return self.month

    def component3(self):
        return self.day_of_month

    def to_jdn(self):
        raise NotImplementedError("Subclasses must implement this method")

    @classmethod
    def from_jdn(cls, jdn):
        raise NotImplementedError("Subclasses must implement this method")

    @classmethod
    def validate(cls, year, month, day_of_month):
        raise NotImplementedError("Subclasses must implement this method")

    def to_epoch_day(self):
        return self.to_jdn() - self.jdn_of_1970

    # Chronological comparison, valid across calendars

    def is_before(self, other):
        return self.to_epoch_day() < epoch_day_of(other)

    def is_after(self, other):
        return self.to_epoch_day() > epoch_day_of(other)

    def is_equal(self, other):
        return self.to_epoch_day() == epoch_day_of(other)

    # Field-wise comparison, only between dates of the same calendar

    def _fields(self):
        return self._year, self._month, self._day_of_month

    def __eq__(self, other):
        if other is None or type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() < other._fields()

    def __hash__(self):
        result = 17
        result = 31 * result + self.year
        result = 31 * result + self.month
        result = 31 * result + self.day_of_month
        return result

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}-{self.day_of_month:02d}"

    def __repr__(self):
        return f"{type(self).__name__}({self.year}, {self.month}, {self.day_of_month})"


def epoch_day_of(value):
    """
    Returns the number of days from Gregorian 1970-01-01 to ``value``.

    ``value`` is an :class:`AbstractDate` or a :class:`datetime.date`
    (the date part of a :class:`datetime.datetime` is used).
    """
    if isinstance(value, AbstractDate):
        return value.to_epoch_day()
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.toordinal() - _ORDINAL_OF_1970
    raise TypeError(f"Cannot convert {type(value).__name__} to a date")


_ORDINAL_OF_1970 = datetime.date(1970, 1, 1).toordinal()
