"""Error definitions for date construction, conversion and arithmetic."""


class DateError(ValueError):
    """Base class for every error raised by pdate."""


class OutOfRangeError(DateError):
    """Raised when a value falls outside the declared bounds of its field."""

    def __init__(self, name, value, lower, upper):
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{name} {value} is out of valid range [{lower}, {upper}]")


class InvalidCalendarDateError(DateError):
    """Raised when the day-of-month exceeds the length of the month."""

    def __init__(self, year, month, day, message=None):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(message or f"Invalid date: day {day} exceeds the length of month {month} in {year}")


class NonLeapEsfandError(InvalidCalendarDateError):
    """Raised for Esfand 30 in a year that is not leap."""

    def __init__(self, year):
        super().__init__(year, 12, 30, f"Invalid date ESFAND 30, as {year} is not a leap year")


class UnsupportedUnitError(DateError):
    """Raised when a difference or addition names a unit that is not implemented."""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unsupported unit: {unit}")


class UnsupportedFieldError(DateError):
    """Raised when a field cannot be read from a date."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Unsupported field: {field}")


class NonPositiveDayCountError(DateError):
    """Raised when an absolute day count for reverse conversion is not positive."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} is not positive: {value}")


class DateParseError(DateError):
    """Raised when text cannot be parsed into a date."""
