"""Solar Hijri (Persian, Jalali) calendar: conversion to and from Gregorian dates and date arithmetic."""

import logging

from pdate.chronology import PERSIAN, Chronology, PersianChronology
from pdate.civil_date import CivilDate
from pdate.errors import (
    DateError,
    DateParseError,
    InvalidCalendarDateError,
    NonLeapEsfandError,
    NonPositiveDayCountError,
    OutOfRangeError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from pdate.fields import DayOfWeek, Field, Unit, ValueRange
from pdate.period import Period
from pdate.persian.era import PersianEra
from pdate.persian.month import PersianMonth
from pdate.persian_date import PersianDate
from pdate.persian_date_time import PersianDateTime

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "PERSIAN",
    "Chronology",
    "CivilDate",
    "DateError",
    "DateParseError",
    "DayOfWeek",
    "Field",
    "InvalidCalendarDateError",
    "NonLeapEsfandError",
    "NonPositiveDayCountError",
    "OutOfRangeError",
    "Period",
    "PersianChronology",
    "PersianDate",
    "PersianDateTime",
    "PersianEra",
    "PersianMonth",
    "Unit",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "ValueRange",
]
