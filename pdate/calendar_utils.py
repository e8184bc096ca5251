import datetime
import logging

import jdatetime

from pdate.civil_date import CivilDate
from pdate.persian_date import PersianDate
from pdate.persian_date_time import PersianDateTime

logger = logging.getLogger(__name__)


def persian_to_jd(year, month, day):
    """
    Determine Julian day from Persian date
    """
    return PersianDate(year, month, day).to_jdn()


def jd_to_persian(jd):
    """
    Calculate Persian date from Julian day
    """
    p = PersianDate(jdn=jd)

    return (p.year, p.month, p.day_of_month)


def civil_to_jd(year, month, day):
    """
    Determine Julian day from Civil date
    """
    return CivilDate(year, month, day).to_jdn()


def jd_to_civil(jd):
    """
    Calculate Civil date from Julian day
    """
    c = CivilDate(jdn=jd)

    return (c.year, c.month, c.day_of_month)


def civil_to_persian(year, month, day):
    p = PersianDate.of_gregorian(year, month, day)
    return (p.year, p.month, p.day_of_month)


def persian_to_civil(year, month, day):
    c = PersianDate(year, month, day).to_civil()
    return (c.year, c.month, c.day_of_month)


def get_today_persian_date(today=datetime.date.today):
    """
    Returns today's Persian date.

    :param today: Callable returning the current Gregorian date.
    """
    gregorian_today = today()
    result = PersianDate.from_gregorian(gregorian_today)
    logger.debug("Today is %s (Gregorian %s)", result, gregorian_today)
    return result


def jalali_datetime_str(gregorian_dt):
    # date part in Jalali
    pdt = PersianDateTime.from_gregorian(gregorian_dt)
    # 12-hour clock from the Gregorian value
    time_str = gregorian_dt.strftime('%I:%M %p')  # e.g. "10:33 PM"
    return f"{pdt.year}/{pdt.month:02d}/{pdt.day_of_month:02d} {time_str}"


def to_jdatetime(value):
    """
    Returns a :class:`jdatetime.date` (or :class:`jdatetime.datetime`) with the same fields.

    The copy is field by field.  jdatetime applies its own leap rule, so
    Esfand 30 of a year that only one of the two calendars treats as leap
    is rejected by jdatetime.
    """
    if isinstance(value, PersianDateTime):
        return jdatetime.datetime(value.year, value.month, value.day_of_month,
                                  value.hour, value.minute, value.second, value.microsecond)
    return jdatetime.date(value.year, value.month, value.day_of_month)


def from_jdatetime(value):
    """Builds a :class:`PersianDate` or :class:`PersianDateTime` from a jdatetime value, field by field."""
    if isinstance(value, jdatetime.datetime):
        return PersianDateTime.of(value.year, value.month, value.day,
                                  value.hour, value.minute, value.second, value.microsecond)
    return PersianDate(value.year, value.month, value.day)
