import datetime
import pickle

import pytest

from pdate.civil_date import CivilDate
from pdate.errors import (
    DateError,
    DateParseError,
    InvalidCalendarDateError,
    NonLeapEsfandError,
    NonPositiveDayCountError,
    OutOfRangeError,
)
from pdate.fields import DayOfWeek
from pdate.persian.month import PersianMonth
from pdate.persian_date import PersianDate


def test_construct_from_fields():
    date = PersianDate(1396, 8, 6)
    assert (date.year, date.month, date.day_of_month) == (1396, 8, 6)
    assert date.day == 6
    assert date.persian_month is PersianMonth.ABAN
    assert (date.component1(), date.component2(), date.component3()) == (1396, 8, 6)


def test_construct_from_month_enum():
    assert PersianDate(1396, PersianMonth.ABAN, 6) == PersianDate(1396, 8, 6)


def test_construct_from_day_number_and_from_gregorian_agree():
    by_fields = PersianDate(1396, 8, 6)
    assert PersianDate(jdn=2458054) == by_fields
    assert PersianDate(date=datetime.date(2017, 10, 28)) == by_fields
    assert PersianDate(date=CivilDate(2017, 10, 28)) == by_fields
    assert PersianDate.of(1396, 8, 6) == by_fields


def test_min_and_max():
    assert PersianDate.MIN == PersianDate(1, 1, 1)
    assert PersianDate.MAX == PersianDate(1999, 12, 29)
    assert PersianDate.MIN.to_jdn() == 1948320
    assert PersianDate.MAX.to_jdn() == 2678438


@pytest.mark.parametrize(
    "jdn, expected",
    [
        (2457055, (1393, 11, 13)),
        (2602276, (1791, 6, 19)),
        (2064960, (320, 5, 5)),
        (2065561, (321, 12, 29)),
        (1948320, (1, 1, 1)),
        (2678438, (1999, 12, 29)),
    ],
)
def test_of_julian_day(jdn, expected):
    assert PersianDate.of_julian_day(jdn) == PersianDate(*expected)


@pytest.mark.parametrize("jdn", [0, -7])
def test_of_julian_day_rejects_non_positive(jdn):
    with pytest.raises(NonPositiveDayCountError):
        PersianDate.of_julian_day(jdn)


@pytest.mark.parametrize("jdn", [1948319, 2678439])
def test_of_julian_day_outside_supported_years(jdn):
    with pytest.raises(OutOfRangeError):
        PersianDate.of_julian_day(jdn)


@pytest.mark.parametrize(
    "fields, epoch_day",
    [
        ((1396, 8, 7), 17468),
        ((1165, 9, 11), -66869),
        ((1, 1, 1), -492267),
        ((1999, 12, 29), 237851),
        ((1348, 10, 11), 0),
    ],
)
def test_epoch_day(fields, epoch_day):
    date = PersianDate(*fields)
    assert date.to_epoch_day() == epoch_day
    assert PersianDate.of_epoch_day(epoch_day) == date


def test_leap_esfand():
    assert PersianDate(1387, 12, 30).is_leap_year()
    assert PersianDate(1399, 12, 30).day_of_year == 366
    with pytest.raises(NonLeapEsfandError) as excinfo:
        PersianDate(1388, 12, 30)
    assert str(excinfo.value) == "Invalid date ESFAND 30, as 1388 is not a leap year"


def test_thirty_day_month_rejects_31():
    with pytest.raises(InvalidCalendarDateError) as excinfo:
        PersianDate(1387, 7, 31)
    assert not isinstance(excinfo.value, NonLeapEsfandError)
    assert str(excinfo.value) == "Invalid date MEHR 31"


def test_non_leap_esfand_is_a_calendar_date_error():
    with pytest.raises(InvalidCalendarDateError):
        PersianDate(1400, 12, 30)


@pytest.mark.parametrize(
    "fields, name",
    [
        ((0, 1, 1), "year"),
        ((2000, 1, 1), "year"),
        ((1387, 0, 1), "month"),
        ((1387, 13, 1), "month"),
        ((1387, 1, 0), "day"),
        ((1387, 1, 98), "day"),
    ],
)
def test_out_of_range_fields(fields, name):
    with pytest.raises(OutOfRangeError) as excinfo:
        PersianDate(*fields)
    assert excinfo.value.name == name


def test_out_of_range_message():
    with pytest.raises(OutOfRangeError, match=r"day 98 is out of valid range \[1, 31\]"):
        PersianDate(1387, 1, 98)


def test_errors_are_value_errors():
    assert issubclass(DateError, ValueError)
    with pytest.raises(ValueError):
        PersianDate(1388, 12, 30)


@pytest.mark.parametrize(
    "persian, gregorian",
    [
        ((1396, 6, 20), (2017, 9, 11)),
        ((1, 1, 1), (622, 3, 22)),
        ((1999, 12, 29), (2621, 3, 20)),
        ((1399, 12, 30), (2021, 3, 20)),
        ((1394, 12, 10), (2016, 2, 29)),
        ((1407, 1, 1), (2028, 3, 20)),
        ((1376, 12, 29), (1998, 3, 20)),
        ((1385, 10, 11), (2007, 1, 1)),
        ((1429, 10, 10), (2050, 12, 31)),
    ],
)
def test_to_gregorian(persian, gregorian):
    assert PersianDate(*persian).to_gregorian() == datetime.date(*gregorian)
    assert PersianDate(*persian).to_civil() == CivilDate(*gregorian)


@pytest.mark.parametrize(
    "gregorian, persian",
    [
        ((2046, 5, 10), (1425, 2, 20)),
        ((2012, 2, 29), (1390, 12, 10)),
        ((2034, 3, 20), (1412, 12, 30)),
        ((2008, 1, 1), (1386, 10, 11)),
        ((2003, 3, 1), (1381, 12, 10)),
        ((1986, 3, 21), (1365, 1, 1)),
    ],
)
def test_from_gregorian(gregorian, persian):
    assert PersianDate.from_gregorian(datetime.date(*gregorian)) == PersianDate(*persian)
    assert PersianDate.of_gregorian(*gregorian) == PersianDate(*persian)


def test_from_gregorian_ignores_time():
    value = datetime.datetime(2017, 10, 28, 23, 59, 59)
    assert PersianDate.from_gregorian(value) == PersianDate(1396, 8, 6)


def test_from_gregorian_rejects_other_types():
    with pytest.raises(TypeError):
        PersianDate.from_gregorian("2017-10-28")


@pytest.mark.parametrize(
    "fields, day_of_week",
    [
        ((1395, 11, 23), DayOfWeek.SATURDAY),
        ((1395, 11, 24), DayOfWeek.SUNDAY),
        ((1395, 11, 25), DayOfWeek.MONDAY),
        ((1395, 11, 29), DayOfWeek.FRIDAY),
        ((1396, 8, 6), DayOfWeek.SATURDAY),
        ((1387, 12, 30), DayOfWeek.FRIDAY),
    ],
)
def test_day_of_week(fields, day_of_week):
    assert PersianDate(*fields).day_of_week is day_of_week


def test_day_of_week_advances_daily():
    date = PersianDate(1387, 12, 30)
    expected = DayOfWeek.FRIDAY
    for _ in range(1000):
        assert date.day_of_week is expected
        date = date.plus_days(1)
        expected = expected.plus(1)


def test_day_of_week_matches_gregorian_weekday():
    date = PersianDate(1300, 1, 1)
    for _ in range(400):
        assert date.day_of_week.value == date.to_gregorian().isoweekday()
        date = date.plus_days(13)


def test_length_of_month_and_year():
    assert PersianDate(1387, 12, 1).length_of_month() == 30
    assert PersianDate(1388, 12, 1).length_of_month() == 29
    assert PersianDate(1388, 1, 1).length_of_month() == 31
    assert PersianDate(1388, 7, 1).length_of_month() == 30
    assert PersianDate(1387, 1, 1).length_of_year() == 366
    assert PersianDate(1388, 1, 1).length_of_year() == 365


def test_parse():
    assert PersianDate.parse("1396-08-06") == PersianDate(1396, 8, 6)


@pytest.mark.parametrize("text", ["1396-8-6", "1396/08/06", "13960806", " 1396-08-06", "140A-12-03"])
def test_parse_rejects_malformed_text(text):
    with pytest.raises(DateParseError):
        PersianDate.parse(text)


def test_parse_validates_the_date():
    with pytest.raises(NonLeapEsfandError):
        PersianDate.parse("1388-12-30")


def test_str_and_repr():
    assert str(PersianDate(1396, 8, 6)) == "1396-08-06"
    assert str(PersianDate(14, 4, 31)) == "0014-04-31"
    assert repr(PersianDate(1396, 8, 6)) == "PersianDate(1396, 8, 6)"


def test_equality_and_hash():
    a = PersianDate(1396, 8, 6)
    b = PersianDate(jdn=2458054)
    assert a == b
    assert hash(a) == hash(b)
    assert a != PersianDate(1396, 8, 7)
    assert len({a, b, PersianDate(1396, 8, 7)}) == 2


def test_equality_does_not_cross_calendars():
    assert PersianDate(1396, 8, 6) != CivilDate(2017, 10, 28)
    assert PersianDate(1396, 8, 6) != datetime.date(2017, 10, 28)
    assert PersianDate(1396, 8, 6) != None  # noqa: E711


def test_ordering():
    dates = [PersianDate(1396, 8, 7), PersianDate(1395, 12, 30), PersianDate(1396, 1, 1)]
    assert sorted(dates) == [PersianDate(1395, 12, 30), PersianDate(1396, 1, 1), PersianDate(1396, 8, 7)]
    assert PersianDate(1396, 8, 6) < PersianDate(1396, 8, 7)
    assert PersianDate(1396, 8, 6) >= PersianDate(1396, 8, 6)


def test_ordering_against_other_calendar_is_a_type_error():
    with pytest.raises(TypeError):
        PersianDate(1396, 8, 6) < CivilDate(2017, 10, 28)


def test_chronological_comparison_across_calendars():
    date = PersianDate(1396, 8, 6)
    assert date.is_equal(CivilDate(2017, 10, 28))
    assert date.is_equal(datetime.date(2017, 10, 28))
    assert date.is_before(datetime.date(2017, 10, 29))
    assert date.is_after(CivilDate(2017, 10, 27))
    assert not date.is_after(date)


def test_immutable():
    date = PersianDate(1396, 8, 6)
    with pytest.raises(AttributeError):
        date.year = 1400
    with pytest.raises(AttributeError):
        del date.year


def test_pickle_round_trip():
    date = PersianDate(1399, 12, 30)
    assert pickle.loads(pickle.dumps(date)) == date


@pytest.mark.parametrize(
    "fields",
    [(1396, 8.9, 6), (1396.0, 8, 6), (1396, 8, 6.0), ("1396", 8, 6), (1396, "8", 6), (1396, 8, None)],
)
def test_fields_must_be_integers(fields):
    with pytest.raises(TypeError):
        PersianDate(*fields)


def test_month_enum_is_stored_as_int():
    date = PersianDate(1396, PersianMonth.ABAN, 6)
    assert type(date.month) is int
    assert repr(date) == "PersianDate(1396, 8, 6)"
