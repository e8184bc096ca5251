import pytest

from pdate.constants import MAX_YEAR, MIN_YEAR, PERSIAN_EPOCH
from pdate.errors import NonPositiveDayCountError
from pdate.persian.algorithmic_converter import CYCLE_START_JDN, AlgorithmicConverter


def test_epoch_is_first_day_of_year_one():
    assert AlgorithmicConverter.to_jdn(1, 1, 1) == PERSIAN_EPOCH


def test_cycle_start_constant():
    assert CYCLE_START_JDN == 2121445


@pytest.mark.parametrize(
    "fields, jdn",
    [
        ((1396, 8, 6), 2458054),
        ((1408, 12, 30), 2462580),
        ((101, 1, 1), 1984844),
        ((473, 1, 1), 2120714),
        ((474, 1, 1), 2121079),
        ((474, 12, 30), 2121444),
        ((475, 1, 1), 2121445),
        ((1999, 12, 29), 2678438),
    ],
)
def test_to_jdn(fields, jdn):
    assert AlgorithmicConverter.to_jdn(*fields) == jdn


@pytest.mark.parametrize(
    "jdn, fields",
    [
        (2457055, [1393, 11, 13]),
        (2602276, [1791, 6, 19]),
        (2064960, [320, 5, 5]),
        (2065561, [321, 12, 29]),
        (2120714, [473, 1, 1]),
        (2121079, [474, 1, 1]),
        (2121444, [474, 12, 30]),
        (2121445, [475, 1, 1]),
        (1948320, [1, 1, 1]),
        (2678438, [1999, 12, 29]),
    ],
)
def test_from_jdn(jdn, fields):
    assert AlgorithmicConverter.from_jdn(jdn) == fields


@pytest.mark.parametrize("jdn", [0, -1, -2458054])
def test_from_jdn_rejects_non_positive(jdn):
    with pytest.raises(NonPositiveDayCountError):
        AlgorithmicConverter.from_jdn(jdn)


def test_month_boundaries_round_trip_for_every_year():
    for year in range(MIN_YEAR, MAX_YEAR + 1):
        leap = AlgorithmicConverter.is_leap_year(year)
        for month in range(1, 13):
            last = 31 if month <= 6 else 30 if month < 12 or leap else 29
            for day in (1, last):
                jdn = AlgorithmicConverter.to_jdn(year, month, day)
                assert AlgorithmicConverter.from_jdn(jdn) == [year, month, day]


def test_day_numbers_round_trip_across_the_range():
    first = AlgorithmicConverter.to_jdn(MIN_YEAR, 1, 1)
    last = AlgorithmicConverter.to_jdn(MAX_YEAR, 12, 29)
    for jdn in range(first, last + 1, 97):
        assert AlgorithmicConverter.to_jdn(*AlgorithmicConverter.from_jdn(jdn)) == jdn


def test_consecutive_days_are_consecutive_dates():
    # walks over the 474/475 cycle boundary and a few year ends
    for jdn in range(2120700, 2121800):
        year, month, day = AlgorithmicConverter.from_jdn(jdn)
        assert AlgorithmicConverter.to_jdn(year, month, day) == jdn
        assert 1 <= day <= 31


def test_leap_rule_matches_year_length():
    for year in range(MIN_YEAR, MAX_YEAR + 1):
        length = AlgorithmicConverter.to_jdn(year + 1, 1, 1) - AlgorithmicConverter.to_jdn(year, 1, 1)
        assert length in (365, 366)
        assert AlgorithmicConverter.is_leap_year(year) == (length > 365)


@pytest.mark.parametrize("year", [1370, 1375, 1379, 1383, 1387, 1391, 1395, 1399, 1404, 1408])
def test_known_leap_years(year):
    assert AlgorithmicConverter.is_leap_year(year)


@pytest.mark.parametrize("year", [1371, 1388, 1396, 1400, 1403])
def test_known_common_years(year):
    assert not AlgorithmicConverter.is_leap_year(year)


def test_leap_years_are_not_a_fixed_period():
    gaps = set()
    previous = None
    for year in range(1300, 1500):
        if AlgorithmicConverter.is_leap_year(year):
            if previous is not None:
                gaps.add(year - previous)
            previous = year
    assert gaps == {4, 5}
