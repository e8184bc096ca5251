"""Command line for converting and doing arithmetic on Persian dates.

    python -m pdate from-gregorian 2017-10-28
    python -m pdate add 1387-12-30 --years 1
    python -m pdate diff 1400-01-01 1401-01-01 --unit days
"""

import argparse
import datetime
import logging
import sys

from pdate.calendar_utils import get_today_persian_date
from pdate.errors import DateError, DateParseError
from pdate.fields import Unit
from pdate.log import configure_logging
from pdate.persian_date import PersianDate

log = logging.getLogger(__name__)

_UNITS = {unit.name.lower(): unit for unit in (
    Unit.DAYS, Unit.WEEKS, Unit.MONTHS, Unit.YEARS,
    Unit.DECADES, Unit.CENTURIES, Unit.MILLENNIA, Unit.ERAS,
)}


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="pdate", description="Persian (Solar Hijri) calendar tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("today", help="Print today's Persian date")

    to_gregorian = subparsers.add_parser("to-gregorian", help="Convert a Persian date to Gregorian")
    to_gregorian.add_argument("date", help="Persian date as YYYY-MM-DD")

    from_gregorian = subparsers.add_parser("from-gregorian", help="Convert a Gregorian date to Persian")
    from_gregorian.add_argument("date", help="Gregorian date as YYYY-MM-DD")

    info = subparsers.add_parser("info", help="Describe a Persian date")
    info.add_argument("date", help="Persian date as YYYY-MM-DD")

    add = subparsers.add_parser("add", help="Add years, then months, then days to a Persian date")
    add.add_argument("date", help="Persian date as YYYY-MM-DD")
    add.add_argument("--years", type=int, default=0)
    add.add_argument("--months", type=int, default=0)
    add.add_argument("--days", type=int, default=0)

    diff = subparsers.add_parser("diff", help="Amount of time between two Persian dates")
    diff.add_argument("start", help="Persian date as YYYY-MM-DD, inclusive")
    diff.add_argument("end", help="Persian date as YYYY-MM-DD, exclusive")
    diff.add_argument(
        "--unit",
        choices=sorted(_UNITS),
        help="Count complete units instead of printing a years/months/days period",
    )

    return parser.parse_args(argv)


def _describe(date):
    return [
        f"date:        {date}",
        f"month:       {date.persian_month.name.title()} ({date.persian_month.persian_name})",
        f"day of week: {date.day_of_week.name.title()}",
        f"day of year: {date.day_of_year}",
        f"leap year:   {'yes' if date.is_leap_year() else 'no'}",
        f"julian day:  {date.to_jdn()}",
        f"epoch day:   {date.to_epoch_day()}",
        f"gregorian:   {date.to_gregorian().isoformat()}",
    ]


def _parse_gregorian(text):
    try:
        return datetime.date.fromisoformat(text)
    except ValueError as exc:
        raise DateParseError(f"Text '{text}' could not be parsed as a Gregorian date: {exc}") from exc


def _run(args):
    if args.command == "today":
        return [str(get_today_persian_date())]
    if args.command == "to-gregorian":
        return [PersianDate.parse(args.date).to_gregorian().isoformat()]
    if args.command == "from-gregorian":
        return [str(PersianDate.from_gregorian(_parse_gregorian(args.date)))]
    if args.command == "info":
        return _describe(PersianDate.parse(args.date))
    if args.command == "add":
        result = PersianDate.parse(args.date).plus_years(args.years).plus_months(args.months).plus_days(args.days)
        return [str(result)]
    if args.command == "diff":
        start = PersianDate.parse(args.start)
        end = PersianDate.parse(args.end)
        if args.unit is None:
            return [str(start.until(end))]
        return [str(start.until(end, _UNITS[args.unit]))]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        lines = _run(args)
    except DateError as exc:
        log.error("%s", exc)
        return 2
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
