PERSIAN_EPOCH = 1948320  # day number of 0001-01-01 AP
JULIAN_DAY_TO_1970 = 2440587  # day number of Gregorian 1970-01-01

MIN_YEAR = 1
MAX_YEAR = 1999

# 2820-year grand cycle
GRAND_CYCLE_YEARS = 2820
GRAND_CYCLE_DAYS = 1029983
CYCLE_BASE_YEAR = 474

DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12

# Days before the first of each month; the last entry is the leap-year length
DAYS_TO_MONTH = [0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336, 366]

# Farvardin .. Esfand
PERSIAN_MONTH_NAMES = [
    'فروردین',
    'اردیبهشت',
    'خرداد',
    'تیر',
    'مرداد',
    'شهریور',
    'مهر',
    'آبان',
    'آذر',
    'دی',
    'بهمن',
    'اسفند',
]
