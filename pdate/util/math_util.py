from pdate.errors import NonPositiveDayCountError, OutOfRangeError


def trunc_div(dividend: int, divisor: int) -> int:
    """
    Integer division rounding toward zero.

    :param dividend: The number to divide.
    :param divisor: The non-zero number to divide by.
    :return: The quotient with its fractional part dropped.
    """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def trunc_mod(dividend: int, divisor: int) -> int:
    """
    Remainder matching :func:`trunc_div`, carrying the sign of the dividend.

    :param dividend: The number to divide.
    :param divisor: The non-zero number to divide by.
    :return: ``dividend - divisor * trunc_div(dividend, divisor)``.
    """
    return dividend - divisor * trunc_div(dividend, divisor)


def ceil_div(dividend: int, divisor: int) -> int:
    """
    Integer division rounding toward positive infinity.

    :param dividend: The number to divide.
    :param divisor: The non-zero number to divide by.
    :return: The smallest integer not less than the exact quotient.
    """
    return -(-dividend // divisor)


def is_between(value: int, lower: int, upper: int) -> bool:
    return lower <= value <= upper


def require_range(value: int, lower: int, upper: int, name: str) -> int:
    """
    Returns ``value`` unchanged if it lies in ``[lower, upper]``.

    :raises OutOfRangeError: if the value is outside the bounds.
    """
    if not is_between(value, lower, upper):
        raise OutOfRangeError(name, value, lower, upper)
    return value


def require_positive_day_count(value: int, name: str) -> int:
    """
    Returns ``value`` unchanged if it is a positive day count.

    :raises NonPositiveDayCountError: if the value is zero or negative.
    """
    if value <= 0:
        raise NonPositiveDayCountError(name, value)
    return value
