from enum import IntEnum

from pdate.errors import OutOfRangeError, UnsupportedFieldError
from pdate.fields import Field, ValueRange


class PersianEra(IntEnum):
    """The single era of the Persian calendar, Anno Hegirae Solar."""

    AHS = 1

    @classmethod
    def of(cls, value: int) -> 'PersianEra':
        if value != cls.AHS.value:
            raise OutOfRangeError("era", value, 1, 1)
        return cls.AHS

    def range(self, field: Field) -> ValueRange:
        if field is not Field.ERA:
            raise UnsupportedFieldError(field)
        return ValueRange.of(1, 1)
