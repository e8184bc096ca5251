from abc import ABC, abstractmethod


class YearMonthDate(ABC):
    """Month-granular arithmetic offered by calendars built from twelve-month years."""

    __slots__ = ()

    @abstractmethod
    def plus_months(self, months: int):
        pass

    @abstractmethod
    def plus_years(self, years: int):
        pass

    @abstractmethod
    def length_of_month(self) -> int:
        pass

    @abstractmethod
    def month_start_of_months_distance(self, months_distance: int):
        pass

    @abstractmethod
    def months_distance_to(self, date):
        pass
