import enum

from datetime import date, datetime, timezone
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from .error import PostgresPartitioningError
from .range_strategy import PostgresRangePartitioningStrategy


class PostgresTimeRangeUnit(enum.Enum):
    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"


class PostgresTimeRangeSize:
    """Size of a time-based range partition."""

    _suffix_format = {
        PostgresTimeRangeUnit.YEARS: "%Y",
        PostgresTimeRangeUnit.MONTHS: "%Y_%b",
        PostgresTimeRangeUnit.WEEKS: "%Y_week_%W",
        PostgresTimeRangeUnit.DAYS: "%Y_%b_%d",
    }

    unit: PostgresTimeRangeUnit
    value: int

    def __init__(
        self,
        years: Optional[int] = None,
        months: Optional[int] = None,
        weeks: Optional[int] = None,
        days: Optional[int] = None,
    ) -> None:
        sizes = {
            PostgresTimeRangeUnit.YEARS: years,
            PostgresTimeRangeUnit.MONTHS: months,
            PostgresTimeRangeUnit.WEEKS: weeks,
            PostgresTimeRangeUnit.DAYS: days,
        }
        specified = [(unit, size) for unit, size in sizes.items() if size]

        if not specified:
            raise PostgresPartitioningError("Partition cannot be 0 in size.")

        if len(specified) > 1:
            raise PostgresPartitioningError(
                "Partition can only have one size unit."
            )

        self.unit, self.value = specified[0]
        if self.value < 0:
            raise PostgresPartitioningError("Partition size must be positive.")

    def as_delta(self) -> relativedelta:
        return relativedelta(**{self.unit.value: self.value})

    def start(self, dt: Union[date, datetime]) -> date:
        """Gets the start of the range that the specified moment falls in.

        Years start on January 1st, months on the 1st and weeks on
        monday.
        """

        day = dt.date() if isinstance(dt, datetime) else dt

        if self.unit == PostgresTimeRangeUnit.YEARS:
            return day.replace(month=1, day=1)

        if self.unit == PostgresTimeRangeUnit.MONTHS:
            return day.replace(day=1)

        if self.unit == PostgresTimeRangeUnit.WEEKS:
            return day - relativedelta(days=day.weekday())

        return day

    def suffix(self, start: date) -> str:
        return start.strftime(self._suffix_format[self.unit]).lower()

    def __repr__(self) -> str:
        return "PostgresTimeRangeSize<%s, %s>" % (self.unit, self.value)


def add_time_ranges(
    strategy: PostgresRangePartitioningStrategy,
    size: PostgresTimeRangeSize,
    count: int,
    start: Optional[Union[date, datetime]] = None,
) -> PostgresRangePartitioningStrategy:
    """Adds consecutive, equally sized time ranges to a range partitioning
    strategy.

    Arguments:
        strategy:
            The strategy to add the ranges to.

        size:
            The size of each range.

        count:
            The amount of ranges to add.

        start:
            Moment the first range should contain. Defaults
            to the current date/time. The first range starts
            at the start of the unit this moment falls in.

    Example:
        Monthly partitions for the first quarter of 2024:
            add_time_ranges(strategy, PostgresTimeRangeSize(months=1),
                            count=3, start=date(2024, 1, 1))
    """

    current = size.start(start or datetime.now(timezone.utc))

    for _ in range(count):
        end = current + size.as_delta()
        strategy.add_range(size.suffix(current), current, end)
        current = end

    return strategy


__all__ = ["PostgresTimeRangeUnit", "PostgresTimeRangeSize", "add_time_ranges"]
