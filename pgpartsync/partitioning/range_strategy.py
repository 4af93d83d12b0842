from typing import Any, List, Optional, Sequence

import structlog

from pgpartsync.types import PostgresPartitionDelta, PostgresPartitioningMethod

from .delta import PostgresPartitioningDelta
from .literal import format_sql_value
from .partition import PostgresPartition
from .range_partition import PostgresRangePartition
from .strategy import PostgresPartitioningStrategy

LOGGER = structlog.get_logger(__name__)


def compare_partitions(
    desired: Sequence[PostgresPartition], actual: Sequence[PostgresPartition]
) -> PostgresPartitioningDelta:
    """Classifies the difference between two sets of partitions of the same
    partitioning key.

    Partitions cannot be resized or moved without re-writing the
    table. The only change that can be applied incrementally is
    adding partitions that don't exist yet. Anything else requires
    the table to be rebuilt.
    """

    def by_suffix(partition: PostgresPartition) -> str:
        return partition.suffix

    if sorted(desired, key=by_suffix) == sorted(actual, key=by_suffix):
        return PostgresPartitioningDelta(PostgresPartitionDelta.NONE)

    # the sorted lists differ, so more partitions in the database
    # than desired means some were resized or removed
    if len(actual) > len(desired):
        return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

    # a partition in the database that does not match any of the
    # desired ones has bounds that drifted
    if any(partition not in desired for partition in actual):
        return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

    missing = [partition for partition in desired if partition not in actual]
    if not missing:
        return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

    return PostgresPartitioningDelta(
        PostgresPartitionDelta.ADDITIVE, missing=missing
    )


class PostgresRangePartitioningStrategy(PostgresPartitioningStrategy):
    """Partitions a table by ranges of the partitioning key.

    Example:
        >>> strategy = PostgresRangePartitioningStrategy(["created_at"])
        >>> strategy.add_range("y2023", date(2023, 1, 1), date(2024, 1, 1))
        >>> strategy.add_range("y2024", date(2024, 1, 1), date(2025, 1, 1))
    """

    method = PostgresPartitioningMethod.RANGE

    def __init__(
        self,
        columns: Sequence[str],
        ranges: Optional[Sequence[PostgresRangePartition]] = None,
        has_existing_default: bool = False,
    ) -> None:
        super().__init__(columns, ranges, has_existing_default)

    @property
    def ranges(self) -> List[PostgresRangePartition]:
        return self.partitions  # type: ignore[return-value]

    def add_range(
        self, suffix: str, from_value: Any, to_value: Any
    ) -> "PostgresRangePartitioningStrategy":
        """Adds a range partition that will be named "{parent table
        name}_{suffix}".

        Arguments:
            suffix:
                Suffix of the partition table name.

            from_value:
                Lower bound of the range (inclusive). Formatted
                as a SQL literal using :see:format_sql_value.

            to_value:
                Upper bound of the range (exclusive).
        """

        return self.add_partition(
            PostgresRangePartition(
                suffix=suffix,
                from_literal=format_sql_value(from_value),
                to_literal=format_sql_value(to_value),
            )
        )

    def create_delta(
        self,
        actual: PostgresPartitioningStrategy,
        ignore_partitions_in_migration: bool = False,
    ) -> PostgresPartitioningDelta:
        logger = LOGGER.bind(
            method=str(self.method),
            columns=self.columns,
            ignore_partitions_in_migration=ignore_partitions_in_migration,
        )

        if not isinstance(actual, PostgresRangePartitioningStrategy):
            logger.debug(
                "Partitioning method changed", actual_method=str(actual.method)
            )
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if self.columns != actual.columns:
            logger.debug(
                "Partitioning key changed", actual_columns=actual.columns
            )
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if ignore_partitions_in_migration:
            return PostgresPartitioningDelta(PostgresPartitionDelta.NONE)

        delta = compare_partitions(self.ranges, actual.ranges)
        logger.debug(
            "Compared range partitions",
            delta=str(delta.delta),
            missing=[partition.suffix for partition in delta.missing],
        )

        return delta


__all__ = ["PostgresRangePartitioningStrategy", "compare_partitions"]
