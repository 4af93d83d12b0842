from typing import Any, List, Optional, Sequence

from pgpartsync.types import PostgresPartitionDelta, PostgresPartitioningMethod

from .delta import PostgresPartitioningDelta
from .list_partition import PostgresListPartition
from .literal import format_sql_value
from .range_strategy import compare_partitions
from .strategy import PostgresPartitioningStrategy


class PostgresListPartitioningStrategy(PostgresPartitioningStrategy):
    """Partitions a table by explicitly listing which key values go into
    which partition."""

    method = PostgresPartitioningMethod.LIST

    def __init__(
        self,
        columns: Sequence[str],
        lists: Optional[Sequence[PostgresListPartition]] = None,
        has_existing_default: bool = False,
    ) -> None:
        super().__init__(columns, lists, has_existing_default)

    @property
    def lists(self) -> List[PostgresListPartition]:
        return self.partitions  # type: ignore[return-value]

    def add_list(
        self, suffix: str, *values: Any
    ) -> "PostgresListPartitioningStrategy":
        """Adds a list partition that will be named "{parent table
        name}_{suffix}" and holds the rows with one of the specified
        values."""

        return self.add_partition(
            PostgresListPartition(
                suffix=suffix, values_literal=format_sql_value(list(values))
            )
        )

    def create_delta(
        self,
        actual: PostgresPartitioningStrategy,
        ignore_partitions_in_migration: bool = False,
    ) -> PostgresPartitioningDelta:
        if not isinstance(actual, PostgresListPartitioningStrategy):
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if self.columns != actual.columns:
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if ignore_partitions_in_migration:
            return PostgresPartitioningDelta(PostgresPartitionDelta.NONE)

        return compare_partitions(self.lists, actual.lists)


__all__ = ["PostgresListPartitioningStrategy"]
