from typing import List, Optional, Sequence

from pgpartsync.types import PostgresPartitionDelta, PostgresPartitioningMethod

from .delta import PostgresPartitioningDelta
from .hash_partition import PostgresHashPartition
from .strategy import PostgresPartitioningStrategy


class PostgresHashPartitioningStrategy(PostgresPartitioningStrategy):
    """Spreads the rows of a table evenly over a fixed amount of partitions
    by hashing the partitioning key.

    The modulus is the amount of partitions, each partition takes
    the remainder matching its position.
    """

    method = PostgresPartitioningMethod.HASH

    def __init__(
        self,
        columns: Sequence[str],
        suffixes: Optional[Sequence[str]] = None,
        has_existing_default: bool = False,
    ) -> None:
        suffixes = list(suffixes or [])

        super().__init__(
            columns,
            [
                PostgresHashPartition(
                    suffix=suffix, modulus=len(suffixes), remainder=remainder
                )
                for remainder, suffix in enumerate(suffixes)
            ],
            has_existing_default,
        )

    @property
    def hashes(self) -> List[PostgresHashPartition]:
        return self.partitions  # type: ignore[return-value]

    def create_sql(self, parent_name: str, schema: Optional[str] = None) -> str:
        # hash partitioned tables cannot have a default partition
        return "".join(
            partition.create_sql(parent_name, schema)
            for partition in self.hashes
        )

    def partition_table_names(self, parent_name: str) -> List[str]:
        return [partition.table_name(parent_name) for partition in self.hashes]

    def create_delta(
        self,
        actual: PostgresPartitioningStrategy,
        ignore_partitions_in_migration: bool = False,
    ) -> PostgresPartitioningDelta:
        if not isinstance(actual, PostgresHashPartitioningStrategy):
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if self.columns != actual.columns:
            return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)

        if ignore_partitions_in_migration:
            return PostgresPartitioningDelta(PostgresPartitionDelta.NONE)

        # changing the modulus moves rows between partitions, adding
        # a partition is never possible without a rebuild
        if sorted(self.hashes, key=lambda p: p.suffix) == sorted(
            actual.hashes, key=lambda p: p.suffix
        ):
            return PostgresPartitioningDelta(PostgresPartitionDelta.NONE)

        return PostgresPartitioningDelta(PostgresPartitionDelta.REBUILD)


__all__ = ["PostgresHashPartitioningStrategy"]
