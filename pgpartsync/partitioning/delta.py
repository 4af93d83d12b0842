from dataclasses import dataclass, field
from typing import List, Optional

from pgpartsync.types import PostgresPartitionDelta

from .partition import PostgresPartition


@dataclass
class PostgresPartitioningDelta:
    """Describes what has to happen to bring the partitions of a table in
    line with the desired partitioning scheme.

    `missing` is only filled in when the delta is additive. It holds
    the partitions that have to be created, in the order in which
    they were declared.
    """

    delta: PostgresPartitionDelta
    missing: List[PostgresPartition] = field(default_factory=list)
    table_name: Optional[str] = None

    @property
    def is_none(self) -> bool:
        return self.delta == PostgresPartitionDelta.NONE

    @property
    def is_additive(self) -> bool:
        return self.delta == PostgresPartitionDelta.ADDITIVE

    @property
    def is_rebuild(self) -> bool:
        return self.delta == PostgresPartitionDelta.REBUILD

    def sql(self, parent_name: str, schema: Optional[str] = None) -> str:
        """Renders the statements that create the missing partitions.

        Nothing is rendered unless the delta is additive. The default
        partition is never part of it.
        """

        if not self.is_additive:
            return ""

        return "".join(
            partition.create_sql(parent_name, schema)
            for partition in self.missing
        )

    def print(self) -> None:
        """Prints this delta to the terminal in a readable format."""

        print(f"{self.table_name or '<unknown>'}: {self.delta}")

        for partition in self.missing:
            print("  + %s" % partition.suffix)
            for key, value in partition.deconstruct().items():
                print(f"     {key}: {value}")


__all__ = ["PostgresPartitioningDelta"]
