from typing import List, Optional

from django.conf import settings

from .delta import PostgresPartitioningDelta
from .partition import qualify
from .strategy import PostgresPartitioningStrategy


class PostgresPartitionedTable:
    """Declares how a table should be partitioned."""

    def __init__(
        self,
        name: str,
        strategy: PostgresPartitioningStrategy,
        schema: Optional[str] = None,
        ignore_partitions_in_migration: Optional[bool] = None,
    ) -> None:
        """Initializes a new instance of :see:PostgresPartitionedTable.

        Arguments:
            name:
                Name of the partitioned (parent) table.

            strategy:
                The desired partitioning scheme.

            schema:
                Schema the table lives in. The partitions are
                created in the same schema.

            ignore_partitions_in_migration:
                When set, only the partitioning key is reconciled.
                The partitions themselves are managed elsewhere.

                Defaults to the `PGPARTSYNC_IGNORE_PARTITIONS_IN_MIGRATION`
                setting.
        """

        self.name = name
        self.strategy = strategy
        self.schema = schema
        self._ignore_partitions_in_migration = ignore_partitions_in_migration

    @property
    def qualified_name(self) -> str:
        return qualify(self.name, self.schema)

    @property
    def ignore_partitions_in_migration(self) -> bool:
        if self._ignore_partitions_in_migration is not None:
            return self._ignore_partitions_in_migration

        return bool(
            getattr(settings, "PGPARTSYNC_IGNORE_PARTITIONS_IN_MIGRATION", False)
        )

    def create_delta(
        self, actual: PostgresPartitioningStrategy
    ) -> PostgresPartitioningDelta:
        """Compares the desired partitioning of this table against what was
        read from the database."""

        delta = self.strategy.create_delta(
            actual,
            ignore_partitions_in_migration=self.ignore_partitions_in_migration,
        )
        delta.table_name = self.qualified_name
        return delta

    def partition_by_sql(self) -> str:
        return self.strategy.partition_by_sql()

    def create_partitions_sql(self) -> str:
        return self.strategy.create_sql(self.name, self.schema)

    def partition_table_names(self) -> List[str]:
        return self.strategy.partition_table_names(self.name)

    def __repr__(self) -> str:
        return "PostgresPartitionedTable<%s, %r>" % (
            self.qualified_name,
            self.strategy,
        )


__all__ = ["PostgresPartitionedTable"]
