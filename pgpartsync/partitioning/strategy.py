from abc import abstractmethod
from typing import List, Optional, Sequence

from pgpartsync.types import PostgresPartitioningMethod

from .delta import PostgresPartitioningDelta
from .error import PostgresPartitioningError
from .partition import (
    DEFAULT_PARTITION_SUFFIX,
    PostgresPartition,
    create_default_partition_sql,
    create_partition_table_name,
)


class PostgresPartitioningStrategy:
    """Base class for the partitioning scheme of a partitioned table.

    A strategy describes how a table is partitioned (the method and
    the key) and which partitions it has. An instance either describes
    the desired scheme, as declared by the application, or the actual
    scheme, as read from the database.
    """

    method: PostgresPartitioningMethod

    def __init__(
        self,
        columns: Sequence[str],
        partitions: Optional[Sequence[PostgresPartition]] = None,
        has_existing_default: bool = False,
    ) -> None:
        """Initializes a new instance of :see:PostgresPartitioningStrategy.

        Arguments:
            columns:
                Names of the columns that make up the partitioning
                key. The order is significant.

            partitions:
                The partitions, in the order they were declared
                or read from the database.

            has_existing_default:
                Whether the default partition exists in the
                database. Only meaningful for a strategy that was
                read from the database.
        """

        if not columns:
            raise PostgresPartitioningError(
                "A partitioning key needs at least one column."
            )

        self.columns = list(columns)
        self._partitions = list(partitions or [])
        self.has_existing_default = has_existing_default

    @property
    def partitions(self) -> List[PostgresPartition]:
        return list(self._partitions)

    def add_partition(self, partition: PostgresPartition):
        """Adds an already constructed partition."""

        self._partitions.append(partition)
        return self

    def partition_by_sql(self) -> str:
        """Renders the partitioning clause that closes the statement that
        creates the partitioned table."""

        return ") PARTITION BY %s (%s);\n" % (
            self.method.value.upper(),
            ", ".join(self.columns),
        )

    @abstractmethod
    def create_delta(
        self,
        actual: "PostgresPartitioningStrategy",
        ignore_partitions_in_migration: bool = False,
    ) -> PostgresPartitioningDelta:
        """Compares this (desired) strategy against the actual strategy as
        it is present in the database.

        Arguments:
            actual:
                The strategy that was read from the database. It
                does not have to be of the same partitioning method.

            ignore_partitions_in_migration:
                Do not reconcile the partitions themselves, only
                the way the table is partitioned.
        """

    def create_sql(self, parent_name: str, schema: Optional[str] = None) -> str:
        """Renders the statements that create all partitions, followed by the
        default partition."""

        statements = [
            partition.create_sql(parent_name, schema)
            for partition in self._partitions
        ]
        statements.append(create_default_partition_sql(parent_name, schema))

        return "".join(statements)

    def partition_table_names(self, parent_name: str) -> List[str]:
        """Gets the names of all tables that hold a partition, the default
        partition last."""

        names = [
            partition.table_name(parent_name) for partition in self._partitions
        ]
        names.append(self.default_partition_name(parent_name))

        return names

    @staticmethod
    def default_partition_name(parent_name: str) -> str:
        return create_partition_table_name(
            parent_name, DEFAULT_PARTITION_SUFFIX
        )

    def __repr__(self) -> str:
        return "%s<%s, %s>" % (
            type(self).__name__,
            ", ".join(self.columns),
            [partition.suffix for partition in self._partitions],
        )


__all__ = ["PostgresPartitioningStrategy"]
