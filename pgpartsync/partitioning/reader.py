from typing import Callable, Iterable, List, Sequence, Tuple

import structlog

from pgpartsync.types import PostgresPartitioningMethod

from .error import PostgresPartitioningError
from .hash_partition import PostgresHashPartition
from .hash_strategy import PostgresHashPartitioningStrategy
from .list_partition import PostgresListPartition
from .list_strategy import PostgresListPartitioningStrategy
from .partition import PostgresPartition
from .range_partition import PostgresRangePartition
from .range_strategy import PostgresRangePartitioningStrategy
from .strategy import PostgresPartitioningStrategy

LOGGER = structlog.get_logger(__name__)

# (partition name, bound expression)
PartitionRow = Tuple[str, str]


def _read_partitions(
    table_name: str,
    rows: Iterable[PartitionRow],
    parse: Callable[[str, str, str], PostgresPartition],
) -> Tuple[List[PostgresPartition], bool]:
    """Pulls rows one by one and parses them into partitions.

    Nothing is kept when pulling a row or parsing one fails, the
    error propagates as is.
    """

    default_name = PostgresPartitioningStrategy.default_partition_name(
        table_name
    )
    logger = LOGGER.bind(table_name=table_name)

    partitions: List[PostgresPartition] = []
    has_existing_default = False

    for partition_name, expression in rows:
        if partition_name == default_name:
            logger.debug("Found default partition", name=partition_name)
            has_existing_default = True
            continue

        partitions.append(parse(table_name, partition_name, expression))

    logger.debug(
        "Read partitions",
        count=len(partitions),
        has_existing_default=has_existing_default,
    )
    return partitions, has_existing_default


def read_range_partitioning(
    table_name: str, columns: Sequence[str], rows: Iterable[PartitionRow]
) -> PostgresRangePartitioningStrategy:
    """Re-creates the range partitioning scheme of a table from the
    partitions that exist in the database.

    Arguments:
        table_name:
            Name of the partitioned table.

        columns:
            The partitioning key of the table.

        rows:
            The name and bound expression of every partition
            of the table, in any order.

    Raises:
        PostgresPartitionBoundParseError:
            When the bound expression of a partition is not
            a range bound.
    """

    partitions, has_existing_default = _read_partitions(
        table_name, rows, PostgresRangePartition.parse
    )

    return PostgresRangePartitioningStrategy(
        columns,
        partitions,  # type: ignore[arg-type]
        has_existing_default=has_existing_default,
    )


def read_list_partitioning(
    table_name: str, columns: Sequence[str], rows: Iterable[PartitionRow]
) -> PostgresListPartitioningStrategy:
    """Re-creates the list partitioning scheme of a table."""

    partitions, has_existing_default = _read_partitions(
        table_name, rows, PostgresListPartition.parse
    )

    return PostgresListPartitioningStrategy(
        columns,
        partitions,  # type: ignore[arg-type]
        has_existing_default=has_existing_default,
    )


def read_hash_partitioning(
    table_name: str, columns: Sequence[str], rows: Iterable[PartitionRow]
) -> PostgresHashPartitioningStrategy:
    """Re-creates the hash partitioning scheme of a table."""

    partitions, has_existing_default = _read_partitions(
        table_name, rows, PostgresHashPartition.parse
    )

    strategy = PostgresHashPartitioningStrategy(
        columns, has_existing_default=has_existing_default
    )
    for partition in partitions:
        strategy.add_partition(partition)

    return strategy


READERS = {
    PostgresPartitioningMethod.RANGE: read_range_partitioning,
    PostgresPartitioningMethod.LIST: read_list_partitioning,
    PostgresPartitioningMethod.HASH: read_hash_partitioning,
}


def read_partitioning(
    method: PostgresPartitioningMethod,
    table_name: str,
    columns: Sequence[str],
    rows: Iterable[PartitionRow],
) -> PostgresPartitioningStrategy:
    """Re-creates the partitioning scheme of a table using the reader for
    the table's partitioning method."""

    reader = READERS.get(method)
    if not reader:
        raise PostgresPartitioningError(
            f"Unsupported partitioning method: {method}"
        )

    return reader(table_name, columns, rows)


__all__ = [
    "read_partitioning",
    "read_range_partitioning",
    "read_list_partitioning",
    "read_hash_partitioning",
]
