from .delta import PostgresPartitioningDelta
from .error import PostgresPartitionBoundParseError, PostgresPartitioningError
from .hash_partition import PostgresHashPartition
from .hash_strategy import PostgresHashPartitioningStrategy
from .list_partition import PostgresListPartition
from .list_strategy import PostgresListPartitioningStrategy
from .literal import PostgresRangeBound, format_sql_value
from .partition import PostgresPartition
from .range_partition import PostgresRangePartition
from .range_strategy import PostgresRangePartitioningStrategy
from .reader import (
    read_hash_partitioning,
    read_list_partitioning,
    read_partitioning,
    read_range_partitioning,
)
from .strategy import PostgresPartitioningStrategy
from .table import PostgresPartitionedTable
from .time_ranges import PostgresTimeRangeSize, add_time_ranges

__all__ = [
    "PostgresPartitioningError",
    "PostgresPartitionBoundParseError",
    "PostgresPartitioningDelta",
    "PostgresPartition",
    "PostgresRangePartition",
    "PostgresListPartition",
    "PostgresHashPartition",
    "PostgresPartitioningStrategy",
    "PostgresRangePartitioningStrategy",
    "PostgresListPartitioningStrategy",
    "PostgresHashPartitioningStrategy",
    "PostgresPartitionedTable",
    "PostgresRangeBound",
    "PostgresTimeRangeSize",
    "add_time_ranges",
    "format_sql_value",
    "read_partitioning",
    "read_range_partitioning",
    "read_list_partitioning",
    "read_hash_partitioning",
]
