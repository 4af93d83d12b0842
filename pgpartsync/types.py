from enum import Enum
from typing import List


class StrEnum(str, Enum):
    @classmethod
    def all(cls) -> List["StrEnum"]:
        return [choice for choice in cls]

    @classmethod
    def values(cls) -> List[str]:
        return [choice.value for choice in cls]

    def __str__(self) -> str:
        return str(self.value)


class PostgresPartitioningMethod(StrEnum):
    """Methods of partitioning supported by PostgreSQL 11.x native support for
    table partitioning."""

    RANGE = "range"
    LIST = "list"
    HASH = "hash"


class PostgresPartitionDelta(StrEnum):
    """Outcome of comparing a desired partitioning scheme against the one
    that is present in the database."""

    # nothing to be done, the database matches
    NONE = "none"

    # only new partitions have to be created
    ADDITIVE = "additive"

    # the partitioned table has to be dropped and re-created
    REBUILD = "rebuild"
